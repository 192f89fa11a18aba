"""Indented JCR content-node markup.

Two layers live here. The text layer (``build_node``, ``append_attributes``,
``terminate``, ``close_node``, ``close_nodes``) writes one node at an explicit
indentation level. ``XmlNode`` is the in-memory tree the generators build;
``XmlNode.render`` walks it once and writes it through the text layer, so the
indentation of every node is its depth in the tree.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable, Optional

from aem_dialog_gen.markup.attributes import Expression, format_attribute

INDENT_WIDTH = 4
PRIMARY_TYPE = 'jcr:primaryType'
UNSTRUCTURED = 'nt:unstructured'


class CloseMode(Enum):
    """How ``build_node`` terminates the opening tag."""
    SELF = 'self'
    OPEN = 'open'
    NONE = 'none'


def line(level: float, content: str) -> str:
    """One output line indented by ``level`` steps of four spaces."""
    return ' ' * int(level * INDENT_WIDTH) + content + '\n'


def _is_falsy(value: Any) -> bool:
    if isinstance(value, (list, tuple, dict)):
        return False
    return not value


def filter_attributes(
    attributes: dict[str, Any],
    allow_falsy: bool = False,
    boolean_only: bool = False,
    preserve_quotes: bool = False,
) -> dict[str, Any]:
    """Apply an attribute policy and return the attributes that survive it.

    Args:
        attributes: Attribute name to raw config value, in output order.
        allow_falsy: Keep ``False``, ``''`` and ``0``; only ``None`` is dropped.
        boolean_only: Emit ``True`` for truthy values, nothing otherwise.
        preserve_quotes: Mark string values as expressions so single quotes
            are written literally.
    """
    accepted: dict[str, Any] = {}
    for key, value in attributes.items():
        if value is None:
            continue
        if boolean_only:
            if not _is_falsy(value):
                accepted[key] = True
            continue
        if not allow_falsy and _is_falsy(value):
            continue
        if preserve_quotes and isinstance(value, str):
            value = Expression(value)
        accepted[key] = value
    return accepted


def append_attributes(
    xml: str,
    level: float,
    attributes: dict[str, Any],
    allow_falsy: bool = False,
    boolean_only: bool = False,
    preserve_quotes: bool = False,
) -> str:
    """Append attribute lines to a node left open by ``CloseMode.NONE``."""
    accepted = filter_attributes(
        attributes,
        allow_falsy=allow_falsy,
        boolean_only=boolean_only,
        preserve_quotes=preserve_quotes,
    )
    return xml + ''.join(line(level, format_attribute(k, v)) for k, v in accepted.items())


def terminate(xml: str, close_mode: CloseMode) -> str:
    """Finish an unterminated opening tag."""
    if close_mode is CloseMode.NONE:
        return xml
    suffix = '/>' if close_mode is CloseMode.SELF else '>'
    return xml.rstrip() + suffix + '\n'


def build_node(
    level: float,
    tag: str,
    attributes: Optional[dict[str, Any]] = None,
    close_mode: CloseMode = CloseMode.SELF,
) -> str:
    """Write the opening tag of one node with its attributes.

    ``jcr:primaryType="nt:unstructured"`` is written first unless the caller
    supplies a primary type. A node with no other attributes fits on one line.
    """
    attributes = {k: v for k, v in (attributes or {}).items() if v is not None}

    if not attributes:
        xml = line(level, f'<{tag} {format_attribute(PRIMARY_TYPE, UNSTRUCTURED)}')
        return terminate(xml, close_mode)

    xml = line(level, f'<{tag}')
    if PRIMARY_TYPE not in attributes:
        xml += line(level + 1, format_attribute(PRIMARY_TYPE, UNSTRUCTURED))
    xml = append_attributes(xml, level + 1, attributes, allow_falsy=True)
    return terminate(xml, close_mode)


def close_node(level: float, tag: str) -> str:
    return line(level, f'</{tag}>')


def close_nodes(nodes: Iterable[tuple[float, str]]) -> str:
    """Close several open nodes, in the order given."""
    return ''.join(close_node(level, tag) for level, tag in nodes)


@dataclass
class XmlNode:
    """A content node: tag, ordered attributes, ordered children."""

    tag: str
    attributes: dict[str, Any] = field(default_factory=dict)
    children: list['XmlNode'] = field(default_factory=list)

    def set(self, attributes: dict[str, Any], allow_falsy: bool = False) -> 'XmlNode':
        self.attributes.update(filter_attributes(attributes, allow_falsy=allow_falsy))
        return self

    def set_flags(self, attributes: dict[str, Any]) -> 'XmlNode':
        self.attributes.update(filter_attributes(attributes, boolean_only=True))
        return self

    def set_expression(self, key: str, value: Optional[str]) -> 'XmlNode':
        self.attributes.update(filter_attributes({key: value}, preserve_quotes=True))
        return self

    def append(self, child: Optional['XmlNode']) -> Optional['XmlNode']:
        if child is not None:
            self.children.append(child)
        return child

    def child(self, tag: str, attributes: Optional[dict[str, Any]] = None) -> 'XmlNode':
        """Create, attach and return a child node."""
        node = XmlNode(tag)
        if attributes:
            node.set(attributes, allow_falsy=True)
        self.children.append(node)
        return node

    def render(self, level: float = 0) -> str:
        xml = build_node(level, self.tag, self.attributes, CloseMode.NONE)
        if not self.children:
            return terminate(xml, CloseMode.SELF)

        xml = terminate(xml, CloseMode.OPEN)
        for child in self.children:
            xml += child.render(level + 1)
        return xml + close_node(level, self.tag)
