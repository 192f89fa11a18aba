"""Base class and shared attribute blocks for field generators."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Iterable, Optional

from aem_dialog_gen.domain.constants import get_resource_type
from aem_dialog_gen.markup import Expression, XmlNode, to_js_string
from aem_dialog_gen.naming import sanitize_node_name

if TYPE_CHECKING:
    from aem_dialog_gen.generator_registry import GenerationContext

# Keys every generator reads through apply_header
HEADER_KEYS = frozenset({
    'type', 'name', 'label', 'description', 'required',
    'showhideClass', 'className', 'wrapperClass', 'showIf', 'hideIf',
    'fields', 'items',
})


def split_classes(value: Any) -> list[str]:
    """Flatten a class string or (nested) list of class strings."""
    if not value:
        return []
    if isinstance(value, str):
        return value.split()
    if isinstance(value, (list, tuple)):
        classes: list[str] = []
        for item in value:
            classes.extend(split_classes(item))
        return classes
    return [to_js_string(value)]


def visibility_expression(config: dict[str, Any]) -> Optional[Expression]:
    """``granite:hide`` expression for ``showIf`` or, failing that, ``hideIf``."""
    show_if = config.get('showIf')
    if isinstance(show_if, dict) and show_if.get('field'):
        target, value = show_if['field'], _literal(show_if.get('value'))
        return Expression(f"${{!{target} || {target} != '{value}'}}")

    hide_if = config.get('hideIf')
    if isinstance(hide_if, dict) and hide_if.get('field'):
        target, value = hide_if['field'], _literal(hide_if.get('value'))
        return Expression(f"${{{target} && {target} == '{value}'}}")

    return None


def stringify(value: Any) -> Optional[str]:
    """JSON-style string form of a value, keeping None as None."""
    return None if value is None else to_js_string(value)


def _literal(value: Any) -> str:
    return '' if value is None else to_js_string(value)


def _is_structured(value: Any) -> bool:
    if isinstance(value, dict):
        return True
    return isinstance(value, (list, tuple)) and any(isinstance(v, (dict, list)) for v in value)


class BaseGenerator(ABC):
    """Turns one field config into a content node.

    Subclasses set ``name_prefix`` (used when a field has no ``name``) and
    ``name_is_path`` (whether that fallback is a ``./`` property path or a
    bare node name).
    """

    name_prefix = 'field'
    name_is_path = True

    @abstractmethod
    def generate(self, field: dict[str, Any], context: GenerationContext) -> XmlNode:
        pass

    def field_type(self, field: dict[str, Any]) -> str:
        return field.get('type') or 'textfield'

    def resolve_name(self, field: dict[str, Any], context: GenerationContext) -> str:
        name = field.get('name')
        if name:
            return name
        allocated = context.names.allocate(self.name_prefix)
        return f'./{allocated}' if self.name_is_path else allocated

    def start_node(self, name: str, resource_type: str) -> XmlNode:
        node = XmlNode(sanitize_node_name(name))
        node.set({'sling:resourceType': resource_type})
        return node

    def css_classes(self, field: dict[str, Any], marker: Optional[str] = None) -> list[str]:
        classes = [marker] if marker else []
        if field.get('showhideClass'):
            classes.append('hide')
            classes.extend(split_classes(field['showhideClass']))
        classes.extend(split_classes(field.get('className')))
        classes.extend(split_classes(field.get('wrapperClass')))
        return classes

    def apply_header(
        self,
        node: XmlNode,
        field: dict[str, Any],
        name: Optional[str],
        label_key: str = 'fieldLabel',
    ) -> XmlNode:
        """Classes, label, visibility, description, name and required flag."""
        classes = self.css_classes(field)
        if classes:
            node.set({'granite:class': ' '.join(classes)})
        node.set({label_key: field.get('label')})
        node.set_expression('granite:hide', visibility_expression(field))
        node.set({'fieldDescription': field.get('description')})
        if name:
            node.set({'name': name})
        node.set_flags({'required': field.get('required')})
        return node

    def apply_remaining(
        self,
        node: XmlNode,
        field: dict[str, Any],
        consumed: Iterable[str],
    ) -> XmlNode:
        """Copy keys no generator step consumed straight onto the node."""
        consumed = set(consumed)
        for key, value in field.items():
            if key in consumed or value is None or _is_structured(value):
                continue
            node.set({key: value}, allow_falsy=True)
        return node

    def default_resource_type(self, field: dict[str, Any]) -> str:
        return get_resource_type(self.field_type(field))

    def items_node(self, fields: list[dict[str, Any]], context: GenerationContext) -> XmlNode:
        """``<items>`` holding each child field, dispatched by type."""
        items = XmlNode('items')
        items.children.extend(context.render_fields(fields))
        return items
