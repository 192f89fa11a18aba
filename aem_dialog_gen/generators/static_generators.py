"""Generators for display-only nodes: headings, text, alerts and buttons."""

from typing import Any

from aem_dialog_gen.domain.constants import DEFAULT_BUTTON_VARIANT, DEFAULT_HEADING_LEVEL, RESOURCE_TYPES
from aem_dialog_gen.domain.enums import FieldType
from aem_dialog_gen.generators.base_generator import HEADER_KEYS, BaseGenerator
from aem_dialog_gen.markup import XmlNode


class StaticGenerator(BaseGenerator):
    """Nodes without a stored value. Their node name is bare (``heading_1``)
    and they carry no ``name`` property.
    """

    name_is_path = False

    def __init__(self, field_type: FieldType):
        self.kind = field_type
        self.name_prefix = field_type.value

    def generate(self, field: dict[str, Any], context) -> XmlNode:
        node = self.start_node(self.resolve_name(field, context), RESOURCE_TYPES[self.kind.value])
        self.apply_header(node, field, None)
        consumed = self.add_attributes(node, field)
        self.apply_remaining(node, field, HEADER_KEYS | consumed)
        return node

    def add_attributes(self, node: XmlNode, field: dict[str, Any]) -> set[str]:
        """Write kind-specific attributes and return the keys they used."""
        if self.kind is FieldType.HEADING:
            node.set({'text': field.get('text')})
            node.set({'level': field.get('level') or DEFAULT_HEADING_LEVEL})
            return {'text', 'level'}

        if self.kind is FieldType.ALERT:
            node.set({'jcr:title': field.get('title')})
        node.set({'text': field.get('text'), 'variant': field.get('variant')})
        return {'text', 'variant', 'title'}


class ButtonGenerator(StaticGenerator):

    def __init__(self):
        super().__init__(FieldType.BUTTON)

    def add_attributes(self, node, field):
        node.set({
            'text': field.get('text'),
            'variant': field.get('variant') or DEFAULT_BUTTON_VARIANT,
            'icon': field.get('icon'),
            'command': field.get('command'),
        })
        if field.get('handler'):
            node.child('granite:data', {'handler': field['handler']})
        return {'text', 'variant', 'icon', 'command', 'handler'}
