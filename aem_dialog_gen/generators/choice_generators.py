"""Generators for autocomplete and radio group fields."""

from typing import Any

from aem_dialog_gen.domain.constants import RESOURCE_TYPES
from aem_dialog_gen.domain.enums import FieldType
from aem_dialog_gen.generators.base_generator import HEADER_KEYS, BaseGenerator
from aem_dialog_gen.generators.options import build_datasource, build_option_items
from aem_dialog_gen.markup import XmlNode


class AutocompleteGenerator(BaseGenerator):
    """Autocomplete restricted to its suggestions unless ``forceSelection`` is false."""

    consumed = HEADER_KEYS | {'emptyText', 'placeholder', 'multiple', 'forceSelection', 'options', 'datasource'}

    def generate(self, field: dict[str, Any], context) -> XmlNode:
        name = self.resolve_name(field, context)
        node = self.start_node(name, RESOURCE_TYPES[FieldType.AUTOCOMPLETE.value])
        self.apply_header(node, field, name)

        node.set({'emptyText': field.get('emptyText') or field.get('placeholder')})
        node.set_flags({'multiple': field.get('multiple')})
        force_selection = field.get('forceSelection')
        node.set({'forceSelection': True if force_selection is None else force_selection}, allow_falsy=True)
        self.apply_remaining(node, field, self.consumed)

        node.append(build_option_items(field.get('options')))
        node.append(build_datasource(field.get('datasource')))
        return node


class RadioGroupGenerator(BaseGenerator):

    consumed = HEADER_KEYS | {'vertical', 'options'}

    def generate(self, field: dict[str, Any], context) -> XmlNode:
        name = self.resolve_name(field, context)
        node = self.start_node(name, RESOURCE_TYPES[FieldType.RADIOGROUP.value])
        self.apply_header(node, field, name)
        node.set_flags({'vertical': field.get('vertical')})
        self.apply_remaining(node, field, self.consumed)

        node.append(build_option_items(field.get('options'), with_checked=True))
        return node
