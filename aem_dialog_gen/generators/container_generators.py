"""Generators for layout nodes that only group other fields."""

from typing import Any

from aem_dialog_gen.domain.constants import RESOURCE_TYPES
from aem_dialog_gen.domain.enums import FieldType
from aem_dialog_gen.domain.models import child_fields
from aem_dialog_gen.generators.base_generator import HEADER_KEYS, BaseGenerator, visibility_expression
from aem_dialog_gen.markup import XmlNode
from aem_dialog_gen.naming import sanitize_node_name

CONTAINER_KEYS = HEADER_KEYS | {'title', 'collapsible', 'columns'}


class ContainerGenerator(BaseGenerator):
    """Fieldset, container and well: a titled (fieldset only) ``<items>`` wrapper."""

    name_is_path = False

    def __init__(self, field_type: FieldType):
        self.container_type = field_type
        self.name_prefix = field_type.value

    def generate(self, field: dict[str, Any], context) -> XmlNode:
        node = self.start_node(self.resolve_name(field, context), RESOURCE_TYPES[self.container_type.value])

        if self.container_type is FieldType.FIELDSET:
            node.set({'jcr:title': field.get('label') or field.get('title')})
        node.set({'fieldDescription': field.get('description')})

        classes = self.css_classes(field)
        if classes:
            node.set({'granite:class': ' '.join(classes)})
        node.set_expression('granite:hide', visibility_expression(field))
        node.set_flags({'collapsible': field.get('collapsible')})
        self.apply_remaining(node, field, CONTAINER_KEYS)

        node.append(self.items_node(child_fields(field), context))
        return node


class FixedColumnsGenerator(BaseGenerator):
    """Side-by-side columns, each a container with its own fields.

    Without ``columns``, the field's own ``fields``/``items`` form one column.
    """

    name_prefix = 'columns'
    name_is_path = False

    def generate(self, field: dict[str, Any], context) -> XmlNode:
        node = self.start_node(self.resolve_name(field, context), RESOURCE_TYPES[FieldType.FIXEDCOLUMNS.value])

        classes = self.css_classes(field)
        if classes:
            node.set({'granite:class': ' '.join(classes)})
        node.set_expression('granite:hide', visibility_expression(field))
        self.apply_remaining(node, field, CONTAINER_KEYS)

        columns = field.get('columns')
        if not columns:
            fields = child_fields(field)
            columns = [{'fields': fields}] if fields else []

        items = node.child('items')
        for index, column in enumerate(columns, start=1):
            column_node = items.child(sanitize_node_name(column.get('name') or f'column{index}'))
            column_node.set({'sling:resourceType': RESOURCE_TYPES[FieldType.CONTAINER.value]})
            column_node.append(self.items_node(child_fields(column), context))
        return node
