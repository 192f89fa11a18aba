"""Multifield generator: one repeatable field, or a composite group of fields."""

from typing import Any

from aem_dialog_gen.domain.constants import RESOURCE_TYPES
from aem_dialog_gen.domain.enums import FieldType
from aem_dialog_gen.domain.models import DialogConfigError, child_fields
from aem_dialog_gen.generators.base_generator import HEADER_KEYS, BaseGenerator, visibility_expression
from aem_dialog_gen.markup import XmlNode, to_js_string

DEFAULT_MULTIFIELD_NAME = './items'

MULTIFIELD_KEYS = HEADER_KEYS | {
    'composite', 'ordered', 'deleteHint', 'addItemLabel', 'maxItemsMessage',
    'minItemsMessage', 'reorderableHandle', 'minItems', 'maxItems',
}


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def validate_item_bounds(field: dict[str, Any]) -> None:
    """Reject impossible ``minItems``/``maxItems`` combinations.

    Raises:
        DialogConfigError: ``maxItems`` below 1, ``minItems`` below 0, or
            ``minItems`` above ``maxItems``.
    """
    min_items, max_items = field.get('minItems'), field.get('maxItems')

    if max_items is not None and not (_is_number(max_items) and max_items >= 1):
        raise DialogConfigError(f'maxItems must be a positive number (got {to_js_string(max_items)})')
    if min_items is not None and not (_is_number(min_items) and min_items >= 0):
        raise DialogConfigError(f'minItems must be a non-negative number (got {to_js_string(min_items)})')
    if min_items is not None and max_items is not None and min_items > max_items:
        raise DialogConfigError(
            f'minItems ({to_js_string(min_items)}) cannot be greater than maxItems ({to_js_string(max_items)})'
        )


class MultifieldGenerator(BaseGenerator):
    """Simple multifields repeat the first nested field only; extra entries
    are ignored. Composite multifields repeat a container holding all of them.
    """

    def generate(self, field: dict[str, Any], context) -> XmlNode:
        validate_item_bounds(field)

        name = field.get('name') or DEFAULT_MULTIFIELD_NAME
        composite = bool(field.get('composite'))
        node = self.start_node(name, RESOURCE_TYPES[FieldType.MULTIFIELD.value])

        node.set({
            'fieldLabel': field.get('label'),
            'fieldDescription': field.get('description'),
        })
        node.set_flags({'required': field.get('required'), 'composite': composite})

        classes = self.css_classes(field)
        if classes:
            node.set({'granite:class': ' '.join(classes)})
        node.set_expression('granite:hide', visibility_expression(field))

        node.set_flags({'orderable': field.get('ordered')})
        node.set({
            'deleteHint': field.get('deleteHint'),
            'addItemLabel': field.get('addItemLabel'),
            'maxItemsMessage': field.get('maxItemsMessage'),
            'minItemsMessage': field.get('minItemsMessage'),
            'reorderableHandle': field.get('reorderableHandle'),
        })
        node.set({'minItems': field.get('minItems'), 'maxItems': field.get('maxItems')}, allow_falsy=True)
        self.apply_remaining(node, field, MULTIFIELD_KEYS)

        children = child_fields(field)
        if composite:
            item = node.child('field')
            item.set({'sling:resourceType': RESOURCE_TYPES[FieldType.CONTAINER.value], 'name': name})
            item.append(self.items_node(children, context))
        else:
            template = children[0] if children else {'type': FieldType.TEXTFIELD.value}
            item = context.render_field({**template, 'name': name})
            item.tag = 'field'
            node.append(item)
        return node
