"""Generator for every plain form field."""

from typing import Any

from aem_dialog_gen.domain.constants import SHOWHIDE_MARKER_CLASSES
from aem_dialog_gen.domain.enums import FieldType
from aem_dialog_gen.generators.base_generator import BaseGenerator, stringify, visibility_expression
from aem_dialog_gen.generators.options import build_datasource, build_option_items
from aem_dialog_gen.generators.render_condition import build_render_condition
from aem_dialog_gen.markup import XmlNode

DROPDOWN_TARGET = 'granite:data-cq-dialog-dropdown-showhide-target'
CHECKBOX_TARGET = 'granite:data-cq-dialog-checkbox-showhide-target'

# Config keys turned into specific attributes or children; never copied verbatim
GENERIC_KEYS = frozenset({
    'type', 'name', 'label', 'description', 'required', 'defaultValue', 'options',
    'fields', 'items', 'cqShowHide', 'showhideClass', 'showhideTarget', 'className',
    'wrapperClass', 'orderBefore', 'showIf', 'hideIf', 'contextualHelp', 'width',
    'graniteId', 'trackingFeature', 'trackingElement', 'margin', 'typeHint',
    'requiredMessage', 'renderHidden', 'disabled', 'readOnly', 'validation',
    'minMessage', 'maxMessage', 'patternMessage', 'emptyText', 'placeholder',
    'maxLength', 'min', 'max', 'filter', 'emptyOption', 'forceSelection', 'multiple',
    'autoFocus', 'forceIgnoreFreshness', 'clearButton', 'autocomplete', 'ariaLabel',
    'ariaDescribedBy', 'tooltipIcon', 'data', 'datasource', 'renderCondition',
})


def help_attributes(contextual_help: Any) -> dict[str, Any]:
    """``granite:data-help`` attributes from a string or ``{text, url}``."""
    if isinstance(contextual_help, dict):
        return {
            'granite:data-help': contextual_help.get('text'),
            'granite:data-help-url': contextual_help.get('url'),
        }
    if contextual_help:
        return {'granite:data-help': contextual_help}
    return {}


def validation_attributes(validation: Any) -> dict[str, Any]:
    if isinstance(validation, str):
        validation = {'pattern': validation}
    if not isinstance(validation, dict):
        return {}
    return {
        'validation': validation.get('pattern'),
        'validationMessage': validation.get('message'),
    }


class GenericFieldGenerator(BaseGenerator):
    """Textfields, selects, checkboxes and every other kind without its own generator.

    Unknown types land here too and keep the textfield resource type.
    """

    def generate(self, field: dict[str, Any], context) -> XmlNode:
        field_type = self.field_type(field)
        is_select = field_type == FieldType.SELECT.value
        show_hide = bool(field.get('cqShowHide'))

        name = self.resolve_name(field, context)
        node = self.start_node(name, self.default_resource_type(field))

        marker = SHOWHIDE_MARKER_CLASSES.get(field_type) if show_hide else None
        classes = self.css_classes(field, marker)
        if classes:
            node.set({'granite:class': ' '.join(classes)})

        node.set({'fieldLabel': field.get('label'), 'sling:orderBefore': field.get('orderBefore')})
        node.set_expression('granite:hide', visibility_expression(field))
        node.set({
            'fieldDescription': field.get('description'),
            **help_attributes(field.get('contextualHelp')),
            'width': field.get('width'),
            'granite:id': field.get('graniteId'),
            'trackingFeature': field.get('trackingFeature'),
            'trackingElement': field.get('trackingElement'),
            'margin': field.get('margin'),
        }, allow_falsy=True)

        node.set({
            'name': name,
            'typeHint': field.get('typeHint'),
            'requiredMessage': field.get('requiredMessage'),
        })
        node.set_flags({
            'renderHidden': field.get('renderHidden'),
            'required': field.get('required'),
            'disabled': field.get('disabled'),
            'readOnly': field.get('readOnly'),
        })
        node.set(validation_attributes(field.get('validation')))

        empty_text = field.get('emptyText')
        if empty_text is None:
            empty_text = field.get('placeholder')
        node.set({
            'minMessage': field.get('minMessage'),
            'maxMessage': field.get('maxMessage'),
            'patternMessage': field.get('patternMessage'),
            'emptyText': empty_text,
            'maxlength': stringify(field.get('maxLength')),
            'min': stringify(field.get('min')),
            'max': stringify(field.get('max')),
            'value': stringify(field.get('defaultValue')),
            'filter': field.get('filter'),
        }, allow_falsy=True)

        if is_select:
            node.set({
                'emptyOption': field.get('emptyOption'),
                'forceSelection': field.get('forceSelection'),
            }, allow_falsy=True)

        node.set_flags({
            'multiple': is_select and field.get('multiple'),
            'autofocus': field.get('autoFocus'),
            'forceIgnoreFreshness': field.get('forceIgnoreFreshness'),
            'clearButton': field_type == FieldType.TEXTFIELD.value and field.get('clearButton'),
        })
        node.set({
            'autocomplete': field.get('autocomplete'),
            'ariaLabel': field.get('ariaLabel'),
            'ariaDescribedBy': field.get('ariaDescribedBy'),
            'tooltipIcon': field.get('tooltipIcon'),
        })

        data = field.get('data')
        if isinstance(data, dict):
            node.set({f'granite:data-{key}': stringify(value) for key, value in data.items()}, allow_falsy=True)

        if show_hide and field_type == FieldType.CHECKBOX.value:
            node.set({CHECKBOX_TARGET: field.get('showhideTarget')})
        elif show_hide and is_select:
            node.set({DROPDOWN_TARGET: field.get('showhideTarget')})

        self.apply_remaining(node, field, GENERIC_KEYS)

        node.append(build_option_items(field.get('options'), DROPDOWN_TARGET if show_hide else None))
        if is_select:
            node.append(build_datasource(field.get('datasource')))
        node.append(build_render_condition(field.get('renderCondition')))
        return node
