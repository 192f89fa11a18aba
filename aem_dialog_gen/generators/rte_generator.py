"""Rich text editor generator: plugin configuration plus the inline toolbar."""

from typing import Any

from aem_dialog_gen.domain.constants import (
    RESOURCE_TYPES,
    RTE_DEFAULT_PLUGINS,
    RTE_FEATURE_PLUGINS,
    RTE_INLINE_POPOVERS,
    RTE_INLINE_TOOLBAR,
    RTE_PARAGRAPH_FORMATS,
)
from aem_dialog_gen.domain.enums import FieldType
from aem_dialog_gen.generators.base_generator import HEADER_KEYS, BaseGenerator
from aem_dialog_gen.markup import XmlNode

DEFAULT_RTE_NAME = './text'
ALL_FEATURES = '*'

RTE_KEYS = HEADER_KEYS | {'features', 'useFixedInlineToolbar'}


def _plugin(tag: str, features: str) -> XmlNode:
    return XmlNode(tag, {'features': features})


def default_plugins() -> list[XmlNode]:
    plugins = [_plugin(family, features) for family, features in RTE_DEFAULT_PLUGINS]

    formats = XmlNode('formats')
    for tag, description, element in RTE_PARAGRAPH_FORMATS:
        formats.child(tag, {'description': description, 'tag': element})
    plugins[-1].append(formats)
    return plugins


def requested_plugins(features: list[str]) -> list[XmlNode]:
    """One plugin node per family, features merged in request order.

    Unknown feature names are ignored.
    """
    merged: dict[str, list[str]] = {}
    for feature in features:
        if feature not in RTE_FEATURE_PLUGINS:
            continue
        family, enabled = RTE_FEATURE_PLUGINS[feature]
        family_features = merged.setdefault(family, [])
        if enabled not in family_features:
            family_features.append(enabled)
    return [_plugin(family, ','.join(enabled)) for family, enabled in merged.items()]


def ui_settings() -> XmlNode:
    settings = XmlNode('uiSettings')
    inline = settings.child('cui').child('inline', {
        'toolbar': RTE_INLINE_TOOLBAR,
        'popovers': RTE_INLINE_POPOVERS,
    })
    icons = inline.child('icons')

    justify = icons.child('justify')
    for command in ('justifyleft', 'justifycenter', 'justifyright'):
        justify.child(command, {'command': command})

    lists = icons.child('lists')
    lists.child('unordered', {'command': 'bullist'})
    lists.child('ordered', {'command': 'numlist'})
    return settings


class RichTextGenerator(BaseGenerator):

    def generate(self, field: dict[str, Any], context) -> XmlNode:
        name = field.get('name') or DEFAULT_RTE_NAME
        node = self.start_node(name, RESOURCE_TYPES[FieldType.RTE.value])
        self.apply_header(node, field, name)
        node.set_flags({'useFixedInlineToolbar': field.get('useFixedInlineToolbar')})
        self.apply_remaining(node, field, RTE_KEYS)

        features = field.get('features') or [ALL_FEATURES]
        if isinstance(features, str):
            features = [features]

        plugins = node.child('rtePlugins')
        if ALL_FEATURES in features:
            plugins.children.extend(default_plugins())
        else:
            plugins.children.extend(requested_plugins(features))

        node.append(ui_settings())
        return node
