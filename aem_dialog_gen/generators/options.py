"""Option lists and datasource nodes shared by the choice fields."""

from typing import Any, Optional

from aem_dialog_gen.markup import XmlNode, to_js_string
from aem_dialog_gen.naming import sanitize_node_name


def build_option_items(
    options: Any,
    showhide_attribute: Optional[str] = None,
    with_checked: bool = False,
) -> Optional[XmlNode]:
    """``<items>`` node with one child per option, or None without options.

    Args:
        options: List of ``{value, text, checked, showhideTarget}`` dicts.
            Plain scalars are read as both value and text.
        showhide_attribute: Data attribute receiving each option's
            ``showhideTarget``, when the field drives show/hide.
        with_checked: Emit ``checked`` for options that declare it.
    """
    if not isinstance(options, list) or not options:
        return None

    items = XmlNode('items')
    for index, option in enumerate(options):
        if not isinstance(option, dict):
            option = {'value': option}

        value = option.get('value')
        node_name = sanitize_node_name(to_js_string(value)) if value else f'option{index}'
        text = option.get('text') or value

        node = items.child(node_name)
        node.set({
            'text': None if text is None else to_js_string(text),
            'value': None if value is None else to_js_string(value),
        }, allow_falsy=True)
        if with_checked:
            node.set_flags({'checked': option.get('checked')})
        if showhide_attribute:
            node.set({showhide_attribute: option.get('showhideTarget')})

    return items


def build_datasource(datasource: Any) -> Optional[XmlNode]:
    """``<datasource>`` node from a resource type string or an attribute dict."""
    if not datasource:
        return None

    node = XmlNode('datasource')
    if isinstance(datasource, dict):
        attributes = dict(datasource)
        resource_type = attributes.pop('resourceType', None) or attributes.pop('sling:resourceType', None)
        node.set({'sling:resourceType': resource_type})
        node.set({k: v for k, v in attributes.items() if not isinstance(v, (dict, list))}, allow_falsy=True)
    else:
        node.set({'sling:resourceType': datasource})
    return node
