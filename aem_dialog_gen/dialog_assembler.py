"""Assemble a complete ``_cq_dialog`` document from a dialog config.

The dialog body is built as an ``XmlNode`` tree and serialized once. The
root element is written by hand since its namespace declarations wrap over
several lines.
"""

from typing import Any, Optional

from aem_dialog_gen.domain.constants import (
    ACCORDION_RESOURCE_TYPE,
    DIALOG_RESOURCE_TYPE,
    RESOURCE_TYPES,
    ROOT_NAMESPACES,
    TABS_RESOURCE_TYPE,
    XML_PROLOG,
)
from aem_dialog_gen.domain.enums import FieldType, Layout
from aem_dialog_gen.domain.models import DialogConfig, SectionConfig
from aem_dialog_gen.generator_registry import GenerationContext, GeneratorRegistry
from aem_dialog_gen.generators.base_generator import visibility_expression
from aem_dialog_gen.markup import CloseMode, XmlNode, append_attributes, line, terminate
from aem_dialog_gen.naming import NameAllocator, SequentialNameAllocator, sanitize_node_name

CONTAINER_RESOURCE_TYPE = RESOURCE_TYPES[FieldType.CONTAINER.value]
FIXEDCOLUMNS_RESOURCE_TYPE = RESOURCE_TYPES[FieldType.FIXEDCOLUMNS.value]

# Continuation lines of the jcr:root namespace declarations
NAMESPACE_INDENT = 2.5

# The first tab is placed ahead of the inherited Styles tab
FIRST_TAB_ORDER_BEFORE = 'cq:styles'


def section_node_name(section: SectionConfig, index: int) -> str:
    """Explicit name, else the lower-cased title, else ``tab<index>``."""
    if section.name:
        return sanitize_node_name(section.name)
    return sanitize_node_name(section.title).lower() or f'tab{index}'


def column_layout(fields: list[dict[str, Any]], context: GenerationContext) -> XmlNode:
    """``items > columns > items > column > items`` holding the fields."""
    items = XmlNode('items')
    columns = items.child('columns', {'sling:resourceType': FIXEDCOLUMNS_RESOURCE_TYPE, 'margin': True})
    column = columns.child('items').child('column', {'sling:resourceType': CONTAINER_RESOURCE_TYPE})
    column_items = column.child('items')
    column_items.children.extend(context.render_fields(fields))
    return items


def build_tab(section: SectionConfig, index: int, context: GenerationContext) -> XmlNode:
    tab = XmlNode(section_node_name(section, index))
    tab.set({'jcr:title': section.title})
    if index == 0:
        tab.set({'sling:orderBefore': FIRST_TAB_ORDER_BEFORE})
    tab.set_expression('granite:hide', visibility_expression({'showIf': section.show_if}))
    tab.set({'sling:resourceType': CONTAINER_RESOURCE_TYPE, 'maximized': True})
    tab.append(column_layout(section.fields, context))
    return tab


def build_accordion_item(section: SectionConfig, index: int, context: GenerationContext) -> XmlNode:
    item = XmlNode(section_node_name(section, index))
    item.set({'jcr:title': section.title})
    item.set_expression('granite:hide', visibility_expression({'showIf': section.show_if}))
    item.set({'sling:resourceType': CONTAINER_RESOURCE_TYPE})

    fields = item.child('items')
    fields.children.extend(context.render_fields(section.fields))
    if section.active:
        item.child('parentConfig', {'active': True})
    return item


def build_body(config: DialogConfig, context: GenerationContext) -> XmlNode:
    """The ``<items>`` node under ``<content>`` for the config's layout."""
    if config.layout is Layout.SIMPLE:
        return column_layout(config.fields, context)

    body = XmlNode('items')
    if config.layout is Layout.ACCORDION:
        sections = body.child('accordion', {'sling:resourceType': ACCORDION_RESOURCE_TYPE})
        build_section = build_accordion_item
    else:
        sections = body.child('tabs', {'sling:resourceType': TABS_RESOURCE_TYPE, 'maximized': True})
        build_section = build_tab

    section_items = sections.child('items')
    for index, section in enumerate(config.sections):
        section_items.append(build_section(section, index, context))
    return body


def render_root(title: str, content: XmlNode) -> str:
    xml = line(0, XML_PROLOG)
    xml += line(0, '<jcr:root ' + ' '.join(ROOT_NAMESPACES[0]))
    for namespaces in ROOT_NAMESPACES[1:]:
        xml += line(NAMESPACE_INDENT, ' '.join(namespaces))
    xml = append_attributes(xml, 1, {
        'jcr:primaryType': 'nt:unstructured',
        'jcr:title': title,
        'sling:resourceType': DIALOG_RESOURCE_TYPE,
    }, allow_falsy=True)
    xml = terminate(xml, CloseMode.OPEN)
    return xml + content.render(1) + '</jcr:root>'


def generate_dialog_xml(
    config: dict[str, Any],
    component_name: str,
    names: Optional[NameAllocator] = None,
    registry: Optional[GeneratorRegistry] = None,
) -> str:
    """Render the dialog XML for one component.

    Args:
        config: Parsed ``dialog.json`` content.
        component_name: Component folder name; used for the default title
            and the ``cmp-<name>__editor`` class.
        names: Allocator for fields without a ``name``. A fresh
            sequential allocator by default, so equal configs give equal
            output.
        registry: Generator registry, for callers that register custom
            field types.

    Raises:
        DialogConfigError: A multifield declares impossible item bounds.
    """
    dialog = DialogConfig.from_dict(config, component_name)
    context = GenerationContext(registry or GeneratorRegistry(), names or SequentialNameAllocator())

    content = XmlNode('content')
    content.set({
        'granite:class': f'cmp-{component_name}__editor',
        'jcr:primaryType': 'nt:unstructured',
        'sling:resourceType': CONTAINER_RESOURCE_TYPE,
    })
    content.append(build_body(dialog, context))
    return render_root(dialog.title, content)
