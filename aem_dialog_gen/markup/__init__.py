"""XML attribute formatting and content-node building."""

from aem_dialog_gen.markup.attributes import (
    Expression,
    escape_xml,
    format_attribute,
    to_js_string,
)
from aem_dialog_gen.markup.node_builder import (
    CloseMode,
    XmlNode,
    append_attributes,
    build_node,
    close_node,
    close_nodes,
    line,
    terminate,
)

__all__ = [
    'Expression', 'escape_xml', 'format_attribute', 'to_js_string',
    'CloseMode', 'XmlNode', 'append_attributes', 'build_node',
    'close_node', 'close_nodes', 'line', 'terminate',
]
