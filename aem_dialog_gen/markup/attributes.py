"""Attribute value escaping and typed serialization.

AEM reads type hints out of the attribute text itself, so a value's Python
type decides how it is written:

    True        -> key="{Boolean}true"
    42          -> key="{Long}42"
    ['a', 'b']  -> key="[a,b]"
    'x & y'     -> key="x &amp; y"
"""

from typing import Any

_XML_ESCAPES = (
    ('&', '&amp;'),
    ('<', '&lt;'),
    ('>', '&gt;'),
    ('"', '&quot;'),
    ("'", '&apos;'),
)


class Expression(str):
    """A string embedding single-quoted literals, e.g. ``${a != 'b'}``.

    Its single quotes are written literally; everything else is escaped.
    """


def escape_xml(text: Any) -> Any:
    """Escape the five XML-significant characters. Non-strings pass through."""
    if not isinstance(text, str):
        return text
    for char, entity in _XML_ESCAPES:
        text = text.replace(char, entity)
    return text


def escape_expression(text: str) -> str:
    """Escape like ``escape_xml`` but leave single quotes literal."""
    for char, entity in _XML_ESCAPES:
        if char != "'":
            text = text.replace(char, entity)
    return text


def to_js_string(value: Any) -> str:
    """Stringify a JSON-sourced value the way the dialog JSON reads it."""
    if value is None:
        return 'null'
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (list, tuple)):
        return ','.join(to_js_string(v) for v in value)
    return str(value)


def format_attribute(key: str, value: Any) -> str:
    """Serialize one ``key="value"`` pair with its AEM type hint."""
    if isinstance(value, bool):
        return f'{key}="{{Boolean}}{to_js_string(value)}"'
    if isinstance(value, (int, float)):
        return f'{key}="{{Long}}{to_js_string(value)}"'
    if isinstance(value, (list, tuple)):
        # Elements are written raw; see DESIGN.md on multi-valued attributes.
        return f'{key}="[{",".join(to_js_string(v) for v in value)}]"'
    if isinstance(value, Expression):
        return f'{key}="{escape_expression(value)}"'
    return f'{key}="{escape_xml(to_js_string(value))}"'
