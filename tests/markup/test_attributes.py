"""Tests for attribute escaping and typed serialization."""

import pytest

from aem_dialog_gen.markup import Expression, escape_xml, format_attribute, to_js_string


class TestEscapeXml:

    def test_ampersand(self):
        assert escape_xml('Test & Co') == 'Test &amp; Co'

    def test_angle_brackets(self):
        assert escape_xml('<div>Test</div>') == '&lt;div&gt;Test&lt;/div&gt;'

    def test_quotes(self):
        assert escape_xml('Say "Hello"') == 'Say &quot;Hello&quot;'
        assert escape_xml("It's") == 'It&apos;s'

    def test_ampersand_escaped_first(self):
        assert escape_xml('&lt;') == '&amp;lt;'

    def test_non_strings_pass_through(self):
        assert escape_xml(123) == 123
        assert escape_xml(None) is None


class TestToJsString:

    @pytest.mark.parametrize('value, expected', [
        (True, 'true'),
        (False, 'false'),
        (None, 'null'),
        (10, '10'),
        (10.0, '10'),
        (2.5, '2.5'),
        (['a', 'b'], 'a,b'),
        ('text', 'text'),
    ])
    def test_values(self, value, expected):
        assert to_js_string(value) == expected


class TestFormatAttribute:

    def test_boolean_true(self):
        assert format_attribute('required', True) == 'required="{Boolean}true"'

    def test_boolean_false(self):
        assert format_attribute('enabled', False) == 'enabled="{Boolean}false"'

    def test_integer(self):
        assert format_attribute('count', 42) == 'count="{Long}42"'

    def test_integral_float(self):
        assert format_attribute('maxItems', 5.0) == 'maxItems="{Long}5"'

    def test_list(self):
        assert format_attribute('items', ['a', 'b', 'c']) == 'items="[a,b,c]"'

    def test_string(self):
        assert format_attribute('name', 'test') == 'name="test"'

    def test_string_is_escaped(self):
        assert format_attribute('label', 'Test & Co') == 'label="Test &amp; Co"'

    def test_expression_keeps_single_quotes(self):
        value = Expression("${a && a == 'b'}")
        assert format_attribute('granite:hide', value) == 'granite:hide="${a &amp;&amp; a == \'b\'}"'

    def test_expression_escapes_markup_characters(self):
        value = Expression("${a < 3 || b == 'R&D'}")
        assert format_attribute('expression', value) == 'expression="${a &lt; 3 || b == \'R&amp;D\'}"'

    def test_expression_escapes_double_quotes(self):
        value = Expression('${a == "b"}')
        assert format_attribute('expression', value) == 'expression="${a == &quot;b&quot;}"'
