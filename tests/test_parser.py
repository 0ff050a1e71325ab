"""Tests for parsing the component and view tags."""

from __future__ import annotations

import pytest

from terrific.environment.exceptions import ErrorCode, TemplateSyntaxError
from terrific.lexer import tokenize
from terrific.nodes import Component, Const, Data, Dict, Getattr, List, Name, Output
from terrific.parser import ParseError, Parser
from terrific.parser.core import _BLOCK_PARSERS


def parse(source: str):
    return Parser(tokenize(source), name="test.html", source=source).parse()


def parse_component(source: str) -> Component:
    node = parse(source).body[0]
    assert isinstance(node, Component)
    return node


class TestComponentTag:
    """The four documented component forms, plus ``only``."""

    def test_name_only(self) -> None:
        node = parse_component("{% component 'Nav' %}")
        assert node.name == Const(lineno=1, col_offset=13, value="Nav")
        assert node.variant is None
        assert node.data is None
        assert node.only is False

    def test_with_variant(self) -> None:
        node = parse_component("{% component 'Nav' 'Primary' %}")
        assert node.variant == "Primary"
        assert node.data is None

    def test_with_data(self) -> None:
        node = parse_component("{% component 'Nav' with {classes: ['a', 'b'], modifier: 'x'} %}")
        assert isinstance(node.data, Dict)
        assert [k.value for k in node.data.keys] == ["classes", "modifier"]
        assert isinstance(node.data.values[0], List)

    def test_variant_and_data(self) -> None:
        node = parse_component("{% component 'Nav' 'Primary' with {classes: 'a'} %}")
        assert node.variant == "Primary"
        assert isinstance(node.data, Dict)

    def test_only_flag(self) -> None:
        node = parse_component("{% component 'Nav' with {classes: 'a'} only %}")
        assert node.only is True

    def test_quoted_hash_keys(self) -> None:
        node = parse_component("{% component 'Nav' with {'classes': 'a', \"modifiers\": 'b'} %}")
        assert [k.value for k in node.data.keys] == ["classes", "modifiers"]

    def test_trailing_commas(self) -> None:
        node = parse_component("{% component 'Nav' with {classes: ['a', 'b',],} %}")
        assert len(node.data.keys) == 1
        assert len(node.data.values[0].items) == 2

    def test_dynamic_name(self) -> None:
        node = parse_component("{% component widget.kind %}")
        assert isinstance(node.name, Getattr)
        assert node.name.attr == "kind"


class TestViewTag:
    """``view <expr> [<data>] [only]``."""

    def test_view_constant(self) -> None:
        node = parse_component("{% view 'Badge' %}")
        assert node.name.value == "Badge"

    def test_view_with_data_and_only(self) -> None:
        node = parse_component("{% view comp {modifiers: ['x']} only %}")
        assert node.name == Name(lineno=1, col_offset=8, name="comp")
        assert isinstance(node.data, Dict)
        assert node.only is True

    def test_view_only_without_data(self) -> None:
        node = parse_component("{% view comp only %}")
        assert node.data is None
        assert node.only is True

    def test_view_data_may_be_any_expression(self) -> None:
        node = parse_component("{% view comp settings %}")
        assert isinstance(node.data, Name)


class TestTemplateBody:
    """Text and output around tags."""

    def test_mixed_body(self) -> None:
        body = parse("<a>{{ title }}</a>{% component 'Nav' %}").body
        assert [type(n) for n in body] == [Data, Output, Data, Component]

    def test_keyword_constants(self) -> None:
        node = parse("{{ true }}").body[0]
        assert node.expr.value is True


class TestParseErrors:
    """Malformed tags raise ParseError with location."""

    def test_missing_name(self) -> None:
        with pytest.raises(ParseError):
            parse("{% component %}")

    def test_unknown_tag(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse("{% include 'x.html' %}")
        assert exc_info.value.code == ErrorCode.UNKNOWN_TAG
        assert "component" in str(exc_info.value)

    def test_with_without_data(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse("{% component 'Nav' with %}")
        assert exc_info.value.code == ErrorCode.INVALID_TAG_ARGUMENTS

    def test_unexpected_trailing_argument(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse("{% component 'Nav' extra %}")
        assert exc_info.value.code == ErrorCode.INVALID_TAG_ARGUMENTS

    def test_error_points_at_token(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse("line1\n{% component 'Nav' with {classes: } %}")
        err = exc_info.value
        assert err.lineno == 2
        assert err.col_offset == 34
        assert "test.html:2:34" in str(err)
        assert "^" in str(err)

    def test_parse_error_is_syntax_error(self) -> None:
        with pytest.raises(TemplateSyntaxError):
            parse("{% view %}")

    def test_empty_output(self) -> None:
        with pytest.raises(ParseError):
            parse("{{ }}")


class TestDispatchTable:
    """Block keyword dispatch."""

    def test_tags_map_to_parse_methods(self) -> None:
        assert _BLOCK_PARSERS == {"component": "_parse_component", "view": "_parse_view"}
        for method_name in _BLOCK_PARSERS.values():
            assert callable(getattr(Parser, method_name))
