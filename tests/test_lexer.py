"""Tests for the Terrific lexer."""

from __future__ import annotations

import pytest

from terrific._types import TokenType
from terrific.environment.exceptions import ErrorCode, TemplateSyntaxError
from terrific.lexer import LexerError, tokenize


def _types(source: str) -> list[TokenType]:
    return [t.type for t in tokenize(source)]


class TestTokenStream:
    """Token kinds produced for each template construct."""

    def test_plain_text_is_single_data_token(self) -> None:
        tokens = tokenize("Hello, world")
        assert [t.type for t in tokens] == [TokenType.DATA, TokenType.EOF]
        assert tokens[0].value == "Hello, world"

    def test_output_with_attribute(self) -> None:
        assert _types("{{ user.name }}") == [
            TokenType.VARIABLE_BEGIN,
            TokenType.NAME,
            TokenType.DOT,
            TokenType.NAME,
            TokenType.VARIABLE_END,
            TokenType.EOF,
        ]

    def test_component_tag(self) -> None:
        assert _types("{% component 'Nav' with {classes: ['a']} %}") == [
            TokenType.BLOCK_BEGIN,
            TokenType.NAME,
            TokenType.STRING,
            TokenType.NAME,
            TokenType.LBRACE,
            TokenType.NAME,
            TokenType.COLON,
            TokenType.LBRACKET,
            TokenType.STRING,
            TokenType.RBRACKET,
            TokenType.RBRACE,
            TokenType.BLOCK_END,
            TokenType.EOF,
        ]

    def test_comments_are_dropped(self) -> None:
        tokens = tokenize("a{# note #}b")
        assert [t.value for t in tokens if t.type == TokenType.DATA] == ["a", "b"]

    def test_numbers(self) -> None:
        tokens = tokenize("{{ 3 }}{{ 1.5 }}")
        assert [t.type for t in tokens if t.type in (TokenType.INTEGER, TokenType.FLOAT)] == [
            TokenType.INTEGER,
            TokenType.FLOAT,
        ]

    def test_string_escapes(self) -> None:
        tokens = tokenize(r"{{ 'it\'s' }}{{ " + '"say \\"hi\\""' + " }}")
        strings = [t.value for t in tokens if t.type == TokenType.STRING]
        assert strings == ["it's", 'say "hi"']

    def test_eof_always_last(self) -> None:
        assert tokenize("")[-1].type == TokenType.EOF


class TestPositions:
    """Line and column tracking."""

    def test_line_numbers_follow_newlines(self) -> None:
        tokens = tokenize("one\ntwo\n{% view x %}")
        block = next(t for t in tokens if t.type == TokenType.BLOCK_BEGIN)
        assert block.lineno == 3
        assert block.col_offset == 0

    def test_column_inside_tag(self) -> None:
        tokens = tokenize("{% component 'Nav' %}")
        string = next(t for t in tokens if t.type == TokenType.STRING)
        assert string.col_offset == 13


class TestLexerErrors:
    """Malformed delimiters raise LexerError."""

    def test_unclosed_block(self) -> None:
        with pytest.raises(LexerError) as exc_info:
            tokenize("{% component 'Nav'")
        assert exc_info.value.code == ErrorCode.UNCLOSED_TAG

    def test_unclosed_comment(self) -> None:
        with pytest.raises(LexerError):
            tokenize("{# never closed")

    def test_unexpected_character(self) -> None:
        with pytest.raises(LexerError) as exc_info:
            tokenize("{{ a + b }}")
        assert exc_info.value.code == ErrorCode.UNEXPECTED_TOKEN
        assert "'+'" in str(exc_info.value)

    def test_lexer_error_is_syntax_error(self) -> None:
        with pytest.raises(TemplateSyntaxError):
            tokenize("{{ x")
