"""Lexer for Terrific templates.

Splits template source into a flat token stream:

    Hello {{ user.name }}!{% component 'Nav' with {classes: ['a', 'b']} %}

    DATA('Hello ') VARIABLE_BEGIN NAME(user) DOT NAME(name) VARIABLE_END
    DATA('!') BLOCK_BEGIN NAME(component) STRING(Nav) NAME(with) LBRACE ...
    BLOCK_END EOF

Comments (``{# ... #}``) are dropped entirely. Only the small expression
vocabulary the component tags need is recognised inside delimiters:
names, strings, numbers, and ``. , : { } [ ]``.
"""

from __future__ import annotations

import re

from terrific._types import Token, TokenType
from terrific.environment.exceptions import ErrorCode, TemplateSyntaxError

_DELIMITERS = {
    "{{": (TokenType.VARIABLE_BEGIN, "}}", TokenType.VARIABLE_END),
    "{%": (TokenType.BLOCK_BEGIN, "%}", TokenType.BLOCK_END),
}

_OPEN_RE = re.compile(r"\{\{|\{%|\{#")
_WHITESPACE_RE = re.compile(r"\s+")
_NAME_RE = re.compile(r"[a-zA-Z_][a-zA-Z0-9_]*")
_FLOAT_RE = re.compile(r"\d+\.\d+")
_INTEGER_RE = re.compile(r"\d+")
_STRING_RE = re.compile(r"'([^'\\]*(?:\\.[^'\\]*)*)'|\"([^\"\\]*(?:\\.[^\"\\]*)*)\"", re.S)

_PUNCTUATION = {
    ".": TokenType.DOT,
    ",": TokenType.COMMA,
    ":": TokenType.COLON,
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
    "[": TokenType.LBRACKET,
    "]": TokenType.RBRACKET,
}


class LexerError(TemplateSyntaxError):
    """Tokenization failure (unclosed delimiter, stray character)."""


class Lexer:
    """Single-pass tokenizer.

    Lexer instances hold the position of one tokenization run; create a
    new one per source (see `tokenize`).
    """

    __slots__ = ("_col", "_lineno", "_name", "_pos", "_source", "_tokens")

    def __init__(self, source: str, name: str | None = None):
        self._source = source
        self._name = name
        self._pos = 0
        self._lineno = 1
        self._col = 0
        self._tokens: list[Token] = []

    def tokenize(self) -> list[Token]:
        source = self._source
        while self._pos < len(source):
            match = _OPEN_RE.search(source, self._pos)
            if match is None:
                self._emit_data(source[self._pos :])
                break
            if match.start() > self._pos:
                self._emit_data(source[self._pos : match.start()])
            opener = match.group()
            if opener == "{#":
                self._skip_comment()
            else:
                self._lex_delimited(opener)

        self._tokens.append(Token(TokenType.EOF, "", self._lineno, self._col))
        return self._tokens

    def _advance_to(self, end: int) -> None:
        """Move the cursor to ``end``, keeping line/column counters in sync."""
        chunk = self._source[self._pos : end]
        newlines = chunk.count("\n")
        if newlines:
            self._lineno += newlines
            self._col = len(chunk) - chunk.rfind("\n") - 1
        else:
            self._col += len(chunk)
        self._pos = end

    def _emit_data(self, text: str) -> None:
        self._tokens.append(Token(TokenType.DATA, text, self._lineno, self._col))
        self._advance_to(self._pos + len(text))

    def _skip_comment(self) -> None:
        end = self._source.find("#}", self._pos + 2)
        if end == -1:
            raise self._error("Unclosed comment, expected '#}'", ErrorCode.UNCLOSED_TAG)
        self._advance_to(end + 2)

    def _lex_delimited(self, opener: str) -> None:
        begin_type, closer, end_type = _DELIMITERS[opener]
        self._tokens.append(Token(begin_type, opener, self._lineno, self._col))
        self._advance_to(self._pos + 2)

        source = self._source
        while True:
            ws = _WHITESPACE_RE.match(source, self._pos)
            if ws:
                self._advance_to(ws.end())
            if self._pos >= len(source):
                raise self._error(f"Unclosed tag, expected '{closer}'", ErrorCode.UNCLOSED_TAG)
            if source.startswith(closer, self._pos):
                self._tokens.append(Token(end_type, closer, self._lineno, self._col))
                self._advance_to(self._pos + 2)
                return
            self._lex_operand()

    def _lex_operand(self) -> None:
        source = self._source
        lineno, col = self._lineno, self._col

        match = _STRING_RE.match(source, self._pos)
        if match:
            raw = match.group(1) if match.group(1) is not None else match.group(2)
            value = re.sub(r"\\(.)", r"\1", raw)
            self._tokens.append(Token(TokenType.STRING, value, lineno, col))
            self._advance_to(match.end())
            return

        for pattern, token_type in (
            (_NAME_RE, TokenType.NAME),
            (_FLOAT_RE, TokenType.FLOAT),
            (_INTEGER_RE, TokenType.INTEGER),
        ):
            match = pattern.match(source, self._pos)
            if match:
                self._tokens.append(Token(token_type, match.group(), lineno, col))
                self._advance_to(match.end())
                return

        char = source[self._pos]
        token_type = _PUNCTUATION.get(char)
        if token_type is None:
            raise self._error(f"Unexpected character {char!r}", ErrorCode.UNEXPECTED_TOKEN)
        self._tokens.append(Token(token_type, char, lineno, col))
        self._advance_to(self._pos + 1)

    def _error(self, message: str, code: ErrorCode) -> LexerError:
        err = LexerError(
            message,
            lineno=self._lineno,
            name=self._name,
            source=self._source,
            col_offset=self._col,
        )
        err.code = code
        return err


def tokenize(source: str, name: str | None = None) -> list[Token]:
    """Tokenize template source into a list ending with an EOF token."""
    return Lexer(source, name).tokenize()
