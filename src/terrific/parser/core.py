"""Terrific Parser: builds an immutable node tree from a token stream.

Block tags are dispatched through ``_BLOCK_PARSERS`` (keyword → method
name), so adding a tag means adding one entry plus one ``_parse_*`` method.
"""

from __future__ import annotations

from collections.abc import Sequence

from terrific._types import Token, TokenType
from terrific.environment.exceptions import ErrorCode
from terrific.nodes import Data, Node, Output, Template
from terrific.parser.blocks import ComponentBlockParsingMixin
from terrific.parser.errors import ParseError
from terrific.parser.expressions import ExpressionParsingMixin

_BLOCK_PARSERS: dict[str, str] = {
    "component": "_parse_component",
    "view": "_parse_view",
}

_VALID_KEYWORDS = frozenset(_BLOCK_PARSERS)


class Parser(ExpressionParsingMixin, ComponentBlockParsingMixin):
    """Recursive-descent parser over a token list.

    Example:
        >>> from terrific.lexer import tokenize
        >>> Parser(tokenize("{% component 'Nav' %}")).parse().body[0].name.value
        'Nav'
    """

    __slots__ = ("_filename", "_name", "_pos", "_source", "_tokens")

    def __init__(
        self,
        tokens: Sequence[Token],
        name: str | None = None,
        filename: str | None = None,
        source: str | None = None,
    ):
        self._tokens = tokens
        self._pos = 0
        self._name = name
        self._filename = filename
        self._source = source

    # ─────────────────────────────────────────────────────────────────────────
    # Token navigation
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def _current(self) -> Token:
        return self._tokens[self._pos]

    def _advance(self) -> Token:
        token = self._tokens[self._pos]
        if token.type != TokenType.EOF:
            self._pos += 1
        return token

    def _match(self, *types: TokenType) -> bool:
        return self._current.type in types

    def _expect(self, token_type: TokenType) -> Token:
        if self._current.type != token_type:
            raise self._error(
                f"Expected {token_type.value}, got {self._current.type.value} {self._current.value!r}"
            )
        return self._advance()

    def _error(
        self,
        message: str,
        token: Token | None = None,
        suggestion: str | None = None,
        code: ErrorCode = ErrorCode.INVALID_EXPRESSION,
    ) -> ParseError:
        return ParseError(
            message,
            token or self._current,
            source=self._source,
            filename=self._filename or self._name,
            suggestion=suggestion,
            code=code,
        )

    # ─────────────────────────────────────────────────────────────────────────
    # Statements
    # ─────────────────────────────────────────────────────────────────────────

    def parse(self) -> Template:
        """Parse the whole token stream into a Template node."""
        body: list[Node] = []
        while not self._match(TokenType.EOF):
            token = self._current
            if token.type == TokenType.DATA:
                self._advance()
                body.append(Data(lineno=token.lineno, col_offset=token.col_offset, value=token.value))
            elif token.type == TokenType.VARIABLE_BEGIN:
                body.append(self._parse_output())
            elif token.type == TokenType.BLOCK_BEGIN:
                body.append(self._parse_block())
            else:
                raise self._error(f"Unexpected {token.type.value} token")
        return Template(lineno=1, col_offset=0, body=tuple(body))

    def _parse_output(self) -> Output:
        start = self._advance()  # consume '{{'
        if self._match(TokenType.VARIABLE_END):
            raise self._error("Empty expression in output tag")
        expr = self._parse_expression()
        self._expect(TokenType.VARIABLE_END)
        return Output(lineno=start.lineno, col_offset=start.col_offset, expr=expr)

    def _parse_block(self) -> Node:
        self._advance()  # consume '{%'
        keyword = self._current
        if keyword.type != TokenType.NAME:
            raise self._error("Expected tag name after '{%'")
        method_name = _BLOCK_PARSERS.get(keyword.value)
        if method_name is None:
            raise self._error(
                f"Unknown tag '{keyword.value}'",
                suggestion=f"Available tags: {', '.join(sorted(_VALID_KEYWORDS))}",
                code=ErrorCode.UNKNOWN_TAG,
            )
        node: Node = getattr(self, method_name)()
        return node
