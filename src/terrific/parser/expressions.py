"""Expression parsing for Terrific parser.

Grammar (the subset component tags need):

    expression := primary ('.' NAME)*
    primary    := STRING | INTEGER | FLOAT | NAME | list | hash
    list       := '[' [expression (',' expression)* [',']] ']'
    hash       := '{' [pair (',' pair)* [',']] '}'
    pair       := (NAME | STRING | INTEGER) ':' expression

Bare names used as hash keys are string constants, as in Twig:
``{classes: 'a'}`` is the same as ``{'classes': 'a'}``.

Uses inline TYPE_CHECKING declarations for host attributes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from terrific._types import Token, TokenType
from terrific.nodes import Const, Dict, Expr, Getattr, List, Name

if TYPE_CHECKING:
    from terrific.parser.errors import ParseError

_KEYWORD_CONSTANTS: dict[str, bool | None] = {
    "true": True,
    "false": False,
    "none": None,
    "null": None,
}


class ExpressionParsingMixin:
    """Mixin for parsing expressions."""

    if TYPE_CHECKING:

        @property
        def _current(self) -> Token: ...
        def _advance(self) -> Token: ...
        def _expect(self, token_type: TokenType) -> Token: ...
        def _match(self, *types: TokenType) -> bool: ...
        def _error(
            self,
            message: str,
            token: Token | None = None,
            suggestion: str | None = None,
        ) -> ParseError: ...

    def _parse_expression(self) -> Expr:
        expr = self._parse_primary()
        while self._match(TokenType.DOT):
            self._advance()
            if self._current.type != TokenType.NAME:
                raise self._error("Expected attribute name after '.'")
            attr = self._advance()
            expr = Getattr(lineno=expr.lineno, col_offset=expr.col_offset, obj=expr, attr=attr.value)
        return expr

    def _parse_primary(self) -> Expr:
        token = self._current

        if token.type == TokenType.STRING:
            self._advance()
            return Const(lineno=token.lineno, col_offset=token.col_offset, value=token.value)

        if token.type == TokenType.INTEGER:
            self._advance()
            return Const(lineno=token.lineno, col_offset=token.col_offset, value=int(token.value))

        if token.type == TokenType.FLOAT:
            self._advance()
            return Const(lineno=token.lineno, col_offset=token.col_offset, value=float(token.value))

        if token.type == TokenType.NAME:
            self._advance()
            if token.value in _KEYWORD_CONSTANTS:
                return Const(
                    lineno=token.lineno,
                    col_offset=token.col_offset,
                    value=_KEYWORD_CONSTANTS[token.value],
                )
            return Name(lineno=token.lineno, col_offset=token.col_offset, name=token.value)

        if token.type == TokenType.LBRACKET:
            return self._parse_list()

        if token.type == TokenType.LBRACE:
            return self._parse_hash()

        raise self._error(f"Unexpected {token.type.value} token {token.value!r} in expression")

    def _parse_list(self) -> List:
        start = self._advance()  # consume '['
        items: list[Expr] = []
        while not self._match(TokenType.RBRACKET):
            items.append(self._parse_expression())
            if self._match(TokenType.COMMA):
                self._advance()
            elif not self._match(TokenType.RBRACKET):
                raise self._error("Expected ',' or ']' in list")
        self._advance()  # consume ']'
        return List(lineno=start.lineno, col_offset=start.col_offset, items=tuple(items))

    def _parse_hash(self) -> Dict:
        start = self._advance()  # consume '{'
        keys: list[Expr] = []
        values: list[Expr] = []
        while not self._match(TokenType.RBRACE):
            keys.append(self._parse_hash_key())
            self._expect(TokenType.COLON)
            values.append(self._parse_expression())
            if self._match(TokenType.COMMA):
                self._advance()
            elif not self._match(TokenType.RBRACE):
                raise self._error("Expected ',' or '}' in hash")
        self._advance()  # consume '}'
        return Dict(
            lineno=start.lineno,
            col_offset=start.col_offset,
            keys=tuple(keys),
            values=tuple(values),
        )

    def _parse_hash_key(self) -> Const:
        token = self._current
        if token.type in (TokenType.NAME, TokenType.STRING):
            self._advance()
            return Const(lineno=token.lineno, col_offset=token.col_offset, value=token.value)
        if token.type == TokenType.INTEGER:
            self._advance()
            return Const(lineno=token.lineno, col_offset=token.col_offset, value=int(token.value))
        raise self._error(
            "Hash keys must be names, strings or integers",
            suggestion="Write {classes: 'a'} or {'classes': 'a'}",
        )
