"""Component block parsing for Terrific parser.

Provides mixin for parsing the ``component`` and ``view`` tags.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from terrific._types import Token, TokenType
from terrific.environment.exceptions import ErrorCode
from terrific.nodes import Component

if TYPE_CHECKING:
    from terrific.nodes import Expr
    from terrific.parser.errors import ParseError


class ComponentBlockParsingMixin:
    """Mixin for parsing component invocation tags.

    Required Host Attributes:
        - _current, _advance, _expect, _match, _error
        - _parse_expression
    """

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
            code: ErrorCode = ErrorCode.INVALID_EXPRESSION,
        ) -> ParseError: ...
        def _parse_expression(self) -> Expr: ...

    def _is_keyword(self, value: str) -> bool:
        return self._current.type == TokenType.NAME and self._current.value == value

    def _parse_only(self) -> bool:
        if self._is_keyword("only"):
            self._advance()
            return True
        return False

    def _parse_component(self) -> Component:
        """Parse {% component 'Name' ['variant'] [with {data}] [only] %}."""
        start = self._advance()  # consume 'component'
        name = self._parse_expression()

        variant: str | None = None
        if self._current.type == TokenType.STRING:
            variant = self._advance().value

        data: Expr | None = None
        if self._is_keyword("with"):
            self._advance()  # consume 'with'
            if self._match(TokenType.BLOCK_END):
                raise self._error(
                    "Expected data after 'with'",
                    suggestion="{% component 'Nav' with {classes: ['a']} %}",
                    code=ErrorCode.INVALID_TAG_ARGUMENTS,
                )
            data = self._parse_expression()

        only = self._parse_only()
        self._expect_tag_end("component")

        return Component(
            lineno=start.lineno,
            col_offset=start.col_offset,
            name=name,
            variant=variant,
            data=data,
            only=only,
        )

    def _parse_view(self) -> Component:
        """Parse {% view expr [data] [only] %}."""
        start = self._advance()  # consume 'view'
        name = self._parse_expression()

        data: Expr | None = None
        if not self._match(TokenType.BLOCK_END) and not self._is_keyword("only"):
            data = self._parse_expression()

        only = self._parse_only()
        self._expect_tag_end("view")

        return Component(
            lineno=start.lineno,
            col_offset=start.col_offset,
            name=name,
            data=data,
            only=only,
        )

    def _expect_tag_end(self, tag: str) -> None:
        if not self._match(TokenType.BLOCK_END):
            raise self._error(
                f"Unexpected {self._current.value!r} in {tag} tag",
                code=ErrorCode.INVALID_TAG_ARGUMENTS,
            )
        self._advance()
