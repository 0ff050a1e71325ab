"""Parser error handling for Terrific.

Provides ParseError with source context and suggestions.
"""

from __future__ import annotations

from terrific._types import Token
from terrific.environment.exceptions import ErrorCode, TemplateSyntaxError


class ParseError(TemplateSyntaxError):
    """Parser error anchored to the offending token.

    Renders like TemplateSyntaxError (source line plus caret), so callers
    can catch either type.
    """

    def __init__(
        self,
        message: str,
        token: Token,
        source: str | None = None,
        filename: str | None = None,
        suggestion: str | None = None,
        code: ErrorCode = ErrorCode.INVALID_EXPRESSION,
    ):
        self.token = token
        self.code = code
        super().__init__(
            message,
            lineno=token.lineno,
            filename=filename,
            source=source,
            col_offset=token.col_offset,
            suggestion=suggestion,
        )
