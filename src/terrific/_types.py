"""Token types shared by the lexer and parser."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TokenType(Enum):
    """Lexer token kinds."""

    # Template structure
    DATA = "data"
    VARIABLE_BEGIN = "variable_begin"
    VARIABLE_END = "variable_end"
    BLOCK_BEGIN = "block_begin"
    BLOCK_END = "block_end"

    # Inside tags
    NAME = "name"
    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    DOT = "dot"
    COMMA = "comma"
    COLON = "colon"
    LBRACE = "lbrace"
    RBRACE = "rbrace"
    LBRACKET = "lbracket"
    RBRACKET = "rbracket"

    EOF = "eof"


@dataclass(frozen=True, slots=True)
class Token:
    """A single lexed token with its 1-based line and 0-based column."""

    type: TokenType
    value: str
    lineno: int
    col_offset: int

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.value!r}, {self.lineno}:{self.col_offset})"
