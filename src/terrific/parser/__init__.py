"""Terrific parser: tokens → immutable node tree."""

from terrific.parser.core import Parser
from terrific.parser.errors import ParseError

__all__ = ["ParseError", "Parser"]
