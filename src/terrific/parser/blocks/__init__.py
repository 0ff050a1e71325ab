"""Block tag parsing mixins."""

from terrific.parser.blocks.components import ComponentBlockParsingMixin

__all__ = ["ComponentBlockParsingMixin"]
