"""Terrific compiler: node tree → Python code object."""

from terrific.compiler.core import Compiler

__all__ = ["Compiler"]
