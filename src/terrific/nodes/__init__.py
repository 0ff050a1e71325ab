"""Terrific AST nodes.

Immutable, slotted dataclasses produced by the parser and consumed by
the compiler.
"""

from terrific.nodes.base import Node
from terrific.nodes.expressions import AnyExpr, Const, Dict, Expr, Getattr, List, Name
from terrific.nodes.structure import Component, Data, Output, Template

__all__ = [
    "AnyExpr",
    "Component",
    "Const",
    "Data",
    "Dict",
    "Expr",
    "Getattr",
    "List",
    "Name",
    "Node",
    "Output",
    "Template",
]
