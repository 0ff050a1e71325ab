"""Expression nodes for Terrific AST.

Only the shapes a component invocation needs: constants, variable
references with attribute access, lists, and hashes.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from terrific.nodes.base import Node


@dataclass(frozen=True, slots=True)
class Expr(Node):
    """Base class for expressions."""


@dataclass(frozen=True, slots=True)
class Const(Expr):
    """Constant value: string, number, boolean, None."""

    value: str | int | float | bool | None


@dataclass(frozen=True, slots=True)
class Name(Expr):
    """Variable reference: {{ user }}"""

    name: str


@dataclass(frozen=True, slots=True)
class Getattr(Expr):
    """Attribute access: obj.attr"""

    obj: Expr
    attr: str


@dataclass(frozen=True, slots=True)
class List(Expr):
    """List expression: [a, b, c]"""

    items: Sequence[Expr]


@dataclass(frozen=True, slots=True)
class Dict(Expr):
    """Hash expression: {a: b, 'c': d}

    Keys and values are parallel sequences kept in source order.
    """

    keys: Sequence[Expr]
    values: Sequence[Expr]

    def pairs(self) -> Iterator[tuple[Expr, Expr]]:
        """Yield ``(key, value)`` pairs in declaration order."""
        return zip(self.keys, self.values, strict=True)


AnyExpr = Const | Name | Getattr | List | Dict
