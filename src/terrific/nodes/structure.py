"""Template structure nodes for Terrific AST."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from terrific.nodes.base import Node
from terrific.nodes.expressions import Expr


@dataclass(frozen=True, slots=True)
class Data(Node):
    """Literal template text."""

    value: str


@dataclass(frozen=True, slots=True)
class Output(Node):
    """Expression output: {{ expr }}"""

    expr: Expr


@dataclass(frozen=True, slots=True)
class Component(Node):
    """Component invocation.

    {% component 'Name' ['variant'] [with {data}] [only] %}
    {% view expr [{data}] [only] %}

    ``name`` is usually a string Const; any other expression defers template
    resolution to render time. ``data`` is the raw, unevaluated hash.
    """

    name: Expr
    variant: str | None = None
    data: Expr | None = None
    only: bool = False


@dataclass(frozen=True, slots=True)
class Template(Node):
    """Root node representing a complete template."""

    body: Sequence[Node]
