"""Expression compilation for Terrific compiler.

Lowers expression nodes to Python ``ast.expr``:

    Const('a')          → 'a'
    Name('user')        → _lookup(ctx, 'user')
    Getattr(user, 'id') → _getattr(_lookup(ctx, 'user'), 'id')
    List([a, b])        → [a, b]
    Dict({k: v})        → {k: v}
"""

from __future__ import annotations

import ast
from typing import TYPE_CHECKING

from terrific.environment.exceptions import ErrorCode, TemplateSyntaxError

if TYPE_CHECKING:
    from terrific.nodes import Node


class ExpressionCompilationMixin:
    """Mixin for compiling expression nodes."""

    if TYPE_CHECKING:
        _name: str | None
        _filename: str | None

    def _compile_expr(self, node: Node) -> ast.expr:
        """Compile an expression node (the host's "subcompile")."""
        node_type = type(node).__name__

        if node_type == "Const":
            return ast.Constant(value=node.value)

        if node_type == "Name":
            return ast.Call(
                func=ast.Name(id="_lookup", ctx=ast.Load()),
                args=[ast.Name(id="ctx", ctx=ast.Load()), ast.Constant(value=node.name)],
                keywords=[],
            )

        if node_type == "Getattr":
            return ast.Call(
                func=ast.Name(id="_getattr", ctx=ast.Load()),
                args=[self._compile_expr(node.obj), ast.Constant(value=node.attr)],
                keywords=[],
            )

        if node_type == "List":
            return ast.List(
                elts=[self._compile_expr(item) for item in node.items],
                ctx=ast.Load(),
            )

        if node_type == "Dict":
            return ast.Dict(
                keys=[self._compile_expr(k) for k in node.keys],
                values=[self._compile_expr(v) for v in node.values],
            )

        err = TemplateSyntaxError(
            f"Cannot compile expression node {node_type}",
            lineno=getattr(node, "lineno", None),
            name=self._name,
            filename=self._filename,
        )
        err.code = ErrorCode.INVALID_EXPRESSION
        raise err
