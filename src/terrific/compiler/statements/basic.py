"""Basic statement compilation: literal text and expression output."""

from __future__ import annotations

import ast
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from terrific.nodes import Node


class BasicStatementMixin:
    """Mixin for compiling Data and Output nodes."""

    if TYPE_CHECKING:

        def _compile_expr(self, node: Node) -> ast.expr: ...
        def _emit_output(self, value_expr: ast.expr) -> ast.stmt: ...

    def _compile_data(self, node: Node) -> list[ast.stmt]:
        """Literal text: _append('text')"""
        if not node.value:
            return []
        return [self._emit_output(ast.Constant(value=node.value))]

    def _compile_output(self, node: Node) -> list[ast.stmt]:
        """{{ expr }}: _append(_s(expr))"""
        return [
            self._emit_output(
                ast.Call(
                    func=ast.Name(id="_s", ctx=ast.Load()),
                    args=[self._compile_expr(node.expr)],
                    keywords=[],
                )
            )
        ]
