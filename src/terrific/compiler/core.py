"""Terrific Compiler Core: node tree → Python AST → code object.

The generated module defines a single ``render(ctx)`` function using the
StringBuilder pattern:

    ```python
    def render(ctx):
        _s = _str
        buf = []
        _append = buf.append
        _append('<header>')
        _get_render_ctx().line = 1
        _append(_render_component(_load_template('Nav/nav.html', 'page.html', 1), {...}))
        return ''.join(buf)
    ```

Helper names (``_lookup``, ``_load_template``, ...) are bound by
``terrific.template.Template`` when the code object is executed.
"""

from __future__ import annotations

import ast
from collections.abc import Callable
from typing import TYPE_CHECKING

from terrific.compiler.expressions import ExpressionCompilationMixin
from terrific.compiler.statements import StatementCompilationMixin

if TYPE_CHECKING:
    import types

    from terrific.environment import Environment
    from terrific.nodes import Node
    from terrific.nodes import Template as TemplateNode


class Compiler(ExpressionCompilationMixin, StatementCompilationMixin):
    """Compile a Template node to a code object.

    A Compiler may be reused for any number of templates and component
    nodes; per-compile settings (``_name``, ``_filename``) are reset by
    ``compile()`` and no per-node state is kept.

    Example:
            >>> from terrific import Environment
            >>> from terrific.lexer import tokenize
            >>> from terrific.parser import Parser
            >>> env = Environment()
            >>> tree = Parser(tokenize("Hello, {{ name }}!")).parse()
            >>> code = Compiler(env).compile(tree, name="greeting.html")
    """

    __slots__ = ("_env", "_filename", "_name", "_node_dispatch")

    # Node types that can fail at render time and should track line numbers
    _LINE_TRACKED_NODES = frozenset({"Output", "Component"})

    def __init__(self, env: Environment):
        self._env = env
        self._name: str | None = None
        self._filename: str | None = None

    def compile(
        self,
        node: TemplateNode,
        name: str | None = None,
        filename: str | None = None,
    ) -> types.CodeType:
        """Compile template AST to a code object ready for exec()."""
        self._name = name
        self._filename = filename

        module = ast.Module(body=[self._make_render_function(node)], type_ignores=[])
        ast.fix_missing_locations(module)
        return compile(module, filename or name or "<template>", "exec")

    def _emit_output(self, value_expr: ast.expr) -> ast.stmt:
        """Generate ``_append(value)``."""
        return ast.Expr(
            value=ast.Call(
                func=ast.Name(id="_append", ctx=ast.Load()),
                args=[value_expr],
                keywords=[],
            ),
        )

    def _make_render_function(self, node: TemplateNode) -> ast.FunctionDef:
        body: list[ast.stmt] = [
            # _s = _str
            ast.Assign(
                targets=[ast.Name(id="_s", ctx=ast.Store())],
                value=ast.Name(id="_str", ctx=ast.Load()),
            ),
            # buf = []
            ast.Assign(
                targets=[ast.Name(id="buf", ctx=ast.Store())],
                value=ast.List(elts=[], ctx=ast.Load()),
            ),
            # _append = buf.append
            ast.Assign(
                targets=[ast.Name(id="_append", ctx=ast.Store())],
                value=ast.Attribute(
                    value=ast.Name(id="buf", ctx=ast.Load()),
                    attr="append",
                    ctx=ast.Load(),
                ),
            ),
        ]

        for child in node.body:
            body.extend(self._compile_node(child))

        # return ''.join(buf)
        body.append(
            ast.Return(
                value=ast.Call(
                    func=ast.Attribute(
                        value=ast.Constant(value=""),
                        attr="join",
                        ctx=ast.Load(),
                    ),
                    args=[ast.Name(id="buf", ctx=ast.Load())],
                    keywords=[],
                ),
            )
        )

        return ast.FunctionDef(
            name="render",
            args=ast.arguments(
                posonlyargs=[],
                args=[ast.arg(arg="ctx")],
                vararg=None,
                kwonlyargs=[],
                kw_defaults=[],
                kwarg=None,
                defaults=[],
            ),
            body=body,
            decorator_list=[],
            returns=None,
        )

    def _make_line_marker(self, lineno: int) -> ast.stmt:
        """Generate: _get_render_ctx().line = lineno"""
        return ast.Assign(
            targets=[
                ast.Attribute(
                    value=ast.Call(
                        func=ast.Name(id="_get_render_ctx", ctx=ast.Load()),
                        args=[],
                        keywords=[],
                    ),
                    attr="line",
                    ctx=ast.Store(),
                )
            ],
            value=ast.Constant(value=lineno),
        )

    def _compile_node(self, node: Node) -> list[ast.stmt]:
        """Compile a single node, prefixed by a line marker when it can fail."""
        node_type = type(node).__name__

        stmts: list[ast.stmt] = []
        if node_type in self._LINE_TRACKED_NODES:
            stmts.append(self._make_line_marker(node.lineno))

        handler = self._get_node_dispatch().get(node_type)
        if handler:
            stmts.extend(handler(node))
        return stmts

    def _get_node_dispatch(self) -> dict[str, Callable]:
        """Get node type dispatch table (cached on first call)."""
        if not hasattr(self, "_node_dispatch"):
            self._node_dispatch = {
                "Data": self._compile_data,
                "Output": self._compile_output,
                "Component": self._compile_component,
            }
        return self._node_dispatch
