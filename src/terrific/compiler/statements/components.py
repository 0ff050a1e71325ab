"""Component statement compilation for Terrific compiler.

Compiles ``{% component %}`` / ``{% view %}`` into a single render call.

Constant name (resolved now, fields folded to constants):
    _append(_render_component(
        _load_template('Nav/nav.html', 'page.html', 3),
        {**<base>, 'name': 'Nav', 'className': 'Nav a Nav--x',
         'classes': ['a'], 'modifiers': ['Nav--x']},
    ))

Dynamic name (resolved and merged at render time):
    _component_name = _s(<name expr>)
    _append(_render_component(
        _load_component(_component_name, 'variant', 'page.html', 3),
        _build_context(_component_name, ('a',), ('x',), <base>),
    ))

``<base>`` comes from the environment's context provider. Classes and
modifiers are extracted into locals of ``_compile_component``; nothing is
stored on the compiler between invocations.

Uses inline TYPE_CHECKING declarations for host attributes.
"""

from __future__ import annotations

import ast
import logging
from typing import TYPE_CHECKING

from terrific.components import (
    DeferredTemplate,
    StaticTemplate,
    component_fields,
    extract,
    extract_values,
    resolve_template,
)
from terrific.environment.exceptions import InvalidInvocationData
from terrific.nodes import Getattr, Name

if TYPE_CHECKING:
    from terrific.environment import Environment
    from terrific.nodes import Component, Expr, Node

logger = logging.getLogger(__name__)


def describe_name(expr: Expr) -> str:
    """Human-readable component name for error messages."""
    if isinstance(expr, Name):
        return expr.name
    if isinstance(expr, Getattr):
        return f"{describe_name(expr.obj)}.{expr.attr}"
    value = getattr(expr, "value", None)
    return str(value) if value is not None else f"<{type(expr).__name__}>"


def _constant(value: object) -> ast.expr:
    if isinstance(value, list):
        return ast.List(elts=[ast.Constant(value=v) for v in value], ctx=ast.Load())
    return ast.Constant(value=value)


class ComponentCompilationMixin:
    """Mixin for compiling component invocations."""

    if TYPE_CHECKING:
        _env: Environment
        _name: str | None
        _filename: str | None

        def _compile_expr(self, node: Node) -> ast.expr: ...
        def _emit_output(self, value_expr: ast.expr) -> ast.stmt: ...

    def _compile_component(self, node: Component) -> list[ast.stmt]:
        template_ref = resolve_template(node, self._env.extension)
        base = self._env.context_provider.compile(self, node.name, node.data, node.only)

        try:
            if isinstance(template_ref, StaticTemplate):
                return self._compile_static_component(node, template_ref, base)
            return self._compile_deferred_component(node, template_ref, base)
        except InvalidInvocationData as e:
            raise e.located(self._name or self._filename, node.lineno) from None

    def _location_args(self, node: Component) -> list[ast.expr]:
        return [
            ast.Constant(value=self._name or self._filename),
            ast.Constant(value=node.lineno),
        ]

    def _compile_static_component(
        self,
        node: Component,
        template_ref: StaticTemplate,
        base: ast.expr,
    ) -> list[ast.stmt]:
        modifier_set = extract(node.data, template_ref.name)
        fields = component_fields(template_ref.name, modifier_set)
        logger.debug(
            "Component %r at %s:%d resolved to %r",
            template_ref.name,
            self._name or "<template>",
            node.lineno,
            template_ref.path,
        )

        load_call = ast.Call(
            func=ast.Name(id="_load_template", ctx=ast.Load()),
            args=[ast.Constant(value=template_ref.path), *self._location_args(node)],
            keywords=[],
        )
        context_expr = ast.Dict(
            keys=[None, *(ast.Constant(value=key) for key in fields)],
            values=[base, *(_constant(value) for value in fields.values())],
        )
        return [self._emit_render(load_call, context_expr)]

    def _compile_deferred_component(
        self,
        node: Component,
        template_ref: DeferredTemplate,
        base: ast.expr,
    ) -> list[ast.stmt]:
        classes, modifier_values = extract_values(node.data, describe_name(template_ref.name))
        logger.debug(
            "Component %r at %s:%d deferred to render-time resolution",
            describe_name(template_ref.name),
            self._name or "<template>",
            node.lineno,
        )

        name_var = ast.Name(id="_component_name", ctx=ast.Load())
        assign_name = ast.Assign(
            targets=[ast.Name(id="_component_name", ctx=ast.Store())],
            value=ast.Call(
                func=ast.Name(id="_s", ctx=ast.Load()),
                args=[self._compile_expr(template_ref.name)],
                keywords=[],
            ),
        )
        load_call = ast.Call(
            func=ast.Name(id="_load_component", ctx=ast.Load()),
            args=[name_var, ast.Constant(value=template_ref.variant), *self._location_args(node)],
            keywords=[],
        )
        context_expr = ast.Call(
            func=ast.Name(id="_build_context", ctx=ast.Load()),
            args=[
                name_var,
                ast.Tuple(elts=[ast.Constant(value=c) for c in classes], ctx=ast.Load()),
                ast.Tuple(elts=[ast.Constant(value=m) for m in modifier_values], ctx=ast.Load()),
                base,
            ],
            keywords=[],
        )
        return [assign_name, self._emit_render(load_call, context_expr)]

    def _emit_render(self, load_call: ast.expr, context_expr: ast.expr) -> ast.stmt:
        return self._emit_output(
            ast.Call(
                func=ast.Name(id="_render_component", ctx=ast.Load()),
                args=[load_call, context_expr],
                keywords=[],
            )
        )
