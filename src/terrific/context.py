"""Context providers: decide the merge base a component renders with.

A provider receives the invocation's name and data expressions plus the
``only`` flag, and returns a Python expression (``ast.expr``) evaluating to
the dict that the computed component fields are merged over.

Custom providers implement the ContextProvider protocol:

    ```python
    class SiteContextProvider:
        def compile(self, compiler, name, data, only):
            # always expose ``site`` to components, nothing else
            return ast.Dict(
                keys=[ast.Constant("site")],
                values=[compiler._compile_expr(Name(0, 0, "site"))],
            )
    ```
"""

from __future__ import annotations

import ast
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from terrific.compiler import Compiler
    from terrific.nodes import Expr


class ContextProvider(Protocol):
    """Produces the merge-base expression for a component invocation."""

    def compile(
        self,
        compiler: Compiler,
        name: Expr,
        data: Expr | None,
        only: bool,
    ) -> ast.expr: ...


class StandardContextProvider:
    """Caller context plus the data block; data block alone when ``only``.

    Generates:
        {**ctx, **<data>}   # default
        {**<data>}          # only
        {}                  # only, no data
    """

    __slots__ = ()

    def compile(
        self,
        compiler: Compiler,
        name: Expr,
        data: Expr | None,
        only: bool,
    ) -> ast.expr:
        keys: list[ast.expr | None] = []
        values: list[ast.expr] = []
        if not only:
            keys.append(None)
            values.append(ast.Name(id="ctx", ctx=ast.Load()))
        if data is not None:
            keys.append(None)
            values.append(compiler._compile_expr(data))
        return ast.Dict(keys=keys, values=values)


class IsolatedContextProvider(StandardContextProvider):
    """Never passes the caller context, whatever the ``only`` flag says."""

    __slots__ = ()

    def compile(
        self,
        compiler: Compiler,
        name: Expr,
        data: Expr | None,
        only: bool,
    ) -> ast.expr:
        return super().compile(compiler, name, data, True)
