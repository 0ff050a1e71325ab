"""Per-render state kept in a ContextVar, out of the user's context dict.

Generated code updates ``line`` through ``_get_render_ctx()``; component
rendering pushes a child context so nested components get their own
template name, an incremented depth, and a template stack for error traces.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, field


@dataclass
class RenderContext:
    """Per-render state isolated from user context.

    Attributes:
        template_name: Current template name for error messages
        filename: Source file path for error messages
        source: Template source for runtime error snippets
        line: Current line number (updated during render by generated code)
        depth: Current component nesting depth
        max_depth: Maximum allowed nesting depth
        template_stack: Stack of (template_name, line) for error traces
    """

    template_name: str | None = None
    filename: str | None = None
    source: str | None = None
    line: int = 0

    # 50 is deep enough for any real component tree while catching a
    # component that renders itself.
    depth: int = 0
    max_depth: int = 50

    template_stack: list[tuple[str, int]] = field(default_factory=list)

    def check_depth(self, template_name: str) -> None:
        """Raise TemplateRuntimeError if rendering ``template_name`` would nest too deep."""
        if self.depth >= self.max_depth:
            from terrific.environment.exceptions import ErrorCode, TemplateRuntimeError

            err = TemplateRuntimeError(
                f"Maximum component depth exceeded ({self.max_depth}) "
                f"when rendering '{template_name}'",
                template_name=self.template_name,
                lineno=self.line or None,
                template_stack=self.template_stack,
                suggestion="Check for components that render themselves: A → B → A",
            )
            err.code = ErrorCode.COMPONENT_DEPTH
            raise err

    def child_context(self, template_name: str, source: str | None = None) -> RenderContext:
        """Create the context for a nested component render."""
        new_stack = self.template_stack.copy()
        if self.template_name and self.line > 0:
            new_stack.append((self.template_name, self.line))

        return RenderContext(
            template_name=template_name,
            filename=self.filename,
            source=source,
            line=0,
            depth=self.depth + 1,
            max_depth=self.max_depth,
            template_stack=new_stack,
        )


_render_context: ContextVar[RenderContext | None] = ContextVar(
    "terrific_render_context",
    default=None,
)


def get_render_context() -> RenderContext | None:
    """Get current render context (None if not in render)."""
    return _render_context.get()


def get_render_context_required() -> RenderContext:
    """Get current render context, raise if not in render.

    Used by generated code for line tracking.
    """
    ctx = _render_context.get()
    if ctx is None:
        raise RuntimeError("Not in a render context")
    return ctx


@contextmanager
def render_context(
    template_name: str | None = None,
    filename: str | None = None,
    source: str | None = None,
    max_depth: int = 50,
) -> Iterator[RenderContext]:
    """Set a fresh RenderContext for the duration of the with block."""
    ctx = RenderContext(
        template_name=template_name,
        filename=filename,
        source=source,
        max_depth=max_depth,
    )
    token: Token[RenderContext | None] = _render_context.set(ctx)
    try:
        yield ctx
    finally:
        _render_context.reset(token)


def set_render_context(ctx: RenderContext) -> Token[RenderContext | None]:
    """Set a RenderContext and return the reset token."""
    return _render_context.set(ctx)


def reset_render_context(token: Token[RenderContext | None]) -> None:
    """Reset render context using a token from set_render_context."""
    _render_context.reset(token)
