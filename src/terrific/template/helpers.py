"""Runtime helpers bound into every compiled template's namespace."""

from __future__ import annotations

from typing import Any


def str_safe(value: Any) -> str:
    """Convert to string, rendering None as empty."""
    if value is None:
        return ""
    return str(value)


def lookup(ctx: dict[str, Any], var_name: str) -> Any:
    """Look up a variable in strict mode.

    Undefined variables raise UndefinedError with the template name, line
    and a "did you mean" hint drawn from the names that are defined.
    """
    from terrific.environment.exceptions import UndefinedError, build_source_snippet
    from terrific.render_context import get_render_context

    try:
        return ctx[var_name]
    except KeyError:
        render_ctx = get_render_context()
        template_name = render_ctx.template_name if render_ctx else None
        lineno = render_ctx.line if render_ctx else None
        source = render_ctx.source if render_ctx else None
        snippet = build_source_snippet(source, lineno) if source and lineno else None
        raise UndefinedError(
            var_name,
            template_name,
            lineno,
            available_names=frozenset(ctx.keys()),
            source_snippet=snippet,
        ) from None


def lenient_lookup(ctx: dict[str, Any], var_name: str) -> Any:
    """Look up a variable, returning None when it is undefined."""
    return ctx.get(var_name)


def safe_getattr(obj: Any, name: str) -> Any:
    """Attribute access with dict fallback.

    Dicts try subscript first so keys like ``items`` resolve to user data
    rather than the dict method; objects try getattr first. Missing
    attributes and None objects yield None.
    """
    if obj is None:
        return None
    if isinstance(obj, dict):
        try:
            return obj[name]
        except KeyError:
            return getattr(obj, name, None)
    try:
        return getattr(obj, name)
    except AttributeError:
        try:
            return obj[name]
        except (KeyError, TypeError, IndexError):
            return None
