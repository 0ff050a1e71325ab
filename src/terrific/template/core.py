"""Terrific Template: compiled template object ready for rendering.

Architecture:
    ```
    Template
    ├── _env_ref: WeakRef[Environment]  # Prevents circular refs
    ├── _render_func: callable          # render(ctx) from compiled code
    ├── _name, _filename                # For error messages
    └── _source                         # For runtime error snippets
    ```

The namespace a template executes in supplies the component helpers the
compiler emits calls to:

    _load_template(path, caller, lineno)            → Template
    _load_component(name, variant, caller, lineno)  → Template (render-time path)
    _build_context(name, classes, modifiers, base)  → dict
    _render_component(template, context)            → str

Thread-Safety:
Templates are immutable after construction; ``render()`` keeps state only
in locals and the RenderContext ContextVar.
"""

from __future__ import annotations

import weakref
from typing import TYPE_CHECKING, Any

from terrific.components import ClassModifierSet, build_context, resolve_path
from terrific.environment.exceptions import (
    TemplateError,
    TemplateNotFoundError,
    TemplateRuntimeError,
    UnresolvableTemplateError,
    build_source_snippet,
)
from terrific.render_context import (
    get_render_context_required,
    render_context,
    reset_render_context,
    set_render_context,
)
from terrific.template.helpers import lenient_lookup, lookup, safe_getattr, str_safe

if TYPE_CHECKING:
    import types

    from terrific.environment import Environment
    from terrific.render_context import RenderContext


class Template:
    """Compiled template ready for rendering.

    Example:
            >>> from terrific import DictLoader, Environment
            >>> env = Environment(loader=DictLoader({"Nav/nav.html": "<nav class='{{ className }}'>"}))
            >>> env.from_string("{% component 'Nav' with {modifiers: 'open'} %}").render()
            "<nav class='Nav Nav--open'>"
    """

    __slots__ = ("_env_ref", "_filename", "_name", "_render_func", "_source")

    def __init__(
        self,
        env: Environment,
        code: types.CodeType,
        name: str | None,
        filename: str | None,
        source: str | None = None,
    ):
        self._env_ref: weakref.ref[Environment] = weakref.ref(env)
        self._name = name
        self._filename = filename
        self._source = source

        env_ref = self._env_ref

        def _environment() -> Environment:
            _env = env_ref()
            if _env is None:
                raise RuntimeError("Environment has been garbage collected during render")
            return _env

        def _load_template(path: str, caller: str | None, lineno: int) -> Template:
            try:
                return _environment().get_template(path)
            except TemplateNotFoundError as e:
                location = caller or "<template>"
                if lineno:
                    location += f":{lineno}"
                raise TemplateNotFoundError(f"{e} (invoked from {location})") from e

        def _load_component(
            component: str, variant: str | None, caller: str | None, lineno: int
        ) -> Template:
            _env = _environment()
            path = resolve_path(component, variant, _env.extension)
            try:
                return _env.get_template(path)
            except TemplateNotFoundError as e:
                raise UnresolvableTemplateError(component, path, caller, lineno) from e

        def _build_context(
            component: str,
            classes: tuple[str, ...],
            modifier_values: tuple[str, ...],
            base: dict[str, Any],
        ) -> dict[str, Any]:
            return build_context(
                component,
                ClassModifierSet.build(component, classes, modifier_values),
                base,
            )

        def _render_component(template: Template, context: dict[str, Any]) -> str:
            render_ctx = get_render_context_required()
            template_name = template.name or "<component>"
            render_ctx.check_depth(template_name)

            child_ctx = render_ctx.child_context(template_name, template._source)
            token = set_render_context(child_ctx)
            try:
                return template._render_func(context)
            except TemplateError:
                raise
            except Exception as e:
                raise template._enhance_error(e, child_ctx) from e
            finally:
                reset_render_context(token)

        namespace: dict[str, Any] = {
            "_str": str_safe,
            "_lookup": lookup if env.strict else lenient_lookup,
            "_getattr": safe_getattr,
            "_load_template": _load_template,
            "_load_component": _load_component,
            "_build_context": _build_context,
            "_render_component": _render_component,
            "_get_render_ctx": get_render_context_required,
        }
        exec(code, namespace)
        self._render_func = namespace["render"]

    @property
    def _env(self) -> Environment:
        env = self._env_ref()
        if env is None:
            raise RuntimeError(
                f"Environment has been garbage collected (template: {self._name or 'unknown'})"
            )
        return env

    @property
    def name(self) -> str | None:
        """Template name."""
        return self._name

    @property
    def filename(self) -> str | None:
        """Source filename."""
        return self._filename

    def render(self, *args: Any, **kwargs: Any) -> str:
        """Render template with given context.

        Args:
            *args: Single dict of context variables
            **kwargs: Context variables as keyword arguments

        Example:
            >>> t.render(title="Home")
            >>> t.render({"title": "Home"})
        """
        env = self._env
        ctx: dict[str, Any] = dict(env.globals)

        if args:
            if len(args) == 1 and isinstance(args[0], dict):
                ctx.update(args[0])
            else:
                raise TypeError(
                    f"render() takes at most 1 positional argument (a dict), got {len(args)}"
                )
        ctx.update(kwargs)

        with render_context(
            template_name=self._name,
            filename=self._filename,
            source=self._source,
            max_depth=env.max_depth,
        ) as render_ctx:
            try:
                result: str = self._render_func(ctx)
                return result
            except TemplateError:
                raise
            except Exception as e:
                raise self._enhance_error(e, render_ctx) from e

    def _enhance_error(self, error: Exception, render_ctx: RenderContext) -> TemplateRuntimeError:
        """Wrap a generic exception with template name, line and source snippet."""
        lineno = render_ctx.line
        error_str = str(error).strip() or f"{type(error).__name__} (no details available)"

        snippet = None
        if self._source and lineno:
            snippet = build_source_snippet(self._source, lineno)

        return TemplateRuntimeError(
            error_str,
            template_name=render_ctx.template_name,
            lineno=lineno or None,
            source_snippet=snippet,
            template_stack=render_ctx.template_stack,
        )

    def __repr__(self) -> str:
        return f"<Template {self._name or '(inline)'}>"
