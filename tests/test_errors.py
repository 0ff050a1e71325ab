"""Tests for render-time errors and error formatting."""

from __future__ import annotations

import pytest

from terrific import (
    Environment,
    ErrorCode,
    InvalidInvocationData,
    TemplateRuntimeError,
    TemplateSyntaxError,
    UndefinedError,
)
from terrific.environment.exceptions import build_source_snippet, format_template_stack


class Exploding:
    def __str__(self) -> str:
        raise ValueError("boom")


class TestComponentDepth:
    """Self-rendering components stop at max_depth."""

    def test_loop_hits_limit(self, loader) -> None:
        env = Environment(loader=loader, max_depth=5)
        with pytest.raises(TemplateRuntimeError) as exc_info:
            env.get_template("Loop/loop.html").render()
        err = exc_info.value
        assert err.code == ErrorCode.COMPONENT_DEPTH
        assert "Maximum component depth exceeded (5)" in str(err)
        assert err.template_stack
        assert all(name == "Loop/loop.html" for name, _ in err.template_stack)

    def test_nesting_below_limit(self, loader) -> None:
        env = Environment(loader=loader, max_depth=2)
        assert env.from_string("{% component 'Page' %}").render() == (
            "<main>Badge|Badge Badge--inner</main>"
        )


class TestRuntimeErrors:
    """Generic exceptions are wrapped with template location."""

    def test_error_inside_component(self, env: Environment) -> None:
        template = env.from_string("{% component 'Broken' %}", name="page.html")
        with pytest.raises(TemplateRuntimeError) as exc_info:
            template.render(obj=Exploding())
        err = exc_info.value
        assert err.template_name == "Broken/broken.html"
        assert err.lineno == 1
        assert ("page.html", 1) in err.template_stack
        assert "boom" in err.message
        assert "Template stack:" in str(err)
        assert isinstance(err.__cause__, ValueError)

    def test_error_at_top_level(self, env: Environment) -> None:
        template = env.from_string("a\n{{ obj }}", name="t.html")
        with pytest.raises(TemplateRuntimeError) as exc_info:
            template.render(obj=Exploding())
        err = exc_info.value
        assert err.lineno == 2
        assert err.source_snippet is not None
        assert "t.html:2" in str(err)
        assert err.code == ErrorCode.RUNTIME_ERROR


class TestUndefined:
    """Strict and lenient variable lookup."""

    def test_strict_raises_with_hint(self, env: Environment) -> None:
        with pytest.raises(UndefinedError) as exc_info:
            env.from_string("{{ titel }}", name="x.html").render(title="x")
        err = exc_info.value
        assert err.code == ErrorCode.UNDEFINED_VARIABLE
        assert "Undefined variable 'titel' in x.html:1" in str(err)
        assert "Did you mean 'title'?" in str(err)

    def test_strict_inside_component(self, env: Environment) -> None:
        with pytest.raises(UndefinedError) as exc_info:
            env.from_string("{% component 'Echo' only %}").render()
        assert "Echo/echo.html" in str(exc_info.value)

    def test_lenient_renders_empty(self, lenient_env: Environment) -> None:
        assert lenient_env.from_string("[{{ missing }}]").render() == "[]"

    def test_lenient_attribute_chain(self, lenient_env: Environment) -> None:
        assert lenient_env.from_string("[{{ a.b.c }}]").render() == "[]"


class TestFormatting:
    """Codes, compact formatting and snippets."""

    def test_format_compact_prefixes_code(self) -> None:
        err = InvalidInvocationData("Nav", "bad", template_name="page.html", lineno=3)
        compact = err.format_compact()
        assert compact.startswith("T-CMP-001: Invalid data passed to component 'Nav'")
        assert "page.html:3" in compact

    def test_format_compact_without_code(self) -> None:
        err = TemplateRuntimeError("x")
        err.code = None
        assert err.format_compact() == str(err)

    @pytest.mark.parametrize(
        ("code", "category"),
        [
            (ErrorCode.UNCLOSED_TAG, "lexer"),
            (ErrorCode.UNKNOWN_TAG, "parser"),
            (ErrorCode.INVALID_INVOCATION_DATA, "compiler"),
            (ErrorCode.COMPONENT_DEPTH, "runtime"),
            (ErrorCode.UNRESOLVABLE_TEMPLATE, "template"),
        ],
    )
    def test_categories(self, code: ErrorCode, category: str) -> None:
        assert code.category == category

    def test_runtime_error_sections(self) -> None:
        err = TemplateRuntimeError(
            "boom",
            template_name="Nav/nav.html",
            lineno=2,
            template_stack=[("page.html", 4)],
            suggestion="Check obj",
        )
        assert str(err) == (
            "Runtime Error: boom\n"
            "  Location: Nav/nav.html:2\n"
            "\n"
            "Template stack:\n"
            "  • page.html:4\n"
            "\n  Suggestion: Check obj"
        )

    def test_runtime_error_takes_only_location_context(self) -> None:
        with pytest.raises(TypeError):
            TemplateRuntimeError("boom", values={"x": 1})

    def test_template_stack(self) -> None:
        assert format_template_stack([("page.html", 4), ("Nav/nav.html", 2)]) == (
            "Template stack:\n  • page.html:4\n  • Nav/nav.html:2"
        )
        assert format_template_stack([]) == ""

    def test_source_snippet(self) -> None:
        snippet = build_source_snippet("one\ntwo\nthree\nfour", 3, context_lines=1)
        assert snippet.lines == ((2, "two"), (3, "three"), (4, "four"))
        assert "> 3 | three" in snippet.format()

    def test_syntax_error_through_environment(self, env: Environment) -> None:
        with pytest.raises(TemplateSyntaxError):
            env.from_string("{% component %}")
