"""Exceptions for Terrific templates.

Exception Hierarchy:
TemplateError (base)
├── TemplateNotFoundError         # Template not found by loader
│   └── UnresolvableTemplateError # Dynamic component name has no template
├── TemplateSyntaxError           # Lex/parse-time syntax error
├── InvalidInvocationData         # Component data block has the wrong shape
├── TemplateRuntimeError          # Render-time error with context
└── UndefinedError                # Undefined variable access (strict mode)

Every exception carries an optional ErrorCode so failures can be grepped
for in logs and CI output:

    T-CMP-001: Invalid data passed to component 'Nav' in page.html:3
      Hint: Pass a mapping such as {classes: ['a'], modifiers: ['active']}

"""

from __future__ import annotations

from dataclasses import dataclass
from difflib import get_close_matches
from enum import Enum


class ErrorCode(Enum):
    """Searchable error codes.

    Format: T-{CATEGORY}-{NUMBER}
    Categories: LEX (lexer), PAR (parser), CMP (component compilation),
    RUN (runtime), TPL (template loading)
    """

    # Lexer errors (T-LEX-xxx)
    UNCLOSED_TAG = "T-LEX-001"
    UNEXPECTED_TOKEN = "T-LEX-002"

    # Parser errors (T-PAR-xxx)
    INVALID_EXPRESSION = "T-PAR-001"
    UNKNOWN_TAG = "T-PAR-002"
    INVALID_TAG_ARGUMENTS = "T-PAR-003"

    # Component compilation errors (T-CMP-xxx)
    INVALID_INVOCATION_DATA = "T-CMP-001"

    # Runtime errors (T-RUN-xxx)
    UNDEFINED_VARIABLE = "T-RUN-001"
    COMPONENT_DEPTH = "T-RUN-002"
    RUNTIME_ERROR = "T-RUN-003"

    # Template loading errors (T-TPL-xxx)
    TEMPLATE_NOT_FOUND = "T-TPL-001"
    UNRESOLVABLE_TEMPLATE = "T-TPL-002"
    SYNTAX_ERROR = "T-TPL-003"

    @property
    def category(self) -> str:
        """Error category (e.g., 'runtime', 'lexer', 'parser', 'template')."""
        prefix = self.value.split("-")[1]
        return {
            "LEX": "lexer",
            "PAR": "parser",
            "CMP": "compiler",
            "RUN": "runtime",
            "TPL": "template",
        }.get(prefix, "unknown")


# ---------------------------------------------------------------------------
# Source snippets
# ---------------------------------------------------------------------------


def format_template_stack(stack: list[tuple[str, int]] | None) -> str:
    """Format the component call chain for error messages.

    Example:
        >>> print(format_template_stack([("page.html", 4), ("Nav/nav.html", 2)]))
        Template stack:
          • page.html:4
          • Nav/nav.html:2
    """
    if not stack:
        return ""
    lines = ["Template stack:"]
    lines.extend(f"  • {name}:{line}" for name, line in stack)
    return "\n".join(lines)


@dataclass(frozen=True, slots=True)
class SourceSnippet:
    """Template source lines around an error line."""

    lines: tuple[tuple[int, str], ...]
    error_line: int
    column: int | None = None

    def format(self) -> str:
        parts = ["   |"]
        for lineno, content in self.lines:
            marker = ">" if lineno == self.error_line else " "
            parts.append(f"{marker}{lineno:>2} | {content}")
        if self.column is not None:
            parts.append(f"   | {' ' * self.column}^")
        parts.append("   |")
        return "\n".join(parts)


def build_source_snippet(
    source: str,
    error_line: int,
    *,
    context_lines: int = 2,
    column: int | None = None,
) -> SourceSnippet:
    """Build a SourceSnippet with ``context_lines`` lines either side of the error."""
    all_lines = source.splitlines()
    start = max(0, error_line - 1 - context_lines)
    end = min(len(all_lines), error_line + context_lines)
    lines = tuple((i + 1, all_lines[i]) for i in range(start, end))
    return SourceSnippet(lines=lines, error_line=error_line, column=column)


class TemplateError(Exception):
    """Base exception for all Terrific template errors.

    Attributes:
        code: Optional ErrorCode for searchable error identification.
    """

    code: ErrorCode | None = None

    def format_compact(self) -> str:
        """Format error as a one-screen diagnostic, prefixed with its code."""
        header = str(self)
        if self.code and self.code.value not in header:
            header = f"{self.code.value}: {header}"
        return header


class TemplateNotFoundError(TemplateError):
    """Template not found by the configured loader."""

    code: ErrorCode | None = ErrorCode.TEMPLATE_NOT_FOUND


class UnresolvableTemplateError(TemplateNotFoundError):
    """A component whose name was only known at render time has no template.

    Raised by the deferred lookup emitted for ``{% view some_var %}``; the
    message carries both the evaluated component name and the path it was
    resolved to.
    """

    code: ErrorCode | None = ErrorCode.UNRESOLVABLE_TEMPLATE

    def __init__(
        self,
        component: str,
        path: str,
        template_name: str | None = None,
        lineno: int | None = None,
    ):
        self.component = component
        self.path = path
        self.template_name = template_name
        self.lineno = lineno
        location = template_name or "<template>"
        if lineno:
            location += f":{lineno}"
        super().__init__(
            f"Component '{component}' could not be resolved: "
            f"template '{path}' not found (invoked from {location})"
        )


class TemplateSyntaxError(TemplateError):
    """Parse-time syntax error in template source.

    When ``source`` and ``lineno`` are provided, the message includes the
    offending line, and a caret when ``col_offset`` is known.
    """

    code: ErrorCode | None = ErrorCode.SYNTAX_ERROR

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        name: str | None = None,
        filename: str | None = None,
        source: str | None = None,
        col_offset: int | None = None,
        suggestion: str | None = None,
    ):
        self.message = message
        self.lineno = lineno
        self.name = name
        self.filename = filename
        self.source = source
        self.col_offset = col_offset
        self.suggestion = suggestion
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        location = self.filename or self.name or "<template>"
        if self.lineno:
            location += f":{self.lineno}"
            if self.col_offset is not None:
                location += f":{self.col_offset}"

        msg = f"Syntax Error: {self.message}\n  --> {location}"

        if self.source and self.lineno:
            lines = self.source.splitlines()
            if 0 < self.lineno <= len(lines):
                msg += f"\n   |\n{self.lineno:>3} | {lines[self.lineno - 1]}"
                if self.col_offset is not None:
                    msg += f"\n   | {' ' * self.col_offset}^"

        if self.suggestion:
            msg += f"\n\nSuggestion: {self.suggestion}"
        return msg


class InvalidInvocationData(TemplateError):
    """A component's data block is not a usable key/value mapping.

    Raised at compile time when the data passed to ``{% component %}`` or
    ``{% view %}`` is not a literal hash, or when its ``classes`` /
    ``modifier(s)`` entry is neither a constant nor a list of constants.
    Compilation of the containing template is aborted.
    """

    code: ErrorCode | None = ErrorCode.INVALID_INVOCATION_DATA

    def __init__(
        self,
        component: str,
        reason: str,
        *,
        template_name: str | None = None,
        lineno: int | None = None,
    ):
        self.component = component
        self.reason = reason
        self.template_name = template_name
        self.lineno = lineno
        super().__init__(self._format_message())

    def located(self, template_name: str | None, lineno: int) -> InvalidInvocationData:
        """Return a copy of this error tagged with the invoking source location."""
        return InvalidInvocationData(
            self.component, self.reason, template_name=template_name, lineno=lineno
        )

    def _format_message(self) -> str:
        msg = f"Invalid data passed to component '{self.component}'"
        if self.template_name or self.lineno:
            location = self.template_name or "<template>"
            if self.lineno:
                location += f":{self.lineno}"
            msg += f" in {location}"
        msg += f": {self.reason}"
        msg += "\n  Hint: Pass a mapping such as {classes: ['a'], modifiers: ['active']}"
        return msg


class TemplateRuntimeError(TemplateError):
    """Render-time error with template name, line and source context."""

    code: ErrorCode | None = ErrorCode.RUNTIME_ERROR

    def __init__(
        self,
        message: str,
        *,
        template_name: str | None = None,
        lineno: int | None = None,
        suggestion: str | None = None,
        source_snippet: SourceSnippet | None = None,
        template_stack: list[tuple[str, int]] | None = None,
    ):
        self.message = message
        self.template_name = template_name
        self.lineno = lineno
        self.suggestion = suggestion
        self.source_snippet = source_snippet
        self.template_stack = template_stack or []
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        parts = [f"Runtime Error: {self.message}"]

        if self.template_name or self.lineno:
            loc = self.template_name or "<template>"
            if self.lineno:
                loc += f":{self.lineno}"
            parts.append(f"  Location: {loc}")

        if self.source_snippet:
            parts.append(self.source_snippet.format())

        if self.template_stack:
            parts.append("")
            parts.append(format_template_stack(self.template_stack))

        if self.suggestion:
            parts.append(f"\n  Suggestion: {self.suggestion}")

        return "\n".join(parts)


class UndefinedError(TemplateError):
    """Raised when a strict-mode template reads an undefined variable.

    If ``available_names`` is provided, a "Did you mean?" suggestion is
    added when a close match exists.
    """

    code: ErrorCode | None = ErrorCode.UNDEFINED_VARIABLE

    def __init__(
        self,
        name: str,
        template: str | None = None,
        lineno: int | None = None,
        available_names: frozenset[str] | None = None,
        source_snippet: SourceSnippet | None = None,
    ):
        self.name = name
        self.template = template or "<template>"
        self.lineno = lineno
        self._available_names = available_names
        self.source_snippet = source_snippet
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        location = self.template
        if self.lineno:
            location += f":{self.lineno}"
        msg = f"Undefined variable '{self.name}' in {location}"

        if self._available_names:
            matches = get_close_matches(self.name, self._available_names, n=1, cutoff=0.6)
            if matches:
                msg += f". Did you mean '{matches[0]}'?"

        if self.source_snippet:
            msg += "\n" + self.source_snippet.format()

        return msg
