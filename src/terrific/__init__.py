"""Terrific: component tags for an AST-native template compiler.

``{% component %}`` and ``{% view %}`` compile into a single call that
loads a component's template and renders it with a computed context:
the component ``name``, its ``classes``, its ``modifiers`` (prefixed with
``<name>--``) and a ready-to-use ``className`` string.

Quickstart:
    >>> from terrific import DictLoader, Environment
    >>> env = Environment(loader=DictLoader({
    ...     "Navigation/navigation.html": '<nav class="{{ className }}"></nav>',
    ... }))
    >>> env.from_string(
    ...     "{% component 'Navigation' with {classes: 'main', modifiers: ['open']} %}"
    ... ).render()
    '<nav class="Navigation main Navigation--open"></nav>'

Tag forms:
    {% component 'Name' %}
    {% component 'Name' 'variant' %}               → Name/name-variant.html
    {% component 'Name' with {classes: [...], modifiers: [...]} %}
    {% component 'Name' 'variant' with {...} only %}
    {% view expr [{data}] [only] %}                 → resolved at render time
                                                      when expr is not a string

Architecture:
Template Source → Lexer → Parser → AST → Compiler → Python AST → exec()

A constant component name is resolved and its class/modifier fields are
folded to constants at compile time. Any other name expression defers
path resolution and field building to render time, using the same
functions from ``terrific.components``.
"""

# environment first: it pulls in the compiler, which imports terrific.components
from terrific.environment import (
    DictLoader,
    Environment,
    ErrorCode,
    FunctionLoader,
    InvalidInvocationData,
    TemplateError,
    TemplateNotFoundError,
    TemplateRuntimeError,
    TemplateSyntaxError,
    UndefinedError,
    UnresolvableTemplateError,
)
from terrific.components import (
    ClassModifierSet,
    build_context,
    extract,
    resolve_path,
)
from terrific.context import ContextProvider, IsolatedContextProvider, StandardContextProvider
from terrific.template import Template

__version__ = "0.1.0"

__all__ = [
    "ClassModifierSet",
    "ContextProvider",
    "DictLoader",
    "Environment",
    "ErrorCode",
    "FunctionLoader",
    "InvalidInvocationData",
    "IsolatedContextProvider",
    "StandardContextProvider",
    "Template",
    "TemplateError",
    "TemplateNotFoundError",
    "TemplateRuntimeError",
    "TemplateSyntaxError",
    "UndefinedError",
    "UnresolvableTemplateError",
    "build_context",
    "extract",
    "resolve_path",
]
