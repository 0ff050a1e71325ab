"""Terrific Environment: configuration and compile pipeline.

    source → tokenize → Parser → Compiler → Template

Configuration is passed as keyword arguments:

    ```python
    env = Environment(
        loader=DictLoader({...}),
        extension=".twig",                       # component file suffix
        context_provider=StandardContextProvider(),
        strict=True,                             # undefined vars raise
        max_depth=50,                            # component nesting limit
        globals={"site": site},
    )
    ```

Templates are compiled on every ``get_template()`` call; callers that
render the same template repeatedly should keep the returned Template.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from terrific.compiler import Compiler
from terrific.context import StandardContextProvider
from terrific.environment.exceptions import TemplateNotFoundError
from terrific.lexer import tokenize
from terrific.parser import Parser
from terrific.template import Template

if TYPE_CHECKING:
    from terrific.context import ContextProvider
    from terrific.environment.loaders import Loader
    from terrific.nodes import Template as TemplateNode

logger = logging.getLogger(__name__)

DEFAULT_EXTENSION = ".html"
DEFAULT_MAX_DEPTH = 50


class Environment:
    """Central configuration for compiling and rendering templates.

    Attributes:
        loader: Template source provider (None for from_string-only use)
        extension: File suffix appended to component template paths
        context_provider: Builds the merge base for component contexts
        strict: Raise UndefinedError for undefined variables
        max_depth: Maximum component nesting depth at render time
        globals: Variables available in every template
    """

    def __init__(
        self,
        loader: Loader | None = None,
        *,
        extension: str = DEFAULT_EXTENSION,
        context_provider: ContextProvider | None = None,
        strict: bool = True,
        max_depth: int = DEFAULT_MAX_DEPTH,
        globals: dict[str, Any] | None = None,
    ):
        if max_depth < 1:
            raise ValueError(f"max_depth must be at least 1, got {max_depth}")
        self.loader = loader
        self.extension = extension
        self.context_provider = context_provider or StandardContextProvider()
        self.strict = strict
        self.max_depth = max_depth
        self.globals: dict[str, Any] = dict(globals or {})

    def parse(self, source: str, name: str | None = None, filename: str | None = None) -> TemplateNode:
        """Tokenize and parse ``source`` into a Template node."""
        tokens = tokenize(source, name)
        return Parser(tokens, name=name, filename=filename, source=source).parse()

    def from_string(self, source: str, name: str | None = None) -> Template:
        """Compile a template from a source string."""
        return self._compile(source, name, None)

    def get_template(self, name: str) -> Template:
        """Load and compile a template by name.

        Raises:
            TemplateNotFoundError: If there is no loader or it has no such template
        """
        if self.loader is None:
            raise TemplateNotFoundError(
                f"Template '{name}' not found: no loader configured"
            )
        source, filename = self.loader.get_source(name)
        return self._compile(source, name, filename)

    def _compile(self, source: str, name: str | None, filename: str | None) -> Template:
        logger.debug("Compiling template %s", name or "<string>")
        tree = self.parse(source, name, filename)
        code = Compiler(self).compile(tree, name=name, filename=filename)
        return Template(self, code, name, filename, source=source)

    def __repr__(self) -> str:
        return f"<Environment extension={self.extension!r} loader={self.loader!r}>"
