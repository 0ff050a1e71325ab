"""Template loaders for Terrific environment.

Loaders provide template source to the Environment. They implement
``get_source(name)`` returning ``(source, filename)``.

Built-in Loaders:
- `DictLoader`: Load from an in-memory dictionary (testing/embedded)
- `FunctionLoader`: Wrap a callable as a loader

Custom Loaders:
Implement the Loader protocol:
    ```python
    class PatternLibraryLoader:
        def get_source(self, name: str) -> tuple[str, str | None]:
            source = library.fetch(name)
            if source is None:
                raise TemplateNotFoundError(f"Template '{name}' not found")
            return source, f"library://{name}"

        def list_templates(self) -> list[str]:
            return library.names()
    ```
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol

from terrific.environment.exceptions import TemplateNotFoundError


class Loader(Protocol):
    """Template source provider."""

    def get_source(self, name: str) -> tuple[str, str | None]: ...

    def list_templates(self) -> list[str]: ...


class DictLoader:
    """Load templates from an in-memory dictionary.

    Returns ``None`` as filename since templates are not file-backed.

    Example:
            >>> loader = DictLoader({
            ...     "Nav/nav.html": "<nav class='{{ className }}'></nav>",
            ...     "Nav/nav-primary.html": "<nav class='{{ className }} primary'></nav>",
            ... })
            >>> loader.list_templates()
            ['Nav/nav-primary.html', 'Nav/nav.html']
    """

    __slots__ = ("_mapping",)

    def __init__(self, mapping: dict[str, str]):
        self._mapping = dict(mapping)

    def get_source(self, name: str) -> tuple[str, None]:
        if name not in self._mapping:
            raise TemplateNotFoundError(f"Template '{name}' not found")
        return self._mapping[name], None

    def list_templates(self) -> list[str]:
        return sorted(self._mapping)


class FunctionLoader:
    """Wrap a callable as a loader.

    The callable receives a template name and returns either the source
    string, a ``(source, filename)`` tuple, or ``None`` when not found.

    Example:
            >>> loader = FunctionLoader(lambda name: SOURCES.get(name))
    """

    __slots__ = ("_load_func",)

    def __init__(
        self,
        load_func: Callable[[str], str | tuple[str, str | None] | None],
    ):
        self._load_func = load_func

    def get_source(self, name: str) -> tuple[str, str | None]:
        result = self._load_func(name)
        if result is None:
            raise TemplateNotFoundError(f"Template '{name}' not found")
        if isinstance(result, str):
            return result, None
        return result

    def list_templates(self) -> list[str]:
        return []
