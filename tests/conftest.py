"""Pytest configuration and fixtures for Terrific tests."""

from __future__ import annotations

import pytest

from terrific import DictLoader, Environment
from terrific.nodes import Const, Dict, Expr, List

COMPONENT_TEMPLATES = {
    "Nav/nav.html": '<nav class="{{ className }}"></nav>',
    "Nav/nav-primary.html": '<nav class="{{ className }} primary"></nav>',
    "Card/card.html": '<div class="{{ className }}">{{ title }}</div>',
    "Badge/badge.html": "{{ name }}|{{ className }}",
    "Echo/echo.html": "{{ foo }}|{{ className }}",
    "Lists/lists.html": "{{ classes }}|{{ modifiers }}",
    "Page/page.html": "<main>{% component 'Badge' with {modifiers: 'inner'} %}</main>",
    "Loop/loop.html": "{% component 'Loop' %}",
    "Broken/broken.html": "<p>{{ obj }}</p>",
}


@pytest.fixture
def loader() -> DictLoader:
    """DictLoader holding the component templates used across tests."""
    return DictLoader(COMPONENT_TEMPLATES)


@pytest.fixture
def env(loader: DictLoader) -> Environment:
    """Strict Environment with the component templates."""
    return Environment(loader=loader)


@pytest.fixture
def lenient_env(loader: DictLoader) -> Environment:
    """Non-strict Environment: undefined variables render empty."""
    return Environment(loader=loader, strict=False)


def const(value: str | int | float | bool | None, lineno: int = 1) -> Const:
    return Const(lineno=lineno, col_offset=0, value=value)


def str_list(*items: str) -> List:
    return List(lineno=1, col_offset=0, items=tuple(const(i) for i in items))


def hash_of(*pairs: tuple[str, Expr]) -> Dict:
    """Build a Dict node from ``(key, value)`` pairs, keeping their order."""
    return Dict(
        lineno=1,
        col_offset=0,
        keys=tuple(const(k) for k, _ in pairs),
        values=tuple(v for _, v in pairs),
    )
