"""Component invocation core: template resolution, data extraction, context.

Everything here is a pure function of its inputs. The compiler calls these
at compile time for components with a constant name; the runtime helpers
in ``terrific.template`` call the same functions at render time when the
name is only known then, so both paths follow one convention.

Path convention:
    resolve_path("Navigation", "Primary", ".html")
    → "Navigation/navigation-primary.html"

Context convention:
    build_context("Nav", ClassModifierSet(("a",), ("Nav--x",)), {"foo": 1})
    → {"foo": 1, "name": "Nav", "className": "Nav a Nav--x",
       "classes": ["a"], "modifiers": ["Nav--x"]}
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from terrific.environment.exceptions import InvalidInvocationData
from terrific.nodes import Component, Const, Dict, Expr, List

CLASSES_KEY = "classes"
MODIFIER_KEYS = frozenset({"modifier", "modifiers"})
MODIFIER_SEPARATOR = "--"

# Keys computed per invocation; these always override the caller's context.
CONTEXT_KEYS = ("name", "className", "classes", "modifiers")


# ---------------------------------------------------------------------------
# Invocation resolver
# ---------------------------------------------------------------------------


def resolve_path(name: str, variant: str | None, extension: str) -> str:
    """Return ``<name>/<name-lower>[-<variant-lower>]<extension>``."""
    suffix = f"-{variant.lower()}" if variant else ""
    return f"{name}/{name.lower()}{suffix}{extension}"


@dataclass(frozen=True, slots=True)
class StaticTemplate:
    """Template path known at compile time."""

    name: str
    path: str


@dataclass(frozen=True, slots=True)
class DeferredTemplate:
    """Component name is an expression; resolve the path at render time."""

    name: Expr
    variant: str | None


TemplateRef = StaticTemplate | DeferredTemplate


def resolve_template(node: Component, extension: str) -> TemplateRef:
    """Choose compile-time or render-time resolution for ``node``.

    Only a string constant name is resolved now; anything else is deferred.
    """
    if isinstance(node.name, Const) and isinstance(node.name.value, str):
        name = node.name.value
        return StaticTemplate(name=name, path=resolve_path(name, node.variant, extension))
    return DeferredTemplate(name=node.name, variant=node.variant)


# ---------------------------------------------------------------------------
# Data extractor
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class ConstantValue:
    """A single constant: ``classes: 'a'``."""

    value: str


@dataclass(frozen=True, slots=True)
class ListValue:
    """A list of constants: ``classes: ['a', 'b']``."""

    items: tuple[str, ...]


def classify_value(value: Expr, component: str, key: str) -> ConstantValue | ListValue:
    """Decide the shape of a ``classes``/``modifier`` value.

    Raises:
        InvalidInvocationData: If the value is neither a constant nor a
            list made only of constants.
    """
    if isinstance(value, Const):
        return ConstantValue(_stringify(value.value))
    if isinstance(value, List):
        items: list[str] = []
        for item in value.items:
            if not isinstance(item, Const):
                raise InvalidInvocationData(
                    component,
                    f"'{key}' list items must be constants, got {type(item).__name__}",
                )
            items.append(_stringify(item.value))
        return ListValue(tuple(items))
    raise InvalidInvocationData(
        component,
        f"'{key}' must be a constant or a list of constants, got {type(value).__name__}",
    )


def _stringify(value: object) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _values_of(shape: ConstantValue | ListValue) -> tuple[str, ...]:
    # empty strings (from null or '') would leave gaps in className
    if isinstance(shape, ConstantValue):
        return (shape.value,) if shape.value else ()
    return tuple(item for item in shape.items if item)


def extract_values(data: Expr | None, component: str) -> tuple[tuple[str, ...], tuple[str, ...]]:
    """Return raw ``(classes, modifier_values)`` from a data hash, in source order.

    Modifier values are not yet prefixed. Empty values are dropped. Keys
    other than ``classes``, ``modifier`` and ``modifiers`` are ignored.
    """
    if data is None:
        return (), ()
    if not isinstance(data, Dict):
        raise InvalidInvocationData(
            component,
            f"expected a hash of key/value pairs, got {type(data).__name__}",
        )

    classes: list[str] = []
    modifiers: list[str] = []
    for key, value in data.pairs():
        if not isinstance(key, Const):
            continue
        if key.value == CLASSES_KEY:
            classes.extend(_values_of(classify_value(value, component, CLASSES_KEY)))
        elif key.value in MODIFIER_KEYS:
            modifiers.extend(_values_of(classify_value(value, component, str(key.value))))
    return tuple(classes), tuple(modifiers)


@dataclass(frozen=True, slots=True)
class ClassModifierSet:
    """Classes and prefixed modifiers of one invocation."""

    classes: tuple[str, ...] = ()
    modifiers: tuple[str, ...] = ()

    @classmethod
    def build(
        cls,
        name: str,
        classes: tuple[str, ...],
        modifier_values: tuple[str, ...],
    ) -> ClassModifierSet:
        """Prefix each modifier with ``<name>--``.

        A class equal to ``name`` is dropped; ``className`` already starts
        with it.
        """
        return cls(
            classes=tuple(c for c in classes if c != name),
            modifiers=tuple(f"{name}{MODIFIER_SEPARATOR}{m}" for m in modifier_values),
        )


def extract(data: Expr | None, component: str) -> ClassModifierSet:
    """Extract classes and ``<component>--`` prefixed modifiers from ``data``."""
    classes, modifier_values = extract_values(data, component)
    return ClassModifierSet.build(component, classes, modifier_values)


# ---------------------------------------------------------------------------
# Context builder
# ---------------------------------------------------------------------------


def class_name(name: str, modifier_set: ClassModifierSet) -> str:
    """Space-join the name, classes and modifiers."""
    return " ".join((name, *modifier_set.classes, *modifier_set.modifiers))


def component_fields(name: str, modifier_set: ClassModifierSet) -> dict[str, Any]:
    """The four computed keys, in ``CONTEXT_KEYS`` order."""
    return {
        "name": name,
        "className": class_name(name, modifier_set),
        "classes": list(modifier_set.classes),
        "modifiers": list(modifier_set.modifiers),
    }


def build_context(
    name: str,
    modifier_set: ClassModifierSet,
    caller_context: Mapping[str, Any],
) -> dict[str, Any]:
    """Shallow-merge the computed fields over ``caller_context``."""
    context = dict(caller_context)
    context.update(component_fields(name, modifier_set))
    return context
