"""Property-based tests for component resolution and extraction."""

from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

from terrific import DictLoader, Environment
from terrific.components import ClassModifierSet, class_name, extract, resolve_path

from .conftest import hash_of, str_list
from .strategies import component_name, css_tokens, extension, unknown_key, variant


@given(name=component_name, variant=variant, ext=extension)
def test_resolve_path_shape(name: str, variant: str | None, ext: str) -> None:
    path = resolve_path(name, variant, ext)
    directory, _, filename = path.partition("/")
    assert directory == name
    assert filename.startswith(name.lower())
    assert filename.endswith(ext)
    if variant:
        assert f"-{variant.lower()}" in filename
    else:
        assert filename == name.lower() + ext


@given(name=component_name, classes=css_tokens, modifiers=css_tokens)
def test_extract_preserves_order(name: str, classes: list[str], modifiers: list[str]) -> None:
    data = hash_of(("classes", str_list(*classes)), ("modifiers", str_list(*modifiers)))
    result = extract(data, name)
    assert result.classes == tuple(classes)
    assert result.modifiers == tuple(f"{name}--{m}" for m in modifiers)


@given(name=component_name, key=unknown_key, values=css_tokens)
def test_unknown_keys_ignored(name: str, key: str, values: list[str]) -> None:
    assert extract(hash_of((key, str_list(*values))), name) == ClassModifierSet()


@given(name=component_name, classes=css_tokens, modifiers=css_tokens)
def test_class_name_starts_with_name(
    name: str, classes: list[str], modifiers: list[str]
) -> None:
    modifier_set = ClassModifierSet.build(name, tuple(classes), tuple(modifiers))
    tokens = class_name(name, modifier_set).split(" ")
    assert tokens[0] == name
    assert tokens[1:] == [*classes, *modifier_set.modifiers]


@given(classes=css_tokens, modifiers=css_tokens)
def test_rendered_class_name(classes: list[str], modifiers: list[str]) -> None:
    env = Environment(loader=DictLoader({"Badge/badge.html": "{{ className }}"}))
    data = "{classes: [%s], modifiers: [%s]}" % (
        ", ".join(f"'{c}'" for c in classes),
        ", ".join(f"'{m}'" for m in modifiers),
    )
    result = env.from_string(f"{{% component 'Badge' with {data} %}}").render()
    assert result == " ".join(["Badge", *classes, *(f"Badge--{m}" for m in modifiers)])


@given(name=st.sampled_from(["Nav", "Card"]))
def test_static_and_dynamic_agree(name: str) -> None:
    env = Environment(
        loader=DictLoader(
            {"Nav/nav.html": "{{ className }}", "Card/card.html": "[{{ className }}]"}
        )
    )
    static = env.from_string(f"{{% component '{name}' with {{modifiers: 'x'}} %}}").render()
    dynamic = env.from_string("{% view comp {modifiers: 'x'} %}").render(comp=name)
    assert static == dynamic
