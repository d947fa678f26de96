"""Tests for introspection/keys.py: interpolation key collection."""

from __future__ import annotations

import pytest

from i18nlexengine import collect_keys, parse_entry, parse_value
from i18nlexengine.constants import MAX_DEPTH
from i18nlexengine.context import ParseContext
from i18nlexengine.diagnostics import DepthLimitExceededError
from i18nlexengine.enums import InterpolationKind, PluralType
from i18nlexengine.introspection.keys import (
    ComponentKey,
    CountKey,
    KeyCollector,
    VariableKey,
    sort_keys,
)
from i18nlexengine.syntax.ast import Component, Key, Literal, Sequence

CONTEXT = ParseContext(locale="en", key="k")


def _var(name: str) -> VariableKey:
    return VariableKey(Key(f"var_{name}"))


def _comp(name: str) -> ComponentKey:
    return ComponentKey(Key(f"comp_{name}"))


class TestCollectKeys:
    """Traversal rules per node kind."""

    def test_literal_has_no_keys(self) -> None:
        assert collect_keys(Literal("plain")) == frozenset()

    def test_variable(self) -> None:
        assert collect_keys(parse_value("Hi {{ name }}")) == {_var("name")}

    def test_duplicate_variables_collapse(self) -> None:
        assert collect_keys(parse_value("{{ n }} of {{ n }}")) == {_var("n")}

    def test_component_includes_inner(self) -> None:
        keys = collect_keys(parse_value("<b>{{ name }}</b> and <i>x</i>"))
        assert keys == {_comp("b"), _var("name"), _comp("i")}

    def test_same_name_variable_and_component_are_distinct(self) -> None:
        keys = collect_keys(parse_value("{{ b }}<b>x</b>"))
        assert keys == {_var("b"), _comp("b")}

    def test_plural_adds_count_and_branch_keys(self) -> None:
        value = parse_entry({"one": "{{ who }} liked", "_": "<b>{{ n }}</b> people liked"}, CONTEXT)

        keys = collect_keys(value)

        assert keys == {
            CountKey(PluralType.CARDINAL),
            _var("who"),
            _var("n"),
            _comp("b"),
        }

    def test_integer_plural_count(self) -> None:
        value = parse_entry({"0": "none", "_": "some"}, CONTEXT)

        assert collect_keys(value) == {CountKey(PluralType.INTEGER)}

    def test_collection_is_idempotent(self) -> None:
        value = parse_value("<a>{{ x }}</a>{{ y }}")
        assert collect_keys(value) == collect_keys(value)

    def test_collector_accumulates_across_values(self) -> None:
        collector = KeyCollector()
        collector.visit(parse_value("{{ a }}"))
        collector.visit(parse_value("{{ b }}"))

        assert collector.keys == {_var("a"), _var("b")}


class TestInterpolationKeys:
    """Key value objects."""

    def test_count_keys_of_same_type_are_equal(self) -> None:
        assert CountKey(PluralType.CARDINAL) == CountKey(PluralType.CARDINAL)
        assert CountKey(PluralType.CARDINAL) != CountKey(PluralType.INTEGER)

    def test_count_key_identifiers(self) -> None:
        count = CountKey(PluralType.INTEGER)

        assert count.key is None
        assert count.ident == "var_count"
        assert count.real_name == "count"
        assert count.kind is InterpolationKind.COUNT

    def test_variable_key_identifiers(self) -> None:
        key = _var("name")

        assert key.ident == "var_name"
        assert key.real_name == "name"
        assert key.kind is InterpolationKind.VARIABLE

    def test_component_key_kind(self) -> None:
        assert _comp("b").kind is InterpolationKind.COMPONENT


class TestSortKeys:
    """Deterministic ordering."""

    def test_count_then_variables_then_components(self) -> None:
        keys = {_comp("a"), _var("z"), _var("b"), CountKey(PluralType.CARDINAL)}

        assert sort_keys(keys) == [
            CountKey(PluralType.CARDINAL),
            _var("b"),
            _var("z"),
            _comp("a"),
        ]

    def test_empty(self) -> None:
        assert sort_keys(frozenset()) == []


class TestDepthLimit:
    """Programmatic trees deeper than the limit are rejected."""

    def test_deep_component_chain(self) -> None:
        value: Component | Literal = Literal("x")
        for _ in range(20):
            value = Component(Key("comp_b"), value)

        with pytest.raises(DepthLimitExceededError):
            collect_keys(value, max_depth=10)

    def test_deep_sequence_nesting(self) -> None:
        value: Sequence | Literal = Literal("x")
        for _ in range(20):
            value = Sequence((value,))

        with pytest.raises(DepthLimitExceededError):
            collect_keys(value, max_depth=10)

    def test_parser_output_within_default_limit(self) -> None:
        text = "<b>" * 30 + "{{ x }}" + "</b>" * 30
        assert _var("x") in collect_keys(parse_value(text))

    def test_keys_of_long_flat_template_are_complete(self) -> None:
        """Sibling placeholders and components never hit the depth limit."""
        count = MAX_DEPTH + 20
        text = "".join("{{ v%d }}<c%d>.</c%d>" % (i, i, i) for i in range(count))

        keys = collect_keys(parse_value(text))

        assert len(keys) == 2 * count
        assert _var(f"v{count - 1}") in keys
        assert _comp(f"c{count - 1}") in keys
