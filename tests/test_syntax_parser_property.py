"""Property-based tests for the value parser.

Parsing is total and lossless: every input yields a tree, the tree is flat,
and rendering it back reproduces the input.
"""

from __future__ import annotations

import re

import pytest
from hypothesis import event, given, settings
from hypothesis import strategies as st

from i18nlexengine.introspection.keys import ComponentKey, VariableKey, collect_keys
from i18nlexengine.syntax.ast import Literal, Sequence, flatten
from i18nlexengine.syntax.parser import parse_value
from tests.helpers.ast_checks import has_nested_sequence, render_source
from tests.strategies import markup_text, plain_text, templates

_VARIABLE_NAMES = re.compile(r"\{\{([a-z][a-z0-9_]*)\}\}")
_COMPONENT_NAMES = re.compile(r"<([a-z][a-z0-9_]*)>")


class TestParserTotality:
    """No input is rejected."""

    @given(st.text(max_size=80))
    def test_any_text_parses(self, text: str) -> None:
        value = parse_value(text)
        event(f"root={type(value).__name__}")
        assert isinstance(value, (Literal, Sequence))

    @given(plain_text())
    def test_text_without_delimiters_is_literal(self, text: str) -> None:
        assert parse_value(text) == Literal(text)


class TestParserStructure:
    """Shape of parser output."""

    @given(markup_text())
    def test_markup_output_is_flat(self, text: str) -> None:
        assert not has_nested_sequence(parse_value(text))

    @given(templates())
    def test_template_output_is_flat(self, source: str) -> None:
        assert not has_nested_sequence(parse_value(source))

    @given(markup_text())
    def test_flatten_drops_only_empty_literals(self, text: str) -> None:
        leaves = flatten(parse_value(text))
        assert Literal("") not in leaves
        assert all(not isinstance(leaf, Sequence) for leaf in leaves)


class TestParserRoundTrip:
    """Rendering a parsed value reproduces its source."""

    @given(markup_text())
    def test_markup_round_trip(self, text: str) -> None:
        assert render_source(parse_value(text)) == text

    @given(templates())
    def test_template_round_trip(self, source: str) -> None:
        assert render_source(parse_value(source)) == source


class TestParserKeys:
    """Well-formed templates expose exactly their authored names."""

    @given(templates())
    def test_collected_keys_match_source(self, source: str) -> None:
        keys = collect_keys(parse_value(source))

        variables = {k.real_name for k in keys if isinstance(k, VariableKey)}
        components = {k.real_name for k in keys if isinstance(k, ComponentKey)}

        assert variables == set(_VARIABLE_NAMES.findall(source))
        assert components == set(_COMPONENT_NAMES.findall(source))
        event(f"key_count={len(keys)}")


@pytest.mark.fuzz
class TestParserFuzz:
    """Long dense inputs; run with: pytest -m fuzz"""

    @given(markup_text(max_size=400))
    @settings(max_examples=2000, deadline=None)
    def test_dense_markup_round_trip(self, text: str) -> None:
        value = parse_value(text)
        assert render_source(value) == text
        assert not has_nested_sequence(value)
