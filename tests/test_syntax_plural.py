"""Tests for syntax/plural.py: selector grammar and plural type inference."""

from __future__ import annotations

import pytest
from hypothesis import event, given
from hypothesis import strategies as st

from i18nlexengine.enums import PluralCategory, PluralType
from i18nlexengine.syntax.ast import CategoryForm, FallbackForm, RangeForm
from i18nlexengine.syntax.plural import (
    covers_all_integers,
    infer_plural_type,
    parse_plural_form,
    requires_fallback,
)
from tests.strategies import plural_selectors


class TestParsePluralForm:
    """Selector grammar."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("_", FallbackForm("_")),
            ("other", FallbackForm("other")),
            ("zero", CategoryForm(PluralCategory.ZERO)),
            ("many", CategoryForm(PluralCategory.MANY)),
            ("0", RangeForm(0, 0)),
            ("-3", RangeForm(-3, -3)),
            ("+7", RangeForm(7, 7)),
            ("2..5", RangeForm(2, 5)),
            ("2 .. 5", RangeForm(2, 5)),
            ("..0", RangeForm(None, 0)),
            ("10..", RangeForm(10, None)),
            ("..", RangeForm(None, None)),
            ("-5..-1", RangeForm(-5, -1)),
            ("4..4", RangeForm(4, 4)),
            ("  one  ", CategoryForm(PluralCategory.ONE)),
        ],
    )
    def test_valid(self, raw: str, expected: object) -> None:
        assert parse_plural_form(raw) == expected

    @pytest.mark.parametrize(
        "raw", ["", "ONE", "others", "1.0", "1e3", "5..2", "1..2..3", "x..", "..y", "1 2"]
    )
    def test_invalid(self, raw: str) -> None:
        assert parse_plural_form(raw) is None

    @given(plural_selectors())
    def test_generated_selectors_are_valid(self, raw: str) -> None:
        form = parse_plural_form(raw)
        event(f"form={type(form).__name__}")
        assert form is not None
        assert not isinstance(form, FallbackForm)


class TestInferPluralType:
    """Category selectors make a plural cardinal."""

    def test_categories_are_cardinal(self) -> None:
        forms = [CategoryForm(PluralCategory.ONE), FallbackForm()]
        assert infer_plural_type(forms) is PluralType.CARDINAL

    def test_ranges_are_integer(self) -> None:
        assert infer_plural_type([RangeForm(0, 0), FallbackForm()]) is PluralType.INTEGER

    def test_mixed_is_cardinal(self) -> None:
        forms = [RangeForm(0, 0), CategoryForm(PluralCategory.FEW)]
        assert infer_plural_type(forms) is PluralType.CARDINAL

    def test_no_concrete_selector_is_cardinal(self) -> None:
        assert infer_plural_type([FallbackForm()]) is PluralType.CARDINAL
        assert infer_plural_type([]) is PluralType.CARDINAL


class TestCoverage:
    """Integer line coverage by unions of ranges."""

    @pytest.mark.parametrize(
        "ranges",
        [
            [RangeForm(None, None)],
            [RangeForm(None, 0), RangeForm(1, None)],
            [RangeForm(5, None), RangeForm(None, 2), RangeForm(3, 4)],
            [RangeForm(None, 10), RangeForm(-5, None)],
            [RangeForm(None, 0), RangeForm(0, 0), RangeForm(1, 3), RangeForm(2, None)],
        ],
    )
    def test_covering(self, ranges: list[RangeForm]) -> None:
        assert covers_all_integers(ranges)

    @pytest.mark.parametrize(
        "ranges",
        [
            [],
            [RangeForm(0, None)],
            [RangeForm(None, 0)],
            [RangeForm(None, 0), RangeForm(2, None)],
            [RangeForm(None, 0), RangeForm(1, 5)],
        ],
    )
    def test_not_covering(self, ranges: list[RangeForm]) -> None:
        assert not covers_all_integers(ranges)

    @given(st.integers(min_value=-100, max_value=100), st.integers(min_value=0, max_value=5))
    def test_split_line_covers_only_without_gap(self, split: int, gap: int) -> None:
        ranges = [RangeForm(None, split), RangeForm(split + 1 + gap, None)]
        assert covers_all_integers(ranges) == (gap == 0)


class TestRequiresFallback:
    """Fallback necessity per plural type."""

    def test_cardinal_always_requires(self) -> None:
        forms = [CategoryForm(c) for c in PluralCategory]
        assert requires_fallback(PluralType.CARDINAL, forms)

    def test_integer_full_coverage(self) -> None:
        assert not requires_fallback(PluralType.INTEGER, [RangeForm(None, None)])

    def test_integer_partial_coverage(self) -> None:
        assert requires_fallback(PluralType.INTEGER, [RangeForm(0, 0), RangeForm(1, None)])
