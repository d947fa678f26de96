"""Plural form selectors and plural type inference.

Selector grammar (surrounding whitespace ignored):

    _ | other            fallback marker
    zero|one|two|few|many CLDR category
    N                    exact integer (same as N..N)
    A..B | ..B | A.. | ..  inclusive integer range, open ends allowed

Plural type inference:
    - any category selector, or no concrete selector at all -> CARDINAL
    - only integer selectors -> INTEGER

A CARDINAL plural always needs a fallback: CLDR's "other" category exists in
every locale and is only expressible as the fallback. An INTEGER plural needs
one unless its ranges cover every integer.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from i18nlexengine.constants import FALLBACK_MARKERS, RANGE_SEPARATOR
from i18nlexengine.enums import PluralCategory, PluralType

from .ast import CategoryForm, FallbackForm, PluralForm, RangeForm

__all__ = [
    "covers_all_integers",
    "infer_plural_type",
    "parse_plural_form",
    "requires_fallback",
]

_INTEGER_PATTERN: re.Pattern[str] = re.compile(r"[+-]?\d+")


def parse_plural_form(raw: str) -> PluralForm | None:
    """Parse an authored plural selector.

    Args:
        raw: Selector text (mapping key)

    Returns:
        The parsed form, or None if the selector is not valid

    Example:
        >>> parse_plural_form("one")
        CategoryForm(category=<PluralCategory.ONE: 'one'>)
        >>> parse_plural_form(" 2..5 ")
        RangeForm(start=2, end=5)
        >>> parse_plural_form("_")
        FallbackForm(marker='_')
        >>> parse_plural_form("5..2") is None
        True
    """
    selector = raw.strip()

    if selector in FALLBACK_MARKERS:
        return FallbackForm(selector)

    if selector in PluralCategory:
        return CategoryForm(PluralCategory(selector))

    if _INTEGER_PATTERN.fullmatch(selector):
        value = int(selector)
        return RangeForm(value, value)

    if RANGE_SEPARATOR not in selector:
        return None

    start_text, _, end_text = selector.partition(RANGE_SEPARATOR)
    start = _parse_bound(start_text)
    end = _parse_bound(end_text)
    if start is False or end is False:
        return None
    if start is not None and end is not None and start > end:
        return None
    return RangeForm(start, end)


def _parse_bound(text: str) -> int | None | bool:
    """Parse a range bound: int, None for an open end, False if invalid."""
    text = text.strip()
    if not text:
        return None
    if _INTEGER_PATTERN.fullmatch(text):
        return int(text)
    return False


def infer_plural_type(forms: Iterable[PluralForm]) -> PluralType:
    """Infer the plural type from the authored selectors."""
    has_range = False
    for form in forms:
        if isinstance(form, CategoryForm):
            return PluralType.CARDINAL
        if isinstance(form, RangeForm):
            has_range = True
    return PluralType.INTEGER if has_range else PluralType.CARDINAL


def covers_all_integers(ranges: Iterable[RangeForm]) -> bool:
    """Check whether the union of inclusive ranges is the whole integer line.

    Example:
        >>> covers_all_integers([RangeForm(None, 0), RangeForm(1, None)])
        True
        >>> covers_all_integers([RangeForm(None, 0), RangeForm(2, None)])
        False
    """
    ordered = sorted(ranges, key=lambda r: (r.start is not None, r.start or 0))
    if not ordered or ordered[0].start is not None:
        return False

    reach = ordered[0].end
    for current in ordered[1:]:
        if reach is None:
            return True
        if current.start is not None and current.start > reach + 1:
            return False
        if current.end is None:
            reach = None
        else:
            reach = max(reach, current.end)
    return reach is None


def requires_fallback(plural_type: PluralType, forms: Iterable[PluralForm]) -> bool:
    """Whether the concrete selectors leave part of the type's domain uncovered."""
    match plural_type:
        case PluralType.CARDINAL:
            return True
        case PluralType.INTEGER:
            return not covers_all_integers(f for f in forms if isinstance(f, RangeForm))
