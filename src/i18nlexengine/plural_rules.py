"""CLDR plural category data using Babel.

Answers which concrete categories a locale's cardinal plural rule can ever
select, so that authored branches the locale never reaches can be reported.
This is diagnostic only: it never changes a parse or validation result.

Python 3.13+. Depends on Babel for CLDR data.

Reference: https://www.unicode.org/cldr/charts/47/supplemental/language_plural_rules.html
"""

from __future__ import annotations

from babel.core import UnknownLocaleError

from i18nlexengine.enums import PluralCategory, PluralType
from i18nlexengine.locale_utils import get_babel_locale
from i18nlexengine.syntax.ast import CategoryForm, PluralNode

__all__ = ["locale_plural_categories", "unreachable_categories"]


def locale_plural_categories(locale: str) -> frozenset[PluralCategory] | None:
    """Concrete CLDR categories a locale's cardinal rule can select.

    Args:
        locale: Locale code (e.g., "lv_LV", "en-US", "ar")

    Returns:
        Categories other than "other", or None if Babel does not know the locale

    Examples:
        >>> sorted(locale_plural_categories("en"))
        [<PluralCategory.ONE: 'one'>]
        >>> sorted(locale_plural_categories("lv"))
        [<PluralCategory.ZERO: 'zero'>, <PluralCategory.ONE: 'one'>]
        >>> locale_plural_categories("xx_UNKNOWN") is None
        True
    """
    try:
        locale_obj = get_babel_locale(locale)
    except (UnknownLocaleError, ValueError):
        return None

    # PluralRule.tags omits the implicit "other" rule
    return frozenset(
        PluralCategory(tag) for tag in locale_obj.plural_form.tags if tag in PluralCategory
    )


def unreachable_categories(node: PluralNode, locale: str) -> tuple[PluralCategory, ...]:
    """Authored category branches the locale's plural rule never selects.

    Integer plurals and unknown locales report nothing.

    Args:
        node: Validated plural
        locale: Locale the plural belongs to

    Returns:
        Unreachable categories in authored order
    """
    if node.plural_type is not PluralType.CARDINAL:
        return ()
    available = locale_plural_categories(locale)
    if available is None:
        return ()
    return tuple(
        form.category
        for form in node.forms
        if isinstance(form, CategoryForm) and form.category not in available
    )
