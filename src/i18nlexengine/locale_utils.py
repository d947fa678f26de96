"""Locale lookup for CLDR plural data.

Entry locales arrive in whatever form the locale files use ("en-US", "lv",
"pt_BR"). Babel only parses the underscore form, so codes are rewritten
before lookup. Parsed locales are memoized because plural validation asks
for the same few locales once per entry.

Python 3.13+.
"""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING

from i18nlexengine.constants import MAX_LOCALE_CACHE_SIZE

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "get_babel_locale",
    "normalize_locale",
]


def normalize_locale(locale_code: str) -> str:
    """Rewrite a locale code with underscores as subtag separators.

    >>> normalize_locale("zh-Hant-TW")
    'zh_Hant_TW'
    """
    return locale_code.replace("-", "_")


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def get_babel_locale(locale_code: str) -> Locale:
    """Resolve an entry locale code to a memoized Babel Locale.

    Unknown codes propagate Babel's UnknownLocaleError (malformed ones its
    ValueError); callers that treat the CLDR check as optional catch both.
    """
    # CLDR data is only loaded once a plural entry needs it
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))
