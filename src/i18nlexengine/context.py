"""Parse context threaded through entry parsing.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from i18nlexengine.diagnostics.templates import describe_entry

__all__ = ["ParseContext"]


@dataclass(frozen=True, slots=True)
class ParseContext:
    """Where an entry comes from, plus whether it sits inside a plural branch.

    Locale, namespace and key are used only to build diagnostics; they never
    influence a parse result.

    Attributes:
        locale: Locale identifier (e.g. "en", "pt-BR")
        key: Entry key within the locale
        namespace: Namespace the entry belongs to, if any
        in_plural: True while parsing the branches of a plural

    Example:
        >>> ParseContext("en", "items", namespace="shop").describe()
        "in locale 'en' at namespace 'shop' at key 'items'"
    """

    locale: str
    key: str
    namespace: str | None = None
    in_plural: bool = False

    def describe(self) -> str:
        """Location prefix used in diagnostics."""
        return describe_entry(self.locale, self.namespace, self.key)

    def entering_plural(self) -> ParseContext:
        """Context for the branches of a plural."""
        return replace(self, in_plural=True)

    def with_key(self, key: str) -> ParseContext:
        """Context for another entry of the same locale and namespace."""
        return replace(self, key=key, in_plural=False)
