"""Deserialization entry point for locale entries.

A loader decodes a locale file (JSON, YAML, ...) into plain Python data and
hands each entry to this module:

    str      -> parsed by ValueParser
    Mapping  -> plural: selectors map to branch values, validated by
                PluralValidator
    anything else -> I18nStructureError

Components:
    parse_entry - Parse one entry under a ParseContext
    parse_locale_entries - Parse every entry of a decoded locale mapping

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from i18nlexengine.constants import MAX_DEPTH
from i18nlexengine.context import ParseContext
from i18nlexengine.diagnostics import ErrorTemplate, I18nStructureError
from i18nlexengine.syntax.ast import ParsedValue
from i18nlexengine.syntax.parser import ValueParser
from i18nlexengine.validation.plural import PluralValidator

__all__ = ["parse_entry", "parse_locale_entries"]

logger = logging.getLogger(__name__)


def parse_entry(
    value: object, context: ParseContext, *, max_depth: int = MAX_DEPTH
) -> ParsedValue:
    """Parse one decoded locale entry.

    Args:
        value: Decoded entry value (string or mapping of selector to value)
        context: Location of the entry
        max_depth: Maximum template nesting depth (default: MAX_DEPTH)

    Returns:
        ParsedValue for the entry

    Raises:
        I18nStructureError: If the entry is a structurally invalid plural or
            neither a string nor a mapping

    Example:
        >>> parse_entry({"one": "{{ n }} item", "_": "{{ n }} items"}, ParseContext("en", "items"))
        Plural(node=PluralNode(...))
    """
    if isinstance(value, str):
        return ValueParser(max_depth=max_depth).parse(value)

    if isinstance(value, Mapping):
        validator = PluralValidator(context)
        branch_context = validator.enter()
        branches = [
            (str(form), parse_entry(branch, branch_context, max_depth=max_depth))
            for form, branch in value.items()
        ]
        return validator.validate(branches)

    diagnostic = ErrorTemplate.invalid_entry_type(
        context.locale, context.namespace, context.key, type(value).__name__
    )
    raise I18nStructureError(
        diagnostic,
        locale=context.locale,
        namespace=context.namespace,
        key=context.key,
    )


def parse_locale_entries(
    entries: Mapping[str, object],
    locale: str,
    namespace: str | None = None,
    *,
    max_depth: int = MAX_DEPTH,
) -> dict[str, ParsedValue]:
    """Parse every entry of a decoded locale mapping.

    Args:
        entries: Key to decoded value, as produced by the loader
        locale: Locale the entries belong to
        namespace: Namespace the entries belong to, if any
        max_depth: Maximum template nesting depth (default: MAX_DEPTH)

    Returns:
        Key to ParsedValue, in input order

    Raises:
        I18nStructureError: On the first structurally invalid entry
    """
    parsed: dict[str, ParsedValue] = {}
    for key, value in entries.items():
        context = ParseContext(locale=locale, key=key, namespace=namespace)
        parsed[key] = parse_entry(value, context, max_depth=max_depth)
        logger.debug("Parsed entry: %s", context.describe())

    logger.debug(
        "Parsed %d entries for locale %s (namespace: %s)", len(parsed), locale, namespace
    )
    return parsed
