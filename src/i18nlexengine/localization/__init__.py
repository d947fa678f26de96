"""Locale entry deserialization.

Turns decoded locale data into ParsedValue trees with structural checks.

Exports:
    parse_entry - Parse one entry under a ParseContext
    parse_locale_entries - Parse a whole decoded locale mapping

Python 3.13+.
"""

from .entry import parse_entry, parse_locale_entries

__all__ = ["parse_entry", "parse_locale_entries"]
