"""Hypothesis strategies for i18nlexengine property-based testing.

Usage:
    from tests.strategies import template_names, markup_text, plain_text
"""

from .template import (
    MARKUP_ALPHABET,
    markup_text,
    plain_text,
    plural_selectors,
    template_names,
    templates,
)

__all__ = [
    "MARKUP_ALPHABET",
    "markup_text",
    "plain_text",
    "plural_selectors",
    "template_names",
    "templates",
]
