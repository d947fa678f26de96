"""Structural validation of locale entries.

Python 3.13+.
"""

from .plural import PluralValidator, validate_plural

__all__ = ["PluralValidator", "validate_plural"]
