"""Introspection of parsed locale values.

Provides extraction of the interpolation keys (variables, components and
plural counts) a template depends on.

Public API:
    collect_keys - Deduplicated keys of a ParsedValue
    sort_keys - Deterministic ordering for code generation
    CountKey, VariableKey, ComponentKey - Key variants
    InterpolationKey - Union of the key variants

Python 3.13+.
"""

from .keys import (
    ComponentKey,
    CountKey,
    InterpolationKey,
    KeyCollector,
    VariableKey,
    collect_keys,
    sort_keys,
)

__all__ = [
    "ComponentKey",
    "CountKey",
    "InterpolationKey",
    "KeyCollector",
    "VariableKey",
    "collect_keys",
    "sort_keys",
]
