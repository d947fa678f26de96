"""Shared constants for i18nlexengine.

This module provides centralized configuration constants used across the
syntax, introspection and validation packages. Placing constants here avoids
circular imports and provides a single source of truth.

Constants are grouped by domain:
- Depth limits: Recursion protection for parsing and AST traversal
- Identifier limits: Bounds for generated interpolation keys
- Template syntax: Delimiters and key discriminators
- Plural syntax: Fallback markers and range separator

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Depth limits
    "MAX_DEPTH",
    # Identifier limits
    "MAX_IDENTIFIER_LENGTH",
    # Template syntax
    "VARIABLE_OPEN",
    "VARIABLE_CLOSE",
    "TAG_OPEN",
    "TAG_CLOSE",
    "CLOSING_TAG_MARKER",
    "VARIABLE_PREFIX",
    "COMPONENT_PREFIX",
    "COUNT_IDENT",
    # Plural syntax
    "FALLBACK_MARKERS",
    "RANGE_SEPARATOR",
    # Locale cache
    "MAX_LOCALE_CACHE_SIZE",
]

# ============================================================================
# DEPTH LIMITS
# ============================================================================
#
# A single limit is shared by the value parser (nested components) and by AST
# visitors (programmatically constructed trees). Sibling placeholders and
# components never count towards it.
#
# Each level of parser recursion costs a handful of Python frames, so 100
# keeps well clear of the default interpreter recursion limit (1000) while
# allowing far more nesting than any hand-written locale string contains.
#
# ============================================================================

# Unified maximum depth for recursion protection.
MAX_DEPTH: int = 100

# ============================================================================
# IDENTIFIER LIMITS
# ============================================================================

# Maximum length of a generated key, prefix included.
MAX_IDENTIFIER_LENGTH: int = 256

# ============================================================================
# TEMPLATE SYNTAX
# ============================================================================

VARIABLE_OPEN: str = "{{"
VARIABLE_CLOSE: str = "}}"
TAG_OPEN: str = "<"
TAG_CLOSE: str = ">"
CLOSING_TAG_MARKER: str = "/"

# Discriminators prepended to raw names so variables and components with the
# same authored name never collide in the generated namespace.
VARIABLE_PREFIX: str = "var_"
COMPONENT_PREFIX: str = "comp_"

# Identifier used for the plural count discriminant.
COUNT_IDENT: str = "var_count"

# ============================================================================
# PLURAL SYNTAX
# ============================================================================

# Selectors accepted as the catch-all plural branch.
FALLBACK_MARKERS: frozenset[str] = frozenset({"_", "other"})

# Separator for integer range selectors: "2..5", "..0", "10..".
RANGE_SEPARATOR: str = ".."

# ============================================================================
# LOCALE CACHE
# ============================================================================

# Maximum cached Babel Locale instances.
MAX_LOCALE_CACHE_SIZE: int = 128
