"""i18nlexengine - template parsing engine for localization toolchains.

Converts raw locale strings (literal text, {{ variable }} placeholders,
<tag>...</tag> components and plural mappings) into a structured AST that a
code generator turns into rendering code.

Public API:
    parse_value - Parse a raw locale string to a ParsedValue
    parse_entry - Parse one decoded locale entry (string or plural mapping)
    parse_locale_entries - Parse every entry of a decoded locale mapping
    collect_keys - Interpolation keys a ParsedValue depends on
    ParseContext - Entry location used for diagnostics

Exceptions:
    I18nError - Base exception class
    I18nStructureError - Structural errors in locale entries (plurals)
    DepthLimitExceededError - AST nested beyond the traversal limit

Submodules:
    i18nlexengine.syntax.ast - AST node types (Literal, Variable, Component, Plural, Sequence)
    i18nlexengine.introspection - Interpolation key extraction
    i18nlexengine.validation - Plural structure validation
    i18nlexengine.diagnostics - Error types, codes and formatting
"""

from .context import ParseContext
from .diagnostics import DepthLimitExceededError, I18nError, I18nStructureError
from .introspection import collect_keys
from .localization import parse_entry, parse_locale_entries
from .syntax import parse_value

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("i18nlexengine")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "DepthLimitExceededError",
    "I18nError",
    "I18nStructureError",
    "ParseContext",
    "__version__",
    "collect_keys",
    "parse_entry",
    "parse_locale_entries",
    "parse_value",
]
