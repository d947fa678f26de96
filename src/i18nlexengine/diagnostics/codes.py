"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Plural structure errors
        2000-2999: Entry shape errors
        3000-3999: Resource limit errors
        5000-5999: Warnings (never abort processing)
    """

    # Plural structure errors (1000-1999)
    PLURAL_NESTED = 1001
    PLURAL_FALLBACK_NOT_LAST = 1002
    PLURAL_MULTIPLE_FALLBACKS = 1003
    PLURAL_FALLBACK_REQUIRED = 1004
    PLURAL_INVALID_FORM = 1005
    PLURAL_DUPLICATE_FORM = 1006

    # Entry shape errors (2000-2999)
    ENTRY_INVALID_TYPE = 2001

    # Resource limit errors (3000-3999)
    MAX_DEPTH_EXCEEDED = 3001

    # Warnings (5000-5999)
    PLURAL_CATEGORY_UNREACHABLE = 5001


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans and tools.

    Attributes:
        code: Unique error code
        message: Human-readable error description, including the entry location
        hint: Suggestion for fixing the error
        location: Entry location (locale, namespace, key) when known
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    location: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[PLURAL_NESTED]: in locale 'en' at key 'items': nested plurals are not allowed
              --> locale 'en', key 'items'
              = help: Move the inner plural to its own key

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
