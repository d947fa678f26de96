"""Diagnostic system for locale template errors.

Provides structured error diagnostics with codes, hints and entry locations.
Inspired by Rust compiler diagnostics and Elm error messages.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import DepthLimitExceededError, I18nError, I18nStructureError
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate, describe_entry

__all__ = [
    "DepthLimitExceededError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "I18nError",
    "I18nStructureError",
    "OutputFormat",
    "describe_entry",
]
