"""Exception hierarchy with structured diagnostics.

All exceptions optionally store Diagnostic objects for rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class I18nError(Exception):
    """Base exception for all i18nlexengine errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize I18nError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.message)
        else:
            self.diagnostic = None
            super().__init__(message)


class I18nStructureError(I18nError):
    """Structural violation in a locale entry.

    Raised for plural shape violations (nesting, misplaced or duplicated
    fallbacks, missing required fallback, invalid forms) and for entries
    that are neither strings nor mappings. Never recovered silently: the
    enclosing locale entry must be rejected.

    Attributes:
        locale: Locale of the offending entry
        namespace: Namespace of the offending entry, if any
        key: Key of the offending entry
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        locale: str = "",
        namespace: str | None = None,
        key: str = "",
    ) -> None:
        """Initialize I18nStructureError.

        Args:
            message: Error message string OR Diagnostic object
            locale: Locale of the offending entry
            namespace: Namespace of the offending entry
            key: Key of the offending entry
        """
        super().__init__(message)
        self.locale = locale
        self.namespace = namespace
        self.key = key


class DepthLimitExceededError(I18nError):
    """Raised when maximum traversal depth is exceeded.

    This error indicates either:
    - Malformed programmatic AST construction
    - Adversarial input designed to cause stack overflow
    """
