"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate", "describe_entry"]


def describe_entry(locale: str, namespace: str | None, key: str) -> str:
    """Render the location prefix shared by all entry diagnostics.

    Example:
        >>> describe_entry("en", None, "items")
        "in locale 'en' at key 'items'"
        >>> describe_entry("en", "common", "items")
        "in locale 'en' at namespace 'common' at key 'items'"
    """
    if namespace is None:
        return f"in locale {locale!r} at key {key!r}"
    return f"in locale {locale!r} at namespace {namespace!r} at key {key!r}"


def _location(locale: str, namespace: str | None, key: str) -> str:
    if namespace is None:
        return f"locale {locale!r}, key {key!r}"
    return f"locale {locale!r}, namespace {namespace!r}, key {key!r}"


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This provides:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases
    """

    @staticmethod
    def nested_plurals(locale: str, namespace: str | None, key: str) -> Diagnostic:
        """A plural branch is itself a plural mapping.

        Args:
            locale: Locale of the entry
            namespace: Namespace of the entry, if any
            key: Key of the entry

        Returns:
            Diagnostic for PLURAL_NESTED
        """
        msg = f"{describe_entry(locale, namespace, key)}: nested plurals are not allowed"
        return Diagnostic(
            code=DiagnosticCode.PLURAL_NESTED,
            message=msg,
            hint="Move the inner plural to its own key",
            location=_location(locale, namespace, key),
        )

    @staticmethod
    def fallback_not_last(locale: str, namespace: str | None, key: str) -> Diagnostic:
        """Fallback branch authored before a concrete branch.

        Args:
            locale: Locale of the entry
            namespace: Namespace of the entry, if any
            key: Key of the entry

        Returns:
            Diagnostic for PLURAL_FALLBACK_NOT_LAST
        """
        msg = (
            f"{describe_entry(locale, namespace, key)}: "
            "fallback is only allowed in last position"
        )
        return Diagnostic(
            code=DiagnosticCode.PLURAL_FALLBACK_NOT_LAST,
            message=msg,
            hint="Move the '_' (or 'other') branch to the end of the mapping",
            location=_location(locale, namespace, key),
        )

    @staticmethod
    def multiple_fallbacks(locale: str, namespace: str | None, key: str) -> Diagnostic:
        """More than one fallback branch.

        Args:
            locale: Locale of the entry
            namespace: Namespace of the entry, if any
            key: Key of the entry

        Returns:
            Diagnostic for PLURAL_MULTIPLE_FALLBACKS
        """
        msg = f"{describe_entry(locale, namespace, key)}: multiple fallbacks are not allowed"
        return Diagnostic(
            code=DiagnosticCode.PLURAL_MULTIPLE_FALLBACKS,
            message=msg,
            hint="Keep a single '_' (or 'other') branch",
            location=_location(locale, namespace, key),
        )

    @staticmethod
    def fallback_required(
        locale: str, namespace: str | None, key: str, plural_type: str
    ) -> Diagnostic:
        """Concrete branches do not cover the plural type and no fallback exists.

        Args:
            locale: Locale of the entry
            namespace: Namespace of the entry, if any
            key: Key of the entry
            plural_type: Inferred plural type

        Returns:
            Diagnostic for PLURAL_FALLBACK_REQUIRED
        """
        msg = (
            f"{describe_entry(locale, namespace, key)}: "
            f"for plural type {plural_type!r} a fallback is required"
        )
        return Diagnostic(
            code=DiagnosticCode.PLURAL_FALLBACK_REQUIRED,
            message=msg,
            hint="Add a '_' branch in last position",
            location=_location(locale, namespace, key),
        )

    @staticmethod
    def invalid_plural_form(
        locale: str, namespace: str | None, key: str, form: str
    ) -> Diagnostic:
        """Branch selector is not a category, integer, range or fallback.

        Args:
            locale: Locale of the entry
            namespace: Namespace of the entry, if any
            key: Key of the entry
            form: The rejected selector

        Returns:
            Diagnostic for PLURAL_INVALID_FORM
        """
        msg = f"{describe_entry(locale, namespace, key)}: invalid plural form {form!r}"
        return Diagnostic(
            code=DiagnosticCode.PLURAL_INVALID_FORM,
            message=msg,
            hint="Use zero/one/two/few/many, an integer, a range like '2..5', or '_'",
            location=_location(locale, namespace, key),
        )

    @staticmethod
    def duplicate_plural_form(
        locale: str, namespace: str | None, key: str, form: str
    ) -> Diagnostic:
        """Same concrete selector authored twice.

        Args:
            locale: Locale of the entry
            namespace: Namespace of the entry, if any
            key: Key of the entry
            form: The repeated selector

        Returns:
            Diagnostic for PLURAL_DUPLICATE_FORM
        """
        msg = f"{describe_entry(locale, namespace, key)}: duplicate plural form {form!r}"
        return Diagnostic(
            code=DiagnosticCode.PLURAL_DUPLICATE_FORM,
            message=msg,
            hint="Each plural form may appear only once",
            location=_location(locale, namespace, key),
        )

    @staticmethod
    def invalid_entry_type(
        locale: str, namespace: str | None, key: str, received: str
    ) -> Diagnostic:
        """Entry value is neither a string nor a mapping.

        Args:
            locale: Locale of the entry
            namespace: Namespace of the entry, if any
            key: Key of the entry
            received: Type name of the rejected value

        Returns:
            Diagnostic for ENTRY_INVALID_TYPE
        """
        msg = (
            f"{describe_entry(locale, namespace, key)}: "
            f"expected either a string or a map of string:string, got {received}"
        )
        return Diagnostic(
            code=DiagnosticCode.ENTRY_INVALID_TYPE,
            message=msg,
            location=_location(locale, namespace, key),
        )

    @staticmethod
    def depth_exceeded(max_depth: int) -> Diagnostic:
        """Maximum traversal depth exceeded.

        Args:
            max_depth: Maximum allowed depth

        Returns:
            Diagnostic for MAX_DEPTH_EXCEEDED
        """
        msg = f"Maximum nesting depth ({max_depth}) exceeded"
        return Diagnostic(
            code=DiagnosticCode.MAX_DEPTH_EXCEEDED,
            message=msg,
            hint="Check for deeply nested components or a malformed AST",
        )

    @staticmethod
    def unreachable_category(
        locale: str, namespace: str | None, key: str, category: str
    ) -> Diagnostic:
        """Concrete category never selected by the locale's CLDR rule.

        Args:
            locale: Locale of the entry
            namespace: Namespace of the entry, if any
            key: Key of the entry
            category: The unreachable category

        Returns:
            Warning diagnostic for PLURAL_CATEGORY_UNREACHABLE
        """
        msg = (
            f"{describe_entry(locale, namespace, key)}: "
            f"plural category {category!r} is never selected for this locale"
        )
        return Diagnostic(
            code=DiagnosticCode.PLURAL_CATEGORY_UNREACHABLE,
            message=msg,
            hint="Remove the branch or check the locale's CLDR plural rules",
            location=_location(locale, namespace, key),
            severity="warning",
        )
