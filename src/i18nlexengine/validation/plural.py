"""Structural validation of plural entries.

Checks, in order:
    1. No nested plurals (a plural inside a plural branch)
    2. Every selector is a valid plural form
    3. No concrete selector appears twice
    4. The fallback, if any, is the last branch
    5. At most one fallback
    6. A fallback exists when the concrete selectors do not cover the
       inferred plural type

Any violation raises I18nStructureError carrying the entry location; there
is no recovery. A valid plural is additionally checked against the locale's
CLDR rule and unreachable category branches are logged as warnings.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import NoReturn

from i18nlexengine.context import ParseContext
from i18nlexengine.diagnostics import ErrorTemplate, I18nStructureError
from i18nlexengine.diagnostics.codes import Diagnostic
from i18nlexengine.plural_rules import unreachable_categories
from i18nlexengine.syntax.ast import (
    FallbackForm,
    ParsedValue,
    Plural,
    PluralBranch,
    PluralForm,
    PluralNode,
)
from i18nlexengine.syntax.plural import infer_plural_type, parse_plural_form, requires_fallback

__all__ = ["PluralValidator", "validate_plural"]

logger = logging.getLogger(__name__)


class PluralValidator:
    """Validates the plural mapping of one locale entry.

    Usage by a deserializer:
        validator = PluralValidator(context)
        branch_context = validator.enter()      # raises if already nested
        branches = [(form, parse(value, branch_context)) for form, value in mapping.items()]
        plural = validator.validate(branches)

    Thread Safety:
        Holds only the immutable context; create one per entry.
    """

    __slots__ = ("_context",)

    def __init__(self, context: ParseContext) -> None:
        """Initialize validator.

        Args:
            context: Location of the entry being validated
        """
        self._context = context

    def enter(self) -> ParseContext:
        """Check nesting and return the context for parsing branch values.

        Returns:
            Context flagged as inside a plural

        Raises:
            I18nStructureError: If the context is already inside a plural
        """
        if self._context.in_plural:
            self._fail(ErrorTemplate.nested_plurals(*self._location()))
        return self._context.entering_plural()

    def validate(self, branches: Iterable[tuple[str, ParsedValue]]) -> Plural:
        """Validate authored (selector, value) pairs and build the Plural node.

        Args:
            branches: Branches in authored order

        Returns:
            Validated Plural

        Raises:
            I18nStructureError: On nesting, invalid or duplicate forms,
                misplaced or repeated fallbacks, or a missing required fallback
        """
        if self._context.in_plural:
            self._fail(ErrorTemplate.nested_plurals(*self._location()))

        parsed: list[PluralBranch] = []
        seen: set[PluralForm] = set()
        for raw_form, value in branches:
            form = parse_plural_form(raw_form)
            if form is None:
                self._fail(ErrorTemplate.invalid_plural_form(*self._location(), raw_form))
            if not isinstance(form, FallbackForm):
                if form in seen:
                    self._fail(ErrorTemplate.duplicate_plural_form(*self._location(), raw_form))
                seen.add(form)
            parsed.append(PluralBranch(form=form, value=value))

        forms = [branch.form for branch in parsed]
        fallback_positions = [i for i, form in enumerate(forms) if isinstance(form, FallbackForm)]

        if fallback_positions and fallback_positions[0] != len(forms) - 1:
            self._fail(ErrorTemplate.fallback_not_last(*self._location()))

        # Subsumed by the position check for ordered branches
        if len(fallback_positions) > 1:
            self._fail(ErrorTemplate.multiple_fallbacks(*self._location()))

        plural_type = infer_plural_type(forms)
        if not fallback_positions and requires_fallback(plural_type, forms):
            self._fail(ErrorTemplate.fallback_required(*self._location(), str(plural_type)))

        node = PluralNode(branches=tuple(parsed), plural_type=plural_type)
        self._warn_unreachable(node)
        return Plural(node)

    def _warn_unreachable(self, node: PluralNode) -> None:
        for category in unreachable_categories(node, self._context.locale):
            diagnostic = ErrorTemplate.unreachable_category(*self._location(), str(category))
            logger.warning("%s", diagnostic.message)

    def _location(self) -> tuple[str, str | None, str]:
        return (self._context.locale, self._context.namespace, self._context.key)

    def _fail(self, diagnostic: Diagnostic) -> NoReturn:
        raise I18nStructureError(
            diagnostic,
            locale=self._context.locale,
            namespace=self._context.namespace,
            key=self._context.key,
        )


def validate_plural(
    branches: Iterable[tuple[str, ParsedValue]], context: ParseContext
) -> Plural:
    """Validate already-parsed plural branches.

    Convenience function for one-off validation.

    Args:
        branches: (selector, value) pairs in authored order
        context: Location of the entry

    Returns:
        Validated Plural

    Raises:
        I18nStructureError: If the plural is structurally invalid
    """
    return PluralValidator(context).validate(branches)
