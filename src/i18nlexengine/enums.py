"""Enumerations for i18nlexengine type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class PluralCategory(StrEnum):
    """CLDR plural category usable as a concrete plural selector.

    ``other`` is deliberately absent: it is the catch-all category and is
    written as a fallback marker instead.

    StrEnum provides automatic string conversion: str(PluralCategory.ONE) == "one"
    """

    ZERO = "zero"
    ONE = "one"
    TWO = "two"
    FEW = "few"
    MANY = "many"


class PluralType(StrEnum):
    """Value domain of the count driving a plural.

    StrEnum provides automatic string conversion: str(PluralType.INTEGER) == "integer"
    """

    CARDINAL = "cardinal"
    """Any number, mapped to a CLDR category: {"one": ..., "_": ...}"""

    INTEGER = "integer"
    """Integer count matched against exact values and ranges: {"0": ..., "1..": ...}"""


class InterpolationKind(StrEnum):
    """Kind of substitution point a template depends on.

    StrEnum provides automatic string conversion: str(InterpolationKind.COUNT) == "count"
    """

    COUNT = "count"
    """Plural discriminant"""

    VARIABLE = "variable"
    """Placeholder: {{ name }}"""

    COMPONENT = "component"
    """Wrapper: <b>...</b>"""


__all__ = [
    "InterpolationKind",
    "PluralCategory",
    "PluralType",
]
