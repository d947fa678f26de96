"""AST (Abstract Syntax Tree) node definitions for locale templates.

A parsed locale value is a closed union of five node kinds:

    Literal    - verbatim text
    Variable   - {{ name }} placeholder
    Component  - <name>...</name> wrapper with nested content
    Plural     - validated mapping of plural form -> value
    Sequence   - ordered concatenation (rendering order)

Includes type guards as static methods (eliminates circular imports).

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeIs

from i18nlexengine.constants import COMPONENT_PREFIX, VARIABLE_PREFIX
from i18nlexengine.core.identifier_validation import is_valid_identifier
from i18nlexengine.enums import PluralCategory, PluralType

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Base types
    "Key",
    # Value nodes
    "Literal",
    "Variable",
    "Component",
    "Plural",
    "Sequence",
    # Plural structure
    "CategoryForm",
    "RangeForm",
    "FallbackForm",
    "PluralBranch",
    "PluralNode",
    # Type aliases
    "ParsedValue",
    "PluralForm",
    # Helpers
    "flatten",
    "literal_text",
]

# ============================================================================
# BASE TYPES
# ============================================================================


@dataclass(frozen=True, slots=True)
class Key:
    """Identifier derived from an authored variable or component name.

    Attributes:
        name: Full identifier, discriminator prefix included (e.g. "var_count")

    Example:
        >>> Key.variable(" name ")
        Key(name='var_name')
        >>> Key.component("b")
        Key(name='comp_b')
        >>> Key.variable("first name") is None
        True
    """

    name: str

    def __post_init__(self) -> None:
        """Validate identifier invariants."""
        if not is_valid_identifier(self.name):
            msg = f"Invalid key identifier: {self.name!r}"
            raise ValueError(msg)

    @classmethod
    def try_new(cls, name: str) -> Key | None:
        """Build a key, or return None when name is not a valid identifier."""
        if not is_valid_identifier(name):
            return None
        return cls(name)

    @classmethod
    def variable(cls, raw: str) -> Key | None:
        """Key for a {{ raw }} placeholder."""
        return cls.try_new(VARIABLE_PREFIX + raw.strip())

    @classmethod
    def component(cls, raw: str) -> Key | None:
        """Key for a <raw> component."""
        return cls.try_new(COMPONENT_PREFIX + raw.strip())

    @property
    def real_name(self) -> str:
        """Authored name, without the discriminator prefix."""
        for prefix in (VARIABLE_PREFIX, COMPONENT_PREFIX):
            if self.name.startswith(prefix):
                return self.name[len(prefix) :]
        return self.name

    def __str__(self) -> str:
        return self.name


# ============================================================================
# VALUE NODES
# ============================================================================


@dataclass(frozen=True, slots=True)
class Literal:
    """Verbatim text fragment (may be empty)."""

    text: str

    @staticmethod
    def guard(value: object) -> TypeIs[Literal]:
        """Type guard for Literal."""
        return isinstance(value, Literal)


@dataclass(frozen=True, slots=True)
class Variable:
    """Placeholder substituted with a named value.

    Example:
        Hello {{ name }}  →  Variable(key=Key("var_name"))
    """

    key: Key

    @staticmethod
    def guard(value: object) -> TypeIs[Variable]:
        """Type guard for Variable."""
        return isinstance(value, Variable)


@dataclass(frozen=True, slots=True)
class Component:
    """Named wrapper around nested content.

    Example:
        Read <b>the docs</b>  →  Component(key=Key("comp_b"), inner=Literal("the docs"))
    """

    key: Key
    inner: ParsedValue

    @staticmethod
    def guard(value: object) -> TypeIs[Component]:
        """Type guard for Component."""
        return isinstance(value, Component)


@dataclass(frozen=True, slots=True)
class Plural:
    """Validated plural; see PluralNode."""

    node: PluralNode

    @staticmethod
    def guard(value: object) -> TypeIs[Plural]:
        """Type guard for Plural."""
        return isinstance(value, Plural)


@dataclass(frozen=True, slots=True)
class Sequence:
    """Ordered concatenation of sibling values.

    The parser produces flat sequences: a child is never itself a Sequence.
    """

    children: tuple[ParsedValue, ...]

    @staticmethod
    def guard(value: object) -> TypeIs[Sequence]:
        """Type guard for Sequence."""
        return isinstance(value, Sequence)


# ============================================================================
# PLURAL STRUCTURE
# ============================================================================


@dataclass(frozen=True, slots=True)
class CategoryForm:
    """Concrete CLDR category selector: "one", "few", ..."""

    category: PluralCategory

    def __str__(self) -> str:
        return str(self.category)


@dataclass(frozen=True, slots=True)
class RangeForm:
    """Inclusive integer range selector; None marks an open end.

    "3" is RangeForm(3, 3), "2..5" is RangeForm(2, 5), "10.." is RangeForm(10, None).
    """

    start: int | None
    end: int | None

    def __post_init__(self) -> None:
        """Validate range invariants."""
        if self.start is not None and self.end is not None and self.start > self.end:
            msg = f"Range start ({self.start}) must be <= end ({self.end})"
            raise ValueError(msg)

    def __contains__(self, count: object) -> bool:
        if not isinstance(count, int):
            return False
        if self.start is not None and count < self.start:
            return False
        return self.end is None or count <= self.end

    def __str__(self) -> str:
        if self.start is not None and self.start == self.end:
            return str(self.start)
        start = "" if self.start is None else str(self.start)
        end = "" if self.end is None else str(self.end)
        return f"{start}..{end}"


@dataclass(frozen=True, slots=True)
class FallbackForm:
    """Catch-all selector ("_" or "other")."""

    marker: str = "_"

    def __str__(self) -> str:
        return self.marker


@dataclass(frozen=True, slots=True)
class PluralBranch:
    """One authored (form, value) pair."""

    form: PluralForm
    value: ParsedValue


@dataclass(frozen=True, slots=True)
class PluralNode:
    """Ordered plural branches plus the inferred plural type.

    Built and validated once per locale entry, immutable afterwards.
    Branch order is the authored order; when present, the fallback is last.
    """

    branches: tuple[PluralBranch, ...]
    plural_type: PluralType

    @property
    def fallback(self) -> PluralBranch | None:
        """The fallback branch, if authored."""
        if self.branches and isinstance(self.branches[-1].form, FallbackForm):
            return self.branches[-1]
        return None

    @property
    def forms(self) -> tuple[PluralForm, ...]:
        """Selectors in authored order."""
        return tuple(branch.form for branch in self.branches)


# ============================================================================
# TYPE ALIASES
# ============================================================================

type ParsedValue = Literal | Variable | Component | Plural | Sequence
"""Any parsed locale value."""

type PluralForm = CategoryForm | RangeForm | FallbackForm
"""Any plural branch selector."""


# ============================================================================
# HELPERS
# ============================================================================


def literal_text(value: ParsedValue) -> str | None:
    """Return the text of a Literal, None for any other node."""
    if Literal.guard(value):
        return value.text
    return None


def flatten(value: ParsedValue) -> tuple[ParsedValue, ...]:
    """Rendering-order leaves of a value.

    Sequences are expanded recursively and empty literals dropped; every
    other node (including a Component, whose inner value is left intact) is
    returned as-is. A consumer renders nothing for an empty result and the
    lone node for a single-element result.

    Example:
        >>> flatten(parse_value("{{ n }} items"))
        (Variable(key=Key(name='var_n')), Literal(text=' items'))
    """
    match value:
        case Sequence(children=children):
            leaves: list[ParsedValue] = []
            for child in children:
                leaves.extend(flatten(child))
            return tuple(leaves)
        case Literal(text=""):
            return ()
        case _:
            return (value,)
