"""Interpolation key extraction.

Walks a ParsedValue and reports every substitution point the template
depends on: variables, components and, for plurals, the count discriminant.
A code generator uses the result to build the argument list of the
generated function.

Key features:
- Frozen dataclasses with slots; equal keys collapse in the result set
- Depth limiting to prevent stack overflow on adversarial ASTs

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from i18nlexengine.constants import COUNT_IDENT, MAX_DEPTH
from i18nlexengine.enums import InterpolationKind, PluralType
from i18nlexengine.syntax.ast import (
    Component,
    Key,
    Literal,
    ParsedValue,
    Plural,
    Sequence,
    Variable,
)
from i18nlexengine.syntax.visitor import ASTVisitor

__all__ = [
    "ComponentKey",
    "CountKey",
    "InterpolationKey",
    "KeyCollector",
    "VariableKey",
    "collect_keys",
    "sort_keys",
]


# ==============================================================================
# INTERPOLATION KEYS
# ==============================================================================


@dataclass(frozen=True, slots=True)
class CountKey:
    """Plural discriminant. All counts of the same plural type are equal."""

    plural_type: PluralType

    kind = InterpolationKind.COUNT

    @property
    def key(self) -> Key | None:
        """Counts have no authored key."""
        return None

    @property
    def ident(self) -> str:
        """Generated identifier."""
        return COUNT_IDENT

    @property
    def real_name(self) -> str:
        """Authored name."""
        return "count"


@dataclass(frozen=True, slots=True)
class VariableKey:
    """Placeholder reference."""

    key: Key

    kind = InterpolationKind.VARIABLE

    @property
    def ident(self) -> str:
        """Generated identifier."""
        return self.key.name

    @property
    def real_name(self) -> str:
        """Authored name."""
        return self.key.real_name


@dataclass(frozen=True, slots=True)
class ComponentKey:
    """Component reference."""

    key: Key

    kind = InterpolationKind.COMPONENT

    @property
    def ident(self) -> str:
        """Generated identifier."""
        return self.key.name

    @property
    def real_name(self) -> str:
        """Authored name."""
        return self.key.real_name


type InterpolationKey = CountKey | VariableKey | ComponentKey


# ==============================================================================
# AST VISITOR FOR KEY EXTRACTION
# ==============================================================================


class KeyCollector(ASTVisitor[None]):
    """AST visitor accumulating interpolation keys into a set.

    A collector may be fed several values in turn; `keys` holds the union.

    Depth Limiting:
        Includes DepthGuard to prevent stack overflow on programmatically
        constructed deeply nested ASTs. Parser-produced trees stay within
        the parser's own limit.
    """

    __slots__ = ("keys",)

    def __init__(self, *, max_depth: int = MAX_DEPTH) -> None:
        """Initialize collector with an empty key set.

        Args:
            max_depth: Maximum nesting depth (default: MAX_DEPTH).
        """
        super().__init__(max_depth=max_depth)
        self.keys: set[InterpolationKey] = set()

    def visit_Literal(self, node: Literal) -> None:
        """Text references nothing."""

    def visit_Variable(self, node: Variable) -> None:
        self.keys.add(VariableKey(node.key))

    def visit_Component(self, node: Component) -> None:
        self.keys.add(ComponentKey(node.key))
        with self._depth_guard:
            self.visit(node.inner)

    def visit_Sequence(self, node: Sequence) -> None:
        # Parser output is flat; only programmatic nesting adds depth here
        for child in node.children:
            if Sequence.guard(child):
                with self._depth_guard:
                    self.visit(child)
            else:
                self.visit(child)

    def visit_Plural(self, node: Plural) -> None:
        with self._depth_guard:
            for branch in node.node.branches:
                self.visit(branch.value)
        self.keys.add(CountKey(node.node.plural_type))


def collect_keys(
    value: ParsedValue, *, max_depth: int = MAX_DEPTH
) -> frozenset[InterpolationKey]:
    """Collect the deduplicated interpolation keys of a parsed value.

    Args:
        value: Parsed value to inspect
        max_depth: Maximum nesting depth (default: MAX_DEPTH)

    Returns:
        Frozen set of keys; empty when the value references nothing

    Raises:
        DepthLimitExceededError: If the tree is nested deeper than max_depth

    Example:
        >>> collect_keys(parse_value("<b>{{ name }}</b>"))
        frozenset({ComponentKey(key=Key(name='comp_b')), VariableKey(key=Key(name='var_name'))})
    """
    collector = KeyCollector(max_depth=max_depth)
    collector.visit(value)
    return frozenset(collector.keys)


_KIND_ORDER = {
    InterpolationKind.COUNT: 0,
    InterpolationKind.VARIABLE: 1,
    InterpolationKind.COMPONENT: 2,
}


def _sort_key(key: InterpolationKey) -> tuple[int, str, str]:
    match key:
        case CountKey(plural_type=plural_type):
            return (_KIND_ORDER[key.kind], key.ident, str(plural_type))
        case _:
            return (_KIND_ORDER[key.kind], key.ident, "")


def sort_keys(keys: Iterable[InterpolationKey]) -> list[InterpolationKey]:
    """Order keys deterministically: count first, then variables, then components by name.

    Set iteration order is not stable across runs, so code generators sort
    before emitting argument lists.
    """
    return sorted(keys, key=_sort_key)
