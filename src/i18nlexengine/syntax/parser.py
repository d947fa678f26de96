"""Value parser: turns a raw locale string into a ParsedValue tree.

Strategy for every (sub)string:
    1. Components: each opening tag with a matching closer (see scanner),
       scanned left to right
    2. Variables: {{ ident }} placeholders in the text between components
    3. Literal: everything else verbatim (including the empty string)

Components take precedence over variables, so "<b>{{ x }}</b>" yields a
component whose inner value holds the variable. Siblings are collected into
one flat Sequence by a forward loop; only a component's inner text recurses.

Parsing is total: every string produces a tree and nothing is raised.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging

from i18nlexengine.constants import MAX_DEPTH
from i18nlexengine.core.depth_guard import DepthGuard

from .ast import Component, Literal, ParsedValue, Sequence, Variable
from .scanner import find_component, find_variable

__all__ = ["ValueParser", "parse_value"]

logger = logging.getLogger(__name__)


class ValueParser:
    """Recursive parser for locale template strings.

    Each instance carries its own DepthGuard and no other state, so a parser
    may be reused sequentially; concurrent callers should use separate
    instances (or parse_value(), which creates one per call).

    Depth Limiting:
        Only component nesting recurses; any number of sibling placeholders
        and components is handled iteratively. When nesting reaches the
        configured depth, the innermost component keeps its content as a
        Literal and a warning is logged, so no input is ever rejected.

    Example:
        >>> ValueParser().parse("Hello {{ name }}")
        Sequence(children=(Literal(text='Hello '), Variable(key=Key(name='var_name')), Literal(text='')))
    """

    __slots__ = ("_depth_guard",)

    def __init__(self, *, max_depth: int = MAX_DEPTH) -> None:
        """Initialize parser.

        Args:
            max_depth: Maximum component nesting depth (default: MAX_DEPTH)
        """
        self._depth_guard = DepthGuard(max_depth=max_depth)

    def parse(self, text: str) -> ParsedValue:
        """Parse a raw string into a ParsedValue."""
        children: list[ParsedValue] = []
        rest = text
        while (match := find_component(rest)) is not None:
            children.extend(_split_variables(match.before))
            children.append(Component(key=match.key, inner=self._parse_inner(match.inner)))
            rest = match.after
        children.extend(_split_variables(rest))

        if len(children) == 1:
            return children[0]
        return Sequence(tuple(children))

    def _parse_inner(self, text: str) -> ParsedValue:
        if self._depth_guard.is_exceeded():
            logger.warning(
                "Component nesting exceeds depth %d; keeping %d characters as literal text",
                self._depth_guard.max_depth,
                len(text),
            )
            return Literal(text)
        with self._depth_guard:
            return self.parse(text)


def _split_variables(text: str) -> list[ParsedValue]:
    """Split component-free text around its placeholders.

    The text between placeholders is kept even when empty, so n placeholders
    yield 2n + 1 nodes. Scanning stops at the first invalid placeholder and
    the remainder stays literal.
    """
    nodes: list[ParsedValue] = []
    rest = text
    while (match := find_variable(rest)) is not None:
        nodes.append(Literal(match.before))
        nodes.append(Variable(match.key))
        rest = match.after
    nodes.append(Literal(rest))
    return nodes


def parse_value(text: str, *, max_depth: int = MAX_DEPTH) -> ParsedValue:
    """Parse a raw locale string.

    Convenience function creating a fresh ValueParser per call.

    Args:
        text: Raw template text
        max_depth: Maximum component nesting depth (default: MAX_DEPTH)

    Returns:
        ParsedValue tree

    Example:
        >>> parse_value("before <comp>inner</comp> after")
        Sequence(children=(Literal(text='before '), Component(key=Key(name='comp_comp'), inner=Literal(text='inner')), Literal(text=' after')))
    """
    return ValueParser(max_depth=max_depth).parse(text)
