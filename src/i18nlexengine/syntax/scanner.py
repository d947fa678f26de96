"""Tag and variable scanners for locale template strings.

Both scanners report the FIRST structurally valid match in a string and split
the string around it; the caller (ValueParser) recurses on the pieces.
Anything that does not form a valid match is a soft failure: the scanner
returns None and the text stays literal.

Tag scanning:
    A candidate opening tag is the first "<...>" span at or after a cursor.
    Its closer is searched with same-name depth tracking, so a component may
    nest inside itself:

        <b>bold <b>more bold</b></b>
        ^^^                     ^^^^   outer pair

    Tags with any other name are inert for that search. A candidate without
    a closer (or with a name that is not a valid identifier) is discarded
    and the cursor moves past it, so the scan always progresses forward.

Variable scanning:
    The first "{{" and the first "}}" after it delimit a placeholder. An
    invalid identifier between them means "no variable".

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from i18nlexengine.constants import (
    CLOSING_TAG_MARKER,
    TAG_CLOSE,
    TAG_OPEN,
    VARIABLE_CLOSE,
    VARIABLE_OPEN,
)

from .ast import Key

__all__ = [
    "ComponentMatch",
    "VariableMatch",
    "find_component",
    "find_variable",
]


@dataclass(frozen=True, slots=True)
class VariableMatch:
    """A placeholder and the raw text around it."""

    before: str
    key: Key
    after: str


@dataclass(frozen=True, slots=True)
class ComponentMatch:
    """A matched component and the raw text before, inside and after it."""

    before: str
    key: Key
    inner: str
    after: str


@dataclass(frozen=True, slots=True)
class _Tag:
    """A "<...>" span: offsets of "<" and just past ">", and its trimmed text."""

    start: int
    end: int
    text: str


def find_variable(value: str) -> VariableMatch | None:
    """Locate the first {{ ident }} placeholder.

    Args:
        value: Raw template text

    Returns:
        The split around the placeholder, or None if there is no delimiter
        pair or the identifier is invalid

    Example:
        >>> find_variable("before {{ var }} after")
        VariableMatch(before='before ', key=Key(name='var_var'), after=' after')
    """
    open_pos = value.find(VARIABLE_OPEN)
    if open_pos == -1:
        return None
    ident_start = open_pos + len(VARIABLE_OPEN)
    close_pos = value.find(VARIABLE_CLOSE, ident_start)
    if close_pos == -1:
        return None

    key = Key.variable(value[ident_start:close_pos])
    if key is None:
        return None

    return VariableMatch(
        before=value[:open_pos],
        key=key,
        after=value[close_pos + len(VARIABLE_CLOSE) :],
    )


def find_component(value: str) -> ComponentMatch | None:
    """Locate the first opening tag that has a matching closing tag.

    Rejected candidates are skipped with a forward-only cursor; text before
    the accepted tag (including rejected tags) is returned as `before`.

    Args:
        value: Raw template text

    Returns:
        The split around the component, or None if no candidate matches

    Example:
        >>> find_component("<p>test<h3>title</h3>rest")
        ComponentMatch(before='<p>test', key=Key(name='comp_h3'), inner='title', after='rest')
    """
    cursor = 0
    while (opening := _next_tag(value, cursor)) is not None:
        cursor = opening.end
        key = Key.component(opening.text)
        if key is None:
            continue
        closing = _find_closing_tag(value, opening.end, opening.text)
        if closing is None:
            continue
        return ComponentMatch(
            before=value[: opening.start],
            key=key,
            inner=value[opening.end : closing.start],
            after=value[closing.end :],
        )
    return None


def _next_tag(value: str, start: int) -> _Tag | None:
    """Return the "<...>" span whose "<" is the first one at or after start."""
    open_pos = value.find(TAG_OPEN, start)
    if open_pos == -1:
        return None
    close_pos = value.find(TAG_CLOSE, open_pos + 1)
    if close_pos == -1:
        return None
    return _Tag(
        start=open_pos,
        end=close_pos + len(TAG_CLOSE),
        text=value[open_pos + 1 : close_pos].strip(),
    )


def _find_closing_tag(value: str, start: int, name: str) -> _Tag | None:
    """Find the closer matching an opening tag named `name`.

    Every "<" after start is examined. Openers named `name` increase the
    depth, closers named `name` decrease it, and the first same-name closer
    reached at depth 0 is the match.
    """
    depth = 0
    position = start
    while (tag := _next_tag(value, position)) is not None:
        position = tag.start + 1
        if tag.text.startswith(CLOSING_TAG_MARKER):
            if tag.text[len(CLOSING_TAG_MARKER) :].lstrip() != name:
                continue
            if depth == 0:
                return tag
            depth -= 1
        elif tag.text == name:
            depth += 1
    return None
