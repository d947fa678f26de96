"""Identifier validation for generated interpolation keys.

Keys are derived from authored placeholder and tag names and end up as
identifiers in generated code, so they must be legal there:

Key Grammar:
    A Python identifier (str.isidentifier: Unicode XID_Start/XID_Continue
    plus "_"), e.g. "var_count", "var_café", "comp_"

    - Not a reserved Python keyword
    - Length: Maximum 256 characters

The discriminator prefix is part of the checked name, so an empty authored
name still yields a valid key ("{{}}" -> "var_").

Thread Safety:
    All functions in this module are pure functions with no shared state.
    Safe for concurrent use across multiple threads.

Python 3.13+.
"""

from __future__ import annotations

import keyword

from i18nlexengine.constants import MAX_IDENTIFIER_LENGTH

__all__ = ["is_valid_identifier"]


def is_valid_identifier(name: str) -> bool:
    """Validate a complete key name.

    The keyword check only matters for names built without a "var_" or
    "comp_" prefix (direct Key construction); no keyword carries one.

    Args:
        name: Candidate identifier, discriminator prefix included

    Returns:
        True if name can be used as a generated identifier

    Example:
        >>> is_valid_identifier("var_count")
        True
        >>> is_valid_identifier("var_café")
        True
        >>> is_valid_identifier("var_first name")
        False
        >>> is_valid_identifier("class")
        False
        >>> is_valid_identifier("")
        False
    """
    if len(name) > MAX_IDENTIFIER_LENGTH:
        return False

    if not name.isidentifier():
        return False

    return not keyword.iskeyword(name)
