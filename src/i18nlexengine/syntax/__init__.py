"""Template syntax: AST nodes, scanners, value parser and visitor.

Python 3.13+.
"""

from .ast import (
    CategoryForm,
    Component,
    FallbackForm,
    Key,
    Literal,
    ParsedValue,
    Plural,
    PluralBranch,
    PluralForm,
    PluralNode,
    RangeForm,
    Sequence,
    Variable,
    flatten,
    literal_text,
)
from .parser import ValueParser, parse_value
from .visitor import ASTVisitor

__all__ = [
    "ASTVisitor",
    "CategoryForm",
    "Component",
    "FallbackForm",
    "Key",
    "Literal",
    "ParsedValue",
    "Plural",
    "PluralBranch",
    "PluralForm",
    "PluralNode",
    "RangeForm",
    "Sequence",
    "ValueParser",
    "Variable",
    "flatten",
    "literal_text",
    "parse_value",
]
