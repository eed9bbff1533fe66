# parser/__init__.py
# This file is part of Proposat - A Propositional Logic Reasoning Engine
#
# Text front end for building propositional expressions

"""Propositional formula parsing.

Turns formula text such as ``"p & !q -> r"`` into an expression tree built
through the expression builders, so derived connectives are expanded into
negation, conjunction and disjunction.

Core Functions:
    parse: Converts formula strings into expression trees

Example:
    >>> from parser import parse
    >>> str(parse("p -> q"))
    '(not p) or q'
"""

from .exceptions import ParseError
from .grammar import _FormulaParser


def parse(source: str):
    """Parse a formula string into an expression tree.

    Uses a fresh parser instance for each invocation so parsing is stateless.

    Args:
        source: Well-formed formula string to parse

    Returns:
        Root node of the built expression

    Raises:
        ParseError: Formula is not a string, is empty or is syntactically malformed
    """
    parser = _FormulaParser()
    return parser.parse(source)


__all__ = ["parse", "ParseError"]
