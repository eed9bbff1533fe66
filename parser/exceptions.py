# parser/exceptions.py
# This file is part of Proposat - A Propositional Logic Reasoning Engine
#
# Custom exceptions for formula parsing

"""Domain-specific exceptions for propositional formula parsing."""


class ParseError(RuntimeError):
    """Exception raised when formula parsing fails due to syntax errors.

    Indicates that the input text is empty, contains characters outside the
    formula alphabet, or does not conform to the formula grammar.
    """

    pass
