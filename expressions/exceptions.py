# expressions/exceptions.py
# This file is part of Proposat - A Propositional Logic Reasoning Engine
#
# Exception raised on every contract violation of the expression core

"""Domain-specific exceptions for the propositional expression core.

A single error kind is used throughout the expression model, the
interpretation mapping and the enumeration engine. It is raised at the point
of violation and propagates to the caller unchanged.
"""


class InvalidArgument(ValueError):
    """Exception raised when an operation receives an argument it cannot accept.

    Covers absent or non-expression operands, malformed variable names,
    absent interpretations, and interpretations that do not assign a variable
    being evaluated.
    """

    pass
