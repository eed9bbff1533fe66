# expressions/__init__.py
# This file is part of Proposat - A Propositional Logic Reasoning Engine
#
# Expression model public API

"""Expression model for propositional logic.

This package provides the immutable expression tree, the builders used to
construct it, and the Interpretation that supplies variable values during
evaluation.

Primary Components:
    Constant, Variable, Not, Binary: The closed set of expression nodes
    constant, variable, not_, and_, or_: Primitive builders
    implies, iff, xor: Derived connectives rewritten into primitives
    Interpretation: Assignment of truth values to variable names
    InvalidArgument: Raised on every contract violation

Example:
    >>> from expressions import variable, implies, Interpretation
    >>> p, q = variable("p"), variable("q")
    >>> i = Interpretation()
    >>> i.add("p", True)
    >>> i.add("q", False)
    >>> implies(p, q).evaluate(i)
    False
"""

from .ast_nodes import Binary, BinaryOperator, Constant, Expr, Not, Variable, Visitor
from .builders import and_, constant, iff, implies, not_, or_, variable, xor
from .exceptions import InvalidArgument
from .interpretation import Interpretation, is_valid_variable_name

__all__ = [
    "Expr",
    "Constant",
    "Variable",
    "Not",
    "Binary",
    "BinaryOperator",
    "Visitor",
    "constant",
    "variable",
    "not_",
    "and_",
    "or_",
    "implies",
    "iff",
    "xor",
    "Interpretation",
    "is_valid_variable_name",
    "InvalidArgument",
]
