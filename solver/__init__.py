# solver/__init__.py
# This file is part of Proposat - A Propositional Logic Reasoning Engine
#
# Enumeration engine public API

"""Truth-table enumeration engine.

Stateless functions that classify propositional expressions by evaluating
them under every assignment of their variables.

Example:
    >>> from expressions import variable, or_, not_
    >>> from solver import is_tautology
    >>> p = variable("p")
    >>> is_tautology(or_(p, not_(p)))
    True
"""

from .classification import Classification
from .sat_solver import (
    all_interpretations,
    all_satisfiable_interpretations,
    all_unsatisfiable_interpretations,
    are_equivalent,
    classify,
    get_all_variables,
    is_contradiction,
    is_satisfiable,
    is_tautology,
    iter_interpretations,
    truth_table,
)

__all__ = [
    "Classification",
    "all_interpretations",
    "all_satisfiable_interpretations",
    "all_unsatisfiable_interpretations",
    "are_equivalent",
    "classify",
    "get_all_variables",
    "is_contradiction",
    "is_satisfiable",
    "is_tautology",
    "iter_interpretations",
    "truth_table",
]
