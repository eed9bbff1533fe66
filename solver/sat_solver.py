# solver/sat_solver.py
# This file is part of Proposat - A Propositional Logic Reasoning Engine
#
# Truth-table enumeration engine for propositional expressions

"""Truth-table enumeration over propositional expressions.

Every query collects the free variables of an expression, orders them by name
and walks the integers ``0 .. 2^n - 1``. Integer ``k`` becomes the
interpretation that assigns bit ``i`` of ``k`` to the ``i``-th variable, so
the first interpretation is the all-False one. The expression is then
evaluated under each interpretation and the results are reduced into the
requested answer.

This is brute-force enumeration, exponential in the number of variables. No
limit is enforced; callers are expected to keep the variable count small.

Core Functions:
    all_interpretations: Every assignment over the expression's variables
    is_tautology / is_contradiction / is_satisfiable: Classification predicates
    all_satisfiable_interpretations / all_unsatisfiable_interpretations:
        Partition of the assignments by truth value
    classify: Single three-way classification
"""

from typing import Iterator, List, Set, Tuple

from expressions import Expr, Interpretation, InvalidArgument, iff
from utils.logger import get_logger

from .classification import Classification

# Above this many interpretations an enumeration is reported as a warning
LARGE_ENUMERATION = 1 << 20


def _require_expression(expression) -> None:
    if expression is None:
        raise InvalidArgument("expression cannot be None")
    if not isinstance(expression, Expr):
        raise InvalidArgument(
            f"expected an expression, got {type(expression).__name__}"
        )


def get_all_variables(expression: Expr) -> Set[str]:
    """Return the names of all variables occurring in ``expression``."""
    _require_expression(expression)
    return set(expression.variables())


def iter_interpretations(expression: Expr) -> Iterator[Interpretation]:
    """Yield every interpretation over the variables of ``expression``.

    Interpretations come out in integer order of their bit pattern over the
    sorted variable names. An expression without variables yields exactly
    one, empty, interpretation.

    Args:
        expression: Expression whose variables are enumerated

    Returns:
        Iterator producing a fresh Interpretation per assignment

    Raises:
        InvalidArgument: If ``expression`` is absent
    """
    _require_expression(expression)
    variables = sorted(expression.variables())
    count = 1 << len(variables)

    logger = get_logger()
    logger.enumeration_start(", ".join(variables), count)
    if count > LARGE_ENUMERATION:
        logger.warning(
            f"Enumerating {count} interpretations over {len(variables)} variables"
        )

    return (Interpretation.from_assignment(variables, bits) for bits in range(count))


def all_interpretations(expression: Expr) -> Set[Interpretation]:
    """Return the set of all ``2^n`` interpretations over the expression's variables."""
    return set(iter_interpretations(expression))


def truth_table(expression: Expr) -> List[Tuple[Interpretation, bool]]:
    """Return ``(interpretation, value)`` rows in enumeration order."""
    return [
        (interpretation, expression.evaluate(interpretation))
        for interpretation in iter_interpretations(expression)
    ]


def is_tautology(expression: Expr) -> bool:
    """True iff ``expression`` holds under every interpretation."""
    return all(expression.evaluate(i) for i in iter_interpretations(expression))


def is_contradiction(expression: Expr) -> bool:
    """True iff ``expression`` fails under every interpretation."""
    return not any(expression.evaluate(i) for i in iter_interpretations(expression))


def is_satisfiable(expression: Expr) -> bool:
    """True iff ``expression`` holds under at least one interpretation."""
    return any(expression.evaluate(i) for i in iter_interpretations(expression))


def all_satisfiable_interpretations(expression: Expr) -> List[Interpretation]:
    """Return the interpretations under which ``expression`` is true."""
    return [i for i in iter_interpretations(expression) if expression.evaluate(i)]


def all_unsatisfiable_interpretations(expression: Expr) -> List[Interpretation]:
    """Return the interpretations under which ``expression`` is false."""
    return [i for i in iter_interpretations(expression) if not expression.evaluate(i)]


def classify(expression: Expr) -> Classification:
    """Classify ``expression`` as a tautology, a contradiction or contingent.

    Stops enumerating as soon as both truth values have been seen.
    """
    seen_true = seen_false = False
    for interpretation in iter_interpretations(expression):
        if expression.evaluate(interpretation):
            seen_true = True
        else:
            seen_false = True
        if seen_true and seen_false:
            break

    if not seen_false:
        result = Classification.TAUTOLOGY
    elif not seen_true:
        result = Classification.CONTRADICTION
    else:
        result = Classification.CONTINGENT

    get_logger().classification_result(str(expression), str(result))
    return result


def are_equivalent(left: Expr, right: Expr) -> bool:
    """True iff both expressions agree under every interpretation of their variables."""
    _require_expression(left)
    _require_expression(right)
    return is_tautology(iff(left, right))
