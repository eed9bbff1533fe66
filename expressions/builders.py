# expressions/builders.py
# This file is part of Proposat - A Propositional Logic Reasoning Engine
#
# Factory functions for primitive and derived propositional connectives

"""Builders for propositional expressions.

The primitive builders wrap the node constructors. The derived connectives
(implication, equivalence and exclusive-or) are rewritten into primitive
trees at construction time, so the evaluator only ever sees Constant,
Variable, Not and Binary nodes:

    implies(a, b) = or(not(a), b)
    iff(a, b)     = and(implies(a, b), implies(b, a))
    xor(a, b)     = or(and(a, not(b)), and(not(a), b))

``not``, ``and`` and ``or`` are Python keywords, hence the trailing
underscore on those three builders.
"""

from .ast_nodes import Binary, BinaryOperator, Constant, Expr, Not, Variable
from .exceptions import InvalidArgument


def _require_operands(**operands) -> None:
    for role, value in operands.items():
        if value is None:
            raise InvalidArgument(f"{role} cannot be None")
        if not isinstance(value, Expr):
            raise InvalidArgument(
                f"{role} must be an expression, got {type(value).__name__}"
            )


def constant(value: bool) -> Expr:
    return Constant(value)


def variable(name: str) -> Expr:
    """Build a variable; ``name`` must match ``[A-Za-z][A-Za-z0-9]*``."""
    return Variable(name)


def not_(expr: Expr) -> Expr:
    _require_operands(expr=expr)
    return Not(expr)


def and_(left: Expr, right: Expr) -> Expr:
    _require_operands(left=left, right=right)
    return Binary(BinaryOperator.AND, left, right)


def or_(left: Expr, right: Expr) -> Expr:
    _require_operands(left=left, right=right)
    return Binary(BinaryOperator.OR, left, right)


def implies(antecedent: Expr, consequent: Expr) -> Expr:
    """Material implication, true unless the antecedent holds and the consequent fails."""
    _require_operands(antecedent=antecedent, consequent=consequent)
    return or_(not_(antecedent), consequent)


def iff(left: Expr, right: Expr) -> Expr:
    """Equivalence, true when both sides have the same truth value."""
    _require_operands(left=left, right=right)
    return and_(implies(left, right), implies(right, left))


def xor(left: Expr, right: Expr) -> Expr:
    """Exclusive-or, true when exactly one side holds."""
    _require_operands(left=left, right=right)
    return or_(and_(left, not_(right)), and_(not_(left), right))
