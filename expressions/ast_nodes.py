# expressions/ast_nodes.py
# This file is part of Proposat - A Propositional Logic Reasoning Engine
#
# Abstract Syntax Tree node classes for propositional formulas

"""AST node classes for representing propositional formulas.

This module defines the closed set of immutable and hashable node classes used
to build propositional (Boolean) formulas. Derived connectives such as
implication, equivalence and exclusive-or are not nodes of their own; they are
assembled from these primitives by the builders module.

Node Types:
    Constant: Boolean constants True and False
    Variable: Propositional variables
    Not: Logical negation
    Binary: Conjunction and disjunction

Every node evaluates itself under an Interpretation, reports the set of
variables it mentions, renders itself for diagnostics, and supports the
visitor design pattern for traversal.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, List, Protocol, Tuple

from .exceptions import InvalidArgument
from .interpretation import Interpretation, is_valid_variable_name


def _require_interpretation(interpretation) -> None:
    if interpretation is None:
        raise InvalidArgument("interpretation cannot be None")
    if not isinstance(interpretation, Interpretation):
        raise InvalidArgument(
            f"expected an Interpretation, got {type(interpretation).__name__}"
        )


def _require_expression(value, role: str) -> None:
    if value is None:
        raise InvalidArgument(f"{role} cannot be None")
    if not isinstance(value, Expr):
        raise InvalidArgument(
            f"{role} must be an expression, got {type(value).__name__}"
        )


class Visitor(Protocol):
    """Interface for AST visitors implementing the visitor design pattern.

    Concrete visitors must implement visit methods for each AST node type
    to enable type-safe traversal and transformation operations.
    """

    def visit_constant(self, n: Constant): ...

    def visit_variable(self, n: Variable): ...

    def visit_not(self, n: Not): ...

    def visit_binary(self, n: Binary): ...


class BinaryOperator(Enum):
    """Operators carried by a Binary node."""

    AND = "and"
    OR = "or"

    def __str__(self) -> str:
        return self.value


def _fold(root: Expr, step) -> object:
    """Combine node results bottom-up with an explicit stack.

    ``step(node, child_results)`` receives the results of the node's children
    in left-to-right order. Tree depth is bounded by memory only.
    """
    results: List[object] = []
    stack: List[Tuple[Expr, bool]] = [(root, False)]
    while stack:
        node, expanded = stack.pop()
        children = node._children()
        if expanded or not children:
            if children:
                values = results[-len(children):]
                del results[-len(children):]
            else:
                values = []
            results.append(step(node, values))
        else:
            stack.append((node, True))
            stack.extend((child, False) for child in reversed(children))
    return results[0]


@dataclass(frozen=True, slots=True)
class Expr:
    """Base class for all AST nodes in propositional formulas.

    Provides the uniform capability set shared by every node kind: evaluation
    under an interpretation, variable collection, rendering and visitor
    dispatch. Traversals run iteratively here; concrete node types supply
    their direct children and a single evaluation / rendering step.

    Structural equality and hashing are generated by ``dataclass`` and do
    recurse, so they are limited by the interpreter recursion limit.
    """

    def _children(self) -> Tuple[Expr, ...]:
        return ()

    def _evaluate_step(self, interpretation: Interpretation, values: List[bool]) -> bool:
        raise NotImplementedError

    def _render_step(self, parts: List[str]) -> str:
        raise NotImplementedError

    def evaluate(self, interpretation: Interpretation) -> bool:
        """Evaluate this expression under an interpretation.

        Every sub-expression is evaluated, so an interpretation missing a
        variable on either side of a conjunction or disjunction fails even
        when the other side decides the result.

        Args:
            interpretation: Assignment covering every variable of this expression

        Returns:
            Truth value of the expression

        Raises:
            InvalidArgument: If the interpretation is absent or does not assign
                a variable occurring in this expression
        """
        _require_interpretation(interpretation)
        return _fold(self, lambda node, values: node._evaluate_step(interpretation, values))

    def variables(self) -> FrozenSet[str]:
        """Return the names of all variables occurring in this expression."""
        names = set()
        stack: List[Expr] = [self]
        while stack:
            node = stack.pop()
            if isinstance(node, Variable):
                names.add(node.name)
            stack.extend(node._children())
        return frozenset(names)

    def accept(self, v: Visitor):
        """Dispatch to the appropriate visitor method.

        Args:
            v: Visitor instance to process this node

        Raises:
            NotImplementedError: Must be implemented by subclasses
        """
        raise NotImplementedError

    def render(self) -> str:
        """Return the diagnostic string form of this expression."""
        return str(self)

    def __str__(self) -> str:
        return _fold(self, lambda node, parts: node._render_step(parts))


@dataclass(frozen=True, slots=True)
class Constant(Expr):
    """Boolean constant leaf.

    Attributes:
        value: The stored truth value
    """

    value: bool

    def __post_init__(self):
        if not isinstance(self.value, bool):
            raise InvalidArgument(
                f"constant value must be a bool, got {type(self.value).__name__}"
            )

    def _evaluate_step(self, interpretation: Interpretation, values: List[bool]) -> bool:
        return self.value

    def _render_step(self, parts: List[str]) -> str:
        return "True" if self.value else "False"

    def accept(self, v: Visitor):
        return v.visit_constant(self)


@dataclass(frozen=True, slots=True)
class Variable(Expr):
    """Propositional variable leaf.

    Attributes:
        name: Identifier of the form letter (letter | digit)*
    """

    name: str

    def __post_init__(self):
        if self.name is None:
            raise InvalidArgument("variable name cannot be None")
        if self.name == "":
            raise InvalidArgument("variable name cannot be empty")
        if not is_valid_variable_name(self.name):
            raise InvalidArgument(
                f"variable name {self.name!r} must be a letter followed by letters or digits"
            )

    def _evaluate_step(self, interpretation: Interpretation, values: List[bool]) -> bool:
        if not interpretation.exists(self.name):
            raise InvalidArgument(
                f"variable {self.name!r} is not assigned by the interpretation"
            )
        return interpretation.value_of(self.name)

    def _render_step(self, parts: List[str]) -> str:
        return self.name

    def accept(self, v: Visitor):
        return v.visit_variable(self)


@dataclass(frozen=True, slots=True)
class Not(Expr):
    """Logical negation operator for Boolean expressions.

    Represents the unary negation operation that inverts the truth value
    of its operand expression.

    Attributes:
        operand: The expression being negated
    """

    operand: Expr

    def __post_init__(self):
        _require_expression(self.operand, "operand")

    def _children(self) -> Tuple[Expr, ...]:
        return (self.operand,)

    def _evaluate_step(self, interpretation: Interpretation, values: List[bool]) -> bool:
        return not values[0]

    def _render_step(self, parts: List[str]) -> str:
        return f"(not {parts[0]})"

    def accept(self, v: Visitor):
        return v.visit_not(self)


@dataclass(frozen=True, slots=True)
class Binary(Expr):
    """Conjunction or disjunction of two sub-expressions.

    Attributes:
        operator: BinaryOperator.AND or BinaryOperator.OR
        left: Left operand
        right: Right operand
    """

    operator: BinaryOperator
    left: Expr
    right: Expr

    def __post_init__(self):
        if not isinstance(self.operator, BinaryOperator):
            raise InvalidArgument(f"unsupported binary operator: {self.operator!r}")
        _require_expression(self.left, "left operand")
        _require_expression(self.right, "right operand")

    def _children(self) -> Tuple[Expr, ...]:
        return (self.left, self.right)

    def _evaluate_step(self, interpretation: Interpretation, values: List[bool]) -> bool:
        left, right = values
        if self.operator is BinaryOperator.AND:
            return left and right
        return left or right

    def _render_step(self, parts: List[str]) -> str:
        return f"{parts[0]} {self.operator} {parts[1]}"

    def accept(self, v: Visitor):
        return v.visit_binary(self)
