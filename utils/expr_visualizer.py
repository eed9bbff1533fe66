# utils/expr_visualizer.py
# This file is part of Proposat - A Propositional Logic Reasoning Engine
#
# Graphviz rendering of expression trees

import os
from typing import Optional

import graphviz
from graphviz import Digraph

from expressions import Binary, Constant, Expr, Not, Variable
from utils.logger import get_logger

logger = get_logger()

VISUALIZATION_OUTPUT_FOLDER = "expression_trees"

_OPERATOR_COLORS = {"and": "lightskyblue", "or": "lightgoldenrodyellow"}


class _TreeBuilder:
    """Visitor that emits one Graphviz node per expression node.

    Shared subtrees are drawn once per occurrence, so the picture is always a
    tree even when the expression reuses a node.
    """

    def __init__(self, dot: Digraph):
        self.dot = dot
        self._counter = 0

    def _new_id(self) -> str:
        node_id = f"n{self._counter}"
        self._counter += 1
        return node_id

    def visit_constant(self, n: Constant) -> str:
        node_id = self._new_id()
        color = "palegreen" if n.value else "lightcoral"
        self.dot.node(node_id, str(n), shape="box", style="filled", fillcolor=color)
        return node_id

    def visit_variable(self, n: Variable) -> str:
        node_id = self._new_id()
        self.dot.node(node_id, n.name, shape="ellipse")
        return node_id

    def visit_not(self, n: Not) -> str:
        node_id = self._new_id()
        self.dot.node(node_id, "not", shape="circle", style="filled", fillcolor="lightpink")
        self.dot.edge(node_id, n.operand.accept(self))
        return node_id

    def visit_binary(self, n: Binary) -> str:
        node_id = self._new_id()
        label = str(n.operator)
        self.dot.node(
            node_id, label, shape="circle", style="filled", fillcolor=_OPERATOR_COLORS[label]
        )
        self.dot.edge(node_id, n.left.accept(self), label="L")
        self.dot.edge(node_id, n.right.accept(self), label="R")
        return node_id


def build_expression_graph(expr: Expr, fmt: str = "png") -> Digraph:
    """Build a Graphviz digraph of ``expr`` with the root at the top.

    Args:
        expr: Expression to draw
        fmt: Output format used when the graph is rendered

    Returns:
        Digraph whose ``source`` is the DOT description of the tree
    """
    dot = Digraph(comment=f"Expression tree for {expr}", format=fmt)
    dot.attr(rankdir="TB", nodesep="0.4", ranksep="0.5")
    expr.accept(_TreeBuilder(dot))
    return dot


def visualize_expression(
    expr: Expr,
    base_filename: str,
    fmt: str = "png",
    output_folder: str = VISUALIZATION_OUTPUT_FOLDER,
) -> Optional[str]:
    """
    Renders the tree of an expression to an image file using Graphviz.

    Args:
        expr: Expression to draw.
        base_filename: The base name for the output file.
        fmt: The output format for the image (e.g., "png", "svg").
        output_folder: Directory receiving the image; created when missing.

    Returns:
        Path of the written file, or None when the Graphviz executables are
        unavailable.
    """
    if not os.path.exists(output_folder):
        os.makedirs(output_folder)
        logger.info(f"Created directory for expression trees: {output_folder}")
    output_path = os.path.join(output_folder, base_filename)

    dot = build_expression_graph(expr, fmt)
    try:
        rendered = dot.render(output_path, view=False, cleanup=True)
    except (graphviz.ExecutableNotFound, graphviz.CalledProcessError) as e:
        logger.warning(
            f"Failed to render expression tree to {output_path}.{fmt}: {e}. "
            "Ensure Graphviz executables (dot) are in your system's PATH."
        )
        return None

    logger.info(f"Expression tree saved to {rendered}")
    return rendered
