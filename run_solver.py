#!/usr/bin/env python3
# run_solver.py
# This file is part of Proposat - A Propositional Logic Reasoning Engine
#
# Command-line interface for truth-table analysis of propositional formulas

import sys
import argparse
from pathlib import Path
from typing import List, Optional, Tuple

from expressions import (
    Expr,
    and_,
    constant,
    iff,
    implies,
    not_,
    or_,
    variable,
    xor,
)
from parser import parse, ParseError
from solver import (
    all_satisfiable_interpretations,
    all_unsatisfiable_interpretations,
    is_contradiction,
    is_tautology,
    iter_interpretations,
)
from utils.expr_visualizer import visualize_expression
from utils.logger import configure_logging, get_logger


class FormulaFileError(Exception):
    """Raised when a formula file cannot be read or holds no formulas."""


def sample_expressions() -> List[Expr]:
    """Build the built-in demonstration expressions.

    Returns:
        Excluded middle, a plain conjunction, a vacuous implication, a
        self-refuting implication, a contradiction, a three-variable parity
        check and De Morgan's law as an equivalence.
    """
    p = variable("p")
    q = variable("q")
    r = variable("r")

    return [
        or_(p, not_(p)),
        and_(p, q),
        implies(constant(False), q),
        implies(p, not_(p)),
        and_(p, not_(p)),
        xor(p, implies(q, r)),
        iff(not_(or_(p, q)), and_(not_(p), not_(q))),
    ]


def read_formula_file(filepath: Path) -> List[str]:
    """Read formulas from a file, one per line.

    Blank lines and lines starting with ``#`` are skipped.

    Args:
        filepath: Path to the formula file

    Returns:
        Formula strings in file order

    Raises:
        FormulaFileError: If the file is missing, unreadable or has no formulas
    """
    try:
        with open(filepath, "r", encoding="utf-8") as f:
            lines = [line.strip() for line in f]
    except FileNotFoundError as e:
        raise FormulaFileError(f"Formula file not found: {filepath}") from e
    except OSError as e:
        raise FormulaFileError(f"Error reading formula file: {e}") from e

    formulas = [line for line in lines if line and not line.startswith("#")]
    if not formulas:
        raise FormulaFileError(f"Formula file contains no formulas: {filepath}")
    return formulas


def format_report(expr: Expr) -> str:
    """Render the full truth-table report for one expression.

    The report ends with a blank line so consecutive reports are separated.
    """
    lines = [
        f"Expression: {expr}",
        f"Variables: {', '.join(sorted(expr.variables()))}",
        "All possible interpretations:",
    ]
    lines.extend(str(i) for i in iter_interpretations(expr))

    lines.append(f"The expression is{'' if is_tautology(expr) else ' NOT'} a tautology")
    lines.append(
        f"The expression is{'' if is_contradiction(expr) else ' NOT'} a contradiction"
    )

    lines.append("All interpretations that satisfy the expression:")
    lines.extend(str(i) for i in all_satisfiable_interpretations(expr))

    lines.append("All interpretations that do not satisfy the expression:")
    lines.extend(str(i) for i in all_unsatisfiable_interpretations(expr))

    lines.append("")
    return "\n".join(lines) + "\n"


def collect_expressions(
    expressions: Optional[List[str]], formula_file: Optional[Path]
) -> List[Tuple[str, Expr]]:
    """Resolve the expressions to analyse from the command line.

    Falls back to the built-in samples when neither ``-e`` nor ``-f`` is given.

    Raises:
        ParseError: If a formula is malformed
        FormulaFileError: If the formula file cannot be used
    """
    sources: List[str] = list(expressions or [])
    if formula_file is not None:
        sources.extend(read_formula_file(formula_file))

    if not sources:
        return [(str(expr), expr) for expr in sample_expressions()]
    return [(source, parse(source)) for source in sources]


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser for command line interface.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        description="Truth-table analysis of propositional formulas",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run_solver.py
  python run_solver.py -e "p | !p" -e "p & q -> r"
  python run_solver.py -f formulas.txt -v
  python run_solver.py -e "p ^ (q -> r)" --dot trees --format svg

Formula syntax:
  !p  ~p  not p      negation
  p & q   p and q    conjunction
  p | q   p or q     disjunction
  p ^ q   p xor q    exclusive-or
  p -> q  p => q     implication
  p <-> q p <=> q    equivalence
  true, false        constants
        """,
    )

    parser.add_argument(
        "-e",
        "--expression",
        action="append",
        metavar="FORMULA",
        help="Formula to analyse (repeatable)",
    )

    parser.add_argument(
        "-f", "--file", type=Path, help="File with one formula per line"
    )

    parser.add_argument(
        "--dot",
        type=Path,
        metavar="DIR",
        help="Also render each expression tree into DIR with Graphviz",
    )

    parser.add_argument(
        "--format",
        default="png",
        choices=["png", "svg", "pdf"],
        help="Image format for --dot (default: png)",
    )

    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose output"
    )

    parser.add_argument(
        "--debug", action="store_true", help="Enable debug output (overrides --verbose)"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the formula analyser.

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=args.verbose, debug=args.debug)
    logger = get_logger()

    try:
        expressions = collect_expressions(args.expression, args.file)

        for index, (source, expr) in enumerate(expressions):
            logger.analysis_start(source)
            sys.stdout.write(format_report(expr))

            if args.dot is not None:
                visualize_expression(
                    expr, f"expression_{index + 1}", args.format, str(args.dot)
                )

        return 0

    except ParseError as e:
        logger.error(f"Formula parsing error: {e}")
        return 2

    except FormulaFileError as e:
        logger.error(f"Formula file error: {e}")
        return 3

    except KeyboardInterrupt:
        logger.error("Analysis interrupted by user")
        return 4

    except Exception as e:
        logger.error(f"Unexpected error: {type(e).__name__}: {e}")
        return 5


if __name__ == "__main__":
    sys.exit(main())
