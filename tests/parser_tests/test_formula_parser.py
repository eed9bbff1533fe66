# tests/parser_tests/test_formula_parser.py
# This file is part of Proposat - A Propositional Logic Reasoning Engine
#
# Test suite for the propositional formula parser

"""Test suite for formula parsing, precedence and error handling.

Parsed formulas must be built from the same primitive trees the builders
produce, so results are compared structurally against builder output.
"""

import sys

import pytest
from expressions import (
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
from solver import are_equivalent, is_tautology
from utils.logger import get_logger

p, q, r = variable("p"), variable("q"), variable("r")


class TestFormulaParserBasic:
    """Test cases for tokens, keywords and tree shape."""

    def setup_method(self):
        """Initialize logger for each test method."""
        self.logger = get_logger()

    @pytest.mark.parametrize(
        "formula,expected",
        [
            ("p", p),
            ("x1", variable("x1")),
            ("true", constant(True)),
            ("True", constant(True)),
            ("false", constant(False)),
            ("False", constant(False)),
            ("!p", not_(p)),
            ("~p", not_(p)),
            ("not p", not_(p)),
            ("p & q", and_(p, q)),
            ("p and q", and_(p, q)),
            ("p | q", or_(p, q)),
            ("p or q", or_(p, q)),
            ("p ^ q", xor(p, q)),
            ("p xor q", xor(p, q)),
            ("p -> q", implies(p, q)),
            ("p => q", implies(p, q)),
            ("p <-> q", iff(p, q)),
            ("p <=> q", iff(p, q)),
            ("((p))", p),
            (" p\n&\tq ", and_(p, q)),
        ],
    )
    def test_single_constructs(self, formula, expected):
        self.logger.debug(f"Parsing single construct: {formula!r}")
        assert parse(formula) == expected

    def test_keywords_are_whole_words(self):
        assert parse("notp") == variable("notp")
        assert parse("andor") == variable("andor")
        assert parse("true1") == variable("true1")

    def test_parsed_rendering_round_trips_for_grouped_output(self):
        expr = parse("!p & q")
        assert str(expr) == "(not p) and q"
        assert parse(str(expr)) == expr


class TestPrecedence:
    """Operator precedence and associativity."""

    @pytest.mark.parametrize(
        "formula,expected",
        [
            ("p & q | r", or_(and_(p, q), r)),
            ("p | q & r", or_(p, and_(q, r))),
            ("!p & q", and_(not_(p), q)),
            ("!(p & q)", not_(and_(p, q))),
            ("!!p", not_(not_(p))),
            ("p ^ q & r", xor(p, and_(q, r))),
            ("p | q ^ r", or_(p, xor(q, r))),
            ("p | q -> r", implies(or_(p, q), r)),
            ("p -> q -> r", implies(p, implies(q, r))),
            ("p -> q <-> r", iff(implies(p, q), r)),
            ("p & q & r", and_(and_(p, q), r)),
            ("p | q | r", or_(or_(p, q), r)),
            ("p & (q | r)", and_(p, or_(q, r))),
        ],
    )
    def test_precedence(self, formula, expected):
        assert parse(formula) == expected

    def test_parsed_laws_are_tautologies(self):
        assert is_tautology(parse("!(p & q) <-> (!p | !q)"))
        assert is_tautology(parse("(p -> q) & (q -> r) -> (p -> r)"))
        assert not is_tautology(parse("p -> q -> r <-> (p -> q) -> r"))
        assert are_equivalent(parse("p ^ q"), parse("!(p <-> q)"))


class TestParseErrors:
    """Malformed input is reported as ParseError."""

    @pytest.mark.parametrize(
        "formula",
        [
            "",
            "   ",
            "p &",
            "& p",
            "(p | q",
            "p | q)",
            "p q",
            "()",
            "p -",
            "p $ q",
            "_p",
            "1p",
            "p_q",
        ],
    )
    def test_rejected(self, formula):
        with pytest.raises(ParseError):
            parse(formula)

    def test_error_reports_position(self):
        with pytest.raises(ParseError, match="position"):
            parse("p & # q")

    def test_parse_error_is_runtime_error(self):
        assert issubclass(ParseError, RuntimeError)


class TestParserInput:
    """Input type checks, logging and very deep formulas."""

    def setup_method(self):
        self.logger = get_logger()

    @pytest.mark.parametrize("source", [None, 42, b"p & q", ["p"]])
    def test_non_string_input_is_a_parse_error(self, source):
        with pytest.raises(ParseError, match="must be a string"):
            parse(source)

    def test_formula_is_logged_once_per_parse(self, monkeypatch):
        messages = []
        monkeypatch.setattr(
            self.logger, "debug", lambda message, **kwargs: messages.append(message)
        )

        parse("p & q")

        assert len([m for m in messages if m.startswith("Parsing formula")]) == 1

    def test_deeply_nested_negation(self):
        depth = 3 * sys.getrecursionlimit()
        expr = parse("!" * depth + "p")
        assert expr.variables() == {"p"}
        assert is_tautology(or_(expr, not_(expr)))
