# parser/grammar.py
# This file is part of Proposat - A Propositional Logic Reasoning Engine
#
# LALR(1) grammar and parser for propositional formulas using SLY

"""Propositional formula grammar implementation using SLY parser generator.

Grammar actions call the expression builders, never the node classes, so
implication, equivalence and exclusive-or arrive already rewritten into
Not / And / Or trees.

Operator Precedence (lowest to highest):
- IFF ('<->'): right-associative
- IMPLIES ('->'): right-associative
- OR ('|'): left-associative
- XOR ('^'): left-associative
- AND ('&'): left-associative
- NOT ('!'): right-associative
"""

from sly import Parser
from expressions import (
    Expr,
    InvalidArgument,
    and_,
    constant,
    iff,
    implies,
    not_,
    or_,
    variable,
    xor,
)
from .lexer import FormulaLexer
from .exceptions import ParseError
from utils.logger import get_logger


class _FormulaParser(Parser):
    """SLY-based LALR(1) parser for propositional formulas.

    Attributes:
        tokens: Token types from FormulaLexer
        precedence: Operator precedence and associativity rules
    """

    tokens = FormulaLexer.tokens

    precedence = (
        ("right", "IFF"),
        ("right", "IMPLIES"),
        ("left", "OR"),
        ("left", "XOR"),
        ("left", "AND"),
        ("right", "NOT"),
    )

    @_("expr")
    def start(self, p) -> Expr:
        return p.expr

    @_("expr IFF expr")
    def expr(self, p) -> Expr:
        return iff(p.expr0, p.expr1)

    @_("expr IMPLIES expr")
    def expr(self, p) -> Expr:
        return implies(p.expr0, p.expr1)

    @_("expr OR expr")
    def expr(self, p) -> Expr:
        return or_(p.expr0, p.expr1)

    @_("expr XOR expr")
    def expr(self, p) -> Expr:
        return xor(p.expr0, p.expr1)

    @_("expr AND expr")
    def expr(self, p) -> Expr:
        return and_(p.expr0, p.expr1)

    @_("NOT expr")
    def expr(self, p) -> Expr:
        return not_(p.expr)

    @_("LPAREN expr RPAREN")
    def expr(self, p) -> Expr:
        return p.expr

    @_("ID")
    def expr(self, p) -> Expr:
        return variable(p.ID)

    @_("TRUE")
    def expr(self, p) -> Expr:
        return constant(True)

    @_("FALSE")
    def expr(self, p) -> Expr:
        return constant(False)

    def parse(self, text: str) -> Expr:
        """Parse formula text into an expression tree.

        Args:
            text: Formula string to parse

        Returns:
            Root node of the built expression

        Raises:
            ParseError: If the formula is not a string, is empty or contains
                syntax errors
        """
        logger = get_logger()
        logger.debug(f"Parsing formula: {text!r}")

        if not isinstance(text, str):
            raise ParseError(f"Formula must be a string, got {type(text).__name__}")
        if text.strip() == "":
            raise ParseError("Input formula is empty.")

        try:
            ast_result = super().parse(FormulaLexer().tokenize(text))
        except (ParseError, InvalidArgument):
            logger.debug("Parse error encountered")
            raise
        except Exception as e:
            logger.debug(f"Unexpected parsing error: {type(e).__name__}: {e}")
            raise ParseError(f"Parse failed: {e}") from e

        if ast_result is None:
            raise ParseError("Failed to parse formula (syntax error).")

        logger.debug(f"Successfully parsed formula into {type(ast_result).__name__}")
        return ast_result

    def error(self, token):
        """Handle syntax errors during parsing.

        Args:
            token: Problematic token or None for EOF errors

        Raises:
            ParseError: Always raises with detailed error information
        """
        if token:
            error_msg = (
                f"Syntax error near '{token.value}' "
                f"(type: {token.type}) at position {token.index}"
            )
        else:
            error_msg = "Syntax error: Unexpected end of formula"

        raise ParseError(error_msg)
