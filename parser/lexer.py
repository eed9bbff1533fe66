# parser/lexer.py
# This file is part of Proposat - A Propositional Logic Reasoning Engine
#
# Lexical analyzer for propositional formula tokenization using SLY

"""Lexical analyzer for propositional formula strings.

This module breaks formula text into tokens for the parser. Every connective
has a symbolic spelling and a word spelling, so the rendered form of an
expression ("p and (not q)") can be read back as well as the compact one
("p & !q").

Supported Tokens:
- Negation: !, ~, not
- Conjunction: &, and
- Disjunction: |, or
- Exclusive-or: ^, xor
- Implication: ->, =>
- Equivalence: <->, <=>
- Grouping: (, )
- Constants: true, True, false, False
- Identifiers: a letter followed by letters or digits
- Whitespace: ignored during tokenization
"""

from sly import Lexer
from utils.logger import get_logger


class FormulaLexer(Lexer):
    """SLY-based lexer for propositional formula tokenization.

    Keyword spellings are matched as identifiers first and then reassigned to
    their connective or constant token type.

    Attributes:
        tokens: Set of valid token types
        ignore: Characters to skip during tokenization
        ID: Identifier pattern with keyword mapping
    """

    tokens = {
        "TRUE",
        "FALSE",
        "ID",
        "NOT",
        "AND",
        "OR",
        "XOR",
        "IMPLIES",
        "IFF",
        "LPAREN",
        "RPAREN",
    }

    ignore = " \t\r\n"

    # Equivalence is listed before implication so "<->" is never split
    IFF = r"<->|<=>"
    IMPLIES = r"->|=>"
    NOT = r"!|~"
    AND = r"&"
    OR = r"\|"
    XOR = r"\^"
    LPAREN = r"\("
    RPAREN = r"\)"

    ID = r"[A-Za-z][A-Za-z0-9]*"

    ID["true"] = "TRUE"
    ID["True"] = "TRUE"
    ID["false"] = "FALSE"
    ID["False"] = "FALSE"
    ID["not"] = "NOT"
    ID["and"] = "AND"
    ID["or"] = "OR"
    ID["xor"] = "XOR"

    def error(self, t):
        """Handle illegal characters during tokenization.

        Args:
            t: SLY token object containing error context

        Raises:
            ValueError: Always raised with character and position information
        """
        logger = get_logger()

        illegal_char = t.value[0]
        error_pos = self.index

        logger.debug(f"Illegal character '{illegal_char}' at position {error_pos}")

        self.index += 1

        raise ValueError(
            f"Illegal character '{illegal_char}' encountered at position {error_pos}"
        )
