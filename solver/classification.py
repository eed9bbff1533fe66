# solver/classification.py
# This file is part of Proposat - A Propositional Logic Reasoning Engine
#
# Classification of an expression over all of its interpretations

from enum import Enum, auto


class Classification(Enum):
    """Three-way logical status of a propositional expression.

    Values:
        TAUTOLOGY: True under every interpretation of its variables
        CONTRADICTION: False under every interpretation of its variables
        CONTINGENT: True under some interpretations and false under others
    """

    TAUTOLOGY = auto()
    CONTRADICTION = auto()
    CONTINGENT = auto()

    def __str__(self) -> str:
        return self.name

    def is_satisfiable(self) -> bool:
        """True for every classification except CONTRADICTION."""
        return self is not Classification.CONTRADICTION
