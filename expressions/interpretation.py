# expressions/interpretation.py
# This file is part of Proposat - A Propositional Logic Reasoning Engine
#
# Assignment of truth values to variable names

"""
Interpretation: an assignment of Boolean values to variable names.

Serves as the evaluation context for expressions. Entries are kept sorted by
variable name when iterated or rendered, so output is reproducible.

Supports:
  •  Upsert of single entries (add) and membership / value lookup.
  •  Independent copies (clone).
  •  Construction from an ordered variable list and an integer bit pattern,
     used by the enumeration engine.
"""

from __future__ import annotations
import re
from typing import Dict, Iterator, List, Sequence, Tuple

from .exceptions import InvalidArgument

_VARIABLE_NAME = re.compile(r"[A-Za-z][A-Za-z0-9]*")


def is_valid_variable_name(name) -> bool:
    """Check that ``name`` is a letter followed by zero or more letters or digits."""
    return isinstance(name, str) and _VARIABLE_NAME.fullmatch(name) is not None


def _check_name(name) -> None:
    if name is None:
        raise InvalidArgument("variable name cannot be None")
    if name == "":
        raise InvalidArgument("variable name cannot be empty")
    if not is_valid_variable_name(name):
        raise InvalidArgument(f"variable name {name!r} has an invalid format")


class Interpretation:
    """Mapping from variable name to truth value.

    Created empty and filled through :meth:`add`. Equality and hashing are
    by entries; an interpretation stored in a set must not be modified.
    """

    __slots__ = ("_values",)

    def __init__(self):
        self._values: Dict[str, bool] = {}

    @classmethod
    def from_assignment(cls, variables: Sequence[str], bits: int) -> Interpretation:
        """Build an interpretation from an ordered variable list and a bit pattern.

        Variable ``variables[i]`` is mapped to bit ``i`` of ``bits``.

        Args:
            variables: Distinct, well-formed variable names
            bits: Integer in ``0 .. 2**len(variables) - 1`` holding the values

        Returns:
            New interpretation with one entry per variable

        Raises:
            InvalidArgument: On a missing list, a malformed or repeated name,
                or a bit pattern outside the range the variables can hold
        """
        if variables is None:
            raise InvalidArgument("variables cannot be None")
        if not isinstance(bits, int) or isinstance(bits, bool) or bits < 0:
            raise InvalidArgument(f"bits must be a non-negative integer, got {bits!r}")

        if bits >= 1 << len(variables):
            raise InvalidArgument(
                f"bits {bits!r} does not fit in {len(variables)} variable(s)"
            )

        interpretation = cls()
        for index, name in enumerate(variables):
            _check_name(name)
            if name in interpretation._values:
                raise InvalidArgument(f"variable {name!r} is repeated")
            interpretation._values[name] = bool((bits >> index) & 1)
        return interpretation

    def add(self, name: str, value: bool) -> None:
        """Assign ``value`` to ``name``, overwriting any previous value."""
        _check_name(name)
        if not isinstance(value, bool):
            raise InvalidArgument(
                f"value for {name!r} must be a bool, got {type(value).__name__}"
            )
        self._values[name] = value

    def exists(self, name: str) -> bool:
        """True if ``name`` is assigned by this interpretation."""
        _check_name(name)
        return name in self._values

    def value_of(self, name: str) -> bool:
        """Return the value assigned to ``name``.

        Raises:
            InvalidArgument: If the name is malformed or not assigned
        """
        _check_name(name)
        if name not in self._values:
            raise InvalidArgument(f"variable {name!r} does not exist in this interpretation")
        return self._values[name]

    def clone(self) -> Interpretation:
        """Return an independent copy with the same entries."""
        copy = Interpretation()
        copy._values = dict(self._values)
        return copy

    def variables(self) -> List[str]:
        return sorted(self._values)

    def items(self) -> List[Tuple[str, bool]]:
        return sorted(self._values.items())

    def render(self) -> str:
        return str(self)

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[str]:
        return iter(self.variables())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Interpretation):
            return NotImplemented
        return self._values == other._values

    def __hash__(self) -> int:
        """
        Stable, order-independent hash based on sorted items.
        """
        return hash(tuple(self.items()))

    def __str__(self) -> str:
        return "| ".join(
            f"{name}: {'True' if value else 'False'}" for name, value in self.items()
        )

    def __repr__(self) -> str:
        return f"Interpretation({dict(self.items())!r})"
