# tests/conftest.py
# This file is part of Proposat - A Propositional Logic Reasoning Engine
#
# Test configuration and shared fixtures for pytest

"""Test configuration and shared fixtures for Proposat tests.

Puts the project root on ``sys.path`` so the top-level packages import
without installation, and provides the variables used across suites.
"""

import sys
from pathlib import Path

import pytest

# Ensure project modules can be imported
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture
def p():
    from expressions import variable

    return variable("p")


@pytest.fixture
def q():
    from expressions import variable

    return variable("q")


@pytest.fixture
def r():
    from expressions import variable

    return variable("r")


@pytest.fixture
def interpretation_of():
    """Factory building an Interpretation from keyword arguments."""
    from expressions import Interpretation

    def build(**values):
        interpretation = Interpretation()
        for name, value in values.items():
            interpretation.add(name, value)
        return interpretation

    return build
