# tests/expression_tests/test_interpretation.py

"""Interpretation – upsert, lookup, cloning and deterministic rendering."""

import pytest
from expressions import Interpretation, InvalidArgument


def test_new_interpretation_is_empty():
    interpretation = Interpretation()
    assert len(interpretation) == 0
    assert str(interpretation) == ""


def test_add_then_lookup():
    interpretation = Interpretation()
    interpretation.add("p", True)
    assert interpretation.exists("p")
    assert interpretation.value_of("p") is True
    assert not interpretation.exists("q")


def test_add_overwrites_existing_value():
    interpretation = Interpretation()
    interpretation.add("p", True)
    interpretation.add("p", False)
    assert interpretation.value_of("p") is False
    assert len(interpretation) == 1


def test_value_of_missing_name_fails():
    interpretation = Interpretation()
    interpretation.add("p", True)
    with pytest.raises(InvalidArgument):
        interpretation.value_of("q")


@pytest.mark.parametrize("name", ["", "1a", "a_b", "a b", None])
def test_malformed_names_rejected_by_every_accessor(name):
    interpretation = Interpretation()
    with pytest.raises(InvalidArgument):
        interpretation.add(name, True)
    with pytest.raises(InvalidArgument):
        interpretation.exists(name)
    with pytest.raises(InvalidArgument):
        interpretation.value_of(name)


def test_add_requires_bool_value():
    with pytest.raises(InvalidArgument):
        Interpretation().add("p", 1)


def test_render_is_sorted_by_name():
    interpretation = Interpretation()
    interpretation.add("r", False)
    interpretation.add("p", True)
    interpretation.add("q", False)
    assert str(interpretation) == "p: True| q: False| r: False"
    assert interpretation.render() == str(interpretation)
    assert interpretation.variables() == ["p", "q", "r"]
    assert list(interpretation) == ["p", "q", "r"]


def test_clone_is_independent():
    original = Interpretation()
    original.add("p", True)
    copy = original.clone()
    assert copy == original

    copy.add("p", False)
    copy.add("q", True)
    assert original.value_of("p") is True
    assert not original.exists("q")


def test_equality_and_hash_follow_entries():
    first = Interpretation()
    first.add("p", True)
    first.add("q", False)
    second = Interpretation()
    second.add("q", False)
    second.add("p", True)
    assert first == second
    assert hash(first) == hash(second)
    assert len({first, second}) == 1


def test_from_assignment_reads_low_bits_in_order():
    interpretation = Interpretation.from_assignment(["p", "q", "r"], 0b101)
    assert interpretation.items() == [("p", True), ("q", False), ("r", True)]


def test_from_assignment_with_no_variables_is_empty():
    assert len(Interpretation.from_assignment([], 0)) == 0


@pytest.mark.parametrize(
    "variables,bits",
    [
        (None, 0),
        (["p", "p"], 0),
        (["p", "2q"], 1),
        (["p"], -1),
        (["p"], 2),
        ([], 1),
    ],
)
def test_from_assignment_rejects_bad_input(variables, bits):
    with pytest.raises(InvalidArgument):
        Interpretation.from_assignment(variables, bits)
