"""
Testing colours and codes: labels, lookup, equality, copying, text form.
"""

import pytest

from codebreaker.code import Code
from codebreaker.colours import BinaryColour, MultiColour


def test_domains_have_fixed_sizes_and_labels():
    assert [c.label() for c in BinaryColour.colours()] == ["B", "W"]
    assert [c.label() for c in MultiColour.colours()] == ["B", "R", "Y", "G", "P", "O"]


def test_from_label_is_case_insensitive():
    assert MultiColour.from_label("r") is MultiColour.RED
    assert BinaryColour.from_label(" w ") is BinaryColour.WHITE


def test_from_label_rejects_unknown_colour():
    with pytest.raises(ValueError, match="Invalid colour 'R'"):
        BinaryColour.from_label("R")


def test_code_equality_is_by_label():
    a = Code([BinaryColour.BLACK, BinaryColour.WHITE])
    b = Code([BinaryColour.BLACK, BinaryColour.WHITE])
    cross_domain = Code([MultiColour.BLUE, BinaryColour.WHITE])

    assert a == b
    assert a is not b
    assert a == cross_domain
    assert hash(a) == hash(cross_domain)
    assert a != Code([BinaryColour.WHITE, BinaryColour.BLACK])


def test_copy_is_equal_but_distinct():
    code = Code.from_labels(["R", "G", "B", "Y"], MultiColour)
    clone = code.copy()
    assert clone == code
    assert clone is not code


def test_code_text_form():
    code = Code.from_labels(["R", "G", "B", "Y"], MultiColour)
    assert str(code) == "[R, G, B, Y]"
    assert len(code) == 4
    assert code[2] is MultiColour.BLUE


def test_code_cannot_be_reassigned():
    code = Code.from_labels(["B", "W"], BinaryColour)
    with pytest.raises(AttributeError):
        code.colours = ()
