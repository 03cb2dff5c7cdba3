from __future__ import annotations

import pytest

from pluscodes import is_full, is_short, is_valid
from pluscodes.services.validation import is_valid_code_length


# (code, is_valid, is_short, is_full)
VALIDITY_VECTORS = [
    ("8FWC2345+G6", True, False, True),
    ("8FWC2345+G6G", True, False, True),
    ("8fwc2345+", True, False, True),
    ("8FWCX400+", True, False, True),
    ("WC2345+G6g", True, True, False),
    ("2345+G6", True, True, False),
    ("45+G6", True, True, False),
    ("+G6", True, True, False),
    ("G+", False, False, False),
    ("+", False, False, False),
    ("8FWC2345+G", False, False, False),
    ("8FWC2_45+G6", False, False, False),
    ("8FWC2η45+G6", False, False, False),
    ("8FWC2345+G6+", False, False, False),
    ("8FWC2300+G6", False, False, False),
    ("WC2300+G6g", False, False, False),
    ("WC2345+G", False, False, False),
]


@pytest.mark.parametrize("code,valid,short,full", VALIDITY_VECTORS)
def test_reference_validity_vectors(code: str, valid: bool, short: bool, full: bool) -> None:
    assert is_valid(code) is valid
    assert is_short(code) is short
    assert is_full(code) is full


@pytest.mark.parametrize("code", [None, "", 42, b"8FWC2345+G6"])
def test_non_string_or_empty_input_is_invalid(code: object) -> None:
    assert is_valid(code) is False
    assert is_short(code) is False
    assert is_full(code) is False


@pytest.mark.parametrize(
    "code",
    [
        "8FWC2345G6",  # no separator
        "8FWC234+5G6",  # odd separator index
        "8FWC23456+G6",  # separator past position 8
    ],
)
def test_separator_placement(code: str) -> None:
    assert is_valid(code) is False


@pytest.mark.parametrize(
    "code,valid",
    [
        ("8F000000+", True),
        ("8FWC0000+", True),
        ("8FWC2300+", True),
        ("00000000+", False),  # padding may not start the code
        ("8F0C0000+", False),  # two padding runs
        ("8FWC2000+", False),  # odd run
        ("8FWC0023+", False),  # run not right before the separator
        ("8FWC00+", False),  # padding in a short code
        ("CF00+", False),
    ],
)
def test_padding_rules(code: str, valid: bool) -> None:
    assert is_valid(code) is valid


def test_validators_are_case_insensitive() -> None:
    assert is_full("8fwc2345+g6") is True
    assert is_short("wc2345+g6") is True


def test_validators_are_pure() -> None:
    for code, *_ in VALIDITY_VECTORS:
        assert is_valid(code) == is_valid(code)
        assert is_short(code) == is_short(code)
        assert is_full(code) == is_full(code)


@pytest.mark.parametrize(
    "code_length,expected",
    [
        (2, True),
        (4, True),
        (8, True),
        (10, True),
        (11, True),
        (15, True),
        (0, False),
        (1, False),
        (3, False),
        (9, False),
        (-2, False),
        (10.0, False),
        (True, False),
        (None, False),
    ],
)
def test_is_valid_code_length(code_length: object, expected: bool) -> None:
    assert is_valid_code_length(code_length) is expected
