from __future__ import annotations

import re
from typing import cast

from pluscodes.utils.grid import (
    CODE_ALPHABET,
    PADDING,
    PAIR_CODE_LENGTH,
    SEPARATOR,
    SEPARATOR_POSITION,
)


_ALLOWED_CHARACTERS = frozenset(CODE_ALPHABET + SEPARATOR + PADDING)
_PADDING_RUN = re.compile(f"{re.escape(PADDING)}+")


def is_valid_code_length(code_length: object) -> bool:
    if isinstance(code_length, bool) or not isinstance(code_length, int):
        return False
    if code_length < 2:
        return False
    return code_length >= PAIR_CODE_LENGTH or code_length % 2 == 0


def separator_index(code: str) -> int:
    return code.find(SEPARATOR)


def _valid_length(code: str) -> bool:
    if len(code) < 2 + len(SEPARATOR):
        return False
    # A single digit after the separator is never produced by encode().
    return len(code.split(SEPARATOR)[-1]) != 1


def _valid_separator(code: str) -> bool:
    if code.count(SEPARATOR) != 1:
        return False
    index = separator_index(code)
    return index <= SEPARATOR_POSITION and index % 2 == 0


def _valid_padding(code: str) -> bool:
    runs = _PADDING_RUN.findall(code)
    if not runs:
        return True
    if code.startswith(PADDING):
        return False
    if not code.endswith(PADDING + SEPARATOR):
        return False
    if len(runs) != 1:
        return False

    run = runs[0]
    return (
        len(run) % 2 == 0
        and len(run) <= SEPARATOR_POSITION - 2
        and separator_index(code) == SEPARATOR_POSITION
    )


def _valid_characters(code: str) -> bool:
    return all(c.upper() in _ALLOWED_CHARACTERS for c in code)


def is_valid(code: object) -> bool:
    """Whether `code` is a well-formed full or short code (case-insensitive)."""

    if not isinstance(code, str):
        return False
    return (
        _valid_length(code)
        and _valid_separator(code)
        and _valid_padding(code)
        and _valid_characters(code)
    )


def is_short(code: object) -> bool:
    """Valid code with leading digits omitted (separator before position 8)."""

    if not is_valid(code):
        return False
    return separator_index(cast(str, code)) < SEPARATOR_POSITION


def is_full(code: object) -> bool:
    return is_valid(code) and not is_short(code)
