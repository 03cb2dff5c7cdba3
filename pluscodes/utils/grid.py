from __future__ import annotations

"""Open Location Code grid constants and coordinate arithmetic.

These constants are the wire contract shared with every other Open Location
Code implementation; changing any of them produces incompatible codes.
"""

import math


CODE_ALPHABET = "23456789CFGHJMPQRVWX"
ENCODING_BASE = len(CODE_ALPHABET)
_DECODE_MAP = {c: i for i, c in enumerate(CODE_ALPHABET)}

SEPARATOR = "+"
SEPARATOR_POSITION = 8
PADDING = "0"

# Digits encoded as lat/lng pairs; anything beyond uses the 5x4 grid.
PAIR_CODE_LENGTH = 10
GRID_ROWS = 5
GRID_COLUMNS = 4

LATITUDE_MAX = 90.0
LONGITUDE_MAX = 180.0

# Side of the addressing square the first pair divides by 20.
GRID_SPAN_DEGREES = float(ENCODING_BASE * ENCODING_BASE)

DEFAULT_NEAR_INT_EPSILON = 1e-10


def clip_latitude(latitude: float) -> float:
    return min(LATITUDE_MAX, max(-LATITUDE_MAX, latitude))


def normalize_longitude(longitude: float) -> float:
    """Wrap longitude into [-180, 180)."""

    if -LONGITUDE_MAX <= longitude < LONGITUDE_MAX:
        return longitude
    longitude = (longitude + LONGITUDE_MAX) % 360.0 - LONGITUDE_MAX
    # The modulo rounds up to exactly 360 for tiny negative offsets.
    if longitude >= LONGITUDE_MAX:
        longitude -= 360.0
    return longitude


def precision_by_length(code_length: int) -> float:
    """Latitude height in degrees of a cell addressed by `code_length` digits."""

    if code_length <= PAIR_CODE_LENGTH:
        return math.pow(ENCODING_BASE, 2 - code_length // 2)
    return math.pow(ENCODING_BASE, -3) / math.pow(GRID_ROWS, code_length - PAIR_CODE_LENGTH)


def magnetize_int(value: float, epsilon: float = DEFAULT_NEAR_INT_EPSILON) -> float:
    """Snap `value` onto the next integer when it sits within epsilon below it.

    Repeated scaling can leave a coordinate at 2.9999999999999996 instead of 3;
    without the snap the truncation picks the cell one below the boundary.
    """

    if math.trunc(value) != math.trunc(value + epsilon):
        return float(round(value))
    return value


def digit_for(index: int) -> str:
    return CODE_ALPHABET[index]


def index_of(digit: str) -> int:
    try:
        return _DECODE_MAP[digit]
    except KeyError as e:
        raise ValueError(f"Invalid Open Location Code character: {digit!r}") from e
