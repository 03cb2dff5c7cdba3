from __future__ import annotations

import logging
import math

from pluscodes.core.errors import (
    PlusCodeError,
    Result,
    invalid_code_length,
    invalid_coordinate,
    invalid_full_code,
)
from pluscodes.core.settings import get_settings
from pluscodes.models.code_area import CodeArea
from pluscodes.services.validation import is_full, is_valid_code_length
from pluscodes.utils.grid import (
    ENCODING_BASE,
    GRID_COLUMNS,
    GRID_ROWS,
    GRID_SPAN_DEGREES,
    LATITUDE_MAX,
    LONGITUDE_MAX,
    PADDING,
    PAIR_CODE_LENGTH,
    SEPARATOR,
    SEPARATOR_POSITION,
    clip_latitude,
    digit_for,
    index_of,
    magnetize_int,
    normalize_longitude,
    precision_by_length,
)


logger = logging.getLogger(__name__)


def _rejected(operation: str, error: PlusCodeError) -> Result:
    logger.debug("Rejected %s (%s: %r)", operation, error.code, error.details)
    return Result(error=error)


def _cell_index(value: float, cells: int) -> int:
    # magnetize_int may round a value up onto `cells` itself.
    return min(math.trunc(value), cells - 1)


def _build_code(
    latitude: float, longitude: float, code_length: int, *, epsilon: float
) -> str:
    """Emit digits for coordinates already shifted into [0, 180] x [0, 360)."""

    out: list[str] = []
    digit = 0

    while digit < code_length:
        if digit == 0:
            latitude = magnetize_int(latitude / ENCODING_BASE, epsilon)
            longitude = magnetize_int(longitude / ENCODING_BASE, epsilon)
        elif digit < PAIR_CODE_LENGTH:
            latitude = magnetize_int(latitude * ENCODING_BASE, epsilon)
            longitude = magnetize_int(longitude * ENCODING_BASE, epsilon)
        else:
            latitude = magnetize_int(latitude * GRID_ROWS, epsilon)
            longitude = magnetize_int(longitude * GRID_COLUMNS, epsilon)

        if digit < PAIR_CODE_LENGTH:
            row = _cell_index(latitude, ENCODING_BASE)
            col = _cell_index(longitude, ENCODING_BASE)
            out.append(digit_for(row))
            out.append(digit_for(col))
            digit += 2
        else:
            row = _cell_index(latitude, GRID_ROWS)
            col = _cell_index(longitude, GRID_COLUMNS)
            out.append(digit_for(row * GRID_COLUMNS + col))
            digit += 1

        latitude -= row
        longitude -= col

        if digit == SEPARATOR_POSITION:
            out.append(SEPARATOR)

    if digit < SEPARATOR_POSITION:
        out.append(PADDING * (SEPARATOR_POSITION - digit))
        out.append(SEPARATOR)

    return "".join(out)


def try_encode(
    latitude: float, longitude: float, code_length: int | None = None
) -> Result[str]:
    settings = get_settings()
    if code_length is None:
        code_length = settings.default_code_length

    if not is_valid_code_length(code_length):
        return _rejected("encode", invalid_code_length(code_length))
    if not (math.isfinite(latitude) and math.isfinite(longitude)):
        return _rejected("encode", invalid_coordinate(latitude, longitude))

    latitude = clip_latitude(latitude)
    if latitude == LATITUDE_MAX:
        # The pole itself is the north edge of the last row; step into that row.
        latitude -= precision_by_length(code_length)
    longitude = normalize_longitude(longitude)

    code = _build_code(
        latitude + LATITUDE_MAX,
        longitude + LONGITUDE_MAX,
        code_length,
        epsilon=settings.near_int_epsilon,
    )
    return Result(value=code)


def encode(latitude: float, longitude: float, code_length: int | None = None) -> str:
    """Encode a location into a Plus Code.

    `code_length` counts digits, excluding the separator and padding. Lengths
    below 10 must be even; longer codes refine a 5x4 grid one digit at a time.
    Raises InvalidCodeLength or InvalidCoordinate.
    """

    return try_encode(latitude, longitude, code_length).unwrap()


def try_decode(code: str) -> Result[CodeArea]:
    if not is_full(code):
        return _rejected("decode", invalid_full_code(code))

    digits = code.replace(SEPARATOR, "").replace(PADDING, "").upper()

    south = -LATITUDE_MAX
    west = -LONGITUDE_MAX
    lat_res = GRID_SPAN_DEGREES
    lng_res = GRID_SPAN_DEGREES

    digit = 0
    while digit < len(digits):
        if digit < PAIR_CODE_LENGTH:
            lat_res /= ENCODING_BASE
            lng_res /= ENCODING_BASE
            south += lat_res * index_of(digits[digit])
            west += lng_res * index_of(digits[digit + 1])
            digit += 2
        else:
            lat_res /= GRID_ROWS
            lng_res /= GRID_COLUMNS
            row, col = divmod(index_of(digits[digit]), GRID_COLUMNS)
            south += lat_res * row
            west += lng_res * col
            digit += 1

    return Result(value=CodeArea(south, west, lat_res, lng_res))


def decode(code: str) -> CodeArea:
    """Decode a full code into the area it covers. Raises InvalidFullCode."""

    return try_decode(code).unwrap()
