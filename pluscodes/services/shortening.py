from __future__ import annotations

"""Short codes: dropping and restoring leading digits around a reference point.

Everything here is layered on encode/decode; no grid arithmetic of its own
beyond rounding the reference point.
"""

import logging
import math

from pluscodes.core.errors import (
    PlusCodeError,
    Result,
    invalid_coordinate,
    invalid_full_code,
    invalid_short_code,
    padded_code_not_shortenable,
)
from pluscodes.services.codec import try_decode, try_encode
from pluscodes.services.validation import is_full, is_short, separator_index
from pluscodes.utils.grid import (
    LATITUDE_MAX,
    PADDING,
    PAIR_CODE_LENGTH,
    SEPARATOR,
    SEPARATOR_POSITION,
    clip_latitude,
    normalize_longitude,
    precision_by_length,
)


logger = logging.getLogger(__name__)


def _rejected(operation: str, error: PlusCodeError) -> Result:
    logger.debug("Rejected %s (%s: %r)", operation, error.code, error.details)
    return Result(error=error)


# Leading digits shorten() tries to drop, most aggressive first.
SHORTEN_REMOVAL_LENGTHS = (8, 6, 4)

# The reference must sit within this fraction of the dropped cell size from
# the code's center, so recovery still lands in the same cell.
SHORTEN_SAFETY_FACTOR = 0.3


def _prepare_reference(latitude: float, longitude: float) -> tuple[float, float]:
    return clip_latitude(latitude), normalize_longitude(longitude)


def try_shorten(code: str, ref_latitude: float, ref_longitude: float) -> Result[str]:
    if not is_full(code):
        return _rejected("shorten", invalid_full_code(code))
    if PADDING in code:
        return _rejected("shorten", padded_code_not_shortenable(code))
    if not (math.isfinite(ref_latitude) and math.isfinite(ref_longitude)):
        return _rejected("shorten", invalid_coordinate(ref_latitude, ref_longitude))

    # Wrapped the same way recovery wraps it: 241.6 compares as -118.4.
    ref_latitude, ref_longitude = _prepare_reference(ref_latitude, ref_longitude)
    area = try_decode(code).unwrap()
    max_diff = max(
        abs(ref_latitude - area.latitude_center),
        abs(ref_longitude - area.longitude_center),
    )

    for removal_len in SHORTEN_REMOVAL_LENGTHS:
        if max_diff < precision_by_length(removal_len) * SHORTEN_SAFETY_FACTOR:
            return Result(value=code[removal_len:].upper())
    return Result(value=code.upper())


def shorten(code: str, ref_latitude: float, ref_longitude: float) -> str:
    """Drop 8, 6 or 4 leading digits when the reference is close enough.

    Returns the (uppercased) code untouched when the reference is too far away.
    Raises InvalidFullCode or PaddedCodeNotShortenable.
    """

    return try_shorten(code, ref_latitude, ref_longitude).unwrap()


def _prefix_by_reference(latitude: float, longitude: float, prefix_len: int) -> str:
    precision = precision_by_length(prefix_len)
    rounded_latitude = math.floor(latitude / precision) * precision
    rounded_longitude = math.floor(longitude / precision) * precision
    return try_encode(rounded_latitude, rounded_longitude, PAIR_CODE_LENGTH).unwrap()[
        :prefix_len
    ]


def _recover_latitude(
    latitude: float, ref_latitude: float, resolution: float, half_res: float
) -> float:
    if ref_latitude + half_res < latitude and latitude - resolution >= -LATITUDE_MAX:
        return latitude - resolution
    if ref_latitude - half_res > latitude and latitude + resolution <= LATITUDE_MAX:
        return latitude + resolution
    return latitude


def _recover_longitude(
    longitude: float, ref_longitude: float, resolution: float, half_res: float
) -> float:
    # No bounds check: encode wraps the result back into [-180, 180).
    if ref_longitude + half_res < longitude:
        return longitude - resolution
    if ref_longitude - half_res > longitude:
        return longitude + resolution
    return longitude


def try_recover_nearest(
    short_code: str, ref_latitude: float, ref_longitude: float
) -> Result[str]:
    if is_full(short_code):
        return Result(value=short_code)
    if not is_short(short_code):
        return _rejected("recover_nearest", invalid_short_code(short_code))
    if not (math.isfinite(ref_latitude) and math.isfinite(ref_longitude)):
        return _rejected("recover_nearest", invalid_coordinate(ref_latitude, ref_longitude))

    ref_latitude, ref_longitude = _prepare_reference(ref_latitude, ref_longitude)
    prefix_len = SEPARATOR_POSITION - separator_index(short_code)
    code = _prefix_by_reference(ref_latitude, ref_longitude, prefix_len) + short_code

    area = try_decode(code).unwrap()
    resolution = precision_by_length(prefix_len)
    half_res = resolution / 2
    latitude = _recover_latitude(area.latitude_center, ref_latitude, resolution, half_res)
    longitude = _recover_longitude(
        area.longitude_center, ref_longitude, resolution, half_res
    )

    return try_encode(latitude, longitude, len(code) - len(SEPARATOR))


def recover_nearest(short_code: str, ref_latitude: float, ref_longitude: float) -> str:
    """Restore the full code nearest to the reference point.

    Full codes come back unchanged. Raises InvalidShortCode for anything that
    is neither short nor full.
    """

    return try_recover_nearest(short_code, ref_latitude, ref_longitude).unwrap()
