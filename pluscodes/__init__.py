"""Open Location Code (Plus Codes) encoding, decoding and shortening.

Every fallible operation comes in two forms: the plain name raises a
PlusCodeError subclass, the `try_` form returns a Result carrying either the
value or that same error.
"""

from __future__ import annotations

from pluscodes.core.errors import (
    InvalidCodeLength,
    InvalidCoordinate,
    InvalidFullCode,
    InvalidShortCode,
    PaddedCodeNotShortenable,
    PlusCodeError,
    Result,
)
from pluscodes.models.code_area import CodeArea
from pluscodes.services.codec import decode, encode, try_decode, try_encode
from pluscodes.services.shortening import (
    recover_nearest,
    shorten,
    try_recover_nearest,
    try_shorten,
)
from pluscodes.services.validation import is_full, is_short, is_valid

__all__ = [
    "CodeArea",
    "InvalidCodeLength",
    "InvalidCoordinate",
    "InvalidFullCode",
    "InvalidShortCode",
    "PaddedCodeNotShortenable",
    "PlusCodeError",
    "Result",
    "decode",
    "encode",
    "is_full",
    "is_short",
    "is_valid",
    "recover_nearest",
    "shorten",
    "try_decode",
    "try_encode",
    "try_recover_nearest",
    "try_shorten",
]
