from __future__ import annotations

import dataclasses
from typing import Any, Generic, TypeVar, cast


T = TypeVar("T")


# eq=False keeps exceptions hashable (identity semantics).
@dataclasses.dataclass(slots=True, eq=False)
class PlusCodeError(ValueError):
    """Rejected input; `code` is the stable identifier callers branch on."""

    code: str
    message: str
    details: Any | None = None

    def __str__(self) -> str:
        return self.message


class InvalidCodeLength(PlusCodeError):
    pass


class InvalidFullCode(PlusCodeError):
    pass


class InvalidShortCode(PlusCodeError):
    pass


class PaddedCodeNotShortenable(PlusCodeError):
    pass


class InvalidCoordinate(PlusCodeError):
    pass


def invalid_code_length(code_length: object) -> InvalidCodeLength:
    return InvalidCodeLength(
        code="INVALID_CODE_LENGTH",
        message=f"Invalid Open Location Code length: {code_length}",
        details={"code_length": code_length},
    )


def invalid_full_code(code: object) -> InvalidFullCode:
    return InvalidFullCode(
        code="INVALID_FULL_CODE",
        message=f"Open Location Code is not a valid full code: {code}",
        details={"code": code},
    )


def invalid_short_code(code: object) -> InvalidShortCode:
    return InvalidShortCode(
        code="INVALID_SHORT_CODE",
        message=f"Open Location Code is not valid: {code}",
        details={"code": code},
    )


def padded_code_not_shortenable(code: str) -> PaddedCodeNotShortenable:
    return PaddedCodeNotShortenable(
        code="PADDED_CODE_NOT_SHORTENABLE",
        message=f"Cannot shorten padded codes: {code}",
        details={"code": code},
    )


def invalid_coordinate(latitude: float, longitude: float) -> InvalidCoordinate:
    return InvalidCoordinate(
        code="INVALID_COORDINATE",
        message=f"Coordinates must be finite: ({latitude}, {longitude})",
        details={"latitude": latitude, "longitude": longitude},
    )


@dataclasses.dataclass(frozen=True, slots=True)
class Result(Generic[T]):
    """Outcome of a fallible operation: exactly one of value/error is set."""

    value: T | None = None
    error: PlusCodeError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        if self.error is not None:
            raise self.error
        return cast(T, self.value)
