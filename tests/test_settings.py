from __future__ import annotations

import pytest
from pydantic import ValidationError

from pluscodes import InvalidCodeLength, encode, recover_nearest
from pluscodes.core.settings import Settings, get_settings


def test_defaults() -> None:
    settings = get_settings()
    assert settings.default_code_length == 10
    assert settings.near_int_epsilon == 1e-10


def test_default_code_length_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PLUSCODES_DEFAULT_CODE_LENGTH", "11")
    get_settings.cache_clear()

    assert encode(20.3701125, 2.782234375) == "7FG49QCJ+2VX"
    # Explicit lengths still win.
    assert encode(20.375, 2.775, 6) == "7FG49Q00+"


def test_recovery_ignores_default_code_length(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PLUSCODES_DEFAULT_CODE_LENGTH", "4")
    get_settings.cache_clear()

    assert recover_nearest("XJH4+HF", 33.978938, -118.393812) == "8553XJH4+HF"


def test_odd_short_default_length_fails_at_encode(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PLUSCODES_DEFAULT_CODE_LENGTH", "7")
    get_settings.cache_clear()

    with pytest.raises(InvalidCodeLength):
        encode(20.375, 2.775)


def test_env_is_case_insensitive(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("pluscodes_near_int_epsilon", "1e-9")
    get_settings.cache_clear()

    assert get_settings().near_int_epsilon == 1e-9


@pytest.mark.parametrize(
    "field,value",
    [("default_code_length", 1), ("near_int_epsilon", 0.0)],
)
def test_out_of_range_values_are_rejected(field: str, value: object) -> None:
    with pytest.raises(ValidationError):
        Settings(**{field: value})
