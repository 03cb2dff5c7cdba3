from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="PLUSCODES_",
        case_sensitive=False,
    )

    # Digits produced by encode() when no code_length is passed (~14x14m).
    default_code_length: int = Field(default=10, ge=2)

    # Near-integer snapping tolerance applied before each grid cell is picked.
    # Other Open Location Code implementations agree bit-for-bit only at 1e-10.
    near_int_epsilon: float = Field(default=1e-10, gt=0)


@lru_cache
def get_settings() -> Settings:
    return Settings()
