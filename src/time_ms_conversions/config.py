"""Library configuration using Pydantic Settings.

This module defines the `Settings` class, which loads the few tunable
parameters of the library from environment variables and a `.env` file:
which zone counts as "local" and which timezone policy the string parser
applies when the caller does not pass one.

The `get_settings` function provides a cached, singleton instance of the
configuration. Call `get_settings.cache_clear()` after changing the
environment to pick up new values.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Any, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings
from pydantic_settings import SettingsConfigDict as _SettingsConfigDict

from .models import TzMassaging


class Settings(BaseSettings):
    """Defines all library configuration parameters.

    Values come from environment variables or a `.env` file in the working
    directory. Unknown variables are ignored.
    """

    model_config = _SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # When unset the process's system zone is used.
    TIME_MS_LOCAL_TIMEZONE: Optional[str] = Field(
        default=None,
        description=(
            "IANA zone name (e.g. Europe/Berlin) treated as the local zone for "
            "local conversions and LOCAL_TZ parsing. Blank or unset = system zone."
        ),
    )
    TIME_MS_DEFAULT_TZ_MASSAGING: TzMassaging = Field(
        default=TzMassaging.COND_ADD_TZ_UTC,
        description="Timezone policy applied by the parser when none is passed",
    )

    @field_validator("TIME_MS_LOCAL_TIMEZONE", mode="before")
    @classmethod
    def normalize_local_timezone(cls, v: Any) -> Optional[str]:
        """Trim whitespace, map blank -> None and reject unknown zone names."""
        if v is None:
            return None
        if not isinstance(v, str):
            raise ValueError("TIME_MS_LOCAL_TIMEZONE must be a string")
        trimmed = v.strip()
        if not trimmed:
            return None
        try:
            ZoneInfo(trimmed)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown timezone: {trimmed!r}") from e
        return trimmed

    @field_validator("TIME_MS_DEFAULT_TZ_MASSAGING", mode="before")
    @classmethod
    def normalize_tz_massaging(cls, v: Any) -> Any:
        """Accept policy names case-insensitively (e.g. `HAS_TZ`, `has_tz`)."""
        if isinstance(v, str):
            return v.strip().lower()
        return v


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached, singleton instance of the library settings.

    Provides a clearer error than the raw validation report when a variable
    holds an invalid value.
    """
    try:
        return Settings()
    except ValidationError as e:
        bad = ", ".join(str(err.get("loc", ("?",))[0]) for err in e.errors())
        raise RuntimeError(
            f"Invalid time_ms_conversions configuration ({bad}). "
            "TIME_MS_LOCAL_TIMEZONE must be an IANA zone name and "
            "TIME_MS_DEFAULT_TZ_MASSAGING one of cond_add_tz_utc, has_tz, local_tz."
        ) from e


__all__ = ["Settings", "get_settings"]
