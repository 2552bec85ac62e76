"""Pydantic models for each configuration layer and the finalized context.

Sparse contract: every layer field is optional, and an omitted field
leaves whatever an earlier layer set in place.
"""

from __future__ import annotations

from datetime import date
from typing import Any

from pydantic import BaseModel, Field, field_validator

from howoldami.domain.errors import FormatParseError
from howoldami.domain.formats import DateFormat
from howoldami.domain.types import Verbosity


def coerce_format(value: Any) -> Any:
    """Accept ``"YMD-"`` or ``{"YMD": {"separator": "-"}}`` for a format field."""
    if isinstance(value, str):
        try:
            return DateFormat.parse(value)
        except FormatParseError as exc:
            raise ValueError(exc.message) from exc
    if isinstance(value, dict) and len(value) == 1 and "order" not in value:
        return DateFormat.from_tagged(value)
    return value


# --- config.toml ---


class ConfigFile(BaseModel):
    """Contents of ``config.toml``.

    ``birthday`` is written in the configured format; ``birthyear`` is a
    bare year and is ignored when ``birthday`` is also present.
    """

    model_config = {"frozen": True, "extra": "ignore"}

    birthday: str | None = None
    birthyear: str | None = None
    format: DateFormat | None = None

    @field_validator("birthyear", mode="before")
    @classmethod
    def _year_as_string(cls, value: Any) -> Any:
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("format", mode="before")
    @classmethod
    def _parse_format(cls, value: Any) -> Any:
        return coerce_format(value)


# --- CLI flags (passed via click ctx.obj) ---


class CliArgs(BaseModel):
    """Command-line flags, frozen after construction."""

    model_config = {"frozen": True}

    verbose: bool = False
    quiet: bool = False
    date: str | None = None
    year: str | None = None
    birthday: str | None = None
    birthyear: str | None = None
    format: str | None = None
    config_path: str | None = None
    json_output: bool = False
    log_json: bool = False

    @property
    def verbosity(self) -> Verbosity:
        return Verbosity.from_flags(verbose=self.verbose, quiet=self.quiet)


# --- finalized context ---


class AgeContext(BaseModel):
    """Resolved dates ready for age calculation. Never mutated."""

    model_config = {"frozen": True}

    birthday: date
    current_date: date
    verbosity: Verbosity = Verbosity.NORMAL
    greet_on_birthday: bool = False
    format: DateFormat = Field(default_factory=DateFormat)
