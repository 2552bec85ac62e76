"""Environment-variable layer.

Reads ``HOWOLDAMI_*`` variables through Pydantic Settings.  Applied
between the config file and the command line, so env vars override the
file and CLI flags override env vars.
"""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class EnvLayer(BaseSettings):
    """Date settings taken from the process environment.

    Attributes:
        birthday: ``HOWOLDAMI_BIRTHDAY``, full date in the configured format.
        birthyear: ``HOWOLDAMI_BIRTHYEAR``, bare year.
        date: ``HOWOLDAMI_DATE``, overrides today's date.
        year: ``HOWOLDAMI_YEAR``, overrides today's date with a bare year.
        format: ``HOWOLDAMI_FORMAT``, a four-character format string like ``"YMD-"``.
    """

    model_config = SettingsConfigDict(
        env_prefix="HOWOLDAMI_",
        env_ignore_empty=True,
        extra="ignore",
        frozen=True,
    )

    birthday: str | None = None
    birthyear: str | None = None
    date: str | None = None
    year: str | None = None
    format: str | None = None
