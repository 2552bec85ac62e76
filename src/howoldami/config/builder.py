"""Layered configuration builder.

Layers are applied in a fixed order: config file, environment, command
line.  Each layer overrides only the fields it sets, so a later layer
wins per field rather than replacing the whole configuration.  Dates are
kept as unresolved specifiers until :meth:`ConfigBuilder.finalize`, where
they are parsed once against whichever format survived the layering.

Usage::

    context = (
        ConfigBuilder(verbosity=args.verbosity)
        .apply_layer_from_file(find_config(args.config_path))
        .apply_layer_from_env()
        .apply_layer_from_args(args)
        .finalize()
    )
"""

from __future__ import annotations

import logging
import tomllib
from collections.abc import Callable
from datetime import date
from pathlib import Path

from pydantic import ValidationError

from howoldami.config.discovery import load_config
from howoldami.config.models import AgeContext, CliArgs
from howoldami.config.settings import EnvLayer
from howoldami.domain.errors import MissingBirthdayError
from howoldami.domain.formats import DateFormat
from howoldami.domain.specifiers import DateSpecifier, FullDate, YearOnly
from howoldami.domain.types import Verbosity

logger = logging.getLogger(__name__)


def _pick(full: str | None, year: str | None) -> DateSpecifier | None:
    """Full date beats bare year within a single layer."""
    if full is not None:
        return FullDate(full)
    if year is not None:
        return YearOnly(year)
    return None


class ConfigBuilder:
    """Mutable accumulator for birthday, current date, format and verbosity.

    Attributes:
        birthday: Birthday specifier from the latest layer that set one.
        current_date: Current-date override, or None to use today's date.
        format: Date format used to resolve both specifiers.
        verbosity: Output level; also gates config-file diagnostics.
    """

    def __init__(
        self,
        verbosity: Verbosity = Verbosity.NORMAL,
        *,
        today: Callable[[], date] = date.today,
    ) -> None:
        self.birthday: DateSpecifier | None = None
        self.current_date: DateSpecifier | None = None
        self.format = DateFormat()
        self.verbosity = verbosity
        self._today = today
        self._finalized = False

    def _apply(
        self,
        layer: str,
        *,
        birthday: DateSpecifier | None = None,
        current_date: DateSpecifier | None = None,
        fmt: DateFormat | None = None,
    ) -> None:
        if birthday is not None:
            self.birthday = birthday
        if current_date is not None:
            self.current_date = current_date
        if fmt is not None:
            self.format = fmt
        logger.debug(
            "Applied %s layer: birthday=%s current_date=%s format=%s",
            layer,
            birthday,
            current_date,
            fmt.render() if fmt is not None else None,
        )

    def apply_layer_from_file(self, path: Path) -> ConfigBuilder:
        """Stack the TOML config file at *path*.

        A missing, unreadable or invalid file is skipped, leaving the
        builder unchanged.  In verbose mode the reason is logged.
        """
        try:
            config = load_config(path)
        except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError, ValidationError) as exc:
            if self.verbosity == Verbosity.VERBOSE:
                logger.warning("Could not read config file %s: %s", path, exc)
            return self

        self._apply(
            "file",
            birthday=_pick(config.birthday, config.birthyear),
            fmt=config.format,
        )
        return self

    def apply_layer_from_env(self, env: EnvLayer | None = None) -> ConfigBuilder:
        """Stack ``HOWOLDAMI_*`` environment variables.

        Raises:
            FormatParseError: If ``HOWOLDAMI_FORMAT`` is malformed.
        """
        if env is None:
            env = EnvLayer()
        self._apply(
            "env",
            birthday=_pick(env.birthday, env.birthyear),
            current_date=_pick(env.date, env.year),
            fmt=DateFormat.parse(env.format) if env.format is not None else None,
        )
        return self

    def apply_layer_from_args(self, args: CliArgs) -> ConfigBuilder:
        """Stack command-line flags. Must be the last layer applied.

        Raises:
            FormatParseError: If ``--format`` is malformed.
        """
        self._apply(
            "args",
            birthday=_pick(args.birthday, args.birthyear),
            current_date=_pick(args.date, args.year),
            fmt=DateFormat.parse(args.format) if args.format is not None else None,
        )
        return self

    def finalize(self) -> AgeContext:
        """Resolve the accumulated layers into an :class:`AgeContext`.

        The greeting is only enabled when the birthday has a month and day
        and the current date came from a layer rather than the clock.

        Raises:
            MissingBirthdayError: No layer set a birthday.
            DateParseError: A full date does not match the final format.
            InvalidYearError: A year-only value is not a valid year.
            RuntimeError: The builder was already finalized.
        """
        if self._finalized:
            raise RuntimeError("ConfigBuilder.finalize() called twice")
        self._finalized = True

        if self.birthday is None:
            raise MissingBirthdayError(
                "No birthday specified in either config or command line args"
            )

        greet_on_birthday = self.birthday.is_full_precision
        birthday = self.birthday.resolve(self.format)

        if self.current_date is not None:
            current_date = self.current_date.resolve(self.format)
        else:
            greet_on_birthday = False
            current_date = self._today()

        return AgeContext(
            birthday=birthday,
            current_date=current_date,
            verbosity=self.verbosity,
            greet_on_birthday=greet_on_birthday,
            format=self.format,
        )
