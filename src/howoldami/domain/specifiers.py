"""Date specifiers — unresolved dates collected from configuration layers.

A specifier only stores the raw string it was given.  Parsing is deferred
until :meth:`DateSpecifier.resolve` is called with the final, merged
:class:`~howoldami.domain.formats.DateFormat`, so a layer may set a date
before a later layer decides which format it is written in.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import MAXYEAR, MINYEAR, date
from typing import TYPE_CHECKING

from howoldami.domain.errors import InvalidYearError

if TYPE_CHECKING:
    from howoldami.domain.formats import DateFormat

_YEAR_RE = re.compile(r"[+-]?[0-9]+", re.ASCII)


@dataclass(frozen=True)
class DateSpecifier(ABC):
    """Base for :class:`FullDate` and :class:`YearOnly`."""

    value: str

    @property
    def is_full_precision(self) -> bool:
        """True when month and day are known."""
        return False

    @abstractmethod
    def resolve(self, fmt: DateFormat) -> date:
        """Turn the stored string into a calendar date."""


@dataclass(frozen=True)
class FullDate(DateSpecifier):
    """A complete date string written in some :class:`DateFormat`."""

    @property
    def is_full_precision(self) -> bool:
        return True

    def resolve(self, fmt: DateFormat) -> date:
        """Parse the stored string against *fmt*.

        Raises:
            DateParseError: If the string does not match or is not a real date.
        """
        return fmt.parse_date(self.value)


@dataclass(frozen=True)
class YearOnly(DateSpecifier):
    """A bare year; resolves to January 1st of that year."""

    def resolve(self, fmt: DateFormat) -> date:
        """Return January 1st of the stored year. *fmt* is not consulted.

        Raises:
            InvalidYearError: If the year is not an integer or out of range.
        """
        if not _YEAR_RE.fullmatch(self.value):
            raise InvalidYearError(f"Invalid year: {self.value!r}")
        year = int(self.value)
        if not MINYEAR <= year <= MAXYEAR:
            raise InvalidYearError(f"Invalid year: {year} (must be {MINYEAR}..{MAXYEAR})")
        return date(year, 1, 1)
