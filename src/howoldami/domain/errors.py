"""Error hierarchy for date resolution and age calculation.

Every error carries a stable ``code`` that ends up in
:class:`~howoldami.services.result.ServiceError` when a failure reaches
the service boundary.
"""

from __future__ import annotations


class HowOldError(Exception):
    """Base class for all howoldami domain errors."""

    code = "ERROR"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class FormatParseError(HowOldError):
    """A date-format pattern string such as ``"YMD-"`` is malformed."""

    code = "FORMAT_PARSE"


class DateParseError(HowOldError):
    """A date string does not match the pattern or is not a real date."""

    code = "DATE_PARSE"


class InvalidYearError(HowOldError):
    """A year string is not an integer or is outside the supported range."""

    code = "INVALID_YEAR"


class MissingBirthdayError(HowOldError):
    """No configuration layer supplied a birthday."""

    code = "MISSING_BIRTHDAY"


class NegativeAgeError(HowOldError):
    """The current date is before the birthday."""

    code = "NEGATIVE_AGE"
