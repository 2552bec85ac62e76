"""DateFormat — field ordering plus separator.

A format is written as four characters: one of the orderings ``MDY``,
``DMY`` or ``YMD`` followed by the separator, e.g. ``"YMD-"`` or
``"DMY."``.  The same instance both parses and formats dates, so a date
shown back to the user round-trips through :meth:`DateFormat.parse_date`.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Any

from pydantic import BaseModel, Field

from howoldami.domain.errors import DateParseError, FormatParseError
from howoldami.domain.types import ORDER_DIRECTIVES, DateOrder

_POSITION_ERRORS = (
    "No first character found",
    "No second character found",
    "No third character found",
    "No separator found",
)


class DateFormat(BaseModel):
    """Ordering of year, month and day joined by a single separator."""

    model_config = {"frozen": True}

    order: DateOrder = DateOrder.MDY
    separator: str = Field(default="/", min_length=1, max_length=1)

    @classmethod
    def parse(cls, text: str) -> DateFormat:
        """Parse a format string like ``"MDY/"``.

        The first three characters must be exactly ``MDY``, ``DMY`` or
        ``YMD``; the fourth is taken verbatim as the separator.  Anything
        past the fourth character is ignored.

        Raises:
            FormatParseError: If a position is missing or the ordering is unknown.
        """
        chars = list(text)
        for position, message in enumerate(_POSITION_ERRORS):
            if len(chars) <= position:
                raise FormatParseError(message)

        try:
            order = DateOrder("".join(chars[:3]))
        except ValueError:
            raise FormatParseError("Invalid date format") from None
        return cls(order=order, separator=chars[3])

    @classmethod
    def from_tagged(cls, value: dict[str, Any]) -> DateFormat:
        """Build from the externally tagged TOML form ``{"YMD": {"separator": "-"}}``."""
        if len(value) != 1:
            msg = f"Expected exactly one of MDY, DMY, YMD, got {sorted(value)}"
            raise ValueError(msg)
        ((tag, body),) = value.items()
        if not isinstance(body, dict):
            msg = f"Expected a table for format {tag!r}"
            raise ValueError(msg)
        return cls.model_validate({**body, "order": tag})

    def render(self) -> str:
        """Return the four-character format string, e.g. ``"YMD-"``."""
        return f"{self.order.value}{self.separator}"

    @property
    def pattern(self) -> str:
        """The ``strptime``/``strftime`` pattern, e.g. ``"%Y-%m-%d"``."""
        sep = "%%" if self.separator == "%" else self.separator
        return sep.join(ORDER_DIRECTIVES[self.order])

    def parse_date(self, text: str) -> date:
        """Parse *text* strictly against :attr:`pattern`.

        Raises:
            DateParseError: On a pattern mismatch or an impossible date.
        """
        try:
            return datetime.strptime(text, self.pattern).date()
        except ValueError as exc:
            msg = f"Could not parse {text!r} with format {self.render()!r}: {exc}"
            raise DateParseError(msg) from exc

    def format_date(self, value: date) -> str:
        """Render *value* using this format."""
        day = f"{value.day:02d}"
        month = f"{value.month:02d}"
        year = f"{value.year:04d}"
        fields = {"%d": day, "%m": month, "%Y": year}
        return self.separator.join(fields[d] for d in ORDER_DIRECTIVES[self.order])

    def __str__(self) -> str:
        return self.pattern
