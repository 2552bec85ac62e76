"""Age calculation.

Age is the number of birthdays that have passed: the difference in
years, less one if this year's birthday is still ahead.  A current date
before the birthday is an error, never a clamped zero.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import TYPE_CHECKING

from howoldami.domain.errors import HowOldError, NegativeAgeError
from howoldami.domain.types import Verbosity
from howoldami.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from howoldami.config.builder import ConfigBuilder
    from howoldami.config.models import AgeContext

logger = logging.getLogger(__name__)

OP = "calculate_age"


def compute_age(birthday: date, current_date: date) -> int:
    """Whole years between *birthday* and *current_date*.

    Raises:
        NegativeAgeError: If *current_date* is before *birthday*.
    """
    if current_date < birthday:
        msg = f"Current date {current_date.isoformat()} is before birthday {birthday.isoformat()}"
        raise NegativeAgeError(msg)
    age = current_date.year - birthday.year
    if (current_date.month, current_date.day) < (birthday.month, birthday.day):
        age -= 1
    return age


def is_birthday(birthday: date, current_date: date) -> bool:
    """True when both dates fall on the same month and day."""
    return (current_date.month, current_date.day) == (birthday.month, birthday.day)


class AgeService:
    """Turns configuration into an age result."""

    def calculate(self, builder: ConfigBuilder) -> ServiceResult:
        """Finalize *builder* and compute the age."""
        try:
            context = builder.finalize()
        except HowOldError as exc:
            return _failure(exc)
        return self.calculate_for(context)

    def calculate_for(self, context: AgeContext) -> ServiceResult:
        """Compute the age for an already finalized *context*.

        ``data["greeting"]`` is set when the output level is at least
        normal, greeting is enabled, and today is the birthday.
        """
        try:
            age = compute_age(context.birthday, context.current_date)
        except HowOldError as exc:
            return _failure(exc)

        greeting = (
            context.verbosity >= Verbosity.NORMAL
            and context.greet_on_birthday
            and is_birthday(context.birthday, context.current_date)
        )
        logger.debug("Computed age %d (greeting=%s)", age, greeting)
        return ServiceResult(
            ok=True,
            op=OP,
            data={
                "age": age,
                "birthday": context.birthday.isoformat(),
                "current_date": context.current_date.isoformat(),
                "greeting": greeting,
                "format": context.format.render(),
            },
        )


def _failure(exc: HowOldError) -> ServiceResult:
    logger.debug("%s failed: %s", OP, exc.message)
    return ServiceResult(ok=False, op=OP, error=ServiceError.from_exception(exc))
