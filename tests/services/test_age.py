"""Tests for age arithmetic and AgeService."""

from datetime import date

import pytest

from howoldami.config.builder import ConfigBuilder
from howoldami.config.models import AgeContext, CliArgs
from howoldami.domain.errors import NegativeAgeError
from howoldami.domain.formats import DateFormat
from howoldami.domain.types import Verbosity
from howoldami.services.age import AgeService, compute_age, is_birthday

BIRTH_YEAR = 1998


class TestComputeAge:
    @pytest.mark.parametrize("diff", [0, 1, 26, 1000])
    def test_on_birthday(self, diff: int) -> None:
        born = date(BIRTH_YEAR, 1, 1)
        assert compute_age(born, date(BIRTH_YEAR + diff, 1, 1)) == diff

    def test_day_before_birthday(self) -> None:
        assert compute_age(date(BIRTH_YEAR, 1, 2), date(BIRTH_YEAR + 26, 1, 1)) == 25

    def test_day_after_birthday(self) -> None:
        assert compute_age(date(BIRTH_YEAR, 1, 1), date(BIRTH_YEAR + 26, 1, 2)) == 26

    def test_earlier_month_later_day(self) -> None:
        """Month is compared before day."""
        assert compute_age(date(2000, 6, 1), date(2010, 5, 31)) == 9

    def test_leap_day_birthday(self) -> None:
        born = date(2000, 2, 29)
        assert compute_age(born, date(2023, 2, 28)) == 22
        assert compute_age(born, date(2023, 3, 1)) == 23

    def test_current_before_birthday(self) -> None:
        with pytest.raises(NegativeAgeError) as info:
            compute_age(date(2000, 5, 5), date(2000, 5, 4))
        assert info.value.code == "NEGATIVE_AGE"


class TestIsBirthday:
    def test_same_month_and_day(self) -> None:
        assert is_birthday(date(1990, 4, 17), date(2024, 4, 17))

    def test_different_day(self) -> None:
        assert not is_birthday(date(1990, 4, 17), date(2024, 4, 18))


def _context(**overrides: object) -> AgeContext:
    values: dict[str, object] = {
        "birthday": date(1990, 4, 17),
        "current_date": date(2024, 4, 17),
        "verbosity": Verbosity.NORMAL,
        "greet_on_birthday": True,
    }
    values.update(overrides)
    return AgeContext(**values)


class TestCalculateFor:
    def test_success_payload(self) -> None:
        result = AgeService().calculate_for(_context())
        assert result.ok
        assert result.op == "calculate_age"
        assert result.data == {
            "age": 34,
            "birthday": "1990-04-17",
            "current_date": "2024-04-17",
            "greeting": True,
            "format": "MDY/",
        }

    def test_payload_carries_context_format(self) -> None:
        result = AgeService().calculate_for(_context(format=DateFormat.parse("YMD-")))
        assert result.data["format"] == "YMD-"

    def test_no_greeting_when_quiet(self) -> None:
        result = AgeService().calculate_for(_context(verbosity=Verbosity.QUIET))
        assert result.data["greeting"] is False

    def test_greeting_when_verbose(self) -> None:
        result = AgeService().calculate_for(_context(verbosity=Verbosity.VERBOSE))
        assert result.data["greeting"] is True

    def test_no_greeting_when_disabled(self) -> None:
        result = AgeService().calculate_for(_context(greet_on_birthday=False))
        assert result.data["greeting"] is False

    def test_no_greeting_on_other_days(self) -> None:
        result = AgeService().calculate_for(_context(current_date=date(2024, 4, 16)))
        assert result.data["age"] == 33
        assert result.data["greeting"] is False

    def test_negative_age_is_error(self) -> None:
        result = AgeService().calculate_for(_context(current_date=date(1980, 1, 1)))
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "NEGATIVE_AGE"


class TestCalculate:
    def test_from_builder(self) -> None:
        builder = ConfigBuilder().apply_layer_from_args(
            CliArgs(birthday="04/17/1990", date="04/17/2024")
        )
        result = AgeService().calculate(builder)
        assert result.ok
        assert result.data["age"] == 34
        assert result.data["greeting"] is True

    def test_missing_birthday(self) -> None:
        result = AgeService().calculate(ConfigBuilder())
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "MISSING_BIRTHDAY"

    def test_parse_error(self) -> None:
        builder = ConfigBuilder().apply_layer_from_args(CliArgs(birthday="1990-04-17"))
        result = AgeService().calculate(builder)
        assert result.error is not None
        assert result.error.code == "DATE_PARSE"

    def test_clock_match_never_greets(self) -> None:
        builder = ConfigBuilder(today=lambda: date(2024, 4, 17))
        builder.apply_layer_from_args(CliArgs(birthday="04/17/1990"))
        result = AgeService().calculate(builder)
        assert result.data["age"] == 34
        assert result.data["greeting"] is False
