"""Verbosity levels and date field orderings."""

from __future__ import annotations

from enum import IntEnum, StrEnum


class Verbosity(IntEnum):
    """Output levels, compared numerically to gate output."""

    QUIET = 1
    NORMAL = 2
    VERBOSE = 3

    @classmethod
    def from_flags(cls, *, verbose: bool = False, quiet: bool = False) -> Verbosity:
        """Map the ``--verbose``/``--quiet`` flag pair to a level."""
        if verbose:
            return cls.VERBOSE
        if quiet:
            return cls.QUIET
        return cls.NORMAL


class DateOrder(StrEnum):
    """Field orderings understood by :class:`~howoldami.domain.formats.DateFormat`."""

    MDY = "MDY"
    DMY = "DMY"
    YMD = "YMD"


# strptime directives for each ordering, separator goes between them.
ORDER_DIRECTIVES: dict[DateOrder, tuple[str, str, str]] = {
    DateOrder.MDY: ("%m", "%d", "%Y"),
    DateOrder.DMY: ("%d", "%m", "%Y"),
    DateOrder.YMD: ("%Y", "%m", "%d"),
}
