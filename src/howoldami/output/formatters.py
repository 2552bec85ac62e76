"""Human/JSON rendering of an age ServiceResult.

Human output, in order: the resolved dates in the user's date format
(verbose only), the birthday greeting (if any), and finally the age on a
line of its own so that ``tail -n1`` always yields the number.
"""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

from rich.markup import escape

from howoldami.domain.formats import DateFormat
from howoldami.domain.types import Verbosity
from howoldami.output.console import create_console, get_output

if TYPE_CHECKING:
    from howoldami.services.result import ServiceResult

GREETING = "Happy birthday!"


def format_result(
    result: ServiceResult,
    *,
    verbosity: Verbosity = Verbosity.NORMAL,
    json_output: bool = False,
    no_color: bool = False,
) -> str:
    """Format a ServiceResult for display.

    Args:
        result: The service result to format.
        verbosity: Output level; VERBOSE adds the resolved dates.
        json_output: If True, return JSON; otherwise return human-readable text.
        no_color: Disable ANSI escape codes.
    """
    if json_output:
        return result.model_dump_json(indent=2)

    console = create_console(no_color=no_color)
    if not result.ok:
        message = result.error.message if result.error else "Unknown error"
        console.print(f"[howold.error]ERROR:[/howold.error] {escape(message)}", soft_wrap=True)
        return get_output(console).rstrip("\n")

    data = result.data
    if verbosity == Verbosity.VERBOSE:
        fmt = DateFormat.parse(data["format"]) if "format" in data else DateFormat()
        for label, key in (("Current date", "current_date"), ("Birthday", "birthday")):
            shown = escape(fmt.format_date(date.fromisoformat(data[key])))
            console.print(
                f"[howold.key]{label}:[/howold.key] [howold.date]{shown}[/howold.date]"
            )
    if data.get("greeting"):
        console.print(f"[howold.greeting]{GREETING}[/howold.greeting]")
    console.print(f"[howold.age]{data['age']}[/howold.age]")
    return get_output(console).rstrip("\n")
