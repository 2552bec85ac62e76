"""Root CLI command for howoldami: flags, layering order, and exit codes."""

from __future__ import annotations

import sys

import click

from howoldami import __version__
from howoldami.config.builder import ConfigBuilder
from howoldami.config.discovery import find_config
from howoldami.config.logging import configure_logging
from howoldami.config.models import CliArgs
from howoldami.domain.errors import HowOldError
from howoldami.output.formatters import format_result
from howoldami.services.age import OP, AgeService
from howoldami.services.result import ServiceError, ServiceResult

# Option pairs that may not be combined on one command line.
_EXCLUSIVE_GROUPS: tuple[tuple[str, str], ...] = (
    ("verbose", "quiet"),
    ("date", "year"),
    ("birthday", "birthyear"),
)

_EXAMPLES = """\
  howoldami --birthday 04/17/1990
  howoldami --birthyear 1990 --year 2030
  howoldami -f YMD- -b 1990-04-17 -d 2024-04-17"""


def _check_exclusive(ctx: click.Context, values: dict[str, object]) -> None:
    """Raise a usage error when both options of an exclusive pair are given."""
    for first, second in _EXCLUSIVE_GROUPS:
        if values.get(first) not in (None, False) and values.get(second) not in (None, False):
            raise click.UsageError(
                f"--{first} and --{second} are mutually exclusive.", ctx=ctx
            )


def _emit(result: ServiceResult, args: CliArgs) -> None:
    """Write *result* to stdout, or to stderr with exit code 1 on failure."""
    output = format_result(
        result,
        verbosity=args.verbosity,
        json_output=args.json_output,
        no_color=not sys.stdout.isatty(),
    )
    if result.ok:
        click.echo(output)
    else:
        click.echo(output, err=True)
        raise SystemExit(1)


@click.command(epilog=f"\b\nExamples:\n{_EXAMPLES}")
@click.version_option(version=__version__, prog_name="howoldami")
@click.option("-v", "--verbose", is_flag=True, help="Increase message verbosity.")
@click.option("-q", "--quiet", is_flag=True, help="Silence all output except the age.")
@click.option("-d", "--date", default=None, help="Override today's date.")
@click.option("-y", "--year", default=None, help="Override today's date, but just the year.")
@click.option("-b", "--birthday", default=None, help="Specify your birthday.")
@click.option("--birthyear", default=None, help="Specify just your birth year.")
@click.option("-f", "--format", "format_", default=None, help="Date format, e.g. MDY/ or YMD-.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    date: str | None,
    year: str | None,
    birthday: str | None,
    birthyear: str | None,
    format_: str | None,
    config_path: str | None,
    json_output: bool,
    log_json: bool,
) -> None:
    """howoldami — calculate how old you are.

    Settings come from config.toml in the user config directory, then
    HOWOLDAMI_* environment variables, then these flags; later sources win.
    """
    _check_exclusive(ctx, ctx.params)
    args = CliArgs(
        verbose=verbose,
        quiet=quiet,
        date=date,
        year=year,
        birthday=birthday,
        birthyear=birthyear,
        format=format_,
        config_path=config_path,
        json_output=json_output,
        log_json=log_json,
    )
    configure_logging(args.verbosity, log_json=log_json)

    builder = ConfigBuilder(verbosity=args.verbosity)
    try:
        builder.apply_layer_from_file(find_config(args.config_path))
        builder.apply_layer_from_env()
        builder.apply_layer_from_args(args)
    except HowOldError as exc:
        _emit(ServiceResult(ok=False, op=OP, error=ServiceError.from_exception(exc)), args)
        return

    _emit(AgeService().calculate(builder), args)
