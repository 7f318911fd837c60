"""Command-line entry point."""

from __future__ import annotations

import logging
import re
import sys
from collections.abc import Sequence
from dataclasses import dataclass

import click
from click.core import ParameterSource

from tsconv import __version__
from tsconv._errors import TimestampError
from tsconv._resolver import INPUT_MODE_ALIASES, InputMode, resolve_timestamp
from tsconv.formats import OutputMode, format_instant

logger = logging.getLogger(__name__)

PROG_NAME = "tsconv"

# (parameter name, flag shown to the user, output mode)
OUTPUT_FLAGS: tuple[tuple[str, str, OutputMode], ...] = (
    ("millis", "--millis", OutputMode.MILLIS),
    ("nanos", "--nanos", OutputMode.NANOS),
    ("rfc2822", "--rfc2822", OutputMode.RFC2822),
    ("rfc3339", "--rfc3339", OutputMode.RFC3339),
)

# Per-mode alternatives to --from, each carrying its own value
FROM_FLAGS: tuple[tuple[str, str, InputMode], ...] = (
    ("from_secs", "--from-secs", InputMode.SECS),
    ("from_millis", "--from-millis", InputMode.MILLIS),
    ("from_nanos", "--from-nanos", InputMode.NANOS),
)

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}

NEGATIVE_INTEGER_RE = re.compile(r"-[0-9]+")


@dataclass(frozen=True)
class ResolvedArgs:
    """A validated invocation: where the time comes from and how to print it."""

    input_mode: InputMode
    value: str | None
    output_mode: OutputMode


def _resolve_from_context(ctx: click.Context) -> ResolvedArgs:
    params = ctx.params

    selected = [(flag, mode) for name, flag, mode in OUTPUT_FLAGS if params[name]]
    if len(selected) > 1:
        flags = ", ".join(flag for flag, _ in selected)
        raise click.UsageError(f"{flags} cannot be used together", ctx=ctx)
    output_mode = selected[0][1] if selected else OutputMode.SECS

    value = params["input_value"]

    alternates = [
        (flag, mode, params[name]) for name, flag, mode in FROM_FLAGS if params[name] is not None
    ]
    if len(alternates) > 1:
        flags = ", ".join(flag for flag, _, _ in alternates)
        raise click.UsageError(f"{flags} cannot be used together", ctx=ctx)
    if alternates:
        flag, mode, flag_value = alternates[0]
        if ctx.get_parameter_source("from_") is not ParameterSource.DEFAULT:
            raise click.UsageError(f"{flag} cannot be used together with --from", ctx=ctx)
        if value is not None:
            raise click.UsageError(
                f"Got unexpected INPUT {value!r}; {flag} already carries the value", ctx=ctx
            )
        if mode is InputMode.SECS and flag_value == InputMode.NOW:
            return ResolvedArgs(InputMode.NOW, None, output_mode)
        return ResolvedArgs(mode, flag_value, output_mode)

    input_mode = INPUT_MODE_ALIASES[params["from_"]]
    if input_mode is InputMode.NOW and value is not None:
        raise click.UsageError(
            f"Got unexpected INPUT {value!r}; no value is read when --from is 'now'", ctx=ctx
        )
    if input_mode is not InputMode.NOW and value is None:
        raise click.UsageError(
            f"Missing argument 'INPUT'. Required when --from is {params['from_']!r}.", ctx=ctx
        )
    return ResolvedArgs(input_mode, value, output_mode)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(stream=sys.stderr, format="%(levelname)s %(name)s: %(message)s")
    logging.getLogger("tsconv").setLevel(logging.DEBUG if verbose else logging.WARNING)


class TimestampCommand(click.Command):
    """A command that reads negative integers as INPUT, not as short options.

    Tokens matching ``-[0-9]+`` that are not the value of a preceding option
    are moved behind a ``--`` separator before click parses the arguments.
    Any other dash-prefixed token goes through the normal option parser.
    """

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        takes_value = {
            opt
            for param in self.params
            if isinstance(param, click.Option) and not param.is_flag
            for opt in param.opts
        }

        head, tail = args, []
        if "--" in args:
            split = args.index("--")
            head, tail = args[:split], args[split + 1 :]

        options: list[str] = []
        numbers: list[str] = []
        after_option = False
        for arg in head:
            if not after_option and NEGATIVE_INTEGER_RE.fullmatch(arg):
                numbers.append(arg)
            else:
                options.append(arg)
            after_option = arg in takes_value

        if numbers:
            args = [*options, "--", *numbers, *tail]
        return super().parse_args(ctx, args)


@click.command(name=PROG_NAME, cls=TimestampCommand, context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, "-V", "--version", prog_name=PROG_NAME)
@click.option("-m", "--millis", is_flag=True, help="Unix-time in ms.")
@click.option("-n", "--nanos", is_flag=True, help="Unix-time in ns.")
@click.option(
    "--rfc2822",
    is_flag=True,
    help="Use RFC 2822 as output format. Example: 'Wed, 28 Jul 2021 18:30:05 +0000'",
)
@click.option(
    "--rfc3339",
    is_flag=True,
    help="Use RFC 3339 as output format. Example: '2021-07-28T18:30:05.12+00:00'",
)
@click.option(
    "-f",
    "--from",
    "from_",
    type=click.Choice(list(INPUT_MODE_ALIASES)),
    default=InputMode.NOW.value,
    show_default=True,
    help="Specifies the input format, unless this is set to 'now'.",
)
@click.option("--from-secs", metavar="VALUE|now", help="Read VALUE as Unix-time in seconds.")
@click.option("--from-millis", metavar="VALUE", help="Read VALUE as Unix-time in ms.")
@click.option("--from-nanos", metavar="VALUE", help="Read VALUE as Unix-time in ns.")
@click.option("-v", "--verbose", is_flag=True, help="Log debug details to stderr.")
@click.argument("input_value", metavar="[INPUT]", required=False)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, **_: object) -> None:
    """Convert between Unix timestamps and calendar time formats.

    Prints the current time, or INPUT read according to --from, in the
    selected output format. Whole seconds are printed when no output flag
    is given.
    """
    _configure_logging(verbose)
    args = _resolve_from_context(ctx)
    logger.debug("resolved arguments: %s", args)

    try:
        instant = resolve_timestamp(args.input_mode, args.value)
    except TimestampError as e:
        logger.debug("conversion failed: %s", e.internal())
        click.echo(f"Could not parse input: {e}", err=True)
        ctx.exit(1)

    click.echo(format_instant(instant, args.output_mode))


def resolve_arguments(argv: Sequence[str]) -> ResolvedArgs:
    """Parse an argument list into a validated invocation.

    Args:
        argv: Command-line arguments, without the program name.

    Returns:
        The resolved input mode, raw input value and output mode.

    Raises:
        click.UsageError: If the flags conflict or a required value is missing.
        click.exceptions.Exit: If ``--help`` or ``--version`` was given; the
            text has already been printed.
    """
    with cli.make_context(PROG_NAME, list(argv)) as ctx:
        return _resolve_from_context(ctx)


def main() -> None:
    cli(prog_name=PROG_NAME)
