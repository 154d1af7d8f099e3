# SPDX-License-Identifier: MIT
"""CLI entry point for the afversion command."""

from __future__ import annotations

import logging
import sys
from typing import Iterable, Optional

import click

from afversion import FORMAT_EXAMPLES, InvalidVersionError

from . import __version__
from .config import CLIConfig, ConfigError, load_config

logger = logging.getLogger(__name__)

_PACKAGE_LOGGERS = ("afversion", "afversion_cli")


class Context:
    """CLI context object passed to commands."""

    def __init__(self) -> None:
        self.config: Optional[CLIConfig] = None
        self.verbose: bool = False

    def load_config(self) -> CLIConfig:
        """Load configuration, caching the result."""
        if self.config is None:
            self.config = load_config()
        return self.config


pass_context = click.make_pass_decorator(Context, ensure=True)


def echo_error(message: str) -> None:
    """Print an error message to stderr."""
    click.secho(f"Error: {message}", fg="red", err=True)


def echo_hint(message: str) -> None:
    """Print a hint to stderr."""
    click.secho(message, fg="yellow", err=True)


def echo_warning(message: str) -> None:
    """Print a warning message to stderr."""
    click.secho(f"Warning: {message}", fg="yellow", err=True)


def echo_pairs(pairs: Iterable[tuple[str, object]]) -> None:
    """Print KEY=value lines to stdout, one per pair."""
    for key, value in pairs:
        click.echo(f"{key}={value}")


def echo_version_error(error: InvalidVersionError) -> None:
    """Report a malformed version with the expected format and examples."""
    echo_error(error.message)
    echo_hint(f"Expected format: {error.expected_format}")
    echo_hint(f"Examples: {', '.join(FORMAT_EXAMPLES)}")


def configure_logging(verbose: bool) -> None:
    """Route debug logging from the afversion packages when verbose.

    Without --verbose the logger levels are left as the host process set them.
    """
    if not verbose:
        return
    for name in _PACKAGE_LOGGERS:
        logging.getLogger(name).setLevel(logging.DEBUG)


@click.group()
@click.version_option(__version__, prog_name="afversion")
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable debug logging on stderr.",
)
@click.option(
    "--color/--no-color",
    default=None,
    help="Force colored messages on or off (default: environment, then auto).",
)
@click.pass_context
def cli(click_ctx: click.Context, verbose: bool, color: Optional[bool]) -> None:
    """AgentFlow release version tool.

    Parse, classify, compare, increment and sequence-check versions of the
    form MAJOR.MINOR.PATCH[-PRERELEASE], with an optional leading "v".

    \b
    Examples:
        afversion parse v1.2.3
        afversion increment 1.2.3 minor
        afversion compare 1.0.0 1.0.0-rc.1
        afversion validate 1.1.0 1.0.0
    """
    ctx = click_ctx.ensure_object(Context)
    ctx.verbose = verbose
    configure_logging(verbose)

    try:
        config = ctx.load_config()
    except ConfigError as e:
        echo_error(str(e))
        raise SystemExit(1)

    click_ctx.color = color if color is not None else config.click_color
    logger.debug("Loaded configuration: %s", config)


# Import and register commands
from .commands import parse, increment, compare, validate, info

cli.add_command(parse.parse)
cli.add_command(increment.increment)
cli.add_command(compare.compare)
cli.add_command(validate.validate)
cli.add_command(info.info)


def main() -> None:
    """Main entry point for the CLI."""
    logging.basicConfig(format="%(levelname)s %(name)s: %(message)s", stream=sys.stderr)
    try:
        cli()
    except ConfigError as e:
        echo_error(str(e))
        sys.exit(1)
    except Exception as e:
        echo_error(f"Unexpected error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
