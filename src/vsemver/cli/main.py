# SPDX-License-Identifier: MIT
"""CLI entry point for the vsemver command."""

from __future__ import annotations

import sys

import click

from .. import __version__


class Context:
    """CLI context object passed to commands."""

    def __init__(self) -> None:
        self.verbose: bool = False


pass_context = click.make_pass_decorator(Context, ensure=True)


def echo_error(message: str) -> None:
    """Print an error message to stderr."""
    click.secho(f"Error: {message}", fg="red", err=True)


def echo_success(message: str) -> None:
    """Print a success message."""
    click.secho(message, fg="green")


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(message)


def echo_warning(message: str) -> None:
    """Print a warning message."""
    click.secho(f"Warning: {message}", fg="yellow", err=True)


@click.group()
@click.version_option(version=__version__, prog_name="vsemver")
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable verbose output.",
)
@pass_context
def cli(ctx: Context, verbose: bool) -> None:
    """Inspect, compare and sort semantic version strings.

    Versions must start with "v"; vMAJOR and vMAJOR.MINOR are accepted as
    shorthands for vMAJOR.0.0 and vMAJOR.MINOR.0.

    \b
    Examples:
        vsemver check v1.2.3-rc.1
        vsemver compare v1.0.0-alpha v1.0.0
        vsemver canonical v1.2
        git tag | vsemver sort --valid-only
    """
    ctx.verbose = verbose


# Import and register commands
from .commands import check, compare, fields, sort

cli.add_command(check.check)
cli.add_command(compare.compare)
cli.add_command(compare.max_)
cli.add_command(fields.canonical)
cli.add_command(fields.major)
cli.add_command(fields.major_minor)
cli.add_command(fields.prerelease)
cli.add_command(fields.build)
cli.add_command(sort.sort)


def main() -> None:
    """Main entry point for the CLI."""
    try:
        cli()
    except Exception as e:
        echo_error(f"Unexpected error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
