# SPDX-License-Identifier: MIT
"""Sort semantic versions by precedence."""

from __future__ import annotations

import click

from ... import is_valid, sort as sort_versions

from ..main import echo_error, echo_info, echo_warning, pass_context, Context


def _open_stdin():
    return click.open_file("-")


@click.command()
@click.argument("versions", nargs=-1)
@click.option(
    "--reverse",
    "-r",
    is_flag=True,
    help="Sort from highest to lowest precedence.",
)
@click.option(
    "--valid-only",
    is_flag=True,
    help="Drop strings that are not valid semantic versions.",
)
@pass_context
def sort(ctx: Context, versions: tuple[str, ...], reverse: bool, valid_only: bool) -> None:
    """Print VERSIONS one per line, ordered by precedence.

    Reads newline-separated versions from standard input when no VERSIONS
    are given; standard input must then be a pipe or file, not a terminal.
    Invalid strings sort first unless --valid-only is set.

    \b
    Examples:
        vsemver sort v1.0.0 v1.0.0-rc.1 v0.9
        git tag | vsemver sort --valid-only --reverse
    """
    items = list(versions)
    if not items:
        stdin = _open_stdin()
        if stdin.isatty():
            echo_error("No versions given. Pass VERSIONS or pipe them on standard input.")
            raise SystemExit(2)
        items = [line.strip() for line in stdin if line.strip()]

    if valid_only:
        kept = [v for v in items if is_valid(v)]
        if ctx.verbose and len(kept) != len(items):
            echo_warning(f"Dropped {len(items) - len(kept)} invalid version(s)")
        items = kept

    sort_versions(items)
    if reverse:
        items.reverse()

    for version in items:
        echo_info(version)
