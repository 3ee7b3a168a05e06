# SPDX-License-Identifier: MIT
"""Compare semantic versions by precedence."""

from __future__ import annotations

import click

from ... import compare as compare_versions, is_valid, max_version

from ..main import echo_error, echo_info, echo_warning, pass_context, Context


def _warn_invalid(ctx: Context, *versions: str) -> None:
    if not ctx.verbose:
        return
    for version in versions:
        if not is_valid(version):
            echo_warning(f"{version!r} is not a valid semantic version")


@click.command()
@click.argument("v")
@click.argument("w")
@pass_context
def compare(ctx: Context, v: str, w: str) -> None:
    """Print -1, 0 or 1 as V is lower than, equal to or higher than W.

    Build metadata is ignored. Invalid versions are lower than every valid
    version and equal to each other.

    \b
    Examples:
        vsemver compare v1.0.0-rc.1 v1.0.0     # -1
        vsemver compare v1.2 v1.2.0+build.7    # 0
    """
    _warn_invalid(ctx, v, w)
    echo_info(str(compare_versions(v, w)))


@click.command(name="max")
@click.argument("v")
@click.argument("w")
@pass_context
def max_(ctx: Context, v: str, w: str) -> None:
    """Print the canonical form of the higher of V and W."""
    _warn_invalid(ctx, v, w)
    result = max_version(v, w)
    if result is None:
        echo_error("Neither argument is a valid semantic version")
        raise SystemExit(1)
    echo_info(result)
