# SPDX-License-Identifier: MIT
"""Check whether strings are valid semantic versions."""

from __future__ import annotations

import click

from ... import parse

from ..main import echo_error, echo_info, echo_success, pass_context, Context


@click.command()
@click.argument("versions", nargs=-1, required=True)
@pass_context
def check(ctx: Context, versions: tuple[str, ...]) -> None:
    """Check that each VERSION is a valid semantic version.

    Exits with status 1 if any version is invalid.

    \b
    Examples:
        vsemver check v1.2.3
        vsemver -v check v1.2.3-rc.1+build.5 v1.02
    """
    invalid = 0
    for version in versions:
        parsed = parse(version)
        if parsed is None:
            invalid += 1
            echo_info(f"{version}: invalid")
            continue

        echo_success(f"{version}: valid")
        if ctx.verbose:
            echo_info(f"  canonical:  {parsed}")
            echo_info(f"  major:      {parsed.major}")
            echo_info(f"  minor:      {parsed.minor}")
            echo_info(f"  patch:      {parsed.patch}")
            if parsed.prerelease:
                echo_info(f"  prerelease: {parsed.prerelease}")
            if parsed.build:
                echo_info(f"  build:      {parsed.build}")

    if invalid:
        echo_error(f"{invalid} of {len(versions)} version(s) invalid")
        raise SystemExit(1)
