# SPDX-License-Identifier: MIT
"""Print canonical forms and components of a semantic version."""

from __future__ import annotations

from typing import Any, Callable, Optional

import click

from ... import semver

from ..main import echo_error, echo_info, pass_context, Context


def _field_command(name: str, accessor: Callable[[Any], Optional[str]], summary: str) -> click.Command:
    """Build a command that prints ``accessor(VERSION)`` or fails on invalid input."""

    @click.command(name=name, help=summary)
    @click.argument("version")
    @pass_context
    def command(ctx: Context, version: str) -> None:
        result = accessor(version)
        if result is None:
            echo_error(f"Invalid semantic version: {version}")
            raise SystemExit(1)
        if ctx.verbose and not result:
            echo_info(f"{version} has no {name} suffix")
            return
        echo_info(result)

    return command


canonical = _field_command(
    "canonical",
    semver.canonical,
    "Print VERSION with missing .MINOR/.PATCH filled in and build metadata removed.",
)
major = _field_command(
    "major",
    semver.major,
    "Print the vMAJOR prefix of VERSION.",
)
major_minor = _field_command(
    "major-minor",
    semver.major_minor,
    "Print the vMAJOR.MINOR prefix of VERSION.",
)
prerelease = _field_command(
    "prerelease",
    semver.prerelease,
    "Print the pre-release suffix of VERSION (with its leading '-'), if any.",
)
build = _field_command(
    "build",
    semver.build,
    "Print the build metadata suffix of VERSION (with its leading '+'), if any.",
)
