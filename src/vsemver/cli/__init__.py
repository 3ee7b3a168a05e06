# SPDX-License-Identifier: MIT
"""Command-line interface for vsemver."""

from .main import cli, main

__all__ = ["cli", "main"]
