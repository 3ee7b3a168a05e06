# SPDX-License-Identifier: MIT
"""CLI command implementations."""

from . import check, compare, fields, sort

__all__ = ["check", "compare", "fields", "sort"]
