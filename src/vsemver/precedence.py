# SPDX-License-Identifier: MIT
"""Semantic version precedence.

Follows SemVer 2.0.0 section 11. Build metadata is ignored. Invalid version
strings compare equal to each other and less than any valid version, so
comparison is defined for every input and mixed lists can be sorted.
"""

from __future__ import annotations

import functools
from typing import Any, MutableSequence, Optional

from .semver import _DIGITS, canonical, parse


def _compare_int(x: str, y: str) -> int:
    """Compare two digit strings without leading zeros numerically."""
    if x == y:
        return 0
    # No leading zeros, so a longer string is a larger number.
    if len(x) != len(y):
        return -1 if len(x) < len(y) else 1
    return -1 if x < y else 1


def _is_num(ident: str) -> bool:
    return all(c in _DIGITS for c in ident)


def _compare_prerelease(x: str, y: str) -> int:
    """Compare two pre-release suffixes (leading "-" included, or "").

    A pre-release version has lower precedence than the normal version.
    Identifiers are compared left to right: numeric identifiers compare
    numerically and sort before alphanumeric ones, which compare in ASCII
    order. A longer identifier list wins when all preceding identifiers are
    equal.

    Example: 1.0.0-alpha < 1.0.0-alpha.1 < 1.0.0-alpha.beta < 1.0.0-beta <
    1.0.0-beta.2 < 1.0.0-beta.11 < 1.0.0-rc.1 < 1.0.0.
    """
    if x == y:
        return 0
    if not x:
        return 1
    if not y:
        return -1

    xs = x[1:].split(".")
    ys = y[1:].split(".")
    for dx, dy in zip(xs, ys):
        if dx == dy:
            continue
        ix = _is_num(dx)
        iy = _is_num(dy)
        if ix != iy:
            return -1 if ix else 1
        if ix:
            return _compare_int(dx, dy)
        return -1 if dx < dy else 1

    return -1 if len(xs) < len(ys) else 1


def compare(v: Any, w: Any) -> int:
    """Compare two versions according to semantic version precedence.

    Returns:
        -1 if v < w
        0 if v == w
        1 if v > w

    An invalid semantic version string is considered less than a valid one.
    All invalid semantic version strings compare equal to each other.

    Examples:
        >>> compare("v1.0.0", "v2.0.0")
        -1
        >>> compare("v1.0.0-rc.1", "v1.0.0")
        -1
        >>> compare("v1", "v1.0.0+build.7")
        0
        >>> compare("garbage", "v0.0.0")
        -1
    """
    pv = parse(v)
    pw = parse(w)
    if pv is None and pw is None:
        return 0
    if pv is None:
        return -1
    if pw is None:
        return 1

    for attr in ("major", "minor", "patch"):
        c = _compare_int(getattr(pv, attr), getattr(pw, attr))
        if c != 0:
            return c

    return _compare_prerelease(pv.prerelease, pw.prerelease)


# Key for sorted(), min(), max() and list.sort():
#   sorted(["v1.0.0", "v2.0.0", "v1.0.0-alpha"], key=version_key)
#   -> ["v1.0.0-alpha", "v1.0.0", "v2.0.0"]
version_key = functools.cmp_to_key(compare)


def _compare_for_sort(v: str, w: str) -> int:
    # Equal precedence falls back to string order so sort output does not
    # depend on input order.
    c = compare(v, w)
    if c != 0:
        return c
    if v == w:
        return 0
    return -1 if v < w else 1


def sort(versions: MutableSequence[str]) -> None:
    """Sort a sequence of version strings in place, ascending by precedence.

    Versions of equal precedence (e.g. differing only in build metadata, or
    both invalid) are ordered by plain string comparison.
    """
    # Index assignment only, so deques and other non-sliceable sequences work.
    for i, version in enumerate(sorted(versions, key=functools.cmp_to_key(_compare_for_sort))):
        versions[i] = version


def max_version(v: Any, w: Any) -> Optional[str]:
    """Return the canonical form of whichever version compares greater.

    Returns None if both versions are invalid.
    """
    cv = canonical(v)
    cw = canonical(w)
    if cv is None:
        return cw
    if cw is None or compare(cv, cw) > 0:
        return cv
    return cw
