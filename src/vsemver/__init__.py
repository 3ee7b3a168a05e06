# SPDX-License-Identifier: MIT
"""Parsing and comparison of "v"-prefixed semantic version strings.

Versions follow SemVer 2.0.0 with two differences: a leading "v" is
required, and vMAJOR and vMAJOR.MINOR are accepted as shorthands for
vMAJOR.0.0 and vMAJOR.MINOR.0. Invalid input yields None rather than an
exception.

Example:
    >>> from vsemver import canonical, compare, is_valid, sort
    >>>
    >>> is_valid("v1.2.3-alpha.1+build.456")
    True
    >>> canonical("v1.2")
    'v1.2.0'
    >>> compare("v1.0.0-rc.1", "v1.0.0")
    -1
    >>> versions = ["v1.0.0", "v1.0.0-alpha"]
    >>> sort(versions)
    >>> versions
    ['v1.0.0-alpha', 'v1.0.0']
"""

__version__ = "0.1.0"

from .semver import (
    ParsedVersion,
    InvalidVersionError,
    parse,
    parse_version,
    is_valid,
    canonical,
    major,
    major_minor,
    prerelease,
    build,
)
from .precedence import (
    compare,
    version_key,
    sort,
    max_version,
)

__all__ = [
    # Parsing
    "ParsedVersion",
    "InvalidVersionError",
    "parse",
    "parse_version",
    "is_valid",
    # Accessors
    "canonical",
    "major",
    "major_minor",
    "prerelease",
    "build",
    # Precedence
    "compare",
    "version_key",
    "sort",
    "max_version",
]
