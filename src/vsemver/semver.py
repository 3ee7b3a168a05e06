# SPDX-License-Identifier: MIT
"""Parsing of "v"-prefixed semantic version strings.

Accepted grammar::

    vMAJOR[.MINOR[.PATCH[-PRERELEASE][+BUILD]]]

MAJOR, MINOR and PATCH are decimal integers without extra leading zeros.
PRERELEASE and BUILD are series of non-empty dot-separated identifiers over
``[0-9A-Za-z-]``; all-numeric PRERELEASE identifiers must not have leading
zeros. ``vMAJOR`` and ``vMAJOR.MINOR`` (with no suffixes) are shorthands for
``vMAJOR.0.0`` and ``vMAJOR.MINOR.0``.

Every accessor returns None for an invalid version instead of raising.
"""

from __future__ import annotations

import string
from dataclasses import dataclass
from typing import Any, Optional

_DIGITS = frozenset(string.digits)
_IDENT_CHARS = frozenset(string.ascii_letters + string.digits + "-")


class InvalidVersionError(Exception):
    """Raised by parse_version when a string is not a valid semantic version."""

    def __init__(self, version: Any, message: str = ""):
        self.version = version
        self.message = message or f"Invalid semantic version: {version}"
        super().__init__(self.message)


@dataclass(frozen=True, slots=True)
class ParsedVersion:
    """Components of a parsed semantic version string.

    Attributes:
        major: Major version digits (e.g., "1")
        minor: Minor version digits, "0" when implied by shorthand
        patch: Patch version digits, "0" when implied by shorthand
        short: Suffix implied but absent from the input (".0.0", ".0" or "")
        prerelease: Pre-release suffix including the leading "-", or ""
        build: Build metadata suffix including the leading "+", or ""
    """

    major: str
    minor: str
    patch: str
    short: str = ""
    prerelease: str = ""
    build: str = ""

    def __str__(self) -> str:
        """Return the canonical string form (no build metadata)."""
        return self.base_version + self.prerelease

    @property
    def is_prerelease(self) -> bool:
        """Return True if this is a pre-release version."""
        return self.prerelease != ""

    @property
    def base_version(self) -> str:
        """Return vMAJOR.MINOR.PATCH without pre-release or build metadata."""
        return f"v{self.major}.{self.minor}.{self.patch}"


def _is_bad_num(ident: str) -> bool:
    # All digits with a superfluous leading zero.
    return len(ident) > 1 and ident[0] == "0" and all(c in _DIGITS for c in ident)


def _parse_int(v: str) -> Optional[tuple[str, str]]:
    """Consume a leading integer token, returning (digits, rest)."""
    if not v or v[0] not in _DIGITS:
        return None
    i = 1
    while i < len(v) and v[i] in _DIGITS:
        i += 1
    if v[0] == "0" and i != 1:
        return None
    return v[:i], v[i:]


def _parse_identifiers(v: str, stop: str, numeric_check: bool) -> Optional[tuple[str, str]]:
    """Consume a "-" or "+" suffix made of dot-separated identifiers.

    Scanning ends at the first character in ``stop``. Returns the consumed
    suffix (marker included) and the remainder.
    """
    i = 1
    start = 1
    while i < len(v) and v[i] not in stop:
        c = v[i]
        if c == ".":
            if start == i or (numeric_check and _is_bad_num(v[start:i])):
                return None
            start = i + 1
        elif c not in _IDENT_CHARS:
            return None
        i += 1
    if start == i or (numeric_check and _is_bad_num(v[start:i])):
        return None
    return v[:i], v[i:]


def _parse_prerelease(v: str) -> Optional[tuple[str, str]]:
    # Identifiers MUST NOT be empty. Numeric identifiers MUST NOT include
    # leading zeroes.
    if not v or v[0] != "-":
        return None
    return _parse_identifiers(v, "+", numeric_check=True)


def _parse_build(v: str) -> Optional[tuple[str, str]]:
    if not v or v[0] != "+":
        return None
    return _parse_identifiers(v, "", numeric_check=False)


def _scan(v: str) -> Optional[tuple[dict[str, str], str]]:
    """Scan as much of the grammar as possible.

    Returns the recognized fields and the unconsumed remainder, or None when
    a component is malformed. A non-empty remainder means the scan stopped
    early (for example after "v1" in "v1x").
    """
    if not v or v[0] != "v":
        return None

    result = _parse_int(v[1:])
    if result is None:
        return None
    fields = {"major": result[0]}
    rest = result[1]

    if not rest:
        fields.update(minor="0", patch="0", short=".0.0")
        return fields, rest
    if rest[0] != ".":
        return fields, rest

    result = _parse_int(rest[1:])
    if result is None:
        return None
    fields["minor"], rest = result

    if not rest:
        fields.update(patch="0", short=".0")
        return fields, rest
    if rest[0] != ".":
        return fields, rest

    result = _parse_int(rest[1:])
    if result is None:
        return None
    fields["patch"], rest = result

    if rest.startswith("-"):
        result = _parse_prerelease(rest)
        if result is None:
            return None
        fields["prerelease"], rest = result

    if rest.startswith("+"):
        result = _parse_build(rest)
        if result is None:
            return None
        fields["build"], rest = result

    return fields, rest


def parse(v: Any) -> Optional[ParsedVersion]:
    """Parse a semantic version string.

    Returns None if ``v`` is not a valid semantic version string.

    Examples:
        >>> parse("v1.2.3-rc.1+build.5")
        ParsedVersion(major='1', minor='2', patch='3', short='', prerelease='-rc.1', build='+build.5')
        >>> parse("v2").short
        '.0.0'
        >>> parse("1.2.3") is None
        True
    """
    if not isinstance(v, str):
        return None
    scanned = _scan(v)
    if scanned is None:
        return None
    fields, rest = scanned
    if rest:
        return None
    return ParsedVersion(**fields)


def parse_version(v: Any) -> ParsedVersion:
    """Parse a semantic version string, raising on invalid input.

    Raises:
        InvalidVersionError: If ``v`` is not a valid semantic version string
    """
    if not isinstance(v, str):
        raise InvalidVersionError(v, f"Version must be a string, got {type(v).__name__}")
    if not v:
        raise InvalidVersionError(v, "Version string cannot be empty")
    parsed = parse(v)
    if parsed is None:
        raise InvalidVersionError(v)
    return parsed


def is_valid(v: Any) -> bool:
    """Report whether ``v`` is a valid semantic version string.

    Examples:
        >>> is_valid("v1.0.0-alpha")
        True
        >>> is_valid("v1.0")
        True
        >>> is_valid("1.0.0")
        False
    """
    return parse(v) is not None


def canonical(v: Any) -> Optional[str]:
    """Return the canonical formatting of ``v``.

    Fills in a missing .MINOR or .PATCH and discards build metadata. Two
    versions compare equal only if their canonical forms are identical.
    """
    pv = parse(v)
    if pv is None:
        return None
    if pv.build:
        return v[: len(v) - len(pv.build)]
    if pv.short:
        return v + pv.short
    return v


def major(v: Any) -> Optional[str]:
    """Return the major version prefix, e.g. major("v2.1.0") == "v2"."""
    pv = parse(v)
    if pv is None:
        return None
    return "v" + pv.major


def major_minor(v: Any) -> Optional[str]:
    """Return the major.minor prefix, e.g. major_minor("v2.1.0") == "v2.1"."""
    pv = parse(v)
    if pv is None:
        return None
    return f"v{pv.major}.{pv.minor}"


def prerelease(v: Any) -> Optional[str]:
    """Return the pre-release suffix, e.g. prerelease("v2.1.0-pre+meta") == "-pre"."""
    pv = parse(v)
    if pv is None:
        return None
    return pv.prerelease


def build(v: Any) -> Optional[str]:
    """Return the build suffix, e.g. build("v2.1.0+meta") == "+meta"."""
    pv = parse(v)
    if pv is None:
        return None
    return pv.build
