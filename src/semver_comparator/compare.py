# SPDX-License-Identifier: MIT
"""Version comparison following SemVer 2.0.0 precedence.

Pre-release versions sort before their release (1.0.0-alpha < 1.0.0).
Identifiers compare numerically when both are numeric, by ordinal string
order when neither is, and numeric identifiers sort first otherwise.
Build metadata is ignored in comparisons.
"""

from __future__ import annotations

from typing import Optional, Union

from .errors import InvalidArgumentError
from .semver import Version, compare_identifiers, parse_version

__all__ = [
    "compare_versions",
    "compare_identifiers",
    "version_key",
    "lt",
    "le",
    "gt",
    "ge",
    "eq",
    "ne",
]


def _coerce(version: Union[str, Version, None], name: str, loose: bool) -> Version:
    if version is None:
        raise InvalidArgumentError(name, "Cannot compare null versions")
    if isinstance(version, Version):
        return version
    return parse_version(version, loose=loose)


def compare_versions(
    version1: Union[str, Version],
    version2: Union[str, Version],
    loose: bool = False,
) -> int:
    """Compare two semantic versions.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)
        loose: Parse string arguments with the relaxed grammar

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2

    Raises:
        InvalidVersionError: If either version string is invalid
        InvalidArgumentError: If either version is None

    Examples:
        >>> compare_versions("1.0.0", "2.0.0")
        -1
        >>> compare_versions("1.0.0+build.1", "1.0.0+build.2")
        0
        >>> compare_versions("1.0.0-1", "1.0.0-alpha")
        -1
        >>> compare_versions("1.0.0-alpha", "1.0.0-alpha.1")
        -1
    """
    v1 = _coerce(version1, "version1", loose)
    v2 = _coerce(version2, "version2", loose)
    return v1.compare(v2)


def version_key(version: Union[str, Version], loose: bool = False) -> tuple:
    """Return a sort key for a version, suitable for sorting.

    Two versions get equal keys exactly when :func:`compare_versions`
    reports them equal.

    Examples:
        >>> sorted(["1.0.0", "2.0.0", "1.0.0-alpha"], key=version_key)
        ['1.0.0-alpha', '1.0.0', '2.0.0']
    """
    v = _coerce(version, "version", loose)

    # Releases get (1,) so they sort after any pre-release (0, ...)
    if not v.prerelease:
        prerelease_key: tuple = (1,)
    else:
        parts = []
        for identifier in v.prerelease:
            if identifier.numeric:
                parts.append((0, identifier.value, ""))
            else:
                parts.append((1, 0, identifier.value))
        prerelease_key = (0, tuple(parts))

    return (v.major, v.minor, v.patch, prerelease_key)


def _relation(a: Optional[Version], b: Optional[Version]) -> int:
    if a is None:
        raise InvalidArgumentError("a", "Cannot compare null versions")
    if b is None:
        raise InvalidArgumentError("b", "Cannot compare null versions")
    return a.compare(b)


def lt(a: Version, b: Version) -> bool:
    """Return True if ``a`` has lower precedence than ``b``."""
    return _relation(a, b) < 0


def le(a: Version, b: Version) -> bool:
    return _relation(a, b) <= 0


def gt(a: Version, b: Version) -> bool:
    """Return True if ``a`` has higher precedence than ``b``."""
    return _relation(a, b) > 0


def ge(a: Version, b: Version) -> bool:
    return _relation(a, b) >= 0


def eq(a: Version, b: Version) -> bool:
    """Return True if ``a`` and ``b`` have equal precedence (build ignored)."""
    return _relation(a, b) == 0


def ne(a: Version, b: Version) -> bool:
    return _relation(a, b) != 0
