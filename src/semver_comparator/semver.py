# SPDX-License-Identifier: MIT
"""Semantic version parsing and the Version model.

Supports MAJOR.MINOR.PATCH format with optional pre-release and build metadata:
- Pre-release: -alpha, -alpha.1, -0.3.7, -x.7.z.92
- Build metadata: +build, +build.123, +20240101

Versions are ordered per SemVer 2.0.0 precedence. Build metadata is kept
for display only and never takes part in ordering, equality or hashing.
"""

from __future__ import annotations

import enum
import logging
import re
from dataclasses import dataclass, field
from typing import Optional, Union

from .errors import InvalidArgumentError, InvalidVersionError
from .options import LOOSE_SEMVER_PATTERN, SEMVER_PATTERN, ParseOptions, options_for

logger = logging.getLogger(__name__)

# Identifiers matching this are numeric; anything else is alphanumeric
INTEGER_PATTERN = re.compile(r"^\d+$", re.ASCII)

# A single pre-release or build token
TOKEN_PATTERN = re.compile(r"^[0-9A-Za-z-]+$", re.ASCII)

__all__ = [
    "Identifier",
    "IncrementType",
    "Version",
    "parse_version",
    "try_parse_version",
    "is_valid_semver",
    "valid_version",
    "clean_version",
    "compare_identifiers",
    "SEMVER_PATTERN",
    "LOOSE_SEMVER_PATTERN",
]


@dataclass(frozen=True, slots=True)
class Identifier:
    """A single dot-separated pre-release identifier.

    Attributes:
        value: The integer value for numeric identifiers, the token otherwise
        numeric: Whether the identifier was recognized as numeric when parsed
    """

    value: Union[int, str]
    numeric: bool

    @classmethod
    def parse(cls, token: str) -> Identifier:
        """Build an identifier from its textual token.

        Examples:
            >>> Identifier.parse("7")
            Identifier(value=7, numeric=True)
            >>> Identifier.parse("alpha")
            Identifier(value='alpha', numeric=False)
        """
        if INTEGER_PATTERN.match(token):
            return cls(int(token), True)
        return cls(token, False)

    @classmethod
    def of(cls, number: int) -> Identifier:
        """Build a numeric identifier."""
        return cls(number, True)

    def __str__(self) -> str:
        return str(self.value)


def compare_identifiers(a: Identifier, b: Identifier) -> int:
    """Compare two pre-release identifiers.

    Numeric identifiers compare numerically, alphanumeric ones by ordinal
    string comparison, and a numeric identifier always sorts before an
    alphanumeric one.

    Returns:
        -1, 0 or 1
    """
    if a.numeric and b.numeric:
        if a.value == b.value:
            return 0
        return -1 if a.value < b.value else 1
    if not a.numeric and not b.numeric:
        if a.value == b.value:
            return 0
        return -1 if a.value < b.value else 1
    return -1 if a.numeric else 1


class IncrementType(str, enum.Enum):
    """Which part of a version :meth:`Version.increment` bumps."""

    MAJOR = "major"
    MINOR = "minor"
    PATCH = "patch"
    PRERELEASE = "prerelease"


@dataclass(eq=False)
class Version:
    """A parsed semantic version.

    Instances are value objects except for :meth:`increment`, which bumps
    the receiver in place. Take a :meth:`copy` first when the pre-bump
    value is still needed or the instance is shared with other threads.

    Attributes:
        major: Major version number (breaking changes)
        minor: Minor version number (new features, backward compatible)
        patch: Patch version number (bug fixes, backward compatible)
        prerelease: Pre-release identifiers, in order
        build: Build metadata tokens, in order
        raw: The input string the version was parsed from
        options: Options the version was parsed with
    """

    major: int
    minor: int
    patch: int
    prerelease: list[Identifier] = field(default_factory=list)
    build: list[str] = field(default_factory=list)
    raw: str = ""
    options: ParseOptions = field(default_factory=ParseOptions)

    def __post_init__(self) -> None:
        for name in ("major", "minor", "patch"):
            if getattr(self, name) < 0:
                raise InvalidArgumentError(name, f"{name} must be non-negative")
        self.prerelease = [_check_identifier(identifier) for identifier in self.prerelease]
        self.build = [_check_build_token(token) for token in self.build]
        if not self.raw:
            self.raw = self.to_full_string()

    @classmethod
    def parse(cls, text: str, loose: bool = False) -> Version:
        """Parse ``text``; see :func:`parse_version`."""
        return parse_version(text, loose=loose)

    @classmethod
    def try_parse(cls, text: str, loose: bool = False) -> Optional[Version]:
        """Parse ``text``; see :func:`try_parse_version`."""
        return try_parse_version(text, loose=loose)

    @property
    def loose(self) -> bool:
        return self.options.loose

    @property
    def is_prerelease(self) -> bool:
        """Return True if this is a pre-release version."""
        return bool(self.prerelease)

    @property
    def base_version(self) -> str:
        """Return the version without pre-release or build metadata."""
        return f"{self.major}.{self.minor}.{self.patch}"

    @property
    def version(self) -> str:
        """Canonical form, without build metadata."""
        version = self.base_version
        if self.prerelease:
            version += "-" + ".".join(str(identifier) for identifier in self.prerelease)
        return version

    @property
    def full_string(self) -> str:
        """Canonical form followed by ``+build`` when build metadata exists."""
        return self.to_full_string()

    def to_full_string(self) -> str:
        version = self.version
        if self.build:
            version += "+" + ".".join(self.build)
        return version

    def __str__(self) -> str:
        return self.version

    def inspect(self) -> str:
        return f'<Version "{self}">'

    def copy(self) -> Version:
        """Return an independent copy of this version."""
        return Version(
            major=self.major,
            minor=self.minor,
            patch=self.patch,
            prerelease=list(self.prerelease),
            build=list(self.build),
            raw=self.raw,
            options=self.options,
        )

    __copy__ = copy

    def __deepcopy__(self, memo: dict) -> Version:
        return self.copy()

    # Ordering

    def compare(self, other: Version) -> int:
        """Compare against another version by SemVer precedence.

        Returns:
            -1 if self < other, 0 if equal, 1 if self > other

        Raises:
            InvalidArgumentError: If ``other`` is None
        """
        if other is None:
            raise InvalidArgumentError("other", "Cannot compare null versions")
        if not isinstance(other, Version):
            raise InvalidArgumentError(
                "other", f"Expected a Version, got {type(other).__name__}"
            )
        return self.compare_main(other) or self.compare_prerelease(other)

    def compare_text(self, other: str) -> int:
        """Compare against a version string parsed with this version's options.

        Raises:
            InvalidArgumentError: If ``other`` is empty or not a valid version
        """
        if other is None or not str(other).strip():
            raise InvalidArgumentError("other", "Cannot compare null versions")
        try:
            other_version = parse_version(other, loose=self.loose)
        except InvalidVersionError as exc:
            raise InvalidArgumentError("other", exc.message) from exc
        return self.compare(other_version)

    def compare_main(self, other: Version) -> int:
        """Compare only the MAJOR.MINOR.PATCH triple."""
        mine = (self.major, self.minor, self.patch)
        theirs = (other.major, other.minor, other.patch)
        if mine == theirs:
            return 0
        return -1 if mine < theirs else 1

    def compare_prerelease(self, other: Version) -> int:
        """Compare only the pre-release identifiers."""
        # NOT having a prerelease is > having one
        if self.prerelease and not other.prerelease:
            return -1
        if not self.prerelease and other.prerelease:
            return 1
        for mine, theirs in zip(self.prerelease, other.prerelease):
            result = compare_identifiers(mine, theirs)
            if result:
                return result
        # Shared prefix: fewer identifiers sorts first
        if len(self.prerelease) == len(other.prerelease):
            return 0
        return -1 if len(self.prerelease) < len(other.prerelease) else 1

    def lt(self, other: Version) -> bool:
        return self.compare(other) < 0

    def le(self, other: Version) -> bool:
        return self.compare(other) <= 0

    def gt(self, other: Version) -> bool:
        return self.compare(other) > 0

    def ge(self, other: Version) -> bool:
        return self.compare(other) >= 0

    def eq(self, other: Version) -> bool:
        return self.compare(other) == 0

    def ne(self, other: Version) -> bool:
        return self.compare(other) != 0

    # Strings are never converted implicitly; use compare_text for those.

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) == 0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) >= 0

    def __hash__(self) -> int:
        return hash((self.major, self.minor, self.patch, tuple(self.prerelease)))

    # Bumping

    def increment(self, kind: Union[IncrementType, str]) -> Version:
        """Bump this version in place and return it.

        - major: 1.2.3-beta -> 2.0.0
        - minor: 1.2.3-beta -> 1.3.0
        - patch: 1.2.3-beta -> 1.2.4
        - prerelease: 1.2.3 -> 1.2.3-0, 1.2.3-alpha.1 -> 1.2.3-alpha.2,
          1.2.3-alpha -> 1.2.3-alpha.0

        The receiver is mutated; callers that need the old value must
        :meth:`copy` before bumping.

        Raises:
            InvalidArgumentError: If ``kind`` is not an :class:`IncrementType`
        """
        try:
            kind = IncrementType(kind)
        except ValueError as exc:
            raise InvalidArgumentError("kind", f"Invalid increment: {kind!r}") from exc

        before = self.version
        if kind is IncrementType.PRERELEASE:
            self._increment_prerelease()
        else:
            # Bumping a field resets every field below it
            if kind is IncrementType.MAJOR:
                self.major += 1
                self.minor = 0
                self.patch = 0
            elif kind is IncrementType.MINOR:
                self.minor += 1
                self.patch = 0
            else:
                self.patch += 1
            self.prerelease = []

        logger.debug("Incremented %s %s -> %s", kind.value, before, self.version)
        return self

    def _increment_prerelease(self) -> None:
        if not self.prerelease:
            self.prerelease = [Identifier.of(0)]
            return
        for index in range(len(self.prerelease) - 1, -1, -1):
            identifier = self.prerelease[index]
            if identifier.numeric:
                self.prerelease[index] = Identifier.of(identifier.value + 1)
                return
        self.prerelease.append(Identifier.of(0))


def parse_version(version_string: str, loose: bool = False) -> Version:
    """Parse a semantic version string into a Version object.

    Args:
        version_string: A string following semantic versioning format
            (MAJOR.MINOR.PATCH[-prerelease][+build])
        loose: Accept the relaxed grammar as well

    Returns:
        A Version object with parsed components

    Raises:
        InvalidVersionError: If the string does not follow semantic versioning

    Examples:
        >>> str(parse_version("1.0.0-alpha.1"))
        '1.0.0-alpha.1'
        >>> parse_version("2.0.0-rc.1+build.456").build
        ['build', '456']
        >>> str(parse_version("v01.2.3beta", loose=True))
        '1.2.3-beta'
    """
    if not isinstance(version_string, str):
        raise InvalidVersionError(
            str(version_string), f"Version must be a string, got {type(version_string).__name__}"
        )

    options = options_for(loose)
    match = options.pattern.match(version_string.strip())
    if not match:
        raise InvalidVersionError(version_string)

    prerelease = match.group("prerelease")
    build = match.group("buildmetadata")
    return Version(
        major=int(match.group("major")),
        minor=int(match.group("minor")),
        patch=int(match.group("patch")),
        prerelease=[Identifier.parse(token) for token in prerelease.split(".")] if prerelease else [],
        build=build.split(".") if build else [],
        raw=version_string,
        options=options,
    )


def try_parse_version(version_string: str, loose: bool = False) -> Optional[Version]:
    """Parse a version, returning None instead of raising on invalid input."""
    try:
        return parse_version(version_string, loose=loose)
    except InvalidVersionError as exc:
        logger.debug("Rejected version %r: %s", version_string, exc.message)
        return None


def is_valid_semver(version_string: str, loose: bool = False) -> bool:
    """Check if a string is a valid semantic version.

    Examples:
        >>> is_valid_semver("1.0.0")
        True
        >>> is_valid_semver("1.0")
        False
        >>> is_valid_semver("v1.0.0", loose=True)
        True
    """
    if not isinstance(version_string, str):
        return False
    return options_for(loose).pattern.match(version_string.strip()) is not None


def valid_version(version_string: str, loose: bool = False) -> Optional[str]:
    """Return the canonical form of a version, or None if it is invalid.

    Examples:
        >>> valid_version("1.2.3+build")
        '1.2.3'
        >>> valid_version("a.b.c") is None
        True
    """
    version = try_parse_version(version_string, loose=loose)
    return version.version if version is not None else None


def clean_version(version_string: str, loose: bool = False) -> Optional[str]:
    """Strip surrounding whitespace and leading ``=``/``v`` before validating.

    Examples:
        >>> clean_version("  =v1.2.3  ")
        '1.2.3'
    """
    if not isinstance(version_string, str):
        return None
    return valid_version(version_string.strip().lstrip("=v"), loose=loose)



def _check_identifier(identifier: Union[Identifier, int, str]) -> Identifier:
    """Tag a raw pre-release token, rejecting anything outside the grammar."""
    if not isinstance(identifier, Identifier):
        token = str(identifier)
        if not TOKEN_PATTERN.match(token):
            raise InvalidArgumentError("prerelease", f"Invalid pre-release identifier: {token!r}")
        return Identifier.parse(token)
    if identifier.numeric:
        if not isinstance(identifier.value, int) or identifier.value < 0:
            raise InvalidArgumentError(
                "prerelease", f"Invalid numeric identifier: {identifier.value!r}"
            )
    elif not (
        isinstance(identifier.value, str)
        and TOKEN_PATTERN.match(identifier.value)
        and not INTEGER_PATTERN.match(identifier.value)
    ):
        raise InvalidArgumentError(
            "prerelease", f"Invalid alphanumeric identifier: {identifier.value!r}"
        )
    return identifier


def _check_build_token(token: str) -> str:
    if not isinstance(token, str) or not TOKEN_PATTERN.match(token):
        raise InvalidArgumentError("build", f"Invalid build identifier: {token!r}")
    return token
