# SPDX-License-Identifier: MIT
"""Parser configuration."""

from __future__ import annotations

import re
from dataclasses import dataclass

# Strict grammar (SemVer 2.0.0)
# https://semver.org/#is-there-a-suggested-regular-expression-regex-to-check-a-semver-string
SEMVER_PATTERN = re.compile(
    r"^(?P<major>0|[1-9]\d*)"
    r"\.(?P<minor>0|[1-9]\d*)"
    r"\.(?P<patch>0|[1-9]\d*)"
    r"(?:-(?P<prerelease>(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*)"
    r"(?:\.(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*))*))?"
    r"(?:\+(?P<buildmetadata>[0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*))?$",
    re.ASCII,
)

# Loose grammar: leading "v"/"="/whitespace, leading zeros, and an
# optional "-" before the prerelease block are tolerated.
LOOSE_SEMVER_PATTERN = re.compile(
    r"^[v=\s]*(?P<major>\d+)"
    r"\.(?P<minor>\d+)"
    r"\.(?P<patch>\d+)"
    r"(?:-?(?P<prerelease>(?:\d+|\d*[a-zA-Z-][0-9a-zA-Z-]*)"
    r"(?:\.(?:\d+|\d*[a-zA-Z-][0-9a-zA-Z-]*))*))?"
    r"(?:\+(?P<buildmetadata>[0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*))?$",
    re.ASCII,
)


@dataclass(frozen=True, slots=True)
class ParseOptions:
    """Options shared by version and comparator parsing.

    Attributes:
        loose: Accept the relaxed grammar (``v1.2.3``, ``=1.2.3``,
            ``01.02.03``, ``1.2.3beta``) instead of strict SemVer 2.0.0
    """

    loose: bool = False

    @property
    def pattern(self) -> re.Pattern[str]:
        """Return the grammar selected by these options."""
        return LOOSE_SEMVER_PATTERN if self.loose else SEMVER_PATTERN


STRICT = ParseOptions()
LOOSE = ParseOptions(loose=True)


def options_for(loose: bool) -> ParseOptions:
    """Return the shared options instance for a strictness flag."""
    return LOOSE if loose else STRICT
