# SPDX-License-Identifier: MIT
"""Semantic version parsing, ordering and comparator matching.

This package parses versions following the SemVer 2.0.0 specification,
orders them by SemVer precedence, bumps them, and evaluates single
comparators such as ``>=1.2.3`` against them.

Example:
    >>> from semver_comparator import parse_version, parse_comparator, compare_versions
    >>>
    >>> version = parse_version("1.2.3-alpha.1+build.456")
    >>> version.major
    1
    >>> str(version)
    '1.2.3-alpha.1'
    >>> version.full_string
    '1.2.3-alpha.1+build.456'
    >>>
    >>> parse_comparator("<=1.2.3").matches(version)
    True
    >>>
    >>> compare_versions("1.0.0", "2.0.0")
    -1
"""

import logging

__version__ = "0.1.0"

from .errors import (
    SemverError,
    InvalidVersionError,
    InvalidOperatorError,
    InvalidArgumentError,
)
from .options import ParseOptions
from .semver import (
    Identifier,
    IncrementType,
    Version,
    parse_version,
    try_parse_version,
    is_valid_semver,
    valid_version,
    clean_version,
    compare_identifiers,
    SEMVER_PATTERN,
    LOOSE_SEMVER_PATTERN,
)
from .compare import (
    compare_versions,
    version_key,
    lt,
    le,
    gt,
    ge,
    eq,
    ne,
)
from .comparator import (
    Comparator,
    Operator,
    parse_comparator,
    try_parse_comparator,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Version parsing
    "Version",
    "Identifier",
    "IncrementType",
    "parse_version",
    "try_parse_version",
    "is_valid_semver",
    "valid_version",
    "clean_version",
    "SEMVER_PATTERN",
    "LOOSE_SEMVER_PATTERN",
    # Version comparison
    "compare_versions",
    "compare_identifiers",
    "version_key",
    "lt",
    "le",
    "gt",
    "ge",
    "eq",
    "ne",
    # Comparators
    "Comparator",
    "Operator",
    "parse_comparator",
    "try_parse_comparator",
    # Errors
    "SemverError",
    "InvalidVersionError",
    "InvalidOperatorError",
    "InvalidArgumentError",
    # Configuration
    "ParseOptions",
]
