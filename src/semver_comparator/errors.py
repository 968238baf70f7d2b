# SPDX-License-Identifier: MIT
"""Exceptions raised by version and comparator parsing."""

from __future__ import annotations

from typing import Any


class SemverError(Exception):
    """Base class for all errors raised by this package."""

    pass


class InvalidVersionError(SemverError):
    """Raised when a version string does not follow semantic versioning.

    Attributes:
        version: The offending raw input
        message: Human readable description of the failure
    """

    def __init__(self, version: str, message: str = ""):
        self.version = version
        self.message = message or f"Invalid Version: {version}"
        super().__init__(self.message)


class InvalidOperatorError(SemverError):
    """Raised when a comparator starts with an unrecognized operator token.

    Attributes:
        operator: The operator token that was rejected
        comparator: The full comparator string
    """

    def __init__(self, operator: str, comparator: str):
        self.operator = operator
        self.comparator = comparator
        self.message = f"Invalid operator {operator!r} in comparator: {comparator}"
        super().__init__(self.message)


class InvalidArgumentError(SemverError, ValueError):
    """Raised for absent operands and unknown increment kinds."""

    def __init__(self, argument: str, message: Any):
        self.argument = argument
        self.message = str(message)
        super().__init__(self.message)
