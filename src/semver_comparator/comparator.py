# SPDX-License-Identifier: MIT
"""Single-operator version comparators such as ``>=1.2.3``.

A comparator is an optional relational operator followed by a version:

- ``1.2.3`` / ``=1.2.3``: equal precedence (build metadata ignored)
- ``>1.2.3``, ``>=1.2.3``: greater than / at least
- ``<1.2.3``, ``<=1.2.3``: less than / at most
- empty string: matches every version

``<`` against a release excludes that release's own pre-releases, so
``<1.2.3`` does not match ``1.2.3-beta`` while ``<=1.2.3`` does.
"""

from __future__ import annotations

import enum
import logging
import re
from typing import Optional, Union

from .errors import InvalidArgumentError, InvalidOperatorError, InvalidVersionError
from .options import STRICT, ParseOptions, options_for
from .semver import Version, parse_version

logger = logging.getLogger(__name__)

# Leading run of operator-like characters, then the version operand
COMPARATOR_PATTERN = re.compile(r"^(?P<operator>[<>=!~^]*)\s*(?P<version>.*)$", re.DOTALL)


class Operator(str, enum.Enum):
    """Relational operator of a comparator."""

    EQ = ""
    GT = ">"
    GE = ">="
    LT = "<"
    LE = "<="

    @classmethod
    def from_token(cls, token: str) -> Optional[Operator]:
        """Map an operator token to an Operator, or None if unrecognized."""
        if token == "=":
            return cls.EQ
        try:
            return cls(token)
        except ValueError:
            return None


class Comparator:
    """A relational operator applied to a single version operand.

    Comparators are immutable. The operand is copied on the way in and
    on every read, so bumping ``comparator.operand`` never changes what
    the comparator matches.

    Attributes:
        operator: The relational operator
        operand: The version to compare against; None for the
            match-anything comparator parsed from an empty string
        options: Options the operand was parsed with
    """

    __slots__ = ("_operator", "_operand", "_options")

    def __init__(
        self,
        operator: Union[Operator, str] = Operator.EQ,
        operand: Optional[Version] = None,
        options: ParseOptions = STRICT,
    ):
        if not isinstance(operator, Operator):
            token = operator
            operator = Operator.from_token(token) if isinstance(token, str) else None
            if operator is None:
                raise InvalidOperatorError(str(token), f"{token}{operand or ''}")
        if operand is None and operator is not Operator.EQ:
            raise InvalidArgumentError(
                "operand", f"Operator {operator.value!r} requires a version"
            )
        object.__setattr__(self, "_operator", operator)
        object.__setattr__(self, "_operand", operand.copy() if operand is not None else None)
        object.__setattr__(self, "_options", options)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"Comparator is immutable, cannot set {name!r}")

    @classmethod
    def parse(cls, text: str, loose: bool = False) -> Comparator:
        """Parse ``text``; see :func:`parse_comparator`."""
        return parse_comparator(text, loose=loose)

    @property
    def operator(self) -> Operator:
        return self._operator

    @property
    def operand(self) -> Optional[Version]:
        """A copy of the operand."""
        return self._operand.copy() if self._operand is not None else None

    @property
    def options(self) -> ParseOptions:
        return self._options

    @property
    def matches_any(self) -> bool:
        return self._operand is None

    def matches(self, version: Version) -> bool:
        """Return True if ``version`` satisfies this comparator.

        Raises:
            InvalidArgumentError: If ``version`` is None
        """
        if version is None:
            raise InvalidArgumentError("version", "Cannot match a null version")
        operand = self._operand
        if operand is None:
            return True

        if self._operator is Operator.LT and not operand.prerelease:
            return version.compare_main(operand) < 0

        result = version.compare(operand)
        if self._operator is Operator.EQ:
            return result == 0
        if self._operator is Operator.GT:
            return result > 0
        if self._operator is Operator.GE:
            return result >= 0
        if self._operator is Operator.LT:
            return result < 0
        if self._operator is Operator.LE:
            return result <= 0
        raise InvalidOperatorError(str(self._operator), str(self))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Comparator):
            return NotImplemented
        return (self._operator, self._operand, self._options) == (
            other._operator,
            other._operand,
            other._options,
        )

    def __hash__(self) -> int:
        return hash((self._operator, self._operand, self._options))

    def __repr__(self) -> str:
        return (
            f"Comparator(operator={self._operator!r}, "
            f"operand={self._operand!r}, options={self._options!r})"
        )

    def __str__(self) -> str:
        if self._operand is None:
            return ""
        return f"{self._operator.value}{self._operand}"


def parse_comparator(comparator_string: str, loose: bool = False) -> Comparator:
    """Parse a comparator string.

    Args:
        comparator_string: ``<op><version>`` where ``<op>`` is one of
            ``>=``, ``<=``, ``>``, ``<``, ``=`` or absent
        loose: Parse the version operand with the relaxed grammar

    Returns:
        The parsed Comparator

    Raises:
        InvalidOperatorError: If the leading operator token is not recognized
        InvalidVersionError: If the operand is not a valid version

    Examples:
        >>> parse_comparator(">=1.2.3").matches(parse_version("1.2.4"))
        True
        >>> str(parse_comparator("=1.2.3+build"))
        '1.2.3'
    """
    if not isinstance(comparator_string, str):
        raise InvalidVersionError(
            str(comparator_string),
            f"Comparator must be a string, got {type(comparator_string).__name__}",
        )

    options = options_for(loose)
    text = comparator_string.strip()
    if not text:
        return Comparator(options=options)

    match = COMPARATOR_PATTERN.match(text)
    token = match.group("operator")
    operator = Operator.from_token(token)
    if operator is None:
        raise InvalidOperatorError(token, comparator_string)

    operand = parse_version(match.group("version"), loose=loose)
    return Comparator(operator=operator, operand=operand, options=options)


def try_parse_comparator(comparator_string: str, loose: bool = False) -> Optional[Comparator]:
    """Parse a comparator, returning None instead of raising on invalid input."""
    try:
        return parse_comparator(comparator_string, loose=loose)
    except (InvalidOperatorError, InvalidVersionError) as exc:
        logger.debug("Rejected comparator %r: %s", comparator_string, exc.message)
        return None
