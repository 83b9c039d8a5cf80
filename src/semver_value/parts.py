# SPDX-License-Identifier: MIT
"""Pre-release and build metadata parts.

Each dot-separated field after the ``-`` or ``+`` separator becomes one part:
- Numeric fields (``1``, ``007``) become a NumericPart compared by value
- Everything else (``alpha``, ``rc1``, ``x-86``) becomes an IdentifierPart
  compared by code point
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Union

from .config import DEFAULT_MAX_COMPONENT

# Characters accepted in a single metadata field
FIELD_PATTERN = re.compile(r"[A-Za-z0-9:-]+")

_DIGITS = re.compile(r"[0-9]+")


@dataclass(frozen=True, slots=True)
class NumericPart:
    """A purely numeric metadata field."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f"Numeric part must be an int, got {type(self.value).__name__}")
        if self.value < 0:
            raise ValueError(f"Numeric part must be non-negative, got {self.value}")
        if self.value > DEFAULT_MAX_COMPONENT:
            raise ValueError(
                f"Numeric part cannot exceed {DEFAULT_MAX_COMPONENT}, got {self.value}"
            )

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, slots=True)
class IdentifierPart:
    """An alphanumeric metadata field, kept verbatim."""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or FIELD_PATTERN.fullmatch(self.value) is None:
            raise ValueError(f"Invalid identifier part: {self.value!r}")
        if _DIGITS.fullmatch(self.value):
            raise ValueError(f"Identifier part cannot be purely numeric: {self.value!r}")

    def __str__(self) -> str:
        return self.value


VersionPart = Union[NumericPart, IdentifierPart]


def parse_part(text: str, max_value: int = DEFAULT_MAX_COMPONENT) -> VersionPart:
    """Parse a single metadata field.

    Args:
        text: The field text, without surrounding dots
        max_value: Largest value accepted for a numeric field

    Returns:
        NumericPart if every character is an ASCII digit, IdentifierPart otherwise

    Raises:
        ValueError: If the field is empty or contains characters outside [A-Za-z0-9:-]
        OverflowError: If a numeric field exceeds max_value

    Examples:
        >>> parse_part("alpha")
        IdentifierPart(value='alpha')
        >>> parse_part("007")
        NumericPart(value=7)
    """
    if not text or FIELD_PATTERN.fullmatch(text) is None:
        raise ValueError(f"Invalid metadata field: {text!r}")

    if _DIGITS.fullmatch(text):
        value = int(text)
        if value > max_value:
            raise OverflowError(f"Metadata field {text} exceeds maximum value {max_value}")
        return NumericPart(value)

    return IdentifierPart(text)


def as_part(value: Union[VersionPart, int, str]) -> VersionPart:
    """Coerce an int, str or existing part into a VersionPart."""
    if isinstance(value, (NumericPart, IdentifierPart)):
        return value
    if isinstance(value, bool):
        raise TypeError("Version parts cannot be booleans")
    if isinstance(value, int):
        return NumericPart(value)
    if isinstance(value, str):
        return parse_part(value)
    raise TypeError(f"Cannot convert {type(value).__name__} to a version part")


def compare_parts(part1: VersionPart, part2: VersionPart) -> int:
    """Compare two metadata parts.

    Returns:
        -1 if part1 < part2
        0 if part1 == part2
        1 if part1 > part2

    Numeric parts compare by value. Any other pairing compares the rendered
    strings by code point, except that an identifier starting with a digit
    always sorts after a numeric part.
    """
    if isinstance(part1, NumericPart) and isinstance(part2, NumericPart):
        n1, n2 = part1.value, part2.value
        if n1 == n2:
            return 0
        return -1 if n1 < n2 else 1

    # Identifiers starting with a digit sort after every number
    if isinstance(part1, NumericPart) and part2.value[0].isdigit():
        return -1
    if isinstance(part2, NumericPart) and part1.value[0].isdigit():
        return 1

    s1, s2 = str(part1), str(part2)
    if s1 == s2:
        return 0
    return -1 if s1 < s2 else 1


def part_key(part: VersionPart) -> tuple[int, int, str]:
    """Return a sort key that orders parts the same way as compare_parts."""
    if isinstance(part, NumericPart):
        return (1, part.value, "")
    if part.value.startswith("-"):
        return (0, 0, part.value)
    return (2, 0, part.value)
