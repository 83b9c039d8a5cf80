# SPDX-License-Identifier: MIT
"""Version parsing and the Version value type.

Supports MAJOR.MINOR.PATCH with at most one suffix:
- Pre-release: -alpha, -alpha.1, -rc.2, -0.3.7
- Build metadata: +build, +build.123, +20240101
- Legacy four-part versions (1.2.3.4) are represented as +build.4
"""

from __future__ import annotations

import enum
import logging
import re
from dataclasses import dataclass, field
from functools import total_ordering
from typing import Iterable, Optional, Union

from .config import DEFAULT_CONFIG, DEFAULT_MAX_COMPONENT, ParserConfig
from .parts import IdentifierPart, NumericPart, VersionPart, as_part, compare_parts, parse_part

logger = logging.getLogger(__name__)

# Anchored at both ends; empty metadata fields are rejected
VERSION_PATTERN = re.compile(
    r"(?P<major>[0-9]+)"
    r"\.(?P<minor>[0-9]+)"
    r"\.(?P<patch>[0-9]+)"
    r"(?:(?P<separator>[-+])(?P<metadata>[A-Za-z0-9:-]+(?:\.[A-Za-z0-9:-]+)*))?"
)

LEGACY_BUILD_MARKER = "build"


class InvalidVersionError(Exception):
    """Raised when a version string does not follow the version format."""

    def __init__(self, version: str, message: str = ""):
        self.version = version
        self.message = message or f"Invalid version: {version}"
        super().__init__(self.message)


class Classification(enum.Enum):
    """Kind of suffix a version carries.

    The rank is part of the ordering contract:
    pre-release < stable < build for the same MAJOR.MINOR.PATCH.
    """

    PRERELEASE = 0
    STABLE = 1
    BUILD = 2

    @property
    def rank(self) -> int:
        return self.value

    @property
    def separator(self) -> str:
        """Return the suffix separator, empty for stable versions."""
        return _SEPARATORS[self]


_SEPARATORS = {
    Classification.PRERELEASE: "-",
    Classification.STABLE: "",
    Classification.BUILD: "+",
}


def _check_component(name: str, value: object) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")
    if value > DEFAULT_MAX_COMPONENT:
        raise ValueError(f"{name} cannot exceed {DEFAULT_MAX_COMPONENT}, got {value}")


@total_ordering
@dataclass(frozen=True, eq=False, slots=True)
class Version:
    """An immutable, totally ordered version value.

    Attributes:
        major: Major version number
        minor: Minor version number
        patch: Patch version number
        classification: Whether the version is a pre-release, stable, or build
        metadata: Parts following the ``-`` or ``+`` separator; empty when stable

    Examples:
        >>> Version(1, 2, 3)
        Version('1.2.3')
        >>> Version(1, 0, 0, Classification.PRERELEASE, ["alpha", 1])
        Version('1.0.0-alpha.1')
        >>> Version.from_build_number(1, 2, 3, 7)
        Version('1.2.3+build.7')
    """

    major: int
    minor: int
    patch: int
    classification: Classification = Classification.STABLE
    metadata: tuple[VersionPart, ...] = field(default=())

    def __post_init__(self) -> None:
        _check_component("major", self.major)
        _check_component("minor", self.minor)
        _check_component("patch", self.patch)

        if not isinstance(self.classification, Classification):
            raise TypeError(
                f"classification must be a Classification, got {type(self.classification).__name__}"
            )

        if isinstance(self.metadata, str):
            raise TypeError("metadata must be a sequence of parts, not a string")
        parts = tuple(as_part(part) for part in self.metadata)
        if (self.classification is Classification.STABLE) != (not parts):
            raise ValueError(
                "Stable versions carry no metadata and pre-release/build versions require it"
            )
        object.__setattr__(self, "metadata", parts)

    @classmethod
    def from_build_number(cls, major: int, minor: int, patch: int, build: int) -> "Version":
        """Create a version from a four-part platform version number.

        ``Version.from_build_number(1, 2, 3, 7)`` is equal to ``1.2.3+build.7``.
        """
        _check_component("build", build)
        return cls(
            major,
            minor,
            patch,
            Classification.BUILD,
            (IdentifierPart(LEGACY_BUILD_MARKER), NumericPart(build)),
        )

    @classmethod
    def from_tuple(cls, numbers: tuple[int, ...]) -> "Version":
        """Create a version from a (major, minor, patch[, build]) tuple."""
        if len(numbers) == 3:
            return cls(*numbers)
        if len(numbers) == 4:
            return cls.from_build_number(*numbers)
        raise ValueError(f"Expected 3 or 4 version numbers, got {len(numbers)}")

    def __str__(self) -> str:
        """Return the canonical string representation of the version."""
        version = f"{self.major}.{self.minor}.{self.patch}"
        if self.metadata:
            version += self.classification.separator + ".".join(str(p) for p in self.metadata)
        return version

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self)!r})"

    def __hash__(self) -> int:
        return hash(str(self))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) == 0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) < 0

    def compare(self, other: "Version") -> int:
        """Compare this version with another.

        Returns:
            -1 if self < other
            0 if self == other
            1 if self > other

        Ordering rules, first difference wins:
        1. major, minor, patch numerically
        2. classification rank (pre-release < stable < build)
        3. metadata part by part (see compare_parts)
        4. more metadata parts sorts later
        """
        for attr in ("major", "minor", "patch"):
            val1 = getattr(self, attr)
            val2 = getattr(other, attr)
            if val1 != val2:
                return -1 if val1 < val2 else 1

        rank1 = self.classification.rank
        rank2 = other.classification.rank
        if rank1 != rank2:
            return -1 if rank1 < rank2 else 1

        for p1, p2 in zip(self.metadata, other.metadata):
            result = compare_parts(p1, p2)
            if result != 0:
                return result

        len1, len2 = len(self.metadata), len(other.metadata)
        if len1 != len2:
            return -1 if len1 < len2 else 1
        return 0

    @property
    def is_stable(self) -> bool:
        return self.classification is Classification.STABLE

    @property
    def is_prerelease(self) -> bool:
        return self.classification is Classification.PRERELEASE

    @property
    def is_build(self) -> bool:
        return self.classification is Classification.BUILD

    @property
    def metadata_parts(self) -> tuple[str, ...]:
        """Return the rendered metadata parts, e.g. ('alpha', '1')."""
        return tuple(str(p) for p in self.metadata)

    @property
    def prerelease(self) -> Optional[str]:
        """Return the pre-release string (e.g. 'alpha.1'), or None."""
        if not self.is_prerelease:
            return None
        return ".".join(self.metadata_parts)

    @property
    def build(self) -> Optional[str]:
        """Return the build metadata string (e.g. 'build.7'), or None."""
        if not self.is_build:
            return None
        return ".".join(self.metadata_parts)

    @property
    def base_version(self) -> str:
        """Return the base version without pre-release or build metadata."""
        return f"{self.major}.{self.minor}.{self.patch}"


def _match(version_string: object, config: ParserConfig) -> re.Match[str]:
    """Match a candidate string against the grammar and the component width."""
    if not isinstance(version_string, str):
        raise InvalidVersionError(
            str(version_string), f"Version must be a string, got {type(version_string).__name__}"
        )

    text = version_string.strip() if config.strip_whitespace else version_string
    if not text:
        raise InvalidVersionError(version_string, "Version string cannot be empty")

    match = VERSION_PATTERN.fullmatch(text)
    if not match:
        raise InvalidVersionError(version_string)

    numbers: Iterable[str] = (match.group("major"), match.group("minor"), match.group("patch"))
    if match.group("metadata"):
        numbers = [*numbers, *(f for f in match.group("metadata").split(".") if f.isdigit())]
    for number in numbers:
        if int(number) > config.max_component:
            raise InvalidVersionError(
                version_string,
                f"Invalid version: {version_string} ({number} exceeds {config.max_component})",
            )
    return match


def parse_version(version_string: str, config: Optional[ParserConfig] = None) -> Version:
    """Parse a version string into a Version object.

    Args:
        version_string: A string in MAJOR.MINOR.PATCH[-prerelease|+build] format
        config: Parser options, defaults to DEFAULT_CONFIG

    Returns:
        A Version object with parsed components

    Raises:
        InvalidVersionError: If the string does not follow the version format,
            or a numeric component exceeds config.max_component

    Examples:
        >>> parse_version("1.2.3")
        Version('1.2.3')

        >>> parse_version("1.0.0-alpha.1").metadata
        (IdentifierPart(value='alpha'), NumericPart(value=1))

        >>> parse_version("01.02.03+007")
        Version('1.2.3+7')
    """
    config = config or DEFAULT_CONFIG
    try:
        match = _match(version_string, config)
    except InvalidVersionError as e:
        logger.debug("Rejected version %r: %s", version_string, e.message)
        raise

    metadata: tuple[VersionPart, ...] = ()
    classification = Classification.STABLE
    if match.group("separator") is not None:
        if match.group("separator") == "-":
            classification = Classification.PRERELEASE
        else:
            classification = Classification.BUILD
        metadata = tuple(
            parse_part(f, max_value=config.max_component)
            for f in match.group("metadata").split(".")
        )

    return Version(
        major=int(match.group("major")),
        minor=int(match.group("minor")),
        patch=int(match.group("patch")),
        classification=classification,
        metadata=metadata,
    )


def try_parse_version(
    version_string: str, config: Optional[ParserConfig] = None
) -> Optional[Version]:
    """Parse a version string, returning None instead of raising.

    Examples:
        >>> try_parse_version("1.0.0-rc.1")
        Version('1.0.0-rc.1')
        >>> try_parse_version("not-a-version") is None
        True
    """
    try:
        return parse_version(version_string, config)
    except InvalidVersionError as e:
        logger.debug("Ignoring invalid version %r: %s", e.version, e.message)
        return None


def is_valid_version(version_string: str, config: Optional[ParserConfig] = None) -> bool:
    """Check if a string is a valid version without building a Version.

    Args:
        version_string: The string to validate
        config: Parser options, defaults to DEFAULT_CONFIG

    Returns:
        True if parse_version would accept the string, False otherwise

    Examples:
        >>> is_valid_version("1.2.3")
        True
        >>> is_valid_version("1.2")
        False
        >>> is_valid_version("v1.2.3")
        False
    """
    try:
        _match(version_string, config or DEFAULT_CONFIG)
    except InvalidVersionError:
        return False
    return True


VersionLike = Union[str, Version]


def coerce_version(version: VersionLike, config: Optional[ParserConfig] = None) -> Version:
    """Return version unchanged if it is a Version, otherwise parse it."""
    if isinstance(version, Version):
        return version
    return parse_version(version, config)
