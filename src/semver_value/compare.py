# SPDX-License-Identifier: MIT
"""Version comparison and sorting.

Ordering: 1.0.0-alpha < 1.0.0-alpha.1 < 1.0.0 < 1.0.0+build.1 < 1.0.1
Build metadata is significant and sorts after the stable release.
"""

from __future__ import annotations

import enum
from typing import Iterable

from .parts import part_key
from .semver import Version, VersionLike, coerce_version


class Ordering(enum.IntEnum):
    """Result of comparing two versions."""

    LESS = -1
    EQUAL = 0
    GREATER = 1


def compare_versions(version1: VersionLike, version2: VersionLike) -> Ordering:
    """Compare two versions.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)

    Returns:
        Ordering.LESS (-1) if version1 < version2
        Ordering.EQUAL (0) if version1 == version2
        Ordering.GREATER (1) if version1 > version2

    Raises:
        InvalidVersionError: If either version string is invalid

    Examples:
        >>> compare_versions("1.0.0", "2.0.0")
        <Ordering.LESS: -1>
        >>> compare_versions("1.0.0-alpha.2", "1.0.0-alpha.10") == -1
        True
        >>> compare_versions("1.0.0+build.1", "1.0.0")
        <Ordering.GREATER: 1>
    """
    v1 = coerce_version(version1)
    v2 = coerce_version(version2)
    return Ordering(v1.compare(v2))


def version_key(version: VersionLike) -> tuple:
    """Return a sort key for a version, suitable for sorting.

    Keys order exactly like compare_versions.

    Examples:
        >>> sorted(["1.0.0+build.1", "1.0.0", "1.0.0-alpha"], key=version_key)
        ['1.0.0-alpha', '1.0.0', '1.0.0+build.1']
    """
    v = coerce_version(version)
    # Tuples compare element-wise and a shorter prefix sorts first
    metadata_key = tuple(part_key(p) for p in v.metadata)
    return (v.major, v.minor, v.patch, v.classification.rank, metadata_key)


def sort_versions(versions: Iterable[VersionLike], reverse: bool = False) -> list[Version]:
    """Parse and sort versions, oldest first unless reverse is set."""
    return sorted((coerce_version(v) for v in versions), key=version_key, reverse=reverse)
