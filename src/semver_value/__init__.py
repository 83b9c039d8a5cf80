# SPDX-License-Identifier: MIT
"""Version parsing, comparison and rendering.

This package provides an immutable Version value for MAJOR.MINOR.PATCH
versions with an optional pre-release (``-``) or build (``+``) suffix,
ordered pre-release < stable < build.

Example:
    >>> from semver_value import parse_version, compare_versions, is_valid_version
    >>>
    >>> version = parse_version("1.2.3-alpha.1")
    >>> version.major
    1
    >>> version.metadata_parts
    ('alpha', '1')
    >>>
    >>> is_valid_version("1.0.0")
    True
    >>>
    >>> compare_versions("1.0.0", "2.0.0") == -1
    True
"""

import logging

__version__ = "0.1.0"

from .config import (
    ParserConfig,
    ConfigError,
    DEFAULT_CONFIG,
)
from .parts import (
    VersionPart,
    NumericPart,
    IdentifierPart,
    parse_part,
    compare_parts,
)
from .semver import (
    Version,
    Classification,
    parse_version,
    try_parse_version,
    is_valid_version,
    InvalidVersionError,
    VERSION_PATTERN,
)
from .compare import (
    Ordering,
    compare_versions,
    version_key,
    sort_versions,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Configuration
    "ParserConfig",
    "ConfigError",
    "DEFAULT_CONFIG",
    # Metadata parts
    "VersionPart",
    "NumericPart",
    "IdentifierPart",
    "parse_part",
    "compare_parts",
    # Version parsing
    "Version",
    "Classification",
    "parse_version",
    "try_parse_version",
    "is_valid_version",
    "InvalidVersionError",
    "VERSION_PATTERN",
    # Version comparison
    "Ordering",
    "compare_versions",
    "version_key",
    "sort_versions",
]
