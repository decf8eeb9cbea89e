# SPDX-License-Identifier: MIT
"""Semantic version parsing for npm package versions.

Supports MAJOR.MINOR.PATCH format with optional pre-release and build metadata:
- Pre-release: -alpha, -alpha.1, -beta.2, -rc.1, -0
- Build metadata: +build, +build.123, +20240101
"""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from typing import Optional

# Semantic versioning regex pattern (SemVer 2.0.0 compliant, ASCII digits only)
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


class InvalidVersionError(ValueError):
    """Raised when a version string does not follow semantic versioning."""

    def __init__(self, version: str, message: str = ""):
        self.version = version
        self.message = message or f"Invalid semantic version: {version}"
        super().__init__(self.message)


@dataclass(frozen=True, slots=True)
class Version:
    """Represents a parsed semantic version.

    Attributes:
        major: Major version number (breaking changes)
        minor: Minor version number (new features, backward compatible)
        patch: Patch version number (bug fixes, backward compatible)
        prerelease: Optional pre-release identifier (e.g., "alpha.1", "beta", "0")
        build: Optional build metadata (e.g., "build.123", "20240101")
    """

    major: int
    minor: int
    patch: int
    prerelease: Optional[str] = None
    build: Optional[str] = None

    def __str__(self) -> str:
        """Return the canonical string representation of the version."""
        version = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease:
            version += f"-{self.prerelease}"
        if self.build:
            version += f"+{self.build}"
        return version

    @property
    def release_tuple(self) -> tuple[int, int, int]:
        """Return (major, minor, patch) without pre-release or build metadata."""
        return (self.major, self.minor, self.patch)

    def next_patch(self) -> "Version":
        """Return the smallest release strictly greater than this release."""
        return Version(self.major, self.minor, self.patch + 1)

    def next_prerelease(self) -> "Version":
        """Return the smallest pre-release strictly greater than this pre-release."""
        return replace(self, prerelease=f"{self.prerelease}.0", build=None)


def parse_version(version_string: str) -> Version:
    """Parse a semantic version string into a Version object.

    Args:
        version_string: A string following semantic versioning format
            (MAJOR.MINOR.PATCH[-prerelease][+build])

    Returns:
        A Version object with parsed components

    Raises:
        InvalidVersionError: If the string does not follow semantic versioning

    Examples:
        >>> parse_version("8.12.0")
        Version(major=8, minor=12, patch=0, prerelease=None, build=None)

        >>> parse_version("1.0.0-beta.1")
        Version(major=1, minor=0, patch=0, prerelease='beta.1', build=None)
    """
    if not isinstance(version_string, str):
        raise InvalidVersionError(
            str(version_string), f"Version must be a string, got {type(version_string).__name__}"
        )

    version_string = version_string.strip()
    if not version_string:
        raise InvalidVersionError(version_string, "Version string cannot be empty")

    match = SEMVER_PATTERN.match(version_string)
    if not match:
        raise InvalidVersionError(version_string)

    return Version(
        major=int(match.group("major")),
        minor=int(match.group("minor")),
        patch=int(match.group("patch")),
        prerelease=match.group("prerelease"),
        build=match.group("buildmetadata"),
    )

