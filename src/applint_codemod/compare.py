# SPDX-License-Identifier: MIT
"""Version comparison following npm SemVer precedence.

A release outranks its own pre-releases. Pre-release identifiers compare
numerically when both are numeric, numeric identifiers sort before
alphanumeric ones, and alphanumeric identifiers compare lexically.
Build metadata is ignored in comparisons per SemVer spec.
"""

from __future__ import annotations

from typing import Union

from .semver import Version, parse_version


def _is_numeric(identifier: str) -> bool:
    return identifier.isascii() and identifier.isdigit()


def _compare_prerelease(pre1: str | None, pre2: str | None) -> int:
    """Compare two pre-release strings.

    Returns:
        -1 if pre1 < pre2
        0 if pre1 == pre2
        1 if pre1 > pre2
    """
    # No pre-release > any pre-release
    if pre1 is None and pre2 is None:
        return 0
    if pre1 is None:
        return 1
    if pre2 is None:
        return -1

    parts1 = pre1.split(".")
    parts2 = pre2.split(".")

    for p1, p2 in zip(parts1, parts2):
        is_num1 = _is_numeric(p1)
        is_num2 = _is_numeric(p2)

        if is_num1 and is_num2:
            n1, n2 = int(p1), int(p2)
            if n1 != n2:
                return -1 if n1 < n2 else 1
        elif is_num1:
            # Numeric < alphanumeric per SemVer
            return -1
        elif is_num2:
            return 1
        elif p1 != p2:
            return -1 if p1 < p2 else 1

    # All compared parts equal - longer pre-release has higher precedence
    if len(parts1) != len(parts2):
        return -1 if len(parts1) < len(parts2) else 1

    return 0


def compare_versions(version1: Union[str, Version], version2: Union[str, Version]) -> int:
    """Compare two semantic versions.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2

    Raises:
        InvalidVersionError: If either version string is invalid

    Examples:
        >>> compare_versions("7.32.0", "8.0.0")
        -1
        >>> compare_versions("8.0.0-rc.1", "8.0.0")
        -1
        >>> compare_versions("1.0.0+build1", "1.0.0")
        0
    """
    v1 = parse_version(version1) if isinstance(version1, str) else version1
    v2 = parse_version(version2) if isinstance(version2, str) else version2

    if v1.release_tuple != v2.release_tuple:
        return -1 if v1.release_tuple < v2.release_tuple else 1

    return _compare_prerelease(v1.prerelease, v2.prerelease)


def version_key(version: Union[str, Version]) -> tuple:
    """Return a sort key for a version, consistent with compare_versions.

    Examples:
        >>> sorted(["2.0.0", "1.0.0", "1.0.0-0"], key=version_key)
        ['1.0.0-0', '1.0.0', '2.0.0']
    """
    v = parse_version(version) if isinstance(version, str) else version

    # Release sorts after every pre-release of the same MAJOR.MINOR.PATCH
    if v.prerelease is None:
        prerelease_key: tuple = (1,)
    else:
        parts = []
        for part in v.prerelease.split("."):
            if _is_numeric(part):
                parts.append((0, int(part), ""))
            else:
                parts.append((1, 0, part))
        prerelease_key = (0, tuple(parts))

    return (v.major, v.minor, v.patch, prerelease_key)
