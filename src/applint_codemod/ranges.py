# SPDX-License-Identifier: MIT
"""npm version range parsing and minimum satisfying version lookup.

Only the subset of npm range semantics needed to answer "what is the lowest
version this range accepts" is implemented: ``||`` alternatives, hyphen
ranges, comparator sets, the ``^``/``~`` shorthands, partial versions and
``x``/``*`` wildcards. Anything else (dist-tags, ``workspace:`` specs, URLs,
file paths) is unparsable and yields ``None``.

Example:
    >>> str(min_version("^8.12.0"))
    '8.12.0'
    >>> str(min_version(">1.2"))
    '1.3.0'
    >>> min_major("latest") is None
    True
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from .compare import compare_versions, version_key
from .semver import InvalidVersionError, Version, parse_version

_WILDCARDS = {"x", "X", "*"}

_PARTIAL_PATTERN = re.compile(
    r"^v?(?P<major>0|[1-9]\d*|[xX*])"
    r"(?:\.(?P<minor>0|[1-9]\d*|[xX*])"
    r"(?:\.(?P<patch>0|[1-9]\d*|[xX*])"
    r"(?P<suffix>(?:-[0-9A-Za-z-.]+)?(?:\+[0-9A-Za-z-.]+)?))?)?$",
    re.ASCII,
)

_COMPARATOR_PATTERN = re.compile(r"^(?P<operator>\^|~>?|>=|<=|>|<|=)?(?P<version>\S*)$")

_HYPHEN_PATTERN = re.compile(r"^(?P<low>\S+)\s+-\s+(?P<high>\S+)$")

# Joins an operator to its version so ">= 1.2" tokenizes like ">=1.2"
_OPERATOR_SPACE_PATTERN = re.compile(r"(\^|~>?|>=|<=|>|<|=)\s+")

# Probes for the lowest release and lowest pre-release; "<0.0.0-0" matches nothing
ZERO = Version(0, 0, 0)
ZERO_PRERELEASE = Version(0, 0, 0, "0")


@dataclass(frozen=True, slots=True)
class PartialVersion:
    """A version where trailing components may be wildcards (None)."""

    major: Optional[int]
    minor: Optional[int] = None
    patch: Optional[int] = None
    prerelease: Optional[str] = None

    def floor(self) -> Version:
        """Return the lowest full version this partial covers."""
        return Version(self.major or 0, self.minor or 0, self.patch or 0, self.prerelease)

    @property
    def is_full(self) -> bool:
        return self.patch is not None


@dataclass(frozen=True, slots=True)
class Comparator:
    """A single ``<operator><version>`` constraint."""

    operator: str
    version: Version

    def test(self, version: Version) -> bool:
        """Return True if ``version`` satisfies this constraint."""
        result = compare_versions(version, self.version)
        if self.operator == ">=":
            return result >= 0
        if self.operator == ">":
            return result > 0
        if self.operator == "<=":
            return result <= 0
        if self.operator == "<":
            return result < 0
        return result == 0

    def __str__(self) -> str:
        return f"{self.operator}{self.version}"


ComparatorSet = tuple[Comparator, ...]

_NOTHING: ComparatorSet = (Comparator("<", ZERO_PRERELEASE),)


def _parse_partial(text: str) -> PartialVersion | None:
    """Parse a possibly partial version such as ``8``, ``8.x`` or ``8.1.0-rc.1``."""
    match = _PARTIAL_PATTERN.match(text)
    if not match:
        return None

    parts: list[Optional[int]] = []
    for name in ("major", "minor", "patch"):
        value = match.group(name)
        # Once a component is a wildcard, everything after it is too
        if value is None or value in _WILDCARDS or (parts and parts[-1] is None):
            parts.append(None)
        else:
            parts.append(int(value))

    prerelease = None
    suffix = match.group("suffix")
    if suffix and parts[2] is not None:
        try:
            prerelease = parse_version(f"{parts[0]}.{parts[1]}.{parts[2]}{suffix}").prerelease
        except InvalidVersionError:
            return None

    return PartialVersion(parts[0], parts[1], parts[2], prerelease)


def _next_major(partial: PartialVersion) -> Version:
    return Version((partial.major or 0) + 1, 0, 0, "0")


def _next_minor(partial: PartialVersion) -> Version:
    return Version(partial.major or 0, (partial.minor or 0) + 1, 0, "0")


def _next_patch(partial: PartialVersion) -> Version:
    return Version(partial.major or 0, partial.minor or 0, (partial.patch or 0) + 1, "0")


def _caret(partial: PartialVersion) -> ComparatorSet:
    if partial.major is None:
        return ()
    low = Comparator(">=", partial.floor())
    if partial.minor is None or partial.major > 0:
        return (low, Comparator("<", _next_major(partial)))
    if partial.patch is None or partial.minor > 0:
        return (low, Comparator("<", _next_minor(partial)))
    return (low, Comparator("<", _next_patch(partial)))


def _tilde(partial: PartialVersion) -> ComparatorSet:
    if partial.major is None:
        return ()
    low = Comparator(">=", partial.floor())
    if partial.minor is None:
        return (low, Comparator("<", _next_major(partial)))
    return (low, Comparator("<", _next_minor(partial)))


def _expand(operator: str, partial: PartialVersion) -> ComparatorSet:
    """Expand one operator/partial pair into plain comparators."""
    if operator == "^":
        return _caret(partial)
    if operator in ("~", "~>"):
        return _tilde(partial)

    if operator in ("", "="):
        if partial.is_full:
            return (Comparator("=", partial.floor()),)
        return _tilde(partial)

    if operator == ">":
        if partial.major is None:
            return _NOTHING
        if partial.minor is None:
            return (Comparator(">=", Version(partial.major + 1, 0, 0)),)
        if partial.patch is None:
            return (Comparator(">=", Version(partial.major, partial.minor + 1, 0)),)
        return (Comparator(">", partial.floor()),)

    if operator == ">=":
        if partial.major is None:
            return ()
        return (Comparator(">=", partial.floor()),)

    if operator == "<":
        if partial.major is None:
            return _NOTHING
        if partial.is_full:
            return (Comparator("<", partial.floor()),)
        return (Comparator("<", Version(partial.major, partial.minor or 0, 0, "0")),)

    # "<="
    if partial.major is None:
        return ()
    if partial.minor is None:
        return (Comparator("<", _next_major(partial)),)
    if partial.patch is None:
        return (Comparator("<", _next_minor(partial)),)
    return (Comparator("<=", partial.floor()),)


def _parse_hyphen(low_text: str, high_text: str) -> ComparatorSet | None:
    low = _parse_partial(low_text)
    high = _parse_partial(high_text)
    if low is None or high is None:
        return None

    comparators: list[Comparator] = []
    if low.major is not None:
        comparators.append(Comparator(">=", low.floor()))
    if high.major is not None:
        if high.minor is None:
            comparators.append(Comparator("<", _next_major(high)))
        elif high.patch is None:
            comparators.append(Comparator("<", _next_minor(high)))
        else:
            comparators.append(Comparator("<=", high.floor()))
    return tuple(comparators)


def _parse_comparator_set(text: str) -> ComparatorSet | None:
    text = text.strip()
    hyphen = _HYPHEN_PATTERN.match(text)
    if hyphen:
        return _parse_hyphen(hyphen.group("low"), hyphen.group("high"))

    comparators: list[Comparator] = []
    for token in _OPERATOR_SPACE_PATTERN.sub(r"\1", text).split():
        match = _COMPARATOR_PATTERN.match(token)
        if not match:
            return None
        partial = _parse_partial(match.group("version"))
        if partial is None:
            return None
        comparators.extend(_expand(match.group("operator") or "", partial))
    return tuple(comparators)


def parse_range(range_string: str) -> list[ComparatorSet] | None:
    """Parse an npm range into its ``||`` alternatives.

    Each alternative is a tuple of comparators that must all hold; an empty
    tuple accepts every release.

    Returns:
        The comparator sets, or None if the range is not understood
    """
    if not isinstance(range_string, str):
        return None

    sets: list[ComparatorSet] = []
    for alternative in range_string.split("||"):
        comparator_set = _parse_comparator_set(alternative)
        if comparator_set is None:
            return None
        sets.append(comparator_set)
    return sets


def satisfies_set(version: Version, comparator_set: ComparatorSet) -> bool:
    """Return True if ``version`` satisfies every comparator of the set.

    A pre-release only satisfies a set that names a pre-release of the same
    MAJOR.MINOR.PATCH, matching npm's default (non-``includePrerelease``) mode.
    """
    if not all(comparator.test(version) for comparator in comparator_set):
        return False
    if version.prerelease is None:
        return True
    return any(
        comparator.version.prerelease is not None
        and comparator.version.release_tuple == version.release_tuple
        for comparator in comparator_set
    )


def _set_minimum(comparator_set: ComparatorSet) -> Version | None:
    minimum: Version | None = None
    for comparator in comparator_set:
        if comparator.operator == ">":
            if comparator.version.prerelease is None:
                candidate = comparator.version.next_patch()
            else:
                candidate = comparator.version.next_prerelease()
        elif comparator.operator in (">=", "="):
            candidate = comparator.version
        else:
            continue
        if minimum is None or compare_versions(candidate, minimum) > 0:
            minimum = candidate

    if minimum is not None and satisfies_set(minimum, comparator_set):
        return minimum
    return None


def min_version(range_string: str) -> Version | None:
    """Return the lowest version that satisfies an npm range.

    Args:
        range_string: An npm version range such as ``^8.0.0`` or ``>=7 <9``

    Returns:
        The minimum satisfying Version, or None if the range cannot be parsed
        or no version satisfies it

    Examples:
        >>> str(min_version("~7.3"))
        '7.3.0'
        >>> str(min_version("<8"))
        '0.0.0'
        >>> str(min_version("1.x || >=2.5.0"))
        '1.0.0'
    """
    sets = parse_range(range_string)
    if sets is None:
        return None

    for probe in (ZERO, ZERO_PRERELEASE):
        if any(satisfies_set(probe, comparator_set) for comparator_set in sets):
            return probe

    candidates = [minimum for minimum in map(_set_minimum, sets) if minimum is not None]
    if not candidates:
        return None
    return min(candidates, key=version_key)


def min_major(range_string: str) -> int | None:
    """Return the major version of the lowest version an npm range accepts.

    Unparsable ranges give None instead of raising, so callers can decide how
    to treat them.

    Examples:
        >>> min_major("^8.5.0")
        8
        >>> min_major("workspace:*") is None
        True
    """
    version = min_version(range_string)
    if version is None:
        return None
    return version.major
