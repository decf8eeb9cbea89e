# SPDX-License-Identifier: MIT
"""Dependency rewriting steps for package.json manifests.

Each function takes a manifest and returns a new one. Inputs are never
modified; a dependency map that changes is copied first, and untouched maps
are shared with the input.
"""

from __future__ import annotations

import re
from typing import Optional

from .config import (
    DEPENDENCY_SECTIONS,
    DEPRECATED_PACKAGES,
    SUCCESSOR_PACKAGE,
    SUCCESSOR_VERSION,
)
from .ranges import min_major
from .validator import Manifest


def _merged_dependencies(manifest: Manifest) -> dict[str, str]:
    """Return dependencies overlaid with devDependencies."""
    return {**manifest.get("dependencies", {}), **manifest.get("devDependencies", {})}


def find_deprecated_dependencies(manifest: Manifest) -> list[str]:
    """Return every deprecated package the manifest depends on, in lookup order."""
    return [name for name in _merged_dependencies(manifest) if name in DEPRECATED_PACKAGES]


def find_deprecated_dependency(manifest: Manifest) -> Optional[str]:
    """Find the first deprecated lint spec package in the manifest.

    dependencies are searched before packages that only appear in
    devDependencies.

    Returns:
        The package name, or None if the manifest has no deprecated package
    """
    deprecated = find_deprecated_dependencies(manifest)
    return deprecated[0] if deprecated else None


def replace_deprecated_dependency(manifest: Manifest, deprecated: Optional[str]) -> Manifest:
    """Swap a deprecated lint spec package for the successor package.

    The deprecated package is removed from both dependency sections and the
    successor is added to devDependencies. A dependencies map emptied here is
    kept; pruning decides later whether empty sections survive.

    Args:
        manifest: The manifest to rewrite
        deprecated: Package found by find_deprecated_dependency, or None

    Returns:
        The rewritten manifest, or ``manifest`` itself when ``deprecated`` is None
    """
    if not deprecated:
        return manifest

    result = dict(manifest)
    for section in DEPENDENCY_SECTIONS:
        dependencies = result.get(section)
        if dependencies is not None and deprecated in dependencies:
            result[section] = {
                name: version for name, version in dependencies.items() if name != deprecated
            }

    result["devDependencies"] = {
        **result.get("devDependencies", {}),
        SUCCESSOR_PACKAGE: SUCCESSOR_VERSION,
    }
    return result


def needs_upgrade(current: Optional[str], target: str) -> bool:
    """Decide whether an installed range must be replaced by ``target``.

    Missing, non-string and unparsable ranges are always replaced. Otherwise
    only a range whose minimum major version is below the target's is
    replaced; the same or a newer major is left alone.

    Examples:
        >>> needs_upgrade("^7.32.0", "^8.0.0")
        True
        >>> needs_upgrade("^8.12.0", "^8.0.0")
        False
        >>> needs_upgrade("latest", "^8.0.0")
        True
    """
    if current is None:
        return True
    current_major = min_major(current)
    target_major = min_major(target)
    if current_major is None or target_major is None:
        return True
    return target_major > current_major


def upgrade_dev_dependency(manifest: Manifest, name: str, version: str) -> Manifest:
    """Add ``name`` to devDependencies, or upgrade it to ``version``.

    Returns:
        The rewritten manifest, or ``manifest`` itself when the installed
        range already satisfies the target major version
    """
    dev_dependencies = manifest.get("devDependencies", {})
    if not needs_upgrade(dev_dependencies.get(name), version):
        return manifest

    result = dict(manifest)
    result["devDependencies"] = {**dev_dependencies, name: version}
    return result


def prune_dependencies(manifest: Manifest, pattern: re.Pattern) -> Manifest:
    """Remove every dependency whose name matches ``pattern``.

    Sections are handled independently. A section with nothing left is
    dropped from the manifest rather than written out as ``{}``.
    """
    result = dict(manifest)
    for section in DEPENDENCY_SECTIONS:
        dependencies = result.get(section, {})
        kept = {name: version for name, version in dependencies.items() if not pattern.search(name)}
        if kept:
            result[section] = kept if len(kept) != len(dependencies) else dependencies
        else:
            result.pop(section, None)
    return result
