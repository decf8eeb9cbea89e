# SPDX-License-Identifier: MIT
"""Migrate package.json manifests to @applint/spec.

The transform is a pipeline of value-returning steps:

1. find the first deprecated lint spec package
2. replace it with the successor package
3. for each lint tool, in order: add default scripts, add or upgrade the
   tool's devDependency, prune the tool's plugin/rule packages

Example:
    >>> transform_manifest({"devDependencies": {"@ice/spec": "^1.0.0"}})["devDependencies"]
    {'@applint/spec': '^1.0.0', 'eslint': '^8.0.0', 'stylelint': '^14.0.0'}
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from typing import Iterable, Optional

from .config import LINT_TOOLS, MANIFEST_FILENAME, LintToolConfig
from .dependencies import (
    find_deprecated_dependency,
    prune_dependencies,
    replace_deprecated_dependency,
    upgrade_dev_dependency,
)
from .scripts import merge_default_scripts
from .validator import Manifest, parse_manifest


@dataclass(frozen=True)
class MigrationResult:
    """Outcome of migrating one manifest.

    Attributes:
        manifest: The migrated manifest
        deprecated_dependency: Deprecated package that was replaced, if any
        changed: Whether the migrated manifest differs from the input
    """

    manifest: Manifest
    deprecated_dependency: Optional[str] = None
    changed: bool = False


def is_manifest_path(file_path: str | os.PathLike) -> bool:
    """Return True if ``file_path`` names a package.json file."""
    return os.path.basename(os.fspath(file_path)) == MANIFEST_FILENAME


def apply_lint_tool(manifest: Manifest, tool: LintToolConfig) -> Manifest:
    """Apply one lint tool's script, dependency and pruning rules."""
    manifest = merge_default_scripts(manifest, tool)
    manifest = upgrade_dev_dependency(manifest, tool.name, tool.version)
    return prune_dependencies(manifest, tool.removed_dependency_pattern)


def migrate_manifest(
    manifest: Manifest,
    tools: Iterable[LintToolConfig] = LINT_TOOLS,
) -> MigrationResult:
    """Run the full migration pipeline on a parsed manifest.

    Args:
        manifest: Parsed package.json; it is not modified
        tools: Lint tools to apply, in order

    Returns:
        MigrationResult holding the new manifest
    """
    deprecated = find_deprecated_dependency(manifest)
    migrated = replace_deprecated_dependency(manifest, deprecated)
    for tool in tools:
        migrated = apply_lint_tool(migrated, tool)

    return MigrationResult(
        manifest=migrated,
        deprecated_dependency=deprecated,
        changed=migrated != manifest,
    )


def transform_manifest(manifest: Manifest) -> Manifest:
    """Return the migrated copy of a parsed manifest."""
    return migrate_manifest(manifest).manifest


def serialize_manifest(manifest: Manifest, indent: Optional[int] = None) -> str:
    """Serialize a manifest to JSON text.

    With ``indent=None`` the output is compact, the way ``JSON.stringify``
    writes it. Otherwise it is indented and ends with a newline, the way npm
    writes package.json.
    """
    if indent is None:
        return json.dumps(manifest, ensure_ascii=False, separators=(",", ":"))
    return json.dumps(manifest, ensure_ascii=False, indent=indent) + "\n"


def transform_source(
    source: str,
    file_path: str | os.PathLike,
    indent: Optional[int] = None,
) -> str:
    """Transform the text of one file.

    Files other than package.json are returned unchanged.

    Args:
        source: The file content
        file_path: Path of the file, used only for its base name
        indent: JSON indentation of the output; compact when None

    Returns:
        The migrated manifest text, or ``source`` for other files

    Raises:
        ManifestParseError: If a package.json is not valid JSON
        ManifestValidationError: If a dependency or script map is malformed
    """
    if not is_manifest_path(file_path):
        return source

    manifest = parse_manifest(source)
    return serialize_manifest(transform_manifest(manifest), indent=indent)
