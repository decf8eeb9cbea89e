# SPDX-License-Identifier: MIT
"""Migrate package.json manifests from deprecated lint spec packages to @applint/spec.

This package rewrites one manifest at a time:
- Replaces @iceworks/spec or @ice/spec with @applint/spec
- Adds default eslint/stylelint scripts when the project has none
- Adds or upgrades eslint and stylelint in devDependencies
- Removes plugin, rule and config packages the successor package provides

Example:
    >>> from applint_codemod import transform_manifest, transform_source
    >>>
    >>> manifest = transform_manifest(
    ...     {"devDependencies": {"@ice/spec": "^1.0.0", "eslint-plugin-react": "^7.0.0"}}
    ... )
    >>> sorted(manifest["devDependencies"])
    ['@applint/spec', 'eslint', 'stylelint']
    >>>
    >>> transform_source("export {};", "src/index.ts")
    'export {};'
"""

__version__ = "0.1.0"

from .config import (
    DEPRECATED_PACKAGES,
    ESLINT,
    LINT_TOOLS,
    MANIFEST_FILENAME,
    STYLELINT,
    SUCCESSOR_PACKAGE,
    SUCCESSOR_VERSION,
    LintToolConfig,
)
from .dependencies import (
    find_deprecated_dependencies,
    find_deprecated_dependency,
    needs_upgrade,
    prune_dependencies,
    replace_deprecated_dependency,
    upgrade_dev_dependency,
)
from .ranges import min_major, min_version, parse_range
from .scripts import find_existing_scripts, merge_default_scripts
from .semver import InvalidVersionError, Version, parse_version
from .transformer import (
    MigrationResult,
    apply_lint_tool,
    is_manifest_path,
    migrate_manifest,
    serialize_manifest,
    transform_manifest,
    transform_source,
)
from .validator import (
    ManifestError,
    ManifestParseError,
    ManifestValidationError,
    ValidationErrorDetail,
    ValidationResult,
    parse_manifest,
    validate_manifest,
)

__all__ = [
    # Policy
    "SUCCESSOR_PACKAGE",
    "SUCCESSOR_VERSION",
    "DEPRECATED_PACKAGES",
    "MANIFEST_FILENAME",
    "LintToolConfig",
    "ESLINT",
    "STYLELINT",
    "LINT_TOOLS",
    # Versions
    "Version",
    "parse_version",
    "InvalidVersionError",
    "parse_range",
    "min_version",
    "min_major",
    # Pipeline steps
    "find_deprecated_dependency",
    "find_deprecated_dependencies",
    "replace_deprecated_dependency",
    "find_existing_scripts",
    "merge_default_scripts",
    "needs_upgrade",
    "upgrade_dev_dependency",
    "prune_dependencies",
    # Transformation
    "apply_lint_tool",
    "migrate_manifest",
    "transform_manifest",
    "transform_source",
    "serialize_manifest",
    "is_manifest_path",
    "MigrationResult",
    # Validation
    "parse_manifest",
    "validate_manifest",
    "ValidationResult",
    "ValidationErrorDetail",
    "ManifestError",
    "ManifestParseError",
    "ManifestValidationError",
]
