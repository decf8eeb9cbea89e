# SPDX-License-Identifier: MIT
"""Migration policy: successor package, deprecated packages and lint tools.

These values are compiled in. Every run of the codemod applies the same
policy, so none of it is read from the environment or from the project.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

# Name of the manifest file the transform applies to
MANIFEST_FILENAME = "package.json"

# Unified lint spec package that replaces the deprecated ones
SUCCESSOR_PACKAGE = "@applint/spec"
SUCCESSOR_VERSION = "^1.0.0"

# Legacy lint spec packages, in lookup order
DEPRECATED_PACKAGES: tuple[str, ...] = ("@iceworks/spec", "@ice/spec")

# Manifest sections holding dependency maps
DEPENDENCY_SECTIONS: tuple[str, ...] = ("dependencies", "devDependencies")


@dataclass(frozen=True)
class LintToolConfig:
    """Static description of one lint tool.

    Attributes:
        name: Package and executable name of the tool (e.g. "eslint")
        version: Range the tool's devDependency is upgraded to
        scripts: Default npm scripts added when no script runs the tool
        removed_dependency_pattern: Matches plugin/rule/config packages that
            the successor package now provides
        config_files: Conventional config file names for the tool
    """

    name: str
    version: str
    scripts: Mapping[str, str]
    removed_dependency_pattern: re.Pattern
    config_files: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        # Script map is read-only
        object.__setattr__(self, "scripts", MappingProxyType(dict(self.scripts)))


ESLINT = LintToolConfig(
    name="eslint",
    version="^8.0.0",
    scripts={
        "eslint": "eslint --ext .js,.jsx,.ts,.tsx ./",
        "eslint:fix": "eslint --ext .js,.jsx,.ts,.tsx ./ --fix",
    },
    removed_dependency_pattern=re.compile(r"eslint-.*"),
    config_files=(".eslintrc.js", ".eslintrc", ".eslintrc.json"),
)

STYLELINT = LintToolConfig(
    name="stylelint",
    version="^14.0.0",
    scripts={
        "stylelint": "stylelint **/*.{css,scss,less}",
        "stylelint:fix": "stylelint **/*.{css,scss,less} --fix",
    },
    removed_dependency_pattern=re.compile(r"stylelint-.*"),
    config_files=(".stylelintrc.js", ".stylelintrc", ".stylelintrc.json"),
)

# Processing order matters: each tool sees the previous tool's output
LINT_TOOLS: tuple[LintToolConfig, ...] = (ESLINT, STYLELINT)
