# SPDX-License-Identifier: MIT
"""npm script handling for lint tools."""

from __future__ import annotations

from .config import LintToolConfig
from .validator import Manifest


def find_existing_scripts(manifest: Manifest, tool_name: str) -> dict[str, str]:
    """Return the scripts whose command already runs ``tool_name``.

    Detection is a plain substring check on the command text: ``"eslint ./"``
    and ``"npm run a && eslint src"`` both count as eslint scripts.
    """
    scripts = manifest.get("scripts", {})
    return {name: command for name, command in scripts.items() if tool_name in command}


def merge_default_scripts(manifest: Manifest, tool: LintToolConfig) -> Manifest:
    """Add the tool's default scripts unless the project already runs the tool.

    Default entries only fill names that are free; an existing script is never
    overwritten, even one that does not mention the tool.

    Returns:
        The rewritten manifest, or ``manifest`` itself when a script already
        runs the tool
    """
    if find_existing_scripts(manifest, tool.name):
        return manifest

    scripts = dict(manifest.get("scripts", {}))
    for name, command in tool.scripts.items():
        scripts.setdefault(name, command)

    result = dict(manifest)
    result["scripts"] = scripts
    return result
