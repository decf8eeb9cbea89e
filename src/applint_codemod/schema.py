# SPDX-License-Identifier: MIT
"""JSON Schema for the parts of package.json the codemod touches.

Only ``dependencies``, ``devDependencies`` and ``scripts`` are described.
Every other field is left to npm and carried through the transform as-is.
Dependency versions are not checked: the transform reads only package names,
and a lint tool's range that is not a string is replaced like any other
unparsable range.
"""

from __future__ import annotations

MANIFEST_SCHEMA: dict = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "title": "package.json (lint migration subset)",
    "description": "Fields of package.json read or rewritten by applint-codemod",
    "type": "object",
    "properties": {
        "dependencies": {
            "$ref": "#/$defs/dependencyMap",
            "description": "Runtime dependencies: package name to version range",
        },
        "devDependencies": {
            "$ref": "#/$defs/dependencyMap",
            "description": "Development dependencies: package name to version range",
        },
        "scripts": {
            "type": "object",
            "additionalProperties": {"type": "string"},
            "description": "npm scripts: script name to shell command",
        },
    },
    "$defs": {
        "dependencyMap": {
            "type": "object",
        },
    },
}
