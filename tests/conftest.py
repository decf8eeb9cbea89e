# SPDX-License-Identifier: MIT
"""Pytest configuration and fixtures for applint-codemod tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable, Generator

import pytest
from click.testing import CliRunner


ManifestWriter = Callable[[Path, dict[str, Any]], Path]


def _write_manifest(directory: Path, manifest: dict[str, Any]) -> Path:
    """Write a package.json the way npm does and return its path."""
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / "package.json"
    path.write_text(json.dumps(manifest, indent=2) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def write_manifest() -> ManifestWriter:
    """Return a helper that writes package.json files."""
    return _write_manifest


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def legacy_manifest() -> dict[str, Any]:
    """A package.json still on @iceworks/spec with its own lint plugins."""
    return {
        "name": "legacy-app",
        "version": "1.0.0",
        "scripts": {
            "start": "ice-scripts start",
            "lint": "eslint --cache ./src",
        },
        "dependencies": {
            "react": "^17.0.2",
            "eslint-plugin-react": "^7.0.0",
        },
        "devDependencies": {
            "@iceworks/spec": "^1.4.2",
            "eslint": "^6.8.0",
            "stylelint": "^14.1.0",
            "stylelint-scss": "^3.0.0",
            "typescript": "^4.0.0",
        },
    }


@pytest.fixture
def legacy_project(tmp_path: Path, legacy_manifest: dict[str, Any]) -> Generator[Path, None, None]:
    """Create a temporary project with a legacy package.json and eslint config."""
    project_dir = tmp_path / "legacy_project"
    _write_manifest(project_dir, legacy_manifest)
    (project_dir / ".eslintrc.js").write_text(
        "const { getESLintConfig } = require('@iceworks/spec');\n"
        "module.exports = getESLintConfig('react-ts');\n",
        encoding="utf-8",
    )
    (project_dir / "src").mkdir()
    (project_dir / "src" / "index.ts").write_text("export {};\n", encoding="utf-8")

    yield project_dir
