# SPDX-License-Identifier: MIT
"""Migrate package.json files to @applint/spec."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, Iterator

import click

from ..config import LINT_TOOLS, MANIFEST_FILENAME
from ..dependencies import find_deprecated_dependencies
from ..main import Context, echo_error, echo_info, echo_success, echo_warning, pass_context
from ..transformer import is_manifest_path, migrate_manifest, serialize_manifest
from ..validator import ManifestError, parse_manifest

# Directories never searched for manifests
SKIPPED_DIRECTORIES = {"node_modules", ".git"}


def find_manifests(paths: Iterable[Path]) -> Iterator[Path]:
    """Yield files to migrate.

    Files are yielded as given. Directories are searched recursively for
    package.json, skipping installed packages and VCS metadata.
    """
    for path in paths:
        if not path.is_dir():
            yield path
            continue

        for dirpath, dirnames, filenames in os.walk(path):
            dirnames[:] = sorted(d for d in dirnames if d not in SKIPPED_DIRECTORIES)
            if MANIFEST_FILENAME in filenames:
                yield Path(dirpath) / MANIFEST_FILENAME


def _present_config_files(manifest_path: Path) -> list[str]:
    """Return lint config files that sit next to a manifest."""
    return [
        name
        for tool in LINT_TOOLS
        for name in tool.config_files
        if (manifest_path.parent / name).exists()
    ]


@click.command()
@click.argument(
    "paths",
    nargs=-1,
    type=click.Path(exists=True, path_type=Path),
)
@click.option(
    "--dry-run",
    is_flag=True,
    help="Show what would change without writing files.",
)
@click.option(
    "--indent",
    type=click.IntRange(min=0),
    default=2,
    show_default=True,
    help="Indentation of rewritten package.json files.",
)
@pass_context
def migrate(ctx: Context, paths: tuple[Path, ...], dry_run: bool, indent: int) -> None:
    """Migrate package.json files to @applint/spec.

    PATHS may be package.json files or directories to search. Defaults to the
    current directory.

    \b
    Examples:
        applint-codemod migrate                    # Search current directory
        applint-codemod migrate packages/web       # Search one package
        applint-codemod migrate --dry-run          # Preview changes
    """
    migrated = unchanged = failed = 0

    for path in find_manifests(paths or (ctx.root,)):
        if not is_manifest_path(path):
            echo_info(f"Skipped (not {MANIFEST_FILENAME}): {path}")
            continue

        try:
            manifest = parse_manifest(path.read_text(encoding="utf-8"))
        except (ManifestError, OSError, UnicodeDecodeError) as e:
            echo_error(f"{path}: {e}")
            failed += 1
            continue

        result = migrate_manifest(manifest)

        if ctx.verbose:
            if result.deprecated_dependency:
                echo_info(f"  {path}: replacing {result.deprecated_dependency}")
            config_files = _present_config_files(path)
            if config_files:
                echo_info(f"  {path}: lint config files: {', '.join(config_files)}")

        remaining = find_deprecated_dependencies(result.manifest)
        if remaining:
            echo_warning(
                f"{path}: still depends on {', '.join(remaining)}; run migrate again to replace"
            )

        if not result.changed:
            unchanged += 1
            echo_info(f"Unchanged: {path}")
            continue

        content = serialize_manifest(result.manifest, indent=indent)
        if ctx.verbose:
            echo_info(content.rstrip("\n"))

        if dry_run:
            migrated += 1
            echo_info(f"Would migrate: {path}")
            continue

        try:
            path.write_text(content, encoding="utf-8")
        except OSError as e:
            echo_error(f"{path}: {e}")
            failed += 1
            continue

        migrated += 1
        echo_success(f"Migrated: {path}")

    if dry_run:
        echo_warning("Dry run - no files written.")

    echo_info(f"\n{migrated} migrated, {unchanged} unchanged, {failed} failed")

    if failed:
        raise SystemExit(1)
