# SPDX-License-Identifier: MIT
"""CLI entry point for applint-codemod command."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import click


class Context:
    """CLI context object passed to commands."""

    def __init__(self) -> None:
        self.verbose: bool = False
        self.project_dir: Optional[Path] = None

    @property
    def root(self) -> Path:
        """Directory searched when no paths are given."""
        return self.project_dir or Path.cwd()


pass_context = click.make_pass_decorator(Context, ensure=True)


def echo_error(message: str) -> None:
    """Print an error message to stderr."""
    click.secho(f"Error: {message}", fg="red", err=True)


def echo_success(message: str) -> None:
    """Print a success message."""
    click.secho(message, fg="green")


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(message)


def echo_warning(message: str) -> None:
    """Print a warning message."""
    click.secho(f"Warning: {message}", fg="yellow", err=True)


@click.group()
@click.version_option(package_name="applint-codemod")
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable verbose output.",
)
@click.option(
    "-C",
    "--directory",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Change to directory before running command.",
)
@pass_context
def cli(ctx: Context, verbose: bool, directory: Optional[Path]) -> None:
    """Lint spec migration tool.

    Move package.json files from @iceworks/spec and @ice/spec to
    @applint/spec, with eslint and stylelint scripts and dependencies.

    \b
    Examples:
        applint-codemod migrate
        applint-codemod migrate packages/
        applint-codemod migrate --dry-run -v
    """
    ctx.verbose = verbose
    ctx.project_dir = directory


# Import and register commands
from .commands import migrate

cli.add_command(migrate.migrate)


def main() -> None:
    """Main entry point for the CLI."""
    try:
        cli()
    except Exception as e:
        echo_error(f"Unexpected error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
