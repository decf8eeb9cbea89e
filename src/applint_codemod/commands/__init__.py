# SPDX-License-Identifier: MIT
"""CLI command implementations."""

from . import migrate

__all__ = ["migrate"]
