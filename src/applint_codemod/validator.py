# SPDX-License-Identifier: MIT
"""Manifest parsing and validation.

This module turns package.json text into a manifest dictionary and checks the
fields the codemod rewrites, with structured error reporting.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

from jsonschema import Draft202012Validator, ValidationError

from .schema import MANIFEST_SCHEMA

Manifest = dict[str, Any]


class ManifestError(Exception):
    """Base exception for manifest-related errors."""

    pass


class ManifestParseError(ManifestError):
    """Raised when manifest text is not valid JSON."""

    pass


class ManifestValidationError(ManifestError):
    """Raised when a field the codemod touches has the wrong shape.

    Attributes:
        errors: List of validation errors with field paths and messages
    """

    def __init__(self, errors: list[ValidationErrorDetail]):
        self.errors = errors
        message = f"Manifest validation failed with {len(errors)} error(s)"
        if errors:
            message += f": [{errors[0].field}] {errors[0].message}"
        super().__init__(message)


@dataclass(frozen=True, slots=True)
class ValidationErrorDetail:
    """Details about a single validation error.

    Attributes:
        field: JSON path to the invalid field (e.g., "scripts" or "dependencies.eslint")
        message: Human-readable error message
        value: The invalid value that caused the error (if available)
    """

    field: str
    message: str
    value: Any = None


@dataclass
class ValidationResult:
    """Result of manifest validation.

    Attributes:
        valid: Whether the manifest is valid
        errors: List of validation errors (empty if valid)
    """

    valid: bool
    errors: list[ValidationErrorDetail] = field(default_factory=list)


_JSON_TYPE_NAMES = {
    dict: "object",
    list: "array",
    str: "string",
    int: "integer",
    float: "number",
    bool: "boolean",
    type(None): "null",
}


def _json_path_from_error(error: ValidationError) -> str:
    """Convert a jsonschema error path to a readable field path."""
    if not error.absolute_path:
        return "<root>"
    return ".".join(str(part) for part in error.absolute_path)


def _format_error_message(error: ValidationError) -> str:
    """Format a jsonschema error into a human-readable message."""
    if error.validator == "type":
        actual = _JSON_TYPE_NAMES.get(type(error.instance), type(error.instance).__name__)
        return f"Expected {error.validator_value}, got {actual}"
    return error.message


def validate_manifest(manifest: Any) -> ValidationResult:
    """Validate the dependency and script maps of a parsed manifest.

    Example:
        >>> validate_manifest({"scripts": {"lint": "eslint ./"}}).valid
        True
        >>> validate_manifest({"dependencies": []}).errors[0].field
        'dependencies'
    """
    validator = Draft202012Validator(MANIFEST_SCHEMA)
    errors = [
        ValidationErrorDetail(
            field=_json_path_from_error(error),
            message=_format_error_message(error),
            value=error.instance if error.absolute_path else None,
        )
        for error in validator.iter_errors(manifest)
    ]
    return ValidationResult(valid=not errors, errors=errors)


def validate_manifest_strict(manifest: Any) -> Manifest:
    """Validate a manifest and raise an exception if invalid.

    Returns:
        The manifest itself, for chaining

    Raises:
        ManifestValidationError: If the manifest is invalid
    """
    result = validate_manifest(manifest)
    if not result.valid:
        raise ManifestValidationError(result.errors)
    return manifest


def parse_manifest(source: str) -> Manifest:
    """Parse package.json text and validate the fields the codemod touches.

    Args:
        source: The manifest file content

    Returns:
        The parsed manifest

    Raises:
        ManifestParseError: If the text is not valid JSON
        ManifestValidationError: If the document is not an object, or a
            dependency or script map is malformed
    """
    try:
        manifest = json.loads(source)
    except json.JSONDecodeError as e:
        raise ManifestParseError(f"Invalid JSON syntax: {e}") from e

    return validate_manifest_strict(manifest)
