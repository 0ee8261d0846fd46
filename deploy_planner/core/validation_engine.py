# deploy_planner/core/validation_engine.py
"""Validation engine for planner input documents"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Dict, Any

import jsonschema

from ..utils.version_utils import is_valid_api_version

_NULLABLE_STRING = {"type": ["string", "integer", "null"]}

EDGE_RECORD_SCHEMA = {
    "type": "object",
    "properties": {
        "MetadataComponentId": _NULLABLE_STRING,
        "MetadataComponentName": _NULLABLE_STRING,
        "MetadataComponentType": _NULLABLE_STRING,
        "RefMetadataComponentId": _NULLABLE_STRING,
        "RefMetadataComponentName": _NULLABLE_STRING,
        "RefMetadataComponentType": _NULLABLE_STRING,
        "id": _NULLABLE_STRING,
        "name": _NULLABLE_STRING,
        "type": _NULLABLE_STRING,
        "ref_id": _NULLABLE_STRING,
        "ref_name": _NULLABLE_STRING,
        "ref_type": _NULLABLE_STRING,
    },
}

EDGE_LIST_SCHEMA = {
    "type": "array",
    "items": EDGE_RECORD_SCHEMA,
}

CATALOG_SCHEMA = {
    "type": "object",
    "required": ["version", "types"],
    "properties": {
        "version": {"type": ["string", "number"]},
        "component_option": {
            "type": "string",
            "enum": ["all", "none", "unmanaged", "wildcard_only"],
        },
        "types": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["name"],
                "properties": {
                    "name": {"type": "string", "minLength": 1},
                    "parent_type": {"type": ["string", "null"]},
                    "suffix": {"type": ["string", "null"]},
                    "directory_name": {"type": ["string", "null"]},
                    "in_folder": {"type": "boolean"},
                    "meta_file": {"type": "boolean"},
                    "child_types": {"type": "array", "items": {"type": "string"}},
                    "members": {"type": "array", "items": {"type": "string"}},
                },
            },
        },
        "members": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["name", "type"],
                "properties": {
                    "key": {"type": "string"},
                    "name": {"type": "string", "minLength": 1},
                    "type": {"type": "string", "minLength": 1},
                    "id": _NULLABLE_STRING,
                    "folder": {"type": ["string", "null"]},
                    "namespace_prefix": {"type": ["string", "null"]},
                    "manageable_state": {"type": ["string", "null"]},
                },
            },
        },
    },
}


@dataclass
class ValidationResult:
    """Validation result container"""
    is_valid: bool = True
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    def add_error(self, message: str) -> None:
        """Add error message"""
        self.errors.append(message)
        self.is_valid = False

    def add_warning(self, message: str) -> None:
        """Add warning message"""
        self.warnings.append(message)


class ValidationEngine:
    """Validate input files and documents before planning"""

    def validate_path(self, path: Path) -> ValidationResult:
        """
        Validate an input file path

        Args:
            path: Path to validate

        Returns:
            ValidationResult
        """
        result = ValidationResult()

        if not path.exists():
            result.add_error(f"Path does not exist: {path}")
            return result

        if not path.is_file():
            result.add_error(f"Path is not a file: {path}")
        elif not os.access(path, os.R_OK):
            result.add_error(f"No read permission: {path}")
        elif path.stat().st_size == 0:
            result.add_error(f"File is empty: {path}")

        return result

    def validate_schema(self, document: Any, schema: Dict[str, Any]) -> ValidationResult:
        """
        Validate a document against a JSON schema

        All violations are collected, ordered by their location in the
        document.

        Args:
            document: Parsed document
            schema: JSON schema

        Returns:
            ValidationResult
        """
        result = ValidationResult()
        validator = jsonschema.Draft7Validator(schema)
        errors = sorted(validator.iter_errors(document), key=lambda e: [str(p) for p in e.absolute_path])
        for error in errors:
            location = "/".join(str(p) for p in error.absolute_path) or "<root>"
            result.add_error(f"{location}: {error.message}")
        return result

    def validate_edges(self, records: Any) -> ValidationResult:
        """Validate a dependency edge list"""
        return self.validate_schema(records, EDGE_LIST_SCHEMA)

    def validate_catalog(self, data: Any) -> ValidationResult:
        """Validate a catalog document

        An API version that is not MAJOR.MINOR is only a warning: the
        manifest still carries it verbatim.
        """
        result = self.validate_schema(data, CATALOG_SCHEMA)
        if result.is_valid and not is_valid_api_version(str(data["version"])):
            result.add_warning(
                f"Unusual catalog version '{data['version']}'. Expected MAJOR.MINOR (e.g. 59.0)"
            )
        return result
