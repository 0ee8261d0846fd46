"""Loading of edge lists and type catalogs"""

import json
import logging
from pathlib import Path
from typing import Any, List, Optional

import yaml

from ..api.exceptions import InputError, ValidationError
from ..constants import ErrorCode
from ..core.validation_engine import ValidationEngine
from ..models.catalog import ComponentCatalog
from ..models.component import Edge
from ..models.config import PlannerConfig


class InputService:
    """Read collaborator output into core models

    Edge lists are JSON: either a bare array of records or an object with a
    ``records`` array, the shape the dependency query dump uses. Catalogs
    are YAML or JSON documents with ``version``, ``types`` and ``members``.
    """

    def __init__(self,
                 config: Optional[PlannerConfig] = None,
                 validation_engine: Optional[ValidationEngine] = None):
        self.config = config or PlannerConfig()
        self.validation_engine = validation_engine or ValidationEngine()
        self.warnings: List[str] = []
        self.logger = logging.getLogger(self.__class__.__name__)

    def load_edges(self, path: Path) -> List[Edge]:
        """
        Load dependency edges from a JSON file

        Args:
            path: Edge list file

        Returns:
            List of edges in file order

        Raises:
            InputError: If the file is missing or not JSON
            ValidationError: If the records do not match the edge schema
        """
        path = Path(path)
        self._check_path(path)

        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise InputError(f"Invalid JSON in {path}: {e}")

        return self.parse_edges(data, source=str(path))

    def parse_edges(self, data: Any, source: str = "<edges>") -> List[Edge]:
        """Validate and normalize raw edge records"""
        if isinstance(data, dict) and "records" in data:
            data = data["records"]

        result = self.validation_engine.validate_edges(data)
        if not result.is_valid:
            raise ValidationError(f"Edge list {source} failed validation", result.errors)

        edges = [Edge.from_record(record) for record in data]
        self.logger.info(f"Loaded {len(edges)} edge(s) from {source}")
        return edges

    def load_catalog(self, path: Path) -> ComponentCatalog:
        """
        Load a type catalog from a YAML or JSON file

        Args:
            path: Catalog file

        Returns:
            ComponentCatalog

        Raises:
            InputError: If the file is missing or unparsable
            ValidationError: If the document does not match the catalog schema
        """
        path = Path(path)
        self._check_path(path)

        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise InputError(f"Invalid catalog document {path}: {e}")

        return self.parse_catalog(data, source=str(path))

    def parse_catalog(self, data: Any, source: str = "<catalog>") -> ComponentCatalog:
        """
        Build a catalog from a parsed document

        Members of undeclared types are skipped with a warning so a manifest
        never names a type the catalog does not know.
        """
        result = self.validation_engine.validate_catalog(data)
        if not result.is_valid:
            raise ValidationError(f"Catalog {source} failed validation", result.errors)
        for warning in result.warnings:
            self._warn(warning)

        catalog = ComponentCatalog.from_dict(data, self.config.component_option)
        self.warnings.extend(catalog.warnings)

        self.logger.info(
            f"Loaded catalog {catalog.version} from {source}: "
            f"{catalog.type_count} type(s), {catalog.member_count} member(s)"
        )
        return catalog

    def _check_path(self, path: Path) -> None:
        result = self.validation_engine.validate_path(path)
        if not result.is_valid:
            raise InputError("; ".join(result.errors), ErrorCode.INPUT_NOT_FOUND)

    def _warn(self, message: str) -> None:
        self.warnings.append(message)
        self.logger.warning(message)
