"""Configuration data models"""

import re
from dataclasses import dataclass, field
from typing import Dict, Any, Pattern

from ..api.exceptions import ConfigError
from ..constants import (
    ComponentOption,
    ResidualPolicy,
    DEFAULT_TEST_TYPE,
    DEFAULT_TEST_NAME_PATTERN,
    DEFAULT_TEST_STRIP_PATTERN,
    DEFAULT_SIMILARITY_THRESHOLD,
    MANIFEST_ROOT_TAG,
    MANIFEST_NAMESPACE,
    MANIFEST_INDENT,
)


@dataclass
class PairingConfig:
    """How test components are recognized and paired"""

    test_type: str = DEFAULT_TEST_TYPE
    test_name_pattern: str = DEFAULT_TEST_NAME_PATTERN
    test_strip_pattern: str = DEFAULT_TEST_STRIP_PATTERN
    similarity_threshold: int = DEFAULT_SIMILARITY_THRESHOLD

    def __post_init__(self):
        """Validate pairing configuration"""
        for attr in ("test_name_pattern", "test_strip_pattern"):
            try:
                re.compile(getattr(self, attr), re.IGNORECASE)
            except re.error as e:
                raise ConfigError(f"Invalid {attr} '{getattr(self, attr)}': {e}")

        if not 0 <= int(self.similarity_threshold) <= 100:
            raise ConfigError(
                f"similarity_threshold must be between 0 and 100, got {self.similarity_threshold}"
            )
        self.similarity_threshold = int(self.similarity_threshold)

    @property
    def name_regex(self) -> Pattern:
        return re.compile(self.test_name_pattern, re.IGNORECASE)

    @property
    def strip_regex(self) -> Pattern:
        return re.compile(self.test_strip_pattern, re.IGNORECASE)

    def is_test_name(self, name: str) -> bool:
        """Check if a name looks like a test artifact"""
        return bool(self.name_regex.search(name or ""))

    def is_test(self, component_type: str, name: str) -> bool:
        """Check if a component is a test of the test-bearing type"""
        return component_type == self.test_type and self.is_test_name(name)

    def is_subject(self, component_type: str, name: str) -> bool:
        """Check if a component can be validated by a test"""
        return component_type == self.test_type and not self.is_test_name(name)

    def subject_name(self, test_name: str) -> str:
        """Strip the test token from a test name"""
        return self.strip_regex.sub("", test_name, count=1)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "test_type": self.test_type,
            "test_name_pattern": self.test_name_pattern,
            "test_strip_pattern": self.test_strip_pattern,
            "similarity_threshold": self.similarity_threshold
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'PairingConfig':
        """Create from dictionary"""
        return cls(
            test_type=data.get("test_type", DEFAULT_TEST_TYPE),
            test_name_pattern=data.get("test_name_pattern", DEFAULT_TEST_NAME_PATTERN),
            test_strip_pattern=data.get("test_strip_pattern", DEFAULT_TEST_STRIP_PATTERN),
            similarity_threshold=data.get("similarity_threshold", DEFAULT_SIMILARITY_THRESHOLD)
        )


@dataclass
class ManifestConfig:
    """Manifest rendering options"""

    root_tag: str = MANIFEST_ROOT_TAG
    namespace: str = MANIFEST_NAMESPACE
    indent: str = MANIFEST_INDENT
    xml_declaration: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "root_tag": self.root_tag,
            "namespace": self.namespace,
            "indent": self.indent,
            "xml_declaration": self.xml_declaration
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ManifestConfig':
        """Create from dictionary"""
        indent = data.get("indent", MANIFEST_INDENT)
        if isinstance(indent, int):
            indent = " " * indent
        return cls(
            root_tag=data.get("root_tag", MANIFEST_ROOT_TAG),
            namespace=data.get("namespace", MANIFEST_NAMESPACE),
            indent=indent,
            xml_declaration=bool(data.get("xml_declaration", False))
        )


@dataclass
class PlannerConfig:
    """Complete planner configuration"""

    version: str = "1.0"
    pairing: PairingConfig = field(default_factory=PairingConfig)
    manifest: ManifestConfig = field(default_factory=ManifestConfig)
    residual_policy: ResidualPolicy = ResidualPolicy.REPORT
    component_option: ComponentOption = ComponentOption.ALL

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'PlannerConfig':
        """Create from dictionary

        Pairing keys may be given flat at the top level or under ``pairing``.
        """
        data = data or {}
        pairing_data = dict(data.get("pairing", {}))
        for key in ("test_type", "test_name_pattern", "test_strip_pattern", "similarity_threshold"):
            if key in data:
                pairing_data.setdefault(key, data[key])

        try:
            residual_policy = ResidualPolicy(data.get("residual_policy", ResidualPolicy.REPORT.value))
        except ValueError:
            raise ConfigError(
                f"Invalid residual_policy '{data.get('residual_policy')}'. "
                f"Expected one of: {', '.join(p.value for p in ResidualPolicy)}"
            )

        try:
            component_option = ComponentOption(data.get("component_option", ComponentOption.ALL.value))
        except ValueError:
            raise ConfigError(
                f"Invalid component_option '{data.get('component_option')}'. "
                f"Expected one of: {', '.join(o.value for o in ComponentOption)}"
            )

        return cls(
            version=str(data.get("version", "1.0")),
            pairing=PairingConfig.from_dict(pairing_data),
            manifest=ManifestConfig.from_dict(data.get("manifest", {})),
            residual_policy=residual_policy,
            component_option=component_option
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "version": self.version,
            "pairing": self.pairing.to_dict(),
            "manifest": self.manifest.to_dict(),
            "residual_policy": self.residual_policy.value,
            "component_option": self.component_option.value
        }
