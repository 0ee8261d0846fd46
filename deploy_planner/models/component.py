"""Component and dependency edge models"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Any

from ..constants import EDGE_RECORD_FIELDS


@dataclass
class Component:
    """A named artifact taking part in dependency edges

    Identity is ``id``. ``dependencies`` holds the ids this component still
    needs deployed first; the stager empties it as dependencies are placed.
    """

    id: str
    name: str
    type: str
    dependencies: List[str] = field(default_factory=list)

    def add_dependency(self, ref_id: str) -> bool:
        """Add a dependency, returning False if it was already present"""
        if ref_id in self.dependencies:
            return False
        self.dependencies.append(ref_id)
        return True

    def remove_dependencies(self, ref_ids) -> int:
        """Remove the given dependencies, returning how many were removed"""
        drop = set(ref_ids)
        kept = [dep for dep in self.dependencies if dep not in drop]
        removed = len(self.dependencies) - len(kept)
        self.dependencies = kept
        return removed

    @property
    def key(self) -> str:
        """Get display key (type:name)"""
        return f"{self.type}:{self.name}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "id": self.id,
            "name": self.name,
            "type": self.type,
        }


@dataclass(frozen=True)
class Edge:
    """Input fact: component ``id`` depends on component ``ref_id``"""

    id: Optional[str]
    name: Optional[str]
    type: Optional[str]
    ref_id: Optional[str]
    ref_name: Optional[str]
    ref_type: Optional[str]

    @property
    def is_self_reference(self) -> bool:
        """Check if the edge points back at its own component"""
        return self.id == self.ref_id

    @property
    def is_complete(self) -> bool:
        """Check if both endpoint ids are present"""
        return bool(self.id) and bool(self.ref_id)

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> 'Edge':
        """Create from a dependency record

        Accepts both the remote query field names (``MetadataComponentId``
        and friends) and plain snake-case keys.
        """
        values = {}
        for attr, remote_name in EDGE_RECORD_FIELDS.items():
            value = record.get(remote_name, record.get(attr))
            values[attr] = str(value) if value not in (None, "") else None
        return cls(**values)
