# deploy_planner/models/manifest.py
"""Manifest models"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Any, Tuple
from xml.sax.saxutils import escape, quoteattr

from ..constants import MANIFEST_INDENT, UNASSIGNED_STAGE


@dataclass
class ManifestNode:
    """Node of a manifest document tree"""
    tag: str
    attributes: List[Tuple[str, str]] = field(default_factory=list)
    children: List['ManifestNode'] = field(default_factory=list)
    value: Optional[str] = None

    def add_child(self, tag: str, value: Optional[str] = None) -> 'ManifestNode':
        """Append a child node and return it"""
        child = ManifestNode(tag=tag, value=value)
        self.children.append(child)
        return child

    def render(self, indent: str = MANIFEST_INDENT, level: int = 0) -> str:
        """Render the node and its subtree

        Nodes with children open and close on their own lines with the
        children indented one level deeper; leaf nodes render inline.
        """
        prefix = indent * level
        attrs = "".join(f" {key}={quoteattr(str(val))}" for key, val in self.attributes)
        start = f"<{self.tag}{attrs}>"
        end = f"</{self.tag}>"

        if self.children:
            lines = [prefix + start]
            for child in self.children:
                lines.append(child.render(indent, level + 1))
            lines.append(prefix + end)
            return "\n".join(lines)

        text = escape(str(self.value)) if self.value is not None else ""
        return f"{prefix}{start}{text}{end}"


@dataclass
class ManifestResult:
    """Rendered manifest with operator-facing counts"""
    group: Optional[int]
    member_count: int
    test_names: List[str]
    text: str
    root: Optional[ManifestNode] = None

    @property
    def label(self) -> str:
        """Get label: 'all' or the 1-based group file index"""
        if self.group is None:
            return "all"
        return f"group-{self.group + 1}"

    @property
    def is_unassigned(self) -> bool:
        return self.group == UNASSIGNED_STAGE

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            'group': self.group,
            'label': self.label,
            'member_count': self.member_count,
            'test_names': list(self.test_names)
        }
