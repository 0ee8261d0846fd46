"""Package manifest assembly and rendering"""

import logging
from typing import List, Mapping, Optional

from ..constants import (
    UNASSIGNED_STAGE,
    MANIFEST_TYPE_TAG,
    MANIFEST_MEMBER_TAG,
    MANIFEST_NAME_TAG,
    MANIFEST_VERSION_TAG,
    MANIFEST_WILDCARD,
)
from ..models.catalog import CatalogMember, ComponentCatalog, ComponentType
from ..models.config import ManifestConfig, PairingConfig
from ..models.manifest import ManifestNode, ManifestResult
from ..utils.sorting import ordinal_key

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'


class ManifestBuilder:
    """Build package manifests from the type catalog

    The unfiltered manifest lists every type; a type without members gets
    a ``*`` member so the whole type is deployed. A group manifest lists
    only the members staged in that group and leaves out empty types.
    """

    def __init__(self,
                 config: Optional[ManifestConfig] = None,
                 pairing: Optional[PairingConfig] = None):
        self.config = config or ManifestConfig()
        self.pairing = pairing or PairingConfig()
        self.logger = logging.getLogger(self.__class__.__name__)

    def build(self,
              catalog: ComponentCatalog,
              assignments: Optional[Mapping[str, int]] = None,
              group: Optional[int] = None) -> ManifestResult:
        """
        Build one manifest

        Args:
            catalog: Component type catalog with resolved members
            assignments: Component id -> stage index; anything missing is
                treated as unassigned (-1)
            group: Stage index to filter on, -1 for unassigned members,
                None for the unfiltered manifest

        Returns:
            ManifestResult with member count, test names and rendered text
        """
        assignments = assignments or {}
        root = ManifestNode(
            tag=self.config.root_tag,
            attributes=[("xmlns", self.config.namespace)]
        )
        test_names: List[str] = []
        count = 0

        for component_type in sorted(catalog.types.values(), key=lambda t: ordinal_key(t.name)):
            members = self._collect_members(catalog, component_type, assignments, group)

            if members:
                node = ManifestNode(tag=MANIFEST_TYPE_TAG)
                for member in members:
                    if self.pairing.is_test(member.type, member.name) and member.name not in test_names:
                        test_names.append(member.name)
                    node.add_child(MANIFEST_MEMBER_TAG, member.name)
                node.add_child(MANIFEST_NAME_TAG, component_type.name)
                root.children.append(node)
                count += len(members)
            elif group is None:
                node = ManifestNode(tag=MANIFEST_TYPE_TAG)
                node.add_child(MANIFEST_MEMBER_TAG, MANIFEST_WILDCARD)
                node.add_child(MANIFEST_NAME_TAG, component_type.name)
                root.children.append(node)

        root.add_child(MANIFEST_VERSION_TAG, catalog.version)

        return ManifestResult(
            group=group,
            member_count=count,
            test_names=test_names,
            text=self.render(root),
            root=root
        )

    def render(self, root: ManifestNode) -> str:
        """Render a manifest tree to text ending with a newline"""
        text = root.render(self.config.indent)
        if self.config.xml_declaration:
            text = f"{XML_DECLARATION}\n{text}"
        return text + "\n"

    def _collect_members(self,
                         catalog: ComponentCatalog,
                         component_type: ComponentType,
                         assignments: Mapping[str, int],
                         group: Optional[int]) -> List[CatalogMember]:
        """Resolve, filter and sort the members of one type"""
        members = []
        for key in component_type.member_keys:
            member = catalog.get_member(key)
            if member is None:
                self.logger.warning(f"Skipping unknown member '{key}' of type {component_type.name}")
                continue

            if group is not None:
                stage = assignments.get(member.id, UNASSIGNED_STAGE) if member.id else UNASSIGNED_STAGE
                if stage != group:
                    continue

            members.append(member)

        return sorted(members, key=lambda m: ordinal_key(m.name))
