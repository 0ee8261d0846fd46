"""Component type catalog models"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Any

from ..constants import ComponentOption
from ..api.exceptions import UnknownTypeError


@dataclass
class CatalogMember:
    """A discovered component listed under a catalog type"""
    key: str
    name: str
    type: str
    id: Optional[str] = None
    folder: Optional[str] = None
    namespace_prefix: Optional[str] = None
    manageable_state: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'CatalogMember':
        """Create from dictionary"""
        return cls(
            key=data.get('key') or f"{data['type']}:{data['name']}",
            name=data['name'],
            type=data['type'],
            id=data.get('id'),
            folder=data.get('folder'),
            namespace_prefix=data.get('namespace_prefix'),
            manageable_state=data.get('manageable_state')
        )


@dataclass
class ComponentType:
    """Catalog entry describing one component type"""
    name: str
    parent_type: Optional[str] = None
    suffix: Optional[str] = None
    directory_name: Optional[str] = None
    in_folder: bool = False
    has_meta_file: bool = False
    child_type_names: List[str] = field(default_factory=list)
    member_keys: List[str] = field(default_factory=list)

    @property
    def member_count(self) -> int:
        """Get number of member keys"""
        return len(self.member_keys)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ComponentType':
        """Create from dictionary"""
        return cls(
            name=data['name'],
            parent_type=data.get('parent_type'),
            suffix=data.get('suffix'),
            directory_name=data.get('directory_name'),
            in_folder=bool(data.get('in_folder', False)),
            has_meta_file=bool(data.get('meta_file', False)),
            child_type_names=list(data.get('child_types') or []),
            member_keys=list(data.get('members') or [])
        )


class ComponentCatalog:
    """Registry of known component types and their discovered members

    The catalog is the collaborator boundary: everything the manifest
    builder needs is normalized into ``ComponentType`` and ``CatalogMember``
    records here, so the core never looks at raw remote payloads.
    """

    def __init__(self,
                 version: str,
                 component_option: ComponentOption = ComponentOption.ALL):
        self.version = version
        self.component_option = component_option
        self.types: Dict[str, ComponentType] = {}
        self.members: Dict[str, CatalogMember] = {}
        self.warnings: List[str] = []

    def add_type(self, component_type: ComponentType) -> ComponentType:
        """Register a type and any child types it declares

        Child types are registered with ``parent_type`` pointing back at the
        declaring type unless they were already declared on their own.
        """
        for child_name in component_type.child_type_names:
            if child_name not in self.types:
                self.types[child_name] = ComponentType(
                    name=child_name,
                    parent_type=component_type.name
                )

        if self.component_option == ComponentOption.WILDCARD_ONLY:
            component_type.member_keys = []

        existing = self.types.get(component_type.name)
        if existing is not None:
            # Keep members gathered so far
            for key in existing.member_keys:
                if key not in component_type.member_keys:
                    component_type.member_keys.append(key)
            if component_type.parent_type is None:
                component_type.parent_type = existing.parent_type

        self.types[component_type.name] = component_type
        return component_type

    def get_type(self, name: str) -> Optional[ComponentType]:
        """Get type by name"""
        return self.types.get(name)

    def includes(self, member: CatalogMember) -> bool:
        """Check if a member passes the component option filter"""
        option = self.component_option
        if option == ComponentOption.WILDCARD_ONLY:
            return False
        if option == ComponentOption.NONE:
            return not member.namespace_prefix
        if option == ComponentOption.UNMANAGED:
            return member.manageable_state in (None, "", "unmanaged")
        return True

    def add_member(self, type_name: str, member: CatalogMember) -> bool:
        """Record a member under a declared type

        Returns:
            True if the member was recorded, False if filtered out or
            already present

        Raises:
            UnknownTypeError: If the type is not declared
        """
        component_type = self.types.get(type_name)
        if component_type is None:
            raise UnknownTypeError(type_name, member.key)

        if not self.includes(member):
            return False

        self.members[member.key] = member
        if member.key in component_type.member_keys:
            return False
        component_type.member_keys.append(member.key)
        return True

    def get_member(self, key: str) -> Optional[CatalogMember]:
        """Get member by key"""
        return self.members.get(key)

    @property
    def type_count(self) -> int:
        return len(self.types)

    @property
    def member_count(self) -> int:
        return len(self.members)

    @classmethod
    def from_dict(cls,
                  data: Dict[str, Any],
                  component_option: Optional[ComponentOption] = None) -> 'ComponentCatalog':
        """Create from dictionary

        Members listed with a ``type`` are attached to that type. A member of
        an undeclared type is skipped with a warning, recorded in
        ``warnings``, so a manifest never names a type the catalog does not
        know.

        Args:
            data: Catalog document with ``version``, ``types`` and ``members``
            component_option: Used when the document sets no
                ``component_option`` of its own (defaults to ``all``)

        Returns:
            ComponentCatalog
        """
        if 'component_option' in data:
            component_option = ComponentOption(data['component_option'])
        catalog = cls(version=str(data['version']),
                      component_option=component_option or ComponentOption.ALL)
        logger = logging.getLogger(cls.__name__)

        for type_data in data.get('types', []):
            catalog.add_type(ComponentType.from_dict(type_data))

        for member_data in data.get('members', []):
            member = CatalogMember.from_dict(member_data)
            try:
                catalog.add_member(member.type, member)
            except UnknownTypeError as e:
                message = f"{e}; member skipped"
                catalog.warnings.append(message)
                logger.warning(message)

        return catalog
