"""
Adapters over the "artifact owner" shapes of different host versions.

Hosts expose the module that owns a resolved artifact through structurally
different objects. Each known shape gets one adapter; matching code asks
``select_owner_adapter`` for the adapter of an owner instead of inspecting the
owner itself.
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from .model import ModuleComponentIdentifier, ModuleVersionIdentifier, ResolvedModuleVersion


class ArtifactOwnerAdapter(ABC):
    """Reads (group, name, version) from one owner shape."""

    @abstractmethod
    def supports(self, owner: object) -> bool:
        ...

    @abstractmethod
    def coordinates(self, owner: object) -> Tuple[str, str, str]:
        ...

    def matches(self, owner: object, identifier: ModuleComponentIdentifier) -> bool:
        """Check whether the owner is the module named by the identifier."""
        group, name, version = self.coordinates(owner)
        return (
            group == identifier.group
            and name == identifier.module
            and version == identifier.version
        )


class ModuleVersionIdentifierAdapter(ArtifactOwnerAdapter):
    """Owners carrying the version directly."""

    def supports(self, owner: object) -> bool:
        return isinstance(owner, ModuleVersionIdentifier)

    def coordinates(self, owner: ModuleVersionIdentifier) -> Tuple[str, str, str]:
        return owner.group, owner.name, owner.version


class ResolvedModuleVersionAdapter(ArtifactOwnerAdapter):
    """Owners wrapping a module id that carries the version."""

    def supports(self, owner: object) -> bool:
        return isinstance(owner, ResolvedModuleVersion)

    def coordinates(self, owner: ResolvedModuleVersion) -> Tuple[str, str, str]:
        return owner.id.group, owner.id.name, owner.id.version


OWNER_ADAPTERS: List[ArtifactOwnerAdapter] = [
    ModuleVersionIdentifierAdapter(),
    ResolvedModuleVersionAdapter(),
]


def select_owner_adapter(owner: object) -> Optional[ArtifactOwnerAdapter]:
    """Pick the adapter that understands the owner, or None for an unrecognized shape."""
    for adapter in OWNER_ADAPTERS:
        if adapter.supports(owner):
            return adapter
    return None


def owner_type_name(owner: object) -> str:
    """Fully qualified type name of an owner, for diagnostics."""
    owner_type = type(owner)
    return f"{owner_type.__module__}.{owner_type.__qualname__}"
