"""
Serializable dependency tree model handed to downstream consumers.

Field names on the wire are camelCase (groupId, pomFile, ...) and fixed for
interoperability; Python code uses the snake_case attribute names. Collections are
tuples, so a built model cannot be changed in place.
"""

from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _TreeModelBase(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize with wire field names, dropping absent optional fields."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def to_json(self, indent: Optional[int] = None) -> str:
        return self.model_dump_json(by_alias=True, exclude_none=True, indent=indent)


class Dependency(_TreeModelBase):
    """One node of a configuration's dependency tree."""
    group_id: str = ""
    artifact_id: str = ""
    version: str = ""
    classifier: str = ""
    extension: str = ""
    dependencies: Tuple["Dependency", ...] = ()
    error: Optional[str] = None
    warning: Optional[str] = None
    pom_file: Optional[str] = None
    local_path: Optional[str] = None

    @property
    def coordinates(self) -> str:
        """Get group:artifact:version coordinates."""
        return f"{self.group_id}:{self.artifact_id}:{self.version}"

    def iter_tree(self):
        """Yield this node and all of its descendants, depth-first."""
        yield self
        for dependency in self.dependencies:
            yield from dependency.iter_tree()


class Configuration(_TreeModelBase):
    name: str
    dependencies: Tuple[Dependency, ...] = ()


class TreeModel(_TreeModelBase):
    """The dependency tree model of one project."""
    group: str
    name: str
    version: str
    configurations: Tuple[Configuration, ...] = ()
    repositories: Tuple[str, ...] = ()
    errors: Tuple[str, ...] = ()
    warnings: Tuple[str, ...] = ()

    @classmethod
    def from_json(cls, payload: str) -> "TreeModel":
        """Load a model from its JSON representation."""
        return cls.model_validate_json(payload)


Dependency.model_rebuild()
