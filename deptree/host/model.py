"""
Boundary types for the host build tool's object model.

The host's resolution engine is consumed, not reimplemented: a bridge to a real
build tool translates its objects into these frozen dataclasses. Each family
(component identifiers, dependency results, artifact results, artifact owners,
repositories) is a closed set of variants that the processing layer handles
exhaustively.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional, Protocol, Tuple, Union

from ..core.exceptions import ArtifactSetResolutionError


# ---------- Component identifiers ----------

@dataclass(frozen=True)
class ModuleComponentIdentifier:
    """An external module coordinate (group/module/version)."""
    group: str
    module: str
    version: str

    @property
    def display_name(self) -> str:
        return f"{self.group}:{self.module}:{self.version}"


@dataclass(frozen=True)
class ProjectComponentIdentifier:
    """A project inside the current workspace, addressed by its path (":sub")."""
    project_path: str

    @property
    def display_name(self) -> str:
        return f"project {self.project_path}"


@dataclass(frozen=True)
class UnknownComponentIdentifier:
    """An identifier kind this analyzer does not know about."""
    kind: str
    display_name: str


ComponentIdentifier = Union[
    ModuleComponentIdentifier, ProjectComponentIdentifier, UnknownComponentIdentifier
]


@dataclass(frozen=True)
class ComponentSelector:
    """The requested (or attempted) side of a dependency edge."""
    display_name: str


# ---------- Dependency results ----------

@dataclass(eq=False)
class ResolvedComponent:
    """
    The component selected for an edge, with its own outgoing edges.

    Components compare by identity: host graphs may be cyclic, so an edge can
    lead back to a component that is already being visited.
    """
    id: ComponentIdentifier
    dependencies: List["DependencyResult"] = field(default_factory=list)


@dataclass(frozen=True)
class ResolvedDependencyResult:
    requested: ComponentSelector
    selected: ResolvedComponent


@dataclass(frozen=True)
class UnresolvedDependencyResult:
    requested: ComponentSelector
    attempted: ComponentSelector
    failure: BaseException


@dataclass(frozen=True)
class UnknownDependencyResult:
    """A result shape this analyzer does not know about."""
    kind: str
    requested: ComponentSelector


DependencyResult = Union[
    ResolvedDependencyResult, UnresolvedDependencyResult, UnknownDependencyResult
]


# ---------- POM lookup results ----------

@dataclass(frozen=True)
class ResolvedArtifactResult:
    file: Path


@dataclass(frozen=True)
class UnresolvedArtifactResult:
    failure: BaseException


@dataclass(frozen=True)
class UnknownArtifactResult:
    kind: str


ArtifactResult = Union[ResolvedArtifactResult, UnresolvedArtifactResult, UnknownArtifactResult]


class PomResolver(Protocol):
    """Host facility that looks up the POM of an external module."""

    def resolve_pom(self, identifier: ModuleComponentIdentifier) -> Optional[ArtifactResult]:
        """Return the first POM artifact result, or None if nothing was returned."""
        ...


# ---------- Resolved artifacts ----------

@dataclass(frozen=True)
class ModuleVersionIdentifier:
    """Artifact owner shape of newer hosts: the version sits on the owner itself."""
    group: str
    name: str
    version: str


@dataclass(frozen=True)
class ModuleIdentifier:
    group: str
    name: str
    version: str


@dataclass(frozen=True)
class ResolvedModuleVersion:
    """Artifact owner shape of older hosts: the version sits on the nested id."""
    id: ModuleIdentifier


@dataclass(frozen=True)
class ResolvedArtifact:
    """An entry of a configuration's eagerly-resolved artifact set."""
    owner: object
    classifier: Optional[str] = None
    extension: Optional[str] = None


# ---------- Repositories ----------

class RepositoryKind(str, Enum):
    """Implementation kinds of declared repositories."""
    MAVEN = "maven"
    FLAT_DIR = "flat_dir"
    IVY = "ivy"
    OTHER = "other"


@dataclass(frozen=True)
class Repository:
    kind: RepositoryKind
    url: Optional[str] = None
    dirs: Tuple[str, ...] = ()
    implementation: str = ""


# ---------- Projects and configurations ----------

@dataclass
class HostConfiguration:
    """
    A named configuration as exposed by the host.

    ``dependencies`` are the root edges of the configuration's resolution
    result. ``can_be_resolved`` is None when the host does not expose the flag.
    """
    name: str
    dependencies: List[DependencyResult] = field(default_factory=list)
    artifacts: List[ResolvedArtifact] = field(default_factory=list)
    can_be_resolved: Optional[bool] = None
    artifact_failure: Optional[BaseException] = None

    def resolution_result(self) -> List[DependencyResult]:
        """Get the root edges of the resolution result."""
        return list(self.dependencies)

    def resolve_artifacts(self) -> List[ResolvedArtifact]:
        """Get the eagerly-resolved artifact set, raising if the host cannot provide it."""
        if self.artifact_failure is not None:
            raise ArtifactSetResolutionError(
                self.name, f"Could not resolve all artifacts for configuration '{self.name}'."
            ) from self.artifact_failure
        return list(self.artifacts)


@dataclass
class HostProject:
    """A project of the host build, with its sub-projects keyed by path."""
    name: str
    group: str = ""
    version: str = "unspecified"
    project_dir: Path = Path(".")
    path: str = ":"
    host_version: str = ""
    configurations: List[HostConfiguration] = field(default_factory=list)
    repositories: List[Repository] = field(default_factory=list)
    subprojects: List["HostProject"] = field(default_factory=list)
    parent: Optional["HostProject"] = field(default=None, repr=False, compare=False)

    def __post_init__(self):
        for subproject in self.subprojects:
            subproject.parent = self

    @property
    def root_project(self) -> "HostProject":
        project = self
        while project.parent is not None:
            project = project.parent
        return project

    def find_project(self, path: str) -> Optional["HostProject"]:
        """Find a project of the whole build by its path, starting from the root project."""
        return _find_by_path(self.root_project, path)


def _find_by_path(project: HostProject, path: str) -> Optional[HostProject]:
    if project.path == path:
        return project
    for subproject in project.subprojects:
        found = _find_by_path(subproject, path)
        if found is not None:
            return found
    return None
