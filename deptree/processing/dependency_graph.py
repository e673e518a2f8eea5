"""
Conversion of a host resolution graph into dependency tree nodes.

The walk is depth-first. Cycles are broken per descent path: an edge whose
requested name already appears among its ancestors is left out, while the same
package reached through unrelated branches yields one node per occurrence.
"""

from typing import Iterable, List, Optional, Sequence, Tuple

from ..core.causes import format_causes
from ..core.logging_config import get_logger
from ..host.model import (
    DependencyResult,
    HostProject,
    ModuleComponentIdentifier,
    ProjectComponentIdentifier,
    ResolvedArtifact,
    ResolvedDependencyResult,
    UnknownComponentIdentifier,
    UnknownDependencyResult,
    UnresolvedDependencyResult,
)
from ..models.tree_model import Dependency
from .artifact_metadata import ArtifactMetadataResolver
from .identifier_parser import parse_display_name

logger = get_logger("dependency_graph")


def dependency_from_display_name(
    display_name: str,
    dependencies: Sequence[Dependency] = (),
    error: Optional[str] = None,
    warning: Optional[str] = None,
) -> Dependency:
    """Build a node from a free-form display name."""
    parsed = parse_display_name(display_name)
    return Dependency(
        group_id=parsed.group_id,
        artifact_id=parsed.artifact_id,
        version=parsed.version,
        dependencies=list(dependencies),
        error=error,
        warning=warning,
    )


class DependencyGraphResolver:
    """Turns dependency results of one project into tree nodes."""

    def __init__(self, project: HostProject, metadata_resolver: ArtifactMetadataResolver):
        self.project = project
        self.metadata_resolver = metadata_resolver

    def resolve(
        self,
        result: DependencyResult,
        artifacts: Sequence[ResolvedArtifact],
        ancestors: Tuple[str, ...] = (),
    ) -> Optional[Dependency]:
        """
        Convert one edge and everything below it.

        Returns None when the edge closes a cycle on the current descent path;
        callers leave such edges out of the child list.
        """
        requested = result.requested.display_name
        if requested in ancestors:
            logger.debug(f"Skipping circular dependency on '{requested}'", path=list(ancestors))
            return None

        if isinstance(result, ResolvedDependencyResult):
            children = self.resolve_all(result.selected.dependencies, artifacts, ancestors + (requested,))
            return self._resolved(result, children, artifacts)

        if isinstance(result, UnresolvedDependencyResult):
            return dependency_from_display_name(
                result.attempted.display_name,
                error=f"Unresolved: {format_causes(result.failure)}",
            )

        if isinstance(result, UnknownDependencyResult):
            kind = result.kind
        else:
            kind = type(result).__name__
        return dependency_from_display_name(requested, error=f"Unknown result type: {kind}")

    def resolve_all(
        self,
        results: Iterable[DependencyResult],
        artifacts: Sequence[ResolvedArtifact],
        ancestors: Tuple[str, ...] = (),
    ) -> List[Dependency]:
        """Convert sibling edges in order, leaving out the ones that close a cycle."""
        dependencies = []
        for result in results:
            dependency = self.resolve(result, artifacts, ancestors)
            if dependency is not None:
                dependencies.append(dependency)
        return dependencies

    def _resolved(
        self,
        result: ResolvedDependencyResult,
        children: List[Dependency],
        artifacts: Sequence[ResolvedArtifact],
    ) -> Dependency:
        identifier = result.selected.id

        if isinstance(identifier, ModuleComponentIdentifier):
            metadata = self.metadata_resolver.resolve_metadata(identifier, artifacts)
            return Dependency(
                group_id=identifier.group,
                artifact_id=identifier.module,
                version=identifier.version,
                classifier=metadata.classifier,
                extension=metadata.extension,
                dependencies=children,
                error=metadata.error,
                pom_file=metadata.pom_file,
            )

        if isinstance(identifier, ProjectComponentIdentifier):
            dependency_project = self.project.find_project(identifier.project_path)
            if dependency_project is None:
                return dependency_from_display_name(
                    identifier.display_name,
                    children,
                    error=f"Unknown project: {identifier.project_path}",
                )
            return Dependency(
                group_id=str(dependency_project.group),
                artifact_id=dependency_project.name,
                version=str(dependency_project.version),
                dependencies=children,
                local_path=str(dependency_project.project_dir.absolute()),
            )

        if isinstance(identifier, UnknownComponentIdentifier):
            kind = identifier.kind
        else:
            kind = type(identifier).__name__
        return dependency_from_display_name(
            identifier.display_name,
            children,
            error=f"Unknown id type: {kind}",
        )
