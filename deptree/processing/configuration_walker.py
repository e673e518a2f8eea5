"""
Walks a project's configurations and builds one dependency tree per
resolvable configuration.
"""

from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional

from ..core.exceptions import ArtifactSetResolutionError
from ..core.logging_config import get_logger
from ..host.model import HostConfiguration, HostProject, ResolvedArtifact
from ..models.tree_model import Configuration
from .dependency_graph import DependencyGraphResolver

logger = get_logger("configuration_walker")


def is_resolvable(configuration: HostConfiguration) -> bool:
    """Honor the host's resolvability flag; hosts without the flag resolve everything."""
    return configuration.can_be_resolved is None or configuration.can_be_resolved


class ConfigurationWalker:
    """Builds Configuration entries for every resolvable host configuration."""

    def __init__(self, graph_resolver: DependencyGraphResolver, max_workers: int = 1):
        self.graph_resolver = graph_resolver
        self.max_workers = max(1, max_workers)

    def walk(self, project: HostProject) -> List[Configuration]:
        """
        Resolve all configurations of a project, keeping declaration order.

        Configurations are independent of each other, so with more than one
        worker they are resolved concurrently; each one yields its own subtree
        and nothing is shared between them.
        """
        configurations = list(project.configurations)

        if self.max_workers == 1 or len(configurations) < 2:
            results = [self.walk_configuration(c) for c in configurations]
        else:
            with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
                results = list(executor.map(self.walk_configuration, configurations))

        return [configuration for configuration in results if configuration is not None]

    def walk_configuration(self, configuration: HostConfiguration) -> Optional[Configuration]:
        """Build the tree of one configuration, or None if it cannot be resolved."""
        if not is_resolvable(configuration):
            logger.info(f"Configuration '{configuration.name}' cannot be resolved.")
            return None

        roots = configuration.resolution_result()
        artifacts = self._resolved_artifacts(configuration)

        dependencies = self.graph_resolver.resolve_all(roots, artifacts)
        return Configuration(name=configuration.name, dependencies=dependencies)

    def _resolved_artifacts(self, configuration: HostConfiguration) -> List[ResolvedArtifact]:
        try:
            return configuration.resolve_artifacts()
        except ArtifactSetResolutionError as e:
            logger.info(
                f"Artifacts for configuration '{configuration.name}' could not be resolved, therefore no "
                f"information about artifact classifiers and extensions is available: {e.message}",
                configuration=configuration.name,
            )
            return []
