"""
Builds the dependency tree model of a host project.

This is the entry point a host bridge calls: it gates on the host version,
walks the configurations, classifies the repositories and collects every
diagnostic of the run into the model-level error and warning lists.
"""

from typing import Iterable, List, Optional, Tuple

from ..config.settings import Settings, get_settings
from ..core.exceptions import HostVersionError
from ..core.logging_config import get_logger
from ..core.versions import is_at_least_version
from ..host.model import HostProject, PomResolver
from ..models.tree_model import Configuration, TreeModel
from ..processing.artifact_metadata import ArtifactMetadataResolver
from ..processing.configuration_walker import ConfigurationWalker
from ..processing.dependency_graph import DependencyGraphResolver
from ..processing.repository_classifier import classify_repositories

logger = get_logger("tree_model_builder")


def unique(messages: Iterable[str]) -> List[str]:
    """Drop duplicate messages, keeping the first occurrence of each."""
    return list(dict.fromkeys(messages))


def collect_diagnostics(configurations: Iterable[Configuration]) -> Tuple[List[str], List[str]]:
    """Gather node errors and warnings of all trees, depth-first in configuration order."""
    errors: List[str] = []
    warnings: List[str] = []

    for configuration in configurations:
        for root in configuration.dependencies:
            for node in root.iter_tree():
                if node.error:
                    errors.append(node.error)
                if node.warning:
                    warnings.append(node.warning)

    return errors, warnings


class DependencyTreeModelBuilder:
    """
    Builds TreeModel instances for host projects.

    The POM lookup facility of the host is passed in explicitly; everything
    else is read from the project handed to ``build_model``.
    """

    def __init__(self, pom_resolver: PomResolver, settings: Optional[Settings] = None):
        self.pom_resolver = pom_resolver
        self.settings = settings or get_settings()
        self.metadata_resolver = ArtifactMetadataResolver(pom_resolver)

    def can_build(self, model_name: str) -> bool:
        return model_name == self.settings.tree_model_name

    def build_model(self, project: HostProject) -> TreeModel:
        """Build the model of a project; never raises for per-node failures."""
        if not self._is_supported_host(project.host_version):
            return self._unsupported_host_model(project)

        graph_resolver = DependencyGraphResolver(project, self.metadata_resolver)
        walker = ConfigurationWalker(graph_resolver, max_workers=self.settings.max_workers)
        configurations = walker.walk(project)

        repositories = classify_repositories(project.repositories)

        errors, warnings = collect_diagnostics(configurations)
        errors.extend(repositories.errors)
        warnings.extend(repositories.warnings)

        model = TreeModel(
            group=str(project.group),
            name=project.name,
            version=self._normalize_version(project.version),
            configurations=configurations,
            repositories=repositories.urls,
            errors=unique(errors),
            warnings=unique(warnings),
        )

        logger.info(
            f"Built dependency tree model for project '{project.name}'",
            configurations=len(model.configurations),
            errors=len(model.errors),
            warnings=len(model.warnings),
        )
        return model

    def _is_supported_host(self, host_version: str) -> bool:
        major, minor = self.settings.minimum_major_minor()
        try:
            return is_at_least_version(host_version, major, minor)
        except HostVersionError as e:
            logger.warning(f"Treating host version as unsupported: {e.message}")
            return False

    def _unsupported_host_model(self, project: HostProject) -> TreeModel:
        host_name = self.settings.host_name
        error = (
            f"This project uses the unsupported {host_name} version {project.host_version}. "
            f"At least {host_name} {self.settings.minimum_host_version} is required."
        )
        logger.warning(error, project=project.name)
        return TreeModel(
            group=str(project.group),
            name=project.name,
            version=self._normalize_version(project.version),
            errors=(error,),
        )

    def _normalize_version(self, version: str) -> str:
        version = str(version)
        return "" if version == self.settings.unspecified_version else version
