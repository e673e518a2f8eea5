"""
Metadata lookup for a single external module: POM location plus the
classifier and extension of its resolved artifact.
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional

from ..core.causes import format_causes
from ..core.logging_config import get_logger
from ..host.model import (
    ModuleComponentIdentifier,
    PomResolver,
    ResolvedArtifact,
    ResolvedArtifactResult,
    UnknownArtifactResult,
    UnresolvedArtifactResult,
)
from ..host.owners import owner_type_name, select_owner_adapter

EMPTY_RESULT_ERROR = "Resolution did not return any artifacts"

logger = get_logger("artifact_metadata")


@dataclass(frozen=True)
class ArtifactMetadata:
    classifier: str = ""
    extension: str = ""
    pom_file: Optional[str] = None
    error: Optional[str] = None


@dataclass(frozen=True)
class PomLookup:
    pom_file: Optional[str] = None
    error: Optional[str] = None


@dataclass(frozen=True)
class ArtifactLookup:
    artifact: Optional[ResolvedArtifact] = None
    error: Optional[str] = None


def merge_errors(*errors: Optional[str]) -> Optional[str]:
    """Join non-empty error messages with newlines, first one first."""
    present = [error for error in errors if error]
    return "\n".join(present) if present else None


class ArtifactMetadataResolver:
    """Resolves the POM file and the classifier/extension of external modules."""

    def __init__(self, pom_resolver: PomResolver):
        self.pom_resolver = pom_resolver

    def resolve_metadata(
        self,
        identifier: ModuleComponentIdentifier,
        artifacts: Iterable[ResolvedArtifact],
    ) -> ArtifactMetadata:
        """
        Run both lookups for a module.

        The two lookups fail independently. When both report an error, the
        POM error comes first and the artifact-owner error follows it on a
        new line.
        """
        pom = self.lookup_pom(identifier)
        match = self.find_artifact(identifier, artifacts)

        artifact = match.artifact
        return ArtifactMetadata(
            classifier=(artifact.classifier or "") if artifact else "",
            extension=(artifact.extension or "") if artifact else "",
            pom_file=pom.pom_file,
            error=merge_errors(pom.error, match.error),
        )

    def lookup_pom(self, identifier: ModuleComponentIdentifier) -> PomLookup:
        """Query the host for the POM of exactly this module version."""
        try:
            result = self.pom_resolver.resolve_pom(identifier)
        except Exception as e:
            logger.info(
                f"POM lookup for '{identifier.display_name}' failed: {e}",
                identifier=identifier.display_name,
            )
            return PomLookup(error=format_causes(e))

        if isinstance(result, ResolvedArtifactResult):
            return PomLookup(pom_file=str(result.file.absolute()))
        if isinstance(result, UnresolvedArtifactResult):
            return PomLookup(error=format_causes(result.failure))
        if result is None:
            return PomLookup(error=EMPTY_RESULT_ERROR)
        if isinstance(result, UnknownArtifactResult):
            return PomLookup(error=f"Unknown ArtifactResult type: {result.kind}")
        return PomLookup(error=f"Unknown ArtifactResult type: {type(result).__name__}")

    def find_artifact(
        self,
        identifier: ModuleComponentIdentifier,
        artifacts: Iterable[ResolvedArtifact],
    ) -> ArtifactLookup:
        """
        Find the first resolved artifact owned by the module.

        Owners of an unrecognized shape never match; each distinct unknown
        owner type seen before the match is reported once.
        """
        unknown_owner_types: List[str] = []

        for artifact in artifacts:
            adapter = select_owner_adapter(artifact.owner)
            if adapter is None:
                type_name = owner_type_name(artifact.owner)
                if type_name not in unknown_owner_types:
                    unknown_owner_types.append(type_name)
                continue

            if adapter.matches(artifact.owner, identifier):
                return ArtifactLookup(artifact=artifact, error=self._owner_error(unknown_owner_types))

        return ArtifactLookup(error=self._owner_error(unknown_owner_types))

    @staticmethod
    def _owner_error(type_names: List[str]) -> Optional[str]:
        return merge_errors(*(f"Unknown artifact owner type: {name}" for name in type_names))
