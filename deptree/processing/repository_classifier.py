"""
Classification of a project's declared repositories.
"""

from dataclasses import dataclass, field
from typing import Iterable, List

from ..core.logging_config import get_logger
from ..host.model import Repository, RepositoryKind

logger = get_logger("repository_classifier")


@dataclass
class RepositoryClassification:
    urls: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)


def _format_dirs(dirs: Iterable[str]) -> str:
    return "[" + ", ".join(str(d) for d in dirs) + "]"


def classify_repositories(repositories: Iterable[Repository]) -> RepositoryClassification:
    """
    Split repositories into supported Maven URLs and diagnostics.

    Flat directory and Ivy repositories are not supported and produce warnings;
    unknown implementations produce errors. Only Maven URLs are kept.
    """
    result = RepositoryClassification()

    for repository in repositories:
        if repository.kind == RepositoryKind.MAVEN:
            result.urls.append(str(repository.url))
        elif repository.kind == RepositoryKind.FLAT_DIR:
            result.warnings.append(
                "Project uses a flat dir repository which is not supported by the analyzer. "
                f"Dependencies from this repository will be ignored: {_format_dirs(repository.dirs)}"
            )
        elif repository.kind == RepositoryKind.IVY:
            result.warnings.append(
                "Project uses an Ivy repository which is not supported by the analyzer. "
                f"Dependencies from this repository will be ignored: {repository.url}"
            )
        else:
            result.errors.append(f"Unknown repository type: {repository.implementation}")

    logger.debug(
        f"Classified {len(result.urls)} supported repositories",
        warnings=len(result.warnings),
        errors=len(result.errors),
    )
    return result
