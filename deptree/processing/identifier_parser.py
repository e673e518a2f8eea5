"""
Parsing of free-form dependency display names into coordinates.

Used whenever no structured component identifier is available: unresolved
edges, unknown result shapes and unknown identifier kinds.
"""

from dataclasses import dataclass

PROJECT_PREFIX = "project :"
PROJECT_GROUP = "<project>"
UNKNOWN_GROUP = "<unknown>"


@dataclass(frozen=True)
class ParsedIdentifier:
    """Coordinates recovered from a display name."""
    group_id: str
    artifact_id: str
    version: str = ""


def parse_display_name(display_name: str) -> ParsedIdentifier:
    """
    Parse a display name such as "com.foo:bar:1.0" or "project :sub".

    Workspace projects get the "<project>" group and the part after the first
    colon as artifact. Exactly three colon-separated fields are read as
    group:artifact:version. Anything else gets the "<unknown>" group and the
    whole name, with colons replaced by underscores, as artifact.
    """
    if display_name.startswith(PROJECT_PREFIX):
        return ParsedIdentifier(
            group_id=PROJECT_GROUP,
            artifact_id=display_name.split(":", 1)[1],
        )

    coordinates = display_name.split(":")
    if len(coordinates) == 3:
        group_id, artifact_id, version = coordinates
        return ParsedIdentifier(group_id=group_id, artifact_id=artifact_id, version=version)

    return ParsedIdentifier(group_id=UNKNOWN_GROUP, artifact_id=display_name.replace(":", "_"))
