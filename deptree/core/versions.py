"""
Host version arithmetic for the supported-version gate.
"""

import re
from typing import Tuple

from packaging.version import Version

from .exceptions import HostVersionError

_LEADING_INT = re.compile(r"^\s*(\d+)")


def _leading_int(segment: str, raw: str) -> int:
    match = _LEADING_INT.match(segment)
    if not match:
        raise HostVersionError(raw)
    return int(match.group(1))


def parse_major_minor(raw: str) -> Tuple[int, int]:
    """
    Parse the major and minor components of a dotted version string.

    Only the leading digits of each segment count, so "4.10-rc-1" reads as
    (4, 10) and "7" reads as (7, 0). A major segment, or a present minor
    segment, without leading digits raises HostVersionError.
    """
    if raw is None:
        raise HostVersionError("None")

    segments = str(raw).split(".")
    major = _leading_int(segments[0], raw)
    minor = _leading_int(segments[1], raw) if len(segments) > 1 else 0
    return major, minor


def release_of(raw: str) -> Version:
    """Get the major.minor release of a host version as a comparable Version."""
    major, minor = parse_major_minor(raw)
    return Version(f"{major}.{minor}")


def is_at_least_version(raw: str, major: int, minor: int) -> bool:
    """Check whether a dotted version is at least major.minor."""
    return release_of(raw) >= Version(f"{major}.{minor}")
