"""Domain objects for artifacts copied into the repository."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from .constants import DEFAULT_TYPE, SNAPSHOT_VERSION

# <base>-yyyyMMdd.HHmmss-<build>
_TIMESTAMP_VERSION = re.compile(r"^(.*)-([0-9]{8}\.?[0-9]{6})-([0-9]+)$")


def present(part: Optional[str]) -> bool:
    return part is not None and part != ""


def to_base_version(version: str) -> str:
    """Collapse a timestamped snapshot version to ``X-SNAPSHOT``."""
    if not version:
        return version
    match = _TIMESTAMP_VERSION.match(version)
    if match:
        return f"{match.group(1)}-{SNAPSHOT_VERSION}"
    return version


@dataclass
class ArtifactCoordinates:
    """Represents a resolved Maven artifact coordinate."""

    groupid: str
    artifactid: str
    version: str
    extension: str = DEFAULT_TYPE
    classifier: Optional[str] = None
    file: Optional[Path] = None

    def __post_init__(self) -> None:
        if not present(self.groupid) or not present(self.artifactid):
            raise ValueError("groupid and artifactid are required")
        if not present(self.extension):
            self.extension = DEFAULT_TYPE
        if not present(self.classifier):
            self.classifier = None

    @property
    def base_version(self) -> str:
        return to_base_version(self.version)

    @property
    def is_snapshot(self) -> bool:
        return self.base_version.endswith(SNAPSHOT_VERSION)

    @property
    def key(self) -> tuple:
        return (self.groupid, self.artifactid, self.version, self.extension, self.classifier)

    @property
    def path_segments(self) -> List[str]:
        group_path = self.groupid.replace(".", "/")
        return [group_path, self.artifactid, self.base_version, self.file_name]

    @property
    def file_name(self) -> str:
        suffix = f"-{self.classifier}" if self.classifier else ""
        return f"{self.artifactid}-{self.base_version}{suffix}.{self.extension}"

    def __str__(self) -> str:
        # aether notation, jar elided when there is no classifier
        parts = [self.groupid, self.artifactid]
        if self.classifier:
            parts.extend([self.extension, self.classifier])
        elif self.extension != DEFAULT_TYPE:
            parts.append(self.extension)
        parts.append(self.version)
        return ":".join(parts)
