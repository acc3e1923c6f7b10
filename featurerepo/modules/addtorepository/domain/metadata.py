"""Immutable ``maven-metadata.xml`` document value."""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime, timezone
from typing import Optional, Tuple

from .constants import LAST_UPDATED_FORMAT, METADATA_MODEL_VERSION


def timestamp_now() -> str:
    return datetime.now(timezone.utc).strftime(LAST_UPDATED_FORMAT)


@dataclass(frozen=True)
class MavenMetadata:
    """Snapshot of one metadata document; every update returns a new value."""

    group_id: str
    artifact_id: str
    version: Optional[str] = None
    versions: Tuple[str, ...] = ()
    snapshot_local_copy: bool = False
    last_updated: Optional[str] = None
    model_version: str = METADATA_MODEL_VERSION

    def with_coordinates(self, group_id: str, artifact_id: str) -> "MavenMetadata":
        return replace(self, group_id=group_id, artifact_id=artifact_id, model_version=METADATA_MODEL_VERSION)

    def with_version(self, version: str) -> "MavenMetadata":
        if version in self.versions:
            return self
        return replace(self, versions=self.versions + (version,))

    def pinned(self, version: str, last_updated: Optional[str] = None) -> "MavenMetadata":
        """Per-version form: fixed version, local snapshot copy, fresh timestamp."""
        return replace(
            self.with_version(version),
            version=version,
            snapshot_local_copy=True,
            last_updated=last_updated or timestamp_now(),
        )
