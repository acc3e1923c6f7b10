"""Load, merge and persist the two metadata documents of an artifact."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from featurerepo.modules.addtorepository.domain import ArtifactCoordinates, MavenMetadata

from .store import MetadataStore, XmlMetadataStore


class MetadataGenerator:
    """Keeps the version lists of ``maven-metadata.xml`` files growing."""

    def __init__(self, store: Optional[MetadataStore] = None) -> None:
        self.store = store or XmlMetadataStore()
        self.log = logging.getLogger(self.__class__.__name__)

    def _load(self, artifact: ArtifactCoordinates, target: Path) -> MavenMetadata:
        current = self.store.read(target)
        if current is None:
            current = MavenMetadata(group_id=artifact.groupid, artifact_id=artifact.artifactid)
        return current.with_coordinates(artifact.groupid, artifact.artifactid)

    def generate_version_metadata(self, artifact: ArtifactCoordinates, target: Path) -> MavenMetadata:
        """Artifact-level document (``<artifactId>/maven-metadata.xml``)."""
        metadata = self._load(artifact, target).with_version(artifact.base_version)
        self.store.write(target, metadata)
        self.log.debug("Updated artifact metadata %s", target)
        return metadata

    def generate_snapshot_metadata(self, artifact: ArtifactCoordinates, target: Path) -> MavenMetadata:
        """Version-level document (``<artifactId>/<version>/maven-metadata.xml``)."""
        metadata = self._load(artifact, target).pinned(artifact.base_version)
        self.store.write(target, metadata)
        self.log.debug("Updated version metadata %s", target)
        return metadata
