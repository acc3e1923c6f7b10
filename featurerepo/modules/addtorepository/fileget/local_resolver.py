"""Locate artifact content inside a local Maven repository."""

from __future__ import annotations

import logging
from dataclasses import replace as dc_replace
from pathlib import Path
from typing import Iterable, Optional

from featurerepo.modules.addtorepository.domain import ArtifactCoordinates
from featurerepo.settings import Settings


class LocalArtifactResolver:
    """Attach the local file handle to coordinates; no network access."""

    def __init__(self, settings: Settings, local_repository: Optional[Path] = None) -> None:
        self.settings = settings
        self.local_repository = Path(local_repository or settings.local_repository).expanduser()
        self.log = logging.getLogger(self.__class__.__name__)

    def _candidates(self, coords: ArtifactCoordinates) -> Iterable[Path]:
        group_path, artifact_id, base_version, file_name = coords.path_segments
        directory = self.local_repository / group_path / artifact_id / base_version
        yield directory / file_name
        if coords.version != base_version:
            suffix = f"-{coords.classifier}" if coords.classifier else ""
            yield directory / f"{artifact_id}-{coords.version}{suffix}.{coords.extension}"

    def resolve(self, coords: ArtifactCoordinates) -> ArtifactCoordinates:
        if coords.file is not None:
            return coords
        for candidate in self._candidates(coords):
            if candidate.is_file():
                self.log.debug("Resolved %s -> %s", coords, candidate)
                return dc_replace(coords, file=candidate)
        self.log.info("Artifact %s not present in local repository %s", coords, self.local_repository)
        return coords
