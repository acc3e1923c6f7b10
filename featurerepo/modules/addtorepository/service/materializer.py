"""Copy one artifact into the repository, with optional metadata and checksums."""

from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Iterable, Optional

from featurerepo.modules.addtorepository.checksum import ChecksumCalculator
from featurerepo.modules.addtorepository.domain import (
    AddToRepositoryReport,
    ArtifactCoordinates,
    ArtifactOutcome,
    OutcomeStatus,
)
from featurerepo.modules.addtorepository.filecopy import FileCopier, ShutilFileCopier
from featurerepo.modules.addtorepository.layout import (
    artifact_metadata_path,
    resolve_path,
    version_metadata_path,
)
from featurerepo.modules.addtorepository.metadata import MetadataGenerator

MISSING_CONTENT_MESSAGE = "Artifact is not present in local repo."


class ArtifactMaterializer:
    """Per-artifact copy step. Failures become outcomes, never exceptions.

    Copy, metadata and checksum writes run under one lock per instance, so
    concurrent runs sharing a materializer never interleave a metadata
    read-merge-write.

    With ``flat_layout`` the per-version document is the single
    ``maven-metadata.xml`` at the repository root, shared by every artifact
    (last writer pins ``groupId``/``version``, ``versions`` mixes artifacts),
    and the per-artifact document lands one level above the root, outside
    the repository.
    """

    def __init__(
        self,
        copier: Optional[FileCopier] = None,
        metadata: Optional[MetadataGenerator] = None,
        checksums: Optional[ChecksumCalculator] = None,
    ) -> None:
        self.copier = copier or ShutilFileCopier()
        self.metadata = metadata or MetadataGenerator()
        self.checksums = checksums or ChecksumCalculator()
        self._lock = threading.Lock()
        self.log = logging.getLogger(self.__class__.__name__)

    def materialize(
        self,
        artifact: ArtifactCoordinates,
        destination_root: Path,
        flat_layout: bool = False,
        generate_metadata: bool = False,
    ) -> ArtifactOutcome:
        outcome = ArtifactOutcome(name=str(artifact), artifact=artifact)
        self.log.info("Copying artifact: %s", artifact)
        dest_file = Path(destination_root) / resolve_path(artifact, flat_layout)
        outcome.destination = dest_file

        if artifact.file is None:
            self.log.warning("Error copying artifact %s: %s", artifact, MISSING_CONTENT_MESSAGE)
            outcome.mark_failure(OutcomeStatus.MISSING_CONTENT, MISSING_CONTENT_MESSAGE)
            return outcome

        try:
            with self._lock:
                self.copier.copy(artifact.file, dest_file)
                outcome.written_files.append(dest_file)
                if generate_metadata:
                    outcome.written_files.extend(self._generate_metadata(artifact, dest_file))
        except Exception as exc:  # noqa: BLE001
            self.log.warning("Error copying artifact %s: %s", artifact, exc)
            outcome.mark_failure(OutcomeStatus.IO_FAILURE, str(exc))
        return outcome

    def materialize_all(
        self,
        artifacts: Iterable[ArtifactCoordinates],
        destination_root: Path,
        flat_layout: bool = False,
        generate_metadata: bool = False,
    ) -> AddToRepositoryReport:
        report = AddToRepositoryReport()
        for artifact in artifacts:
            report.outcomes.append(
                self.materialize(artifact, destination_root, flat_layout, generate_metadata)
            )
        return report

    def copy_file(self, source: Path, dest_file: Path) -> ArtifactOutcome:
        """Plain copy with no metadata, used for file based descriptors."""
        outcome = ArtifactOutcome(name=str(source), destination=dest_file)
        self.log.info("Copying file: %s -> %s", source, dest_file)
        if not source.is_file():
            self.log.warning("Error copying file %s: source does not exist", source)
            outcome.mark_failure(OutcomeStatus.MISSING_CONTENT, f"{source} does not exist")
            return outcome
        try:
            self.copier.copy(source, dest_file)
            outcome.written_files.append(dest_file)
        except Exception as exc:  # noqa: BLE001
            self.log.warning("Error copying file %s: %s", source, exc)
            outcome.mark_failure(OutcomeStatus.IO_FAILURE, str(exc))
        return outcome

    def _generate_metadata(self, artifact: ArtifactCoordinates, dest_file: Path) -> list[Path]:
        version_target = version_metadata_path(dest_file)
        self.metadata.generate_snapshot_metadata(artifact, version_target)
        artifact_target = artifact_metadata_path(dest_file)
        self.metadata.generate_version_metadata(artifact, artifact_target)

        written = [version_target, artifact_target]
        for target in (dest_file, version_target, artifact_target):
            written.extend(self.checksums.write_checksums(target))
        return written
