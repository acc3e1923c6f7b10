"""Default (layered) and flat repository layouts."""

from __future__ import annotations

from pathlib import Path

from featurerepo.modules.addtorepository.domain import ArtifactCoordinates
from featurerepo.modules.addtorepository.domain.constants import METADATA_FILE_NAME


def get_file_name(artifact: ArtifactCoordinates) -> str:
    return artifact.file_name


def get_dir(artifact: ArtifactCoordinates) -> str:
    group_path, artifact_id, base_version, _ = artifact.path_segments
    return f"{group_path}/{artifact_id}/{base_version}/"


def resolve_path(artifact: ArtifactCoordinates, flat_layout: bool = False) -> str:
    """Relative path of ``artifact`` inside a repository, using ``/`` separators."""
    directory = "" if flat_layout else get_dir(artifact)
    return directory + get_file_name(artifact)


def version_metadata_path(dest_file: Path) -> Path:
    return dest_file.parent / METADATA_FILE_NAME


def artifact_metadata_path(dest_file: Path) -> Path:
    return dest_file.parent.parent / METADATA_FILE_NAME


class RepositoryLayout:
    """Binds a repository root and layout mode."""

    def __init__(self, root: Path, flat: bool = False) -> None:
        self.root = Path(root)
        self.flat = flat

    def relative_path(self, artifact: ArtifactCoordinates) -> str:
        return resolve_path(artifact, self.flat)

    def destination(self, artifact: ArtifactCoordinates) -> Path:
        return self.root / self.relative_path(artifact)
