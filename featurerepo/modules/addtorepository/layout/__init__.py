from .repository_layout import (
    RepositoryLayout,
    artifact_metadata_path,
    get_dir,
    get_file_name,
    resolve_path,
    version_metadata_path,
)

__all__ = [
    "RepositoryLayout",
    "artifact_metadata_path",
    "get_dir",
    "get_file_name",
    "resolve_path",
    "version_metadata_path",
]
