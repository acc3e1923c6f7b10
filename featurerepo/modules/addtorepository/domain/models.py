"""Dataclasses for features descriptors and per-artifact outcomes."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional

from .artifact import ArtifactCoordinates
from .constants import DEFAULT_FEATURE_VERSION


@dataclass
class Bundle:
    location: str
    dependency: bool = False
    start_level: Optional[int] = None


@dataclass
class ConfigFile:
    location: str
    finalname: Optional[str] = None
    override: bool = False


@dataclass
class Conditional:
    conditions: List[str] = field(default_factory=list)
    bundles: List[Bundle] = field(default_factory=list)


@dataclass
class Feature:
    name: str
    version: str = DEFAULT_FEATURE_VERSION
    description: Optional[str] = None
    features: List[str] = field(default_factory=list)
    bundles: List[Bundle] = field(default_factory=list)
    conditionals: List[Conditional] = field(default_factory=list)
    config_files: List[ConfigFile] = field(default_factory=list)

    @property
    def id(self) -> str:
        return f"{self.name}/{self.version}"


@dataclass
class FeaturesRepository:
    name: Optional[str] = None
    source: Optional[str] = None
    repositories: List[str] = field(default_factory=list)
    features: List[Feature] = field(default_factory=list)


@dataclass
class CopyFileBasedDescriptor:
    source_file: Path
    target_directory: str
    target_file_name: str


@dataclass
class AddToRepositoryRequest:
    repository: Path
    descriptors: List[str] = field(default_factory=list)
    features: List[str] = field(default_factory=list)
    flat_repo_layout: bool = False
    generate_maven_metadata: bool = False
    skip_non_maven_protocols: bool = True
    ignore_dependency_flag: bool = False
    add_transitive_features: bool = True
    copy_file_based_descriptors: List[CopyFileBasedDescriptor] = field(default_factory=list)


class OutcomeStatus(str, Enum):
    COPIED = "COPIED"
    MISSING_CONTENT = "MISSING_CONTENT"
    IO_FAILURE = "IO_FAILURE"


@dataclass
class ArtifactOutcome:
    """Result of materializing a single artifact (or plain file)."""

    name: str
    status: OutcomeStatus = OutcomeStatus.COPIED
    message: str = "OK"
    destination: Optional[Path] = None
    written_files: List[Path] = field(default_factory=list)
    artifact: Optional[ArtifactCoordinates] = None

    @property
    def ok(self) -> bool:
        return self.status is OutcomeStatus.COPIED

    def mark_failure(self, status: OutcomeStatus, message: str) -> None:
        self.status = status
        self.message = message

    def as_dict(self) -> Dict[str, Any]:
        return {
            "artifact": self.name,
            "status": self.status.value,
            "message": self.message,
            "destination": str(self.destination) if self.destination else None,
            "writtenFiles": [str(path) for path in self.written_files],
        }


@dataclass
class AddToRepositoryReport:
    outcomes: List[ArtifactOutcome] = field(default_factory=list)

    @property
    def succeeded(self) -> List[ArtifactOutcome]:
        return [outcome for outcome in self.outcomes if outcome.ok]

    @property
    def failed(self) -> List[ArtifactOutcome]:
        return [outcome for outcome in self.outcomes if not outcome.ok]

    def as_dict(self) -> Dict[str, Any]:
        return {
            "total": len(self.outcomes),
            "succeeded": len(self.succeeded),
            "failed": len(self.failed),
            "outcomes": [outcome.as_dict() for outcome in self.outcomes],
        }
