from .artifact import ArtifactCoordinates, present, to_base_version
from .exceptions import DescriptorResolutionError
from .metadata import MavenMetadata
from .models import (
    AddToRepositoryReport,
    AddToRepositoryRequest,
    ArtifactOutcome,
    Bundle,
    Conditional,
    ConfigFile,
    CopyFileBasedDescriptor,
    Feature,
    FeaturesRepository,
    OutcomeStatus,
)

__all__ = [
    "ArtifactCoordinates",
    "present",
    "to_base_version",
    "DescriptorResolutionError",
    "MavenMetadata",
    "AddToRepositoryReport",
    "AddToRepositoryRequest",
    "ArtifactOutcome",
    "Bundle",
    "Conditional",
    "ConfigFile",
    "CopyFileBasedDescriptor",
    "Feature",
    "FeaturesRepository",
    "OutcomeStatus",
]
