"""Service wiring and startup checks."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from featurerepo.modules.addtorepository import AddToRepositoryService
from featurerepo.modules.addtorepository.fileget import LocalArtifactResolver
from featurerepo.modules.addtorepository.service.materializer import ArtifactMaterializer

from .settings import Settings
from .switches import RepositorySwitch

log = logging.getLogger(__name__)


@dataclass
class ServiceContainer:
    """Container that wires plain-Python services with shared settings."""

    settings: Settings
    artifact_resolver: LocalArtifactResolver = field(init=False)
    materializer: ArtifactMaterializer = field(init=False)
    add_to_repository_service: AddToRepositoryService = field(init=False)

    def __post_init__(self) -> None:
        self.artifact_resolver = LocalArtifactResolver(self.settings)
        self.materializer = ArtifactMaterializer()
        self.add_to_repository_service = AddToRepositoryService(
            self.settings,
            artifact_resolver=self.artifact_resolver,
            materializer=self.materializer,
        )


async def bootstrap_services(container: ServiceContainer, switches: RepositorySwitch) -> None:
    settings = container.settings
    log.info(
        "########### repository=%s flat=%s metadata=%s fileDescriptors=%s ############",
        settings.repository,
        switches.flat_layout_on(),
        switches.maven_metadata_on(),
        switches.file_descriptors_on(),
    )
    local_repo = container.artifact_resolver.local_repository
    if not local_repo.is_dir():
        log.warning("Local repository %s does not exist, every artifact will be reported missing", local_repo)
    Path(settings.repository).mkdir(parents=True, exist_ok=True)
