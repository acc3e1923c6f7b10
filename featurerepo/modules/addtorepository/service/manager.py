"""Add-to-repository service: resolve features and copy their artifacts."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Set

from featurerepo.modules.addtorepository.coordinates import aether_to_mvn, mvn_to_aether, parse_coordinates
from featurerepo.modules.addtorepository.domain import (
    AddToRepositoryReport,
    AddToRepositoryRequest,
    ArtifactCoordinates,
    Bundle,
    ConfigFile,
    CopyFileBasedDescriptor,
    DescriptorResolutionError,
)
from featurerepo.modules.addtorepository.features import FeatureResolver, resource_to_artifact
from featurerepo.modules.addtorepository.fileget import LocalArtifactResolver
from featurerepo.modules.addtorepository.layout import resolve_path
from featurerepo.modules.addtorepository.service.materializer import ArtifactMaterializer
from featurerepo.settings import Settings
from featurerepo.switches import RepositorySwitch

log = logging.getLogger(__name__)


@dataclass
class OperationResult:
    ok: bool
    message: str
    data: Any = None

    def as_dict(self) -> Dict[str, Any]:
        payload = {"status": "true" if self.ok else "false", "msg": self.message}
        if self.data is not None:
            payload["data"] = self.data
        return payload


class AddToRepositoryService:
    """Copies descriptors, bundles, conditional bundles and config files."""

    def __init__(
        self,
        settings: Settings,
        artifact_resolver: Optional[LocalArtifactResolver] = None,
        feature_resolver: Optional[FeatureResolver] = None,
        materializer: Optional[ArtifactMaterializer] = None,
    ) -> None:
        self.settings = settings
        self.switches = RepositorySwitch(settings)
        self.artifact_resolver = artifact_resolver or LocalArtifactResolver(settings)
        self.feature_resolver = feature_resolver or FeatureResolver(self.artifact_resolver)
        self.materializer = materializer or ArtifactMaterializer()
        self.log = logging.getLogger(self.__class__.__name__)

    # ------------------------------------------------------------------ coordinate helpers
    def translate_to_aether(self, *, url: str) -> Dict[str, Any]:
        return OperationResult(True, "ok", {"mvn": url, "aether": mvn_to_aether(url)}).as_dict()

    def translate_to_mvn(self, *, coordinate: str) -> Dict[str, Any]:
        return OperationResult(True, "ok", {"aether": coordinate, "mvn": aether_to_mvn(coordinate)}).as_dict()

    def layout_path(
        self,
        *,
        groupid: str,
        artifactid: str,
        version: str,
        extension: Optional[str] = None,
        classifier: Optional[str] = None,
        flat: Optional[bool] = None,
    ) -> Dict[str, Any]:
        try:
            artifact = ArtifactCoordinates(
                groupid=groupid.strip(),
                artifactid=artifactid.strip(),
                version=version.strip(),
                extension=(extension or "").strip().lstrip("."),
                classifier=(classifier or "").strip() or None,
            )
        except ValueError as exc:
            return OperationResult(False, str(exc)).as_dict()
        flat_layout = self.switches.flat_layout_on() if flat is None else flat
        return OperationResult(True, "ok", {"path": resolve_path(artifact, flat_layout)}).as_dict()

    # ------------------------------------------------------------------ add to repository
    def build_request(self, **overrides: Any) -> AddToRepositoryRequest:
        """Request from settings; ``None`` overrides are ignored."""
        values = {key: value for key, value in overrides.items() if value is not None}
        descriptors = [
            CopyFileBasedDescriptor(
                source_file=Path(entry.source_file),
                target_directory=entry.target_directory,
                target_file_name=entry.target_file_name,
            )
            for entry in self.settings.copy_file_based_descriptors
        ] if self.switches.file_descriptors_on() else []
        return AddToRepositoryRequest(
            repository=Path(values.get("repository", self.settings.repository)),
            descriptors=list(values.get("descriptors", self.settings.descriptors)),
            features=list(values.get("features", self.settings.features)),
            flat_repo_layout=values.get("flat_repo_layout", self.switches.flat_layout_on()),
            generate_maven_metadata=values.get("generate_maven_metadata", self.switches.maven_metadata_on()),
            skip_non_maven_protocols=values.get("skip_non_maven_protocols", self.switches.skip_non_maven_on()),
            ignore_dependency_flag=values.get("ignore_dependency_flag", self.switches.ignore_dependency_on()),
            add_transitive_features=values.get("add_transitive_features", self.switches.transitive_features_on()),
            copy_file_based_descriptors=descriptors,
        )

    def check_overrides(self, *, repository: Optional[str] = None, descriptors: Optional[List[str]] = None) -> Optional[str]:
        """Reason to refuse caller supplied overrides, or ``None``.

        The repository must stay under the configured one and descriptors
        other than the configured ones must be maven coordinates.
        """
        if repository is not None:
            root = Path(self.settings.repository).resolve()
            target = Path(repository).resolve()
            if target != root and root not in target.parents:
                return f"Repository {repository} is outside {self.settings.repository}"
        allowed = set(self.settings.descriptors)
        for location in descriptors or []:
            if location not in allowed and parse_coordinates(location.strip()) is None:
                return f"Descriptor {location} must be a maven coordinate"
        return None

    def run(self, *, confined: bool = False, **overrides: Any) -> Dict[str, Any]:
        if confined:
            reason = self.check_overrides(
                repository=overrides.get("repository"),
                descriptors=overrides.get("descriptors"),
            )
            if reason:
                log.warning("Rejected add to repository overrides: %s", reason)
                return OperationResult(False, reason).as_dict()
        request = self.build_request(**overrides)
        try:
            report = self.execute(request)
        except DescriptorResolutionError as exc:
            log.error("Descriptor resolution failed: %s", exc)
            return OperationResult(False, str(exc)).as_dict()
        message = "ok" if not report.failed else f"{len(report.failed)} artifacts skipped"
        return OperationResult(True, message, report.as_dict()).as_dict()

    def execute(self, request: AddToRepositoryRequest) -> AddToRepositoryReport:
        """Run the whole copy. Only descriptor resolution errors propagate."""
        self.log.info(
            "Add to repository %s descriptors=%d features=%s flat=%s metadata=%s",
            request.repository,
            len(request.descriptors),
            request.features or "ALL",
            request.flat_repo_layout,
            request.generate_maven_metadata,
        )
        resolved = self.feature_resolver.resolve(
            request.descriptors,
            request.features,
            add_transitive_features=request.add_transitive_features,
        )
        report = AddToRepositoryReport()
        seen: Set[tuple] = set()

        self._copy_artifacts(resolved.descriptor_artifacts, request, report, seen)
        for feature in resolved.features:
            self.log.debug("Processing feature %s", feature.id)
            self._copy_bundles(feature.bundles, request, report, seen)
            for conditional in feature.conditionals:
                bundles = [
                    bundle
                    for bundle in conditional.bundles
                    if request.ignore_dependency_flag or not bundle.dependency
                ]
                self._copy_bundles(bundles, request, report, seen)
            self._copy_config_files(feature.config_files, request, report, seen)
        self._copy_file_based_descriptors(request.copy_file_based_descriptors, request, report)

        self.log.info(
            "Add to repository finished copied=%d skipped=%d",
            len(report.succeeded),
            len(report.failed),
        )
        return report

    # ------------------------------------------------------------------ internal helpers
    def _copy_bundles(
        self,
        bundles: Iterable[Bundle],
        request: AddToRepositoryRequest,
        report: AddToRepositoryReport,
        seen: Set[tuple],
    ) -> None:
        self._copy_locations((bundle.location for bundle in bundles), request, report, seen)

    def _copy_config_files(
        self,
        config_files: Iterable[ConfigFile],
        request: AddToRepositoryRequest,
        report: AddToRepositoryReport,
        seen: Set[tuple],
    ) -> None:
        self._copy_locations((config.location for config in config_files), request, report, seen)

    def _copy_locations(
        self,
        locations: Iterable[str],
        request: AddToRepositoryRequest,
        report: AddToRepositoryReport,
        seen: Set[tuple],
    ) -> None:
        artifacts: List[ArtifactCoordinates] = []
        for location in locations:
            artifact = resource_to_artifact(location, request.skip_non_maven_protocols)
            if artifact is not None:
                artifacts.append(artifact)
        self._copy_artifacts(artifacts, request, report, seen)

    def _copy_artifacts(
        self,
        artifacts: Iterable[ArtifactCoordinates],
        request: AddToRepositoryRequest,
        report: AddToRepositoryReport,
        seen: Set[tuple],
    ) -> None:
        for artifact in artifacts:
            if artifact.key in seen:
                continue
            seen.add(artifact.key)
            resolved = self.artifact_resolver.resolve(artifact)
            report.outcomes.append(
                self.materializer.materialize(
                    resolved,
                    request.repository,
                    request.flat_repo_layout,
                    request.generate_maven_metadata,
                )
            )

    def _copy_file_based_descriptors(
        self,
        descriptors: Iterable[CopyFileBasedDescriptor],
        request: AddToRepositoryRequest,
        report: AddToRepositoryReport,
    ) -> None:
        for descriptor in descriptors:
            dest_file = request.repository / descriptor.target_directory / descriptor.target_file_name
            report.outcomes.append(self.materializer.copy_file(descriptor.source_file, dest_file))
