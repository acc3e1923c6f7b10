"""Load features descriptors and select the features to copy."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence, Set

from featurerepo.modules.addtorepository.coordinates import parse_coordinates
from featurerepo.modules.addtorepository.domain import (
    ArtifactCoordinates,
    DescriptorResolutionError,
    Feature,
    FeaturesRepository,
)
from featurerepo.modules.addtorepository.fileget import LocalArtifactResolver

from .reader import FeaturesDescriptorReader


@dataclass
class ResolvedFeatures:
    descriptor_artifacts: List[ArtifactCoordinates] = field(default_factory=list)
    repositories: List[FeaturesRepository] = field(default_factory=list)
    features: List[Feature] = field(default_factory=list)


class FeatureResolver:
    """Walks descriptor locations (and their ``<repository>`` references)."""

    def __init__(
        self,
        artifact_resolver: LocalArtifactResolver,
        reader: Optional[FeaturesDescriptorReader] = None,
    ) -> None:
        self.artifact_resolver = artifact_resolver
        self.reader = reader or FeaturesDescriptorReader()
        self.log = logging.getLogger(self.__class__.__name__)

    def resolve(
        self,
        descriptors: Sequence[str],
        requested: Sequence[str] = (),
        *,
        add_transitive_features: bool = True,
    ) -> ResolvedFeatures:
        result = ResolvedFeatures()
        seen: Set[str] = set()
        pending = list(descriptors)
        while pending:
            location = pending.pop(0).strip()
            if not location or location in seen:
                continue
            seen.add(location)
            path, artifact = self._locate(location)
            repository = self.reader.read(path)
            result.repositories.append(repository)
            if artifact is not None:
                result.descriptor_artifacts.append(artifact)
            pending.extend(repository.repositories)

        result.features = self._select(result.repositories, requested, add_transitive_features)
        self.log.info(
            "Resolved %d descriptors, %d features selected",
            len(result.repositories),
            len(result.features),
        )
        return result

    def _locate(self, location: str) -> tuple[Path, Optional[ArtifactCoordinates]]:
        coords = parse_coordinates(location)
        if coords is not None:
            resolved = self.artifact_resolver.resolve(coords)
            if resolved.file is None:
                raise DescriptorResolutionError(f"Features descriptor {location} is not present in the local repository")
            return resolved.file, resolved

        path = Path(location[len("file:"):] if location.startswith("file:") else location)
        if not path.is_file():
            raise DescriptorResolutionError(f"Features descriptor {location} not found")
        return path, None

    def _select(
        self,
        repositories: Iterable[FeaturesRepository],
        requested: Sequence[str],
        add_transitive_features: bool,
    ) -> List[Feature]:
        by_name: Dict[str, List[Feature]] = {}
        for repository in repositories:
            for feature in repository.features:
                by_name.setdefault(feature.name, []).append(feature)

        if not requested:
            return [feature for features in by_name.values() for feature in features]

        selected: Dict[str, Feature] = {}
        pending: List[tuple[str, bool]] = [(ref, True) for ref in requested]
        while pending:
            ref, required = pending.pop(0)
            feature = self._lookup(by_name, ref)
            if feature is None:
                if required:
                    raise DescriptorResolutionError(f"Unable to find the feature '{ref}'")
                self.log.warning("Feature dependency '%s' not found in the loaded descriptors", ref)
                continue
            if feature.id in selected:
                continue
            selected[feature.id] = feature
            if add_transitive_features:
                pending.extend((dep, False) for dep in feature.features)
        return list(selected.values())

    @staticmethod
    def _lookup(by_name: Dict[str, List[Feature]], ref: str) -> Optional[Feature]:
        name, _, version = ref.strip().partition("/")
        candidates = by_name.get(name) or []
        if version:
            candidates = [feature for feature in candidates if feature.version == version]
        return candidates[0] if candidates else None
