"""Turn bundle / configfile locations into artifact coordinates."""

from __future__ import annotations

import logging
import re
from typing import Optional

from featurerepo.modules.addtorepository.domain import ArtifactCoordinates, DescriptorResolutionError
from featurerepo.modules.addtorepository.domain.constants import DEFAULT_TYPE, MVN_PROTOCOL

log = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s+")


def _truncate(location: str) -> str:
    cut = [idx for idx in (location.find("?"), location.find("#")) if idx > 0]
    if cut:
        location = location[: min(cut)]
    dollar = location.find("$")
    if dollar > 0:
        location = location[:dollar]
    return location


def resource_to_artifact(location: str, skip_non_maven_protocols: bool = True) -> Optional[ArtifactCoordinates]:
    """Parse a (possibly wrapped) mvn location.

    Returns ``None`` for non-mvn locations when ``skip_non_maven_protocols``
    is set; raises ``DescriptorResolutionError`` otherwise.
    """
    cleaned = _WHITESPACE.sub("", location or "")
    index = cleaned.find(MVN_PROTOCOL)
    if index < 0:
        if skip_non_maven_protocols:
            log.debug("Skipping non maven location %s", cleaned)
            return None
        raise DescriptorResolutionError(f"Resource URL is not a maven URL: {cleaned}")

    path = _truncate(cleaned[index + len(MVN_PROTOCOL):])
    if "!" in path:
        # repository-url!group/artifact/...
        path = path.split("!", 1)[1]

    parts = path.split("/")
    if len(parts) < 2 or not parts[0] or not parts[1]:
        raise DescriptorResolutionError(f"Invalid maven location: {location}")
    version = parts[2] if len(parts) > 2 else ""
    if not version:
        raise DescriptorResolutionError(f"Maven location has no version: {location}")
    extension = parts[3] if len(parts) > 3 and parts[3] else DEFAULT_TYPE
    classifier = parts[4] if len(parts) > 4 and parts[4] else None
    return ArtifactCoordinates(
        groupid=parts[0],
        artifactid=parts[1],
        version=version,
        extension=extension,
        classifier=classifier,
    )
