"""Conversion between PAX URL ``mvn:`` locations and aether coordinates.

mvn-uri := [ 'wrap:' | 'blueprint:' ] 'mvn:' group-id '/' artifact-id '/' [version]
           [ '/' type [ '/' classifier ] ] [ '/$' query ]

aether := groupId ':' artifactId [ ':' extension [ ':' classifier ] ] ':' version

Repository urls (``repo!g/a/v``) inside mvn locations are not handled here.
Both conversions return their input untouched when it does not match, so
mixed lists of locations can be fed through either direction.
"""

from __future__ import annotations

import re
from typing import Optional

from featurerepo.modules.addtorepository.domain import ArtifactCoordinates, present
from featurerepo.modules.addtorepository.domain.constants import DEFAULT_TYPE

AETHER_PATTERN = re.compile(r"([^: ]+):([^: ]+)(:([^: ]*)(:([^: ]+))?)?:([^: ]+)")
MVN_PATTERN = re.compile(
    r"(?:(?:wrap:)|(?:blueprint:))?mvn:([^/ ]+)/([^/ ]+)/([^/$ ]*)(/([^/$ ]+)(/([^/$ ]+))?)?(/\$.+)?"
)


def mvn_to_aether(name: str) -> str:
    """``mvn:g/a/v/type/classifier`` -> ``g:a:type:classifier:v``.

    A ``jar`` type without classifier is dropped from the result.
    """
    match = MVN_PATTERN.fullmatch(name)
    if not match:
        return name
    group_id, artifact_id, version = match.group(1), match.group(2), match.group(3)
    extension, classifier = match.group(5), match.group(7)

    parts = [group_id, artifact_id]
    if present(classifier):
        parts.append(extension if present(extension) else DEFAULT_TYPE)
        parts.append(classifier)
    elif present(extension) and extension != DEFAULT_TYPE:
        parts.append(extension)
    parts.append(version)
    return ":".join(parts)


def aether_to_mvn(name: str) -> str:
    """``g:a:ext:classifier:v`` -> ``mvn:g/a/v/ext/classifier``.

    Wrapper protocols are never rebuilt.
    """
    match = AETHER_PATTERN.fullmatch(name)
    if not match:
        return name
    group_id, artifact_id, version = match.group(1), match.group(2), match.group(7)
    extension, classifier = match.group(4), match.group(6)

    url = f"mvn:{group_id}/{artifact_id}/{version}"
    if present(classifier):
        url += f"/{extension if present(extension) else DEFAULT_TYPE}/{classifier}"
    elif present(extension):
        url += f"/{extension}"
    return url


def parse_mvn(name: str) -> Optional[ArtifactCoordinates]:
    match = MVN_PATTERN.fullmatch(name)
    if not match:
        return None
    return ArtifactCoordinates(
        groupid=match.group(1),
        artifactid=match.group(2),
        version=match.group(3),
        extension=match.group(5) or DEFAULT_TYPE,
        classifier=match.group(7),
    )


def parse_aether(name: str) -> Optional[ArtifactCoordinates]:
    match = AETHER_PATTERN.fullmatch(name)
    if not match:
        return None
    return ArtifactCoordinates(
        groupid=match.group(1),
        artifactid=match.group(2),
        version=match.group(7),
        extension=match.group(4) or DEFAULT_TYPE,
        classifier=match.group(6),
    )


def parse_coordinates(name: str) -> Optional[ArtifactCoordinates]:
    """Accept either notation."""
    return parse_mvn(name) or parse_aether(name)
