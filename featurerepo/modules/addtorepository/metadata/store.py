"""Read and write ``maven-metadata.xml`` files."""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import List, Optional, Protocol

from featurerepo.modules.addtorepository.domain import MavenMetadata
from featurerepo.modules.addtorepository.domain.constants import METADATA_MODEL_VERSION

log = logging.getLogger(__name__)


class MetadataStore(Protocol):
    def read(self, path: Path) -> Optional[MavenMetadata]:  # pragma: no cover - interface
        ...

    def write(self, path: Path, metadata: MavenMetadata) -> None:  # pragma: no cover - interface
        ...


def _local_name(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def _child(element: ET.Element, name: str) -> Optional[ET.Element]:
    for child in element:
        if _local_name(child.tag) == name:
            return child
    return None


def _text(element: ET.Element, name: str) -> Optional[str]:
    child = _child(element, name)
    if child is None or child.text is None:
        return None
    return child.text.strip() or None


class XmlMetadataStore:
    """Subset of the Maven repository metadata model, stored with ElementTree."""

    def read(self, path: Path) -> Optional[MavenMetadata]:
        if not path.exists():
            return None
        root = ET.parse(path).getroot()
        if _local_name(root.tag) != "metadata":
            raise ValueError(f"{path} is not a maven metadata document")

        versions: List[str] = []
        snapshot_local_copy = False
        last_updated = None
        versioning = _child(root, "versioning")
        if versioning is not None:
            versions_el = _child(versioning, "versions")
            if versions_el is not None:
                for item in versions_el:
                    if _local_name(item.tag) == "version" and item.text and item.text.strip():
                        versions.append(item.text.strip())
            snapshot = _child(versioning, "snapshot")
            if snapshot is not None:
                snapshot_local_copy = (_text(snapshot, "localCopy") or "").lower() == "true"
            last_updated = _text(versioning, "lastUpdated")

        metadata = MavenMetadata(
            group_id=_text(root, "groupId") or "",
            artifact_id=_text(root, "artifactId") or "",
            version=_text(root, "version"),
            versions=tuple(dict.fromkeys(versions)),
            snapshot_local_copy=snapshot_local_copy,
            last_updated=last_updated,
            model_version=root.get("modelVersion") or METADATA_MODEL_VERSION,
        )
        log.debug("Loaded metadata %s versions=%s", path, list(metadata.versions))
        return metadata

    def write(self, path: Path, metadata: MavenMetadata) -> None:
        root = ET.Element("metadata", {"modelVersion": metadata.model_version})
        ET.SubElement(root, "groupId").text = metadata.group_id
        ET.SubElement(root, "artifactId").text = metadata.artifact_id
        if metadata.version:
            ET.SubElement(root, "version").text = metadata.version

        versioning = ET.SubElement(root, "versioning")
        if metadata.snapshot_local_copy:
            snapshot = ET.SubElement(versioning, "snapshot")
            ET.SubElement(snapshot, "localCopy").text = "true"
        versions = ET.SubElement(versioning, "versions")
        for version in metadata.versions:
            ET.SubElement(versions, "version").text = version
        if metadata.last_updated:
            ET.SubElement(versioning, "lastUpdated").text = metadata.last_updated

        tree = ET.ElementTree(root)
        ET.indent(tree)
        path.parent.mkdir(parents=True, exist_ok=True)
        tree.write(path, encoding="UTF-8", xml_declaration=True)
        log.debug("Wrote metadata %s versions=%s", path, list(metadata.versions))
