"""Karaf features descriptor reader (namespace agnostic)."""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Iterator, Optional

from featurerepo.modules.addtorepository.domain import (
    Bundle,
    Conditional,
    ConfigFile,
    DescriptorResolutionError,
    Feature,
    FeaturesRepository,
)
from featurerepo.modules.addtorepository.domain.constants import DEFAULT_FEATURE_VERSION


def _local_name(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def _children(element: ET.Element, name: str) -> Iterator[ET.Element]:
    for child in element:
        if _local_name(child.tag) == name:
            yield child


def _text(element: ET.Element) -> str:
    return (element.text or "").strip()


def _flag(value: Optional[str]) -> bool:
    return (value or "").strip().lower() == "true"


def _int(value: Optional[str]) -> Optional[int]:
    try:
        return int(value) if value else None
    except ValueError:
        return None


class FeaturesDescriptorReader:
    def __init__(self) -> None:
        self.log = logging.getLogger(self.__class__.__name__)

    def read(self, path: Path) -> FeaturesRepository:
        try:
            root = ET.parse(path).getroot()
        except (ET.ParseError, OSError) as exc:
            raise DescriptorResolutionError(f"Unable to read features descriptor {path}: {exc}") from exc
        return self.read_element(root, source=str(path))

    def read_string(self, content: str, source: Optional[str] = None) -> FeaturesRepository:
        try:
            root = ET.fromstring(content)
        except ET.ParseError as exc:
            raise DescriptorResolutionError(f"Unable to parse features descriptor {source or ''}: {exc}") from exc
        return self.read_element(root, source=source)

    def read_element(self, root: ET.Element, source: Optional[str] = None) -> FeaturesRepository:
        if _local_name(root.tag) != "features":
            raise DescriptorResolutionError(f"{source or 'descriptor'} is not a features descriptor")
        repository = FeaturesRepository(name=root.get("name"), source=source)
        repository.repositories = [_text(el) for el in _children(root, "repository") if _text(el)]
        repository.features = [self._feature(el) for el in _children(root, "feature")]
        self.log.debug(
            "Read features descriptor %s features=%d repositories=%d",
            source,
            len(repository.features),
            len(repository.repositories),
        )
        return repository

    def _feature(self, element: ET.Element) -> Feature:
        name = element.get("name")
        if not name:
            raise DescriptorResolutionError("feature element without name")
        feature = Feature(
            name=name,
            version=element.get("version") or DEFAULT_FEATURE_VERSION,
            description=element.get("description"),
        )
        for dep in _children(element, "feature"):
            dep_name = _text(dep)
            if not dep_name:
                continue
            dep_version = dep.get("version")
            feature.features.append(f"{dep_name}/{dep_version}" if dep_version else dep_name)
        feature.bundles = [self._bundle(el) for el in _children(element, "bundle")]
        for cond in _children(element, "conditional"):
            feature.conditionals.append(
                Conditional(
                    conditions=[_text(el) for el in _children(cond, "condition")],
                    bundles=[self._bundle(el) for el in _children(cond, "bundle")],
                )
            )
        feature.config_files = [
            ConfigFile(
                location=_text(el),
                finalname=el.get("finalname"),
                override=_flag(el.get("override")),
            )
            for el in _children(element, "configfile")
        ]
        return feature

    @staticmethod
    def _bundle(element: ET.Element) -> Bundle:
        return Bundle(
            location=_text(element),
            dependency=_flag(element.get("dependency")),
            start_level=_int(element.get("start-level")),
        )
