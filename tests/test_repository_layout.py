from pathlib import Path

import pytest

from featurerepo.modules.addtorepository.domain import ArtifactCoordinates, to_base_version
from featurerepo.modules.addtorepository.layout import (
    RepositoryLayout,
    artifact_metadata_path,
    get_dir,
    resolve_path,
    version_metadata_path,
)


def test_resolve_path_default_layout():
    artifact = ArtifactCoordinates(groupid="org.foo", artifactid="bar", version="1.0")
    assert resolve_path(artifact, flat_layout=False) == "org/foo/bar/1.0/bar-1.0.jar"


def test_resolve_path_flat_layout():
    artifact = ArtifactCoordinates(groupid="org.foo", artifactid="bar", version="1.0")
    assert resolve_path(artifact, flat_layout=True) == "bar-1.0.jar"


def test_classifier_and_type_in_file_name():
    artifact = ArtifactCoordinates(
        groupid="org.apache.karaf.features",
        artifactid="standard",
        version="4.0.0",
        extension="xml",
        classifier="features",
    )
    assert resolve_path(artifact) == "org/apache/karaf/features/standard/4.0.0/standard-4.0.0-features.xml"
    assert get_dir(artifact) == "org/apache/karaf/features/standard/4.0.0/"


def test_timestamped_snapshot_uses_base_version():
    artifact = ArtifactCoordinates(groupid="g", artifactid="a", version="1.0-20240102.030405-7")
    assert artifact.base_version == "1.0-SNAPSHOT"
    assert artifact.is_snapshot
    assert resolve_path(artifact) == "g/a/1.0-SNAPSHOT/a-1.0-SNAPSHOT.jar"


@pytest.mark.parametrize("version", ["1.0", "1.0-SNAPSHOT", "2.3.4.Final", ""])
def test_non_timestamped_versions_are_their_own_base(version):
    assert to_base_version(version) == version


def test_empty_classifier_is_absent():
    artifact = ArtifactCoordinates(groupid="g", artifactid="a", version="1", classifier="", extension="")
    assert artifact.classifier is None
    assert artifact.extension == "jar"
    assert resolve_path(artifact, flat_layout=True) == "a-1.jar"


@pytest.mark.parametrize("group, artifact", [("", "a"), ("g", "")])
def test_group_and_artifact_are_required(group, artifact):
    with pytest.raises(ValueError):
        ArtifactCoordinates(groupid=group, artifactid=artifact, version="1.0")


def test_metadata_paths(tmp_path):
    dest = tmp_path / "org/foo/bar/1.0/bar-1.0.jar"
    assert version_metadata_path(dest) == tmp_path / "org/foo/bar/1.0/maven-metadata.xml"
    assert artifact_metadata_path(dest) == tmp_path / "org/foo/bar/maven-metadata.xml"


def test_repository_layout_destination(tmp_path):
    artifact = ArtifactCoordinates(groupid="org.foo", artifactid="bar", version="1.0", extension="war")
    assert RepositoryLayout(tmp_path).destination(artifact) == tmp_path / "org/foo/bar/1.0/bar-1.0.war"
    assert RepositoryLayout(Path(tmp_path), flat=True).destination(artifact) == tmp_path / "bar-1.0.war"
