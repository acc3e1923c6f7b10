from pathlib import Path

import pytest

from featurerepo.modules.addtorepository.domain import DescriptorResolutionError
from featurerepo.modules.addtorepository.features import (
    FeatureResolver,
    FeaturesDescriptorReader,
    resource_to_artifact,
)
from featurerepo.modules.addtorepository.fileget import LocalArtifactResolver
from featurerepo.settings import Settings

FEATURES_XML = """<?xml version="1.0" encoding="UTF-8"?>
<features name="demo-features" xmlns="http://karaf.apache.org/xmlns/features/v1.3.0">
  <repository>mvn:org.demo/extra/1.0/xml/features</repository>
  <feature name="demo" version="1.0" description="Demo">
    <feature version="1.0">demo-core</feature>
    <bundle start-level="30">mvn:org.demo/demo-api/1.0</bundle>
    <bundle dependency="true">wrap:mvn:org.demo/demo-lib/2.0$Bundle-SymbolicName=lib</bundle>
    <conditional>
      <condition>webconsole</condition>
      <bundle>mvn:org.demo/demo-web/1.0/war</bundle>
    </conditional>
    <configfile finalname="/etc/demo.cfg" override="true">mvn:org.demo/demo-config/1.0/cfg</configfile>
  </feature>
  <feature name="demo-core" version="1.0">
    <bundle>mvn:org.demo/demo-core/1.0</bundle>
  </feature>
  <feature name="unused" version="3.0">
    <bundle>mvn:org.demo/unused/3.0</bundle>
  </feature>
</features>
"""

EXTRA_XML = """<features name="extra">
  <feature name="extra" version="1.0">
    <bundle>mvn:org.demo/extra-bundle/1.0</bundle>
  </feature>
</features>
"""


def _install(local_repo: Path, relative: str, content: str) -> Path:
    path = local_repo / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


def _resolver(tmp_path: Path) -> FeatureResolver:
    local_repo = tmp_path / "m2"
    _install(local_repo, "org/demo/demo-features/1.0/demo-features-1.0-features.xml", FEATURES_XML)
    _install(local_repo, "org/demo/extra/1.0/extra-1.0-features.xml", EXTRA_XML)
    settings = Settings(_env_file=None, local_repository=str(local_repo))
    return FeatureResolver(LocalArtifactResolver(settings))


def test_reader_parses_feature_contents():
    repository = FeaturesDescriptorReader().read_string(FEATURES_XML, source="inline")

    assert repository.name == "demo-features"
    assert repository.repositories == ["mvn:org.demo/extra/1.0/xml/features"]
    demo = repository.features[0]
    assert demo.id == "demo/1.0"
    assert demo.features == ["demo-core/1.0"]
    assert [b.location for b in demo.bundles][0] == "mvn:org.demo/demo-api/1.0"
    assert demo.bundles[0].start_level == 30
    assert demo.bundles[1].dependency is True
    assert demo.conditionals[0].conditions == ["webconsole"]
    assert demo.conditionals[0].bundles[0].location == "mvn:org.demo/demo-web/1.0/war"
    assert demo.config_files[0].finalname == "/etc/demo.cfg"
    assert demo.config_files[0].override is True


def test_reader_rejects_invalid_xml():
    with pytest.raises(DescriptorResolutionError):
        FeaturesDescriptorReader().read_string("<features><feature></features>")
    with pytest.raises(DescriptorResolutionError):
        FeaturesDescriptorReader().read_string("<project/>")


@pytest.mark.parametrize(
    "location, expected",
    [
        ("mvn:org.demo/api/1.0", ("org.demo", "api", "1.0", "jar", None)),
        ("mvn:org.demo/api/1.0/war", ("org.demo", "api", "1.0", "war", None)),
        ("mvn:org.demo/api/1.0/xml/features", ("org.demo", "api", "1.0", "xml", "features")),
        ("wrap:mvn:org.demo/lib/2.0$Bundle-SymbolicName=lib", ("org.demo", "lib", "2.0", "jar", None)),
        ("wrap:mvn:org.demo/lib/2.0?overwrite=merge", ("org.demo", "lib", "2.0", "jar", None)),
        ("mvn:http://repo.example.org/maven2!org.demo/api/1.0", ("org.demo", "api", "1.0", "jar", None)),
        ("  mvn:org.demo/api/\n 1.0  ", ("org.demo", "api", "1.0", "jar", None)),
    ],
)
def test_resource_to_artifact(location, expected):
    artifact = resource_to_artifact(location)
    assert (artifact.groupid, artifact.artifactid, artifact.version, artifact.extension, artifact.classifier) == expected


def test_resource_to_artifact_non_maven_locations():
    assert resource_to_artifact("file:/opt/bundles/foo.jar", skip_non_maven_protocols=True) is None
    with pytest.raises(DescriptorResolutionError):
        resource_to_artifact("file:/opt/bundles/foo.jar", skip_non_maven_protocols=False)


def test_resource_to_artifact_requires_version():
    with pytest.raises(DescriptorResolutionError):
        resource_to_artifact("mvn:org.demo/api")


def test_resolver_selects_requested_feature_with_transitive_features(tmp_path):
    resolved = _resolver(tmp_path).resolve(["mvn:org.demo/demo-features/1.0/xml/features"], ["demo"])

    assert [feature.id for feature in resolved.features] == ["demo/1.0", "demo-core/1.0"]
    assert [a.artifactid for a in resolved.descriptor_artifacts] == ["demo-features", "extra"]
    assert all(a.file is not None for a in resolved.descriptor_artifacts)


def test_resolver_without_transitive_features(tmp_path):
    resolved = _resolver(tmp_path).resolve(
        ["org.demo:demo-features:xml:features:1.0"],
        ["demo/1.0"],
        add_transitive_features=False,
    )
    assert [feature.id for feature in resolved.features] == ["demo/1.0"]


def test_resolver_selects_everything_when_nothing_requested(tmp_path):
    resolved = _resolver(tmp_path).resolve(["mvn:org.demo/demo-features/1.0/xml/features"])
    assert {feature.name for feature in resolved.features} == {"demo", "demo-core", "unused", "extra"}


def test_resolver_accepts_plain_file_descriptor(tmp_path):
    descriptor = tmp_path / "features.xml"
    descriptor.write_text(EXTRA_XML, encoding="utf-8")

    resolved = _resolver(tmp_path).resolve([str(descriptor)])

    assert resolved.descriptor_artifacts == []
    assert [feature.name for feature in resolved.features] == ["extra"]


def test_resolver_fails_for_unknown_feature(tmp_path):
    with pytest.raises(DescriptorResolutionError):
        _resolver(tmp_path).resolve(["mvn:org.demo/demo-features/1.0/xml/features"], ["nope"])


def test_resolver_fails_for_missing_descriptor(tmp_path):
    with pytest.raises(DescriptorResolutionError):
        _resolver(tmp_path).resolve(["mvn:org.demo/absent/1.0/xml/features"])
