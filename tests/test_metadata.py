import xml.etree.ElementTree as ET

from featurerepo.modules.addtorepository.domain import ArtifactCoordinates, MavenMetadata
from featurerepo.modules.addtorepository.metadata import MetadataGenerator, XmlMetadataStore


def _artifact(version: str) -> ArtifactCoordinates:
    return ArtifactCoordinates(groupid="org.foo", artifactid="bar", version=version)


def test_with_version_deduplicates_and_keeps_order():
    doc = MavenMetadata(group_id="g", artifact_id="a")
    updated = doc.with_version("1.0").with_version("2.0").with_version("1.0")
    assert updated.versions == ("1.0", "2.0")
    assert doc.versions == ()


def test_artifact_metadata_does_not_duplicate_versions(tmp_path):
    target = tmp_path / "maven-metadata.xml"
    generator = MetadataGenerator()

    generator.generate_version_metadata(_artifact("1.0"), target)
    generator.generate_version_metadata(_artifact("1.0"), target)

    loaded = XmlMetadataStore().read(target)
    assert loaded.versions == ("1.0",)
    assert loaded.version is None


def test_artifact_metadata_accumulates_versions_in_order(tmp_path):
    target = tmp_path / "maven-metadata.xml"
    generator = MetadataGenerator()

    generator.generate_version_metadata(_artifact("2.0"), target)
    generator.generate_version_metadata(_artifact("1.0"), target)

    loaded = XmlMetadataStore().read(target)
    assert loaded.versions == ("2.0", "1.0")
    assert loaded.group_id == "org.foo"
    assert loaded.artifact_id == "bar"


def test_version_metadata_is_pinned_and_marked_local(tmp_path):
    target = tmp_path / "1.0-SNAPSHOT" / "maven-metadata.xml"
    generator = MetadataGenerator()

    doc = generator.generate_snapshot_metadata(_artifact("1.0-20240102.030405-1"), target)

    loaded = XmlMetadataStore().read(target)
    assert loaded == doc
    assert loaded.version == "1.0-SNAPSHOT"
    assert loaded.versions == ("1.0-SNAPSHOT",)
    assert loaded.snapshot_local_copy is True
    assert loaded.last_updated and len(loaded.last_updated) == 14


def test_existing_metadata_is_merged_not_overwritten(tmp_path):
    target = tmp_path / "maven-metadata.xml"
    target.write_text(
        """<?xml version="1.0" encoding="UTF-8"?>
<metadata xmlns="http://maven.apache.org/METADATA/1.1.0" modelVersion="1.1.0">
  <groupId>org.foo</groupId>
  <artifactId>bar</artifactId>
  <versioning>
    <versions>
      <version>0.9</version>
    </versions>
  </versioning>
</metadata>
""",
        encoding="utf-8",
    )

    MetadataGenerator().generate_version_metadata(_artifact("1.0"), target)

    assert XmlMetadataStore().read(target).versions == ("0.9", "1.0")


def test_written_xml_layout(tmp_path):
    target = tmp_path / "maven-metadata.xml"
    XmlMetadataStore().write(
        target,
        MavenMetadata(group_id="g", artifact_id="a", version="1.0", versions=("1.0",), snapshot_local_copy=True, last_updated="20260101000000"),
    )

    root = ET.parse(target).getroot()
    assert root.tag == "metadata"
    assert root.get("modelVersion") == "1.1.0"
    assert root.findtext("groupId") == "g"
    assert root.findtext("version") == "1.0"
    assert root.findtext("versioning/snapshot/localCopy") == "true"
    assert root.findtext("versioning/lastUpdated") == "20260101000000"
    assert [el.text for el in root.findall("versioning/versions/version")] == ["1.0"]


def test_read_missing_file_returns_none(tmp_path):
    assert XmlMetadataStore().read(tmp_path / "absent.xml") is None
