import hashlib

from featurerepo.modules.addtorepository.checksum import ChecksumCalculator


def test_write_checksums_creates_sidecar_files(tmp_path):
    content = b"bundle-bytes" * 10000
    target = tmp_path / "bar-1.0.jar"
    target.write_bytes(content)

    written = ChecksumCalculator().write_checksums(target)

    assert sorted(path.name for path in written) == ["bar-1.0.jar.md5", "bar-1.0.jar.sha1"]
    assert (tmp_path / "bar-1.0.jar.md5").read_text() == hashlib.md5(content).hexdigest()
    assert (tmp_path / "bar-1.0.jar.sha1").read_text() == hashlib.sha1(content).hexdigest()


def test_digests_are_lowercase_hex(tmp_path):
    target = tmp_path / "empty.txt"
    target.write_bytes(b"")

    digests = ChecksumCalculator().digests(target)

    assert digests == {
        "md5": "d41d8cd98f00b204e9800998ecf8427e",
        "sha1": "da39a3ee5e6b4b0d3255bfef95601890afd80709",
    }
