"""Constants shared across addtorepository domain models."""

DEFAULT_TYPE = "jar"
SNAPSHOT_VERSION = "SNAPSHOT"

MVN_PROTOCOL = "mvn:"

METADATA_FILE_NAME = "maven-metadata.xml"
METADATA_MODEL_VERSION = "1.1.0"
LAST_UPDATED_FORMAT = "%Y%m%d%H%M%S"

CHECKSUM_ALGORITHMS = {
    "md5": "md5",
    "sha1": "sha1",
}

DEFAULT_FEATURE_VERSION = "0.0.0"
