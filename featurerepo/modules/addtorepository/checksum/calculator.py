"""md5/sha1 sidecar files for repository content."""

from __future__ import annotations

import hashlib
import logging
from pathlib import Path
from typing import Dict, List, Mapping, Optional

from featurerepo.modules.addtorepository.domain.constants import CHECKSUM_ALGORITHMS

CHUNK_SIZE = 65536


class ChecksumCalculator:
    """Computes lowercase hex digests and writes ``<file>.<ext>`` siblings."""

    def __init__(self, algorithms: Optional[Mapping[str, str]] = None) -> None:
        # extension -> hashlib algorithm name
        self.algorithms = dict(algorithms or CHECKSUM_ALGORITHMS)
        self.log = logging.getLogger(self.__class__.__name__)

    def digests(self, path: Path) -> Dict[str, str]:
        hashers = {ext: hashlib.new(name) for ext, name in self.algorithms.items()}
        with open(path, "rb") as fh:
            for chunk in iter(lambda: fh.read(CHUNK_SIZE), b""):
                for hasher in hashers.values():
                    hasher.update(chunk)
        return {ext: hasher.hexdigest() for ext, hasher in hashers.items()}

    def write_checksums(self, path: Path) -> List[Path]:
        written: List[Path] = []
        for ext, digest in self.digests(path).items():
            target = path.with_name(f"{path.name}.{ext}")
            target.write_text(digest, encoding="utf-8")
            written.append(target)
        self.log.debug("Wrote checksums for %s", path)
        return written
