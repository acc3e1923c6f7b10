"""Toggle helpers for the add-to-repository run."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .settings import Settings

log = logging.getLogger(__name__)


@dataclass
class RepositorySwitch:
    """Read-only view over the boolean settings."""

    settings: Settings

    def flat_layout_on(self) -> bool:
        return bool(self.settings.flat_repo_layout)

    def maven_metadata_on(self) -> bool:
        return bool(self.settings.generate_maven_metadata)

    def skip_non_maven_on(self) -> bool:
        return bool(self.settings.skip_non_maven_protocols)

    def ignore_dependency_on(self) -> bool:
        return bool(self.settings.ignore_dependency_flag)

    def transitive_features_on(self) -> bool:
        return bool(self.settings.add_transitive_features)

    def file_descriptors_on(self) -> bool:
        entries = self.settings.copy_file_based_descriptors
        if not entries:
            return False

        missing = [
            entry.target_file_name or "<unnamed>"
            for entry in entries
            if not entry.source_file
        ]
        if missing:
            log.info("File based descriptors require source_file for %s, disabling copy.", ", ".join(missing))
            return False
        return True
