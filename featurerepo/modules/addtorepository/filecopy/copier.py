"""File copy collaborator."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import Protocol

log = logging.getLogger(__name__)


class FileCopier(Protocol):
    def copy(self, source: Path, destination: Path) -> None:  # pragma: no cover - interface
        ...


class ShutilFileCopier:
    """Synchronous copy that creates the destination directories."""

    def copy(self, source: Path, destination: Path) -> None:
        destination.parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(source, destination)
        log.debug("Copied %s -> %s", source, destination)
