"""Runtime configuration for the features repository service."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import List

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def _default_local_repository() -> str:
    return str(Path.home() / ".m2" / "repository")


class CopyFileBasedDescriptorConfig(BaseModel):
    """Extra file copied verbatim into the repository."""

    source_file: str
    target_directory: str = ""
    target_file_name: str


class Settings(BaseSettings):
    """Configuration values mapped from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="FEATUREREPO_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = Field("Features Repository API")
    version: str = Field("0.1.0")
    log_level: str = Field("INFO")

    # Destination repository
    repository: str = Field("target/features-repo")
    flat_repo_layout: bool = Field(False)
    generate_maven_metadata: bool = Field(False)

    # Local Maven repository used to locate artifact content
    local_repository: str = Field(default_factory=_default_local_repository)

    # Descriptor resolution
    descriptors: List[str] = Field(default_factory=list)
    features: List[str] = Field(default_factory=list)
    skip_non_maven_protocols: bool = Field(True)
    ignore_dependency_flag: bool = Field(False)
    add_transitive_features: bool = Field(True)

    copy_file_based_descriptors: List[CopyFileBasedDescriptorConfig] = Field(default_factory=list)


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance for dependency injection."""
    return Settings()
