from .local_resolver import LocalArtifactResolver

__all__ = ["LocalArtifactResolver"]
