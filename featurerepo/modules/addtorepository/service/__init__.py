from .manager import AddToRepositoryService, OperationResult
from .materializer import ArtifactMaterializer

__all__ = ["AddToRepositoryService", "ArtifactMaterializer", "OperationResult"]
