"""Add-to-repository module exports."""

from .service.manager import AddToRepositoryService
from .controller import router as addtorepository_router

__all__ = ["AddToRepositoryService", "addtorepository_router"]
