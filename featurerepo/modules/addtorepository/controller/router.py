"""FastAPI routes for coordinate translation and the add-to-repository run."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Request
from pydantic import BaseModel

from featurerepo.modules.addtorepository.service.manager import AddToRepositoryService

router = APIRouter(prefix="/addtorepository", tags=["add-to-repository"])


class LayoutPayload(BaseModel):
    groupId: str
    artifactId: str
    version: str
    type: Optional[str] = None
    classifier: Optional[str] = None
    flat: Optional[bool] = None


class RunPayload(BaseModel):
    descriptors: Optional[List[str]] = None
    features: Optional[List[str]] = None
    repository: Optional[str] = None
    flatRepoLayout: Optional[bool] = None
    generateMavenMetadata: Optional[bool] = None
    skipNonMavenProtocols: Optional[bool] = None
    ignoreDependencyFlag: Optional[bool] = None
    addTransitiveFeatures: Optional[bool] = None


def get_service(request: Request) -> AddToRepositoryService:
    container = getattr(request.app.state, "container", None)
    if not container or not getattr(container, "add_to_repository_service", None):
        raise HTTPException(status_code=500, detail="Add to repository service not initialized.")
    return container.add_to_repository_service


def _unwrap(result: Dict[str, Any]) -> Dict[str, Any]:
    if result.get("status") != "true":
        raise HTTPException(status_code=400, detail=result.get("msg"))
    return result


@router.get("/coordinates/aether")
async def to_aether(url: str, svc: AddToRepositoryService = Depends(get_service)):
    return svc.translate_to_aether(url=url)


@router.get("/coordinates/mvn")
async def to_mvn(coordinate: str, svc: AddToRepositoryService = Depends(get_service)):
    return svc.translate_to_mvn(coordinate=coordinate)


@router.post("/layout")
async def layout(payload: LayoutPayload, svc: AddToRepositoryService = Depends(get_service)):
    return _unwrap(
        svc.layout_path(
            groupid=payload.groupId,
            artifactid=payload.artifactId,
            version=payload.version,
            extension=payload.type,
            classifier=payload.classifier,
            flat=payload.flat,
        )
    )


@router.post("/run")
def run(payload: RunPayload, svc: AddToRepositoryService = Depends(get_service)):
    # sync route: copying is blocking file I/O, FastAPI runs it in the threadpool
    return _unwrap(
        svc.run(
            confined=True,
            descriptors=payload.descriptors,
            features=payload.features,
            repository=payload.repository,
            flat_repo_layout=payload.flatRepoLayout,
            generate_maven_metadata=payload.generateMavenMetadata,
            skip_non_maven_protocols=payload.skipNonMavenProtocols,
            ignore_dependency_flag=payload.ignoreDependencyFlag,
            add_transitive_features=payload.addTransitiveFeatures,
        )
    )
