"""Catalog Routes - method/glass/ice/garnish/unit 관리 (admin)"""

from typing import List, Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from barbook.core.database import get_db
from barbook.core.security import require_role
from barbook.repositories.models import Profile
from barbook.schemas.cocktail_schema import (
    CatalogItemPayload,
    CatalogItemResponse,
    CatalogKind,
    CatalogMergeRequest,
    CatalogRenameRequest,
    CatalogReorderRequest,
)
from barbook.services.impl.catalog_service import CatalogService

router = APIRouter(prefix="/api/v1/catalog", tags=["catalog"])


def get_catalog_service(db: Session = Depends(get_db)) -> CatalogService:
    return CatalogService(db)


@router.get("", response_model=List[CatalogItemResponse])
async def list_catalog(
    kind: Optional[CatalogKind] = None,
    active_only: bool = False,
    service: CatalogService = Depends(get_catalog_service),
    _profile: Profile = Depends(require_role("viewer")),
):
    """카탈로그 목록 (폼 드롭다운은 active_only=true)"""
    return service.list_items(kind=kind, active_only=active_only)


@router.post("", response_model=CatalogItemResponse, status_code=201)
async def add_catalog_item(
    payload: CatalogItemPayload,
    service: CatalogService = Depends(get_catalog_service),
    _profile: Profile = Depends(require_role("admin")),
):
    return service.add_item(payload.kind, payload.name)


@router.put("/{item_id}", response_model=CatalogItemResponse)
async def rename_catalog_item(
    item_id: int,
    payload: CatalogRenameRequest,
    service: CatalogService = Depends(get_catalog_service),
    _profile: Profile = Depends(require_role("admin")),
):
    """이름 변경 (사용 중인 칵테일/레시피 라인도 함께 갱신)"""
    return service.rename_item(item_id, payload.name)


@router.post("/{item_id}/toggle", response_model=CatalogItemResponse)
async def toggle_catalog_item(
    item_id: int,
    service: CatalogService = Depends(get_catalog_service),
    _profile: Profile = Depends(require_role("admin")),
):
    return service.toggle_item(item_id)


@router.delete("/{item_id}", status_code=204)
async def delete_catalog_item(
    item_id: int,
    service: CatalogService = Depends(get_catalog_service),
    _profile: Profile = Depends(require_role("admin")),
):
    service.delete_item(item_id)


@router.post("/reorder", response_model=List[CatalogItemResponse])
async def reorder_catalog(
    request: CatalogReorderRequest,
    service: CatalogService = Depends(get_catalog_service),
    _profile: Profile = Depends(require_role("admin")),
):
    return service.reorder(request.kind, request.ordered_ids)


@router.post("/merge")
async def merge_catalog_items(
    request: CatalogMergeRequest,
    service: CatalogService = Depends(get_catalog_service),
    _profile: Profile = Depends(require_role("admin")),
):
    """source 항목을 target으로 합침"""
    updated = service.merge_items(request.source_id, request.target_id)
    return {"source_id": request.source_id, "target_id": request.target_id, "updated": updated}
