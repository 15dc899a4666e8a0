"""Ingredient Routes - 재료 사전 / 자동완성"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from barbook.core.database import get_db
from barbook.core.logging import logger
from barbook.core.security import SecurityValidator, require_role
from barbook.repositories.models import Profile
from barbook.schemas.cocktail_schema import (
    DuplicateGroup,
    IngredientMergeRequest,
    IngredientMergeResponse,
    IngredientPayload,
    IngredientResponse,
)
from barbook.services.impl.ingredient_service import IngredientService

router = APIRouter(prefix="/api/v1/ingredients", tags=["ingredients"])


def get_ingredient_service(db: Session = Depends(get_db)) -> IngredientService:
    return IngredientService(db)


@router.get("", response_model=List[IngredientResponse])
async def list_ingredients(
    q: Optional[str] = Query(None, max_length=200),
    service: IngredientService = Depends(get_ingredient_service),
    _profile: Profile = Depends(require_role("viewer")),
):
    return service.list_ingredients(q)


@router.get("/suggest", response_model=List[str])
async def suggest_ingredients(
    term: str = Query("", description="입력 중인 재료명"),
    limit: Optional[int] = Query(None, ge=1, le=50),
    service: IngredientService = Depends(get_ingredient_service),
    _profile: Profile = Depends(require_role("viewer")),
):
    """재료명 자동완성 (부분 일치 우선, 이어서 퍼지 일치)"""
    try:
        SecurityValidator.validate_query(term)
    except ValueError as e:
        logger.warning(f"[API] Input validation failed: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    return service.suggest(term, limit)


@router.get("/duplicates", response_model=List[DuplicateGroup])
async def find_duplicates(
    service: IngredientService = Depends(get_ingredient_service),
    _profile: Profile = Depends(require_role("editor")),
):
    """대소문자/공백만 다른 재료명 그룹"""
    return service.find_duplicates()


@router.post("", response_model=IngredientResponse, status_code=201)
async def add_ingredient(
    payload: IngredientPayload,
    service: IngredientService = Depends(get_ingredient_service),
    _profile: Profile = Depends(require_role("editor")),
):
    return service.add_ingredient(payload.name)


@router.put("/{ingredient_id}", response_model=IngredientResponse)
async def rename_ingredient(
    ingredient_id: int,
    payload: IngredientPayload,
    service: IngredientService = Depends(get_ingredient_service),
    _profile: Profile = Depends(require_role("editor")),
):
    return service.rename_ingredient(ingredient_id, payload.name)


@router.delete("/{ingredient_id}", status_code=204)
async def delete_ingredient(
    ingredient_id: int,
    service: IngredientService = Depends(get_ingredient_service),
    _profile: Profile = Depends(require_role("editor")),
):
    """사용 중인 재료는 삭제 불가 (merge 사용)"""
    service.delete_ingredient(ingredient_id)


@router.post("/merge", response_model=IngredientMergeResponse)
async def merge_ingredients(
    request: IngredientMergeRequest,
    service: IngredientService = Depends(get_ingredient_service),
    _profile: Profile = Depends(require_role("editor")),
):
    """source 재료를 target으로 합치고 source 삭제"""
    moved = service.merge_ingredients(request.source, request.target)
    return IngredientMergeResponse(
        source=request.source.strip(),
        target=request.target.strip(),
        moved=moved,
    )
