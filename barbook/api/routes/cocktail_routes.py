"""Cocktail Routes

HTTP Layer는 요청 검증/변환만 하고 CocktailService에 위임합니다.
도메인 예외는 앱 레벨 핸들러(barbook.api.errors)가 HTTP 상태로 변환합니다.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import HTMLResponse
from sqlalchemy.orm import Session

from barbook.core.database import get_db
from barbook.core.logging import logger
from barbook.core.security import SecurityValidator, require_role
from barbook.repositories.models import Cocktail, Profile
from barbook.schemas.cocktail_schema import (
    CocktailDetailResponse,
    CocktailListResponse,
    CocktailPayload,
    CocktailResponse,
    Orientation,
    PageSize,
    RecipeLineResponse,
    SortOption,
    SpecialRequest,
)
from barbook.services.impl.cocktail_service import CocktailFilters, CocktailService, format_spec_line
from barbook.services.impl.print_service import PrintOptions, render_one_pager

router = APIRouter(prefix="/api/v1/cocktails", tags=["cocktails"])


def get_cocktail_service(db: Session = Depends(get_db)) -> CocktailService:
    return CocktailService(db)


def _to_response(cocktail: Cocktail, specs: List[str]) -> CocktailResponse:
    response = CocktailResponse.model_validate(cocktail)
    response.specs = specs
    return response


def _to_detail(cocktail: Cocktail) -> CocktailDetailResponse:
    lines = [
        RecipeLineResponse(
            ingredient_id=line.ingredient_id,
            ingredient_name=line.ingredient.name,
            amount=line.amount,
            unit=line.unit,
            position=line.position,
            display=format_spec_line(line),
        )
        for line in cocktail.lines
    ]
    base = CocktailResponse.model_validate(cocktail).model_dump()
    base["specs"] = [line.display for line in lines]
    return CocktailDetailResponse(**base, lines=lines)


@router.get("", response_model=CocktailListResponse)
async def list_cocktails(
    name: str = Query("", max_length=200, description="칵테일명 퍼지 검색"),
    method: str = Query("Any", max_length=100),
    glass: str = Query("", max_length=100),
    special_only: bool = False,
    price_min: Optional[float] = Query(None, ge=0),
    price_max: Optional[float] = Query(None, ge=0),
    ingredient: List[str] = Query([], description="재료 필터 (모두 만족)"),
    q: str = Query("", max_length=200, description="자유 입력 재료 검색"),
    sort: SortOption = "special_desc",
    limit: Optional[int] = Query(None, ge=1, le=1000),
    service: CocktailService = Depends(get_cocktail_service),
    _profile: Profile = Depends(require_role("viewer")),
):
    """칵테일 목록 (필터/검색/정렬)"""
    try:
        for term in [name, q, *ingredient]:
            SecurityValidator.validate_query(term)
    except ValueError as e:
        logger.warning(f"[API] Input validation failed: {e}")
        raise HTTPException(status_code=400, detail=str(e))

    filters = CocktailFilters(
        name_search=name,
        method=method,
        glass=glass,
        special_only=special_only,
        price_min=price_min,
        price_max=price_max,
        ingredients=ingredient,
        q=q,
        sort=sort,
        limit=limit,
    )
    rows = service.list_cocktails(filters)
    specs = service.spec_lines([c.id for c in rows])

    return CocktailListResponse(
        total=len(rows),
        items=[_to_response(c, specs.get(c.id, [])) for c in rows],
    )


@router.get("/{cocktail_id}", response_model=CocktailDetailResponse)
async def get_cocktail(
    cocktail_id: int,
    service: CocktailService = Depends(get_cocktail_service),
    _profile: Profile = Depends(require_role("viewer")),
):
    """칵테일 상세 (레시피 라인 포함)"""
    return _to_detail(service.get_cocktail(cocktail_id))


@router.post("", response_model=CocktailDetailResponse, status_code=201)
async def create_cocktail(
    payload: CocktailPayload,
    service: CocktailService = Depends(get_cocktail_service),
    _profile: Profile = Depends(require_role("editor")),
):
    """칵테일 생성"""
    return _to_detail(service.save_cocktail(payload))


@router.put("/{cocktail_id}", response_model=CocktailDetailResponse)
async def update_cocktail(
    cocktail_id: int,
    payload: CocktailPayload,
    service: CocktailService = Depends(get_cocktail_service),
    _profile: Profile = Depends(require_role("editor")),
):
    """칵테일 수정 (레시피 라인 전체 교체)"""
    return _to_detail(service.save_cocktail(payload, cocktail_id=cocktail_id))


@router.post("/{cocktail_id}/special", response_model=CocktailResponse)
async def mark_special(
    cocktail_id: int,
    request: SpecialRequest,
    service: CocktailService = Depends(get_cocktail_service),
    _profile: Profile = Depends(require_role("editor")),
):
    """스페셜 날짜 지정/해제"""
    cocktail = service.mark_special(cocktail_id, request.on_date)
    return _to_response(cocktail, service.spec_lines([cocktail.id]).get(cocktail.id, []))


@router.delete("/{cocktail_id}", status_code=204)
async def delete_cocktail(
    cocktail_id: int,
    service: CocktailService = Depends(get_cocktail_service),
    _profile: Profile = Depends(require_role("editor")),
):
    """칵테일 삭제"""
    service.delete_cocktail(cocktail_id)


@router.get("/{cocktail_id}/print", response_class=HTMLResponse)
async def print_cocktail(
    cocktail_id: int,
    page: PageSize = "HalfLetterLandscape",
    orientation: Orientation = "landscape",
    margin: str = Query("8mm", pattern=r"^\d+(\.\d+)?(mm|cm|in|px|pt)$"),
    title: Optional[str] = Query(None, max_length=200),
    auto_print: bool = True,
    service: CocktailService = Depends(get_cocktail_service),
    _profile: Profile = Depends(require_role("viewer")),
):
    """인쇄용 레시피 카드 HTML"""
    cocktail = service.get_cocktail(cocktail_id)
    lines = service.spec_lines([cocktail.id]).get(cocktail.id, [])
    options = PrintOptions(
        page=page,
        orientation=orientation,
        margin=margin,
        title=title,
        auto_print=auto_print,
    )
    return HTMLResponse(content=render_one_pager(cocktail, lines, options))
