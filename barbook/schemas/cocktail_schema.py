"""Pydantic 스키마 정의 (Validation Enhanced)"""
from datetime import date, datetime
from typing import Literal, Optional, List

from pydantic import BaseModel, ConfigDict, Field, field_validator

CatalogKind = Literal["method", "glass", "ice", "garnish", "unit"]
Role = Literal["viewer", "editor", "admin"]
SortOption = Literal["special_desc", "special_asc", "name_asc", "name_desc"]
PageSize = Literal["A5", "HalfLetter", "Letter", "HalfLetterLandscape"]
Orientation = Literal["portrait", "landscape"]


def _strip_optional(v: Optional[str]) -> Optional[str]:
    if v is None:
        return None
    v = v.strip()
    return v or None


# ============================================================================
# Cocktail
# ============================================================================

class IngredientLine(BaseModel):
    """레시피 라인 입력 (폼에서 분량은 문자열로 올 수 있음)"""
    ingredient_name: str = Field("", max_length=100, description="재료명")
    amount: Optional[float] = Field(None, description="분량")
    unit: str = Field("oz", max_length=50, description="단위")

    @field_validator("ingredient_name", "unit")
    @classmethod
    def strip_text(cls, v: str) -> str:
        return v.strip()

    @field_validator("amount", mode="before")
    @classmethod
    def coerce_amount(cls, v):
        # 빈 문자열은 '입력 안 함'
        if isinstance(v, str) and not v.strip():
            return None
        return v


class CocktailPayload(BaseModel):
    """칵테일 생성/수정 요청"""
    name: str = Field(..., max_length=200, description="칵테일명")
    method: str = Field("", max_length=100, description="기법 (Shaken, Stirred ...)")
    glass: Optional[str] = Field(None, max_length=100)
    ice: Optional[str] = Field(None, max_length=100)
    garnish: Optional[str] = Field(None, max_length=200)
    notes: Optional[str] = Field(None, max_length=5000)
    price: Optional[float] = Field(None, ge=0, le=10**6, description="가격")
    last_special_on: Optional[date] = Field(None, description="마지막 스페셜 날짜")
    lines: List[IngredientLine] = Field(default_factory=list, max_length=50)

    @field_validator("name", "method")
    @classmethod
    def strip_required(cls, v: str) -> str:
        return v.strip()

    @field_validator("glass", "ice", "garnish", "notes")
    @classmethod
    def strip_optional(cls, v: Optional[str]) -> Optional[str]:
        return _strip_optional(v)


class RecipeLineResponse(BaseModel):
    """레시피 라인 응답"""
    ingredient_id: int
    ingredient_name: str
    amount: float
    unit: str
    position: int
    display: str = Field(..., description="'2 oz Gin' 형태 표시 문자열")


class CocktailResponse(BaseModel):
    """칵테일 응답"""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    method: Optional[str] = None
    glass: Optional[str] = None
    ice: Optional[str] = None
    garnish: Optional[str] = None
    notes: Optional[str] = None
    price: Optional[float] = None
    last_special_on: Optional[date] = None
    created_at: Optional[datetime] = None
    specs: List[str] = Field(default_factory=list, description="표시용 레시피 라인")


class CocktailDetailResponse(CocktailResponse):
    lines: List[RecipeLineResponse] = Field(default_factory=list)


class CocktailListResponse(BaseModel):
    total: int
    items: List[CocktailResponse]


class SpecialRequest(BaseModel):
    """스페셜 날짜 지정 (None이면 해제)"""
    on_date: Optional[date] = None


# ============================================================================
# Ingredient
# ============================================================================

class IngredientPayload(BaseModel):
    name: str = Field(..., max_length=200)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        return v.strip()


class IngredientResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str


class IngredientMergeRequest(BaseModel):
    source: str = Field("", max_length=200, description="합칠 재료 (삭제됨)")
    target: str = Field("", max_length=200, description="남길 재료")


class IngredientMergeResponse(BaseModel):
    source: str
    target: str
    moved: int


class DuplicateGroup(BaseModel):
    normalized: str
    duplicates: List[str]


# ============================================================================
# Catalog
# ============================================================================

class CatalogItemPayload(BaseModel):
    kind: CatalogKind
    name: str = Field(..., min_length=1, max_length=100)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("이름은 공백만으로 구성될 수 없습니다")
        return v.strip()


class CatalogRenameRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("이름은 공백만으로 구성될 수 없습니다")
        return v.strip()


class CatalogReorderRequest(BaseModel):
    kind: CatalogKind
    ordered_ids: List[int] = Field(..., min_length=1)


class CatalogMergeRequest(BaseModel):
    source_id: int
    target_id: int


class CatalogItemResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    kind: str
    name: str
    position: int
    active: bool


# ============================================================================
# Profile
# ============================================================================

class ProfileUpdateRequest(BaseModel):
    role: Optional[Role] = None
    display_name: Optional[str] = Field(None, max_length=100)

    @field_validator("display_name")
    @classmethod
    def strip_display_name(cls, v: Optional[str]) -> Optional[str]:
        return _strip_optional(v)


class ProfileResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    user_id: str
    role: str
    display_name: Optional[str] = None
    created_at: Optional[datetime] = None


# ============================================================================
# Misc
# ============================================================================

class HealthResponse(BaseModel):
    """헬스 체크 응답"""
    status: str
    timestamp: datetime
    version: str
