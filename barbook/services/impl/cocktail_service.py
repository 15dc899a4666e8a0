"""칵테일 서비스 - 목록/검색/저장 비즈니스 로직

검색 흐름:
    1. 이름 검색: 후보군 퍼지 검색 → 히트 ID로 제한 (히트 없으면 부분 문자열 검색)
    2. 속성 필터 (method / glass / special / price) + 정렬
    3. 재료 필터: 모든 필터가 각각 최소 하나의 재료와 매칭되어야 통과
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional

from sqlalchemy.orm import Session

from barbook.core.config import settings
from barbook.core.exceptions import (
    CocktailNotFoundException,
    ConflictException,
    ValidationException,
)
from barbook.core.logging import logger, sanitize_for_log
from barbook.repositories.impl.catalog_repository import CatalogRepository
from barbook.repositories.impl.cocktail_repository import CocktailRepository
from barbook.repositories.impl.ingredient_repository import IngredientRepository
from barbook.repositories.models import DEFAULT_UNITS, Cocktail, RecipeIngredient
from barbook.schemas.cocktail_schema import CocktailPayload, IngredientLine
from barbook.utils.text import (
    FuzzySearchOptions,
    fuzzy_search,
    is_fuzzy_match,
    is_non_empty,
    normalize_amount,
    normalize_search_term,
    split_words,
)

MAX_AMOUNT = 1000


@dataclass
class CocktailFilters:
    """목록 조회 필터"""

    name_search: str = ""
    method: str = "Any"
    glass: str = ""
    special_only: bool = False
    price_min: Optional[float] = None
    price_max: Optional[float] = None
    ingredients: List[str] = field(default_factory=list)
    q: str = ""
    sort: str = "special_desc"
    limit: Optional[int] = None


def ingredient_filter_matches(term: str, ingredient_name: str, threshold: float = 0.6) -> bool:
    """재료 필터 하나가 재료명과 매칭되는지 (퍼지 / 포함 / 공백 무시 포함)"""
    name = ingredient_name.lower()
    return (
        is_fuzzy_match(term, name, threshold)
        or term.lower() in name
        or normalize_search_term(term) in re.sub(r"\s+", "", name)
    )


def ingredient_query_matches(query: str, ingredient_name: str, threshold: float = 0.6) -> bool:
    """자유 입력 재료 검색 (단어 시작 / 포함 / 퍼지)"""
    typed = query.strip().lower()
    name = ingredient_name.lower()
    word_start = any(w.startswith(typed) for w in split_words(name))
    contains = typed in name or normalize_search_term(typed) in re.sub(r"\s+", "", name)
    return word_start or contains or is_fuzzy_match(query.strip(), ingredient_name, threshold)


def format_spec_line(line: RecipeIngredient) -> str:
    """'2 oz Gin' 형태"""
    name = line.ingredient.name if line.ingredient is not None else ""
    return f"{normalize_amount(line.amount)} {line.unit or ''} {name}".strip()


class CocktailService:
    """칵테일 비즈니스 로직"""

    def __init__(self, db: Session):
        self.db = db
        self.cocktails = CocktailRepository(db)
        self.ingredients = IngredientRepository(db)
        self.catalog = CatalogRepository(db)

    # ------------------------------------------------------------------
    # 조회
    # ------------------------------------------------------------------

    def list_cocktails(self, filters: Optional[CocktailFilters] = None) -> List[Cocktail]:
        f = filters or CocktailFilters()

        ids: Optional[List[int]] = None
        name_contains: Optional[str] = None
        name_term = f.name_search.strip()
        if name_term:
            pool = self.cocktails.list_for_name_search(settings.name_search_pool)
            hits = fuzzy_search(
                pool,
                name_term,
                lambda c: c.name,
                FuzzySearchOptions(threshold=settings.name_search_threshold),
            )
            if hits:
                ids = [h.item.id for h in hits]
            else:
                # 퍼지 히트가 없으면 부분 문자열 검색으로 폴백
                name_contains = name_term
            logger.debug(f"[Cocktail] name search hits={len(hits)}")

        method = f.method.strip()
        rows = self.cocktails.query(
            method=None if method in ("", "Any") else method,
            glass=f.glass.strip() or None,
            special_only=f.special_only,
            price_min=f.price_min,
            price_max=f.price_max,
            ids=ids,
            name_contains=name_contains,
            sort=f.sort,
            limit=f.limit or settings.cocktail_list_limit,
        )

        terms = self._dedupe_terms(f.ingredients)
        if terms and rows:
            rows = self._filter_by_ingredients(rows, terms)
        elif f.q.strip() and rows:
            rows = self._filter_by_query(rows, f.q)

        return rows

    def _dedupe_terms(self, terms: List[str]) -> List[str]:
        result: List[str] = []
        for term in terms:
            t = term.strip()
            if t and t not in result:
                result.append(t)
        return result

    def _filter_by_ingredients(self, rows: List[Cocktail], terms: List[str]) -> List[Cocktail]:
        names_by_cocktail = self.cocktails.ingredient_names_by_cocktail(c.id for c in rows)
        threshold = settings.ingredient_match_threshold
        return [
            c for c in rows
            if all(
                any(ingredient_filter_matches(t, n, threshold) for n in names_by_cocktail.get(c.id, []))
                for t in terms
            )
        ]

    def _filter_by_query(self, rows: List[Cocktail], query: str) -> List[Cocktail]:
        names_by_cocktail = self.cocktails.ingredient_names_by_cocktail(c.id for c in rows)
        threshold = settings.ingredient_match_threshold
        return [
            c for c in rows
            if any(ingredient_query_matches(query, n, threshold) for n in names_by_cocktail.get(c.id, []))
        ]

    def get_cocktail(self, cocktail_id: int) -> Cocktail:
        cocktail = self.cocktails.get_by_id(cocktail_id)
        if cocktail is None:
            raise CocktailNotFoundException(cocktail_id)
        return cocktail

    def spec_lines(self, cocktail_ids: List[int]) -> dict[int, List[str]]:
        """{cocktail_id: ["2 oz Gin", ...]} (position 순)"""
        result: dict[int, List[str]] = {cid: [] for cid in cocktail_ids}
        for line in self.cocktails.lines_for(cocktail_ids):
            result.setdefault(line.cocktail_id, []).append(format_spec_line(line))
        return result

    # ------------------------------------------------------------------
    # 저장
    # ------------------------------------------------------------------

    def allowed_units(self) -> List[str]:
        """활성 unit 카탈로그, 비어 있으면 기본 단위"""
        units = [item.name for item in self.catalog.list(kind="unit", active_only=True)]
        return units or list(DEFAULT_UNITS)

    def _validate_header(self, payload: CocktailPayload, cocktail_id: Optional[int]) -> None:
        name = payload.name
        if not name:
            raise ValidationException("name", "Name required")
        if len(name) < 2:
            raise ValidationException("name", "Cocktail name must be at least 2 characters long.")
        if len(name) > 100:
            raise ValidationException("name", "Cocktail name must be less than 100 characters.")
        if not payload.method:
            raise ValidationException("method", "Choose a method")

        existing = self.cocktails.get_by_name_ci(name)
        if existing is not None and existing.id != cocktail_id:
            raise ConflictException(
                f'Cocktail "{name}" already exists. Please use a different name.',
                {"name": name},
            )

    def _validate_lines(self, lines: List[IngredientLine]) -> List[IngredientLine]:
        """검증 후 저장 대상 라인만 반환 (재료명/분량 비어 있는 라인은 건너뜀)"""
        names = [ln.ingredient_name.lower() for ln in lines if ln.ingredient_name]
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            raise ValidationException(
                "lines",
                f"Duplicate ingredients found: {', '.join(duplicates)}. Please remove duplicates.",
            )

        units = self.allowed_units()
        kept: List[IngredientLine] = []
        for ln in lines:
            if not is_non_empty(ln.ingredient_name) or ln.amount is None or not math.isfinite(ln.amount):
                continue
            if not ln.unit:
                raise ValidationException(
                    "unit", f'Invalid unit for ingredient "{ln.ingredient_name}". Please select a valid unit.'
                )
            if ln.unit not in units:
                raise ValidationException(
                    "unit", f'Unit "{ln.unit}" is not valid. Please select from: {", ".join(units)}'
                )
            if ln.amount <= 0:
                raise ValidationException(
                    "amount", f'Amount for ingredient "{ln.ingredient_name}" must be greater than 0.'
                )
            if ln.amount > MAX_AMOUNT:
                raise ValidationException(
                    "amount",
                    f'Amount for ingredient "{ln.ingredient_name}" seems too large ({normalize_amount(ln.amount)}).',
                )
            kept.append(ln)
        return kept

    def save_cocktail(self, payload: CocktailPayload, cocktail_id: Optional[int] = None) -> Cocktail:
        """칵테일 생성(cocktail_id=None) 또는 수정, 레시피 라인은 전체 교체"""
        if cocktail_id is None:
            cocktail = Cocktail()
        else:
            cocktail = self.get_cocktail(cocktail_id)

        self._validate_header(payload, cocktail_id)
        lines = self._validate_lines(payload.lines)

        cocktail.name = payload.name
        cocktail.method = payload.method
        cocktail.glass = payload.glass
        cocktail.ice = payload.ice
        cocktail.garnish = payload.garnish
        cocktail.notes = payload.notes
        cocktail.price = payload.price
        cocktail.last_special_on = payload.last_special_on

        recipe_lines: List[RecipeIngredient] = []
        for position, ln in enumerate(lines, start=1):
            ingredient = self.ingredients.get_or_create(ln.ingredient_name)
            recipe_lines.append(
                RecipeIngredient(
                    ingredient=ingredient,
                    ingredient_id=ingredient.id,
                    amount=ln.amount,
                    unit=ln.unit,
                    position=position,
                )
            )

        saved = self.cocktails.save(cocktail, recipe_lines)
        action = "created" if cocktail_id is None else "updated"
        logger.info(f"[Cocktail] {action}: {sanitize_for_log(saved.name, 60)}")
        return saved

    def mark_special(self, cocktail_id: int, on_date: Optional[date]) -> Cocktail:
        cocktail = self.get_cocktail(cocktail_id)
        return self.cocktails.set_special(cocktail, on_date)

    def delete_cocktail(self, cocktail_id: int) -> None:
        cocktail = self.get_cocktail(cocktail_id)
        self.cocktails.delete(cocktail)
