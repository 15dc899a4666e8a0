"""재료 서비스 - 자동완성/관리 비즈니스 로직"""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy.orm import Session

from barbook.core.config import settings
from barbook.core.exceptions import (
    ConflictException,
    IngredientNotFoundException,
    ValidationException,
)
from barbook.core.logging import logger, sanitize_for_log
from barbook.repositories.impl.ingredient_repository import IngredientRepository
from barbook.repositories.models import Ingredient
from barbook.utils.text import FuzzySearchOptions, fuzzy_search_strings, score_match


def _validate_name(name: str) -> str:
    n = (name or "").strip()
    if not n:
        raise ValidationException("name", "Ingredient name cannot be empty.")
    if len(n) < 2:
        raise ValidationException("name", "Ingredient name must be at least 2 characters long.")
    if len(n) > 100:
        raise ValidationException("name", "Ingredient name must be less than 100 characters.")
    return n


class IngredientService:
    """재료 사전 비즈니스 로직"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = IngredientRepository(db)

    def list_ingredients(self, q: Optional[str] = None) -> List[Ingredient]:
        term = (q or "").strip()
        return self.repo.list(name_contains=term or None)

    def suggest(self, term: str, limit: Optional[int] = None) -> List[str]:
        """재료명 자동완성

        부분 문자열 히트를 먼저(score_match 순), 그다음 퍼지 히트(점수순)를
        중복 없이 합쳐 limit개까지 반환합니다.
        """
        t = (term or "").strip()
        if not t:
            return []

        names = self.repo.list_names(settings.ingredient_suggest_pool)
        if not names:
            return []

        fuzzy_hits = fuzzy_search_strings(
            names,
            t,
            FuzzySearchOptions(threshold=settings.ingredient_suggest_threshold),
        )
        exact_hits = [name for name in names if t.lower() in name.lower()]
        exact_hits.sort(key=lambda name: score_match(name, t))

        combined: List[str] = []
        for name in exact_hits + [hit.item for hit in fuzzy_hits]:
            if name not in combined:
                combined.append(name)

        return combined[: limit or settings.ingredient_suggest_limit]

    def get_ingredient(self, ingredient_id: int) -> Ingredient:
        ingredient = self.repo.get_by_id(ingredient_id)
        if ingredient is None:
            raise IngredientNotFoundException(ingredient_id)
        return ingredient

    def add_ingredient(self, name: str) -> Ingredient:
        n = _validate_name(name)
        if self.repo.get_by_name_ci(n) is not None:
            raise ConflictException(
                f'Ingredient "{n}" already exists. Please use a different name or check for similar ingredients.',
                {"name": n},
            )
        ingredient = self.repo.create(n)
        logger.info(f"[Ingredient] added: {sanitize_for_log(n, 60)}")
        return ingredient

    def rename_ingredient(self, ingredient_id: int, name: str) -> Ingredient:
        ingredient = self.get_ingredient(ingredient_id)
        n = _validate_name(name)
        if n == ingredient.name:
            return ingredient

        existing = self.repo.get_by_name_ci(n)
        if existing is not None and existing.id != ingredient.id:
            raise ConflictException(f'Ingredient "{n}" already exists.', {"name": n})
        return self.repo.rename(ingredient, n)

    def delete_ingredient(self, ingredient_id: int) -> None:
        ingredient = self.get_ingredient(ingredient_id)
        used = self.repo.usage_count(ingredient.id)
        if used:
            raise ConflictException(
                f'Ingredient "{ingredient.name}" is used by {used} recipe line(s). Merge it instead.',
                {"usage": used},
            )
        self.repo.delete(ingredient)

    def merge_ingredients(self, source: str, target: str) -> int:
        """source를 target으로 합침 (source 삭제)

        Returns:
            옮겨진 레시피 라인 수
        """
        s, t = (source or "").strip(), (target or "").strip()
        if not s or not t:
            raise ValidationException("merge", "Pick both ingredients.")
        if s.lower() == t.lower():
            raise ValidationException("merge", "Source and target are the same.")

        source_row = self.repo.get_by_name_ci(s)
        if source_row is None:
            raise IngredientNotFoundException(s)
        target_row = self.repo.get_by_name_ci(t)
        if target_row is None:
            raise IngredientNotFoundException(t)

        return self.repo.merge(source_row, target_row)

    def find_duplicates(self) -> List[dict]:
        """소문자/trim 기준으로 겹치는 재료명 그룹"""
        groups: dict[str, List[str]] = {}
        for ingredient in self.repo.list():
            groups.setdefault(ingredient.name.lower().strip(), []).append(ingredient.name)
        return [
            {"normalized": key, "duplicates": names}
            for key, names in groups.items()
            if len(names) > 1
        ]
