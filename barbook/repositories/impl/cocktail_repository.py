"""칵테일 리포지토리 - DB 접근 로직"""
from datetime import date
from typing import Iterable, List, Optional

from sqlalchemy import asc, desc, func, nulls_first, nulls_last
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from barbook.core.exceptions import DatabaseException
from barbook.core.logging import logger
from barbook.repositories.models import Cocktail, Ingredient, RecipeIngredient


class CocktailRepository:
    """칵테일 / 레시피 라인 데이터 액세스 레이어"""

    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, cocktail_id: int) -> Optional[Cocktail]:
        return self.db.query(Cocktail).filter(Cocktail.id == cocktail_id).first()

    def get_by_name_ci(self, name: str) -> Optional[Cocktail]:
        """이름으로 조회 (대소문자 무시)"""
        return self.db.query(Cocktail).filter(
            func.lower(Cocktail.name) == name.lower()
        ).first()

    def list_for_name_search(self, limit: int) -> List[Cocktail]:
        """이름 퍼지 검색 후보군"""
        return self.db.query(Cocktail).order_by(Cocktail.id).limit(limit).all()

    def query(
        self,
        method: Optional[str] = None,
        glass: Optional[str] = None,
        special_only: bool = False,
        price_min: Optional[float] = None,
        price_max: Optional[float] = None,
        ids: Optional[Iterable[int]] = None,
        name_contains: Optional[str] = None,
        sort: str = "special_desc",
        limit: int = 500,
    ) -> List[Cocktail]:
        """필터 + 정렬 조회"""
        q = self.db.query(Cocktail)

        if method:
            q = q.filter(Cocktail.method == method)
        if glass:
            q = q.filter(Cocktail.glass == glass)
        if special_only:
            q = q.filter(Cocktail.last_special_on.isnot(None))
        if price_min is not None:
            q = q.filter(Cocktail.price >= price_min)
        if price_max is not None:
            q = q.filter(Cocktail.price <= price_max)
        if ids is not None:
            q = q.filter(Cocktail.id.in_(list(ids)))
        if name_contains:
            q = q.filter(Cocktail.name.ilike(f"%{name_contains}%"))

        if sort == "name_asc":
            q = q.order_by(asc(Cocktail.name))
        elif sort == "name_desc":
            q = q.order_by(desc(Cocktail.name))
        elif sort == "special_asc":
            q = q.order_by(nulls_first(asc(Cocktail.last_special_on)), asc(Cocktail.name))
        else:
            q = q.order_by(nulls_last(desc(Cocktail.last_special_on)), asc(Cocktail.name))

        return q.limit(limit).all()

    def ingredient_names_by_cocktail(self, cocktail_ids: Iterable[int]) -> dict[int, List[str]]:
        """{cocktail_id: [재료명, ...]}"""
        ids = list(cocktail_ids)
        if not ids:
            return {}
        rows = self.db.query(RecipeIngredient.cocktail_id, Ingredient.name).join(
            Ingredient, Ingredient.id == RecipeIngredient.ingredient_id
        ).filter(
            RecipeIngredient.cocktail_id.in_(ids)
        ).all()

        result: dict[int, List[str]] = {}
        for cocktail_id, name in rows:
            result.setdefault(cocktail_id, []).append(name)
        return result

    def lines_for(self, cocktail_ids: Iterable[int]) -> List[RecipeIngredient]:
        """레시피 라인 (position 순)"""
        ids = list(cocktail_ids)
        if not ids:
            return []
        return self.db.query(RecipeIngredient).filter(
            RecipeIngredient.cocktail_id.in_(ids)
        ).order_by(
            RecipeIngredient.cocktail_id, RecipeIngredient.position
        ).all()

    def save(self, cocktail: Cocktail, lines: List[RecipeIngredient]) -> Cocktail:
        """칵테일 저장 + 레시피 라인 전체 교체"""
        try:
            # delete-orphan cascade로 기존 라인 삭제
            cocktail.lines = lines
            self.db.add(cocktail)
            self.db.commit()
            self.db.refresh(cocktail)
            logger.info(f"Cocktail saved: {cocktail.id} ({len(lines)} lines)")
            return cocktail
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to save cocktail: {e}")
            raise DatabaseException(f"Failed to save cocktail: {e}")

    def set_special(self, cocktail: Cocktail, on_date: Optional[date]) -> Cocktail:
        try:
            cocktail.last_special_on = on_date
            self.db.commit()
            self.db.refresh(cocktail)
            return cocktail
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to update special date: {e}")
            raise DatabaseException(f"Failed to update special date: {e}")

    def delete(self, cocktail: Cocktail) -> None:
        cocktail_id = cocktail.id
        try:
            self.db.delete(cocktail)
            self.db.commit()
            logger.info(f"Cocktail deleted: {cocktail_id}")
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to delete cocktail: {e}")
            raise DatabaseException(f"Failed to delete cocktail: {e}")

    def rename_field_value(self, field: str, old: str, new: str) -> int:
        """method/glass/ice/garnish 컬럼 값 일괄 변경 (commit은 호출부)"""
        column = getattr(Cocktail, field)
        return self.db.query(Cocktail).filter(column == old).update(
            {column: new}, synchronize_session=False
        )
