"""재료 리포지토리 - DB 접근 로직"""
from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from barbook.core.exceptions import DatabaseException
from barbook.core.logging import logger
from barbook.repositories.models import Ingredient, RecipeIngredient


class IngredientRepository:
    """재료 사전 데이터 액세스 레이어"""

    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, ingredient_id: int) -> Optional[Ingredient]:
        return self.db.query(Ingredient).filter(Ingredient.id == ingredient_id).first()

    def get_by_name(self, name: str) -> Optional[Ingredient]:
        return self.db.query(Ingredient).filter(Ingredient.name == name).first()

    def get_by_name_ci(self, name: str) -> Optional[Ingredient]:
        """이름으로 조회 (대소문자 무시)"""
        return self.db.query(Ingredient).filter(
            func.lower(Ingredient.name) == name.lower()
        ).first()

    def list(self, name_contains: Optional[str] = None) -> List[Ingredient]:
        q = self.db.query(Ingredient)
        if name_contains:
            q = q.filter(Ingredient.name.ilike(f"%{name_contains}%"))
        return q.order_by(Ingredient.name).all()

    def list_names(self, limit: int) -> List[str]:
        rows = self.db.query(Ingredient.name).order_by(Ingredient.name).limit(limit).all()
        return [row[0] for row in rows]

    def usage_count(self, ingredient_id: int) -> int:
        """이 재료를 쓰는 레시피 라인 수"""
        return self.db.query(func.count(RecipeIngredient.id)).filter(
            RecipeIngredient.ingredient_id == ingredient_id
        ).scalar() or 0

    def get_or_create(self, name: str) -> Ingredient:
        """이름으로 upsert, 대소문자만 다른 기존 재료는 재사용 (commit은 호출부)"""
        ingredient = self.get_by_name_ci(name)
        if ingredient is None:
            ingredient = Ingredient(name=name)
            self.db.add(ingredient)
            self.db.flush()
        return ingredient

    def create(self, name: str) -> Ingredient:
        try:
            ingredient = Ingredient(name=name)
            self.db.add(ingredient)
            self.db.commit()
            self.db.refresh(ingredient)
            logger.info(f"Ingredient created: {ingredient.id}")
            return ingredient
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to create ingredient: {e}")
            raise DatabaseException(f"Failed to create ingredient: {e}")

    def rename(self, ingredient: Ingredient, name: str) -> Ingredient:
        try:
            ingredient.name = name
            self.db.commit()
            self.db.refresh(ingredient)
            return ingredient
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to rename ingredient: {e}")
            raise DatabaseException(f"Failed to rename ingredient: {e}")

    def delete(self, ingredient: Ingredient) -> None:
        try:
            self.db.delete(ingredient)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to delete ingredient: {e}")
            raise DatabaseException(f"Failed to delete ingredient: {e}")

    def merge(self, source: Ingredient, target: Ingredient) -> int:
        """source 라인을 target으로 옮기고 source 삭제

        이미 target을 쓰는 칵테일은 기존 target 라인을 유지하고 source 라인만 지운다.

        Returns:
            옮겨진 라인 수
        """
        source_id, target_id = source.id, target.id
        try:
            target_cocktails = {
                row[0]
                for row in self.db.query(RecipeIngredient.cocktail_id).filter(
                    RecipeIngredient.ingredient_id == target_id
                ).all()
            }
            moved = 0
            source_lines = self.db.query(RecipeIngredient).filter(
                RecipeIngredient.ingredient_id == source_id
            ).all()
            for line in source_lines:
                if line.cocktail_id in target_cocktails:
                    self.db.delete(line)
                else:
                    line.ingredient_id = target_id
                    line.ingredient = target
                    moved += 1
            self.db.flush()
            self.db.delete(source)
            self.db.commit()
            logger.info(f"Ingredient merged: {source_id} -> {target_id} ({moved} lines)")
            return moved
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to merge ingredients: {e}")
            raise DatabaseException(f"Failed to merge ingredients: {e}")
