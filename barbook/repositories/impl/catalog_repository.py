"""카탈로그 리포지토리 - DB 접근 로직"""
from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from barbook.core.exceptions import DatabaseException
from barbook.core.logging import logger
from barbook.repositories.models import CatalogItem, RecipeIngredient


class CatalogRepository:
    """카탈로그 항목 데이터 액세스 레이어"""

    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, item_id: int) -> Optional[CatalogItem]:
        return self.db.query(CatalogItem).filter(CatalogItem.id == item_id).first()

    def get_by_kind_name(self, kind: str, name: str) -> Optional[CatalogItem]:
        return self.db.query(CatalogItem).filter(
            CatalogItem.kind == kind,
            CatalogItem.name == name,
        ).first()

    def list(self, kind: Optional[str] = None, active_only: bool = False) -> List[CatalogItem]:
        q = self.db.query(CatalogItem)
        if kind:
            q = q.filter(CatalogItem.kind == kind)
        if active_only:
            q = q.filter(CatalogItem.active.is_(True))
        return q.order_by(CatalogItem.kind, CatalogItem.position).all()

    def count(self) -> int:
        return self.db.query(func.count(CatalogItem.id)).scalar() or 0

    def max_position(self, kind: str) -> int:
        return self.db.query(func.max(CatalogItem.position)).filter(
            CatalogItem.kind == kind
        ).scalar() or 0

    def add(self, item: CatalogItem) -> CatalogItem:
        try:
            self.db.add(item)
            self.db.commit()
            self.db.refresh(item)
            logger.info(f"Catalog item created: {item.kind}/{item.id}")
            return item
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to create catalog item: {e}")
            raise DatabaseException(f"Failed to create catalog item: {e}")

    def add_many(self, items: List[CatalogItem]) -> int:
        try:
            self.db.add_all(items)
            self.db.commit()
            return len(items)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to seed catalog: {e}")
            raise DatabaseException(f"Failed to seed catalog: {e}")

    def rename_units(self, old: str, new: str) -> int:
        """레시피 라인의 단위 값 일괄 변경 (commit은 호출부)"""
        return self.db.query(RecipeIngredient).filter(RecipeIngredient.unit == old).update(
            {RecipeIngredient.unit: new}, synchronize_session=False
        )

    def commit(self) -> None:
        try:
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to update catalog: {e}")
            raise DatabaseException(f"Failed to update catalog: {e}")

    def delete(self, item: CatalogItem) -> None:
        try:
            self.db.delete(item)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to delete catalog item: {e}")
            raise DatabaseException(f"Failed to delete catalog item: {e}")
