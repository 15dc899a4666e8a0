"""카탈로그 서비스 - method/glass/ice/garnish/unit 목록 관리"""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy.orm import Session

from barbook.core.exceptions import (
    CatalogItemNotFoundException,
    ConflictException,
    ValidationException,
)
from barbook.core.logging import logger
from barbook.repositories.impl.catalog_repository import CatalogRepository
from barbook.repositories.impl.cocktail_repository import CocktailRepository
from barbook.repositories.models import CATALOG_KINDS, CatalogItem
from barbook.utils.resource_loader import load_catalog_defaults


class CatalogService:
    """카탈로그 비즈니스 로직"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = CatalogRepository(db)
        self.cocktails = CocktailRepository(db)

    @staticmethod
    def _check_kind(kind: str) -> str:
        if kind not in CATALOG_KINDS:
            raise ValidationException("kind", f"unknown catalog kind: {kind}")
        return kind

    def list_items(self, kind: Optional[str] = None, active_only: bool = False) -> List[CatalogItem]:
        if kind:
            self._check_kind(kind)
        return self.repo.list(kind=kind, active_only=active_only)

    def get_item(self, item_id: int) -> CatalogItem:
        item = self.repo.get_by_id(item_id)
        if item is None:
            raise CatalogItemNotFoundException(item_id)
        return item

    def add_item(self, kind: str, name: str) -> CatalogItem:
        self._check_kind(kind)
        n = name.strip()
        if not n:
            raise ValidationException("name", "name is required")
        if self.repo.get_by_kind_name(kind, n) is not None:
            raise ConflictException(f'{kind} "{n}" already exists.', {"kind": kind, "name": n})

        item = CatalogItem(kind=kind, name=n, position=self.repo.max_position(kind) + 1, active=True)
        return self.repo.add(item)

    def _rewrite_usages(self, kind: str, old: str, new: str) -> int:
        """카탈로그 값을 쓰는 칵테일/레시피 라인 갱신 (commit 전)"""
        if kind == "unit":
            return self.repo.rename_units(old, new)
        return self.cocktails.rename_field_value(kind, old, new)

    def rename_item(self, item_id: int, name: str) -> CatalogItem:
        item = self.get_item(item_id)
        n = name.strip()
        if not n:
            raise ValidationException("name", "name is required")
        if n == item.name:
            return item
        if self.repo.get_by_kind_name(item.kind, n) is not None:
            raise ConflictException(f'{item.kind} "{n}" already exists.', {"kind": item.kind, "name": n})

        updated = self._rewrite_usages(item.kind, item.name, n)
        item.name = n
        self.repo.commit()
        logger.info(f"[Catalog] renamed {item.kind}/{item.id} ({updated} usages updated)")
        return item

    def toggle_item(self, item_id: int) -> CatalogItem:
        item = self.get_item(item_id)
        item.active = not item.active
        self.repo.commit()
        return item

    def delete_item(self, item_id: int) -> None:
        item = self.get_item(item_id)
        self.repo.delete(item)

    def reorder(self, kind: str, ordered_ids: List[int]) -> List[CatalogItem]:
        """kind 항목 전체의 순서를 ordered_ids 순으로 1..n 재배치"""
        self._check_kind(kind)
        items = {item.id: item for item in self.repo.list(kind=kind)}
        if len(set(ordered_ids)) != len(ordered_ids) or set(ordered_ids) != set(items):
            raise ValidationException("ordered_ids", f"must list every {kind} item exactly once")

        for position, item_id in enumerate(ordered_ids, start=1):
            items[item_id].position = position
        self.repo.commit()
        return self.repo.list(kind=kind)

    def merge_items(self, source_id: int, target_id: int) -> int:
        """source 사용처를 target 이름으로 바꾸고 source 삭제

        Returns:
            갱신된 사용처 수
        """
        if source_id == target_id:
            raise ValidationException("merge", "Source and target are the same.")
        source = self.get_item(source_id)
        target = self.get_item(target_id)
        if source.kind != target.kind:
            raise ValidationException("merge", "Source and target must be the same kind.")

        updated = self._rewrite_usages(source.kind, source.name, target.name)
        self.repo.delete(source)
        logger.info(f"[Catalog] merged {source_id} -> {target_id} ({updated} usages updated)")
        return updated

    def seed_defaults(self) -> int:
        """카탈로그가 비어 있을 때만 YAML 기본값 적재

        Returns:
            추가된 항목 수
        """
        if self.repo.count() > 0:
            return 0

        items: List[CatalogItem] = []
        for kind, names in load_catalog_defaults().items():
            if kind not in CATALOG_KINDS:
                logger.warning(f"[Catalog] skipping unknown kind in defaults: {kind}")
                continue
            for position, name in enumerate(names, start=1):
                items.append(CatalogItem(kind=kind, name=name, position=position, active=True))

        inserted = self.repo.add_many(items) if items else 0
        logger.info(f"[Catalog] seeded {inserted} default items")
        return inserted
