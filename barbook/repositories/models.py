"""데이터베이스 모델"""
from sqlalchemy import (
    Boolean,
    Column,
    Date,
    Float,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
    TIMESTAMP,
    UniqueConstraint,
    func,
)
from sqlalchemy.orm import relationship

from barbook.core.database import Base


ROLES = ("viewer", "editor", "admin")
CATALOG_KINDS = ("method", "glass", "ice", "garnish", "unit")
DEFAULT_UNITS = ("oz", "barspoon", "dash", "drop", "ml")


class Cocktail(Base):
    """칵테일 테이블"""

    __tablename__ = "cocktails"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False, unique=True, index=True)
    method = Column(String(100), nullable=True)
    glass = Column(String(100), nullable=True)
    ice = Column(String(100), nullable=True)
    garnish = Column(String(200), nullable=True)
    notes = Column(Text, nullable=True)
    price = Column(Float, nullable=True)
    last_special_on = Column(Date, nullable=True, index=True)  # 마지막 스페셜 메뉴 날짜
    created_at = Column(TIMESTAMP, server_default=func.now())

    lines = relationship(
        "RecipeIngredient",
        back_populates="cocktail",
        cascade="all, delete-orphan",
        order_by="RecipeIngredient.position",
    )

    def __repr__(self) -> str:
        return f"<Cocktail(id={self.id}, name={self.name})>"


class Ingredient(Base):
    """재료 사전 테이블"""

    __tablename__ = "ingredients"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False, unique=True, index=True)
    created_at = Column(TIMESTAMP, server_default=func.now())

    def __repr__(self) -> str:
        return f"<Ingredient(id={self.id}, name={self.name})>"


class RecipeIngredient(Base):
    """레시피 라인 (칵테일 ↔ 재료, 순서/분량/단위)"""

    __tablename__ = "recipe_ingredients"

    id = Column(Integer, primary_key=True, index=True)
    cocktail_id = Column(Integer, ForeignKey("cocktails.id", ondelete="CASCADE"), nullable=False, index=True)
    ingredient_id = Column(Integer, ForeignKey("ingredients.id"), nullable=False, index=True)
    amount = Column(Float, nullable=False)
    unit = Column(String(50), nullable=False)
    position = Column(Integer, nullable=False, default=1)
    created_at = Column(TIMESTAMP, server_default=func.now())

    cocktail = relationship("Cocktail", back_populates="lines")
    ingredient = relationship("Ingredient", lazy="joined")

    __table_args__ = (
        Index("idx_recipe_cocktail_position", "cocktail_id", "position"),
    )

    def __repr__(self) -> str:
        return f"<RecipeIngredient(cocktail={self.cocktail_id}, ingredient={self.ingredient_id})>"


class CatalogItem(Base):
    """설정 카탈로그 (method / glass / ice / garnish / unit)"""

    __tablename__ = "catalog_items"

    id = Column(Integer, primary_key=True, index=True)
    kind = Column(String(20), nullable=False, index=True)
    name = Column(String(100), nullable=False)
    position = Column(Integer, nullable=False, default=1)
    active = Column(Boolean, nullable=False, default=True)
    created_at = Column(TIMESTAMP, server_default=func.now())

    __table_args__ = (
        UniqueConstraint("kind", "name", name="uq_catalog_kind_name"),
        Index("idx_catalog_kind_position", "kind", "position"),
    )

    def __repr__(self) -> str:
        return f"<CatalogItem(kind={self.kind}, name={self.name}, position={self.position})>"


class Profile(Base):
    """사용자 프로필 (역할)"""

    __tablename__ = "profiles"

    user_id = Column(String(64), primary_key=True)
    role = Column(String(20), nullable=False, default="viewer")  # viewer, editor, admin
    display_name = Column(String(100), nullable=True)
    created_at = Column(TIMESTAMP, server_default=func.now(), index=True)

    def __repr__(self) -> str:
        return f"<Profile(user_id={self.user_id}, role={self.role})>"
