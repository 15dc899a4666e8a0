"""API 엔드포인트 패키지 - export only."""

from .errors import register_exception_handlers
from .routes import catalog_router, cocktail_router, health_router, ingredient_router, profile_router

__all__ = [
    "register_exception_handlers",
    "health_router",
    "cocktail_router",
    "ingredient_router",
    "catalog_router",
    "profile_router",
]
