"""API routes package."""

from .health_routes import router as health_router
from .cocktail_routes import router as cocktail_router
from .ingredient_routes import router as ingredient_router
from .catalog_routes import router as catalog_router
from .profile_routes import router as profile_router

__all__ = ["health_router", "cocktail_router", "ingredient_router", "catalog_router", "profile_router"]
