"""Repositories implementation package."""

from .catalog_repository import CatalogRepository
from .cocktail_repository import CocktailRepository
from .ingredient_repository import IngredientRepository
from .profile_repository import ProfileRepository

__all__ = ["CatalogRepository", "CocktailRepository", "IngredientRepository", "ProfileRepository"]
