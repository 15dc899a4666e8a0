"""Repositories package - export only."""

from .impl import CatalogRepository, CocktailRepository, IngredientRepository, ProfileRepository

__all__ = ["CatalogRepository", "CocktailRepository", "IngredientRepository", "ProfileRepository"]
