"""Services implementation package."""

from .catalog_service import CatalogService
from .cocktail_service import CocktailFilters, CocktailService
from .ingredient_service import IngredientService
from .print_service import PrintOptions, compute_page_size, render_one_pager
from .profile_service import ProfileService

__all__ = [
    "CatalogService",
    "CocktailFilters",
    "CocktailService",
    "IngredientService",
    "PrintOptions",
    "ProfileService",
    "compute_page_size",
    "render_one_pager",
]
