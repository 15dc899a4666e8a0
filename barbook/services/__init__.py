"""비즈니스 로직 서비스 - export only."""

from .impl import (
    CatalogService,
    CocktailFilters,
    CocktailService,
    IngredientService,
    PrintOptions,
    ProfileService,
    render_one_pager,
)

__all__ = [
    "CatalogService",
    "CocktailFilters",
    "CocktailService",
    "IngredientService",
    "PrintOptions",
    "ProfileService",
    "render_one_pager",
]
