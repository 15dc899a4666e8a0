"""스키마 검증 테스트"""
import pytest
from pydantic import ValidationError

from barbook.schemas.cocktail_schema import (
    CatalogItemPayload,
    CatalogReorderRequest,
    CocktailPayload,
    IngredientLine,
    ProfileUpdateRequest,
)


class TestIngredientLine:
    def test_blank_amount_is_none(self):
        assert IngredientLine(ingredient_name="Gin", amount="", unit="oz").amount is None

    def test_numeric_string_amount(self):
        assert IngredientLine(ingredient_name="Gin", amount="1.5").amount == 1.5

    def test_strips_text(self):
        line = IngredientLine(ingredient_name="  Gin ", amount=2, unit=" oz ")
        assert line.ingredient_name == "Gin"
        assert line.unit == "oz"

    def test_invalid_amount(self):
        with pytest.raises(ValidationError):
            IngredientLine(ingredient_name="Gin", amount="two")


class TestCocktailPayload:
    def test_strips_and_blanks_optional(self):
        payload = CocktailPayload(name="  Gimlet ", method=" Shaken", glass="  ", notes=" cold ")

        assert payload.name == "Gimlet"
        assert payload.method == "Shaken"
        assert payload.glass is None
        assert payload.notes == "cold"

    def test_negative_price(self):
        with pytest.raises(ValidationError):
            CocktailPayload(name="Gimlet", method="Shaken", price=-1)

    def test_too_many_lines(self):
        lines = [{"ingredient_name": f"I{i}", "amount": 1} for i in range(51)]
        with pytest.raises(ValidationError):
            CocktailPayload(name="Gimlet", method="Shaken", lines=lines)


class TestCatalogSchemas:
    def test_unknown_kind(self):
        with pytest.raises(ValidationError):
            CatalogItemPayload(kind="straw", name="Paper")

    def test_blank_name(self):
        with pytest.raises(ValidationError):
            CatalogItemPayload(kind="glass", name="   ")

    def test_reorder_needs_ids(self):
        with pytest.raises(ValidationError):
            CatalogReorderRequest(kind="glass", ordered_ids=[])


class TestProfileUpdateRequest:
    def test_unknown_role(self):
        with pytest.raises(ValidationError):
            ProfileUpdateRequest(role="owner")

    def test_blank_display_name(self):
        assert ProfileUpdateRequest(display_name="  ").display_name is None
