"""칵테일 서비스 테스트 (in-memory SQLite)"""
from datetime import date

import pytest

from barbook.core.exceptions import (
    CocktailNotFoundException,
    ConflictException,
    ValidationException,
)
from barbook.schemas.cocktail_schema import CocktailPayload, IngredientLine
from barbook.services.impl.cocktail_service import (
    CocktailFilters,
    CocktailService,
    ingredient_filter_matches,
    ingredient_query_matches,
)


def _payload(name, method="Shaken", lines=(), **kwargs):
    return CocktailPayload(
        name=name,
        method=method,
        lines=[IngredientLine(ingredient_name=n, amount=a, unit=u) for n, a, u in lines],
        **kwargs,
    )


@pytest.fixture
def service(db_session):
    return CocktailService(db_session)


@pytest.fixture
def menu(service):
    """Gimlet / Daiquiri / Negroni"""
    gimlet = service.save_cocktail(
        _payload("Gimlet", lines=[("Gin", 2, "oz"), ("Lime Juice", 0.75, "oz")], glass="Coupe", price=12)
    )
    daiquiri = service.save_cocktail(
        _payload("Daiquiri", lines=[("Rum", 2, "oz"), ("Lime Juice", 1, "oz")], glass="Coupe", price=11)
    )
    negroni = service.save_cocktail(
        _payload(
            "Negroni",
            method="Stirred",
            lines=[("Gin", 1, "oz"), ("Campari", 1, "oz"), ("Sweet Vermouth", 1, "oz")],
            glass="Rocks",
            price=14,
        )
    )
    return {"gimlet": gimlet.id, "daiquiri": daiquiri.id, "negroni": negroni.id}


def _names(rows):
    return [c.name for c in rows]


class TestIngredientMatching:
    """재료 필터 매칭 규칙"""

    def test_filter_contains(self):
        assert ingredient_filter_matches("lime", "Lime Juice")

    def test_filter_ignores_spaces(self):
        assert ingredient_filter_matches("limejuice", "Lime Juice")

    def test_filter_typo(self):
        assert ingredient_filter_matches("campri", "Campari")

    def test_filter_unrelated(self):
        assert not ingredient_filter_matches("gin", "Lime Juice")

    def test_query_word_start(self):
        assert ingredient_query_matches("verm", "Sweet Vermouth")
        assert not ingredient_query_matches("verm", "Gin")


class TestSaveCocktail:
    """생성/수정/검증"""

    def test_create_with_lines(self, service):
        cocktail = service.save_cocktail(
            _payload("Gimlet", lines=[("Gin", 2, "oz"), ("Lime Juice", 0.75, "oz")])
        )

        assert cocktail.id is not None
        assert service.spec_lines([cocktail.id]) == {cocktail.id: ["2 oz Gin", "0.75 oz Lime Juice"]}

    def test_blank_lines_are_skipped(self, service):
        cocktail = service.save_cocktail(
            _payload("Gimlet", lines=[("Gin", 2, "oz"), ("", 1, "oz"), ("Lime Juice", None, "oz")])
        )
        assert service.spec_lines([cocktail.id])[cocktail.id] == ["2 oz Gin"]

    def test_ingredients_reused_case_insensitively(self, service, db_session):
        service.save_cocktail(_payload("Gimlet", lines=[("Gin", 2, "oz")]))
        service.save_cocktail(_payload("Martini", method="Stirred", lines=[("gin", 2, "oz")]))

        assert [i.name for i in service.ingredients.list()] == ["Gin"]

    def test_update_replaces_lines(self, service):
        cocktail = service.save_cocktail(_payload("Gimlet", lines=[("Gin", 2, "oz"), ("Lime Juice", 1, "oz")]))
        service.save_cocktail(
            _payload("Gimlet", lines=[("Vodka", 2, "oz")], notes="Vodka version"), cocktail_id=cocktail.id
        )

        updated = service.get_cocktail(cocktail.id)
        assert updated.notes == "Vodka version"
        assert service.spec_lines([cocktail.id])[cocktail.id] == ["2 oz Vodka"]

    def test_name_required(self, service):
        with pytest.raises(ValidationException):
            service.save_cocktail(_payload("  "))

    def test_name_too_short(self, service):
        with pytest.raises(ValidationException):
            service.save_cocktail(_payload("G"))

    def test_method_required(self, service):
        with pytest.raises(ValidationException) as exc_info:
            service.save_cocktail(_payload("Gimlet", method=""))
        assert exc_info.value.details["field"] == "method"

    def test_duplicate_name_case_insensitive(self, service):
        service.save_cocktail(_payload("Gimlet"))
        with pytest.raises(ConflictException):
            service.save_cocktail(_payload("gimlet"))

    def test_update_keeps_own_name(self, service):
        cocktail = service.save_cocktail(_payload("Gimlet"))
        saved = service.save_cocktail(_payload("Gimlet", price=13), cocktail_id=cocktail.id)
        assert saved.price == 13

    def test_duplicate_ingredients(self, service):
        with pytest.raises(ValidationException) as exc_info:
            service.save_cocktail(_payload("Gimlet", lines=[("Gin", 2, "oz"), ("gin", 1, "oz")]))
        assert "gin" in exc_info.value.message

    def test_unknown_unit(self, service):
        with pytest.raises(ValidationException) as exc_info:
            service.save_cocktail(_payload("Gimlet", lines=[("Gin", 2, "cup")]))
        assert exc_info.value.details["field"] == "unit"

    def test_non_positive_amount(self, service):
        with pytest.raises(ValidationException):
            service.save_cocktail(_payload("Gimlet", lines=[("Gin", 0, "oz")]))

    def test_amount_too_large(self, service):
        with pytest.raises(ValidationException):
            service.save_cocktail(_payload("Gimlet", lines=[("Gin", 1001, "oz")]))

    @pytest.mark.parametrize("amount", ["nan", "inf", "-inf"])
    def test_non_finite_amount_is_skipped(self, service, amount):
        cocktail = service.save_cocktail(
            _payload("Gimlet", lines=[("Gin", 2, "oz"), ("Lime Juice", amount, "oz")])
        )
        assert service.spec_lines([cocktail.id])[cocktail.id] == ["2 oz Gin"]

    def test_update_missing(self, service):
        with pytest.raises(CocktailNotFoundException):
            service.save_cocktail(_payload("Gimlet"), cocktail_id=999)


class TestListCocktails:
    """목록 필터/검색/정렬"""

    def test_default_sort_by_name_when_no_specials(self, service, menu):
        assert _names(service.list_cocktails()) == ["Daiquiri", "Gimlet", "Negroni"]

    def test_fuzzy_name_search(self, service, menu):
        rows = service.list_cocktails(CocktailFilters(name_search="gimlt"))
        assert _names(rows) == ["Gimlet"]

    def test_name_search_without_hits(self, service, menu):
        assert service.list_cocktails(CocktailFilters(name_search="zzzz")) == []

    def test_method_filter(self, service, menu):
        assert _names(service.list_cocktails(CocktailFilters(method="Stirred"))) == ["Negroni"]
        assert len(service.list_cocktails(CocktailFilters(method="Any"))) == 3

    def test_glass_and_price(self, service, menu):
        rows = service.list_cocktails(CocktailFilters(glass="Coupe", price_min=11.5))
        assert _names(rows) == ["Gimlet"]

    def test_every_ingredient_filter_must_match(self, service, menu):
        rows = service.list_cocktails(CocktailFilters(ingredients=["gin", "lime"]))
        assert _names(rows) == ["Gimlet"]

    def test_single_ingredient_filter(self, service, menu):
        rows = service.list_cocktails(CocktailFilters(ingredients=["lime"]))
        assert _names(rows) == ["Daiquiri", "Gimlet"]

    def test_ingredient_filter_typo(self, service, menu):
        rows = service.list_cocktails(CocktailFilters(ingredients=["campri"]))
        assert _names(rows) == ["Negroni"]

    def test_free_text_query(self, service, menu):
        rows = service.list_cocktails(CocktailFilters(q="verm"))
        assert _names(rows) == ["Negroni"]

    def test_specials_sorting(self, service, menu):
        service.mark_special(menu["negroni"], date(2024, 6, 1))
        service.mark_special(menu["daiquiri"], date(2024, 1, 1))

        assert _names(service.list_cocktails()) == ["Negroni", "Daiquiri", "Gimlet"]
        assert _names(service.list_cocktails(CocktailFilters(sort="special_asc"))) == [
            "Gimlet",
            "Daiquiri",
            "Negroni",
        ]
        assert _names(service.list_cocktails(CocktailFilters(special_only=True))) == ["Negroni", "Daiquiri"]

    def test_name_desc(self, service, menu):
        assert _names(service.list_cocktails(CocktailFilters(sort="name_desc"))) == [
            "Negroni",
            "Gimlet",
            "Daiquiri",
        ]

    def test_limit(self, service, menu):
        assert len(service.list_cocktails(CocktailFilters(sort="name_asc", limit=2))) == 2


class TestSpecialAndDelete:
    def test_clear_special(self, service, menu):
        service.mark_special(menu["gimlet"], date(2024, 5, 1))
        cocktail = service.mark_special(menu["gimlet"], None)
        assert cocktail.last_special_on is None

    def test_delete(self, service, menu):
        service.delete_cocktail(menu["gimlet"])

        with pytest.raises(CocktailNotFoundException):
            service.get_cocktail(menu["gimlet"])
        assert service.spec_lines([menu["gimlet"]]) == {menu["gimlet"]: []}
