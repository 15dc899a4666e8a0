"""카탈로그 서비스 테스트"""
import pytest

from barbook.core.exceptions import (
    CatalogItemNotFoundException,
    ConflictException,
    ValidationException,
)
from barbook.schemas.cocktail_schema import CocktailPayload, IngredientLine
from barbook.services.impl.catalog_service import CatalogService
from barbook.services.impl.cocktail_service import CocktailService
from barbook.utils.resource_loader import load_catalog_defaults


@pytest.fixture
def service(db_session):
    return CatalogService(db_session)


@pytest.fixture
def glasses(service):
    return [service.add_item("glass", name) for name in ["Coupe", "Rocks", "Highball"]]


class TestSeedDefaults:
    """YAML 기본값 적재"""

    def test_defaults_file(self):
        defaults = load_catalog_defaults()
        assert set(defaults) == {"method", "glass", "ice", "garnish", "unit"}
        assert "Shaken" in defaults["method"]
        assert defaults["unit"] == ["oz", "barspoon", "dash", "drop", "ml"]

    def test_seed_once(self, service):
        expected = sum(len(names) for names in load_catalog_defaults().values())

        assert service.seed_defaults() == expected
        assert service.seed_defaults() == 0
        assert [i.name for i in service.list_items("unit")] == ["oz", "barspoon", "dash", "drop", "ml"]

    def test_skip_when_not_empty(self, service):
        service.add_item("glass", "Tiki Mug")
        assert service.seed_defaults() == 0


class TestCatalogItems:
    def test_positions_increase(self, glasses):
        assert [g.position for g in glasses] == [1, 2, 3]

    def test_unknown_kind(self, service):
        with pytest.raises(ValidationException):
            service.add_item("straw", "Paper")
        with pytest.raises(ValidationException):
            service.list_items("straw")

    def test_duplicate(self, service, glasses):
        with pytest.raises(ConflictException):
            service.add_item("glass", "Coupe")

    def test_same_name_other_kind_is_fine(self, service, glasses):
        item = service.add_item("garnish", "Coupe")
        assert item.kind == "garnish"

    def test_toggle_and_active_only(self, service, glasses):
        service.toggle_item(glasses[1].id)

        assert [i.name for i in service.list_items("glass", active_only=True)] == ["Coupe", "Highball"]
        assert service.toggle_item(glasses[1].id).active is True

    def test_delete(self, service, glasses):
        service.delete_item(glasses[0].id)
        with pytest.raises(CatalogItemNotFoundException):
            service.get_item(glasses[0].id)


class TestRenameAndMerge:
    """이름 변경 / 합치기는 사용처까지 갱신"""

    def _cocktail(self, db_session, name, glass, unit="oz"):
        return CocktailService(db_session).save_cocktail(
            CocktailPayload(
                name=name,
                method="Shaken",
                glass=glass,
                lines=[IngredientLine(ingredient_name="Gin", amount=2, unit=unit)],
            )
        )

    def test_rename_updates_cocktails(self, service, glasses, db_session):
        cocktail = self._cocktail(db_session, "Gimlet", "Coupe")

        renamed = service.rename_item(glasses[0].id, "Coupette")

        assert renamed.name == "Coupette"
        db_session.refresh(cocktail)
        assert cocktail.glass == "Coupette"

    def test_rename_unit_updates_lines(self, service, db_session):
        ml = service.add_item("unit", "ml")
        service.add_item("unit", "oz")
        cocktail = self._cocktail(db_session, "Gimlet", None, unit="ml")

        service.rename_item(ml.id, "mL")

        specs = CocktailService(db_session).spec_lines([cocktail.id])
        assert specs[cocktail.id] == ["2 mL Gin"]

    def test_rename_conflict(self, service, glasses):
        with pytest.raises(ConflictException):
            service.rename_item(glasses[0].id, "Rocks")

    def test_merge(self, service, glasses, db_session):
        cocktail = self._cocktail(db_session, "Old Fashioned", "Highball")

        updated = service.merge_items(glasses[2].id, glasses[1].id)

        assert updated == 1
        db_session.refresh(cocktail)
        assert cocktail.glass == "Rocks"
        assert [i.name for i in service.list_items("glass")] == ["Coupe", "Rocks"]

    def test_merge_same_item(self, service, glasses):
        with pytest.raises(ValidationException):
            service.merge_items(glasses[0].id, glasses[0].id)

    def test_merge_across_kinds(self, service, glasses):
        ice = service.add_item("ice", "Crushed")
        with pytest.raises(ValidationException):
            service.merge_items(ice.id, glasses[0].id)


class TestReorder:
    def test_reorder(self, service, glasses):
        ids = [glasses[2].id, glasses[0].id, glasses[1].id]
        items = service.reorder("glass", ids)

        assert [i.name for i in items] == ["Highball", "Coupe", "Rocks"]
        assert [i.position for i in items] == [1, 2, 3]

    def test_reorder_requires_every_item(self, service, glasses):
        with pytest.raises(ValidationException):
            service.reorder("glass", [glasses[0].id, glasses[1].id])

    def test_reorder_rejects_duplicates(self, service, glasses):
        with pytest.raises(ValidationException):
            service.reorder("glass", [glasses[0].id, glasses[0].id, glasses[1].id, glasses[2].id])
