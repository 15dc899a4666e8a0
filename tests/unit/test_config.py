"""설정 검증 테스트"""
import pytest
from pydantic import ValidationError

from barbook.core.config import Settings


class TestSettings:
    def test_defaults(self):
        s = Settings(_env_file=None)

        assert s.name_search_threshold == 0.4
        assert s.ingredient_suggest_threshold == 0.3
        assert s.ingredient_match_threshold == 0.6
        assert s.ingredient_suggest_limit == 10

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("NAME_SEARCH_THRESHOLD", "0.5")
        assert Settings(_env_file=None).name_search_threshold == 0.5

    @pytest.mark.parametrize("value", [-0.1, 1.5])
    def test_threshold_range(self, value):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, name_search_threshold=value)

    def test_limits_positive(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, ingredient_suggest_limit=0)

    def test_database_url_required(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, database_url="  ")
