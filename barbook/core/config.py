"""설정 관리 - 환경 변수 로드 및 검증"""
from pydantic_settings import BaseSettings
from pydantic import field_validator


class Settings(BaseSettings):
    """애플리케이션 설정"""

    # 데이터베이스 (운영은 PostgreSQL, 로컬/테스트는 SQLite)
    database_url: str = "sqlite:///./barbook.db"

    # API
    api_title: str = "Barbook 칵테일 카탈로그"
    api_version: str = "1.0.0"
    api_description: str = "칵테일 레시피/재료/카탈로그 관리 및 퍼지 검색 API"

    # 퍼지 검색 임계값 (0~1)
    # - name_search_threshold: 칵테일 이름 검색
    # - ingredient_suggest_threshold: 재료 자동완성 (낮을수록 결과 많음)
    # - ingredient_match_threshold: 재료 필터 매칭
    name_search_threshold: float = 0.4
    ingredient_suggest_threshold: float = 0.3
    ingredient_match_threshold: float = 0.6

    # 조회 한도
    name_search_pool: int = 1000
    ingredient_suggest_pool: int = 200
    ingredient_suggest_limit: int = 10
    cocktail_list_limit: int = 500

    # 앱 시작 시 카탈로그 기본값 적재 (테이블이 비어 있을 때만)
    seed_catalog_on_startup: bool = True

    # 로깅
    log_level: str = "INFO"

    @field_validator(
        "name_search_threshold",
        "ingredient_suggest_threshold",
        "ingredient_match_threshold",
    )
    @classmethod
    def validate_threshold(cls, v: float) -> float:
        if v < 0 or v > 1:
            raise ValueError("similarity thresholds must be between 0 and 1")
        return v

    @field_validator(
        "name_search_pool",
        "ingredient_suggest_pool",
        "ingredient_suggest_limit",
        "cocktail_list_limit",
    )
    @classmethod
    def validate_limits(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("limits must be positive")
        return v

    @field_validator("database_url")
    @classmethod
    def validate_database_url(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("database_url must not be empty")
        return v

    class Config:
        env_file = ".env"
        case_sensitive = False


settings = Settings()
