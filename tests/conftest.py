"""전역 테스트 설정

역할:
- 테스트 환경 구성
- 테스트마다 독립된 in-memory SQLite DB
- 역할별 프로필 / 요청 헤더 픽스처
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Generator

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool


# 프로젝트 루트를 경로에 추가
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from barbook.core.database import Base, get_db  # noqa: E402
from barbook.repositories import models  # noqa: E402,F401
from barbook.repositories.impl.profile_repository import ProfileRepository  # noqa: E402


@pytest.fixture(scope="session", autouse=True)
def test_env() -> None:
    """테스트 환경 변수 설정 (세션 전역)"""
    os.environ["ENVIRONMENT"] = "test"
    os.environ["LOG_LEVEL"] = "INFO"


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    """테스트 전용 DB 세션 (테스트 종료 시 폐기)"""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def profiles(db_session: Session) -> dict[str, str]:
    """역할별 사용자 ID {role: user_id}"""
    repo = ProfileRepository(db_session)
    users = {"viewer": "viewer-1", "editor": "editor-1", "admin": "admin-1"}
    for role, user_id in users.items():
        repo.create(user_id, role=role)
    return users


@pytest.fixture
def auth_headers(profiles: dict[str, str]) -> dict[str, dict[str, str]]:
    """역할별 요청 헤더"""
    return {role: {"X-User-Id": user_id} for role, user_id in profiles.items()}


@pytest.fixture
def app(db_session: Session):
    """DB 의존성을 테스트 세션으로 교체한 앱"""
    from barbook.app import create_app

    application = create_app()

    def _override_get_db():
        yield db_session

    application.dependency_overrides[get_db] = _override_get_db
    yield application
    application.dependency_overrides.clear()
