"""헬스 체크 엔드포인트"""
from datetime import datetime

from fastapi import APIRouter
from sqlalchemy.exc import SQLAlchemyError

from barbook import __version__
from barbook.core.database import engine
from barbook.core.logging import logger
from barbook.schemas.cocktail_schema import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """
    헬스 체크 엔드포인트

    - 서버 상태
    - DB 연결 상태
    """
    db_ok = False
    try:
        with engine.connect() as connection:
            connection.exec_driver_sql("SELECT 1")
            db_ok = True
    except SQLAlchemyError as e:
        logger.error(f"Database connection error: {e}")

    return HealthResponse(
        status="ok" if db_ok else "error",
        timestamp=datetime.now(),
        version=__version__,
    )


@router.get("/")
async def root():
    """루트 엔드포인트"""
    return {
        "service": "Barbook cocktail catalog",
        "version": __version__,
        "docs": "/docs",
    }
