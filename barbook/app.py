"""FastAPI 앱 팩토리"""
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from barbook.api import (
    catalog_router,
    cocktail_router,
    health_router,
    ingredient_router,
    profile_router,
    register_exception_handlers,
)
from barbook.core.config import settings
from barbook.core.database import get_db_context, init_db
from barbook.core.logging import logger
from barbook.core.security import log_request
from barbook.services.impl.catalog_service import CatalogService


@asynccontextmanager
async def lifespan(app: FastAPI):
    """애플리케이션 생명주기"""
    logger.info("Starting application...")
    init_db()
    if settings.seed_catalog_on_startup:
        with get_db_context() as db:
            CatalogService(db).seed_defaults()
    logger.info("Application started")
    yield
    logger.info("Shutting down application...")


def create_app() -> FastAPI:
    """
    FastAPI 앱 생성 (Factory Pattern)

    Returns:
        FastAPI 앱 인스턴스
    """
    app = FastAPI(
        title=settings.api_title,
        description=settings.api_description,
        version=settings.api_version,
        lifespan=lifespan,
    )

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # 라우터 등록
    app.include_router(health_router)
    for router in (cocktail_router, ingredient_router, catalog_router, profile_router):
        app.include_router(router, dependencies=[Depends(log_request)])

    return app


# 앱 인스턴스 생성 (uvicorn이 로드할 수 있도록)
app = create_app()
