"""도메인 예외 → HTTP 응답 변환"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from barbook.core.exceptions import (
    AuthenticationException,
    BarbookException,
    ConflictException,
    DatabaseException,
    NotFoundException,
    PermissionDeniedException,
    ValidationException,
)
from barbook.core.logging import logger

INTERNAL_ERROR_DETAIL = "Internal server error"

# 구체 클래스 우선 (isinstance 순서대로 검사)
STATUS_BY_EXCEPTION = (
    (NotFoundException, 404),
    (ValidationException, 400),
    (ConflictException, 409),
    (AuthenticationException, 401),
    (PermissionDeniedException, 403),
    (DatabaseException, 500),
)


def status_for(exc: BarbookException) -> int:
    for exc_type, status_code in STATUS_BY_EXCEPTION:
        if isinstance(exc, exc_type):
            return status_code
    return 500


async def barbook_exception_handler(request: Request, exc: BarbookException) -> JSONResponse:
    status_code = status_for(exc)
    if status_code >= 500:
        # 원본 메시지(SQL 등)는 로그에만 남김
        logger.error(f"{request.method} {request.url.path} failed: {exc}")
        content = {"detail": INTERNAL_ERROR_DETAIL, "error_code": exc.error_code, "details": {}}
    else:
        logger.info(f"{request.method} {request.url.path} -> {status_code} {exc.error_code}")
        content = {"detail": exc.message, "error_code": exc.error_code, "details": exc.details}

    return JSONResponse(status_code=status_code, content=content)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(BarbookException, barbook_exception_handler)
