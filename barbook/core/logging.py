"""로깅 설정"""
import logging
import os
import re
import sys
from barbook.core.config import settings


# Production 환경에서는 DEBUG 로그 비활성화
IS_PRODUCTION = os.getenv("ENVIRONMENT", "development") == "production"


def setup_logging() -> logging.Logger:
    """로거 초기화 및 설정"""

    logger = logging.getLogger("barbook")

    log_level = settings.log_level.upper()
    if IS_PRODUCTION and log_level == "DEBUG":
        log_level = "INFO"

    logger.setLevel(getattr(logging, log_level, logging.INFO))

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(getattr(logging, log_level, logging.INFO))

    if IS_PRODUCTION:
        formatter = logging.Formatter(
            fmt="%(asctime)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )
    else:
        formatter = logging.Formatter(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )

    console_handler.setFormatter(formatter)

    if not logger.handlers:
        logger.addHandler(console_handler)

    return logger


logger = setup_logging()


_SENSITIVE = re.compile(r"password|token|api_key|secret|authorization", re.IGNORECASE)
# 사용자 입력(X-User-Id, 검색어)에 섞인 줄바꿈으로 로그 라인을 위조하지 못하게 함
_CONTROL_CHARS = re.compile(r"[\r\n\t\x00-\x08\x0b\x0c\x0e-\x1f]+")


def sanitize_for_log(value: str, max_length: int = 100) -> str:
    """민감 정보/제어 문자 제거 후 로깅용 문자열 반환

    Args:
        value: 로깅할 문자열 (사용자 ID, 칵테일/재료명, 검색어)
        max_length: 최대 길이

    Returns:
        마스킹/절단된 문자열
    """
    if not value:
        return "[empty]"

    if _SENSITIVE.search(value):
        return "***"

    result = _CONTROL_CHARS.sub(" ", value)
    if len(result) > max_length:
        result = result[:max_length] + "..."

    return result
