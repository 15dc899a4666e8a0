"""
역할 기반 접근 제어 및 입력 검증

인증 자체는 상위 ID 공급자가 담당하고, 이 서비스는 `X-User-Id` 헤더로
전달된 사용자 ID를 신뢰하여 profiles 테이블에서 역할을 조회합니다.
"""

from typing import Callable, Optional

from fastapi import Depends, Header, Request
from sqlalchemy.orm import Session

from barbook.core.database import get_db
from barbook.core.exceptions import AuthenticationException, PermissionDeniedException
from barbook.core.logging import logger, sanitize_for_log
from barbook.repositories.models import Profile, ROLES


ROLE_RANK = {role: rank for rank, role in enumerate(ROLES)}


def has_role(role: str, required: str) -> bool:
    """role이 required 이상인지 (viewer < editor < admin)"""
    return ROLE_RANK.get(role, -1) >= ROLE_RANK[required]


class SecurityValidator:
    """입력 보안 검증"""

    MAX_QUERY_LENGTH = 200

    @staticmethod
    def validate_query(query: str) -> bool:
        """검색어 길이 검증

        Raises:
            ValueError: 허용 길이 초과
        """
        if query and len(query) > SecurityValidator.MAX_QUERY_LENGTH:
            raise ValueError(f"검색어는 {SecurityValidator.MAX_QUERY_LENGTH}자 이하여야 합니다")
        return True


def get_current_profile(
    x_user_id: Optional[str] = Header(None),
    db: Session = Depends(get_db),
) -> Profile:
    """FastAPI Dependency: 호출자 프로필 (처음 보는 사용자는 viewer로 생성)"""
    from barbook.services.impl.profile_service import ProfileService

    if not x_user_id or not x_user_id.strip():
        raise AuthenticationException()
    return ProfileService(db).get_or_create(x_user_id.strip())


def require_role(required: str) -> Callable[..., Profile]:
    """최소 역할을 요구하는 Dependency 생성"""

    def _dependency(profile: Profile = Depends(get_current_profile)) -> Profile:
        if not has_role(profile.role, required):
            logger.warning(
                f"[Security] {sanitize_for_log(profile.user_id, 40)} denied ({profile.role} < {required})"
            )
            raise PermissionDeniedException(profile.role, required)
        return profile

    return _dependency


async def log_request(request: Request) -> None:
    """요청 로깅 (민감 정보 제외)"""
    query_params = {
        key: sanitize_for_log(str(value), max_length=50)
        for key, value in request.query_params.items()
    }
    if query_params:
        logger.debug(f"{request.method} {request.url.path}?{query_params}")
    else:
        logger.debug(f"{request.method} {request.url.path}")
