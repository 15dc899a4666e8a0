"""프로필 서비스 - 역할 관리"""

from typing import List, Optional

from sqlalchemy.orm import Session

from barbook.core.exceptions import ProfileNotFoundException, ValidationException
from barbook.core.logging import logger, sanitize_for_log
from barbook.repositories.impl.profile_repository import ProfileRepository
from barbook.repositories.models import ROLES, Profile


class ProfileService:
    """사용자 프로필/역할 비즈니스 로직"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = ProfileRepository(db)

    def get_or_create(self, user_id: str) -> Profile:
        """처음 보는 사용자는 viewer로 등록"""
        profile = self.repo.get(user_id)
        if profile is None:
            profile = self.repo.create(user_id, role="viewer")
        return profile

    def get_profile(self, user_id: str) -> Profile:
        profile = self.repo.get(user_id)
        if profile is None:
            raise ProfileNotFoundException(user_id)
        return profile

    def list_profiles(self) -> List[Profile]:
        return self.repo.list()

    def update_profile(
        self,
        user_id: str,
        role: Optional[str] = None,
        display_name: Optional[str] = None,
    ) -> Profile:
        profile = self.get_profile(user_id)
        if role is not None:
            if role not in ROLES:
                raise ValidationException("role", f"unknown role: {role}")
            profile.role = role
        if display_name is not None:
            profile.display_name = display_name
        updated = self.repo.update(profile)
        logger.info(f"[Profile] {sanitize_for_log(user_id, 40)} updated (role={updated.role})")
        return updated
