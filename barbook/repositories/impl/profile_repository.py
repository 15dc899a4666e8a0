"""프로필 리포지토리 - DB 접근 로직"""
from typing import List, Optional

from sqlalchemy import desc
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from barbook.core.exceptions import DatabaseException
from barbook.core.logging import logger
from barbook.repositories.models import Profile


class ProfileRepository:
    """사용자 프로필 데이터 액세스 레이어"""

    def __init__(self, db: Session):
        self.db = db

    def get(self, user_id: str) -> Optional[Profile]:
        return self.db.query(Profile).filter(Profile.user_id == user_id).first()

    def list(self) -> List[Profile]:
        return self.db.query(Profile).order_by(desc(Profile.created_at), Profile.user_id).all()

    def create(self, user_id: str, role: str = "viewer", display_name: Optional[str] = None) -> Profile:
        try:
            profile = Profile(user_id=user_id, role=role, display_name=display_name)
            self.db.add(profile)
            self.db.commit()
            self.db.refresh(profile)
            logger.info(f"Profile created with role {role}")
            return profile
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to create profile: {e}")
            raise DatabaseException(f"Failed to create profile: {e}")

    def update(self, profile: Profile) -> Profile:
        try:
            self.db.commit()
            self.db.refresh(profile)
            return profile
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to update profile: {e}")
            raise DatabaseException(f"Failed to update profile: {e}")
