"""Profile Routes - 역할 조회/변경"""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from barbook.core.database import get_db
from barbook.core.security import get_current_profile, require_role
from barbook.repositories.models import Profile
from barbook.schemas.cocktail_schema import ProfileResponse, ProfileUpdateRequest
from barbook.services.impl.profile_service import ProfileService

router = APIRouter(prefix="/api/v1/profiles", tags=["profiles"])


def get_profile_service(db: Session = Depends(get_db)) -> ProfileService:
    return ProfileService(db)


@router.get("/me", response_model=ProfileResponse)
async def read_me(profile: Profile = Depends(get_current_profile)):
    return profile


@router.get("", response_model=List[ProfileResponse])
async def list_profiles(
    service: ProfileService = Depends(get_profile_service),
    _profile: Profile = Depends(require_role("admin")),
):
    return service.list_profiles()


@router.put("/{user_id}", response_model=ProfileResponse)
async def update_profile(
    user_id: str,
    request: ProfileUpdateRequest,
    service: ProfileService = Depends(get_profile_service),
    _profile: Profile = Depends(require_role("admin")),
):
    return service.update_profile(user_id, role=request.role, display_name=request.display_name)
