"""Profile endpoints."""

from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from app.db.session import get_db
from app.schemas.profile import ProfileCreate, ProfileResponse
from app.services.profile_service import ProfileService

router = APIRouter()


@router.post("", summary="Create a profile.", response_model=ProfileResponse, status_code=status.HTTP_201_CREATED, )
def create_profile(data: ProfileCreate, db: Session = Depends(get_db), ):
    return ProfileService(db).create(data)


@router.get("", summary="List profiles.", response_model=list[ProfileResponse], )
def list_profiles(db: Session = Depends(get_db), ):
    return ProfileService(db).get_all()
