"""
Training day endpoints.

A training day is a reusable, ordered list of exercises that can be
assigned to week slots.
"""

from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from app.api.dependencies import get_current_profile
from app.db.session import get_db
from app.models.profile import Profile
from app.schemas.training_day import TrainingDayCreate, TrainingDayResponse, TrainingDayUpdate
from app.services.training_day_service import TrainingDayService

router = APIRouter()


@router.post("", summary="Create a training day.", response_model=TrainingDayResponse,
             status_code=status.HTTP_201_CREATED, )
def create_training_day(data: TrainingDayCreate, db: Session = Depends(get_db), ):
    service = TrainingDayService(db)
    return service.create(data)


@router.get("", summary="List the active training days of a profile.", response_model=list[TrainingDayResponse], )
def list_training_days(profile: Profile = Depends(get_current_profile), db: Session = Depends(get_db), ):
    service = TrainingDayService(db)
    return service.get_all_for_profile(profile.id)


@router.get("/{day_id}", summary="Get a training day with its exercises.", response_model=TrainingDayResponse, )
def get_training_day(day_id: int, profile: Profile = Depends(get_current_profile), db: Session = Depends(get_db), ):
    service = TrainingDayService(db)
    return service.get(day_id, profile.id)


@router.put("/{day_id}", summary="Update a training day.", response_model=TrainingDayResponse, )
def update_training_day(day_id: int, data: TrainingDayUpdate, db: Session = Depends(get_db), ):
    service = TrainingDayService(db)
    return service.update(day_id, data)


@router.delete("/{day_id}", summary="Delete a training day.", status_code=status.HTTP_204_NO_CONTENT, )
def delete_training_day(day_id: int, profile: Profile = Depends(get_current_profile), db: Session = Depends(get_db), ):
    service = TrainingDayService(db)
    service.delete(day_id, profile.id)
