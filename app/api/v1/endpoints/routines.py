"""
Routine endpoints.

Routines are named exercise plans of a profile.  They can be assigned to
week slots; deleting one only hides it.
"""

from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from app.api.dependencies import get_current_profile
from app.db.session import get_db
from app.models.profile import Profile
from app.schemas.routine import RoutineCreate, RoutineResponse, RoutineUpdate
from app.services.routine_service import RoutineService

router = APIRouter()


@router.post("", summary="Create a routine.", response_model=RoutineResponse, status_code=status.HTTP_201_CREATED, )
def create_routine(data: RoutineCreate, db: Session = Depends(get_db), ):
    service = RoutineService(db)
    return service.create(data)


@router.get("", summary="List the routines of a profile, favourites first.", response_model=list[RoutineResponse], )
def list_routines(profile: Profile = Depends(get_current_profile), db: Session = Depends(get_db), ):
    service = RoutineService(db)
    return service.get_all_for_profile(profile.id)


@router.get("/{routine_id}", summary="Get a routine with its exercises.", response_model=RoutineResponse, )
def get_routine(routine_id: int, profile: Profile = Depends(get_current_profile), db: Session = Depends(get_db), ):
    service = RoutineService(db)
    return service.get(routine_id, profile.id)


@router.put("/{routine_id}", summary="Update a routine.", response_model=RoutineResponse, )
def update_routine(routine_id: int, data: RoutineUpdate, db: Session = Depends(get_db), ):
    service = RoutineService(db)
    return service.update(routine_id, data)


@router.delete("/{routine_id}", summary="Delete a routine.", status_code=status.HTTP_204_NO_CONTENT, )
def delete_routine(routine_id: int, profile: Profile = Depends(get_current_profile), db: Session = Depends(get_db), ):
    service = RoutineService(db)
    service.delete(routine_id, profile.id)
