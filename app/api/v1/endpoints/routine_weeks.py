"""
Week schedule endpoints.

The seven day slots of a profile and the exercise configuration of each
slot.  Configuration writes are full replaces.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlmodel import Session

from app.api.dependencies import get_current_profile
from app.db.session import get_db
from app.models.profile import Profile
from app.schemas.routine_week import (ConfigurationDeleteResponse, ConfigurationInitialize, ConfigurationResponse,
                                      ConfigurationUpdate, ConfigurationValidateRequest,
                                      ConfigurationValidateResponse, RoutineWeekInitialize, RoutineWeekResponse,
                                      RoutineWeekUpdate, )
from app.schemas.set_config import ExerciseConfigItem
from app.services.routine_configuration_service import RoutineConfigurationService
from app.services.routine_week_service import RoutineWeekService

router = APIRouter()


# ======================================================================
# Schedule
# ======================================================================


@router.post("/initialize", summary="Create the seven day slots of a profile.",
             response_model=list[RoutineWeekResponse], status_code=status.HTTP_201_CREATED, )
def initialize_weeks(data: RoutineWeekInitialize, db: Session = Depends(get_db), ):
    service = RoutineWeekService(db)
    return service.initialize_for_profile(data.profile_id)


@router.get("", summary="List the day slots of a profile.", response_model=list[RoutineWeekResponse], )
def list_weeks(profile: Profile = Depends(get_current_profile), db: Session = Depends(get_db), ):
    service = RoutineWeekService(db)
    return service.get_all_for_profile(profile.id)


@router.put("/{week_id}", summary="Assign a routine, a training day or a rest day to a slot.",
            response_model=RoutineWeekResponse, )
def update_week(week_id: int, data: RoutineWeekUpdate, db: Session = Depends(get_db), ):
    service = RoutineWeekService(db)
    return service.update(week_id, data)


# ======================================================================
# Configuration
# ======================================================================


@router.get("/{week_id}/configuration", summary="Get the exercise configuration of a slot.",
            response_model=ConfigurationResponse, )
def get_configuration(week_id: int, profile_id: Optional[int] = Query(None, description="Acting profile"),
                      db: Session = Depends(get_db), ):
    """Saved configuration, else a template built from the slot's training day, else empty."""
    service = RoutineConfigurationService(db)
    return service.get_configuration(week_id, profile_id)


@router.put("/{week_id}/configuration", summary="Replace the exercise configuration of a slot.",
            response_model=list[ExerciseConfigItem], )
def update_configuration(week_id: int, data: ConfigurationUpdate, db: Session = Depends(get_db), ):
    service = RoutineConfigurationService(db)
    return service.update_configuration(week_id, data.profile_id, data.exercises, data.routine_name)


@router.delete("/{week_id}/configuration", summary="Reset the routine and configuration of a slot.",
               response_model=ConfigurationDeleteResponse, )
def delete_configuration(week_id: int, profile_id: Optional[int] = Query(None, description="Acting profile"),
                         db: Session = Depends(get_db), ):
    service = RoutineConfigurationService(db)
    return ConfigurationDeleteResponse(deleted_count=service.delete_configuration(week_id, profile_id))


@router.post("/{week_id}/configuration/initialize", summary="Store a training day's template as the configuration.",
             response_model=list[ExerciseConfigItem], status_code=status.HTTP_201_CREATED, )
def initialize_configuration(week_id: int, data: ConfigurationInitialize, db: Session = Depends(get_db), ):
    service = RoutineConfigurationService(db)
    return service.initialize_configuration(week_id, data.profile_id, data.training_day_id)


@router.post("/{week_id}/configuration/validate", summary="Check whether an edited configuration can be saved.",
             response_model=ConfigurationValidateResponse, )
def validate_configuration(week_id: int, data: ConfigurationValidateRequest,
                           profile_id: Optional[int] = Query(None, description="Acting profile"),
                           db: Session = Depends(get_db), ):
    service = RoutineConfigurationService(db)
    return service.validate_for_week(week_id, profile_id, data)
