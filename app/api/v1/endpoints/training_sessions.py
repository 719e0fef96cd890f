"""
Training session endpoints.

Start a live session, record sets while training and finish it.  Every
call acts on behalf of the ``profile_id`` query parameter.
"""

import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlmodel import Session

from app.api.dependencies import get_current_profile
from app.core.enums import SessionStatus
from app.db.session import get_db
from app.models.profile import Profile
from app.schemas.training_session import (DeletedSession, SessionComplete, SessionProgress, SessionSummary,
                                          SetProgressUpdate, TrainingSessionCreate, TrainingSessionResponse, )
from app.services.training_session_service import TrainingSessionService

router = APIRouter()


@router.post("", summary="Start a training session.", response_model=TrainingSessionResponse,
             status_code=status.HTTP_201_CREATED, )
def start_session(data: TrainingSessionCreate, db: Session = Depends(get_db), ):
    service = TrainingSessionService(db)
    return service.start(data)


@router.get("", summary="List training sessions.", response_model=list[TrainingSessionResponse], )
def list_sessions(status_filter: Optional[SessionStatus] = Query(None, alias="status", description="Status filter"),
                  profile: Profile = Depends(get_current_profile), db: Session = Depends(get_db), ):
    service = TrainingSessionService(db)
    return service.get_all(profile.id, status_filter)


@router.get("/active", summary="Get the live (active or paused) session.",
            response_model=Optional[TrainingSessionResponse], )
def get_active_session(profile: Profile = Depends(get_current_profile), db: Session = Depends(get_db), ):
    service = TrainingSessionService(db)
    return service.get_live(profile.id)


@router.get("/history", summary="List finished sessions.", response_model=list[TrainingSessionResponse], )
def list_history(session_date: Optional[datetime.date] = Query(None, description="Day the sessions started"),
                 limit: int = Query(50, ge=1, le=1000), profile: Profile = Depends(get_current_profile),
                 db: Session = Depends(get_db), ):
    service = TrainingSessionService(db)
    return service.get_history(profile.id, session_date, limit)


@router.delete("/history/today", summary="Delete today's finished sessions.", response_model=list[DeletedSession], )
def delete_today_history(session_date: datetime.date = Query(..., description="Must be today (UTC)"),
                         profile: Profile = Depends(get_current_profile), db: Session = Depends(get_db), ):
    service = TrainingSessionService(db)
    return service.delete_today(profile.id, session_date)


@router.delete("/history", summary="Delete the finished sessions of a day.", response_model=list[DeletedSession], )
def delete_history_by_date(session_date: datetime.date = Query(...), profile: Profile = Depends(get_current_profile),
                           db: Session = Depends(get_db), ):
    service = TrainingSessionService(db)
    return service.delete_by_date(profile.id, session_date)


@router.get("/{session_id}", summary="Get a training session.", response_model=TrainingSessionResponse, )
def get_session(session_id: int, profile: Profile = Depends(get_current_profile), db: Session = Depends(get_db), ):
    service = TrainingSessionService(db)
    return service.get(session_id, profile.id)


@router.get("/{session_id}/progress", summary="Get completion and duration metrics.",
            response_model=SessionProgress, )
def get_progress(session_id: int, profile: Profile = Depends(get_current_profile), db: Session = Depends(get_db), ):
    service = TrainingSessionService(db)
    return service.get_progress(session_id, profile.id)


@router.put("/{session_id}/progress", summary="Record (or overwrite) a performed set.",
            response_model=TrainingSessionResponse, )
def record_set(session_id: int, data: SetProgressUpdate, profile: Profile = Depends(get_current_profile),
               db: Session = Depends(get_db), ):
    service = TrainingSessionService(db)
    return service.record_set(session_id, profile.id, data)


@router.post("/{session_id}/exercises/{exercise_id}/complete", summary="Mark an exercise as completed.",
             response_model=TrainingSessionResponse, )
def complete_exercise(session_id: int, exercise_id: int, profile: Profile = Depends(get_current_profile),
                      db: Session = Depends(get_db), ):
    service = TrainingSessionService(db)
    return service.complete_exercise(session_id, profile.id, exercise_id)


@router.post("/{session_id}/advance", summary="Move to the next exercise.", response_model=TrainingSessionResponse, )
def advance(session_id: int, profile: Profile = Depends(get_current_profile), db: Session = Depends(get_db), ):
    service = TrainingSessionService(db)
    return service.advance(session_id, profile.id)


@router.post("/{session_id}/pause", summary="Pause the session.", response_model=TrainingSessionResponse, )
def pause(session_id: int, profile: Profile = Depends(get_current_profile), db: Session = Depends(get_db), ):
    service = TrainingSessionService(db)
    return service.pause(session_id, profile.id)


@router.post("/{session_id}/resume", summary="Resume a paused session.", response_model=TrainingSessionResponse, )
def resume(session_id: int, profile: Profile = Depends(get_current_profile), db: Session = Depends(get_db), ):
    service = TrainingSessionService(db)
    return service.resume(session_id, profile.id)


@router.post("/{session_id}/complete", summary="Finish the session.", response_model=SessionSummary, )
def complete(session_id: int, data: SessionComplete, profile: Profile = Depends(get_current_profile),
             db: Session = Depends(get_db), ):
    service = TrainingSessionService(db)
    return service.complete(session_id, profile.id, data)


@router.post("/{session_id}/cancel", summary="Cancel the session.", response_model=TrainingSessionResponse, )
def cancel(session_id: int, profile: Profile = Depends(get_current_profile), db: Session = Depends(get_db), ):
    service = TrainingSessionService(db)
    return service.cancel(session_id, profile.id)


@router.delete("/{session_id}", summary="Delete a finished session.", response_model=DeletedSession, )
def delete_session(session_id: int, profile: Profile = Depends(get_current_profile), db: Session = Depends(get_db), ):
    service = TrainingSessionService(db)
    return service.delete_finished(session_id, profile.id)
