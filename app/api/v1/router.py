"""
API v1 router.

Aggregates all v1 endpoints.
"""

from fastapi import APIRouter

from app.api.v1.endpoints import exercises, profiles, routine_weeks, routines, training_days, training_sessions

api_router = APIRouter()

# Include endpoint routers
api_router.include_router(
    profiles.router, prefix="/profiles", tags=["Profiles"]
)
api_router.include_router(
    exercises.router, prefix="/exercises", tags=["Exercises"]
)
api_router.include_router(
    training_days.router, prefix="/training-days", tags=["Training days"]
)
api_router.include_router(
    routines.router, prefix="/routines", tags=["Routines"]
)
api_router.include_router(
    routine_weeks.router,
    prefix="/routine-weeks",
    tags=["Week schedule"],
)
api_router.include_router(
    training_sessions.router,
    prefix="/training-sessions",
    tags=["Training sessions"],
)
