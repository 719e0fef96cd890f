"""
Shared fixtures.

Services and endpoints run against an in-memory SQLite database that is
created fresh for every test.
"""

import pytest
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

import app.db.base  # noqa: F401
from app.models.exercise import Exercise
from app.models.profile import Profile
from app.schemas.training_day import TrainingDayCreate, TrainingDayExerciseCreate
from app.services.training_day_service import TrainingDayService


@pytest.fixture
def engine():
    engine = create_engine("sqlite://", connect_args={ "check_same_thread": False }, poolclass=StaticPool, )
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)


@pytest.fixture
def db(engine):
    with Session(engine) as session:
        yield session


# ======================================================================
# Seed data
# ======================================================================


def _add(db: Session, entry):
    db.add(entry)
    db.commit()
    db.refresh(entry)
    return entry


@pytest.fixture
def profile(db) -> Profile:
    return _add(db, Profile(name="Ana"))


@pytest.fixture
def other_profile(db) -> Profile:
    return _add(db, Profile(name="Luis"))


@pytest.fixture
def exercises(db) -> list[Exercise]:
    return [
        _add(db, Exercise(name="Press banca", image="bench.png", muscle_group="chest")),
        _add(db, Exercise(name="Sentadilla", image=None, muscle_group="legs")),
        _add(db, Exercise(name="Remo con barra", image="row.png", muscle_group="back")),
    ]


@pytest.fixture
def training_day(db, profile, exercises):
    """A two-exercise training day (Press banca, Sentadilla) owned by ``profile``."""
    data = TrainingDayCreate(profile_id=profile.id, name="Pierna y pecho", exercises=[
        TrainingDayExerciseCreate(exercise_id=exercises[0].id, sets=4, reps=8),
        TrainingDayExerciseCreate(exercise_id=exercises[1].id, sets=3, reps=10),
    ])
    return TrainingDayService(db).create(data)
