"""Exercise catalogue endpoints."""

from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from app.db.session import get_db
from app.schemas.exercise import ExerciseCreate, ExerciseResponse, ExerciseUpdate
from app.services.exercise_service import ExerciseService

router = APIRouter()


@router.post("", summary="Add an exercise to the catalogue.", response_model=ExerciseResponse,
             status_code=status.HTTP_201_CREATED, )
def create_exercise(data: ExerciseCreate, db: Session = Depends(get_db), ):
    return ExerciseService(db).create(data)


@router.get("", summary="List the exercise catalogue.", response_model=list[ExerciseResponse], )
def list_exercises(db: Session = Depends(get_db), ):
    return ExerciseService(db).get_all()


@router.get("/{exercise_id}", summary="Get a catalogue entry.", response_model=ExerciseResponse, )
def get_exercise(exercise_id: int, db: Session = Depends(get_db), ):
    return ExerciseService(db).get(exercise_id)


@router.put("/{exercise_id}", summary="Update a catalogue entry.", response_model=ExerciseResponse, )
def update_exercise(exercise_id: int, data: ExerciseUpdate, db: Session = Depends(get_db), ):
    return ExerciseService(db).update(exercise_id, data)


@router.delete("/{exercise_id}", summary="Remove an unused catalogue entry.", status_code=status.HTTP_204_NO_CONTENT, )
def delete_exercise(exercise_id: int, db: Session = Depends(get_db), ):
    ExerciseService(db).delete(exercise_id)
