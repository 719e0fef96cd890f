"""
Live training session state machine and progress metrics.

Status transitions::

    active  <-> paused
    active  --> completed | cancelled
    paused  --> completed | cancelled

``completed`` and ``cancelled`` are terminal: nothing moves out of them
and the session's exercises can no longer change.

The current exercise pointer only moves forward, only while the session
is active, and never past the last exercise.  Performed sets are keyed
by ``set_number``; recording the same set again replaces it.

All functions here are pure.  Time is passed in explicitly as *now*.
"""

from __future__ import annotations

import datetime
from typing import Optional, Sequence

from app.core.enums import SessionStatus
from app.core.exceptions import InvalidSessionStateError
from app.schemas.training_session import PerformedSet, SessionProgress, TrainingSessionExercise

# ======================================================================
# Status transitions
# ======================================================================

_TRANSITIONS: dict[SessionStatus, frozenset[SessionStatus]] = {
    SessionStatus.ACTIVE: frozenset({ SessionStatus.PAUSED, SessionStatus.COMPLETED, SessionStatus.CANCELLED }),
    SessionStatus.PAUSED: frozenset({ SessionStatus.ACTIVE, SessionStatus.COMPLETED, SessionStatus.CANCELLED }),
    SessionStatus.COMPLETED: frozenset(),
    SessionStatus.CANCELLED: frozenset(), }

TERMINAL_STATUSES: frozenset[SessionStatus] = frozenset({ SessionStatus.COMPLETED, SessionStatus.CANCELLED })


def can_transition(current: SessionStatus, target: SessionStatus) -> bool:
    return target in _TRANSITIONS[current]


def transition(current: SessionStatus, target: SessionStatus) -> SessionStatus:
    """Return *target* if the move from *current* is allowed.

    Raises :class:`InvalidSessionStateError` otherwise.
    """
    if not can_transition(current, target):
        raise InvalidSessionStateError(f"Cannot move a {current.value} session to {target.value}")
    return target


def ensure_active(status: SessionStatus, action: str) -> None:
    if status != SessionStatus.ACTIVE:
        raise InvalidSessionStateError(f"Cannot {action}: session is {status.value}")


# ======================================================================
# Exercise pointer
# ======================================================================


def advance_exercise_index(status: SessionStatus, current_index: int, total_exercises: int,
                           target: Optional[int] = None, ) -> int:
    """Return the new current exercise index.

    Without *target* the pointer moves one step forward.  A *target*
    behind the current position leaves it where it is.  The result is
    clamped to ``[0, total_exercises - 1]``.
    """
    ensure_active(status, "move to another exercise")
    if total_exercises <= 0:
        return 0
    wanted = current_index + 1 if target is None else target
    return max(0, min(max(current_index, wanted), total_exercises - 1))


# ======================================================================
# Performed sets
# ======================================================================


def record_performed_set(performed_sets: Sequence[PerformedSet], new_set: PerformedSet, ) -> list[PerformedSet]:
    """Return a new list with *new_set* stored under its ``set_number``.

    An existing entry with the same ``set_number`` is replaced, never
    duplicated.  The result is ordered by ``set_number``.
    """
    kept = [s for s in performed_sets if s.set_number != new_set.set_number]
    kept.append(new_set)
    return sorted(kept, key=lambda s: s.set_number)


def all_planned_sets_performed(exercise: TrainingSessionExercise) -> bool:
    """Whether a performed set exists for every planned set number (1-based)."""
    if not exercise.sets_config:
        return False
    performed = { s.set_number for s in exercise.performed_sets }
    return all(number in performed for number in range(1, len(exercise.sets_config) + 1))


# ======================================================================
# Metrics
# ======================================================================


def duration_minutes(status: SessionStatus, start_time: datetime.datetime, last_activity: datetime.datetime,
                     now: datetime.datetime, ) -> int:
    """Whole minutes from start to *now* (active) or to the last activity.

    Clamped to zero so clock skew never yields a negative duration.
    """
    end = now if status == SessionStatus.ACTIVE else last_activity
    minutes = int((end - start_time).total_seconds() // 60)
    return max(0, minutes)


def compute_progress(exercises: Sequence[TrainingSessionExercise], status: SessionStatus,
                     start_time: datetime.datetime, last_activity: datetime.datetime,
                     now: datetime.datetime, ) -> SessionProgress:
    return SessionProgress(total_exercises=len(exercises),
                           completed_exercises=sum(1 for e in exercises if e.is_completed),
                           total_sets=sum(len(e.sets_config) for e in exercises),
                           completed_sets=sum(len(e.performed_sets) for e in exercises),
                           duration_minutes=duration_minutes(status, start_time, last_activity, now), )
