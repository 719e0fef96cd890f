"""Shared enums for models and API."""

from enum import Enum


class SessionStatus(str, Enum):
    """Lifecycle status of a training session."""

    ACTIVE = "active"
    PAUSED = "paused"
    COMPLETED = "completed"  # terminal
    CANCELLED = "cancelled"  # terminal


class Technique(str, Enum):
    """Optional set-extension techniques that can be toggled per set."""

    RP = "RP"  # rest-pause
    DS = "DS"  # drop set
    P = "P"  # partial reps
