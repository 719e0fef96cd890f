"""
Weekday name <-> day index mapping.

The schedule uses a fixed, Sunday-first numbering with Spanish day
names::

    Domingo=1  Lunes=2  Martes=3  Miércoles=4  Jueves=5  Viernes=6  Sábado=7

Both lookups are total: unknown input falls back to Sunday instead of
raising, so a malformed persisted row still renders as *some* day.
Callers that must not accept malformed input check with
:func:`is_known_day_name` / :func:`is_known_day_id` first.
"""

from __future__ import annotations

import datetime
from typing import Any

DAY_NAMES: tuple[str, ...] = ("Domingo", "Lunes", "Martes", "Miércoles", "Jueves", "Viernes", "Sábado", )

DEFAULT_DAY_ID = 1
DEFAULT_DAY_NAME = DAY_NAMES[0]

_NAME_TO_ID: dict[str, int] = { name: index for index, name in enumerate(DAY_NAMES, start=1) }
_ID_TO_NAME: dict[int, str] = { index: name for name, index in _NAME_TO_ID.items() }


def is_known_day_name(name: Any) -> bool:
    return isinstance(name, str) and name in _NAME_TO_ID


def is_known_day_id(day_id: Any) -> bool:
    return isinstance(day_id, int) and not isinstance(day_id, bool) and day_id in _ID_TO_NAME


def name_to_id(name: Any) -> int:
    """Return the index of *name*, or ``1`` (Domingo) if it is not a known day name."""
    if not is_known_day_name(name):
        return DEFAULT_DAY_ID
    return _NAME_TO_ID[name]


def id_to_name(day_id: Any) -> str:
    """Return the name for *day_id*, or ``"Domingo"`` if it is not in 1..7."""
    if not is_known_day_id(day_id):
        return DEFAULT_DAY_NAME
    return _ID_TO_NAME[day_id]


def day_id_for_date(date: datetime.date) -> int:
    """Return the Sunday-first day index of a calendar date."""
    # date.weekday(): Monday=0 ... Sunday=6
    return (date.weekday() + 1) % 7 + 1
