"""
Set prescription schemas.

A :class:`SetConfig` carries the three base fields (``reps``, ``weight``,
``rir``) as free-form text, where ``""`` means *unset* (not zero), plus
three independent optional techniques:

- ``rp``: rest-pause entries ``{value, time}``
- ``ds``: drop-set entries ``{reps, peso}``
- ``partials``: a single partial-reps entry ``{reps}``

For ``rp`` and ``ds`` an empty list and a missing field mean different
things: ``[]`` is "technique toggled on, not yet filled", ``None`` is
"technique not used".  :meth:`SetConfig.to_storage` keeps ``[]`` and
omits ``None`` so the distinction survives a round trip through the
database.
"""

from __future__ import annotations

from typing import Annotated, Any, Optional, Union

from pydantic import BaseModel, BeforeValidator, Field


def _to_text(value: Any) -> Any:
    if value is None:
        return ""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return value


# Numeric-looking text field; numbers sent by clients are kept as text.
TextValue = Annotated[str, BeforeValidator(_to_text)]


class RPDetail(BaseModel):
    """One rest-pause extension: reps performed (``value``) after ``time`` seconds of rest."""

    value: TextValue = ""
    time: Optional[Union[int, str]] = None


class DSDetail(BaseModel):
    """One drop-set extension: ``reps`` performed at the reduced weight ``peso``."""

    reps: TextValue = ""
    peso: TextValue = ""


class PartialDetail(BaseModel):
    reps: TextValue = ""


class SetConfig(BaseModel):
    """Prescription for a single set."""

    reps: TextValue = ""
    weight: TextValue = ""
    rir: TextValue = Field("", description="Reps in reserve")

    rp: Optional[list[RPDetail]] = None
    ds: Optional[list[DSDetail]] = None
    partials: Optional[PartialDetail] = None

    def to_storage(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)


class ExerciseConfigItem(BaseModel):
    """One exercise of a week slot's configuration."""

    exercise_id: int
    exercise_name: TextValue = ""
    exercise_image: TextValue = ""
    order_index: int = 0
    sets_config: list[SetConfig] = Field(default_factory=list)
    notes: TextValue = ""

    def to_storage(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)
