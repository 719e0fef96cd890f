"""Planning core: day mapping, configuration templates, technique toggles,
readiness validation and live session progress."""

from app.planning.day_mapping import id_to_name, name_to_id
from app.planning.templates import build_template
from app.planning.toggles import ToggleKey, derive_toggles
from app.planning.validation import find_incomplete_sets, is_configuration_ready
from app.planning.session_progress import compute_progress, transition

__all__ = [
    "id_to_name",
    "name_to_id",
    "build_template",
    "ToggleKey",
    "derive_toggles",
    "find_incomplete_sets",
    "is_configuration_ready",
    "compute_progress",
    "transition",
]
