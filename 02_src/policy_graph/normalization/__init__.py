"""Leaf normalizers that reconcile the raw document's naming conventions."""

from .chunks import ChunkShape, collect_relevant_chunks, normalize_language
from .control_attributes import resolve_control_attributes
from .journey_paths import UNIVERSAL_ENTRY_STATES, assign_journey_paths
from .journeys import normalize_journey, normalize_journeys
from .labels import format_label, format_transition_label
from .transitions import normalize_transition

__all__ = [
    "ChunkShape",
    "UNIVERSAL_ENTRY_STATES",
    "assign_journey_paths",
    "collect_relevant_chunks",
    "format_label",
    "format_transition_label",
    "normalize_journey",
    "normalize_journeys",
    "normalize_language",
    "normalize_transition",
    "resolve_control_attributes",
]
