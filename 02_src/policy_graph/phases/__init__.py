"""Pipeline phases for state machine graph construction."""

from .construction import GraphConstructionPhase
from .ingestion import DocumentIngestionPhase, list_state_machines, load_state_machine
from .journeys import JourneyNormalizationPhase
from .structure import StructureCheckPhase, ensure_state_machine
from .validation import ValidationAndQAPhase, build_validation_report

__all__ = [
    "DocumentIngestionPhase",
    "StructureCheckPhase",
    "JourneyNormalizationPhase",
    "GraphConstructionPhase",
    "ValidationAndQAPhase",
    "build_validation_report",
    "ensure_state_machine",
    "list_state_machines",
    "load_state_machine",
]
