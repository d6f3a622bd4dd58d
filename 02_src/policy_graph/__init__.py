"""Canonical graph construction for externally authored policy state machines."""

from .errors import (
    DocumentLoadError,
    PolicyGraphError,
    StateMachineStructureError,
    StateMachineValidationError,
)
from .graph_model import (
    ControlAttributes,
    GraphMetadata,
    NodeMetadata,
    ProcessedEdge,
    ProcessedJourneyDefinition,
    ProcessedNode,
    ProcessedNodeTransition,
    ProcessedStateMachine,
    RelevantChunk,
)
from .graph_orchestrator import GraphOrchestrator, to_json
from .journey_view import filter_for_journey
from .pipeline import PipelinePhase, PipelineRunner
from .processor import process_state_machine

__all__ = [
    "ControlAttributes",
    "DocumentLoadError",
    "GraphMetadata",
    "GraphOrchestrator",
    "NodeMetadata",
    "PipelinePhase",
    "PipelineRunner",
    "PolicyGraphError",
    "ProcessedEdge",
    "ProcessedJourneyDefinition",
    "ProcessedNode",
    "ProcessedNodeTransition",
    "ProcessedStateMachine",
    "RelevantChunk",
    "StateMachineStructureError",
    "StateMachineValidationError",
    "filter_for_journey",
    "process_state_machine",
    "to_json",
]
