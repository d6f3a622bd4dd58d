"""Public entry point: raw state machine document -> canonical graph."""

from typing import Any, List

from .graph_model import ProcessedStateMachine
from .graph_orchestrator import GraphOrchestrator
from .phases import GraphConstructionPhase, JourneyNormalizationPhase, StructureCheckPhase
from .pipeline import PipelinePhase, PipelineRunner


def build_core_phases() -> List[PipelinePhase]:
    return [
        StructureCheckPhase(),
        JourneyNormalizationPhase(),
        GraphConstructionPhase(),
    ]


def process_state_machine(machine: Any) -> ProcessedStateMachine:
    """Normalize journeys, build every node and edge, and assemble the graph.

    Raises ``StateMachineStructureError`` when ``machine`` is not an object or
    its ``states`` is not a mapping; malformed fragments are skipped.
    """
    runner = PipelineRunner(phases=build_core_phases())
    final_context = runner.run({"raw_document": machine, "orchestrator": GraphOrchestrator()})
    return final_context["processed"]
