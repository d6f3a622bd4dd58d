"""Validation and QA phase over the assembled canonical graph."""

import logging
from typing import Any, Dict, List

from ..errors import StateMachineValidationError
from ..graph_model import ProcessedStateMachine
from ..pipeline import PipelinePhase

logger = logging.getLogger(__name__)


def build_validation_report(processed: ProcessedStateMachine, machine: Dict[str, Any]) -> Dict[str, Any]:
    node_ids = {node.id for node in processed.nodes}
    journeys = processed.metadata.journeys or ()
    warnings: List[str] = []

    seen_edge_ids = set()
    reported_collisions = set()
    for edge in processed.edges:
        if edge.id in seen_edge_ids and edge.id not in reported_collisions:
            reported_collisions.add(edge.id)
            warnings.append(f"Edge id {edge.id} is shared by more than one transition")
        seen_edge_ids.add(edge.id)
        if edge.target not in node_ids:
            warnings.append(f"Edge {edge.id} targets undeclared state '{edge.target}'")

    initial_state = machine.get("initialState")
    if not isinstance(initial_state, str) or initial_state not in node_ids:
        warnings.append(f"initialState '{initial_state}' is not a declared state")

    final_states = machine.get("finalStates")
    for final_state in final_states if isinstance(final_states, (list, tuple)) else []:
        if not isinstance(final_state, str) or final_state not in node_ids:
            warnings.append(f"finalStates entry '{final_state}' is not a declared state")

    coverage = {journey.id: 0 for journey in journeys}
    for node in processed.nodes:
        for journey_id in node.journey_paths:
            if journey_id in coverage:
                coverage[journey_id] += 1

    unassigned = [node.id for node in processed.nodes if not node.journey_paths] if journeys else []

    return {
        "node_count": len(processed.nodes),
        "edge_count": len(processed.edges),
        "journey_count": len(journeys),
        "journey_coverage": coverage,
        "unassigned_states": unassigned,
        "warnings": warnings,
    }


class ValidationAndQAPhase(PipelinePhase):
    phase_name = "validation"

    def __init__(self, strict: bool = False) -> None:
        self._strict = strict

    def run(self, context: Dict[str, Any]) -> Dict[str, Any]:
        qa_report = build_validation_report(context["processed"], context["raw_document"])
        for warning in qa_report["warnings"]:
            logger.warning(warning)
        if self._strict and qa_report["warnings"]:
            raise StateMachineValidationError(qa_report["warnings"])
        return {"validation_report": qa_report}
