"""Structural check: the only fatal condition of the core transformation."""

from collections.abc import Mapping
from typing import Any, Dict

from ..errors import StateMachineStructureError
from ..pipeline import PipelinePhase


def ensure_state_machine(document: Any) -> Mapping:
    if not isinstance(document, Mapping):
        raise StateMachineStructureError(
            f"State machine document must be an object, got {type(document).__name__}"
        )
    states = document.get("states")
    if not isinstance(states, Mapping):
        raise StateMachineStructureError(
            f"State machine 'states' must be a mapping, got {type(states).__name__}"
        )
    return document


class StructureCheckPhase(PipelinePhase):
    phase_name = "structure"

    def run(self, context: Dict[str, Any]) -> Dict[str, Any]:
        return {"raw_document": ensure_state_machine(context.get("raw_document"))}
