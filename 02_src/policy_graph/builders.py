"""Node and edge builders for one raw state machine document."""

import logging
from typing import Any, Iterator, List, Mapping, Optional, Sequence, Tuple

from .graph_model import (
    PROCESS,
    STATE_TYPES,
    NodeMetadata,
    ProcessedEdge,
    ProcessedJourneyDefinition,
    ProcessedNode,
)
from .graph_orchestrator import GraphOrchestrator
from .normalization import (
    assign_journey_paths,
    collect_relevant_chunks,
    format_label,
    format_transition_label,
    normalize_transition,
    resolve_control_attributes,
)
from .normalization.aliases import as_mapping, first_present

logger = logging.getLogger(__name__)

NEXT_STATE_KEYS = ("nextState", "next_state")


def iter_states(machine: Mapping[str, Any]) -> Iterator[Tuple[str, Mapping[str, Any]]]:
    for state_id, state in machine["states"].items():
        yield str(state_id), as_mapping(state)


def iter_raw_transitions(state: Mapping[str, Any]) -> Iterator[Tuple[int, Mapping[str, Any]]]:
    transitions = state.get("transitions")
    if not isinstance(transitions, (list, tuple)):
        return
    for index, transition in enumerate(transitions):
        if not isinstance(transition, Mapping):
            logger.debug("Skipping malformed transition #%d: %r", index, transition)
            continue
        yield index, transition


def _functions(state: Mapping[str, Any]) -> Optional[Tuple[str, ...]]:
    plural = state.get("functions")
    if isinstance(plural, (list, tuple)):
        return tuple(str(name) for name in plural)
    singular = state.get("function")
    if isinstance(singular, str) and singular:
        return (singular,)
    return None


def build_node(
    state_id: str,
    state: Mapping[str, Any],
    machine: Mapping[str, Any],
    journeys: Sequence[ProcessedJourneyDefinition],
) -> ProcessedNode:
    control_attributes = resolve_control_attributes(state)
    transitions = tuple(normalize_transition(raw) for _, raw in iter_raw_transitions(state))
    final_states = machine.get("finalStates")
    next_state = first_present(state, NEXT_STATE_KEYS)
    raw_type = state.get("type")
    state_type = raw_type if isinstance(raw_type, str) else PROCESS
    description = state.get("description")
    if state_type not in STATE_TYPES:
        logger.debug("State %r has unrecognized type %r", state_id, state_type)

    return ProcessedNode(
        id=state_id,
        label=format_label(state_id),
        type=state_type,
        description=description if isinstance(description, str) else "",
        is_initial=machine.get("initialState") == state_id,
        is_final=isinstance(final_states, (list, tuple)) and state_id in final_states,
        journey_paths=assign_journey_paths(state_id, state, journeys),
        relevant_chunks=collect_relevant_chunks(state),
        metadata=NodeMetadata(
            functions=_functions(state),
            next_state=next_state if isinstance(next_state, str) else None,
            control_attribute=control_attributes.primary,
            control_attributes=control_attributes.all or None,
            transitions=transitions or None,
        ),
    )


def build_nodes(
    machine: Mapping[str, Any], journeys: Sequence[ProcessedJourneyDefinition]
) -> List[ProcessedNode]:
    return [build_node(state_id, state, machine, journeys) for state_id, state in iter_states(machine)]


def build_edge(source_id: str, transition: Mapping[str, Any], index: int) -> ProcessedEdge:
    canonical = normalize_transition(transition)
    return ProcessedEdge(
        id=GraphOrchestrator.build_edge_id(source_id, canonical.target, index),
        source=source_id,
        target=canonical.target,
        label=format_transition_label(canonical),
        condition=canonical.condition,
        action=canonical.action,
        control_attribute=canonical.control_attribute,
        control_attribute_value=canonical.control_attribute_value,
    )


def build_edges(machine: Mapping[str, Any]) -> List[ProcessedEdge]:
    edges: List[ProcessedEdge] = []
    for state_id, state in iter_states(machine):
        for index, transition in iter_raw_transitions(state):
            edges.append(build_edge(state_id, transition, index))
    return edges
