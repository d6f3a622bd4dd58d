"""Journey-scoped views over a canonical graph."""

from collections import deque
from dataclasses import replace
from typing import Dict, List, Optional, Set

from .graph_model import (
    GraphMetadata,
    ProcessedEdge,
    ProcessedJourneyDefinition,
    ProcessedNode,
    ProcessedStateMachine,
)
from .normalization import UNIVERSAL_ENTRY_STATES


def find_journey(processed: ProcessedStateMachine, journey_id: str) -> Optional[ProcessedJourneyDefinition]:
    for journey in processed.metadata.journeys or ():
        if journey.id == journey_id:
            return journey
    return None


def filter_for_journey(processed: ProcessedStateMachine, journey_id: str) -> ProcessedStateMachine:
    """Restrict the graph to the states reachable within one journey.

    Starts from member, seed, path and universal entry states, then walks
    outgoing edges into targets that belong to the journey or carry no
    journey at all.
    """
    if not processed.nodes:
        return replace(
            processed,
            nodes=(),
            edges=(),
            metadata=replace(processed.metadata, total_states=0, total_transitions=0),
        )

    node_map: Dict[str, ProcessedNode] = {node.id: node for node in processed.nodes}
    seed_states: Set[str] = set(UNIVERSAL_ENTRY_STATES)
    path_states: Set[str] = set()
    journey = find_journey(processed, journey_id)
    if journey is not None:
        seed_states.update(journey.seed_states)
        path_states.update(journey.path_states)

    included: Set[str] = {node.id for node in processed.nodes if journey_id in node.journey_paths}
    included.update(state_id for state_id in seed_states | path_states if state_id in node_map)

    edges_by_source: Dict[str, List[ProcessedEdge]] = {}
    for edge in processed.edges:
        edges_by_source.setdefault(edge.source, []).append(edge)

    queue = deque(sorted(included))
    while queue:
        node_id = queue.popleft()
        for edge in edges_by_source.get(node_id, []):
            target = node_map.get(edge.target)
            if target is None or target.id in included:
                continue
            belongs = (
                journey_id in target.journey_paths
                or target.id in seed_states
                or target.id in path_states
            )
            if belongs or not target.journey_paths:
                included.add(target.id)
                queue.append(target.id)

    nodes = tuple(_prune_transitions(node, included) for node in processed.nodes if node.id in included)
    edges = tuple(edge for edge in processed.edges if edge.source in included and edge.target in included)
    metadata: GraphMetadata = replace(
        processed.metadata, total_states=len(nodes), total_transitions=len(edges)
    )
    return ProcessedStateMachine(nodes=nodes, edges=edges, metadata=metadata)


def _prune_transitions(node: ProcessedNode, included: Set[str]) -> ProcessedNode:
    transitions = node.metadata.transitions
    if not transitions:
        return node
    kept = tuple(transition for transition in transitions if transition.target in included)
    return replace(node, metadata=replace(node.metadata, transitions=kept or None))
