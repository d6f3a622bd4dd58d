"""Deterministic orchestrator for canonical graph registration."""

from dataclasses import fields, is_dataclass
import logging
from typing import Any, Dict, List, Sequence

from .graph_model import (
    GraphMetadata,
    GraphState,
    ProcessedEdge,
    ProcessedJourneyDefinition,
    ProcessedNode,
    ProcessedStateMachine,
)

logger = logging.getLogger(__name__)


class GraphOrchestrator:
    """Owns identifiers and safe registration of nodes and edges."""

    def __init__(self) -> None:
        self.state = GraphState()

    def add_node(self, node: ProcessedNode) -> str:
        if node.id in self.state.nodes:
            raise ValueError(f"Duplicate node id: {node.id}")
        self.state.nodes[node.id] = node
        return node.id

    def add_edge(self, edge: ProcessedEdge) -> str:
        if edge.source not in self.state.nodes:
            raise ValueError(f"Unknown source node: {edge.source}")
        if edge.id in self.state.edge_ids:
            # Positional ids can collide when state ids contain "-"; both edges are kept.
            logger.debug("Edge id collision: %s", edge.id)
            if edge.id not in self.state.colliding_edge_ids:
                self.state.colliding_edge_ids.append(edge.id)
        if edge.target not in self.state.nodes:
            self.state.dangling_edges.append(edge)
        self.state.edge_ids.add(edge.id)
        self.state.edges.append(edge)
        return edge.id

    @property
    def dangling_edges(self) -> List[ProcessedEdge]:
        return list(self.state.dangling_edges)

    @property
    def colliding_edge_ids(self) -> List[str]:
        return list(self.state.colliding_edge_ids)

    def build_result(
        self,
        name: str,
        version: str,
        description: str,
        journeys: Sequence[ProcessedJourneyDefinition],
    ) -> ProcessedStateMachine:
        nodes = tuple(self.state.nodes.values())
        edges = tuple(self.state.edges)
        logger.info("Assembled graph %r: nodes=%d edges=%d", name, len(nodes), len(edges))
        return ProcessedStateMachine(
            nodes=nodes,
            edges=edges,
            metadata=GraphMetadata(
                name=name,
                version=version,
                description=description,
                total_states=len(nodes),
                total_transitions=len(edges),
                journeys=tuple(journeys) or None,
            ),
        )

    @staticmethod
    def build_edge_id(source_id: str, target_id: str, index: int) -> str:
        return f"{source_id}-{target_id}-{index}"


def _camel_case(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


def _to_json_value(value: Any) -> Any:
    if is_dataclass(value) and not isinstance(value, type):
        payload: Dict[str, Any] = {}
        for item in fields(value):
            field_value = getattr(value, item.name)
            if field_value is None:
                continue
            payload[_camel_case(item.name)] = _to_json_value(field_value)
        return payload
    if isinstance(value, (list, tuple)):
        return [_to_json_value(item) for item in value]
    return value


def to_json(processed: ProcessedStateMachine) -> Dict[str, Any]:
    """Serialize a canonical graph into its camelCase wire shape, omitting absent fields."""
    return _to_json_value(processed)

