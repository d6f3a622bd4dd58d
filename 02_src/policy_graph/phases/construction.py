"""Graph construction phase: nodes, then edges, as a LangGraph workflow."""

import logging
from typing import Any, Dict, List, Mapping, Tuple

from langgraph.graph import END, START, StateGraph
from typing_extensions import TypedDict

from ..builders import build_edges, build_nodes
from ..graph_model import ProcessedEdge, ProcessedJourneyDefinition, ProcessedNode
from ..graph_orchestrator import GraphOrchestrator
from ..normalization.aliases import clean_string
from ..pipeline import PipelinePhase

logger = logging.getLogger(__name__)


def _metadata_text(value: Any) -> str:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return clean_string(value)


class ConstructionState(TypedDict):
    machine: Mapping[str, Any]
    journeys: Tuple[ProcessedJourneyDefinition, ...]
    graph_nodes: List[ProcessedNode]
    graph_edges: List[ProcessedEdge]


class GraphConstructionPhase(PipelinePhase):
    phase_name = "construction"

    def __init__(self) -> None:
        self._workflow = self._build_workflow()

    def run(self, context: Dict[str, Any]) -> Dict[str, Any]:
        machine = context["raw_document"]
        journeys = tuple(context.get("journeys", ()))
        orchestrator: GraphOrchestrator = context.get("orchestrator") or GraphOrchestrator()

        result_state = self._workflow.invoke(
            {
                "machine": machine,
                "journeys": journeys,
                "graph_nodes": [],
                "graph_edges": [],
            }
        )

        for node in result_state.get("graph_nodes", []):
            orchestrator.add_node(node)
        for edge in result_state.get("graph_edges", []):
            orchestrator.add_edge(edge)

        processed = orchestrator.build_result(
            name=_metadata_text(machine.get("name")),
            version=_metadata_text(machine.get("version")),
            description=_metadata_text(machine.get("description")),
            journeys=journeys,
        )
        return {"orchestrator": orchestrator, "processed": processed}

    def _build_workflow(self):
        graph = StateGraph(ConstructionState)
        graph.add_node("build_nodes", self._build_nodes)
        graph.add_node("build_edges", self._build_edges)
        graph.add_edge(START, "build_nodes")
        graph.add_edge("build_nodes", "build_edges")
        graph.add_edge("build_edges", END)
        return graph.compile()

    @staticmethod
    def _build_nodes(state: ConstructionState) -> Dict[str, Any]:
        nodes = build_nodes(state["machine"], state.get("journeys", ()))
        logger.debug("Built %d nodes", len(nodes))
        return {"graph_nodes": nodes}

    @staticmethod
    def _build_edges(state: ConstructionState) -> Dict[str, Any]:
        edges = build_edges(state["machine"])
        logger.debug("Built %d edges", len(edges))
        return {"graph_edges": edges}
