"""Tests for GraphOrchestrator registration rules."""

import pytest

from policy_graph import GraphOrchestrator, ProcessedEdge, ProcessedNode


def _node(node_id):
    return ProcessedNode(
        id=node_id, label=node_id.title(), type="process", description="", is_initial=False, is_final=False
    )


def _edge(source, target, index=0):
    return ProcessedEdge(
        id=GraphOrchestrator.build_edge_id(source, target, index),
        source=source,
        target=target,
        label="",
        condition="",
        action="",
    )


class TestGraphOrchestrator:
    """Identifier ownership and tolerated dangling targets."""

    def test_edge_id_format(self):
        assert GraphOrchestrator.build_edge_id("a", "b", 2) == "a-b-2"

    def test_duplicate_node_rejected(self):
        orchestrator = GraphOrchestrator()
        orchestrator.add_node(_node("a"))
        with pytest.raises(ValueError, match="Duplicate node id"):
            orchestrator.add_node(_node("a"))

    def test_unknown_source_rejected(self):
        orchestrator = GraphOrchestrator()
        with pytest.raises(ValueError, match="Unknown source node"):
            orchestrator.add_edge(_edge("a", "b"))

    def test_colliding_edge_ids_are_kept_and_recorded(self):
        orchestrator = GraphOrchestrator()
        for node_id in ("a-b", "a", "c", "b-c"):
            orchestrator.add_node(_node(node_id))
        orchestrator.add_edge(_edge("a-b", "c"))
        orchestrator.add_edge(_edge("a", "b-c"))
        result = orchestrator.build_result(name="", version="", description="", journeys=())
        assert [(edge.source, edge.target) for edge in result.edges] == [("a-b", "c"), ("a", "b-c")]
        assert orchestrator.colliding_edge_ids == ["a-b-c-0"]

    def test_dangling_target_is_recorded(self):
        orchestrator = GraphOrchestrator()
        orchestrator.add_node(_node("a"))
        orchestrator.add_edge(_edge("a", "ghost"))
        assert [edge.id for edge in orchestrator.dangling_edges] == ["a-ghost-0"]

    def test_build_result_totals(self):
        orchestrator = GraphOrchestrator()
        orchestrator.add_node(_node("a"))
        orchestrator.add_node(_node("b"))
        orchestrator.add_edge(_edge("a", "b"))
        result = orchestrator.build_result(name="n", version="1", description="d", journeys=())
        assert result.metadata.total_states == 2
        assert result.metadata.total_transitions == 1
        assert result.metadata.journeys is None
