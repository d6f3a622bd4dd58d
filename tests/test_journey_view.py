"""Tests for journey-scoped graph filtering."""

from policy_graph import filter_for_journey, process_state_machine


class TestFilterForJourney:
    """Breadth-first journey sub-graphs."""

    def test_existing_trade_name_sub_graph(self, journey_machine):
        view = filter_for_journey(process_state_machine(journey_machine), "existing_trade_name")
        assert [node.id for node in view.nodes] == [
            "entry_point",
            "customer_application_type_selection",
            "routine2_collect_info",
        ]
        assert [edge.id for edge in view.edges] == [
            "entry_point-customer_application_type_selection-0",
            "customer_application_type_selection-routine2_collect_info-1",
        ]
        assert view.metadata.total_states == 3
        assert view.metadata.total_transitions == 2

    def test_transitions_are_pruned_to_kept_targets(self, journey_machine):
        view = filter_for_journey(process_state_machine(journey_machine), "existing_trade_name")
        nodes = {node.id: node for node in view.nodes}
        selection = nodes["customer_application_type_selection"]
        assert [t.target for t in selection.metadata.transitions] == ["routine2_collect_info"]
        assert nodes["routine2_collect_info"].metadata.transitions is None

    def test_neutral_targets_are_followed(self, journey_machine):
        view = filter_for_journey(process_state_machine(journey_machine), "existing_trade_license")
        assert [node.id for node in view.nodes] == [
            "entry_point",
            "customer_application_type_selection",
            "verify_license",
            "application_complete",
            "application_rejected",
        ]
        assert len(view.edges) == 3

    def test_empty_graph_stays_empty(self):
        view = filter_for_journey(process_state_machine({"states": {}}), "anything")
        assert view.nodes == ()
        assert view.metadata.total_states == 0
