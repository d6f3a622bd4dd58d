"""Unit tests for transition normalization and label formatting."""

from policy_graph.graph_model import ProcessedNodeTransition
from policy_graph.normalization import format_label, format_transition_label, normalize_transition


class TestNormalizeTransition:
    """Canonical transition fields."""

    def test_trims_condition_and_action(self):
        transition = normalize_transition({"condition": "  a == 1 ", "target": "next", "action": " go "})
        assert transition.condition == "a == 1"
        assert transition.action == "go"
        assert transition.target == "next"
        assert transition.control_attribute is None
        assert transition.control_attribute_value is None

    def test_missing_fields_default_to_empty(self):
        transition = normalize_transition({"target": "next", "condition": None, "action": 5})
        assert transition.condition == ""
        assert transition.action == ""

    def test_control_attribute_aliases(self):
        transition = normalize_transition(
            {
                "target": "next",
                "control_attribute": " role ",
                "control_attribute_value": "executive",
            }
        )
        assert transition.control_attribute == "role"
        assert transition.control_attribute_value == "executive"

    def test_blank_control_values_are_omitted(self):
        transition = normalize_transition(
            {"target": "next", "controlAttribute": " ", "controlAttributeValue": ""}
        )
        assert transition.control_attribute is None
        assert transition.control_attribute_value is None

    def test_boolean_control_value_is_rendered_lowercase(self):
        transition = normalize_transition({"target": "next", "controlAttributeValue": True})
        assert transition.control_attribute_value == "true"


class TestLabels:
    """State and transition labels."""

    def test_format_label(self):
        assert format_label("collect_beneficiary_info") == "Collect Beneficiary Info"
        assert format_label("entry") == "Entry"

    def test_control_value_takes_precedence(self):
        transition = ProcessedNodeTransition(
            target="t", action="", condition="role == 'manager'", control_attribute_value="executive"
        )
        assert format_transition_label(transition) == "executive"

    def test_equality_condition(self):
        transition = ProcessedNodeTransition(target="t", action="", condition='input.role == "executive"')
        assert format_transition_label(transition) == "executive"

    def test_boolean_token(self):
        transition = ProcessedNodeTransition(target="t", action="", condition="isValid AND TRUE")
        assert format_transition_label(transition) == "true"

    def test_long_condition_is_truncated(self):
        condition = "applicant has provided every required supporting document"
        transition = ProcessedNodeTransition(target="t", action="", condition=condition)
        assert format_transition_label(transition) == condition[:30]

    def test_empty_condition_uses_target_label(self):
        transition = ProcessedNodeTransition(target="collect_beneficiary_info", action="", condition="")
        assert format_transition_label(transition) == "Collect Beneficiary Info"
