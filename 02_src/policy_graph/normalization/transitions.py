"""Transition normalizer shared by node-local views and graph edges."""

from typing import Any, Mapping, Optional

from ..graph_model import ProcessedNodeTransition
from .aliases import clean_string

CONTROL_ATTRIBUTE_KEYS = ("controlAttribute", "control_attribute")
CONTROL_VALUE_KEYS = ("controlAttributeValue", "control_attribute_value")


def _scalar_text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    return clean_string(value)


def _first_scalar(record: Mapping[str, Any], keys) -> Optional[str]:
    for key in keys:
        text = _scalar_text(record.get(key))
        if text:
            return text
    return None


def transition_target(transition: Mapping[str, Any]) -> str:
    target = transition.get("target")
    return target if isinstance(target, str) else ""


def normalize_transition(transition: Mapping[str, Any]) -> ProcessedNodeTransition:
    return ProcessedNodeTransition(
        target=transition_target(transition),
        action=clean_string(transition.get("action")),
        condition=clean_string(transition.get("condition")),
        control_attribute=_first_scalar(transition, CONTROL_ATTRIBUTE_KEYS),
        control_attribute_value=_first_scalar(transition, CONTROL_VALUE_KEYS),
    )
