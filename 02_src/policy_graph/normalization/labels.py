"""Human-readable labels for state ids and transitions."""

import re

from ..graph_model import ProcessedNodeTransition

_EQUALITY_RE = re.compile(r"(\w+)\s*==\s*['\"]?([\w-]+)['\"]?")
_BOOLEAN_RE = re.compile(r"\b(true|false)\b", flags=re.IGNORECASE)
CONDITION_LABEL_LIMIT = 30


def format_label(identifier: str) -> str:
    """``collect_beneficiary_info`` -> ``Collect Beneficiary Info``."""
    return " ".join(word[:1].upper() + word[1:] for word in identifier.split("_"))


def format_transition_label(transition: ProcessedNodeTransition) -> str:
    if transition.control_attribute_value:
        return transition.control_attribute_value

    condition = transition.condition.strip()
    if not condition:
        return format_label(transition.target)

    equality = _EQUALITY_RE.search(condition)
    if equality:
        return equality.group(2)

    boolean = _BOOLEAN_RE.search(condition)
    if boolean:
        return boolean.group(1).lower()

    return condition[:CONDITION_LABEL_LIMIT]
