"""Control-attribute resolution across singular/plural and camel/snake fields."""

from typing import Any, List, Mapping, Optional

from ..graph_model import ControlAttributes
from .aliases import clean_string, dedupe, first_string, string_list

SINGULAR_KEYS = ("controlAttribute", "control_attribute")
PLURAL_KEYS = ("controlAttributes", "control_attributes")


def _first_element(value: Any) -> str:
    if isinstance(value, str):
        return value.strip()
    if isinstance(value, (list, tuple)) and value:
        return clean_string(value[0])
    return ""


def _primary_candidate(state: Mapping[str, Any]) -> Optional[str]:
    explicit = first_string(state, SINGULAR_KEYS)
    if explicit:
        return explicit
    for key in PLURAL_KEYS:
        candidate = _first_element(state.get(key))
        if candidate:
            return candidate
    return None


def resolve_control_attributes(state: Mapping[str, Any]) -> ControlAttributes:
    """Resolve the primary control attribute plus the full ordered set.

    Primary precedence: ``controlAttribute`` -> ``control_attribute`` ->
    first of ``controlAttributes`` -> first of ``control_attributes``. The
    set is the primary followed by both plural lists, deduplicated.
    """
    candidate = _primary_candidate(state)
    collected: List[str] = [candidate] if candidate else []
    for key in PLURAL_KEYS:
        collected.extend(string_list(state.get(key)))

    all_attributes = dedupe(collected)
    primary = candidate or (all_attributes[0] if all_attributes else None)
    return ControlAttributes(primary=primary, all=all_attributes)
