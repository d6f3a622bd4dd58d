"""Journey-path assignment for a single state.

Membership is the union of independent resolution tiers, each a named
function below, followed by a deterministic ordering step.
"""

from typing import Any, Dict, List, Mapping, Sequence, Tuple

from ..graph_model import ProcessedJourneyDefinition
from .aliases import clean_string, first_present, first_string_list

JourneyList = Sequence[ProcessedJourneyDefinition]

JOURNEY_PATH_KEYS = ("journeyPaths", "journey_paths")
JOURNEY_ID_KEYS = ("journey_id", "journeyId")

LEGACY_ROUTINE_JOURNEYS: Tuple[Tuple[str, str], ...] = (
    ("routine1_", "new_trade_name"),
    ("routine2_", "existing_trade_name"),
    ("routine3_", "existing_trade_license"),
)
UNIVERSAL_ENTRY_STATES = frozenset({"entry_point", "customer_application_type_selection"})


def explicit_paths(state: Mapping[str, Any]) -> List[str]:
    return first_string_list(state, JOURNEY_PATH_KEYS)


def journey_id_paths(state: Mapping[str, Any], journeys: JourneyList) -> List[str]:
    """Resolve ``journey_id``: strings are ids, numbers are 1-based positions."""
    value = first_present(state, JOURNEY_ID_KEYS)
    if isinstance(value, bool):
        return []
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if isinstance(value, int):
        if 1 <= value <= len(journeys):
            return [journeys[value - 1].id]
        return []
    text = clean_string(value)
    return [text] if text else []


def definition_paths(state_id: str, journeys: JourneyList) -> List[str]:
    matches: List[str] = []
    for journey in journeys:
        if state_id in journey.seed_states or state_id in journey.path_states:
            matches.append(journey.id)
        elif any(state_id.startswith(prefix) for prefix in journey.routine_prefixes):
            matches.append(journey.id)
    return matches


def legacy_prefix_paths(state_id: str, journeys: JourneyList, resolved: Sequence[str]) -> List[str]:
    # Only for documents that predate journey definitions.
    if journeys or resolved:
        return []
    return [journey_id for prefix, journey_id in LEGACY_ROUTINE_JOURNEYS if state_id.startswith(prefix)]


def universal_entry_paths(state_id: str, journeys: JourneyList) -> List[str]:
    if state_id not in UNIVERSAL_ENTRY_STATES:
        return []
    return [journey.id for journey in journeys]


def order_journey_ids(journey_ids: Sequence[str], journeys: JourneyList) -> Tuple[str, ...]:
    positions: Dict[str, int] = {}
    for index, journey in enumerate(journeys):
        positions.setdefault(journey.id, index)
    unique = set(journey_ids)
    known = sorted((journey_id for journey_id in unique if journey_id in positions), key=positions.__getitem__)
    unknown = sorted(journey_id for journey_id in unique if journey_id not in positions)
    return tuple(known + unknown)


def assign_journey_paths(
    state_id: str, state: Mapping[str, Any], journeys: JourneyList
) -> Tuple[str, ...]:
    resolved: List[str] = []
    resolved.extend(explicit_paths(state))
    resolved.extend(journey_id_paths(state, journeys))
    resolved.extend(definition_paths(state_id, journeys))
    resolved.extend(legacy_prefix_paths(state_id, journeys, resolved))
    resolved.extend(universal_entry_paths(state_id, journeys))
    return order_journey_ids(resolved, journeys)
