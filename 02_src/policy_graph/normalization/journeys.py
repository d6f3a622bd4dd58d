"""Journey normalizer: raw journey records -> ProcessedJourneyDefinition."""

import logging
from typing import Any, List, Mapping, Optional, Tuple

from ..graph_model import ProcessedJourneyDefinition
from .aliases import dedupe, first_present, first_string, first_string_list
from .labels import format_label

logger = logging.getLogger(__name__)

JOURNEY_LIST_KEYS = ("journeys", "journeyDefinitions", "journey_definitions")

LABEL_KEYS = ("label", "name", "title")
SUGGESTED_JOURNEY_KEYS = ("suggestedJourney", "suggested_journey")
EXAMPLE_SCENARIO_KEYS = ("exampleScenario", "example_scenario")
DESCRIPTION_KEYS = ("description", "summary")
SEED_STATE_KEYS = ("seedStates", "seed_states")
ENTRY_STATE_KEYS = ("entryStates", "entry_states")
ROUTINE_PREFIX_KEYS = ("routinePrefixes", "routine_prefixes")
CONDITION_KEYWORD_KEYS = ("conditionKeywords", "condition_keywords")
PATH_STATE_KEYS = ("pathStates", "path_states")


def _journey_id(record: Mapping[str, Any]) -> Optional[str]:
    raw_id = record.get("id")
    if isinstance(raw_id, bool):
        return None
    if isinstance(raw_id, int):
        return str(raw_id)
    return first_string(record, ("id",))


def normalize_journey(record: Any) -> Optional[ProcessedJourneyDefinition]:
    """Normalize one journey record, or return None when it cannot be keyed."""
    if not isinstance(record, Mapping):
        return None
    journey_id = _journey_id(record)
    if not journey_id:
        return None

    suggested = first_string(record, SUGGESTED_JOURNEY_KEYS)
    label = first_string(record, LABEL_KEYS) or suggested or format_label(journey_id)
    seed_states = first_string_list(record, SEED_STATE_KEYS) + first_string_list(
        record, ENTRY_STATE_KEYS
    )

    return ProcessedJourneyDefinition(
        id=journey_id,
        label=label,
        intent=first_string(record, ("intent",)) or label,
        example_scenario=first_string(record, EXAMPLE_SCENARIO_KEYS),
        suggested_journey=suggested,
        description=first_string(record, DESCRIPTION_KEYS),
        seed_states=dedupe(seed_states),
        routine_prefixes=dedupe(first_string_list(record, ROUTINE_PREFIX_KEYS)),
        condition_keywords=dedupe(first_string_list(record, CONDITION_KEYWORD_KEYS)),
        path_states=dedupe(first_string_list(record, PATH_STATE_KEYS)),
    )


def normalize_journeys(machine: Mapping[str, Any]) -> Tuple[ProcessedJourneyDefinition, ...]:
    raw_list = first_present(machine, JOURNEY_LIST_KEYS)
    if not isinstance(raw_list, (list, tuple)):
        return ()

    journeys: List[ProcessedJourneyDefinition] = []
    seen_ids = set()
    for position, record in enumerate(raw_list):
        journey = normalize_journey(record)
        if journey is None:
            logger.debug("Skipping journey entry %d without a usable id", position)
            continue
        if journey.id in seen_ids:
            logger.debug("Skipping duplicate journey id %r", journey.id)
            continue
        seen_ids.add(journey.id)
        journeys.append(journey)
    return tuple(journeys)
