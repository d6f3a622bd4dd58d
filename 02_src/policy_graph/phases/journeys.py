"""Journey normalization phase."""

import logging
from typing import Any, Dict

from ..normalization import normalize_journeys
from ..pipeline import PipelinePhase

logger = logging.getLogger(__name__)


class JourneyNormalizationPhase(PipelinePhase):
    phase_name = "journeys"

    def run(self, context: Dict[str, Any]) -> Dict[str, Any]:
        journeys = normalize_journeys(context["raw_document"])
        logger.debug("Normalized %d journey definitions", len(journeys))
        return {"journeys": journeys}
