"""Pipeline abstractions and sequential runner."""

from abc import ABC, abstractmethod
import logging
from typing import Any, Dict, Iterable, List

logger = logging.getLogger(__name__)

PHASE_LOG_KEY = "completed_phases"


class PipelinePhase(ABC):
    phase_name: str

    @abstractmethod
    def run(self, context: Dict[str, Any]) -> Dict[str, Any]:
        raise NotImplementedError


class PipelineRunner:
    """Runs phases in order, merging each phase's output into one context."""

    def __init__(self, phases: Iterable[PipelinePhase]) -> None:
        self.phases: List[PipelinePhase] = list(phases)

    @property
    def phase_names(self) -> List[str]:
        return [phase.phase_name for phase in self.phases]

    def run(self, context: Dict[str, Any]) -> Dict[str, Any]:
        current = dict(context)
        completed: List[str] = list(current.get(PHASE_LOG_KEY, []))
        for phase in self.phases:
            logger.debug("Running phase '%s'", phase.phase_name)
            phase_result = phase.run(current)
            if not isinstance(phase_result, dict):
                raise TypeError(f"Phase '{phase.phase_name}' must return dict context.")
            current.update(phase_result)
            completed.append(phase.phase_name)
            current[PHASE_LOG_KEY] = list(completed)
        return current
