"""Exception taxonomy for the policy graph pipeline."""

from typing import List, Sequence


class PolicyGraphError(Exception):
    """Base class for failures surfaced by the pipeline."""


class StateMachineStructureError(PolicyGraphError, ValueError):
    """Raised when the raw document cannot be treated as a state machine at all."""


class DocumentLoadError(PolicyGraphError):
    """Raised when a state machine document cannot be read or decoded."""


class StateMachineValidationError(PolicyGraphError):
    """Raised by strict validation when the graph has dangling references."""

    def __init__(self, warnings: Sequence[str]) -> None:
        self.warnings: List[str] = list(warnings)
        summary = "; ".join(self.warnings[:3])
        if len(self.warnings) > 3:
            summary += f" (+{len(self.warnings) - 3} more)"
        super().__init__(f"State machine failed validation: {summary}")
