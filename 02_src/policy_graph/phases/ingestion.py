"""Document ingestion phase: load a state machine JSON document from disk."""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Union

from ..errors import DocumentLoadError
from ..pipeline import PipelinePhase

logger = logging.getLogger(__name__)

WRAPPER_KEY = "stateMachine"


def load_state_machine(path: Union[str, Path]) -> Any:
    """Read a document, unwrapping the ``{"stateMachine": {...}}`` file format."""
    input_path = Path(path)
    try:
        payload = json.loads(input_path.read_text(encoding="utf-8"))
    except OSError as error:
        raise DocumentLoadError(f"Failed to load state machine: {error}") from error
    except json.JSONDecodeError as error:
        raise DocumentLoadError(
            f"Failed to load state machine: invalid JSON in {input_path} ({error.msg})"
        ) from error

    if isinstance(payload, dict) and WRAPPER_KEY in payload:
        machine = payload[WRAPPER_KEY]
        if not isinstance(machine, dict):
            raise DocumentLoadError(
                f"Invalid state machine format: '{WRAPPER_KEY}' in {input_path} is not an object"
            )
        return machine
    return payload


def list_state_machines(directory: Union[str, Path]) -> List[str]:
    data_dir = Path(directory)
    if not data_dir.is_dir():
        logger.warning("State machine directory not found: %s", data_dir)
        return []
    return sorted(path.name for path in data_dir.iterdir() if path.is_file() and path.suffix == ".json")


class DocumentIngestionPhase(PipelinePhase):
    phase_name = "ingestion"

    def run(self, context: Dict[str, Any]) -> Dict[str, Any]:
        if "raw_document" in context:
            return {}
        input_path = context.get("input_path")
        if not input_path:
            raise DocumentLoadError("No input_path or raw_document provided to ingestion.")
        logger.info("Loading state machine from %s", input_path)
        return {"raw_document": load_state_machine(input_path)}
