"""Runtime settings resolved from the environment (and an optional .env file)."""

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

_TRUTHY = {"1", "true", "yes", "on"}


def _log_level(value: str, default: str) -> str:
    level = value.strip().upper()
    if isinstance(logging.getLevelName(level), int):
        return level
    logging.getLogger(__name__).warning("Unknown log level %r, using %s", value, default)
    return default


@dataclass(frozen=True)
class PipelineSettings:
    output_path: str = "graph_artifact.json"
    log_level: str = "INFO"
    strict_validation: bool = False

    @classmethod
    def from_env(cls) -> "PipelineSettings":
        load_dotenv()
        defaults = cls()
        strict_raw = os.getenv("POLICY_GRAPH_STRICT", "")
        return cls(
            output_path=os.getenv("POLICY_GRAPH_OUTPUT_PATH", defaults.output_path),
            log_level=_log_level(os.getenv("POLICY_GRAPH_LOG_LEVEL", defaults.log_level), defaults.log_level),
            strict_validation=strict_raw.strip().lower() in _TRUTHY,
        )
