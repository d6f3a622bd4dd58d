"""CLI entrypoint: build the canonical graph for a state machine document."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List

from .config import PipelineSettings
from .errors import PolicyGraphError
from .graph_orchestrator import GraphOrchestrator, to_json
from .journey_view import filter_for_journey
from .phases import DocumentIngestionPhase, ValidationAndQAPhase
from .pipeline import PHASE_LOG_KEY, PipelinePhase, PipelineRunner
from .processor import build_core_phases


def build_default_phases(strict: bool = False) -> List[PipelinePhase]:
    return [
        DocumentIngestionPhase(),
        *build_core_phases(),
        ValidationAndQAPhase(strict=strict),
    ]


def run_pipeline(input_path: str, journey_id: str = "", strict: bool = False) -> Dict[str, Any]:
    initial_context: Dict[str, Any] = {
        "input_path": input_path,
        "orchestrator": GraphOrchestrator(),
    }
    runner = PipelineRunner(phases=build_default_phases(strict=strict))
    final_context = runner.run(initial_context)

    processed = final_context["processed"]
    if journey_id:
        processed = filter_for_journey(processed, journey_id)
    artifact = to_json(processed)
    artifact["meta"] = {
        "input_path": input_path,
        "journey": journey_id or None,
        "phases": final_context.get(PHASE_LOG_KEY, []),
        "validation_report": final_context.get("validation_report", {}),
    }
    return artifact


def parse_args(argv: List[str] | None = None, settings: PipelineSettings | None = None) -> argparse.Namespace:
    settings = settings or PipelineSettings()
    parser = argparse.ArgumentParser(
        description="Convert a policy state machine document into a canonical graph JSON artifact."
    )
    parser.add_argument("--input-path", required=True, help="Path to the state machine JSON document.")
    parser.add_argument(
        "--output-path",
        default=settings.output_path,
        help="Where to save the resulting graph artifact JSON.",
    )
    parser.add_argument("--journey", default="", help="Only keep the sub-graph of this journey id.")
    parser.add_argument(
        "--strict",
        action="store_true",
        default=settings.strict_validation,
        help="Fail when transitions or initial/final states reference undeclared states.",
    )
    return parser.parse_args(argv)


def main(argv: List[str] | None = None) -> int:
    settings = PipelineSettings.from_env()
    args = parse_args(argv, settings)
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")

    try:
        artifact = run_pipeline(args.input_path, journey_id=args.journey, strict=args.strict)
    except PolicyGraphError as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1

    output_path = Path(args.output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(json.dumps(artifact, ensure_ascii=False, indent=2), encoding="utf-8")
    print(f"Graph artifact saved to: {output_path.resolve()}")
    print(
        "Counts:",
        f"nodes={len(artifact['nodes'])}",
        f"edges={len(artifact['edges'])}",
        f"warnings={len(artifact['meta']['validation_report'].get('warnings', []))}",
    )
    return 0
