"""Canonical graph model produced from a raw policy state machine."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set, Tuple

DECISION = "decision"
PROCESS = "process"
FINAL = "final"
NOTIFY = "notify"
STATE_TYPES = (DECISION, PROCESS, FINAL, NOTIFY)


@dataclass(frozen=True)
class RelevantChunk:
    language: str
    text: str
    reference_id: Optional[str] = None
    source: Optional[str] = None
    section: Optional[str] = None
    tags: Optional[Tuple[str, ...]] = None


@dataclass(frozen=True)
class ProcessedJourneyDefinition:
    id: str
    label: str
    intent: str
    example_scenario: Optional[str] = None
    suggested_journey: Optional[str] = None
    description: Optional[str] = None
    seed_states: Tuple[str, ...] = ()
    routine_prefixes: Tuple[str, ...] = ()
    condition_keywords: Tuple[str, ...] = ()
    path_states: Tuple[str, ...] = ()


@dataclass(frozen=True)
class ControlAttributes:
    primary: Optional[str]
    all: Tuple[str, ...] = ()


@dataclass(frozen=True)
class ProcessedNodeTransition:
    target: str
    action: str
    condition: str
    control_attribute: Optional[str] = None
    control_attribute_value: Optional[str] = None


@dataclass(frozen=True)
class NodeMetadata:
    functions: Optional[Tuple[str, ...]] = None
    next_state: Optional[str] = None
    control_attribute: Optional[str] = None
    control_attributes: Optional[Tuple[str, ...]] = None
    transitions: Optional[Tuple[ProcessedNodeTransition, ...]] = None


@dataclass(frozen=True)
class ProcessedNode:
    id: str
    label: str
    type: str
    description: str
    is_initial: bool
    is_final: bool
    journey_paths: Tuple[str, ...] = ()
    relevant_chunks: Optional[Tuple[RelevantChunk, ...]] = None
    metadata: NodeMetadata = field(default_factory=NodeMetadata)


@dataclass(frozen=True)
class ProcessedEdge:
    id: str
    source: str
    target: str
    label: str
    condition: str
    action: str
    control_attribute: Optional[str] = None
    control_attribute_value: Optional[str] = None


@dataclass(frozen=True)
class GraphMetadata:
    name: str
    version: str
    description: str
    total_states: int
    total_transitions: int
    journeys: Optional[Tuple[ProcessedJourneyDefinition, ...]] = None


@dataclass(frozen=True)
class ProcessedStateMachine:
    nodes: Tuple[ProcessedNode, ...]
    edges: Tuple[ProcessedEdge, ...]
    metadata: GraphMetadata


@dataclass
class GraphState:
    nodes: Dict[str, ProcessedNode] = field(default_factory=dict)
    edges: List[ProcessedEdge] = field(default_factory=list)
    edge_ids: Set[str] = field(default_factory=set)
    dangling_edges: List[ProcessedEdge] = field(default_factory=list)
    colliding_edge_ids: List[str] = field(default_factory=list)
