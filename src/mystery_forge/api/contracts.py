"""Typed request/response contracts for the HTTP API."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from mystery_forge.core.dialogue_enhancer import SpeakerIntelligence, Tone
from mystery_forge.diagrams.common import DiagramKind, Direction
from mystery_forge.diagrams.flowchart import EdgeType, NodeShape


class ContractModel(BaseModel):
    """Base model config used by all API contracts."""

    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)


class TitlesRequest(ContractModel):
    count: int = Field(ge=0)
    seed: int | None = None


class TitlesResponse(ContractModel):
    titles: list[str]
    requested: int
    shortfall: int


class CharacterResponse(ContractModel):
    id: str
    name: str
    role: str
    archetype: str
    core_values: list[str]
    expertise: list[str]
    narrative_function: str
    quirk: str


class MysteryComponentResponse(ContractModel):
    type: str
    description: str
    significance: str


class PlotTwistResponse(ContractModel):
    id: str
    description: str
    technical_context: str
    reveal_moment: str


class MysteryPlotResponse(ContractModel):
    id: str
    title: str
    protagonist: str
    inciting_incident: str
    technical_mystery: MysteryComponentResponse
    red_herrings: list[str]
    clues: list[str]
    major_twist: PlotTwistResponse
    resolution: str
    mermaid_graph_concept: str


class RefineRequest(ContractModel):
    # Leading/trailing whitespace is meaningful to the style stage.
    model_config = ConfigDict(extra="forbid", str_strip_whitespace=False)

    text: str = Field(max_length=20_000)
    tone: Tone | None = None
    speaker_intelligence_level: SpeakerIntelligence | None = None
    add_dramatic_pauses: bool | None = None
    seed: int | None = None


class RefineResponse(ContractModel):
    text: str
    polite: bool


class FlowNodeBlock(ContractModel):
    id: str = Field(min_length=1, max_length=120)
    label: str = Field(max_length=2000)
    shape: NodeShape = "rectangle"
    style: str | None = None


class FlowEdgeBlock(ContractModel):
    source: str = Field(min_length=1, max_length=120)
    target: str = Field(min_length=1, max_length=120)
    label: str | None = None
    type: EdgeType = "arrow"


class SubgraphBlock(ContractModel):
    id: str = Field(min_length=1, max_length=120)
    title: str
    nodes: list[FlowNodeBlock] = Field(default_factory=list)
    edges: list[FlowEdgeBlock] = Field(default_factory=list)
    direction: Direction | None = None


class FlowchartRequest(ContractModel):
    direction: Direction = "TD"
    nodes: list[FlowNodeBlock] = Field(default_factory=list)
    edges: list[FlowEdgeBlock] = Field(default_factory=list)
    subgraphs: list[SubgraphBlock] = Field(default_factory=list)

    @field_validator("nodes")
    @classmethod
    def _limit_nodes(cls, values: list[FlowNodeBlock]) -> list[FlowNodeBlock]:
        if len(values) > 500:
            raise ValueError("flowcharts are limited to 500 root nodes.")
        return values


class DiagramResponse(ContractModel):
    kind: DiagramKind
    mermaid: str


class BookSummaryResponse(ContractModel):
    id: str
    title: str
    summary: str
    diagram_kinds: list[DiagramKind]


class SeriesResponse(ContractModel):
    id: str
    title: str
    description: str
    author: str | None = None
    genre: str | None = None
    books: list[BookSummaryResponse]
