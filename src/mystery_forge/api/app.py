"""FastAPI local-preview application exposing the generators and builders."""

from __future__ import annotations

import logging
import random
from typing import Literal

from fastapi import FastAPI, HTTPException, Query, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from mystery_forge.api.contracts import (
    BookSummaryResponse,
    CharacterResponse,
    DiagramResponse,
    FlowchartRequest,
    MysteryPlotResponse,
    RefineRequest,
    RefineResponse,
    SeriesResponse,
    TitlesRequest,
    TitlesResponse,
)
from mystery_forge.application.story_diagrams import (
    plot_flowchart,
    plot_sequence_diagram,
    series_gantt,
)
from mystery_forge.core.character_generator import generate_book_cast
from mystery_forge.core.dialogue_enhancer import DialogueEnhancer, EnhancementOptions
from mystery_forge.core.mystery_plot_generator import generate_book_series_plots
from mystery_forge.core.randomness import RandomSource, resolve_rng
from mystery_forge.core.title_generator import generate_book_titles_report
from mystery_forge.data.book_series import get_series, list_series
from mystery_forge.diagrams.common import DiagramKind, detect_diagram_kind
from mystery_forge.diagrams.flowchart import FlowchartBuilder, FlowEdge, FlowNode
from mystery_forge.domain.models import BookSeries
from mystery_forge.settings import RuntimeSettings

logger = logging.getLogger(__name__)

PlotDiagramKind = Literal["flowchart", "sequence", "gantt"]


class HealthResponse(BaseModel):
    """Simple health payload used by probes."""

    status: Literal["ok"] = "ok"
    service: str = "mystery_forge"


class ApiRootResponse(BaseModel):
    """Describes currently available API capabilities."""

    name: str = "mystery_forge"
    stage: Literal["local-preview"] = "local-preview"
    persistence: Literal["none"] = "none"
    endpoints: list[str] = Field(
        default_factory=lambda: [
            "/healthz",
            "/api/v1",
            "/api/v1/titles",
            "/api/v1/cast",
            "/api/v1/plots",
            "/api/v1/plots/diagram",
            "/api/v1/dialogue/refine",
            "/api/v1/diagrams/flowchart",
            "/api/v1/series",
            "/api/v1/series/{series_id}",
        ]
    )


def _rng(seed: int | None) -> RandomSource:
    return random.Random(seed) if seed is not None else resolve_rng()


def _series_response(series: BookSeries) -> SeriesResponse:
    books: list[BookSummaryResponse] = []
    for book in series.books:
        graphs = [book.mermaid_graph or ""] + [chapter.mermaid_graph for chapter in book.chapters]
        kinds: list[DiagramKind] = []
        for graph in graphs:
            kind = detect_diagram_kind(graph)
            if kind is not None and kind not in kinds:
                kinds.append(kind)
        books.append(
            BookSummaryResponse(
                id=book.id, title=book.title, summary=book.summary, diagram_kinds=kinds
            )
        )
    return SeriesResponse(
        id=series.id,
        title=series.title,
        description=series.description,
        author=series.author,
        genre=series.genre,
        books=books,
    )


def create_app(settings: RuntimeSettings | None = None) -> FastAPI:
    """Create the API application."""
    effective = settings or RuntimeSettings.from_env()

    app = FastAPI(
        title="mystery_forge API",
        version="0.4.0",
        description=(
            "Local preview API for procedural mystery-book content and Mermaid diagrams. "
            "Every response is generated in memory; nothing is stored."
        ),
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        openapi_tags=[
            {"name": "system", "description": "Service health and runtime metadata."},
            {"name": "api", "description": "API discovery and root-level capability listing."},
            {"name": "generators", "description": "Titles, casts and mystery plots."},
            {"name": "dialogue", "description": "Dialogue sanitizing and refinement."},
            {"name": "diagrams", "description": "Mermaid diagram compilation."},
            {"name": "series", "description": "Authored series catalog."},
        ],
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(effective.cors_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    logger.info(
        "api.start max_batch=%s title_attempt_factor=%s",
        effective.max_batch,
        effective.title_attempt_factor,
    )

    @app.exception_handler(ValueError)
    async def value_error_handler(request: Request, error: ValueError) -> JSONResponse:
        logger.info("api.rejected path=%s reason=%s", request.url.path, error)
        return JSONResponse(status_code=422, content={"detail": str(error)})

    def check_batch(count: int) -> None:
        if count > effective.max_batch:
            raise HTTPException(
                status_code=422,
                detail=f"count must be <= {effective.max_batch}.",
            )

    @app.get("/healthz", response_model=HealthResponse, tags=["system"])
    def healthz() -> HealthResponse:
        return HealthResponse()

    @app.get("/api/v1", response_model=ApiRootResponse, tags=["api"])
    def api_root() -> ApiRootResponse:
        return ApiRootResponse()

    @app.post("/api/v1/titles", response_model=TitlesResponse, tags=["generators"])
    def titles(payload: TitlesRequest) -> TitlesResponse:
        check_batch(payload.count)
        batch = generate_book_titles_report(
            payload.count,
            rng=_rng(payload.seed),
            attempt_factor=effective.title_attempt_factor,
        )
        return TitlesResponse(
            titles=batch.titles, requested=batch.requested, shortfall=batch.shortfall
        )

    @app.get("/api/v1/cast", response_model=list[CharacterResponse], tags=["generators"])
    def cast(
        complexity_level: int = Query(default=1, ge=1, le=20),
        seed: int | None = None,
    ) -> list[CharacterResponse]:
        members = generate_book_cast(complexity_level, rng=_rng(seed))
        return [CharacterResponse.model_validate(member.to_dict()) for member in members]

    @app.get("/api/v1/plots", response_model=list[MysteryPlotResponse], tags=["generators"])
    def plots(
        count: int = Query(default=1, ge=0),
        seed: int | None = None,
    ) -> list[MysteryPlotResponse]:
        check_batch(count)
        series = generate_book_series_plots(count, rng=_rng(seed))
        return [MysteryPlotResponse.model_validate(plot.to_dict()) for plot in series]

    @app.get("/api/v1/plots/diagram", response_model=DiagramResponse, tags=["diagrams"])
    def plot_diagram(
        kind: PlotDiagramKind = "flowchart",
        count: int = Query(default=3, ge=1, le=50),
        seed: int | None = None,
    ) -> DiagramResponse:
        series = generate_book_series_plots(count, rng=_rng(seed))
        if kind == "gantt":
            return DiagramResponse(kind="gantt", mermaid=series_gantt(series))
        if kind == "sequence":
            return DiagramResponse(kind="sequence", mermaid=plot_sequence_diagram(series[0]))
        return DiagramResponse(kind="flowchart", mermaid=plot_flowchart(series[0]))

    @app.post("/api/v1/dialogue/refine", response_model=RefineResponse, tags=["dialogue"])
    def refine(payload: RefineRequest) -> RefineResponse:
        options = EnhancementOptions(
            tone=payload.tone,
            speaker_intelligence_level=payload.speaker_intelligence_level,
            add_dramatic_pauses=payload.add_dramatic_pauses,
        )
        text = DialogueEnhancer.refine(payload.text, options, rng=_rng(payload.seed))
        return RefineResponse(text=text, polite=DialogueEnhancer.validate_politeness(text))

    @app.post("/api/v1/diagrams/flowchart", response_model=DiagramResponse, tags=["diagrams"])
    def flowchart(payload: FlowchartRequest) -> DiagramResponse:
        builder = FlowchartBuilder(payload.direction)
        for node in payload.nodes:
            builder.add_node(node.id, node.label, node.shape, node.style)
        for subgraph in payload.subgraphs:
            builder.add_subgraph(
                subgraph.id,
                subgraph.title,
                nodes=[FlowNode(**node.model_dump()) for node in subgraph.nodes],
                edges=[FlowEdge(**edge.model_dump()) for edge in subgraph.edges],
                direction=subgraph.direction,
            )
        for edge in payload.edges:
            builder.add_edge(edge.source, edge.target, edge.label, edge.type)
        return DiagramResponse(kind="flowchart", mermaid=builder.build())

    @app.get("/api/v1/series", response_model=list[SeriesResponse], tags=["series"])
    def series_catalog() -> list[SeriesResponse]:
        return [_series_response(series) for series in list_series()]

    @app.get("/api/v1/series/{series_id}", response_model=SeriesResponse, tags=["series"])
    def series_detail(series_id: str) -> SeriesResponse:
        try:
            series = get_series(series_id)
        except KeyError as error:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail=str(error.args[0])
            ) from error
        return _series_response(series)

    return app


app = create_app()
