"""Python-first interface for the local preview API."""

from __future__ import annotations

from typing import Any

import httpx

from mystery_forge.api.contracts import (
    CharacterResponse,
    DiagramResponse,
    MysteryPlotResponse,
    RefineRequest,
    RefineResponse,
    SeriesResponse,
    TitlesRequest,
    TitlesResponse,
)


class ForgeApiClient:
    """Tiny typed API client for Python users."""

    def __init__(self, api_base_url: str = "http://127.0.0.1:8000") -> None:
        """Initialize client with an API base URL."""
        self._api_base_url = api_base_url.rstrip("/")

    @property
    def api_base_url(self) -> str:
        """Return normalized API base URL."""
        return self._api_base_url

    def _get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        query = {key: value for key, value in (params or {}).items() if value is not None}
        response = httpx.get(f"{self._api_base_url}{path}", params=query, timeout=30.0)
        response.raise_for_status()
        return response.json()

    def titles(self, *, count: int, seed: int | None = None) -> TitlesResponse:
        """Request a batch of unique book titles."""
        request = TitlesRequest(count=count, seed=seed)
        response = httpx.post(
            f"{self._api_base_url}/api/v1/titles",
            json=request.model_dump(),
            timeout=30.0,
        )
        response.raise_for_status()
        return TitlesResponse.model_validate(response.json())

    def cast(
        self, *, complexity_level: int = 1, seed: int | None = None
    ) -> list[CharacterResponse]:
        """Generate a cast list rooted at the protagonist."""
        payload = self._get(
            "/api/v1/cast", {"complexity_level": complexity_level, "seed": seed}
        )
        return [CharacterResponse.model_validate(item) for item in payload]

    def plots(self, *, count: int = 1, seed: int | None = None) -> list[MysteryPlotResponse]:
        """Generate a series of volume-numbered mystery plots."""
        payload = self._get("/api/v1/plots", {"count": count, "seed": seed})
        return [MysteryPlotResponse.model_validate(item) for item in payload]

    def refine(
        self,
        *,
        text: str,
        tone: str | None = None,
        add_dramatic_pauses: bool | None = None,
        seed: int | None = None,
    ) -> RefineResponse:
        """Run a line of dialogue through the enhancement pipeline."""
        request = RefineRequest.model_validate(
            {
                "text": text,
                "tone": tone,
                "add_dramatic_pauses": add_dramatic_pauses,
                "seed": seed,
            }
        )
        response = httpx.post(
            f"{self._api_base_url}/api/v1/dialogue/refine",
            json=request.model_dump(),
            timeout=30.0,
        )
        response.raise_for_status()
        return RefineResponse.model_validate(response.json())

    def plot_diagram(self, *, kind: str = "flowchart", seed: int | None = None) -> DiagramResponse:
        """Render a Mermaid diagram for freshly generated plots."""
        payload = self._get("/api/v1/plots/diagram", {"kind": kind, "seed": seed})
        return DiagramResponse.model_validate(payload)

    def series(self, series_id: str) -> SeriesResponse:
        """Fetch one authored series summary."""
        return SeriesResponse.model_validate(self._get(f"/api/v1/series/{series_id}"))
