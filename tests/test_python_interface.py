from __future__ import annotations

from typing import Any

import httpx
import pytest

from mystery_forge.api.python_interface import ForgeApiClient


def test_client_normalizes_base_url() -> None:
    assert ForgeApiClient("http://127.0.0.1:8000/").api_base_url == "http://127.0.0.1:8000"


def test_titles_posts_request_and_parses_response(monkeypatch: pytest.MonkeyPatch) -> None:
    seen: dict[str, Any] = {}

    def fake_post(url: str, json: object, timeout: float) -> httpx.Response:
        seen["url"] = url
        seen["json"] = json
        return httpx.Response(
            status_code=200,
            request=httpx.Request("POST", url),
            json={"titles": ["The Silent Ledger"], "requested": 2, "shortfall": 1},
        )

    monkeypatch.setattr("mystery_forge.api.python_interface.httpx.post", fake_post)
    response = ForgeApiClient().titles(count=2, seed=4)
    assert seen["url"] == "http://127.0.0.1:8000/api/v1/titles"
    assert seen["json"] == {"count": 2, "seed": 4}
    assert response.titles == ["The Silent Ledger"]
    assert response.shortfall == 1


def test_cast_drops_unset_query_params(monkeypatch: pytest.MonkeyPatch) -> None:
    seen: dict[str, Any] = {}
    member = {
        "id": "james-core-001",
        "name": "James",
        "role": "Protagonist",
        "archetype": "The Visionary Architect",
        "core_values": ["Transparency"],
        "expertise": ["System Architecture"],
        "narrative_function": "Build the bank.",
        "quirk": "Blueprints.",
    }

    def fake_get(url: str, params: dict[str, Any], timeout: float) -> httpx.Response:
        seen["params"] = params
        return httpx.Response(200, request=httpx.Request("GET", url), json=[member])

    monkeypatch.setattr("mystery_forge.api.python_interface.httpx.get", fake_get)
    cast = ForgeApiClient().cast(complexity_level=3)
    assert seen["params"] == {"complexity_level": 3}
    assert cast[0].name == "James"


def test_refine_raises_for_http_errors(monkeypatch: pytest.MonkeyPatch) -> None:
    def fake_post(url: str, json: object, timeout: float) -> httpx.Response:
        return httpx.Response(422, request=httpx.Request("POST", url), json={"detail": []})

    monkeypatch.setattr("mystery_forge.api.python_interface.httpx.post", fake_post)
    with pytest.raises(httpx.HTTPStatusError):
        ForgeApiClient().refine(text="Hello", tone="mysterious")
