from __future__ import annotations

from fastapi.testclient import TestClient

from mystery_forge.api.app import create_app
from mystery_forge.settings import RuntimeSettings


def _client(max_batch: int = 5000) -> TestClient:
    settings = RuntimeSettings(
        seed=None,
        title_attempt_factor=25,
        max_batch=max_batch,
        cors_origins=("http://localhost:5173",),
    )
    return TestClient(create_app(settings))


def test_healthz_and_api_root() -> None:
    client = _client()
    health = client.get("/healthz")
    assert health.status_code == 200
    assert health.json() == {"status": "ok", "service": "mystery_forge"}
    root = client.get("/api/v1")
    assert root.status_code == 200
    assert root.json()["persistence"] == "none"
    assert "/api/v1/titles" in root.json()["endpoints"]


def test_titles_are_unique_and_reproducible() -> None:
    client = _client()
    first = client.post("/api/v1/titles", json={"count": 12, "seed": 7})
    second = client.post("/api/v1/titles", json={"count": 12, "seed": 7})
    assert first.status_code == 200
    payload = first.json()
    assert payload["requested"] == 12
    assert payload["shortfall"] == 0
    assert len(set(payload["titles"])) == 12
    assert payload == second.json()


def test_titles_validation_errors() -> None:
    client = _client(max_batch=10)
    assert client.post("/api/v1/titles", json={"count": 11}).status_code == 422
    assert client.post("/api/v1/titles", json={"count": -1}).status_code == 422
    assert client.post("/api/v1/titles", json={"count": 1, "extra": True}).status_code == 422


def test_cast_endpoint() -> None:
    client = _client()
    response = client.get("/api/v1/cast", params={"complexity_level": 2, "seed": 3})
    assert response.status_code == 200
    cast = response.json()
    assert cast[0]["name"] == "James"
    assert cast[0]["role"] == "Protagonist"
    assert {member["role"] for member in cast} >= {"Antagonist", "Ally", "AI_Construct"}
    assert client.get("/api/v1/cast", params={"complexity_level": 0}).status_code == 422


def test_plots_endpoint_numbers_volumes() -> None:
    client = _client()
    response = client.get("/api/v1/plots", params={"count": 2, "seed": 5})
    assert response.status_code == 200
    plots = response.json()
    assert [plot["title"].rsplit(": ", 1)[1] for plot in plots] == ["Vol 1", "Vol 2"]
    assert len(plots[0]["clues"]) == 3
    assert plots[0]["technical_mystery"]["type"] in {"ALGORITHM", "LEDGER", "KEY"}
    assert client.get("/api/v1/plots", params={"count": 5001}).status_code == 422


def test_plot_diagram_kinds() -> None:
    client = _client()
    for kind, header in (
        ("flowchart", "graph TD"),
        ("sequence", "sequenceDiagram"),
        ("gantt", "gantt"),
    ):
        response = client.get("/api/v1/plots/diagram", params={"kind": kind, "seed": 2})
        assert response.status_code == 200
        payload = response.json()
        assert payload["kind"] == kind
        assert payload["mermaid"].splitlines()[0] == header
    assert client.get("/api/v1/plots/diagram", params={"kind": "pie"}).status_code == 422


def test_refine_endpoint() -> None:
    client = _client()
    response = client.post(
        "/api/v1/dialogue/refine",
        json={
            "text": "I think the bank has a problem, James.",
            "add_dramatic_pauses": False,
            "seed": 1,
        },
    )
    assert response.status_code == 200
    payload = response.json()
    assert "I hypothesize the vault has a variable, James." in payload["text"]
    assert payload["polite"] is True

    blank = client.post("/api/v1/dialogue/refine", json={"text": "   "})
    assert blank.json() == {"text": "", "polite": True}

    rude = client.post(
        "/api/v1/dialogue/refine", json={"text": "That plan is useless", "seed": 1}
    )
    assert rude.json()["polite"] is False
    bad_tone = client.post("/api/v1/dialogue/refine", json={"text": "Hi", "tone": "angry"})
    assert bad_tone.status_code == 422


def test_flowchart_endpoint_compiles_payload() -> None:
    client = _client()
    response = client.post(
        "/api/v1/diagrams/flowchart",
        json={
            "direction": "LR",
            "nodes": [{"id": "A", "label": "Start", "shape": "round"}],
            "edges": [{"source": "A", "target": "B", "label": "Go", "type": "dotted"}],
            "subgraphs": [
                {
                    "id": "grp",
                    "title": "Group",
                    "nodes": [{"id": "B", "label": "End"}],
                }
            ],
        },
    )
    assert response.status_code == 200
    assert response.json() == {
        "kind": "flowchart",
        "mermaid": "\n".join(
            [
                "graph LR",
                '    A("Start")',
                '    subgraph grp ["Group"]',
                '        B["End"]',
                "    end",
                '    A -. "Go" .-> B',
            ]
        ),
    }
    bad = client.post(
        "/api/v1/diagrams/flowchart",
        json={"nodes": [{"id": "A", "label": "x", "shape": "blob"}]},
    )
    assert bad.status_code == 422


def test_series_endpoints() -> None:
    client = _client()
    catalog = client.get("/api/v1/series")
    assert catalog.status_code == 200
    assert [series["id"] for series in catalog.json()] == [
        "series1",
        "series-2-the-algorithm",
        "series-3-firewall",
    ]
    detail = client.get("/api/v1/series/series-2-the-algorithm")
    assert detail.status_code == 200
    books = detail.json()["books"]
    assert len(books) == 4
    assert books[-1]["diagram_kinds"] == ["state"]
    first_series = client.get("/api/v1/series/series1").json()
    assert first_series["books"][0]["diagram_kinds"] == ["flowchart", "class", "sequence"]

    missing = client.get("/api/v1/series/unknown")
    assert missing.status_code == 404
    assert "Unknown series 'unknown'" in missing.json()["detail"]
