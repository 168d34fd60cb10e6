"""Shared vocabulary for Mermaid builders."""

from __future__ import annotations

from typing import Final, Literal

Direction = Literal["TB", "TD", "BT", "RL", "LR"]
DIRECTIONS: Final[tuple[Direction, ...]] = ("TB", "TD", "BT", "RL", "LR")

DiagramKind = Literal["flowchart", "sequence", "class", "state", "gantt", "mindmap"]

INDENT: Final = "    "

_HEADER_KINDS: Final[dict[str, DiagramKind]] = {
    "graph": "flowchart",
    "flowchart": "flowchart",
    "sequenceDiagram": "sequence",
    "classDiagram": "class",
    "stateDiagram": "state",
    "stateDiagram-v2": "state",
    "gantt": "gantt",
    "mindmap": "mindmap",
}


def check_direction(direction: str) -> Direction:
    """Reject directions Mermaid does not understand."""
    for known in DIRECTIONS:
        if direction == known:
            return known
    raise ValueError(
        f"Unknown flowchart direction '{direction}'. Expected one of {list(DIRECTIONS)}."
    )


def detect_diagram_kind(text: str) -> DiagramKind | None:
    """Recognize the diagram header on the first non-blank line.

    Only the header keyword is inspected; the body is never parsed.
    """
    for line in text.splitlines():
        stripped = line.strip()
        if not stripped:
            continue
        keyword = stripped.split()[0]
        return _HEADER_KINDS.get(keyword)
    return None
