"""Flowchart builder: nodes, edges and subgraphs compiled to `graph` syntax."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Final, Literal

from mystery_forge.core.text_sanitizer import quote
from mystery_forge.diagrams.common import INDENT, Direction, check_direction

NodeShape = Literal[
    "rectangle",
    "round",
    "stadium",
    "subroutine",
    "cylindrical",
    "circle",
    "rhombus",
    "hexagon",
]
EdgeType = Literal["arrow", "dotted", "thick", "open"]

# shape -> (opening bracket, closing bracket)
_SHAPE_BRACKETS: Final[dict[str, tuple[str, str]]] = {
    "rectangle": ("[", "]"),
    "round": ("(", ")"),
    "stadium": ("([", "])"),
    "subroutine": ("[[", "]]"),
    "cylindrical": ("[(", ")]"),
    "circle": ("((", "))"),
    "rhombus": ("{", "}"),
    "hexagon": ("{{", "}}"),
}
_DEFAULT_SHAPE: Final = "rectangle"

_ARROWS: Final[dict[str, str]] = {
    "arrow": "-->",
    "dotted": "-.->",
    "thick": "==>",
    "open": "---",
}
# edge type -> (prefix, suffix) wrapped around the quoted label
_LABELED_ARROWS: Final[dict[str, tuple[str, str]]] = {
    "arrow": ("--", "-->"),
    "dotted": ("-.", ".->"),
    "thick": ("==", "==>"),
    "open": ("--", "---"),
}
_DEFAULT_EDGE: Final = "arrow"


@dataclass(frozen=True)
class FlowNode:
    """Flowchart node. `style` is emitted raw, without sanitizing."""

    id: str
    label: str
    shape: NodeShape | str = "rectangle"
    style: str | None = None


@dataclass(frozen=True)
class FlowEdge:
    """Directed edge. References are not checked against registered nodes."""

    source: str
    target: str
    label: str | None = None
    type: EdgeType | str = "arrow"


@dataclass(frozen=True)
class Subgraph:
    """Titled group owning its own nodes and edges."""

    id: str
    title: str
    nodes: tuple[FlowNode, ...] = ()
    edges: tuple[FlowEdge, ...] = ()
    direction: Direction | None = None


def format_node(node: FlowNode) -> list[str]:
    """Node declaration plus an optional raw `style` line."""
    opening, closing = _SHAPE_BRACKETS.get(node.shape, _SHAPE_BRACKETS[_DEFAULT_SHAPE])
    lines = [f"{node.id}{opening}{quote(node.label)}{closing}"]
    if node.style:
        lines.append(f"style {node.id} {node.style}")
    return lines


def format_edge(edge: FlowEdge) -> str:
    """Edge line; a label is spliced inside the arrow token."""
    edge_type = edge.type if edge.type in _ARROWS else _DEFAULT_EDGE
    if edge.label:
        prefix, suffix = _LABELED_ARROWS[edge_type]
        arrow = f"{prefix} {quote(edge.label)} {suffix}"
    else:
        arrow = _ARROWS[edge_type]
    return f"{edge.source} {arrow} {edge.target}"


class FlowchartBuilder:
    """Chainable accumulator; `build()` never mutates state."""

    def __init__(self, direction: Direction | str = "TD") -> None:
        self._direction = check_direction(direction)
        self._nodes: dict[str, FlowNode] = {}
        self._edges: list[FlowEdge] = []
        self._subgraphs: list[Subgraph] = []

    def add_node(
        self,
        node_id: str,
        label: str,
        shape: NodeShape | str = "rectangle",
        style: str | None = None,
    ) -> FlowchartBuilder:
        """Register a node; re-adding an id replaces the earlier definition."""
        self._nodes[node_id] = FlowNode(id=node_id, label=label, shape=shape, style=style)
        return self

    def add_edge(
        self,
        source: str,
        target: str,
        label: str | None = None,
        edge_type: EdgeType | str = "arrow",
    ) -> FlowchartBuilder:
        self._edges.append(FlowEdge(source=source, target=target, label=label, type=edge_type))
        return self

    def add_subgraph(
        self,
        subgraph_id: str,
        title: str,
        *,
        nodes: Iterable[FlowNode] = (),
        edges: Iterable[FlowEdge] = (),
        direction: Direction | str | None = None,
    ) -> FlowchartBuilder:
        self._subgraphs.append(
            Subgraph(
                id=subgraph_id,
                title=title,
                nodes=tuple(nodes),
                edges=tuple(edges),
                direction=check_direction(direction) if direction else None,
            )
        )
        return self

    def build(self) -> str:
        lines = [f"graph {self._direction}"]
        claimed = {node.id for subgraph in self._subgraphs for node in subgraph.nodes}
        for node in self._nodes.values():
            if node.id not in claimed:
                lines.extend(f"{INDENT}{line}" for line in format_node(node))

        inner = INDENT * 2
        for subgraph in self._subgraphs:
            lines.append(f"{INDENT}subgraph {subgraph.id} [{quote(subgraph.title)}]")
            if subgraph.direction:
                lines.append(f"{inner}direction {subgraph.direction}")
            for node in subgraph.nodes:
                lines.extend(f"{inner}{line}" for line in format_node(node))
            lines.extend(f"{inner}{format_edge(edge)}" for edge in subgraph.edges)
            lines.append(f"{INDENT}end")

        lines.extend(f"{INDENT}{format_edge(edge)}" for edge in self._edges)
        return "\n".join(lines)
