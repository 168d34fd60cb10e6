"""Turn generated plots and casts into Mermaid diagrams."""

from __future__ import annotations

import re
from collections.abc import Sequence
from typing import Final

from mystery_forge.diagrams.class_diagram import (
    ClassDefinition,
    ClassDiagramBuilder,
    ClassProperty,
    Relationship,
    RelationshipType,
)
from mystery_forge.diagrams.flowchart import FlowchartBuilder, FlowEdge, FlowNode
from mystery_forge.diagrams.gantt import GanttBuilder
from mystery_forge.diagrams.mindmap import MindmapBuilder
from mystery_forge.diagrams.sequence import SequenceDiagramBuilder
from mystery_forge.domain.models import CharacterProfile, CharacterRole, MysteryPlot

_NON_IDENTIFIER = re.compile(r"\W+")
TWIST_STYLE: Final = "fill:#f9f,stroke:#333,stroke-width:2px"

_ROLE_LINKS: Final[dict[CharacterRole, tuple[RelationshipType, str]]] = {
    "Antagonist": ("dependency", "challenged by"),
    "Ally": ("association", "advised by"),
    "AI_Construct": ("composition", "operates"),
    "Regulator": ("aggregation", "audited by"),
    "Rival_Tech_CEO": ("association", "competes with"),
}


def _token(text: str) -> str:
    return _NON_IDENTIFIER.sub("_", text).strip("_") or "node"


def _identifier(text: str, index: int) -> str:
    return f"{_token(text)}_{index}"


def plot_flowchart(plot: MysteryPlot) -> str:
    """Investigation path from inciting incident to resolution."""
    clue_nodes = [
        FlowNode(id=f"clue_{index}", label=clue)
        for index, clue in enumerate(plot.clues, start=1)
    ]
    clue_edges = [
        FlowEdge(source=first.id, target=second.id)
        for first, second in zip(clue_nodes, clue_nodes[1:])
    ]
    builder = (
        FlowchartBuilder("TD")
        .add_node("incident", plot.inciting_incident, "round")
        .add_node("mystery", plot.technical_mystery.description, "rhombus")
        .add_node("twist", plot.major_twist.technical_context, "hexagon", TWIST_STYLE)
        .add_node("resolution", "Integrity restored", "stadium")
        .add_subgraph("clues", "Clues", nodes=clue_nodes, edges=clue_edges)
        .add_edge("incident", "mystery")
    )
    for index, herring in enumerate(plot.red_herrings, start=1):
        herring_id = f"herring_{index}"
        builder.add_node(herring_id, herring, "subroutine")
        builder.add_edge("mystery", herring_id, "misleads", "dotted")
    if clue_nodes:
        builder.add_edge("mystery", clue_nodes[0].id, "investigate")
        builder.add_edge(clue_nodes[-1].id, "twist", "reveals", "thick")
    else:
        builder.add_edge("mystery", "twist", "reveals", "thick")
    builder.add_edge("twist", "resolution")
    return builder.build()


def plot_sequence_diagram(plot: MysteryPlot) -> str:
    """Protagonist, AI core and ledger trading clues until the twist lands."""
    builder = (
        SequenceDiagramBuilder(autonumber=True)
        .add_participant(plot.protagonist, kind="actor")
        .add_participant("Core", "AI Core")
        .add_participant("Ledger", "Immutable Ledger")
        .add_message(plot.protagonist, "Core", "Run routine system audit", activate=True)
        .add_message("Core", plot.protagonist, plot.technical_mystery.description, "dotted")
    )
    for clue in plot.clues:
        builder.add_message(plot.protagonist, "Ledger", "Trace anomaly")
        builder.add_message("Ledger", plot.protagonist, clue, "dotted")
    builder.add_message(plot.protagonist, "Core", plot.major_twist.technical_context, "async")
    builder.add_message(
        "Core",
        plot.protagonist,
        plot.major_twist.reveal_moment,
        deactivate=True,
    )
    return builder.build()


def cast_class_diagram(cast: Sequence[CharacterProfile]) -> str:
    """One class per character; the lead links to everyone else by role."""
    builder = ClassDiagramBuilder()
    class_names = [_identifier(member.name, index) for index, member in enumerate(cast)]
    for member, class_name in zip(cast, class_names):
        builder.add_class(
            ClassDefinition(
                name=class_name,
                annotations=(f"<<{member.role}>>",),
                properties=(
                    ClassProperty(name=_token(member.archetype), type="Archetype", visibility="+"),
                    *(
                        ClassProperty(name=_token(domain), type="Expertise", visibility="-")
                        for domain in member.expertise
                    ),
                ),
            )
        )
    if not cast:
        return builder.build()
    lead = class_names[0]
    for member, class_name in zip(cast[1:], class_names[1:]):
        link = _ROLE_LINKS.get(member.role)
        if link is None:
            continue
        relationship_type, label = link
        builder.add_relationship(
            Relationship(
                from_class=lead,
                to_class=class_name,
                type=relationship_type,
                label=label,
                cardinality_from="1",
                cardinality_to="1",
            )
        )
    return builder.build()


def cast_mindmap(cast: Sequence[CharacterProfile]) -> str:
    """Root at the first cast member, branches grouped by role in first-seen order."""
    if not cast:
        raise ValueError("cast_mindmap() needs at least one character.")
    lead, *supporting = cast
    grouped: dict[str, list[str]] = {}
    for member in supporting:
        grouped.setdefault(member.role, []).append(f"{member.name}: {member.archetype}")
    builder = MindmapBuilder(lead.name)
    for role, members in grouped.items():
        builder.add_branch(role.replace("_", " "), members)
    return builder.build()


def series_gantt(plots: Sequence[MysteryPlot], *, title: str = "Series Writing Schedule") -> str:
    """One section per volume; phases chain with `after` across volumes."""
    builder = GanttBuilder(title)
    previous: str | None = None
    for volume, plot in enumerate(plots, start=1):
        investigation = f"v{volume}_inv"
        twist = f"v{volume}_twist"
        resolution = f"v{volume}_res"
        builder.add_section(plot.title)
        builder.add_task(
            "Investigation", "active", task_id=investigation, after=previous, duration="14d"
        )
        builder.add_task(
            plot.major_twist.technical_context,
            "crit",
            task_id=twist,
            after=investigation,
            duration="3d",
        )
        builder.add_task("Resolution", "done", task_id=resolution, after=twist, duration="7d")
        previous = resolution
    return builder.build()
