from __future__ import annotations

import random

import pytest

from mystery_forge.application.story_diagrams import (
    TWIST_STYLE,
    cast_class_diagram,
    cast_mindmap,
    plot_flowchart,
    plot_sequence_diagram,
    series_gantt,
)
from mystery_forge.core.character_generator import generate_book_cast, get_protagonist
from mystery_forge.core.mystery_plot_generator import (
    generate_book_series_plots,
    generate_mystery_plot,
)
from mystery_forge.diagrams.common import detect_diagram_kind


def test_plot_flowchart_traces_investigation() -> None:
    plot = generate_mystery_plot(rng=random.Random(31))
    chart = plot_flowchart(plot)
    lines = chart.splitlines()
    assert lines[0] == "graph TD"
    assert detect_diagram_kind(chart) == "flowchart"
    assert f"    style twist {TWIST_STYLE}" in lines
    assert '    subgraph clues ["Clues"]' in lines
    assert "        clue_1 --> clue_2" in lines
    assert '    mystery -. "misleads" .-> herring_1' in lines
    assert '    mystery -. "misleads" .-> herring_2' in lines
    assert '    clue_3 == "reveals" ==> twist' in lines
    assert lines[-1] == "    twist --> resolution"


def test_plot_sequence_diagram_replays_clues() -> None:
    plot = generate_mystery_plot(rng=random.Random(32))
    diagram = plot_sequence_diagram(plot)
    lines = diagram.splitlines()
    assert lines[:5] == [
        "sequenceDiagram",
        "    autonumber",
        "    actor James",
        '    participant Core as "AI Core"',
        '    participant Ledger as "Immutable Ledger"',
    ]
    assert sum(1 for line in lines if line.startswith("    Ledger-->>James: ")) == 3
    assert "    activate Core" in lines
    assert lines[-1] == "    deactivate Core"


def test_cast_class_diagram_links_lead_by_role() -> None:
    cast = generate_book_cast(2, rng=random.Random(33))
    diagram = cast_class_diagram(cast)
    assert detect_diagram_kind(diagram) == "class"
    assert "    class James_0 {" in diagram
    assert "        <<Protagonist>>" in diagram
    assert "        +Archetype The_Visionary_Architect" in diagram
    assert "        -Expertise System_Architecture" in diagram
    assert 'James_0 "1" ..> "1" ' in diagram
    assert diagram.count(" : ") == len(cast) - 1
    assert ": operates" in diagram


def test_cast_class_diagram_for_empty_cast() -> None:
    assert cast_class_diagram([]) == "classDiagram"


def test_cast_mindmap_groups_by_role() -> None:
    cast = generate_book_cast(1, rng=random.Random(34))
    chart = cast_mindmap(cast)
    lines = chart.splitlines()
    assert lines[:2] == ["mindmap", "    root((James))"]
    assert "        Antagonist" in lines
    assert "        AI Construct" in lines
    assert "        Ally" in lines


def test_cast_mindmap_requires_a_character() -> None:
    with pytest.raises(ValueError, match="at least one character"):
        cast_mindmap([])
    assert cast_mindmap([get_protagonist()]) == "mindmap\n    root((James))"


def test_series_gantt_chains_volumes() -> None:
    plots = generate_book_series_plots(2, rng=random.Random(35))
    chart = series_gantt(plots)
    lines = chart.splitlines()
    assert lines[1] == "    title Series Writing Schedule"
    assert "    Investigation, active, v1_inv, 14d" in lines
    assert "    Investigation, active, v2_inv, after v1_res, 14d" in lines
    assert "    Resolution, done, v2_res, after v2_twist, 7d" in lines
    assert f"    section {plots[1].title}" in lines
    assert detect_diagram_kind(chart) == "gantt"
