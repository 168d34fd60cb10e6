from __future__ import annotations

from mystery_forge.diagrams.mindmap import MindmapBuilder, generate_mindmap


def test_mindmap_nesting_and_indentation() -> None:
    chart = (
        MindmapBuilder("James")
        .add_child("Vault")
        .add_branch("Allies", ["Elena", {"AI": ["Unit-101 Prime"]}])
        .build()
    )
    assert chart.splitlines() == [
        "mindmap",
        "    root((James))",
        "        Vault",
        "        Allies",
        "            Elena",
        "            AI",
        "                Unit-101 Prime",
    ]


def test_generate_mindmap_sanitizes_labels() -> None:
    chart = generate_mindmap('The "Bank"', ["line\nbreak"])
    assert chart.splitlines() == ["mindmap", "    root((The 'Bank'))", "        line break"]
