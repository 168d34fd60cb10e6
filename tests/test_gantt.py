from __future__ import annotations

import pytest

from mystery_forge.diagrams.gantt import GanttBuilder, GanttTask, generate_gantt_chart


def test_gantt_header_sections_and_tasks() -> None:
    chart = (
        GanttBuilder("Book One")
        .add_section("Draft")
        .add_task("Outline", "done", task_id="t1", duration="3d")
        .add_task("Write", "active", task_id="t2", after="t1", duration="10d")
        .build()
    )
    assert chart.splitlines() == [
        "gantt",
        "    title Book One",
        "    dateFormat YYYY-MM-DD",
        "    axisFormat %d-%b",
        "    section Draft",
        "    Outline, done, t1, 3d",
        "    Write, active, t2, after t1, 10d",
    ]


def test_gantt_task_skips_absent_fields() -> None:
    assert GanttTask(name="Edit", status="crit").render() == "Edit, crit"
    assert GanttTask(name="Ship\nit", status="milestone", after="t9").render() == (
        "Ship it, milestone, after t9"
    )


def test_add_task_requires_a_section() -> None:
    with pytest.raises(ValueError, match="add_section"):
        GanttBuilder("Empty").add_task("Orphan", "active")


def test_generate_gantt_chart_from_mappings() -> None:
    chart = generate_gantt_chart(
        "Plan",
        [
            {"name": "Vol 1", "tasks": [{"name": "Plot", "status": "done", "id": "a"}]},
            {"name": "Vol 2", "tasks": [{"name": "Plot", "status": "active", "after": "a"}]},
            {"name": "Vol 3"},
        ],
    )
    assert chart.splitlines()[4:] == [
        "    section Vol 1",
        "    Plot, done, a",
        "    section Vol 2",
        "    Plot, active, after a",
        "    section Vol 3",
    ]


def test_every_task_field_is_sanitized() -> None:
    chart = (
        GanttBuilder("Book")
        .add_section("Draft")
        .add_task(
            "n",
            'done\nsection "evil"',
            task_id="t1\r\n",
            after='t0\n"x"',
            duration="3d\n",
        )
        .build()
    )
    lines = chart.splitlines()
    assert lines[-1] == "    n, done section 'evil', t1, after t0 'x', 3d"
    assert sum(1 for line in lines if "section" in line) == 2
    assert "\r" not in chart
    assert '"' not in chart
