"""Gantt builder for book timelines and writing schedules."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from mystery_forge.core.text_sanitizer import sanitize_text
from mystery_forge.diagrams.common import INDENT

DATE_FORMAT = "YYYY-MM-DD"
AXIS_FORMAT = "%d-%b"


@dataclass(frozen=True)
class GanttTask:
    name: str
    status: str
    id: str | None = None
    after: str | None = None
    duration: str | None = None

    def render(self) -> str:
        """Comma-joined fields; absent optionals are skipped, not blanked."""
        parts = [sanitize_text(self.name), sanitize_text(self.status)]
        if self.id:
            parts.append(sanitize_text(self.id))
        if self.after:
            parts.append(f"after {sanitize_text(self.after)}")
        if self.duration:
            parts.append(sanitize_text(self.duration))
        return ", ".join(parts)


@dataclass
class GanttSection:
    name: str
    tasks: list[GanttTask] = field(default_factory=list)


class GanttBuilder:
    """Sections in insertion order; tasks attach to the latest section."""

    def __init__(self, title: str) -> None:
        self._title = title
        self._sections: list[GanttSection] = []

    def add_section(self, name: str, tasks: Iterable[GanttTask] = ()) -> GanttBuilder:
        self._sections.append(GanttSection(name=name, tasks=list(tasks)))
        return self

    def add_task(
        self,
        name: str,
        status: str,
        *,
        task_id: str | None = None,
        after: str | None = None,
        duration: str | None = None,
    ) -> GanttBuilder:
        if not self._sections:
            raise ValueError("add_section() must be called before add_task().")
        self._sections[-1].tasks.append(
            GanttTask(name=name, status=status, id=task_id, after=after, duration=duration)
        )
        return self

    def build(self) -> str:
        lines = [
            "gantt",
            f"{INDENT}title {sanitize_text(self._title)}",
            f"{INDENT}dateFormat {DATE_FORMAT}",
            f"{INDENT}axisFormat {AXIS_FORMAT}",
        ]
        for section in self._sections:
            lines.append(f"{INDENT}section {sanitize_text(section.name)}")
            lines.extend(f"{INDENT}{task.render()}" for task in section.tasks)
        return "\n".join(lines)


def generate_gantt_chart(title: str, sections: Iterable[Mapping[str, Any]]) -> str:
    """Build a chart from plain ``{"name": ..., "tasks": [{...}]}`` mappings."""
    builder = GanttBuilder(title)
    for section in sections:
        raw_tasks = section.get("tasks") or []
        tasks = [
            GanttTask(
                name=str(task["name"]),
                status=str(task["status"]),
                id=_optional_str(task.get("id")),
                after=_optional_str(task.get("after")),
                duration=_optional_str(task.get("duration")),
            )
            for task in raw_tasks
        ]
        builder.add_section(str(section["name"]), tasks)
    return builder.build()


def _optional_str(value: object) -> str | None:
    if value is None or value == "":
        return None
    return str(value)
