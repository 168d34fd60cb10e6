"""Mindmap builder over a heterogeneous label tree."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence

from mystery_forge.core.text_sanitizer import sanitize_text
from mystery_forge.diagrams.common import INDENT

# A node is a bare label or a mapping of label -> child nodes.
MindmapNode = str | Mapping[str, Sequence["MindmapNode"]]

_ROOT_DEPTH = 1
_FIRST_CHILD_DEPTH = 2


class MindmapBuilder:
    """Depth-first rendering, four spaces per depth level."""

    def __init__(self, root_label: str) -> None:
        self._root_label = root_label
        self._children: list[MindmapNode] = []

    def add_child(self, node: MindmapNode) -> MindmapBuilder:
        self._children.append(node)
        return self

    def add_branch(self, label: str, children: Iterable[MindmapNode] = ()) -> MindmapBuilder:
        self._children.append({label: list(children)})
        return self

    def build(self) -> str:
        lines = ["mindmap", f"{INDENT * _ROOT_DEPTH}root(({sanitize_text(self._root_label)}))"]
        for child in self._children:
            _render(child, _FIRST_CHILD_DEPTH, lines)
        return "\n".join(lines)


def _render(node: MindmapNode, depth: int, lines: list[str]) -> None:
    if isinstance(node, str):
        lines.append(f"{INDENT * depth}{sanitize_text(node)}")
        return
    for label, children in node.items():
        lines.append(f"{INDENT * depth}{sanitize_text(label)}")
        if isinstance(children, Sequence) and not isinstance(children, str):
            for child in children:
                _render(child, depth + 1, lines)


def generate_mindmap(root_label: str, children: Iterable[MindmapNode]) -> str:
    builder = MindmapBuilder(root_label)
    for child in children:
        builder.add_child(child)
    return builder.build()
