"""Mermaid builders: flowchart, sequence, class, gantt and mindmap."""

from mystery_forge.diagrams.class_diagram import (
    ClassDefinition,
    ClassDiagramBuilder,
    ClassMethod,
    ClassProperty,
    Relationship,
)
from mystery_forge.diagrams.common import detect_diagram_kind
from mystery_forge.diagrams.flowchart import FlowchartBuilder, FlowEdge, FlowNode, Subgraph
from mystery_forge.diagrams.gantt import GanttBuilder, GanttTask, generate_gantt_chart
from mystery_forge.diagrams.mindmap import MindmapBuilder, generate_mindmap
from mystery_forge.diagrams.sequence import SequenceDiagramBuilder

__all__ = [
    "ClassDefinition",
    "ClassDiagramBuilder",
    "ClassMethod",
    "ClassProperty",
    "FlowEdge",
    "FlowNode",
    "FlowchartBuilder",
    "GanttBuilder",
    "GanttTask",
    "MindmapBuilder",
    "Relationship",
    "SequenceDiagramBuilder",
    "Subgraph",
    "detect_diagram_kind",
    "generate_gantt_chart",
    "generate_mindmap",
]
