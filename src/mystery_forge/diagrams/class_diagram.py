"""Class diagram builder for architecture and cast relationship views."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final, Literal

from mystery_forge.core.text_sanitizer import quote, sanitize_text
from mystery_forge.diagrams.common import INDENT

Visibility = Literal["", "+", "-", "#", "~"]
RelationshipType = Literal[
    "inheritance",
    "composition",
    "aggregation",
    "association",
    "dependency",
]

_RELATIONSHIP_ARROWS: Final[dict[str, str]] = {
    "inheritance": "<|--",
    "composition": "*--",
    "aggregation": "o--",
    "dependency": "..>",
    "association": "-->",
}
_DEFAULT_LINK: Final = "--"


@dataclass(frozen=True)
class ClassProperty:
    name: str
    type: str
    visibility: Visibility = ""


@dataclass(frozen=True)
class ClassMethod:
    name: str
    parameters: str = ""
    return_type: str = ""
    visibility: Visibility = ""


@dataclass(frozen=True)
class ClassDefinition:
    """Annotations keep their own markup, e.g. ``<<Service>>``."""

    name: str
    properties: tuple[ClassProperty, ...] = ()
    methods: tuple[ClassMethod, ...] = ()
    annotations: tuple[str, ...] = ()


@dataclass(frozen=True)
class Relationship:
    from_class: str
    to_class: str
    type: RelationshipType | str
    label: str | None = None
    cardinality_from: str | None = None
    cardinality_to: str | None = None


def format_relationship(relationship: Relationship) -> str:
    arrow = _RELATIONSHIP_ARROWS.get(relationship.type, _DEFAULT_LINK)
    from_card = f"{quote(relationship.cardinality_from)} " if relationship.cardinality_from else ""
    to_card = f" {quote(relationship.cardinality_to)}" if relationship.cardinality_to else ""
    label = f" : {sanitize_text(relationship.label)}" if relationship.label else ""
    return (
        f"{relationship.from_class} {from_card}{arrow}{to_card} {relationship.to_class}{label}"
    )


class ClassDiagramBuilder:
    """Classes keyed by name (last definition wins), relationships in order."""

    def __init__(self) -> None:
        self._classes: dict[str, ClassDefinition] = {}
        self._relationships: list[Relationship] = []

    def add_class(self, definition: ClassDefinition) -> ClassDiagramBuilder:
        self._classes[definition.name] = definition
        return self

    def add_relationship(self, relationship: Relationship) -> ClassDiagramBuilder:
        self._relationships.append(relationship)
        return self

    def build(self) -> str:
        lines = ["classDiagram"]
        member = INDENT * 2
        for definition in self._classes.values():
            lines.append(f"{INDENT}class {definition.name} {{")
            lines.extend(
                f"{member}{sanitize_text(annotation)}" for annotation in definition.annotations
            )
            for prop in definition.properties:
                prop_type = sanitize_text(prop.type)
                lines.append(f"{member}{prop.visibility}{prop_type} {sanitize_text(prop.name)}")
            for method in definition.methods:
                name = sanitize_text(method.name)
                signature = (
                    f"{method.visibility}{name}({sanitize_text(method.parameters)}) "
                    f"{sanitize_text(method.return_type)}"
                )
                lines.append(f"{member}{signature.rstrip()}")
            lines.append(f"{INDENT}}}")
        lines.extend(f"{INDENT}{format_relationship(rel)}" for rel in self._relationships)
        return "\n".join(lines)
