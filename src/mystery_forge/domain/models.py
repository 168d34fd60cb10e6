"""Narrative records produced by the generators."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Final, Literal, get_args

CharacterRole = Literal[
    "Protagonist",
    "Antagonist",
    "Ally",
    "AI_Construct",
    "Regulator",
    "Rival_Tech_CEO",
]
CHARACTER_ROLES: Final[tuple[CharacterRole, ...]] = get_args(CharacterRole)

MysteryType = Literal["ALGORITHM", "LEDGER", "KEY", "INFRASTRUCTURE"]


def parse_role(value: str) -> CharacterRole:
    """Validate a free-form role string against the closed role set."""
    for role in CHARACTER_ROLES:
        if value == role:
            return role
    raise ValueError(f"Unknown character role '{value}'. Expected one of {list(CHARACTER_ROLES)}.")


class _Record:
    def to_dict(self) -> dict[str, Any]:
        return asdict(self)  # type: ignore[call-overload]


@dataclass(frozen=True)
class CharacterProfile(_Record):
    """One cast member. Value and expertise tuples hold distinct entries."""

    id: str
    name: str
    role: CharacterRole
    archetype: str
    core_values: tuple[str, ...]
    expertise: tuple[str, ...]
    narrative_function: str
    quirk: str


@dataclass(frozen=True)
class MysteryComponent(_Record):
    """The technical puzzle driving a plot."""

    type: MysteryType
    description: str
    significance: str


@dataclass(frozen=True)
class PlotTwist(_Record):
    """Pre-authored twist; never assembled from fragments."""

    id: str
    description: str
    technical_context: str
    reveal_moment: str


@dataclass(frozen=True)
class MysteryPlot(_Record):
    """Full plot skeleton for a single book."""

    id: str
    title: str
    protagonist: str
    inciting_incident: str
    technical_mystery: MysteryComponent
    red_herrings: tuple[str, ...]
    clues: tuple[str, ...]
    major_twist: PlotTwist
    resolution: str
    mermaid_graph_concept: str


@dataclass(frozen=True)
class BookChapter(_Record):
    """Authored chapter with its mystery beat and illustration."""

    id: str
    title: str
    mystery_element: str
    mermaid_graph: str
    content: tuple[str, ...] = ()


@dataclass(frozen=True)
class Book(_Record):
    """One authored book inside a series."""

    id: str
    title: str
    summary: str
    subtitle: str | None = None
    mermaid_graph: str | None = None
    movie_script_concept: str | None = None
    chapters: tuple[BookChapter, ...] = ()


@dataclass(frozen=True)
class BookSeries(_Record):
    """Static, hand-written series definition."""

    id: str
    title: str
    description: str
    books: tuple[Book, ...] = field(default_factory=tuple)
    author: str | None = None
    genre: str | None = None
