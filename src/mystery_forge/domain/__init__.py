"""Domain records for generated casts, plots and authored series."""

from mystery_forge.domain.models import (
    CHARACTER_ROLES,
    Book,
    BookChapter,
    BookSeries,
    CharacterProfile,
    CharacterRole,
    MysteryComponent,
    MysteryPlot,
    MysteryType,
    PlotTwist,
    parse_role,
)

__all__ = [
    "Book",
    "BookChapter",
    "BookSeries",
    "CHARACTER_ROLES",
    "CharacterProfile",
    "CharacterRole",
    "MysteryComponent",
    "MysteryPlot",
    "MysteryType",
    "PlotTwist",
    "parse_role",
]
