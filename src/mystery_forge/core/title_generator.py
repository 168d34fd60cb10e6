"""Batch generation of unique, title-cased book titles."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from mystery_forge.core.randomness import RandomSource, pick_one, resolve_rng
from mystery_forge.core.word_banks import TITLE_TEMPLATES, TitleTemplate
from mystery_forge.settings import RuntimeSettings

logger = logging.getLogger(__name__)

_PAIR_SEPARATOR = " And "


@dataclass(frozen=True)
class TitleBatch:
    """Generated titles plus the bookkeeping behind a possible shortfall."""

    titles: list[str]
    requested: int
    attempts: int

    @property
    def shortfall(self) -> int:
        return max(0, self.requested - len(self.titles))


def title_case(text: str) -> str:
    """Lowercase everything, then capitalize the first letter of each word."""
    return " ".join(word[:1].upper() + word[1:] for word in text.lower().split(" "))


def _is_self_pair(title: str) -> bool:
    if _PAIR_SEPARATOR not in title:
        return False
    parts = title.split(_PAIR_SEPARATOR)
    return parts[0] == parts[1]


def generate_book_titles_report(
    count: int,
    *,
    rng: RandomSource | None = None,
    attempt_factor: int | None = None,
    templates: tuple[TitleTemplate, ...] = TITLE_TEMPLATES,
) -> TitleBatch:
    """Generate up to `count` distinct titles within `count * attempt_factor` attempts."""
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}.")
    source = resolve_rng(rng)
    factor = attempt_factor or RuntimeSettings.from_env().title_attempt_factor
    max_attempts = count * factor

    titles: dict[str, None] = {}
    attempts = 0
    while len(titles) < count and attempts < max_attempts:
        attempts += 1
        template = pick_one(templates, rng=source, pool_name="title templates")
        title = title_case(template(source))
        if _is_self_pair(title):
            continue
        titles[title] = None

    batch = TitleBatch(titles=list(titles), requested=count, attempts=attempts)
    if batch.shortfall:
        logger.warning(
            "titles.shortfall requested=%s generated=%s attempts=%s",
            count,
            len(batch.titles),
            attempts,
        )
    return batch


def generate_book_titles(
    count: int = 1000,
    *,
    rng: RandomSource | None = None,
    attempt_factor: int | None = None,
) -> list[str]:
    """Return up to `count` unique titles; the length is authoritative."""
    return generate_book_titles_report(count, rng=rng, attempt_factor=attempt_factor).titles
