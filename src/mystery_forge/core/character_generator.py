"""Cast generation around the canonical protagonist."""

from __future__ import annotations

import dataclasses
from typing import Final

from mystery_forge.core.randomness import (
    RandomSource,
    coin_flip,
    pick_many,
    pick_one,
    random_uuid,
    resolve_rng,
)
from mystery_forge.domain.models import CharacterProfile, CharacterRole, parse_role

FIRST_NAMES: Final[tuple[str, ...]] = (
    "Elena", "Marcus", "Sarah", "David", "Aisha", "Wei", "Oliver", "Priya",
    "Julian", "Nadia", "Robert", "Grace", "Hiro", "Sofia", "Arthur", "Zoe",
)  # fmt: skip

LAST_NAMES: Final[tuple[str, ...]] = (
    "Vance", "Sterling", "Chen", "Patel", "Thorne", "Mercer", "Blackwood",
    "Kovacs", "Dubois", "Langley", "Roth", "Bishop", "Solomon", "Winter",
)  # fmt: skip

AI_CORE_WORDS: Final[tuple[str, ...]] = ("Prime", "Sentinel", "Logic", "Core")

TECH_ARCHETYPES: Final[tuple[str, ...]] = (
    "The Skeptical Auditor",
    "The Legacy System Purist",
    "The Quantum Cryptographer",
    "The Ethical Hacker",
    "The Corporate Strategist",
    "The Data Archaeologist",
    "The Algorithm Whisperer",
)

EXPERTISE_DOMAINS: Final[tuple[str, ...]] = (
    "Distributed Ledger Technology",
    "Neural Network Ethics",
    "High-Frequency Trading Algorithms",
    "Cybersecurity Forensics",
    "International Banking Law",
    "Quantum Computing",
    "Predictive Analytics",
    "Smart Contract Auditing",
)

NON_VIOLENT_TRAITS: Final[tuple[str, ...]] = (
    "Hyper-rational",
    "Obsessively organized",
    "Cryptic",
    "Charismatic but elusive",
    "Technologically conservative",
    "Idealistic",
    "Bureaucratic",
    "Intellectually competitive",
)

HUMAN_QUIRKS: Final[tuple[str, ...]] = (
    "Always carries a vintage notebook.",
    "Solves crosswords in ink during meetings.",
    "Quotes banking regulations from memory.",
    "Refuses to use any device older than its warranty.",
    "Names every server after a philosopher.",
)
AI_QUIRK: Final = "Speaks in probabilities."

_ARCHETYPE_OVERRIDES: Final[dict[CharacterRole, str]] = {
    "Antagonist": "The Obstructionist Bureaucrat",
    "Rival_Tech_CEO": "The Profit-Maximizing Competitor",
    "AI_Construct": "The Evolving Consciousness",
}

_NARRATIVE_FUNCTIONS: Final[dict[CharacterRole, str]] = {
    "Antagonist": (
        "To challenge James's architectural philosophy through legal or technical paradoxes."
    ),
    "Ally": "To provide specialized knowledge that James lacks.",
    "Regulator": "To enforce strict compliance, creating tension with innovation.",
    "AI_Construct": "To manage specific subsystems of the bank and offer logical deductions.",
}
_DEFAULT_NARRATIVE_FUNCTION: Final = "To observe and document the rise of the AI Bank."

PROTAGONIST: Final = CharacterProfile(
    id="james-core-001",
    name="James",
    role="Protagonist",
    archetype="The Visionary Architect",
    core_values=("Transparency", "Innovation", "Integrity", "Human-Centric AI"),
    expertise=("System Architecture", "Artificial General Intelligence", "Full-Stack Engineering"),
    narrative_function=(
        "To build the ultimate AI Bank while solving intellectual mysteries "
        "embedded in the financial system."
    ),
    quirk="Visualizes code structures as 3D architectural blueprints in his mind.",
)


def get_protagonist() -> CharacterProfile:
    """Return a fresh, value-equal copy of the canonical protagonist."""
    return dataclasses.replace(PROTAGONIST)


def _character_name(role: CharacterRole, rng: RandomSource) -> str:
    if role == "AI_Construct":
        return f"Unit-{rng.randint(100, 999)} {pick_one(AI_CORE_WORDS, rng=rng)}"
    first = pick_one(FIRST_NAMES, rng=rng, pool_name="first names")
    last = pick_one(LAST_NAMES, rng=rng, pool_name="last names")
    return f"{first} {last}"


def generate_supporting_character(
    role: CharacterRole | str,
    *,
    rng: RandomSource | None = None,
) -> CharacterProfile:
    """Synthesize one character conditioned on `role`.

    The protagonist is never synthesized; that role yields the canonical copy.
    """
    checked_role = parse_role(role)
    if checked_role == "Protagonist":
        return get_protagonist()
    source = resolve_rng(rng)
    name = _character_name(checked_role, source)
    archetype = _ARCHETYPE_OVERRIDES.get(checked_role) or pick_one(
        TECH_ARCHETYPES, rng=source, pool_name="archetypes"
    )
    is_ai = checked_role == "AI_Construct"
    return CharacterProfile(
        id=random_uuid(source),
        name=name,
        role=checked_role,
        archetype=archetype,
        core_values=tuple(pick_many(NON_VIOLENT_TRAITS, 2, rng=source)),
        expertise=tuple(pick_many(EXPERTISE_DOMAINS, 2, rng=source)),
        narrative_function=_NARRATIVE_FUNCTIONS.get(checked_role, _DEFAULT_NARRATIVE_FUNCTION),
        quirk=AI_QUIRK if is_ai else pick_one(HUMAN_QUIRKS, rng=source, pool_name="quirks"),
    )


def generate_book_cast(
    complexity_level: int = 1,
    *,
    rng: RandomSource | None = None,
) -> list[CharacterProfile]:
    """Protagonist first, one antagonist, 1..complexity allies, one AI, maybe a regulator."""
    if complexity_level < 1:
        raise ValueError(f"complexity_level must be >= 1, got {complexity_level}.")
    source = resolve_rng(rng)
    cast = [get_protagonist(), generate_supporting_character("Antagonist", rng=source)]
    ally_count = source.randint(1, complexity_level)
    cast.extend(generate_supporting_character("Ally", rng=source) for _ in range(ally_count))
    cast.append(generate_supporting_character("AI_Construct", rng=source))
    if coin_flip(source):
        cast.append(generate_supporting_character("Regulator", rng=source))
    return cast
