"""Word banks and title templates for procedural book titles."""

from __future__ import annotations

from collections.abc import Callable
from typing import Final

from mystery_forge.core.randomness import RandomSource, pick_one

ADJECTIVES: Final[tuple[str, ...]] = (
    "Silent", "Forgotten", "Hidden", "Lost", "Quantum", "Digital", "Golden",
    "Final", "Unseen", "Infinite", "Broken", "Sovereign", "Virtual", "Neural",
    "Encrypted", "Decentralized", "Immutable", "Hollow", "Phantom", "Ethereal",
    "Binary", "First", "Last", "Zero-Sum", "Ascendant", "Cognitive", "Recursive",
    "Synthetic", "Woven", "Glass", "Iron", "Perfect", "Seventh", "Solitary",
)  # fmt: skip

MYSTERY_NOUNS: Final[tuple[str, ...]] = (
    "Enigma", "Paradox", "Secret", "Legacy", "Conundrum", "Cipher", "Key",
    "Shadow", "Veil", "Labyrinth", "Gambit", "Equation", "Sequence", "Pattern",
    "Riddle", "Puzzle", "Blueprint", "Chronicle", "Testament", "Covenant",
    "Mandala", "Symmetry", "Resonance", "Echo", "Question", "Clue",
)  # fmt: skip

TECH_NOUNS: Final[tuple[str, ...]] = (
    "Algorithm", "Protocol", "Matrix", "Genesis", "Oracle", "Sentinel", "Architect",
    "Node", "Core", "Network", "System", "Code", "Singularity", "Interface",
    "Processor", "Chain", "Mind", "Cognition", "Nexus", "Spire", "Engine", "Weaver",
)  # fmt: skip

FINANCE_NOUNS: Final[tuple[str, ...]] = (
    "Ledger", "Vault", "Currency", "Transaction", "Credit", "Asset", "Trust",
    "Standard", "Reserve", "Fortune", "Balance", "Account", "Token", "Coin",
    "Pact", "Bond", "Index", "Sum", "Principle", "Inheritance",
)  # fmt: skip

CONCEPT_NOUNS: Final[tuple[str, ...]] = (
    "Trust", "Identity", "Value", "Time", "Logic", "Order", "Truth", "Proof",
    "Consensus", "Equilibrium", "Infinity", "Memory", "Reason", "Purpose",
    "Choice", "Future", "Past", "Sanctuary", "Promise",
)  # fmt: skip

GERUNDS: Final[tuple[str, ...]] = (
    "Decoding", "Unlocking", "Securing", "Tracing", "Balancing", "Calculating",
    "Verifying", "Forging", "Architecting", "Encrypting", "Remembering",
    "Solving", "Weaving", "Chasing", "Finding",
)  # fmt: skip

ALL_NOUNS: Final[tuple[str, ...]] = MYSTERY_NOUNS + TECH_NOUNS + FINANCE_NOUNS + CONCEPT_NOUNS
CONCRETE_NOUNS: Final[tuple[str, ...]] = TECH_NOUNS + FINANCE_NOUNS

TitleTemplate = Callable[[RandomSource], str]


def _pick(bank: tuple[str, ...], rng: RandomSource) -> str:
    return pick_one(bank, rng=rng, pool_name="word bank")


def _pair_of_concepts(rng: RandomSource) -> str:
    first = _pick(CONCEPT_NOUNS, rng)
    second = _pick(CONCEPT_NOUNS, rng)
    return f"{first} and {second}"


TITLE_TEMPLATES: Final[tuple[TitleTemplate, ...]] = (
    lambda rng: f"The {_pick(ADJECTIVES, rng)} {_pick(ALL_NOUNS, rng)}",
    lambda rng: f"The {_pick(ALL_NOUNS, rng)}'s {_pick(MYSTERY_NOUNS, rng)}",
    lambda rng: f"{_pick(GERUNDS, rng)} the {_pick(CONCRETE_NOUNS, rng)}",
    lambda rng: f"The {_pick(CONCEPT_NOUNS, rng)} {_pick(MYSTERY_NOUNS, rng)}",
    lambda rng: f"The {_pick(TECH_NOUNS, rng)} Protocol",
    lambda rng: f"The {_pick(FINANCE_NOUNS, rng)} of {_pick(CONCEPT_NOUNS, rng)}",
    lambda rng: f"The {_pick(ADJECTIVES, rng)} Gambit",
    lambda rng: f"The {_pick(MYSTERY_NOUNS, rng)} Code",
    _pair_of_concepts,
    lambda rng: f"The Shadow of the {_pick(TECH_NOUNS, rng)}",
    lambda rng: f"The {_pick(MYSTERY_NOUNS, rng)}'s Key",
    lambda rng: f"A {_pick(ADJECTIVES, rng)} {_pick(CONCEPT_NOUNS, rng)}",
    lambda rng: f"The {_pick(TECH_NOUNS, rng)}'s Ledger",
    lambda rng: f"The {_pick(FINANCE_NOUNS, rng)} Paradox",
    lambda rng: f"The {_pick(ADJECTIVES, rng)} Equation",
    lambda rng: f"The {_pick(TECH_NOUNS, rng)} Enigma",
    lambda rng: f"The {_pick(CONCEPT_NOUNS, rng)} Key",
    lambda rng: f"The {_pick(ADJECTIVES, rng)} Inheritance",
)
