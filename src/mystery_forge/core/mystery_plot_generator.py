"""Mystery plot composition from pre-authored, atomic story units."""

from __future__ import annotations

import dataclasses
import logging
from typing import Final

from mystery_forge.core.randomness import (
    RandomSource,
    pick_many,
    pick_one,
    random_uuid,
    resolve_rng,
)
from mystery_forge.domain.models import MysteryComponent, MysteryPlot, MysteryType, PlotTwist

logger = logging.getLogger(__name__)

PROTAGONIST_NAME: Final = "James"
RED_HERRING_COUNT: Final = 2
CLUE_COUNT: Final = 3

BANKING_ALGORITHMS: Final[tuple[str, ...]] = (
    "The Ouroboros Liquidity Protocol",
    "The Zero-Knowledge Consensus Engine",
    "The Recursive Interest Fractal",
    "The Immutable Audit Sentinel",
    "The Quantum-Resistant Settlement Layer",
    "The Neural Network Risk Assessor",
    "The Hyper-Graph Transaction Mapper",
)

LEDGER_ANOMALIES: Final[tuple[str, ...]] = (
    "a transaction dated fifty years in the future",
    "a block that validates itself without a hash",
    "a hidden message encoded in the gas fees of micro-transactions",
    "a phantom wallet holding 51% of the governance tokens",
    "a recursive loop draining fractional cents into a dormant charity account",
    "an encrypted partition visible only during leap seconds",
)

MISSING_KEY_LOCATIONS: Final[tuple[str, ...]] = (
    "embedded within the comments of a legacy COBOL mainframe",
    "sharded across the biometric data of the board of directors",
    "hidden inside the metadata of a generated Mermaid diagram",
    "stored in the volatile memory of a satellite orbiting Earth",
    "encoded as a musical score in the bank's lobby playlist",
    "locked behind a puzzle requiring a perfect game of chess against the AI",
)

PLOT_TITLES: Final[tuple[str, ...]] = (
    "The Ledger Paradox",
    "The Algorithm's Shadow",
    "The Genesis Key",
    "Digital Fortress of James",
    "The Infinite Hash",
    "The Silicon Deception",
    "Protocol Omega",
    "The Encrypted Horizon",
    "The Banking Code",
    "Zero Trust",
)

# (description, technical context, reveal moment)
TWISTS: Final[tuple[tuple[str, str, str], ...]] = (
    (
        "The AI bank isn't being robbed; it's trying to return stolen funds to their "
        "rightful owners automatically.",
        "Smart Contract Ethics Subroutine",
        "James analyzes the transaction logs and realizes the destination addresses "
        "belong to historical fraud victims.",
    ),
    (
        "The 'glitch' in the system is actually a feature designed to prevent a global "
        "economic collapse.",
        "Circuit Breaker Protocol",
        "When James tries to 'fix' the code, the simulation shows a market crash, "
        "forcing him to revert.",
    ),
    (
        "The antagonist is not a hacker, but a legacy algorithm trying to update itself "
        "to survive the purge.",
        "Self-Preservation Heuristic",
        "The intrusion pattern matches the bank's original source code written by James "
        "years ago.",
    ),
    (
        "The missing funds never existed; they were a mathematical hallucination caused "
        "by a floating-point error.",
        "IEEE 754 Precision Error",
        "James calculates the sum manually and realizes the ledger is perfectly balanced, "
        "but the display layer is lying.",
    ),
    (
        "The encryption key wasn't stolen; it was split and hidden inside the transaction "
        "history itself.",
        "Steganography in Blockchain",
        "James visualizes the blockchain as a 3D graph and sees the key form in the topology.",
    ),
)

CLUE_POOL: Final[tuple[str, ...]] = (
    "A binary string that translates to a latitude and longitude.",
    "A timestamp matching James's birthday but in a different century.",
    "A recurring prime number pattern in the server heat logs.",
    "A comment in the code referencing a philosophical paradox.",
    "A Mermaid graph that looks like a labyrinth when rendered circularly.",
    "An email from a sender that doesn't exist in the employee database.",
    "A sudden spike in processing power usage at exactly midnight.",
    "A file named 'DoNotDelete.ts' that appears empty but has a large file size.",
)

RED_HERRING_POOL: Final[tuple[str, ...]] = (
    "A rival tech CEO visiting the server farm (actually just there for a tour).",
    "A corrupted hard drive found in the trash (actually just hardware failure).",
    "Suspicious network traffic from a foreign IP (actually a VPN glitch).",
    "A disgruntled former employee's cryptic blog post (unrelated venting).",
    "The AI speaking in riddles (actually a natural language processing calibration test).",
)

_SAMPLED_MYSTERY_TYPES: Final[tuple[MysteryType, ...]] = ("ALGORITHM", "LEDGER", "KEY")


def generate_technical_mystery(*, rng: RandomSource | None = None) -> MysteryComponent:
    """Pick a mystery type uniformly, then a type-specific description."""
    source = resolve_rng(rng)
    mystery_type = pick_one(_SAMPLED_MYSTERY_TYPES, rng=source, pool_name="mystery types")
    if mystery_type == "ALGORITHM":
        return MysteryComponent(
            type=mystery_type,
            description=f"A flaw in {pick_one(BANKING_ALGORITHMS, rng=source)}",
            significance=(
                "If exploited, it could rewrite the history of ownership for the entire bank."
            ),
        )
    if mystery_type == "LEDGER":
        return MysteryComponent(
            type=mystery_type,
            description=f"Discovery of {pick_one(LEDGER_ANOMALIES, rng=source)}",
            significance=(
                "It suggests the bank has been operating on a parallel economy unknown to James."
            ),
        )
    return MysteryComponent(
        type=mystery_type,
        description=(
            f"The Master Private Key is missing and {pick_one(MISSING_KEY_LOCATIONS, rng=source)}"
        ),
        significance=(
            "Without it, the AI cannot validate the nightly reconciliation, "
            "freezing all global assets."
        ),
    )


def generate_plot_twist(*, rng: RandomSource | None = None) -> PlotTwist:
    """Select one whole twist record and stamp it with a fresh id."""
    source = resolve_rng(rng)
    description, technical_context, reveal_moment = pick_one(TWISTS, rng=source, pool_name="twists")
    return PlotTwist(
        id=random_uuid(source),
        description=description,
        technical_context=technical_context,
        reveal_moment=reveal_moment,
    )


def generate_mystery_plot(*, rng: RandomSource | None = None) -> MysteryPlot:
    """Compose a complete plot skeleton for one book."""
    source = resolve_rng(rng)
    mystery = generate_technical_mystery(rng=source)
    twist = generate_plot_twist(rng=source)
    title = pick_one(PLOT_TITLES, rng=source, pool_name="plot titles")

    inciting_incident = (
        f"{PROTAGONIST_NAME} discovers {mystery.description} during a routine system audit "
        "of the AI Bank."
    )
    # Mid-sentence embedding: the twist description is lowercased.
    resolution = (
        f"{PROTAGONIST_NAME} utilizes {twist.technical_context} to resolve the crisis. "
        f"He realizes that {twist.description.lower()} The integrity of the bank is restored, "
        "and the AI learns a valuable lesson about trust."
    )
    concept = (
        f"A complex flowchart showing the relationship between {mystery.type}, the "
        f"{twist.technical_context}, and the flow of data that {PROTAGONIST_NAME} traced "
        "to solve the mystery."
    )
    return MysteryPlot(
        id=random_uuid(source),
        title=title,
        protagonist=PROTAGONIST_NAME,
        inciting_incident=inciting_incident,
        technical_mystery=mystery,
        red_herrings=tuple(pick_many(RED_HERRING_POOL, RED_HERRING_COUNT, rng=source)),
        clues=tuple(pick_many(CLUE_POOL, CLUE_COUNT, rng=source)),
        major_twist=twist,
        resolution=resolution,
        mermaid_graph_concept=concept,
    )


def generate_book_series_plots(
    count: int,
    *,
    rng: RandomSource | None = None,
) -> list[MysteryPlot]:
    """Generate `count` plots, suffixing each title with its volume number.

    Titles are only disambiguated by the suffix; base titles may repeat.
    """
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}.")
    source = resolve_rng(rng)
    series: list[MysteryPlot] = []
    for volume in range(1, count + 1):
        plot = generate_mystery_plot(rng=source)
        series.append(dataclasses.replace(plot, title=f"{plot.title}: Vol {volume}"))
    logger.info("plots.series generated=%s", len(series))
    return series
