"""Heuristic dialogue refinement: sanitize, elevate vocabulary, then style.

The safety filter is best-effort. It matches a fixed list of terms and does not
claim completeness.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import ClassVar, Final, Literal

from mystery_forge.core.randomness import RandomSource, coin_flip, pick_one, resolve_rng

Tone = Literal["mysterious", "analytical", "urgent", "revelatory"]
SpeakerIntelligence = Literal["high", "genius", "ai"]

_WORD_TOKEN = re.compile(r"\w+", flags=re.ASCII)
_TERMINAL_PUNCTUATION: Final = (".", "?", "!")
_SHORT_TEXT_LIMIT: Final = 50
_HOOK_THRESHOLD: Final = 0.7
_PROTAGONIST: Final = "James"


@dataclass(frozen=True)
class EnhancementOptions:
    """Refinement switches. `None` leaves the choice to a coin flip."""

    tone: Tone | None = None
    speaker_intelligence_level: SpeakerIntelligence | None = None
    add_dramatic_pauses: bool | None = None


class DialogueEnhancer:
    """Three-stage, total text pipeline for generated dialogue."""

    VOCABULARY_MAP: ClassVar[dict[str, tuple[str, ...]]] = {
        "think": ("hypothesize", "calculate", "deduce", "extrapolate", "theorize"),
        "look": ("observe", "analyze", "scrutinize", "examine", "monitor"),
        "problem": ("anomaly", "discrepancy", "variable", "latency", "divergence"),
        "secret": ("encrypted", "classified", "obscured", "encoded", "proprietary"),
        "money": ("capital", "liquidity", "assets", "valuation", "currency flow"),
        "bank": ("financial fortress", "ledger", "reserve", "institution", "vault"),
        "computer": ("mainframe", "neural net", "processor", "terminal", "node"),
        "fast": ("accelerated", "optimized", "expedited", "high-frequency"),
        "weird": ("irregular", "unprecedented", "deviant", "asymmetrical"),
        "check": ("verify", "audit", "validate", "authenticate"),
        "stop": ("halt", "terminate", "suspend", "abort"),
        "change": ("mutate", "evolve", "transform", "shift paradigm"),
        "big": ("substantial", "massive", "exponential", "critical"),
        "bad": ("suboptimal", "compromised", "corrupted", "adverse"),
    }

    SAFETY_PATTERNS: ClassVar[tuple[re.Pattern[str], ...]] = (
        re.compile(
            r"\b(damn|hell|stupid|idiot|shut up|kill|murder|death|die|blood|gun|shoot)\b",
            flags=re.IGNORECASE,
        ),
        re.compile(r"\b(hate|ugly|fat|dumb|crazy|insane)\b", flags=re.IGNORECASE),
    )

    MYSTERY_PREFIXES: ClassVar[tuple[str, ...]] = (
        "If the calculations are correct,",
        "Against all probability,",
        "Look closer at the metadata.",
        "The pattern is unmistakable.",
        "James knew the risks, but...",
        "It wasn't just code; it was consciousness.",
        "The ledger doesn't lie.",
    )

    DISRESPECTFUL_TERMS: ClassVar[tuple[str, ...]] = (
        "stupid",
        "idiot",
        "shut up",
        "useless",
        "fool",
    )

    PLOT_CALLBACK: ClassVar[str] = " Just as James predicted."

    MONOLOGUES: ClassVar[tuple[str, ...]] = (
        "The traditional banking system is a relic. We aren't just building a vault; "
        "we are architecting a new form of trust based on pure logic.",
        "They see numbers. I see the architecture of the future. The AI doesn't just "
        "store value; it understands it.",
        "Every transaction is a whisper in a storm. My algorithm hears them all.",
        "Security isn't about walls. It's about knowing the intruder's intent before they do.",
    )

    @classmethod
    def refine(
        cls,
        raw_text: str,
        options: EnhancementOptions | None = None,
        *,
        rng: RandomSource | None = None,
    ) -> str:
        """Sanitize, elevate and style `raw_text`. Blank input returns ``""``."""
        if not raw_text or not raw_text.strip():
            return ""
        text = cls.sanitize(raw_text)
        text = cls.elevate_vocabulary(text)
        return cls.apply_style(text, options or EnhancementOptions(), rng=resolve_rng(rng))

    @classmethod
    def sanitize(cls, text: str) -> str:
        """Replace blocked terms with `void` (<= 4 chars) or `error`."""
        for pattern in cls.SAFETY_PATTERNS:
            text = pattern.sub(lambda match: "void" if len(match.group(0)) <= 4 else "error", text)
        return text

    @classmethod
    def elevate_vocabulary(cls, text: str) -> str:
        """Deterministically swap common words for technical synonyms."""

        def replace(match: re.Match[str]) -> str:
            word = match.group(0)
            synonyms = cls.VOCABULARY_MAP.get(word.lower())
            if not synonyms:
                return word
            replacement = synonyms[len(word) % len(synonyms)]
            if word[0].isupper():
                return replacement[:1].upper() + replacement[1:]
            return replacement

        return _WORD_TOKEN.sub(replace, text)

    @classmethod
    def apply_style(
        cls,
        text: str,
        options: EnhancementOptions,
        *,
        rng: RandomSource,
    ) -> str:
        """Pauses, terminal punctuation, optional hook and plot callback."""
        styled = text.strip()

        pauses = options.add_dramatic_pauses
        if pauses is None:
            pauses = coin_flip(rng)
        if pauses:
            styled = styled.replace(", ", " ... ")

        if not styled.endswith(_TERMINAL_PUNCTUATION):
            styled += "."

        if len(styled) < _SHORT_TEXT_LIMIT and coin_flip(rng, _HOOK_THRESHOLD):
            prefix = pick_one(cls.MYSTERY_PREFIXES, rng=rng, pool_name="mystery prefixes")
            styled = f"{prefix} {styled}"

        if (
            options.tone == "mysterious"
            and _PROTAGONIST not in styled
            and ("bank" in styled or "vault" in styled)
        ):
            styled += cls.PLOT_CALLBACK

        return styled

    @classmethod
    def validate_politeness(cls, text: str) -> bool:
        """True when none of the disrespect terms appear (substring match)."""
        lowered = text.lower()
        return not any(term in lowered for term in cls.DISRESPECTFUL_TERMS)

    @classmethod
    def generate_protagonist_monologue(cls, *, rng: RandomSource | None = None) -> str:
        """Refine one fixed monologue in a mysterious, genius register."""
        source = resolve_rng(rng)
        selected = pick_one(cls.MONOLOGUES, rng=source, pool_name="monologues")
        return cls.refine(
            selected,
            EnhancementOptions(tone="mysterious", speaker_intelligence_level="genius"),
            rng=source,
        )
