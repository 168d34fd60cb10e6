from __future__ import annotations

import logging
import random

import pytest

from mystery_forge.core.randomness import RandomSource
from mystery_forge.core.title_generator import (
    generate_book_titles,
    generate_book_titles_report,
    title_case,
)
from mystery_forge.core.word_banks import CONCEPT_NOUNS


def test_title_case_lowercases_then_capitalizes_words() -> None:
    assert title_case("the ALGORITHM's key") == "The Algorithm's Key"
    assert title_case("shadow of the node") == "Shadow Of The Node"


def test_generate_book_titles_returns_unique_title_cased_titles() -> None:
    titles = generate_book_titles(50, rng=random.Random(2024))
    assert len(titles) == 50
    assert len(set(titles)) == 50
    assert all(title == title_case(title) for title in titles)


def test_generate_book_titles_is_reproducible_with_seed() -> None:
    assert generate_book_titles(20, rng=random.Random(9)) == generate_book_titles(
        20, rng=random.Random(9)
    )


def test_generate_book_titles_handles_zero_and_rejects_negative() -> None:
    assert generate_book_titles(0, rng=random.Random(1)) == []
    with pytest.raises(ValueError, match="count must be >= 0"):
        generate_book_titles(-1, rng=random.Random(1))


def test_generate_book_titles_degrades_when_request_exceeds_title_space(
    caplog: pytest.LogCaptureFixture,
) -> None:
    caplog.set_level(logging.WARNING, logger="mystery_forge.core.title_generator")
    batch = generate_book_titles_report(100_000, rng=random.Random(4), attempt_factor=2)
    assert batch.requested == 100_000
    assert batch.attempts == 200_000
    assert 0 < len(batch.titles) < 100_000
    assert len(set(batch.titles)) == len(batch.titles)
    assert batch.shortfall == 100_000 - len(batch.titles)
    assert "titles.shortfall requested=100000" in caplog.text


def test_generate_book_titles_rejects_self_pairs() -> None:
    def always_same(rng: RandomSource) -> str:
        return f"{CONCEPT_NOUNS[0]} and {CONCEPT_NOUNS[0]}"

    batch = generate_book_titles_report(
        3, rng=random.Random(1), attempt_factor=4, templates=(always_same,)
    )
    assert batch.titles == []
    assert batch.attempts == 12


def test_pair_template_never_yields_accepted_self_pair() -> None:
    titles = generate_book_titles(300, rng=random.Random(17))
    for title in titles:
        if " And " in title:
            first, second = title.split(" And ", 1)
            assert first != second


def test_attempt_factor_defaults_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MYSTERY_FORGE_TITLE_ATTEMPT_FACTOR", "1")
    batch = generate_book_titles_report(10, rng=random.Random(8))
    assert batch.attempts <= 10
