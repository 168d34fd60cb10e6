from __future__ import annotations

import random
import uuid

import pytest

from mystery_forge.core.mystery_plot_generator import (
    CLUE_POOL,
    PLOT_TITLES,
    RED_HERRING_POOL,
    generate_book_series_plots,
    generate_mystery_plot,
    generate_plot_twist,
    generate_technical_mystery,
)


def test_generate_mystery_plot_structure() -> None:
    for seed in range(30):
        plot = generate_mystery_plot(rng=random.Random(seed))
        assert plot.protagonist == "James"
        assert plot.title in PLOT_TITLES
        assert len(plot.red_herrings) == 2
        assert len(set(plot.red_herrings)) == 2
        assert set(plot.red_herrings) <= set(RED_HERRING_POOL)
        assert len(plot.clues) == 3
        assert len(set(plot.clues)) == 3
        assert set(plot.clues) <= set(CLUE_POOL)
        assert uuid.UUID(plot.id).version == 4


def test_resolution_embeds_lowercased_twist() -> None:
    plot = generate_mystery_plot(rng=random.Random(5))
    assert plot.major_twist.description.lower() in plot.resolution
    assert plot.major_twist.technical_context in plot.resolution
    assert plot.technical_mystery.description in plot.inciting_incident
    assert plot.technical_mystery.type in plot.mermaid_graph_concept


def test_generate_technical_mystery_samples_three_types() -> None:
    seen = {generate_technical_mystery(rng=random.Random(seed)).type for seed in range(60)}
    assert seen == {"ALGORITHM", "LEDGER", "KEY"}


def test_technical_mystery_descriptions_follow_type() -> None:
    prefixes = {
        "ALGORITHM": "A flaw in ",
        "LEDGER": "Discovery of ",
        "KEY": "The Master Private Key is missing and ",
    }
    for seed in range(30):
        mystery = generate_technical_mystery(rng=random.Random(seed))
        assert mystery.description.startswith(prefixes[mystery.type])
        assert mystery.significance


def test_generate_plot_twist_stamps_fresh_ids() -> None:
    source = random.Random(3)
    first = generate_plot_twist(rng=source)
    second = generate_plot_twist(rng=source)
    assert first.id != second.id
    assert first.reveal_moment


def test_generate_book_series_plots_numbers_volumes() -> None:
    plots = generate_book_series_plots(4, rng=random.Random(21))
    assert len(plots) == 4
    for volume, plot in enumerate(plots, start=1):
        assert plot.title.endswith(f": Vol {volume}")
        assert plot.title.removesuffix(f": Vol {volume}") in PLOT_TITLES
    assert len({plot.id for plot in plots}) == 4


def test_generate_book_series_plots_bounds() -> None:
    assert generate_book_series_plots(0, rng=random.Random(1)) == []
    with pytest.raises(ValueError, match="count must be >= 0"):
        generate_book_series_plots(-2, rng=random.Random(1))


def test_plot_to_dict_nests_components() -> None:
    payload = generate_mystery_plot(rng=random.Random(8)).to_dict()
    assert set(payload["technical_mystery"]) == {"type", "description", "significance"}
    assert payload["major_twist"]["id"]
