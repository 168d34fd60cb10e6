"""CLI for generating titles, casts, plots, refined dialogue and diagrams."""

from __future__ import annotations

import argparse
import json
import logging
import random
from typing import Any

from mystery_forge.adapters.observability import configure_runtime_logging
from mystery_forge.application.story_diagrams import (
    cast_class_diagram,
    cast_mindmap,
    plot_flowchart,
    plot_sequence_diagram,
    series_gantt,
)
from mystery_forge.core.character_generator import generate_book_cast
from mystery_forge.core.dialogue_enhancer import DialogueEnhancer, EnhancementOptions
from mystery_forge.core.mystery_plot_generator import generate_book_series_plots
from mystery_forge.core.randomness import RandomSource, resolve_rng
from mystery_forge.core.title_generator import generate_book_titles_report
from mystery_forge.settings import RuntimeSettings

logger = logging.getLogger(__name__)

DIAGRAM_CHOICES = (
    "plot-flowchart",
    "plot-sequence",
    "cast-class",
    "cast-mindmap",
    "series-gantt",
)


def build_arg_parser() -> argparse.ArgumentParser:
    """Define subcommands for each generator."""
    parser = argparse.ArgumentParser(description="Generate mystery-book content.")
    seeded = argparse.ArgumentParser(add_help=False)
    seeded.add_argument("--seed", type=int, default=None, help="Seed for reproducible output.")
    commands = parser.add_subparsers(dest="command", required=True)

    titles = commands.add_parser("titles", parents=[seeded], help="Generate unique book titles.")
    titles.add_argument("--count", type=int, default=10)

    cast = commands.add_parser("cast", parents=[seeded], help="Generate a cast list.")
    cast.add_argument("--complexity", type=int, default=1)

    plots = commands.add_parser(
        "plots", parents=[seeded], help="Generate a series of mystery plots."
    )
    plots.add_argument("--count", type=int, default=1)

    refine = commands.add_parser("refine", parents=[seeded], help="Refine one line of dialogue.")
    refine.add_argument("text")
    refine.add_argument(
        "--tone", choices=("mysterious", "analytical", "urgent", "revelatory"), default=None
    )
    refine.add_argument(
        "--pauses",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Force dramatic pauses on or off. Omit to leave it to chance.",
    )

    diagram = commands.add_parser("diagram", parents=[seeded], help="Render a Mermaid diagram.")
    diagram.add_argument("kind", choices=DIAGRAM_CHOICES)
    diagram.add_argument("--count", type=int, default=3, help="Volumes for series-gantt.")
    diagram.add_argument("--complexity", type=int, default=2, help="Cast size knob.")
    return parser


def _rng(seed: int | None) -> RandomSource:
    return random.Random(seed) if seed is not None else resolve_rng()


def _emit(payload: Any) -> None:
    print(json.dumps(payload, indent=2))


def _render_diagram(kind: str, *, count: int, complexity: int, rng: RandomSource) -> str:
    if kind in ("cast-class", "cast-mindmap"):
        cast = generate_book_cast(complexity, rng=rng)
        return cast_class_diagram(cast) if kind == "cast-class" else cast_mindmap(cast)
    plots = generate_book_series_plots(max(count, 1), rng=rng)
    if kind == "series-gantt":
        return series_gantt(plots)
    if kind == "plot-sequence":
        return plot_sequence_diagram(plots[0])
    return plot_flowchart(plots[0])


def main(argv: list[str] | None = None) -> None:
    """Parse CLI flags and print JSON (or raw Mermaid for diagrams)."""
    configure_runtime_logging()
    parser = build_arg_parser()
    parsed = parser.parse_args(argv)
    rng = _rng(parsed.seed)
    logger.info("cli.generate command=%s seed=%s", parsed.command, parsed.seed)

    try:
        if parsed.command == "titles":
            batch = generate_book_titles_report(
                int(parsed.count),
                rng=rng,
                attempt_factor=RuntimeSettings.from_env().title_attempt_factor,
            )
            _emit(
                {
                    "titles": batch.titles,
                    "requested": batch.requested,
                    "shortfall": batch.shortfall,
                }
            )
        elif parsed.command == "cast":
            _emit([member.to_dict() for member in generate_book_cast(parsed.complexity, rng=rng)])
        elif parsed.command == "plots":
            _emit([plot.to_dict() for plot in generate_book_series_plots(parsed.count, rng=rng)])
        elif parsed.command == "refine":
            options = EnhancementOptions(tone=parsed.tone, add_dramatic_pauses=parsed.pauses)
            text = DialogueEnhancer.refine(str(parsed.text), options, rng=rng)
            _emit({"text": text, "polite": DialogueEnhancer.validate_politeness(text)})
        else:
            print(
                _render_diagram(
                    parsed.kind,
                    count=int(parsed.count),
                    complexity=int(parsed.complexity),
                    rng=rng,
                )
            )
    except ValueError as error:
        parser.error(str(error))


if __name__ == "__main__":
    main()
