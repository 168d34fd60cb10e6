"""CLI entrypoint for serving the mystery_forge HTTP API."""

from __future__ import annotations

import argparse
import os

import uvicorn

from mystery_forge.adapters.observability import configure_runtime_logging


def build_arg_parser() -> argparse.ArgumentParser:
    """Create CLI args for the local API server process."""
    parser = argparse.ArgumentParser(description="Serve mystery_forge API.")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8000)
    parser.add_argument("--reload", action="store_true")
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Default seed for requests that do not carry their own.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Parse CLI flags and start uvicorn with the app module path."""
    configure_runtime_logging()
    parser = build_arg_parser()
    parsed = parser.parse_args(argv)
    if parsed.seed is not None:
        os.environ["MYSTERY_FORGE_SEED"] = str(parsed.seed)
    uvicorn.run(
        "mystery_forge.api.app:app",
        host=str(parsed.host),
        port=int(parsed.port),
        reload=bool(parsed.reload),
    )


if __name__ == "__main__":
    main()
