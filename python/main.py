#!/usr/bin/env python3
"""Sortle — a language-less sorting game.

Usage::

    python main.py                 # play with 5 tiles
    python main.py -n 4 --seed 7   # 4 tiles, reproducible puzzles
    python main.py --show          # print one generated puzzle and exit
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import typer
from rich.logging import RichHandler

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.models.tiles import MAX_TILES, MIN_TILES, TILE_COUNT  # noqa: E402


# -- helpers ------------------------------------------------------------------


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(name)s: %(message)s",
        handlers=[RichHandler(show_path=False)],
    )


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    tiles: int = typer.Option(
        TILE_COUNT, "-n", "--tiles",
        min=MIN_TILES, max=MAX_TILES,
        help=f"Number of tiles ({MIN_TILES}-{MAX_TILES}).",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        envvar="SORTLE_SEED",
        help="Random seed for reproducible puzzles.",
    ),
    show: bool = typer.Option(
        False, "--show",
        help="Print a generated puzzle with its solution and exit.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log puzzle generation at DEBUG level.",
    ),
) -> None:
    """Sortle — sort the tiles until every rule holds."""
    _configure_logging(verbose)

    if show:
        from backend.engine.gamegenerator import PuzzleGenerator
        from frontend.cli.rich.app import show_puzzle

        show_puzzle(PuzzleGenerator.generate(tiles, seed=seed))
        return

    from frontend.cli.rich.app import run

    run(tile_count=tiles, seed=seed)


if __name__ == "__main__":
    app()
