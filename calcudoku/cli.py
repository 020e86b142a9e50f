"""Command-line entrypoint: ``calcudoku`` or ``python -m calcudoku``."""

from __future__ import annotations

import argparse
import logging

from .core.constants import DisplayMode, MergeDirection
from .core.exceptions import CalcudokuError
from .engine.generator import GeneratorConfig, PuzzleGenerator
from .render.renderer import GridRenderer
from .render.text_surface import TextGridSurface
from .utils.logger import configure_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate a Latin-square solution and cage layout",
    )
    parser.add_argument("--size", type=int, default=9, help="Grid size N (NxN)")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility")
    parser.add_argument(
        "--strategy",
        type=str,
        choices=["random", "merge"],
        default="random",
        help="Cage partition strategy",
    )
    parser.add_argument(
        "--merge-direction",
        type=str,
        choices=[d.value for d in MergeDirection],
        default=MergeDirection.DOWN.value,
        help="Direction of the merged pair for the merge strategy",
    )
    parser.add_argument("--anchor-row", type=int, default=0, help="Anchor row for the merge strategy")
    parser.add_argument("--anchor-col", type=int, default=0, help="Anchor column for the merge strategy")
    parser.add_argument(
        "--mode",
        type=str,
        choices=[m.value for m in DisplayMode],
        default=DisplayMode.GROUPS_AND_NUMBERS.value,
        help="What to draw: plain grid, cages only, or cages with numbers",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    level = getattr(logging, args.log_level.upper(), logging.INFO)
    configure_logging(level)

    if args.size < 1:
        parser.error("--size must be at least 1")

    config = GeneratorConfig(
        size=args.size,
        seed=args.seed,
        strategy=args.strategy,
        merge_direction=MergeDirection(args.merge_direction),
        merge_anchor=(args.anchor_row, args.anchor_col),
    )

    try:
        result = PuzzleGenerator(config).generate()
    except CalcudokuError as exc:
        parser.error(str(exc))

    surface = TextGridSurface()
    renderer = GridRenderer(surface, mode=DisplayMode(args.mode))
    renderer.set_puzzle(result.solution, result.cages)
    print(surface.render())
    print(f"Cages: {len(result.cages)}")
    if result.seed is not None:
        print(f"Seed: {result.seed}")

