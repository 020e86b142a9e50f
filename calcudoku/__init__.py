"""Puzzle-structure engine for KenKen/Calcudoku-style grids.

This package exposes the public API surface via:

- ``calcudoku.engine.solution.SolutionGenerator``: randomized Latin squares.
- ``calcudoku.engine.partition`` strategies: cage partitions of the grid.
- ``calcudoku.engine.borders.resolve_borders``: per-cell cage boundaries.
- ``calcudoku.engine.generator.PuzzleGenerator``: runs all three in order.
- ``calcudoku.render.renderer.GridRenderer``: drives a display surface.
"""

from .core.constants import CageOp, DisplayMode, Edge, MergeDirection
from .core.models import BorderFlags, Cage, GridCoordinate
from .engine.borders import resolve_borders
from .engine.generator import GeneratorConfig, PuzzleGenerator, PuzzleResult
from .engine.partition import (
    DegenerateMergePartitioner,
    PartitionStrategy,
    RandomRunPartitioner,
    degenerate_merge_partition,
    random_partition,
)
from .engine.solution import SolutionGenerator, is_latin_valid
from .render.renderer import GridRenderer, GridSurface

__all__ = [
    "BorderFlags",
    "Cage",
    "CageOp",
    "DegenerateMergePartitioner",
    "DisplayMode",
    "Edge",
    "GeneratorConfig",
    "GridCoordinate",
    "GridRenderer",
    "GridSurface",
    "MergeDirection",
    "PartitionStrategy",
    "PuzzleGenerator",
    "PuzzleResult",
    "RandomRunPartitioner",
    "SolutionGenerator",
    "degenerate_merge_partition",
    "is_latin_valid",
    "random_partition",
    "resolve_borders",
]

__version__ = "0.1.0"
