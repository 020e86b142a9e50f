"""Puzzle orchestration.

A host builds a :class:`PuzzleGenerator` from a :class:`GeneratorConfig` and
calls :meth:`PuzzleGenerator.generate`:
  1. Solution: randomized Latin square.
  2. Cages: partition produced by the configured strategy.
  3. Borders: per-cell boundary flags for the renderer.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Optional, Tuple

from ..core.constants import MergeDirection
from ..core.exceptions import ValidationError, ensure_size
from ..core.models import BorderMap, Partition, Solution
from ..utils.logger import get_logger
from .borders import resolve_borders
from .partition import PartitionStrategy, partitioner_for
from .solution import SolutionGenerator, is_latin_valid


LOGGER = get_logger(__name__)


@dataclass
class GeneratorConfig:
    size: int
    seed: Optional[int] = None
    strategy: str = "random"
    merge_direction: MergeDirection = MergeDirection.DOWN
    merge_anchor: Tuple[int, int] = (0, 0)

    def partition_seed(self) -> Optional[int]:
        # Derived so the partitioner never shares the solution stream.
        if self.seed is None:
            return None
        return random.Random(self.seed).randint(0, 1_000_000)

    def build_partitioner(self) -> PartitionStrategy:
        if self.strategy == "merge":
            return partitioner_for(
                "merge", direction=self.merge_direction, anchor=self.merge_anchor
            )
        return partitioner_for(self.strategy, seed=self.partition_seed())


@dataclass
class PuzzleResult:
    size: int
    solution: Solution
    cages: Partition
    borders: BorderMap
    latin_valid: bool = True
    seed: Optional[int] = None


class PuzzleGenerator:
    """Builds a solution, a cage partition and its borders in one call."""

    def __init__(
        self,
        config: GeneratorConfig,
        partitioner: Optional[PartitionStrategy] = None,
    ) -> None:
        self.config = config
        self.size = ensure_size(config.size)
        self.solution_generator = SolutionGenerator(self.size, config.seed)
        self.partitioner = partitioner or config.build_partitioner()

    def generate(self) -> PuzzleResult:
        n = self.size
        solution = self.solution_generator.construct()
        ok = is_latin_valid(solution)
        LOGGER.info("Generated %sx%s. Latin-valid: %s", n, n, ok)
        if not ok:
            raise ValidationError(f"Generated {n}x{n} solution is not a Latin square")

        cages = self.partitioner.partition(n)
        LOGGER.info("Cages created (%s): %s", type(self.partitioner).__name__, len(cages))
        LOGGER.debug("Row0: %s", " ".join(str(value) for value in solution[0]))

        borders = resolve_borders(n, cages)
        return PuzzleResult(
            size=n,
            solution=solution,
            cages=cages,
            borders=borders,
            latin_valid=ok,
            seed=self.config.seed,
        )
