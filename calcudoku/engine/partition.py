"""Strategies that split the grid into cages.

Both built-in strategies are scaffolding: neither enforces adjacency inside a
cage. Anything implementing :class:`PartitionStrategy` can replace them
without touching border resolution or rendering.
"""

from __future__ import annotations

import random
from typing import List, Optional, Protocol, Tuple, Union

from ..core.constants import MAX_RUN_LENGTH, MIN_RUN_LENGTH, Bounds, MergeDirection
from ..core.exceptions import InvalidAnchorError, ensure_size
from ..core.models import Cage, GridCoordinate, Partition
from ..utils.logger import get_logger
from .solution import shuffled_index
from .validator import PartitionValidator


LOGGER = get_logger(__name__)

AnchorLike = Union[GridCoordinate, Tuple[int, int]]


class PartitionStrategy(Protocol):
    """Protocol implemented by all cage partitioners."""

    def partition(self, size: int) -> Partition:
        """Return cages covering every cell of a ``size`` x ``size`` grid once."""


def all_coordinates(size: int) -> List[GridCoordinate]:
    return [GridCoordinate(r, c) for r in range(size) for c in range(size)]


class RandomRunPartitioner:
    """Cuts a shuffled list of all cells into runs of 2-3 cells.

    When fewer than ``min_run`` cells are left the last cage takes all of
    them, so a single trailing cage of size 1 is possible.
    """

    def __init__(
        self,
        seed: Optional[int] = None,
        min_run: int = MIN_RUN_LENGTH,
        max_run: int = MAX_RUN_LENGTH,
    ) -> None:
        if min_run < 1 or max_run < min_run:
            raise ValueError(f"Invalid run length range {min_run}..{max_run}")
        self.rng = random.Random(seed)
        self.min_run = min_run
        self.max_run = max_run

    def partition(self, size: int) -> Partition:
        n = ensure_size(size)
        ordered = all_coordinates(n)
        cells = [ordered[i] for i in shuffled_index(len(ordered), self.rng)]

        cages: Partition = []
        index = 0
        while index < len(cells):
            remaining = len(cells) - index
            if remaining < self.min_run:
                run = remaining
            else:
                run = min(self.rng.randint(self.min_run, self.max_run), remaining)
            cages.append(Cage(cells=cells[index:index + run]))
            index += run

        PartitionValidator(n).ensure_valid(cages)
        LOGGER.info("Random partition: %s cages over %s cells", len(cages), n * n)
        return cages


class DegenerateMergePartitioner:
    """All single-cell cages except one pair merged from an anchor cell."""

    def __init__(
        self,
        direction: MergeDirection = MergeDirection.DOWN,
        anchor: AnchorLike = (0, 0),
    ) -> None:
        self.direction = MergeDirection(direction)
        if not isinstance(anchor, GridCoordinate):
            anchor = GridCoordinate(*anchor)
        self.anchor = anchor

    def merge_target(self, size: int) -> Optional[GridCoordinate]:
        """Cell merged into the anchor's cage, or None when it falls off the grid."""

        target = self.anchor.neighbor(self.direction.step)
        if not Bounds.square(size).contains(target.row, target.col):
            return None
        return target

    def partition(self, size: int) -> Partition:
        n = ensure_size(size)
        if not Bounds.square(n).contains(self.anchor.row, self.anchor.col):
            raise InvalidAnchorError(
                f"Anchor ({self.anchor.row},{self.anchor.col}) is outside a {n}x{n} grid"
            )

        target = self.merge_target(n)
        if target is None:
            LOGGER.warning(
                "Merge %s from (%s,%s) leaves the grid; using single-cell cages only",
                self.direction.value, self.anchor.row, self.anchor.col,
            )

        cages: Partition = []
        anchor_cage: Optional[Cage] = None
        for cell in all_coordinates(n):
            if target is not None and cell == target and anchor_cage is not None:
                anchor_cage.add(cell)
                continue
            cage = Cage(cells=[cell])
            if cell == self.anchor:
                anchor_cage = cage
            cages.append(cage)

        PartitionValidator(n).ensure_valid(cages)
        LOGGER.info("Merge partition: %s cages over %s cells", len(cages), n * n)
        return cages


def random_partition(size: int, seed: Optional[int] = None) -> Partition:
    return RandomRunPartitioner(seed=seed).partition(size)


def degenerate_merge_partition(
    size: int,
    direction: MergeDirection = MergeDirection.DOWN,
    anchor: AnchorLike = (0, 0),
) -> Partition:
    return DegenerateMergePartitioner(direction=direction, anchor=anchor).partition(size)


def partitioner_for(name: str, **kwargs) -> PartitionStrategy:
    """Build a strategy by name: ``"random"`` or ``"merge"``."""

    if name == "random":
        return RandomRunPartitioner(**kwargs)
    if name == "merge":
        return DegenerateMergePartitioner(**kwargs)
    raise ValueError(f"Unknown partition strategy '{name}'. Known: random, merge")
