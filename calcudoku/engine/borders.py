"""Cage boundary resolution.

An edge of a cell is drawn when it lies on the outer perimeter of the grid or
when the neighbouring cell across it belongs to a different cage. Each cell
computes its own four edges, so the shared edge between two cages is flagged
from both sides.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from ..core.constants import Bounds, Edge
from ..core.exceptions import PartitionError, ensure_size
from ..core.models import BorderFlags, BorderMap, Cage
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


def build_cage_lookup(size: int, partition: Sequence[Cage]) -> List[int]:
    """Map each row-major cell index to the index of the cage holding it."""

    n = ensure_size(size)
    bounds = Bounds.square(n)
    lookup: List[Optional[int]] = [None] * (n * n)
    for cage_index, cage in enumerate(partition):
        for cell in cage.cells:
            if not bounds.contains(cell.row, cell.col):
                raise PartitionError(
                    f"Cell ({cell.row},{cell.col}) of cage {cage_index} is outside a {n}x{n} grid"
                )
            key = cell.linear_index(n)
            if lookup[key] is not None:
                raise PartitionError(
                    f"Cell ({cell.row},{cell.col}) is in cages {lookup[key]} and {cage_index}"
                )
            lookup[key] = cage_index

    for key, cage_index in enumerate(lookup):
        if cage_index is None:
            raise PartitionError(f"Cell ({key // n},{key % n}) is not in any cage")
    return lookup  # type: ignore[return-value]


def resolve_borders(size: int, partition: Sequence[Cage]) -> BorderMap:
    """Return one :class:`BorderFlags` per cell, indexed ``[row][col]``."""

    n = ensure_size(size)
    bounds = Bounds.square(n)
    lookup = build_cage_lookup(n, partition)

    borders: BorderMap = []
    for r in range(n):
        row_flags: List[BorderFlags] = []
        for c in range(n):
            own = lookup[r * n + c]
            flags = {}
            for edge in Edge:
                dr, dc = edge.step
                nr, nc = r + dr, c + dc
                if not bounds.contains(nr, nc):
                    flags[edge.value] = True
                else:
                    flags[edge.value] = lookup[nr * n + nc] != own
            row_flags.append(BorderFlags(**flags))
        borders.append(row_flags)

    LOGGER.debug("Resolved borders for %s cages on a %sx%s grid", len(partition), n, n)
    return borders
