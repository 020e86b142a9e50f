"""Data models shared by the generator, partitioner and renderer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple

from .constants import CageOp, Edge


@dataclass(frozen=True, order=True)
class GridCoordinate:
    """Zero-based (row, col) position on the grid."""

    row: int
    col: int

    def linear_index(self, size: int) -> int:
        return self.row * size + self.col

    def neighbor(self, step: Tuple[int, int]) -> "GridCoordinate":
        dr, dc = step
        return GridCoordinate(self.row + dr, self.col + dc)


@dataclass
class Cage:
    """A group of cells sharing an arithmetic constraint."""

    cells: List[GridCoordinate] = field(default_factory=list)
    op: CageOp = CageOp.NONE
    target: int = 0

    @property
    def size(self) -> int:
        return len(self.cells)

    def add(self, cell: GridCoordinate) -> None:
        self.cells.append(cell)


@dataclass(frozen=True)
class BorderFlags:
    """Which edges of a cell are drawn as cage or grid boundaries."""

    top: bool
    right: bool
    bottom: bool
    left: bool

    def is_set(self, edge: Edge) -> bool:
        return getattr(self, edge.value)

    def as_tuple(self) -> Tuple[bool, bool, bool, bool]:
        return (self.top, self.right, self.bottom, self.left)


Solution = List[List[int]]
Partition = List[Cage]
BorderMap = List[List[BorderFlags]]
