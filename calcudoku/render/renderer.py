"""Drives a display surface from a finished solution and partition."""

from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.constants import DisplayMode, Edge
from ..core.models import BorderMap, Cage, Partition, Solution
from ..engine.borders import resolve_borders
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


class GridSurface(Protocol):
    """Anything that can show text and edges for an NxN grid of cells."""

    def build(self, size: int) -> None:
        """(Re)create ``size`` x ``size`` blank cells."""

    def set_text(self, row: int, col: int, text: str) -> None:
        """Show ``text`` in the cell at (row, col)."""

    def set_edge_visible(self, row: int, col: int, edge: Edge, visible: bool) -> None:
        """Show or hide one edge of the cell at (row, col)."""


class GridRenderer:
    """Pushes numbers and cage borders to a :class:`GridSurface`."""

    def __init__(
        self,
        surface: GridSurface,
        mode: DisplayMode = DisplayMode.GROUPS_AND_NUMBERS,
    ) -> None:
        self.surface = surface
        self.mode = DisplayMode(mode)
        self.size = 0
        self.solution: Optional[Solution] = None
        self.cages: Optional[Partition] = None
        self.borders: Optional[BorderMap] = None

    def set_mode(self, mode: DisplayMode) -> None:
        self.mode = DisplayMode(mode)
        self.redraw()

    def set_puzzle(self, solution: Sequence[Sequence[int]], cages: Sequence[Cage]) -> None:
        self.solution = [list(row) for row in solution]
        self.cages = list(cages)
        self.size = len(self.solution)
        self.borders = resolve_borders(self.size, self.cages)
        self.surface.build(self.size)
        LOGGER.debug("Surface rebuilt for %sx%s with %s cages", self.size, self.size, len(self.cages))
        self.redraw()

    def redraw(self) -> None:
        if self.solution is None:
            return
        n = self.size
        for r in range(n):
            for c in range(n):
                self.surface.set_text(r, c, "")
                for edge in Edge:
                    self.surface.set_edge_visible(r, c, edge, False)

        if self.mode == DisplayMode.GAME:
            return

        self._apply_cage_borders()

        if self.mode == DisplayMode.GROUPS_AND_NUMBERS:
            for r in range(n):
                for c in range(n):
                    self.surface.set_text(r, c, str(self.solution[r][c]))

    def _apply_cage_borders(self) -> None:
        if self.borders is None:
            return
        for r, row_flags in enumerate(self.borders):
            for c, flags in enumerate(row_flags):
                for edge in Edge:
                    self.surface.set_edge_visible(r, c, edge, flags.is_set(edge))
