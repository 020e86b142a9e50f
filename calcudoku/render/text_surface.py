"""In-memory grid surface with a plain-text rendering."""

from __future__ import annotations

from typing import Dict, List, Tuple

from ..core.constants import Edge


CELL_WIDTH = 3


class TextGridSurface:
    """Stores cell text and edge visibility; draws them as ASCII."""

    def __init__(self) -> None:
        self.size = 0
        self.texts: List[List[str]] = []
        self.edges: Dict[Tuple[int, int, Edge], bool] = {}

    def build(self, size: int) -> None:
        self.size = size
        self.texts = [["" for _ in range(size)] for _ in range(size)]
        self.edges = {
            (r, c, edge): False for r in range(size) for c in range(size) for edge in Edge
        }

    def set_text(self, row: int, col: int, text: str) -> None:
        self.texts[row][col] = text

    def set_edge_visible(self, row: int, col: int, edge: Edge, visible: bool) -> None:
        self.edges[(row, col, edge)] = visible

    def text(self, row: int, col: int) -> str:
        return self.texts[row][col]

    def edge_visible(self, row: int, col: int, edge: Edge) -> bool:
        return self.edges[(row, col, edge)]

    def _horizontal(self, r: int) -> str:
        # Line above row r; r == size is the line below the last row.
        parts = ["+"]
        for c in range(self.size):
            above = r > 0 and self.edge_visible(r - 1, c, Edge.BOTTOM)
            below = r < self.size and self.edge_visible(r, c, Edge.TOP)
            parts.append(("-" if above or below else " ") * CELL_WIDTH)
            parts.append("+")
        return "".join(parts)

    def _vertical(self, r: int, c: int) -> str:
        # Separator left of column c; c == size is the right edge.
        left = c > 0 and self.edge_visible(r, c - 1, Edge.RIGHT)
        right = c < self.size and self.edge_visible(r, c, Edge.LEFT)
        return "|" if left or right else " "

    def render(self) -> str:
        lines = []
        for r in range(self.size):
            lines.append(self._horizontal(r))
            row = []
            for c in range(self.size):
                row.append(self._vertical(r, c))
                row.append(self.texts[r][c].center(CELL_WIDTH))
            row.append(self._vertical(r, self.size))
            lines.append("".join(row))
        lines.append(self._horizontal(self.size))
        return "\n".join(lines)

