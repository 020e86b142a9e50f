"""Shared constants and enumerations for the puzzle engine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class DisplayMode(str, Enum):
    """How the board is presented by a renderer."""

    GAME = "game"
    GROUPS = "groups"
    GROUPS_AND_NUMBERS = "groups_and_numbers"


class CageOp(str, Enum):
    """Arithmetic rule attached to a cage."""

    NONE = "none"
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "x"
    DIVIDE = "/"


class MergeDirection(str, Enum):
    """Direction in which the degenerate partition merges its anchor."""

    DOWN = "down"
    RIGHT = "right"

    @property
    def step(self) -> Tuple[int, int]:
        return (1, 0) if self is MergeDirection.DOWN else (0, 1)


class Edge(str, Enum):
    """The four sides of a cell."""

    TOP = "top"
    RIGHT = "right"
    BOTTOM = "bottom"
    LEFT = "left"

    @property
    def step(self) -> Tuple[int, int]:
        return EDGE_STEPS[self]


EDGE_STEPS = {
    Edge.TOP: (-1, 0),
    Edge.RIGHT: (0, 1),
    Edge.BOTTOM: (1, 0),
    Edge.LEFT: (0, -1),
}

MIN_RUN_LENGTH = 2
MAX_RUN_LENGTH = 3


@dataclass(frozen=True)
class Bounds:
    """Simple rectangle bounds helper."""

    rows: int
    cols: int

    @classmethod
    def square(cls, size: int) -> "Bounds":
        return cls(rows=size, cols=size)

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols
