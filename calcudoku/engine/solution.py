"""Latin-square solution generation and validity checking.

A solution starts from the cyclic base pattern ``((r + c) % n) + 1`` and is
randomized by three independent permutations: one moving rows, one moving
columns and one relabelling values. Each of those operations maps a Latin
square to another Latin square, so the result is always valid.
"""

from __future__ import annotations

import numbers
import random
from collections.abc import Mapping
from collections.abc import Sequence as SequenceABC
from typing import List, Optional, Sequence

from ..core.exceptions import ensure_size
from ..core.models import Solution
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


def shuffled_index(n: int, rng: random.Random) -> List[int]:
    """Return ``[0, n)`` in uniformly random order (Fisher-Yates)."""

    order = list(range(n))
    for i in range(n - 1, 0, -1):
        j = rng.randint(0, i)
        order[i], order[j] = order[j], order[i]
    return order


def base_latin_square(n: int) -> Solution:
    """Cyclic Latin square where each row is the previous one shifted left."""

    size = ensure_size(n)
    return [[((r + c) % size) + 1 for c in range(size)] for r in range(size)]


def permute_rows(grid: Sequence[Sequence[int]], row_perm: Sequence[int]) -> Solution:
    """Move row ``r`` of ``grid`` to row ``row_perm[r]``."""

    result: Solution = [[] for _ in grid]
    for r, row in enumerate(grid):
        result[row_perm[r]] = list(row)
    return result


def permute_cols(grid: Sequence[Sequence[int]], col_perm: Sequence[int]) -> Solution:
    """Move column ``c`` of ``grid`` to column ``col_perm[c]``."""

    result: Solution = []
    for row in grid:
        new_row = [0] * len(row)
        for c, value in enumerate(row):
            new_row[col_perm[c]] = value
        result.append(new_row)
    return result


def relabel_values(grid: Sequence[Sequence[int]], relabel: Sequence[int]) -> Solution:
    """Replace every value ``v`` with ``relabel[v - 1] + 1``."""

    return [[relabel[value - 1] + 1 for value in row] for row in grid]


def is_latin_valid(grid: Sequence[Sequence[int]]) -> bool:
    """Return True when every row and column holds each of 1..N exactly once.

    N is taken from the number of rows. Malformed input (non-sequences,
    ragged rows, values out of range, non-integers) is reported as ``False``
    rather than raised. Array rows and integer types beyond ``int`` are
    accepted.
    """

    if not _is_indexable(grid):
        return False
    n = len(grid)
    if n == 0:
        return False
    for row in grid:
        if not _is_indexable(row) or len(row) != n:
            return False

    for r in range(n):
        seen = [False] * (n + 1)
        for c in range(n):
            value = grid[r][c]
            if not _in_range(value, n):
                return False
            value = int(value)
            if seen[value]:
                return False
            seen[value] = True

    for c in range(n):
        seen = [False] * (n + 1)
        for r in range(n):
            value = int(grid[r][c])
            if seen[value]:
                return False
            seen[value] = True

    return True


def _is_indexable(obj: object) -> bool:
    # Lists, tuples and array rows; text and mappings do not count.
    if isinstance(obj, (str, bytes, bytearray, Mapping)):
        return False
    if isinstance(obj, SequenceABC):
        return True
    return hasattr(obj, "__len__") and hasattr(obj, "__getitem__")


def _in_range(value: object, n: int) -> bool:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        return False
    return 1 <= value <= n


class SolutionGenerator:
    """Builds randomized Latin-square solutions for an NxN puzzle.

    Each instance owns its random stream; two generators built with the same
    size and seed produce the same sequence of solutions.
    """

    def __init__(self, size: int, seed: Optional[int] = None) -> None:
        self.size = ensure_size(size)
        self.seed = seed
        self.rng = random.Random(seed)
        self._solution: Optional[Solution] = None

    @property
    def solution(self) -> Optional[Solution]:
        if self._solution is None:
            return None
        return [list(row) for row in self._solution]

    def construct(self) -> Solution:
        n = self.size
        latin = base_latin_square(n)

        row_perm = shuffled_index(n, self.rng)
        col_perm = shuffled_index(n, self.rng)
        relabel = shuffled_index(n, self.rng)
        LOGGER.debug(
            "Permutations for %sx%s: rows=%s cols=%s values=%s",
            n, n, row_perm, col_perm, relabel,
        )

        grid = permute_rows(latin, row_perm)
        grid = permute_cols(grid, col_perm)
        grid = relabel_values(grid, relabel)

        self._solution = grid
        LOGGER.info("Constructed %sx%s Latin-square solution", n, n)
        return [list(row) for row in grid]

    def is_latin_valid(self, grid: Sequence[Sequence[int]]) -> bool:
        return is_latin_valid(grid)


def construct_solution(size: int, seed: Optional[int] = None) -> Solution:
    """Build one solution without keeping a generator around."""

    return SolutionGenerator(size, seed).construct()
