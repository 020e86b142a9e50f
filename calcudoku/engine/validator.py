"""Structural validation for cage partitions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Set

from ..core.constants import Bounds
from ..core.exceptions import PartitionError, ensure_size
from ..core.models import Cage, GridCoordinate
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


@dataclass
class ValidationResult:
    ok: bool
    messages: List[str]


class PartitionValidator:
    """Checks that a list of cages covers an NxN grid exactly once."""

    def __init__(self, size: int) -> None:
        self.size = ensure_size(size)
        self.bounds = Bounds.square(self.size)

    def validate(self, partition: Sequence[Cage]) -> ValidationResult:
        try:
            self._check_non_empty(partition)
            self._check_in_bounds(partition)
            self._check_no_duplicates(partition)
            self._check_full_coverage(partition)
        except PartitionError as exc:
            LOGGER.error("Partition validation failed: %s", exc)
            return ValidationResult(ok=False, messages=[str(exc)])
        return ValidationResult(ok=True, messages=[])

    def ensure_valid(self, partition: Sequence[Cage]) -> None:
        result = self.validate(partition)
        if not result.ok:
            raise PartitionError("; ".join(result.messages))

    def _check_non_empty(self, partition: Sequence[Cage]) -> None:
        for index, cage in enumerate(partition):
            if not cage.cells:
                raise PartitionError(f"Cage {index} has no cells")

    def _check_in_bounds(self, partition: Sequence[Cage]) -> None:
        for index, cage in enumerate(partition):
            for cell in cage.cells:
                if not self.bounds.contains(cell.row, cell.col):
                    raise PartitionError(
                        f"Cage {index} holds out-of-bounds cell ({cell.row},{cell.col})"
                    )

    def _check_no_duplicates(self, partition: Sequence[Cage]) -> None:
        seen: Set[GridCoordinate] = set()
        for index, cage in enumerate(partition):
            for cell in cage.cells:
                if cell in seen:
                    raise PartitionError(
                        f"Cell ({cell.row},{cell.col}) appears more than once (cage {index})"
                    )
                seen.add(cell)

    def _check_full_coverage(self, partition: Sequence[Cage]) -> None:
        covered = sum(cage.size for cage in partition)
        expected = self.size * self.size
        if covered != expected:
            raise PartitionError(
                f"Partition covers {covered} cells, expected {expected}"
            )
