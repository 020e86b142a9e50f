"""Custom exception hierarchy for puzzle generation."""


class CalcudokuError(Exception):
    """Base exception for engine failures."""


class InvalidSizeError(CalcudokuError, ValueError):
    """Raised when a grid size is not a positive integer."""


class InvalidAnchorError(CalcudokuError, ValueError):
    """Raised when a merge anchor lies outside the grid."""


class PartitionError(CalcudokuError):
    """Raised when cages do not cover the grid exactly once."""


class ValidationError(CalcudokuError):
    """Raised when the generated puzzle fails integrity checks."""


def ensure_size(size: object) -> int:
    """Return ``size`` when it is a usable grid size, otherwise raise."""

    if isinstance(size, bool) or not isinstance(size, int):
        raise InvalidSizeError(f"Grid size must be an integer, got {size!r}")
    if size < 1:
        raise InvalidSizeError(f"Grid size must be at least 1, got {size}")
    return size
