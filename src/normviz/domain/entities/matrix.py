"""Dense matrix representation shared by the numeric services."""
from typing import List, Tuple

# Rows outer, columns inner; all rows have equal length.
Matrix = List[List[float]]


def zeros(rows: int, cols: int) -> Matrix:
    """Build a rows×cols matrix filled with 0.0."""
    return [[0.0] * cols for _ in range(rows)]


def shape(matrix: Matrix) -> Tuple[int, int]:
    """Return (rows, cols); an empty matrix has zero columns."""
    rows = len(matrix)
    return (rows, len(matrix[0]) if rows else 0)


def flatten(matrix: Matrix) -> List[float]:
    return [x for row in matrix for x in row]
