import numpy as np
import pandas as pd

from .constants import FrameColumn
from .matrix_errors import InvalidDimensionError
from .sparse_matrix import SparseMatrix


def coordinate_array(matrix: SparseMatrix) -> np.ndarray:
    """
    Coordinates of the explicit cells as an integer array.

    Args:
        matrix: The sparse matrix to read

    Returns:
        Array of shape (size, ndim), one row per explicit cell in ascending coordinate order
    """
    keys = matrix.keys()
    if len(keys) == 0:
        return np.empty((0, matrix.ndim), dtype=np.int64)
    return np.array(keys, dtype=np.int64)


def value_array(matrix: SparseMatrix) -> np.ndarray:
    """Values of the explicit cells, in the same order as coordinate_array."""
    return np.array(matrix.values())


def cells_to_frame(matrix: SparseMatrix) -> pd.DataFrame:
    """
    Tabular view of the explicit cells.

    Args:
        matrix: The sparse matrix to read

    Returns:
        DataFrame with one column per dimension (dim_0 .. dim_{N-1}) followed by a
        value column, one row per explicit cell in ascending coordinate order
    """
    coords = coordinate_array(matrix)
    data = {FrameColumn.dim(axis): coords[:, axis] for axis in range(matrix.ndim)}
    data[FrameColumn.VALUE] = matrix.values()
    return pd.DataFrame(data)


def format_region(matrix: SparseMatrix, rows: range, cols: range, width: int = 3) -> str:
    """
    Render a rectangular window of a 2-dimensional matrix as text.

    Every cell in the window is printed, explicit or not, right aligned to
    width characters and followed by a space.

    Args:
        matrix: A 2-dimensional sparse matrix
        rows: Row indices to print
        cols: Column indices to print
        width: Minimum field width per value

    Returns:
        The window, one line per row
    """
    if matrix.ndim != 2:
        raise InvalidDimensionError(matrix.ndim, expected="2 for region formatting")
    lines = []
    for i in rows:
        row = matrix[i]
        lines.append("".join(f"{row[j].read():>{width}} " for j in cols))
    return "\n".join(lines)
