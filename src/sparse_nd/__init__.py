"""
Sparse N-dimensional matrices with chained indexing.

Only cells whose value differs from a declared default are stored, while
reads and writes look like those of a dense array: ``m[i][j]...[k]``.
"""

__version__ = "0.1.0"

from .sparse_matrix import SparseMatrix
from .config import MatrixConfig
from .cell_store import CellStore
from .index_proxy import IndexProxy, Cell
from .cell_iterator import CellIterator, MutableCellIterator
from .matrix_utils import coordinate_array, value_array, cells_to_frame, format_region
from .logging_config import setup_logging
from .matrix_errors import (
    SparseMatrixConfigError,
    SparseMatrixIndexError,
    InvalidDimensionError,
    InvalidDefaultValueError,
    ConfigMismatchError,
    NonReflexiveDefaultError,
    IncompleteIndexError,
    ExcessIndexError,
    InvalidIndexError,
    InvalidValueTypeError,
)

__all__ = [
    "SparseMatrix",
    "MatrixConfig",
    "CellStore",
    "IndexProxy",
    "Cell",
    "CellIterator",
    "MutableCellIterator",
    "coordinate_array",
    "value_array",
    "cells_to_frame",
    "format_region",
    "setup_logging",
    "SparseMatrixConfigError",
    "SparseMatrixIndexError",
    "InvalidDimensionError",
    "InvalidDefaultValueError",
    "ConfigMismatchError",
    "NonReflexiveDefaultError",
    "IncompleteIndexError",
    "ExcessIndexError",
    "InvalidIndexError",
    "InvalidValueTypeError",
]
