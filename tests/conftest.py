import os
import sys

import pytest

# Add the src directory to Python path to import local sparse_nd
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))
# test helpers live beside the tests
sys.path.insert(0, os.path.dirname(__file__))

from sparse_nd import SparseMatrix
from test_utils import populate_diagonals


@pytest.fixture
def matrix() -> SparseMatrix:
    """Empty 2-D matrix with default 0."""
    return SparseMatrix()


@pytest.fixture
def diagonal_matrix() -> SparseMatrix:
    """2-D matrix with the main and secondary diagonals of a 10x10 window filled."""
    return populate_diagonals(SparseMatrix())
