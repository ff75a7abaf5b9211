import os
import sys
import logging

# Add the src directory to Python path to import local sparse_nd
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))


from sparse_nd import SparseMatrix, format_region, setup_logging


NUM_ELEM = 10


def print_cells(matrix: SparseMatrix) -> None:
    for i, j, value in matrix:
        print(f"[{i}, {j}] = {value}")
    print()


def diagonals_demo() -> None:
    matrix = SparseMatrix()

    # main diagonal
    for i in range(NUM_ELEM):
        matrix[i][i] = i

    # secondary diagonal
    for i in range(NUM_ELEM):
        matrix[i][(NUM_ELEM - 1) - i] = (NUM_ELEM - 1) - i

    print(format_region(matrix, range(1, 9), range(1, 9)))
    print()

    print(matrix.size())
    print()

    print_cells(matrix)

    m2 = matrix.copy()
    print_cells(m2)

    matrix.clear()


def checkerboard_demo() -> None:
    count_step = 0
    matrix2 = SparseMatrix()

    for i in range(0, NUM_ELEM, 2):
        for j in range(0, NUM_ELEM, 2):
            matrix2[i + 1][j] = 8
            matrix2[i][j + 1] = 8
            count_step += 1

    print(format_region(matrix2, range(NUM_ELEM), range(NUM_ELEM)))
    print()
    print(f"Count step: {count_step}")


if __name__ == '__main__':
    setup_logging(level=logging.DEBUG if '--verbose' in sys.argv else logging.INFO)
    diagonals_demo()
    checkerboard_demo()
