from typing import Any

from .cell_store import CellStore
from .index_proxy import Cell


class CellIterator:
    """
    Read-only traversal over the explicit cells of a store.

    Yields one flat tuple per cell: the coordinate components followed by the
    value, in ascending lexicographic coordinate order. The coordinate order is
    taken from the store when the iterator is created; values are read when
    each cell is reached, and cells removed in the meantime are skipped.
    """

    def __init__(self, store: CellStore):
        self._store = store
        self._keys = iter(store.sorted_keys())

    def __iter__(self) -> 'CellIterator':
        return self

    def _next_coordinate(self):
        data = self._store.data_store
        for coord in self._keys:
            # removed since the traversal started
            if coord in data:
                return coord
        raise StopIteration

    def __next__(self) -> tuple[Any, ...]:
        coord = self._next_coordinate()
        return (*coord, self._store.data_store[coord])


class MutableCellIterator(CellIterator):
    """
    Traversal yielding writable Cell handles in the same order as CellIterator.

    Writing through a handle goes through the same default elision as direct
    assignment, so ``cell.write(default)`` removes the cell.
    """

    def __iter__(self) -> 'MutableCellIterator':
        return self

    def __next__(self) -> Cell:
        return Cell(self._store, self._next_coordinate())

