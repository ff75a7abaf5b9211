"""
Chained indexing for sparse matrices.

``m[i][j][k]`` on a 3-dimensional matrix is resolved one component at a time.
Every ``[]`` returns a new IndexProxy carrying the coordinate prefix bound so
far and the number of dimensions still unbound. When the last component is
bound the result is a Cell, the only object that reads or writes the store.

Proxies and cells are views: they hold a reference to the store, not a copy.
They are meant to live for a single expression. A view kept after its matrix
was cleared or moved from reads the default value everywhere.
"""
import operator
from typing import Any, Union

from .cell_store import CellStore, Coordinate
from .matrix_errors import IncompleteIndexError, ExcessIndexError, InvalidIndexError


def normalize_index(index: Any) -> int:
    """Convert one index component to a non-negative Python int.

    Args:
        index: Any object implementing ``__index__`` (int, numpy integer, ...)

    Returns:
        The component as an int.

    Raises:
        InvalidIndexError: If index is not an integer or is negative.
    """
    if isinstance(index, bool):
        raise InvalidIndexError(index)
    try:
        value = operator.index(index)
    except TypeError:
        raise InvalidIndexError(index) from None
    if value < 0:
        raise InvalidIndexError(index, "must not be negative")
    return value


def split_key(key: Any) -> tuple:
    """Turn the argument of ``[]`` into a tuple of raw components."""
    components = key if isinstance(key, tuple) else (key,)
    if len(components) == 0:
        raise InvalidIndexError(key, "at least one index component is required")
    return components


class IndexProxy:
    """Partially bound index with `remaining` dimensions still to bind."""

    __slots__ = ('_store', 'prefix', 'remaining')

    def __init__(self, store: CellStore, prefix: Coordinate, remaining: int):
        self._store = store
        self.prefix = prefix
        self.remaining = remaining

    @property
    def ndim(self) -> int:
        return self._store.config.ndim

    def bind(self, key: Any) -> Union['IndexProxy', 'Cell']:
        """Bind one or more further components.

        Args:
            key: A single component, or a tuple of components.

        Returns:
            A Cell once every dimension is bound, otherwise a narrower IndexProxy.

        Raises:
            ExcessIndexError: If key has more components than remain unbound.
            InvalidIndexError: If a component is not a non-negative integer.
        """
        components = split_key(key)
        if len(components) > self.remaining:
            raise ExcessIndexError(self.prefix + components, self.ndim)

        coord = self.prefix + tuple(normalize_index(c) for c in components)
        remaining = self.remaining - len(components)
        if remaining == 0:
            return Cell(self._store, coord)
        return IndexProxy(self._store, coord, remaining)

    def __getitem__(self, key: Any) -> Union['IndexProxy', 'Cell']:
        return self.bind(key)

    def resolve(self, key: Any) -> 'Cell':
        """Bind key and require the result to be a complete cell."""
        target = self.bind(key)
        if isinstance(target, IndexProxy):
            raise IncompleteIndexError(target.prefix, self.ndim)
        return target

    def __setitem__(self, key: Any, value: Any) -> None:
        self.resolve(key).write(value)

    def __delitem__(self, key: Any) -> None:
        self.resolve(key).reset()

    def read(self) -> Any:
        raise IncompleteIndexError(self.prefix, self.ndim)

    def write(self, value: Any) -> None:
        raise IncompleteIndexError(self.prefix, self.ndim)

    def _not_a_cell(self):
        unbound = self.remaining
        return TypeError(f"IndexProxy is not iterable; bind the remaining {unbound} index(es) first")

    def __iter__(self):
        raise self._not_a_cell()

    def __contains__(self, item: Any) -> bool:
        raise self._not_a_cell()

    def __repr__(self) -> str:
        return f"IndexProxy(prefix={self.prefix}, remaining={self.remaining})"


class Cell:
    """Fully bound index: a read/write handle on one coordinate."""

    __slots__ = ('_store', 'coordinate')

    def __init__(self, store: CellStore, coordinate: Coordinate):
        self._store = store
        self.coordinate = coordinate

    def read(self) -> Any:
        """Returns the stored value, or the default if the cell is not explicit."""
        return self._store.get(self.coordinate)

    def write(self, value: Any) -> 'Cell':
        """Assigns value. Writing the default removes the cell from storage."""
        self._store.set(self.coordinate, value)
        return self

    def reset(self) -> None:
        """Resets the cell to the default value."""
        self._store.discard(self.coordinate)

    def is_explicit(self) -> bool:
        return self._store.contains(self.coordinate)

    def as_tuple(self) -> tuple:
        """Returns the coordinate components followed by the value."""
        return (*self.coordinate, self.read())

    def __iter__(self):
        return iter(self.as_tuple())

    def __eq__(self, other: object) -> bool:
        raise TypeError("Cell handles do not compare by value; compare cell.read() instead")

    __hash__ = None

    def __bool__(self) -> bool:
        raise TypeError("Cell handles have no truth value; test cell.read() or cell.is_explicit() instead")

    def __getitem__(self, key: Any):
        raise ExcessIndexError(self.coordinate + split_key(key), len(self.coordinate))

    def __setitem__(self, key: Any, value: Any) -> None:
        raise ExcessIndexError(self.coordinate + split_key(key), len(self.coordinate))

    def __repr__(self) -> str:
        return f"Cell({self.coordinate}, value={self.read()!r})"
