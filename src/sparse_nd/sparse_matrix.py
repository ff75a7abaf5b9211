import copy
import logging
from typing import Any, ClassVar, Iterable, Optional, Union

from .cell_iterator import CellIterator, MutableCellIterator
from .cell_store import CellStore, Coordinate
from .config import MatrixConfig
from .constants import DEFAULT_VALUE, DEFAULT_NDIM
from .index_proxy import Cell, IndexProxy, normalize_index
from .matrix_errors import ConfigMismatchError, InvalidIndexError


logger = logging.getLogger(__name__)


class SparseMatrix:
    """
    N-dimensional sparse matrix storing only cells that differ from a default.

    Cells are addressed with N chained index operations, ``m[i][j]`` for the
    default 2-dimensional matrix. The last one yields a Cell handle with
    ``read()`` and ``write()``; ``m[i][j] = v`` assigns directly. Writing the
    default value removes the cell, so ``size()`` always counts only explicit
    cells.

    Example:

        m = SparseMatrix()
        m[3][4] = 7
        m[3][4].read()      # 7
        m[0][0].read()      # 0, never stored
        list(m)             # [(3, 4, 7)]

        Tensor3D = SparseMatrix.specialize(default=-1, ndim=3)
        t = Tensor3D()
        t[1][2][3] = 5
    """

    config: ClassVar[MatrixConfig] = MatrixConfig()

    def __init__(self, config: Optional[MatrixConfig] = None):
        """
        Initialize an empty matrix

        Args:
            config: MatrixConfig fixing the default value, dimensionality and value type.
                Falls back to the class configuration.
        """
        config = config if config is not None else type(self).config
        config.validate()
        self.config = config
        self._store = CellStore(config=config)

    @classmethod
    def specialize(cls, default: Any = DEFAULT_VALUE, ndim: int = DEFAULT_NDIM,
                   value_type: Optional[type] = None) -> type['SparseMatrix']:
        """
        Define a matrix type with a fixed configuration.

        The configuration is validated here, when the type is defined, so an
        invalid dimensionality or default never reaches an instance.

        Args:
            default: Value of unset cells.
            ndim: Number of chained index operations per cell, at least 1.
            value_type: Optional type every written value must be an instance of.

        Returns:
            A subclass whose instances use this configuration.

        Raises:
            InvalidDimensionError: If ndim is not an integer >= 1.
            InvalidDefaultValueError: If default is not an instance of value_type.
        """
        config = MatrixConfig(default=default, ndim=ndim, value_type=value_type)
        config.validate()
        name = f"{cls.__name__}{ndim}D"
        logger.debug("Defined %s with default=%r value_type=%r", name, default, value_type)
        return type(name, (cls,), {'config': config, '__module__': cls.__module__})

    @property
    def ndim(self) -> int:
        return self.config.ndim

    @property
    def default(self) -> Any:
        return self.config.default

    def _root(self) -> IndexProxy:
        return IndexProxy(self._store, (), self.config.ndim)

    def __getitem__(self, key: Any) -> Union[IndexProxy, Cell]:
        """Start the index chain.

        Args:
            key: The first index, or a tuple of leading indices.

        Returns:
            An IndexProxy for the remaining dimensions, or a Cell once all are bound.
        """
        return self._root().bind(key)

    def __setitem__(self, key: Any, value: Any) -> None:
        self._root()[key] = value

    def __delitem__(self, key: Any) -> None:
        del self._root()[key]

    def __contains__(self, key: Any) -> bool:
        """Checks if the full coordinate key holds an explicit value."""
        components = key if isinstance(key, tuple) else (key,)
        if len(components) != self.config.ndim:
            return False
        try:
            coord = tuple(normalize_index(c) for c in components)
        except InvalidIndexError:
            return False
        return coord in self._store

    def get(self, *coord: Any) -> Any:
        """Get the value at a full coordinate, e.g. ``m.get(i, j)``."""
        return self._root().resolve(coord).read()

    def size(self) -> int:
        """Returns the number of explicit (non-default) cells."""
        return self._store.size()

    def __len__(self) -> int:
        return self.size()

    def clear(self) -> None:
        """Removes all explicit cells."""
        logger.debug("Clearing %d cells", self._store.size())
        self._store.clear()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SparseMatrix):
            return NotImplemented
        return self.config == other.config and self._store.equals(other._store)

    __hash__ = None

    def __iter__(self) -> CellIterator:
        """Iterate explicit cells as ``(*coordinate, value)`` tuples in coordinate order."""
        return CellIterator(self._store)

    def cells(self) -> MutableCellIterator:
        """Iterate explicit cells as writable Cell handles in coordinate order."""
        return MutableCellIterator(self._store)

    def keys(self) -> list[Coordinate]:
        """Returns the explicit coordinates in ascending order."""
        return self._store.sorted_keys()

    def values(self) -> list[Any]:
        """Returns the explicit values in coordinate order."""
        return [v for _, v in self._store.items()]

    def items(self) -> list[tuple[Coordinate, Any]]:
        """Returns a list of (coordinate, value) pairs in coordinate order."""
        return list(self._store.items())

    def update(self, cells: Iterable[tuple[Any, Any]]) -> None:
        """Write (coordinate, value) pairs, applying default elision to each.

        Every coordinate and value is checked before the first write, so a
        bad pair leaves the matrix unchanged.

        Args:
            cells: Iterable of (coordinate tuple, value) pairs.

        Raises:
            SparseMatrixIndexError: If a coordinate is invalid or not full length.
            InvalidValueTypeError: If a value does not match the value type.
        """
        root = self._root()
        pending = [(root.resolve(coord), value) for coord, value in cells]
        for _, value in pending:
            self.config.check_value(value)
        for cell, value in pending:
            cell.write(value)
        logger.debug("Wrote %d cells, %d explicit", len(pending), self._store.size())

    @classmethod
    def from_items(cls, cells: Iterable[tuple[Any, Any]],
                   config: Optional[MatrixConfig] = None) -> 'SparseMatrix':
        """Build a matrix from (coordinate, value) pairs."""
        result = cls(config)
        result.update(cells)
        return result

    def _check_compatible(self, other: 'SparseMatrix') -> None:
        if self.config != other.config:
            raise ConfigMismatchError(self.config, other.config)

    def copy(self) -> 'SparseMatrix':
        """Returns an independent copy of the matrix."""
        result = type(self)(self.config)
        result._store = self._store.copy()
        logger.debug("Copied %d cells", result._store.size())
        return result

    def __copy__(self) -> 'SparseMatrix':
        return self.copy()

    def __deepcopy__(self, memo: dict) -> 'SparseMatrix':
        result = type(self)(self.config)
        result._store = copy.deepcopy(self._store, memo)
        return result

    def assign(self, other: 'SparseMatrix') -> 'SparseMatrix':
        """Replace this matrix's cells with a copy of other's cells.

        Assigning a matrix to itself leaves it unchanged.

        Raises:
            ConfigMismatchError: If the two matrices are configured differently.
        """
        if other._store is self._store:
            return self
        self._check_compatible(other)
        self._store.data_store = other._store.data_store.copy()
        return self

    def move_from(self, other: 'SparseMatrix') -> 'SparseMatrix':
        """Take over other's cells, leaving other empty.

        Raises:
            ConfigMismatchError: If the two matrices are configured differently.
        """
        if other._store is self._store:
            return self
        self._check_compatible(other)
        self._store.data_store = other._store.take().data_store
        return self

    @classmethod
    def moved(cls, other: 'SparseMatrix') -> 'SparseMatrix':
        """Construct a matrix holding other's cells, leaving other empty."""
        return cls(other.config).move_from(other)

    def __repr__(self) -> str:
        """String representation of the matrix."""
        name = type(self).__name__
        header = f"ndim={self.config.ndim}, default={self.config.default!r}"
        if self._store.size() == 0:
            return f"{name}({header}, {{}})"
        items_str = ", ".join(f"{k}: {v!r}" for k, v in self._store.items())
        return f"{name}({header}, {{{items_str}}})"
