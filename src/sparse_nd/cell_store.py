import copy
import logging
from dataclasses import dataclass, field
from typing import Any, Iterator

from .config import MatrixConfig


logger = logging.getLogger(__name__)

Coordinate = tuple[int, ...]


@dataclass(eq=False)
class CellStore:
    """
    Ordered coordinate -> value storage holding only non-default cells.

    Values equal to ``config.default`` are never stored: writing the default
    removes the entry instead. Traversal is in ascending lexicographic
    coordinate order, re-derived from the current entries on every call.
    """
    config: MatrixConfig = field(default_factory=MatrixConfig)
    data_store: dict[Coordinate, Any] = field(default_factory=dict)

    @property
    def default(self) -> Any:
        return self.config.default

    def get(self, coord: Coordinate) -> Any:
        """Get the value at coord, or the default if the cell is not stored."""
        return self.data_store.get(coord, self.config.default)

    def set(self, coord: Coordinate, value: Any) -> None:
        """Sets the value at coord.

        Args:
            coord: Full coordinate of the cell.
            value: The value to set. The default value removes the cell.
        """
        self.config.check_value(value)
        if value == self.config.default:
            # Remove default values to maintain sparsity
            self.data_store.pop(coord, None)
        else:
            self.data_store[coord] = value

    def discard(self, coord: Coordinate) -> None:
        """Resets the cell at coord to the default value."""
        self.data_store.pop(coord, None)

    def contains(self, coord: Coordinate) -> bool:
        """Checks if coord holds an explicit (non-default) value."""
        return coord in self.data_store

    def __contains__(self, coord: Coordinate) -> bool:
        return self.contains(coord)

    def size(self) -> int:
        """Returns the number of explicit cells."""
        return len(self.data_store)

    def __len__(self) -> int:
        return self.size()

    def clear(self) -> None:
        """Removes all explicit cells."""
        self.data_store.clear()

    def equals(self, other: 'CellStore') -> bool:
        """True if both stores hold exactly the same (coordinate, value) pairs."""
        return self.data_store == other.data_store

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CellStore):
            return NotImplemented
        return self.equals(other)

    __hash__ = None

    def sorted_keys(self) -> list[Coordinate]:
        """Returns the explicit coordinates in ascending lexicographic order."""
        return sorted(self.data_store)

    def items(self) -> Iterator[tuple[Coordinate, Any]]:
        """Yields (coordinate, value) pairs in ascending coordinate order."""
        for coord in self.sorted_keys():
            yield coord, self.data_store[coord]

    def copy(self) -> 'CellStore':
        """Returns an independent copy of the store."""
        return CellStore(config=self.config, data_store=self.data_store.copy())

    def __deepcopy__(self, memo: dict) -> 'CellStore':
        return CellStore(config=self.config, data_store=copy.deepcopy(self.data_store, memo))

    def take(self) -> 'CellStore':
        """Moves the entries into a new store, leaving this one empty."""
        moved = CellStore(config=self.config, data_store=self.data_store)
        self.data_store = {}
        logger.debug("Moved %d cells out of store", len(moved.data_store))
        return moved
