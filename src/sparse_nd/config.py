from typing import Any, Optional
from dataclasses import dataclass

from .constants import DEFAULT_VALUE, DEFAULT_NDIM
from .matrix_errors import InvalidDimensionError, InvalidDefaultValueError, InvalidValueTypeError, NonReflexiveDefaultError


@dataclass(frozen=True)
class MatrixConfig:
    """
    Configuration for a sparse matrix.

    The configuration is fixed once a matrix type or instance is created. It
    decides which value is elided from storage and how many chained index
    operations address a single cell.
    """

    default: Any = DEFAULT_VALUE
    """Value of every cell not explicitly stored. Writing it removes the cell.
    Must compare equal to itself, so NaN is rejected."""

    ndim: int = DEFAULT_NDIM
    """Number of coordinate components (chained index operations) per cell."""

    value_type: Optional[type] = None
    """Optional type (or tuple of types) every written value must be an instance of.
    None accepts any value."""

    def validate(self) -> None:
        """Validate configuration parameters."""
        if isinstance(self.ndim, bool) or not isinstance(self.ndim, int):
            raise InvalidDimensionError(self.ndim)
        if self.ndim < 1:
            raise InvalidDimensionError(self.ndim)
        if self.value_type is not None and not isinstance(self.default, self.value_type):
            raise InvalidDefaultValueError(self.default, self.value_type)
        if not self.default == self.default:
            raise NonReflexiveDefaultError(self.default)

    def check_value(self, value: Any) -> None:
        """Raise if value cannot be stored under this configuration."""
        if self.value_type is not None and not isinstance(value, self.value_type):
            raise InvalidValueTypeError(value, self.value_type)
