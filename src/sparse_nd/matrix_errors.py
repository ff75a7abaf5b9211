def _type_name(value_type) -> str:
    if isinstance(value_type, tuple):
        return " | ".join(t.__name__ for t in value_type)
    return value_type.__name__


class SparseMatrixConfigError(ValueError):
    """Base class for sparse matrix configuration errors."""
    pass

class SparseMatrixIndexError(IndexError):
    """Base class for errors about the indices used to address a cell."""
    pass



class InvalidDimensionError(SparseMatrixConfigError):
    """Raised when a matrix is declared with an unusable dimensionality."""

    def __init__(self, ndim, expected: str = "an integer >= 1"):
        self.ndim = ndim
        message = f"Invalid matrix dimensionality {ndim!r}. Must be {expected}"
        super().__init__(message)


class InvalidDefaultValueError(SparseMatrixConfigError):
    """Raised when the default value does not match the declared value type."""

    def __init__(self, default, value_type: type):
        self.default = default
        self.value_type = value_type
        message = f"Default value {default!r} is not an instance of {_type_name(value_type)}"
        super().__init__(message)


class NonReflexiveDefaultError(SparseMatrixConfigError):
    """Raised when the default value does not compare equal to itself (e.g. NaN)."""

    def __init__(self, default):
        self.default = default
        message = f"Default value {default!r} is not equal to itself, so default cells could never be elided"
        super().__init__(message)


class ConfigMismatchError(SparseMatrixConfigError):
    """Raised when copying or moving between matrices with different configurations."""

    def __init__(self, target_config, source_config):
        self.target_config = target_config
        self.source_config = source_config
        message = (
            f"Cannot transfer cells between differently configured matrices\n"
            f"  target: {target_config}\n"
            f"  source: {source_config}"
        )
        super().__init__(message)


class IncompleteIndexError(SparseMatrixIndexError):
    """Raised when a partially bound index is used as a cell."""

    def __init__(self, prefix: tuple, ndim: int):
        self.prefix = prefix
        self.ndim = ndim
        message = f"Index {prefix} binds {len(prefix)} of {ndim} dimensions; {ndim - len(prefix)} more index operation(s) required"
        super().__init__(message)


class ExcessIndexError(SparseMatrixIndexError):
    """Raised when more indices are supplied than the matrix has dimensions."""

    def __init__(self, components: tuple, ndim: int):
        self.components = components
        self.ndim = ndim
        message = f"Too many indices {components} for a {ndim}-dimensional matrix"
        super().__init__(message)


class InvalidIndexError(SparseMatrixIndexError):
    """Raised when an index component is not a non-negative integer."""

    def __init__(self, index, reason: str = "must be a non-negative integer"):
        self.index = index
        message = f"Invalid index component {index!r}: {reason}"
        super().__init__(message)


class InvalidValueTypeError(TypeError):
    """Raised when a written value does not match the matrix value type."""

    def __init__(self, value, value_type: type):
        self.value = value
        self.value_type = value_type
        message = f"Value {value!r} of type {type(value).__name__} is not an instance of {_type_name(value_type)}"
        super().__init__(message)
