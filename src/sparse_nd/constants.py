DEFAULT_VALUE = 0  # value of every cell that was never written
DEFAULT_NDIM = 2  # number of chained indices for an unspecialized matrix


class FrameColumn:
    DIM_PREFIX = "dim_"
    VALUE = "value"

    @staticmethod
    def dim(axis: int) -> str:
        return f"{FrameColumn.DIM_PREFIX}{axis}"
