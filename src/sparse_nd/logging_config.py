import logging
import sys
from typing import Optional, TextIO


PACKAGE_LOGGER = "sparse_nd"
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def setup_logging(level: int = logging.INFO, stream: Optional[TextIO] = None) -> logging.Logger:
    """
    Send sparse_nd log records to a stream.

    The library itself only emits debug records (type definition, clear, copy,
    move, bulk update), so this is mostly useful with level=logging.DEBUG.
    Calling it again replaces the handler installed by the previous call.

    Args:
        level: Logging level for the package logger.
        stream: Destination stream, stderr if None.

    Returns:
        The package logger.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    for handler in [h for h in logger.handlers if getattr(h, '_sparse_nd', False)]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._sparse_nd = True
    logger.addHandler(handler)
    return logger
