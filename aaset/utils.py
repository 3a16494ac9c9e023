import contextlib
import logging
from typing import Optional

from .settings import settings


def setup_logging(level: Optional[str] = None) -> None:
    if level is None:
        level = settings().log_level
    logging.basicConfig(
        format="%(asctime)-15s %(levelname)-8s %(name)s || %(message)s",
        level=level.upper(),
    )


@contextlib.contextmanager
def change_log_level(logger, new_level):
    """Context manager to temporarily change the logging level of a logger."""
    if isinstance(logger, str):
        logger = logging.getLogger(logger)

    if isinstance(new_level, str):
        new_level = getattr(logging, new_level.upper())

    saved_logger_level = logger.level
    try:
        logger.setLevel(new_level)
        yield
    finally:
        logger.setLevel(saved_logger_level)
