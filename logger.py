# logger.py
"""Central logging configuration and call timing."""

import functools
import inspect
import logging
import time
from typing import Any, Callable, Optional

_DEFAULT_LEVEL = logging.INFO
_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-level logger with default configuration applied."""
    logger = logging.getLogger(name)
    if not logging.getLogger().handlers:
        logging.basicConfig(level=_DEFAULT_LEVEL, format=_FORMAT)
    return logger


def set_level(level: str) -> None:
    get_logger().setLevel(level.upper())


LOGGER = get_logger(__name__)


def log_time(func: Callable) -> Callable:
    """
    Log the wall time spent in the decorated call.

    Generator functions are timed until the generator is exhausted or closed,
    so a lazily consumed report is measured over its whole consumption.
    """
    if inspect.isgeneratorfunction(func):
        @functools.wraps(func)
        def gen_wrapper(*args: Any, **kwargs: Any):
            start = time.perf_counter()
            try:
                yield from func(*args, **kwargs)
            finally:
                LOGGER.info("%s took %.3f ms", func.__qualname__, (time.perf_counter() - start) * 1000)
        return gen_wrapper

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any):
        start = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            LOGGER.info("%s took %.3f ms", func.__qualname__, (time.perf_counter() - start) * 1000)
    return wrapper
