from typing import Callable
import functools
import logging


def log_exceptions(func: Callable) -> Callable:
    """
    Decorator that logs exceptions with full traceback and re-raises them.

    Example:
    >>> from motionlab.utils.utilities import log_exceptions
    >>>
    >>> class MainWindow:
    ...
    ...     @log_exceptions
    ...     def _on_timer(self):
    ...         ...

    The exception is logged on the logger of the module that defines
    ``func`` and then propagates unchanged.
    """
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except Exception as e:
            logger = logging.getLogger(func.__module__)
            logger.error(
                f"Exception in {func.__name__}: {e}",
                exc_info=True
            )
            raise

    return wrapper


def clamp(value: float, low: float, high: float) -> float:
    """Limit value to the closed range [low, high]"""
    if value < low:
        return low
    if value > high:
        return high
    return value
