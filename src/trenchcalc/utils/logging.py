"""
Logging utility functions and decorators.

Provides execution-time logging for estimator entry points and a helper
for attaching structured context to a log line.
"""

import functools
import logging
import time
from typing import Any, Callable, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


def log_performance(
    log_level: int = logging.INFO,
    threshold_ms: Optional[float] = None,
) -> Callable[[Callable[..., T]], Callable[..., T]]:
    """
    Decorator to log function execution time.

    Args:
        log_level: Logging level to use
        threshold_ms: Only log if execution time exceeds this threshold (milliseconds)

    Returns:
        Decorated function with performance logging

    Example:
        @log_performance(threshold_ms=50)
        def compute(calc_input):
            ...
    """

    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> T:
            func_name = f"{func.__module__}.{func.__qualname__}"
            start_time = time.perf_counter()

            try:
                return func(*args, **kwargs)
            finally:
                duration_ms = (time.perf_counter() - start_time) * 1000

                if threshold_ms is None or duration_ms >= threshold_ms:
                    logger.log(
                        log_level,
                        f"{func_name} executed in {duration_ms:.2f}ms",
                        extra={"duration_ms": duration_ms, "function": func_name},
                    )

        return wrapper

    return decorator


def log_with_context(
    log_level: int,
    message: str,
    target: Optional[logging.Logger] = None,
    **context: Any,
) -> None:
    """
    Log a message with additional contextual information.

    Args:
        log_level: Logging level
        message: Log message
        target: Logger to emit on, this module's logger when omitted
        **context: Additional context to include in the log record

    Example:
        log_with_context(
            logging.INFO,
            "Estimate computed",
            bank_vol_cy=7.41,
            total_field_hrs=12.5,
        )
    """
    (target or logger).log(log_level, message, extra=context)
