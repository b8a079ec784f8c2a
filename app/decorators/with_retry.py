"""Tenacity retry policy for coroutines that offload work to a thread pool."""

from collections.abc import Awaitable, Callable
from logging import WARNING, getLogger
from typing import ParamSpec, TypeVar

from tenacity import (
    before_sleep_log,
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from app.configs import file_logger

logger = file_logger(getLogger(__name__))

P = ParamSpec("P")
T = TypeVar("T")

# Transient failures of the worker pool; bad input is never retried
RETRIABLE_EXCEPTIONS: tuple[type[Exception], ...] = (OSError, RuntimeError)


def with_retry(
    attempts: int = 3,
    base_delay: float = 0.1,
    max_delay: float = 2.0,
    retry_on: tuple[type[Exception], ...] = RETRIABLE_EXCEPTIONS,
) -> Callable[[Callable[P, Awaitable[T]]], Callable[P, Awaitable[T]]]:
    """
    Retry an async function with exponential backoff.

    The last exception is re-raised once ``attempts`` is exhausted.

    Args:
        attempts: Total number of calls, the first one included
        base_delay: First backoff in seconds
        max_delay: Backoff ceiling in seconds
        retry_on: Exception types that trigger another attempt

    Returns:
        Decorator applying the policy
    """
    return retry(
        stop=stop_after_attempt(attempts),
        wait=wait_exponential(multiplier=base_delay, min=base_delay, max=max_delay),
        retry=retry_if_exception_type(retry_on),
        before_sleep=before_sleep_log(logger, WARNING),
        reraise=True,
    )
