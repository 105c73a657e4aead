"""
Error handling utilities for the Travel Bucket List planner.

This module provides decorators, helper functions, and custom exception
classes so storage and configuration failures are handled the same way
everywhere. The planner core itself never lets these escape to callers:
storage failures are logged and fall back to defaults.
"""

import functools
import traceback
from collections.abc import Callable
from typing import Any, TypeVar, cast

from loguru import logger
from tenacity import (
    RetryError,
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

F = TypeVar("F", bound=Callable[..., Any])
T = TypeVar("T")


class BucketListError(Exception):
    """Base exception class for all planner errors."""

    def __init__(self, message: str, original_error: Exception | None = None):
        """
        Initialize a BucketListError.

        Args:
            message: Error message
            original_error: The original exception that caused this error (optional)
        """
        self.original_error = original_error
        if original_error:
            message = f"{message} - Original error: {original_error!s}"
        super().__init__(message)


class StorageError(BucketListError):
    """Error raised when reading or writing persisted state fails."""

    def __init__(
        self, message: str, key: str, original_error: Exception | None = None
    ):
        """
        Initialize a StorageError.

        Args:
            message: Error message
            key: Storage key being read or written
            original_error: The original exception that caused this error (optional)
        """
        self.key = key
        full_message = f"Storage failure for '{key}': {message}"
        super().__init__(full_message, original_error)


def handle_errors(
    default_value: T | None = None, error_cls: type[Exception] = BucketListError
) -> Callable[[F], F]:
    """
    Decorator to catch and handle exceptions, logging them and
    optionally returning a default value.

    Args:
        default_value: Value to return if an exception occurs (optional)
        error_cls: Exception type to re-raise (default: BucketListError)

    Returns:
        Decorated function
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return func(*args, **kwargs)
            except Exception as e:
                func_name = func.__name__
                logger.error(f"Error in {func_name}: {e!s}")
                logger.debug(f"Traceback: {traceback.format_exc()}")

                if default_value is not None:
                    logger.info(f"Returning default value from {func_name}")
                    return default_value

                raise error_cls(str(e), original_error=e) from e

        return cast(F, wrapper)

    return decorator


def with_retry(
    max_attempts: int = 3,
    min_wait_seconds: float = 0.05,
    max_wait_seconds: float = 1.0,
    retry_exceptions: tuple = (OSError,),
) -> Callable[[F], F]:
    """
    Decorator to retry a function with exponential backoff when specific
    exceptions occur.

    Args:
        max_attempts: Maximum number of attempts
        min_wait_seconds: Minimum wait time between retries
        max_wait_seconds: Maximum wait time between retries
        retry_exceptions: Tuple of exception types to retry on

    Returns:
        Decorated function
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            @retry(
                retry=retry_if_exception_type(retry_exceptions),
                stop=stop_after_attempt(max_attempts),
                wait=wait_exponential(
                    multiplier=min_wait_seconds,
                    min=min_wait_seconds,
                    max=max_wait_seconds,
                ),
                reraise=False,
            )
            def retry_func() -> Any:
                return func(*args, **kwargs)

            try:
                return retry_func()
            except RetryError as e:
                func_name = func.__name__
                original_error = e.last_attempt.exception()
                logger.error(
                    f"All retry attempts failed for {func_name}: {original_error!s}"
                )
                raise BucketListError(
                    f"Function {func_name} failed after {max_attempts} attempts",
                    original_error=original_error,
                ) from e

        return cast(F, wrapper)

    return decorator


def safe_execute(
    func: Callable[..., T], *args: Any, default: T | None = None, **kwargs: Any
) -> T | None:
    """
    Execute a function safely, catching any exceptions and
    optionally returning a default value.

    Args:
        func: Function to execute
        *args: Positional arguments to pass to the function
        default: Default value to return if an exception occurs (optional)
        **kwargs: Keyword arguments to pass to the function

    Returns:
        Result of the function or default value if an exception occurs
    """
    try:
        return func(*args, **kwargs)
    except Exception as e:
        func_name = getattr(func, "__name__", str(func))
        logger.error(f"Error executing {func_name}: {e!s}")
        logger.debug(f"Traceback: {traceback.format_exc()}")
        return default
