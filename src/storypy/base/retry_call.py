"""Retrying flaky rpc calls."""

from __future__ import annotations

import logging
import time
from typing import Callable, ParamSpec, TypeVar

P = ParamSpec("P")
R = TypeVar("R")

# Seconds before the first retry, doubled after every failed attempt
RETRY_SLEEP = 0.1


def retry_call(
    retry_count: int,
    retry_exception_check: Callable[[Exception], bool] | None,
    func: Callable[P, R],
    *args: P.args,
    **kwargs: P.kwargs,
) -> R:
    """Call a function, retrying with exponential backoff when it raises.

    Only used for rpc lookups that are safe to repeat, like nonces and log polls. Contract reads
    are never retried.

    Arguments
    ---------
    retry_count: int
        The total number of attempts. Must be > 0.
    retry_exception_check: Callable[[Exception], bool] | None
        Returns True for exceptions worth retrying; others are raised right away.
        If None, every exception is retried.
    func: Callable[P, R]
        The function to call.
    *args: P.args
        The positional arguments to call func with.
    **kwargs: P.kwargs
        The keyword arguments to call func with.

    Returns
    -------
    R
        The return value of the first successful call.
    """
    if retry_count <= 0:
        raise ValueError("retry_count must be greater than zero.")
    func_name = getattr(func, "__qualname__", repr(func))
    sleep_time = RETRY_SLEEP
    for attempt_number in range(1, retry_count + 1):
        try:
            return func(*args, **kwargs)
        # Catching general exception but throwing if fails
        except Exception as exc:  # pylint: disable=broad-exception-caught
            if retry_exception_check is not None and not retry_exception_check(exc):
                raise
            logging.warning(
                "Retry attempt %s out of %s: %s failed with %r", attempt_number, retry_count, func_name, exc
            )
            if attempt_number == retry_count:
                raise
            time.sleep(sleep_time)
            sleep_time *= 2
    raise AssertionError("unreachable")
