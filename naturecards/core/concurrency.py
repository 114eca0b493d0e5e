"""Helpers for issuing independent document store calls side by side."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable

from .constants import FETCH_MAX_WORKERS


def gather_settled(
    calls: list[Callable[[], Any]], max_workers: int = FETCH_MAX_WORKERS
) -> list[Any]:
    """Run every call and wait for all of them.

    Each slot of the result holds either the call's return value or the
    exception it raised, in the order the calls were given.
    """
    if not calls:
        return []

    workers = max(1, min(max_workers, len(calls)))
    with ThreadPoolExecutor(max_workers=workers) as executor:
        futures = [executor.submit(call) for call in calls]
        outcomes: list[Any] = []
        for future in futures:
            error = future.exception()
            outcomes.append(error if error is not None else future.result())
    return outcomes


def gather_all(
    calls: list[Callable[[], Any]], max_workers: int = FETCH_MAX_WORKERS
) -> list[Any]:
    """Run every call, wait for all of them, then raise the first failure."""
    outcomes = gather_settled(calls, max_workers=max_workers)
    for outcome in outcomes:
        if isinstance(outcome, BaseException):
            raise outcome
    return outcomes
