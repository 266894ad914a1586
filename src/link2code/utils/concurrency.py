"""Bounded thread pool helpers."""

from collections.abc import Callable, Sequence
from concurrent.futures import ThreadPoolExecutor
from contextvars import copy_context
from typing import TypeVar

T = TypeVar("T")


def run_in_order(tasks: Sequence[Callable[[], T]], *, max_workers: int) -> list[T]:
    """Run zero-argument tasks and return their results in task order.

    Runs inline when ``max_workers`` is 1 or there is a single task.
    Tasks are expected to handle their own errors; an exception raised by
    a task propagates to the caller.
    """
    if not tasks:
        return []
    if max_workers <= 1 or len(tasks) == 1:
        return [task() for task in tasks]

    with ThreadPoolExecutor(max_workers=min(max_workers, len(tasks))) as executor:
        futures = [executor.submit(copy_context().run, task) for task in tasks]
        return [future.result() for future in futures]
