"""Thread pool helpers for translating many lines."""

from collections.abc import Callable, Iterable, Iterator
from concurrent.futures import ThreadPoolExecutor
from typing import TypeVar


T = TypeVar("T")
R = TypeVar("R")


def map_parallel_ordered(
    func: Callable[[T], R],
    items: Iterable[T],
    max_workers: int = 4,
) -> Iterator[R]:
    """
    Apply func to every item on a thread pool.

    A single worker runs inline without starting a pool.

    Args:
        func: Callable applied to each item
        items: Inputs
        max_workers: Pool size

    Yields:
        One result per item, in input order
    """
    if max_workers > 1:
        with ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="romanizer") as pool:
            yield from pool.map(func, items)
    else:
        for item in items:
            yield func(item)
