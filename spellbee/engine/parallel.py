"""
Chunked data-parallel filter/map over a process pool.

Every stage of the pipeline evaluates words independently, so a collection
can be cut into chunks, processed in worker processes, and merged. Small
collections are processed in-process: spawning workers costs more than
scanning a few thousand strings.

Callables handed to these helpers must be picklable (module-level functions
or functools.partial over them).
"""

from __future__ import annotations

import logging
import os
from concurrent.futures import ProcessPoolExecutor
from typing import Callable, Iterable, List, Optional, Sequence, TypeVar

T = TypeVar("T")
R = TypeVar("R")

logger = logging.getLogger(__name__)

CHUNKS_PER_WORKER = 4


def _chunks(items: Sequence[T], n: int) -> List[Sequence[T]]:
    size = max(1, -(-len(items) // n))  # ceil division
    return [items[i:i + size] for i in range(0, len(items), size)]


def _filter_chunk(predicate: Callable[[T], bool], chunk: Sequence[T]) -> List[T]:
    return [x for x in chunk if predicate(x)]


def _map_chunk(fn: Callable[[T], R], chunk: Sequence[T]) -> List[R]:
    return [fn(x) for x in chunk]


def _run(kernel, fn, items: Iterable[T], workers: Optional[int], threshold: int) -> List:
    items = list(items)
    if not items:
        return []
    n_workers = workers or os.cpu_count() or 1
    if n_workers <= 1 or len(items) < threshold:
        return kernel(fn, items)

    chunks = _chunks(items, n_workers * CHUNKS_PER_WORKER)
    logger.debug("parallel %s: %d items in %d chunks", kernel.__name__, len(items), len(chunks))
    out: List = []
    with ProcessPoolExecutor(max_workers=n_workers) as executor:
        for part in executor.map(kernel, [fn] * len(chunks), chunks):
            out.extend(part)
    return out


def parallel_filter(predicate: Callable[[T], bool], items: Iterable[T], *,
                    workers: Optional[int] = None, threshold: int = 20_000) -> List[T]:
    """
    Keep items for which `predicate(item)` is true.

    Output order follows input order (chunks are merged in submission order).
    `workers=None` sizes the pool to os.cpu_count(); `workers<=1` forces
    serial evaluation.
    """
    return _run(_filter_chunk, predicate, items, workers, threshold)


def parallel_map(fn: Callable[[T], R], items: Iterable[T], *,
                 workers: Optional[int] = None, threshold: int = 20_000) -> List[R]:
    """Apply `fn` to every item; same chunking rules as parallel_filter."""
    return _run(_map_chunk, fn, items, workers, threshold)
