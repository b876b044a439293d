r"""
Parallel batch backends.

This module provides:

Classes
    :class:`ThreadBackend`: thread-based parallelism using ThreadPoolExecutor
    :class:`ProcessBackend`: process-based parallelism using ProcessPoolExecutor
"""

from __future__ import annotations

import logging
import multiprocessing as mp
from concurrent.futures import ProcessPoolExecutor, ThreadPoolExecutor, as_completed
from typing import TYPE_CHECKING, Any, Callable, Optional, Sequence

from .base import make_blocks, worker_analyse_chunk

if TYPE_CHECKING:
    from ..empirical import EmpiricalDistribution

logger = logging.getLogger(__name__)

__all__ = [
    "ThreadBackend",
    "ProcessBackend",
]

_CHUNKS_PER_WORKER = 4  # work chunks per worker for load balancing


def _check_workers(n_workers: int) -> None:
    if n_workers < 1:
        raise ValueError(f"n_workers must be >= 1, got {n_workers}")


class ThreadBackend:
    r"""
    Thread-based parallel batch backend.

    Uses :class:`concurrent.futures.ThreadPoolExecutor`. Effective because the
    sorting, binning and kernel sums run in NumPy, which releases the GIL.

    Parameters
    ----------
    n_workers : int
        Number of worker threads to use.
    chunks_per_worker : int, default 4
        Number of work chunks per worker for load balancing.

    Raises
    ------
    ValueError
        If ``n_workers`` is not positive.
    """

    def __init__(self, n_workers: int, chunks_per_worker: int = _CHUNKS_PER_WORKER):
        _check_workers(n_workers)
        self.n_workers = n_workers
        self.chunks_per_worker = chunks_per_worker

    def run(
        self,
        samples: Sequence[Any],
        progress_callback: Callable[[int, int], None] | None,
        **distribution_kwargs: Any,
    ) -> list["EmpiricalDistribution"]:
        r"""
        Analyse samples in parallel using threads.

        Parameters
        ----------
        samples : sequence of array_like
            Raw samples to analyse.
        progress_callback : callable or None
            Optional callback ``f(completed, total)`` for progress reporting.
        **distribution_kwargs : Any
            Keyword arguments passed to the ``EmpiricalDistribution`` constructor.

        Returns
        -------
        list of EmpiricalDistribution
            Results in input order regardless of completion order.
        """
        total = len(samples)
        blocks = _prepare_blocks(total, self.n_workers, self.chunks_per_worker)
        results: list[Optional["EmpiricalDistribution"]] = [None] * total
        if not blocks:
            return []
        completed = 0

        def _work(block):
            a, b = block
            return block, worker_analyse_chunk(samples[a:b], distribution_kwargs)

        with ThreadPoolExecutor(max_workers=min(self.n_workers, len(blocks))) as ex:
            futs = [ex.submit(_work, blk) for blk in blocks]
            for f in as_completed(futs):
                (i, j), chunk = f.result()
                results[i:j] = chunk
                completed += j - i
                if progress_callback:
                    progress_callback(completed, total)

        return results  # type: ignore[return-value]


class ProcessBackend:
    r"""
    Process-based parallel batch backend.

    Uses :class:`concurrent.futures.ProcessPoolExecutor` with the spawn
    context. The samples and constructor arguments must be pickleable; a
    custom ``translate`` callable must be a module-level function.

    Parameters
    ----------
    n_workers : int
        Number of worker processes to use.
    chunks_per_worker : int, default 4
        Number of work chunks per worker for load balancing.

    Raises
    ------
    ValueError
        If ``n_workers`` is not positive.
    """

    def __init__(self, n_workers: int, chunks_per_worker: int = _CHUNKS_PER_WORKER):
        _check_workers(n_workers)
        self.n_workers = n_workers
        self.chunks_per_worker = chunks_per_worker

    def run(
        self,
        samples: Sequence[Any],
        progress_callback: Callable[[int, int], None] | None,
        **distribution_kwargs: Any,
    ) -> list["EmpiricalDistribution"]:
        r"""
        Analyse samples in parallel using processes.

        Parameters
        ----------
        samples : sequence of array_like
            Raw samples to analyse. Must be pickleable.
        progress_callback : callable or None
            Optional callback ``f(completed, total)`` for progress reporting.
        **distribution_kwargs : Any
            Keyword arguments passed to the ``EmpiricalDistribution`` constructor.

        Returns
        -------
        list of EmpiricalDistribution
            Results in input order regardless of completion order.
        """
        total = len(samples)
        blocks = _prepare_blocks(total, self.n_workers, self.chunks_per_worker)
        results: list[Optional["EmpiricalDistribution"]] = [None] * total
        if not blocks:
            return []
        completed = 0

        with ProcessPoolExecutor(
            max_workers=min(self.n_workers, len(blocks)),
            mp_context=mp.get_context("spawn"),
        ) as ex:
            futs = []
            for i, j in blocks:
                f = ex.submit(worker_analyse_chunk, list(samples[i:j]), dict(distribution_kwargs))
                f.blk = (i, j)  # type: ignore[attr-defined]
                futs.append(f)
            try:
                for f in as_completed(futs):
                    i, j = f.blk  # type: ignore[attr-defined]
                    results[i:j] = f.result()
                    completed += j - i
                    if progress_callback:
                        progress_callback(completed, total)
            except KeyboardInterrupt:  # pragma: no cover
                for f in futs:
                    f.cancel()
                raise

        return results  # type: ignore[return-value]


def _prepare_blocks(total: int, n_workers: int, chunks_per_worker: int) -> list[tuple[int, int]]:
    block_size = max(1, total // (n_workers * chunks_per_worker))
    blocks = make_blocks(total, block_size)
    logger.debug(f"Split {total} samples into {len(blocks)} blocks")
    return blocks
