r"""
Base classes and utilities for batch backends.

This module provides:

Protocol
    :class:`ExecutionBackend`: interface for batch analysis strategies

Functions
    :func:`make_blocks`: chunking helper for work distribution
    :func:`worker_analyse_chunk`: top-level worker for process-based parallelism

Helpers
    :func:`is_windows_platform`: platform detection for backend selection
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Any, Callable, Protocol, Sequence

if TYPE_CHECKING:
    from ..empirical import EmpiricalDistribution

__all__ = [
    "ExecutionBackend",
    "make_blocks",
    "worker_analyse_chunk",
    "is_windows_platform",
]


def is_windows_platform() -> bool:
    """Return True when running on a Windows platform."""
    return sys.platform.startswith("win") or (sys.platform == "cli")


def make_blocks(n: int, block_size: int = 10_000) -> list[tuple[int, int]]:
    r"""
    Partition an integer range :math:`[0, n)` into half-open blocks :math:`(i, j)`.

    Parameters
    ----------
    n : int
        Total number of items.
    block_size : int, default: 10_000
        Target block length.

    Returns
    -------
    list of tuple[int, int]
        List of ``(i, j)`` index pairs covering ``[0, n)``.

    Examples
    --------
    >>> make_blocks(5, block_size=2)
    [(0, 2), (2, 4), (4, 5)]
    """
    blocks = []
    i = 0
    while i < n:
        j = min(i + block_size, n)
        blocks.append((i, j))
        i = j
    return blocks


def worker_analyse_chunk(
    samples: Sequence[Any],
    distribution_kwargs: dict[str, Any],
) -> list["EmpiricalDistribution"]:
    r"""
    Analyse a slice of samples in a **separate worker**.

    Parameters
    ----------
    samples : sequence of array_like
        Raw samples; each becomes one :class:`~empstats.empirical.EmpiricalDistribution`.
    distribution_kwargs : dict
        Keyword arguments forwarded to the constructor. Must be pickleable
        when used with a process backend.

    Returns
    -------
    list of EmpiricalDistribution
        One analysed instance per sample, in input order.
    """
    from ..empirical import EmpiricalDistribution  # pylint: disable=import-outside-toplevel

    return [EmpiricalDistribution(sample, **distribution_kwargs) for sample in samples]


class ExecutionBackend(Protocol):
    r"""
    Protocol defining the interface for batch backends.

    Backends analyse many independent samples and return the results in
    input order. They handle the details of sequential vs parallel execution,
    thread vs process pools, and progress reporting. Each
    :class:`~empstats.empirical.EmpiricalDistribution` is created and
    analysed inside exactly one task.
    """

    def run(
        self,
        samples: Sequence[Any],
        progress_callback: Callable[[int, int], None] | None,
        **distribution_kwargs: Any,
    ) -> list["EmpiricalDistribution"]:
        r"""
        Analyse every sample and return the results.

        Parameters
        ----------
        samples : sequence of array_like
            Raw samples to analyse.
        progress_callback : callable or None
            Optional callback ``f(completed, total)`` for progress reporting.
        **distribution_kwargs : Any
            Keyword arguments passed to the
            :class:`~empstats.empirical.EmpiricalDistribution` constructor.

        Returns
        -------
        list of EmpiricalDistribution
            One analysed instance per sample, in input order.
        """
