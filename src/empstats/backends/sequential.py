r"""
Sequential batch backend.

Analyses samples one after another on the calling thread with optional
progress reporting.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Sequence

if TYPE_CHECKING:
    from ..empirical import EmpiricalDistribution

__all__ = ["SequentialBackend"]


class SequentialBackend:
    r"""
    Sequential (single-threaded) batch backend.

    Suitable for small batches or debugging.

    Examples
    --------
    >>> backend = SequentialBackend()
    >>> results = backend.run([[1.0, 2.0, 3.0]], progress_callback=None)
    >>> results[0].median
    2.0
    """

    def run(
        self,
        samples: Sequence[Any],
        progress_callback: Callable[[int, int], None] | None,
        **distribution_kwargs: Any,
    ) -> list["EmpiricalDistribution"]:
        r"""
        Analyse samples sequentially on a single thread.

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
        """
        from ..empirical import EmpiricalDistribution  # pylint: disable=import-outside-toplevel

        total = len(samples)
        results = []
        for i, sample in enumerate(samples):
            results.append(EmpiricalDistribution(sample, **distribution_kwargs))
            if progress_callback:
                progress_callback(i + 1, total)
        return results
