r"""
empstats.context
================
Explicit configuration shared by the statistics engine and the batch backends.

This module defines:

- :class:`NanPolicy`: how non-finite observations are treated on ingestion.
- :class:`DistributionContext`: a typed, validated configuration object.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any

import numpy as np

__all__ = ["NanPolicy", "DistributionContext", "ensure_context", "clean_sample"]


class NanPolicy(str, Enum):
    r"""
    Strategies for handling non-finite values in a sample.

    Attributes
    ----------
    propagate : str
        Keep NaNs and infinities; derived quantities may become non-finite.
    omit : str
        Drop non-finite observations before any computation.
    """

    propagate = "propagate"
    omit = "omit"


@dataclass(slots=True)
class DistributionContext:
    r"""
    Configuration for :class:`~empstats.empirical.EmpiricalDistribution`.

    Attributes
    ----------
    min_histogram_bins : int, default 10
        Lower bound on the number of equal-width histogram bins. Also the
        fallback when the Freedman-Diaconis width is zero or non-finite.
    max_histogram_bins : int, default 10_000
        Upper bound on the Freedman-Diaconis bin count. A single distant outlier
        otherwise inflates the range-to-width ratio without limit.
    outlier_z_threshold : float, default 3.0
        Observations with :math:`|z| > \text{threshold}` are flagged as outliers.
    nan_policy : {"propagate", "omit"}, default "propagate"
        If ``"omit"``, non-finite values are removed when data is set.
    kde_nr_of_support_points : int, default 512
        Grid size used by :meth:`~empstats.empirical.EmpiricalDistribution.estimate_kde_pdf`
        when none is given.
    kde_block_elements : int, default 1_000_000
        Upper bound on the number of kernel evaluations held in memory at once
        during kernel density estimation.

    Notes
    -----
    Treat the context as immutable; use :meth:`with_overrides` to derive a
    modified copy.

    Examples
    --------
    >>> ctx = DistributionContext(outlier_z_threshold=2.5, nan_policy="omit")
    >>> ctx.with_overrides(min_histogram_bins=20).min_histogram_bins
    20
    """

    min_histogram_bins: int = 10
    max_histogram_bins: int = 10_000
    outlier_z_threshold: float = 3.0
    nan_policy: NanPolicy = "propagate"
    kde_nr_of_support_points: int = 512
    kde_block_elements: int = 1_000_000

    def with_overrides(self, **changes) -> "DistributionContext":
        r"""
        Return a shallow copy with selected fields replaced.

        Parameters
        ----------
        **changes :
            Field overrides passed to :func:`dataclasses.replace`.

        Returns
        -------
        DistributionContext
        """
        return replace(self, **changes)

    def __post_init__(self) -> None:
        r"""
        Validate field ranges.

        Raises
        ------
        ValueError
            If any field is outside its allowed range.
        """
        if self.min_histogram_bins < 1:
            raise ValueError("min_histogram_bins must be >= 1")
        if self.max_histogram_bins < self.min_histogram_bins:
            raise ValueError("max_histogram_bins must be >= min_histogram_bins")
        if not self.outlier_z_threshold > 0.0:
            raise ValueError("outlier_z_threshold must be positive")
        if self.nan_policy not in ("propagate", "omit"):
            raise ValueError(f"Unknown nan_policy: {self.nan_policy}")
        if self.kde_nr_of_support_points < 2:
            raise ValueError("kde_nr_of_support_points must be >= 2")
        if self.kde_block_elements < 1:
            raise ValueError("kde_block_elements must be >= 1")


def ensure_context(ctx: Any) -> DistributionContext:
    r"""
    Normalize ``None``, a mapping, or a context into a :class:`DistributionContext`.

    Raises
    ------
    TypeError
        If ``ctx`` cannot be interpreted as configuration data.
    """
    if isinstance(ctx, DistributionContext):
        return ctx
    if ctx is None:
        return DistributionContext()
    if isinstance(ctx, dict):
        return DistributionContext(**ctx)
    raise TypeError("context must be a DistributionContext, dict, or None")


def clean_sample(x: Any, ctx: DistributionContext) -> np.ndarray:
    r"""
    Return a private ``float64`` copy of ``x`` filtered per :attr:`DistributionContext.nan_policy`.

    Parameters
    ----------
    x : array_like
        Raw sample. Multi-dimensional input is flattened.
    ctx : DistributionContext

    Returns
    -------
    ndarray
        A new array that never aliases the caller's buffer.
    """
    arr = np.array(x, dtype=float, copy=True).reshape(-1)
    if ctx.nan_policy == "omit":
        arr = arr[np.isfinite(arr)]
    return arr
