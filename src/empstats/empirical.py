r"""
empstats.empirical
==================
Empirical distribution of a fixed, in-memory sample.

This module defines:

- :class:`Histogram`: an immutable snapshot of a binned sample.
- :class:`EmpiricalDistribution`: the engine that turns a raw sample into its
  sorted order, cumulative distribution, percentile table, moments, histogram
  and kernel density estimate.

Every call to :meth:`EmpiricalDistribution.set_data` runs one full analysis
pass; there is no incremental update. An empty sample leaves the engine in a
cleared state where scalars are ``0.0`` and arrays are empty.

Notes
-----
Undefined statistics are reported as ``NaN`` rather than silently wrong values:

- variance and standard deviation are ``0.0`` for :math:`N < 2`;
- skewness, its confidence bounds and :math:`z`-statistic need :math:`N \ge 3`
  and a non-zero variance;
- kurtosis and its :math:`z`-statistic need :math:`N \ge 4` and a non-zero variance.

See Also
--------
empstats.comparator
    Paired-error metrics and the two-sample Kolmogorov-Smirnov test.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, Optional, Sequence

import numpy as np
from scipy.stats import kurtosis as sp_kurtosis
from scipy.stats import skew as sp_skew

from .backends.base import make_blocks
from .chi_square import get_chi_square
from .containers import FunctionTable
from .context import DistributionContext, clean_sample, ensure_context
from .labels import Translator, default_translator
from .mathtools import KernelType, clip, find_extrema, get_kernel, search_array_bounds

logger = logging.getLogger(__name__)
if not logger.handlers:
    handler = logging.StreamHandler()
    formatter = logging.Formatter("%(asctime)s - %(levelname)s - %(message)s")
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)


PERCENTILE_RESOLUTION = 1000  # table steps of 0.1 percentile

# Silverman rule-of-thumb constants per kernel
_BANDWIDTH_CONSTANTS = {
    KernelType.rectangular: 1.0,
    KernelType.triangular: 1.0,
    KernelType.epanechnikov: 2.34,
    KernelType.quartic: 2.78,
    KernelType.gaussian: 1.06,
    KernelType.lanczos: 1.0,
}

_SUMMARY_KEYS = (
    "n",
    "mean",
    "standard_deviation",
    "variance",
    "median",
    "interquartile_range",
    "minimum",
    "maximum",
    "skewness",
    "kurtosis",
    "jarque_bera",
    "outliers",
)


def _read_only(arr: np.ndarray) -> np.ndarray:
    arr.flags.writeable = False
    return arr


def _empty() -> np.ndarray:
    return _read_only(np.empty(0, dtype=float))


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


@dataclass(frozen=True)
class Histogram:
    r"""
    Binned view of a sample.

    Attributes
    ----------
    counts : ndarray of int
        Number of observations per bin; sums to :math:`N`.
    frequencies : ndarray of float
        ``counts / N``; sums to one.
    centres : ndarray of float
        Bin centres. With explicit right edges the first bin is unbounded on
        the left and its centre is ``-inf``.
    right_edges : ndarray of float
        Right edge of every bin, ascending.
    bin_width : float
        Common width of equal-width bins, ``0.0`` for explicit edges.
    """

    counts: np.ndarray
    frequencies: np.ndarray
    centres: np.ndarray
    right_edges: np.ndarray
    bin_width: float

    @property
    def nr_of_bins(self) -> int:
        return int(self.counts.size)


def count_histogram_bins(sorted_values: np.ndarray, right_edges: np.ndarray) -> np.ndarray:
    r"""
    Count ascending values into bins delimited by ascending right edges.

    A value lands in the first bin whose right edge is strictly greater than
    it; values at or beyond the last edge land in the last bin.

    Parameters
    ----------
    sorted_values : ndarray
        Values in ascending order.
    right_edges : ndarray
        Bin right edges in ascending order (duplicates allowed).

    Returns
    -------
    ndarray of int
        Per-bin counts, length ``right_edges.size``.
    """
    nr_of_bins = int(right_edges.size)
    idx = np.searchsorted(right_edges, sorted_values, side="right")
    np.minimum(idx, nr_of_bins - 1, out=idx)
    return np.bincount(idx, minlength=nr_of_bins)


def freedman_diaconis_bins(
    x_range: float,
    interquartile_range: float,
    n: int,
    min_bins: int,
    max_bins: Optional[int] = None,
) -> int:
    r"""
    Number of equal-width bins from the Freedman-Diaconis rule.

    .. math::
       h = \frac{2\,\mathrm{IQR}}{N^{1/3}}, \qquad B = \operatorname{round}\!\left(\frac{x_{\max}-x_{\min}}{h}\right)

    The result is never below ``min_bins``; a zero or non-finite width (for
    instance :math:`\mathrm{IQR} = 0`) yields ``min_bins``. If ``max_bins`` is
    given, larger counts are capped to it.
    """
    width = (2.0 * interquartile_range) / np.cbrt(n)
    if not np.isfinite(width) or width <= 0.0:
        return min_bins
    ratio = x_range / width
    if not np.isfinite(ratio):
        return min_bins
    if max_bins is not None and ratio > max_bins:
        logger.debug(f"Freedman-Diaconis asks for {ratio:.6g} bins; capped at {max_bins}")
        return max(max_bins, min_bins)
    return max(_round_half_up(ratio), min_bins)


class EmpiricalDistribution:
    r"""
    Empirical CDF, percentiles, histogram/KDE density and moments of a sample.

    Parameters
    ----------
    data : array_like, optional
        Raw sample. Deep-copied; the caller's buffer is never aliased.
    histogram_bins : int, optional
        Fixed number of equal-width histogram bins. If neither this nor
        ``histogram_bin_right_edges`` is given, the Freedman-Diaconis rule
        selects the bin count.
    histogram_bin_right_edges : array_like, optional
        Explicit (variable-width) bin right edges; sorted ascending on use.
    context : DistributionContext or dict, optional
        Engine configuration; see :class:`~empstats.context.DistributionContext`.
    translate : callable, optional
        ``translate(key) -> str`` used for descriptive labels. Defaults to
        :func:`~empstats.labels.default_translator`.

    Notes
    -----
    The CDF is stored over the **sorted** sample using the product-limit
    (Kaplan-Meier) estimator without censoring, giving
    :math:`F_0 = 0`, :math:`F_i = i/N` and :math:`F_{N-1} = 1`.

    Percentiles use the rank convention :math:`r = \tfrac{p}{100}(N-1)+1` with
    linear interpolation between neighbouring order statistics and are
    tabulated in steps of 0.1.

    An instance is not safe for concurrent use; confine each one to a single
    task.

    Examples
    --------
    >>> ed = EmpiricalDistribution([3.0, 1.0, 2.0, 4.0])
    >>> ed.median
    2.5
    >>> ed.get_percentile(0), ed.get_percentile(100)
    (1.0, 4.0)
    """

    def __init__(
        self,
        data: Optional[Sequence[float] | np.ndarray] = None,
        histogram_bins: Optional[int] = None,
        histogram_bin_right_edges: Optional[Sequence[float] | np.ndarray] = None,
        *,
        context: Optional[DistributionContext | dict[str, Any]] = None,
        translate: Optional[Translator] = None,
    ):
        self.context = ensure_context(context)
        self.translate: Translator = translate or default_translator
        self.set_data(data, histogram_bins, histogram_bin_right_edges)

    # ------------------------------------------------------------------
    # lifecycle
    # ------------------------------------------------------------------

    def set_data(
        self,
        data: Optional[Sequence[float] | np.ndarray],
        histogram_bins: Optional[int] = None,
        histogram_bin_right_edges: Optional[Sequence[float] | np.ndarray] = None,
    ) -> None:
        r"""
        Replace the sample and run a full analysis.

        Parameters
        ----------
        data : array_like or None
            Raw sample. ``None`` or an empty sample leaves the cleared state.
        histogram_bins : int, optional
            Fixed bin count. Values below one are raised to one. Unlike the
            Freedman-Diaconis count, a requested count is not raised to
            :attr:`DistributionContext.min_histogram_bins`.
        histogram_bin_right_edges : array_like, optional
            Explicit bin right edges.

        Raises
        ------
        ValueError
            If both ``histogram_bins`` and ``histogram_bin_right_edges`` are given.
        """
        if histogram_bins is not None and histogram_bin_right_edges is not None:
            raise ValueError("give either histogram_bins or histogram_bin_right_edges, not both")

        self.clear()
        if data is not None:
            self._x = _read_only(clean_sample(data, self.context))

        edges = None
        if histogram_bin_right_edges is not None:
            edges = np.sort(np.array(histogram_bin_right_edges, dtype=float).reshape(-1))
            if edges.size == 0:
                edges = None
        self._explicit_edges = None if edges is None else _read_only(edges)
        self._use_optimal_bins = histogram_bins is None and self._explicit_edges is None
        self._requested_bins = 0 if histogram_bins is None else max(1, int(histogram_bins))

        self.analyse()

    def clear(self) -> None:
        """Reset every derived quantity to its zero sentinel."""
        self._x = _empty()
        self._x_sorted = _empty()
        self._cdf = _empty()
        self._percentiles = _empty()
        self._x_min = 0.0
        self._x_max = 0.0
        self._x_range = 0.0
        self._median = 0.0
        self._iqr = 0.0
        self._mean = 0.0
        self._variance = 0.0
        self._std = 0.0
        self._skewness = 0.0
        self._skewness_bounds = 0.0
        self._skewness_z = 0.0
        self._kurtosis = 0.0
        self._kurtosis_z = 0.0
        self._z_scores = _empty()
        self._outliers = _read_only(np.empty(0, dtype=bool))
        self._use_optimal_bins = False
        self._requested_bins = 0
        self._explicit_edges: Optional[np.ndarray] = None
        self._histogram: Optional[Histogram] = None
        self._clear_kde()

    def _clear_kde(self) -> None:
        self._kde_pdf: Optional[FunctionTable] = None
        self._kde_pdf_modes: Optional[FunctionTable] = None
        self._kde_x_min = 0.0
        self._kde_x_max = 0.0
        self._kde_x_range = 0.0

    def analyse(self) -> None:
        r"""
        Estimate sort order, CDF, percentiles, moments and the histogram PDF.

        Does nothing when no data is loaded.
        """
        n = int(self._x.size)
        if n == 0:
            logger.debug("No data loaded; distribution stays cleared")
            return

        self._x_sorted = _read_only(np.sort(self._x, kind="stable"))
        self._x_min = float(self._x_sorted[0])
        self._x_max = float(self._x_sorted[-1])
        self._x_range = self._x_max - self._x_min

        # product-limit estimate of the survivor function, one event per observation
        at_risk = n - np.arange(n, dtype=float)
        survivor = np.cumprod(1.0 - (1.0 / at_risk))
        cdf = np.empty(n, dtype=float)
        cdf[1 : n - 1] = 1.0 - survivor[: n - 2]
        cdf[0] = 0.0
        cdf[n - 1] = 1.0
        self._cdf = _read_only(cdf)

        self._percentiles = _read_only(self._percentile_table(self._x_sorted))

        self._estimate_statistics()
        self._estimate_pdf()
        logger.debug(f"Analysed {n} values into {self.nr_of_histogram_bins} histogram bins")

    @staticmethod
    def _percentile_table(x_sorted: np.ndarray) -> np.ndarray:
        n = x_sorted.size
        rank = (np.arange(PERCENTILE_RESOLUTION + 1) / PERCENTILE_RESOLUTION) * (n - 1.0) + 1.0
        k = np.floor(rank).astype(int)
        d = rank - k
        lower = x_sorted[np.clip(k - 1, 0, n - 1)]
        upper = x_sorted[np.clip(k, 0, n - 1)]
        with np.errstate(invalid="ignore"):
            table = lower + d * (upper - lower)
        table[rank <= 1.0] = x_sorted[0]
        table[rank >= n] = x_sorted[n - 1]
        return table

    def _estimate_statistics(self) -> None:
        x = self._x
        n = x.size

        self._median = self.get_percentile(50)
        self._iqr = self.get_percentile(75) - self.get_percentile(25)

        if self._x_min == self._x_max:
            # constant sample: exact mean, exactly zero spread
            self._mean = self._x_min
            self._variance = 0.0
        else:
            self._mean = float(np.mean(x))
            self._variance = float(np.var(x, ddof=1)) if n > 1 else 0.0
        self._std = math.sqrt(self._variance) if self._variance >= 0.0 else float("nan")

        nan = float("nan")
        spread = self._variance > 0.0

        if n > 2:
            ses = math.sqrt((6.0 * n * (n - 1.0)) / ((n - 2.0) * (n + 1.0) * (n + 3.0)))
            self._skewness = float(sp_skew(x, bias=False)) if spread else nan  # type: ignore[arg-type]
            self._skewness_bounds = 2.0 * ses
            self._skewness_z = self._skewness / ses
        else:
            ses = nan
            self._skewness = self._skewness_bounds = self._skewness_z = nan

        if n > 3:
            sek = 2.0 * ses * math.sqrt((n * n - 1.0) / ((n - 3.0) * (n + 5.0)))
            self._kurtosis = (
                float(sp_kurtosis(x, fisher=True, bias=False)) if spread else nan  # type: ignore[arg-type]
            )
            self._kurtosis_z = self._kurtosis / sek
        else:
            self._kurtosis = self._kurtosis_z = nan

        if self._std > 0.0:
            z = (x - self._mean) / self._std
        else:
            z = np.zeros(n, dtype=float)
        self._z_scores = _read_only(z)
        self._outliers = _read_only(np.abs(z) > self.context.outlier_z_threshold)

    def _estimate_pdf(self) -> None:
        n = self._x.size
        if self._explicit_edges is None:
            if self._use_optimal_bins:
                nr_of_bins = freedman_diaconis_bins(
                    self._x_range,
                    self._iqr,
                    n,
                    self.context.min_histogram_bins,
                    self.context.max_histogram_bins,
                )
            else:
                nr_of_bins = self._requested_bins
            width = self._x_range / nr_of_bins
            right_edges = self._x_min + np.arange(1, nr_of_bins + 1, dtype=float) * width
            centres = right_edges - (width / 2.0)
        else:
            right_edges = self._explicit_edges.copy()
            nr_of_bins = right_edges.size
            width = 0.0
            centres = np.empty(nr_of_bins, dtype=float)
            centres[0] = -np.inf
            centres[1:] = (right_edges[:-1] + right_edges[1:]) / 2.0

        counts = count_histogram_bins(self._x_sorted, right_edges)
        self._histogram = Histogram(
            counts=_read_only(counts),
            frequencies=_read_only(counts / float(n)),
            centres=_read_only(centres),
            right_edges=_read_only(right_edges),
            bin_width=float(width),
        )

    def recalculate_pdf(self, histogram_bins: Optional[int] = None) -> None:
        r"""
        Rebuild only the histogram with equal-width bins.

        Parameters
        ----------
        histogram_bins : int, optional
            Fixed bin count. If ``None``, the Freedman-Diaconis rule is applied.

        Notes
        -----
        Percentiles, moments, CDF and any KDE are left untouched. Explicit
        right edges given to :meth:`set_data` are discarded.
        """
        self._explicit_edges = None
        self._use_optimal_bins = histogram_bins is None
        self._requested_bins = 0 if histogram_bins is None else max(1, int(histogram_bins))
        if self.n == 0:
            return
        self._estimate_pdf()

    # ------------------------------------------------------------------
    # lookups
    # ------------------------------------------------------------------

    def get_percentile(self, percentile: float) -> float:
        r"""
        Percentile from the precomputed table.

        Parameters
        ----------
        percentile : int or float
            Requested percentile in :math:`[0, 100]`; out-of-range values are
            clamped. Resolved to the nearest 0.1 step.

        Returns
        -------
        float
            ``0.0`` in the cleared state.
        """
        if self._percentiles.size == 0:
            return 0.0
        scaled = float(percentile) * (PERCENTILE_RESOLUTION / 100.0)
        if math.isnan(scaled):
            return float("nan")
        index = _round_half_up(clip(scaled, 0.0, float(PERCENTILE_RESOLUTION)))
        return float(self._percentiles[index])

    def get_cdf(self, x: float) -> float:
        r"""
        Cumulative distribution function at ``x``.

        Linearly interpolates the stored CDF between the bracketing order
        statistics; ``0.0`` below the minimum and ``1.0`` at or above the
        maximum.
        """
        if self.n == 0 or x < self._x_min:
            return 0.0

        bounds = search_array_bounds(self._x_sorted, x)
        x_lower = self._x_sorted[bounds.lower]
        x_range = self._x_sorted[bounds.upper] - x_lower
        fraction = (x - x_lower) / x_range if x_range != 0.0 else 0.0
        cdf_lower = self._cdf[bounds.lower]
        return float(cdf_lower + fraction * (self._cdf[bounds.upper] - cdf_lower))

    def get_pdf(self, x: float) -> float:
        r"""
        Histogram-based density at ``x``.

        Linearly interpolates the bin frequencies between bin centres. Below
        the first centre the curve ramps up from :math:`(x_{\min}, 0)`, above
        the last centre it ramps down to :math:`(x_{\max}, 0)`. With explicit
        bin edges the first (unbounded) bin is flat up to its right edge.
        For a constant sample the frequency of the bin holding it is returned
        at that value.

        Returns
        -------
        float
            Non-negative density; ``0.0`` outside :math:`[x_{\min}, x_{\max}]`.
        """
        hist = self._histogram
        if hist is None or not (self._x_min <= x <= self._x_max):
            return 0.0
        if self._x_range == 0.0:
            return float(np.max(hist.frequencies))

        centres = hist.centres
        frequencies = hist.frequencies
        last = hist.nr_of_bins - 1

        if np.isneginf(centres[0]):
            if x <= hist.right_edges[0]:
                return max(float(frequencies[0]), 0.0)
            centres = centres.copy()
            centres[0] = hist.right_edges[0]

        if x <= centres[0]:
            x1, y1, x2, y2 = self._x_min, 0.0, centres[0], frequencies[0]
            if x1 == x2:
                return max(float(y2), 0.0)
        elif x >= centres[last]:
            x1, y1, x2, y2 = centres[last], frequencies[last], self._x_max, 0.0
            if x1 == x2:
                return max(float(y1), 0.0)
        else:
            bounds = search_array_bounds(centres, x)
            x1, y1 = centres[bounds.lower], frequencies[bounds.lower]
            x2, y2 = centres[bounds.upper], frequencies[bounds.upper]
            if x1 == x2:
                return max(float(y1), 0.0)

        pdf = y1 + (x - x1) * ((y2 - y1) / (x2 - x1))
        # fail-safe for negative densities
        return max(float(pdf), 0.0)

    def get_kde_pdf(self, x: float) -> float:
        r"""
        Kernel density estimate at ``x``.

        Requires a prior call to :meth:`estimate_kde_pdf`. Returns ``0.0``
        outside the KDE support or when no estimate is available.
        """
        kde = self._kde_pdf
        if kde is None or not (self._kde_x_min <= x <= self._kde_x_max):
            return 0.0

        bounds = search_array_bounds(kde.x, x)
        x1, y1 = kde.x[bounds.lower], kde.y[bounds.lower]
        x2, y2 = kde.x[bounds.upper], kde.y[bounds.upper]
        pdf = y1 if x1 == x2 else y1 + (x - x1) * ((y2 - y1) / (x2 - x1))
        return max(float(pdf), 0.0)

    # ------------------------------------------------------------------
    # kernel density estimation
    # ------------------------------------------------------------------

    def calculate_kde_pdf_bandwidth(self, kernel_type: KernelType | str) -> float:
        r"""
        Silverman rule-of-thumb bandwidth :math:`h = s\,C_K\,N^{-1/5}`.

        :math:`C_K` is 1.06 for the Gaussian kernel, 2.34 for Epanechnikov,
        2.78 for quartic and 1.0 for the remaining kernels.

        Returns
        -------
        float
            ``0.0`` in the cleared state or for a constant sample.
        """
        if self.n == 0:
            return 0.0
        constant = _BANDWIDTH_CONSTANTS[KernelType(kernel_type)]
        return self._std * constant * math.pow(self.n, -1.0 / 5.0)

    def estimate_kde_pdf(
        self,
        kernel_type: KernelType | str = KernelType.gaussian,
        bandwidth: Optional[float] = None,
        nr_of_support_points: Optional[int] = None,
        min_support: Optional[float] = None,
        max_support: Optional[float] = None,
    ) -> Optional[FunctionTable]:
        r"""
        Estimate the density with a kernel density estimator.

        .. math::
           \hat f(x_k) = \frac{1}{N h} \sum_{i=1}^{N} K\!\left(\frac{x_k - x_i}{h}\right)

        evaluated on ``nr_of_support_points`` evenly spaced points of
        :math:`[\text{min\_support}, \text{max\_support}]`. The modes (local
        maxima) of the curve are stored in :attr:`kde_pdf_modes`.

        Parameters
        ----------
        kernel_type : KernelType or str, default "gaussian"
        bandwidth : float, optional
            Kernel bandwidth :math:`h`; Silverman's rule when omitted.
        nr_of_support_points : int, optional
            Defaults to :attr:`DistributionContext.kde_nr_of_support_points`.
        min_support, max_support : float, optional
            Support bounds; default to the observed data range.

        Returns
        -------
        FunctionTable or None
            The KDE curve, or ``None`` when no data is loaded or the sample has
            zero variance and no ``bandwidth`` is given.

        Raises
        ------
        ValueError
            If an explicit bandwidth is not positive, fewer than two support points are
            requested, or ``max_support < min_support``.
        """
        if self.n == 0:
            logger.debug("No data loaded; skipping kernel density estimation")
            return None

        kernel = KernelType(kernel_type)
        if bandwidth is None:
            bandwidth = self.calculate_kde_pdf_bandwidth(kernel)
            if not bandwidth > 0.0:
                logger.warning(
                    f"Silverman bandwidth is {bandwidth} for a sample without spread; "
                    "pass an explicit bandwidth to estimate its density"
                )
                self._clear_kde()
                return None
        if not bandwidth > 0.0:
            raise ValueError(f"bandwidth must be positive, got {bandwidth}")
        if nr_of_support_points is None:
            nr_of_support_points = self.context.kde_nr_of_support_points
        if nr_of_support_points < 2:
            raise ValueError("nr_of_support_points must be >= 2")
        min_support = self._x_min if min_support is None else float(min_support)
        max_support = self._x_max if max_support is None else float(max_support)
        if max_support < min_support:
            raise ValueError("max_support must not be smaller than min_support")

        n = self.n
        m = int(nr_of_support_points)
        x_range = max_support - min_support
        xk = np.linspace(min_support, max_support, m)
        yk = np.empty(m, dtype=float)

        block_size = max(1, self.context.kde_block_elements // n)
        for i, j in make_blocks(m, block_size):
            u = (xk[i:j, None] - self._x[None, :]) / bandwidth
            yk[i:j] = get_kernel(u, kernel).sum(axis=1)
        yk /= n * bandwidth

        self._kde_x_min = min_support
        self._kde_x_max = max_support
        self._kde_x_range = x_range
        self._kde_pdf = FunctionTable(xk, yk)

        maxima = find_extrema(yk).local_maxima
        self._kde_pdf_modes = FunctionTable([xk[e.index] for e in maxima], [e.value for e in maxima])
        logger.debug(
            f"KDE ({kernel.value}, h={bandwidth:.6g}) over {m} points found {len(maxima)} mode(s)"
        )
        return self._kde_pdf

    # ------------------------------------------------------------------
    # tests and interpretation
    # ------------------------------------------------------------------

    def trimmed_mean(self, proportion_to_trim: float) -> float:
        r"""
        Mean after discarding a share of the sorted sample at both ends.

        Parameters
        ----------
        proportion_to_trim : float
            Total share to discard in :math:`[0, 1]` (clipped); half of it is
            cut from each end, without interpolation.

        Returns
        -------
        float
            The trimmed mean; the median when nothing would remain, ``0.0`` in
            the cleared state.
        """
        n = self.n
        if n == 0:
            return 0.0
        cut = int(clip(float(proportion_to_trim), 0.0, 1.0) / 2.0 * n)
        low, high = cut, n - cut
        if high <= low:
            return self._median
        return float(np.mean(self._x_sorted[low:high]))

    def jarque_bera_test_statistic(self) -> float:
        r"""
        Jarque-Bera statistic :math:`JB = N\left(\frac{S^2}{6} + \frac{K^2}{24}\right)`.

        Compare against the chi-square distribution with 2 degrees of freedom;
        ``NaN`` when skewness or kurtosis is undefined.
        """
        if self.n == 0:
            return 0.0
        return self.n * ((self._skewness**2 / 6.0) + (self._kurtosis**2 / 24.0))

    def is_jarque_bera_test_accepted(self, alpha: float = 0.05) -> bool:
        r"""
        Whether normality is accepted at level ``alpha``.

        Accepted when :math:`JB \le \chi^2_{\alpha,2}`; see
        :func:`~empstats.chi_square.get_chi_square` for the tabulated levels.
        A ``NaN`` statistic is never accepted.
        """
        statistic = self.jarque_bera_test_statistic()
        return bool(statistic <= get_chi_square(alpha, 2))

    def description(self, quantity: str) -> str:
        """Translated label of a summary quantity, e.g. ``description("median")``."""
        return self.translate(f"statistics.{quantity}")

    def skewness_interpretation(self) -> str:
        r"""
        Qualitative reading of the skewness.

        Inconclusive while :math:`|Z| \le 2` (or undefined); otherwise
        approximately symmetric for :math:`|S| \le 0.5`, moderately skewed up
        to :math:`|S| = 1` and highly skewed beyond, on the side of the longer tail.
        """
        z, s = self._skewness_z, self._skewness
        if math.isnan(z) or -2.0 <= z <= 2.0:
            key = "inconclusive"
        elif abs(s) <= 0.5:
            key = "symmetric"
        elif s > 1.0:
            key = "highly_right_tailed"
        elif s > 0.5:
            key = "moderately_right_tailed"
        elif s < -1.0:
            key = "highly_left_tailed"
        else:
            key = "moderately_left_tailed"
        return self.translate(f"statistics.skewness.{key}")

    def kurtosis_interpretation(self) -> str:
        r"""
        Qualitative reading of the excess kurtosis.

        Inconclusive while :math:`|Z| \le 2` (or undefined); mesokurtic for
        :math:`|K| < 1`; otherwise leptokurtic for :math:`Z > 2` and
        platykurtic for :math:`Z < -2`.
        """
        z, k = self._kurtosis_z, self._kurtosis
        if math.isnan(z) or -2.0 <= z <= 2.0:
            key = "inconclusive"
        elif abs(k) < 1.0:
            key = "mesokurtic"
        elif z > 2.0:
            key = "leptokurtic"
        else:
            key = "platykurtic"
        return self.translate(f"statistics.kurtosis.{key}")

    def summary(self) -> dict[str, float]:
        r"""
        Scalar results keyed by quantity name.

        Returns
        -------
        dict
            Keys ``n``, ``mean``, ``standard_deviation``, ``variance``,
            ``median``, ``interquartile_range``, ``minimum``, ``maximum``,
            ``skewness``, ``kurtosis``, ``jarque_bera`` and ``outliers`` (count).
        """
        values = (
            self.n,
            self._mean,
            self._std,
            self._variance,
            self._median,
            self._iqr,
            self._x_min,
            self._x_max,
            self._skewness,
            self._kurtosis,
            self.jarque_bera_test_statistic(),
            int(np.count_nonzero(self._outliers)),
        )
        return dict(zip(_SUMMARY_KEYS, values))

    def to_string(self) -> str:
        """Multi-line, labelled report of :meth:`summary` and the shape interpretation."""
        lines = ["=" * 20 + " DISTRIBUTION " + "=" * 20]
        for key, value in self.summary().items():
            label = self.description(key)
            if isinstance(value, int):
                lines.append(f"  {label}: {value}")
            else:
                lines.append(f"  {label}: {value:.5f}")
        if self.n > 0:
            lines.append(f"  {self.description('skewness')}: {self.skewness_interpretation()}")
            lines.append(f"  {self.description('kurtosis')}: {self.kurtosis_interpretation()}")
        lines.append("=" * 20 + " END " + "=" * 20)
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(n={self.n}, mean={self._mean:.6g}, std={self._std:.6g})"

    # ------------------------------------------------------------------
    # read-only views
    # ------------------------------------------------------------------

    @property
    def n(self) -> int:
        return int(self._x.size)

    @property
    def ready(self) -> bool:
        """True once a non-empty sample has been analysed."""
        return self.n > 0

    @property
    def data(self) -> np.ndarray:
        """The sample in input order (read-only)."""
        return self._x

    @property
    def sorted_data(self) -> np.ndarray:
        return self._x_sorted

    @property
    def cdf(self) -> np.ndarray:
        """CDF values aligned with :attr:`sorted_data`."""
        return self._cdf

    @property
    def percentiles(self) -> np.ndarray:
        """The 1001 percentiles for 0.0, 0.1, ..., 100.0."""
        return self._percentiles

    @property
    def x_min(self) -> float:
        return self._x_min

    @property
    def x_max(self) -> float:
        return self._x_max

    @property
    def x_range(self) -> float:
        return self._x_range

    @property
    def median(self) -> float:
        return self._median

    @property
    def interquartile_range(self) -> float:
        return self._iqr

    @property
    def expected_value(self) -> float:
        return self._mean

    @property
    def mean(self) -> float:
        """Sample mean, the estimate of the expected value."""
        return self._mean

    @property
    def variance(self) -> float:
        """Unbiased sample variance (``N - 1`` denominator)."""
        return self._variance

    @property
    def standard_deviation(self) -> float:
        return self._std

    @property
    def skewness(self) -> float:
        """Bias-corrected sample skewness :math:`G_1`."""
        return self._skewness

    @property
    def skewness_confidence_bounds(self) -> float:
        """Symmetric 95% bounds, twice the standard error of skewness."""
        return self._skewness_bounds

    @property
    def skewness_z_statistic(self) -> float:
        return self._skewness_z

    @property
    def kurtosis(self) -> float:
        """Bias-corrected sample excess kurtosis :math:`G_2`."""
        return self._kurtosis

    @property
    def kurtosis_z_statistic(self) -> float:
        return self._kurtosis_z

    @property
    def z_scores(self) -> np.ndarray:
        """Per-observation :math:`(x_i - \\bar x)/s` in input order; zeros for a constant sample."""
        return self._z_scores

    @property
    def outliers(self) -> np.ndarray:
        """Boolean mask of observations with :math:`|z|` above the context threshold."""
        return self._outliers

    @property
    def histogram(self) -> Optional[Histogram]:
        return self._histogram

    @property
    def nr_of_histogram_bins(self) -> int:
        return 0 if self._histogram is None else self._histogram.nr_of_bins

    @property
    def histogram_bin_counts(self) -> np.ndarray:
        return _empty() if self._histogram is None else self._histogram.counts

    @property
    def histogram_bin_frequencies(self) -> np.ndarray:
        return _empty() if self._histogram is None else self._histogram.frequencies

    @property
    def histogram_bin_centres(self) -> np.ndarray:
        return _empty() if self._histogram is None else self._histogram.centres

    @property
    def histogram_bin_right_edges(self) -> np.ndarray:
        return _empty() if self._histogram is None else self._histogram.right_edges

    @property
    def histogram_bin_width(self) -> float:
        return 0.0 if self._histogram is None else self._histogram.bin_width

    @property
    def kde_pdf(self) -> Optional[FunctionTable]:
        return self._kde_pdf

    @property
    def kde_pdf_modes(self) -> Optional[FunctionTable]:
        """Local maxima of the KDE curve as ``(x, density)`` pairs."""
        return self._kde_pdf_modes

    @property
    def kde_x_min(self) -> float:
        return self._kde_x_min

    @property
    def kde_x_max(self) -> float:
        return self._kde_x_max

    @property
    def kde_x_range(self) -> float:
        return self._kde_x_range


__all__ = [
    "PERCENTILE_RESOLUTION",
    "Histogram",
    "EmpiricalDistribution",
    "count_histogram_bins",
    "freedman_diaconis_bins",
]
