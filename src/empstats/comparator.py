r"""
empstats.comparator
===================
Paired-error metrics between two equal-length samples and the two-sample
Kolmogorov-Smirnov test.

This module defines:

- :class:`DistributionComparator`: MAE, MSE, RMSE, SSE, MRE, RRMSE, RMSEP,
  MAXE, ME, MAPE, EQC, covariance and Pearson correlation of paired samples.
- :class:`KSTestResult`: statistic, p-value and effective sample size of a KS test.
- :func:`kolmogorov_smirnov_test` / :func:`perform_kolmogorov_smirnov_test`.

Notes
-----
With :math:`\Delta_i = X_i - Y_i` the metrics are

.. math::
   \mathrm{MAE} = \frac{1}{N}\sum|\Delta_i|,\quad
   \mathrm{RMSEP} = \frac{\sqrt{N \sum \Delta_i^2}}{\sum X_i},\quad
   \mathrm{EQC} = 1 - \frac{\sqrt{\sum \Delta_i^2}}{\sqrt{\sum X_i^2} + \sqrt{\sum Y_i^2}}.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, Optional

import numpy as np

from .empirical import EmpiricalDistribution, count_histogram_bins
from .mathtools import clip

logger = logging.getLogger(__name__)
if not logger.handlers:
    handler = logging.StreamHandler()
    formatter = logging.Formatter("%(asctime)s - %(levelname)s - %(message)s")
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)

__all__ = [
    "KSTestResult",
    "DistributionComparator",
    "kolmogorov_smirnov_test",
    "perform_kolmogorov_smirnov_test",
]

_KS_SERIES_TERMS = 100

_METRIC_NAMES = (
    "mae",
    "mse",
    "rmse",
    "sse",
    "mre",
    "rrmse",
    "rmsep",
    "maxe",
    "me",
    "mape",
    "eqc",
    "covariance",
    "pearson_correlation",
)


def _as_array(values: Any) -> np.ndarray:
    if isinstance(values, EmpiricalDistribution):
        return values.data
    return np.array(values, dtype=float, copy=True).reshape(-1)


@dataclass(frozen=True)
class KSTestResult:
    r"""
    Outcome of a two-sample Kolmogorov-Smirnov test.

    Attributes
    ----------
    statistic : float
        Supremum :math:`D` of the absolute ECDF difference.
    p_value : float
        Asymptotic two-sided p-value, clamped to :math:`[0, 1]`.
    n_eff : float
        Effective sample size :math:`n_1 n_2 / (n_1 + n_2)`.
    """

    statistic: float
    p_value: float
    n_eff: float

    def accepts(self, alpha: float = 0.05) -> bool:
        """``alpha >= p_value``; always ``False`` for an undefined p-value."""
        return bool(alpha >= self.p_value)


def kolmogorov_smirnov_test(x: Any, y: Any) -> KSTestResult:
    r"""
    Two-sample Kolmogorov-Smirnov test.

    Both samples are binned on the shared partition formed by their merged,
    sorted values; the statistic is the largest absolute difference of the
    resulting cumulative frequencies. The p-value uses the asymptotic series

    .. math::
       \lambda = \left(\sqrt{n_e} + 0.12 + \frac{0.11}{\sqrt{n_e}}\right) D, \qquad
       p = 2 \sum_{j=1}^{100} (-1)^{j-1} e^{-2\lambda^2 j^2}.

    Parameters
    ----------
    x, y : array_like or EmpiricalDistribution
        Independent samples; lengths may differ.

    Returns
    -------
    KSTestResult
        ``NaN`` statistic and p-value if either sample is empty.
    """
    xs = np.sort(_as_array(x))
    ys = np.sort(_as_array(y))
    n1, n2 = xs.size, ys.size
    if n1 == 0 or n2 == 0:
        logger.warning("Kolmogorov-Smirnov test needs two non-empty samples")
        return KSTestResult(float("nan"), float("nan"), 0.0)

    edges = np.sort(np.concatenate((xs, ys)))
    cdf1 = np.cumsum(count_histogram_bins(xs, edges)) / float(n1)
    cdf2 = np.cumsum(count_histogram_bins(ys, edges)) / float(n2)
    statistic = float(np.max(np.abs(cdf1 - cdf2)))

    n_eff = (float(n1) * float(n2)) / (float(n1) + float(n2))
    lam = max((math.sqrt(n_eff) + 0.12 + (0.11 / math.sqrt(n_eff))) * statistic, 0.0)
    j = np.arange(1, _KS_SERIES_TERMS + 1, dtype=float)
    signs = np.where(j % 2 == 1, 1.0, -1.0)
    p_value = 2.0 * float(np.sum(signs * np.exp(-2.0 * lam**2 * j**2)))
    return KSTestResult(statistic, clip(p_value, 0.0, 1.0), n_eff)


def perform_kolmogorov_smirnov_test(x: Any, y: Any, alpha: float = 0.05) -> bool:
    r"""
    Kolmogorov-Smirnov decision at level ``alpha``.

    Returns
    -------
    bool
        ``alpha >= p``; ``False`` when either sample is empty.

    Examples
    --------
    >>> perform_kolmogorov_smirnov_test([1.0, 2.0, 3.0], [1.0, 2.0, 3.0])
    True
    """
    return kolmogorov_smirnov_test(x, y).accepts(alpha)


class DistributionComparator:
    r"""
    Paired comparison of two equal-length samples.

    Parameters
    ----------
    x, y : array_like or EmpiricalDistribution, optional
        Reference and compared sample. Mismatched or empty inputs are rejected
        with a warning and leave the comparator in its prior state.

    Notes
    -----
    Relative errors skip observations with :math:`X_i = 0` and use
    :math:`|X_i|` in the denominator. RMSEP is ``0.0`` when :math:`\sum X_i = 0`,
    EQC is ``1.0`` for identical series, the covariance is ``0.0`` for
    :math:`N < 2` and the Pearson correlation is ``NaN`` when either standard
    deviation is zero.

    Examples
    --------
    >>> dc = DistributionComparator([1.0, 2.0, 3.0], [1.0, 2.0, 4.0])
    >>> dc.maxe
    1.0
    """

    kolmogorov_smirnov_test = staticmethod(kolmogorov_smirnov_test)
    perform_kolmogorov_smirnov_test = staticmethod(perform_kolmogorov_smirnov_test)

    def __init__(self, x: Optional[Any] = None, y: Optional[Any] = None):
        self._x = np.empty(0, dtype=float)
        self._y = np.empty(0, dtype=float)
        self._reset_metrics()
        if x is not None and y is not None:
            self.set_data(x, y)

    def _reset_metrics(self) -> None:
        for name in _METRIC_NAMES:
            setattr(self, f"_{name}", 0.0)

    def set_data(self, x: Any, y: Any) -> None:
        """Replace both samples and recompute every metric."""
        xa, ya = _as_array(x), _as_array(y)
        if xa.size == 0 or xa.size != ya.size:
            logger.warning(f"Rejected comparator input of sizes {xa.size} and {ya.size}")
            return
        self._x, self._y = xa, ya
        self.analyse()

    def set_x_data(self, x: Any) -> None:
        """Replace the reference sample; must match the current length."""
        xa = _as_array(x)
        if xa.size == 0 or xa.size != self.n:
            logger.warning(f"Rejected x sample of size {xa.size} for comparator of size {self.n}")
            return
        self._x = xa
        self.analyse()

    def set_y_data(self, y: Any) -> None:
        """Replace the compared sample; must match the current length."""
        ya = _as_array(y)
        if ya.size == 0 or ya.size != self.n:
            logger.warning(f"Rejected y sample of size {ya.size} for comparator of size {self.n}")
            return
        self._y = ya
        self.analyse()

    def analyse(self) -> None:
        r"""Recompute all metrics from the loaded samples."""
        self._reset_metrics()
        n = self.n
        if n == 0:
            return
        x, y = self._x, self._y
        delta = x - y
        abs_delta = np.abs(delta)
        sse = float(np.sum(delta**2))

        self._mae = float(np.mean(abs_delta))
        self._sse = sse
        self._mse = sse / n
        self._rmse = math.sqrt(self._mse)
        self._maxe = float(np.max(abs_delta))
        self._me = float(np.mean(delta))

        nonzero = x != 0.0
        relative = abs_delta[nonzero] / np.abs(x[nonzero])
        self._mre = float(np.sum(relative)) / n
        self._rrmse = math.sqrt(float(np.sum(relative**2)) / n)
        self._mape = 100.0 * self._mre

        x_sum = float(np.sum(x))
        self._rmsep = math.sqrt(sse * n) / x_sum if x_sum != 0.0 else 0.0

        norm = math.sqrt(float(np.sum(x**2))) + math.sqrt(float(np.sum(y**2)))
        if sse == 0.0:
            self._eqc = 1.0
        elif norm != 0.0:
            self._eqc = 1.0 - (math.sqrt(sse) / norm)

        if n < 2:
            self._covariance = 0.0
            self._pearson_correlation = float("nan")
        else:
            self._covariance = float(np.sum((x - np.mean(x)) * (y - np.mean(y)))) / (n - 1.0)
            denominator = float(np.std(x, ddof=1)) * float(np.std(y, ddof=1))
            self._pearson_correlation = (
                self._covariance / denominator if denominator > 0.0 else float("nan")
            )
        logger.debug(f"Compared {n} paired observations: RMSE={self._rmse:.6g}")

    def as_dict(self) -> dict[str, float]:
        """All metrics keyed by their lower-case names."""
        return {name: getattr(self, f"_{name}") for name in _METRIC_NAMES}

    @property
    def n(self) -> int:
        return int(self._x.size)

    @property
    def ready(self) -> bool:
        return self.n > 0

    @property
    def x_data(self) -> np.ndarray:
        return self._x

    @property
    def y_data(self) -> np.ndarray:
        return self._y

    @property
    def mae(self) -> float:
        """Mean absolute error."""
        return self._mae

    @property
    def mse(self) -> float:
        """Mean squared error."""
        return self._mse

    @property
    def rmse(self) -> float:
        return self._rmse

    @property
    def sse(self) -> float:
        """Sum of squared errors."""
        return self._sse

    @property
    def mre(self) -> float:
        """Mean relative error :math:`\\frac{1}{N}\\sum |\\Delta_i| / |X_i|`."""
        return self._mre

    @property
    def rrmse(self) -> float:
        """Relative root-mean-square error."""
        return self._rrmse

    @property
    def rmsep(self) -> float:
        """Root-mean-square error normalised by :math:`\\sum X_i`."""
        return self._rmsep

    @property
    def maxe(self) -> float:
        """Largest absolute error."""
        return self._maxe

    @property
    def me(self) -> float:
        """Signed mean error :math:`\\frac{1}{N}\\sum (X_i - Y_i)`."""
        return self._me

    @property
    def mape(self) -> float:
        return self._mape

    @property
    def eqc(self) -> float:
        """Equality coefficient in :math:`[0, 1]`; one for identical series."""
        return self._eqc

    @property
    def covariance(self) -> float:
        """Sample covariance with ``N - 1`` denominator."""
        return self._covariance

    @property
    def pearson_correlation(self) -> float:
        return self._pearson_correlation
