r"""
empstats.mathtools
==================
Stateless numeric helpers used by the statistics engine.

This module defines:

- scalar helpers (:func:`sqr`, :func:`clip`, :func:`sinc`, :func:`fac`, ...),
- the kernel functions used for smoothing and density estimation
  (:class:`KernelType`, :func:`get_kernel`),
- sorted-array bracketing and interpolation (:func:`search_array_bounds`,
  :func:`normalised_linear_interpolation`),
- local-extrema detection (:func:`find_extrema`),
- a Nadaraya-Watson :func:`kernel_smoother` over a :class:`~empstats.containers.FunctionTable`.

Every function is side-effect free.
"""

from __future__ import annotations

import math
from enum import Enum
from typing import Sequence, Union

import numpy as np
from scipy.special import factorial

from .containers import ArraySearchBounds, Extrema, FunctionTable

ArrayLike = Union[float, Sequence[float], np.ndarray]

# the a parameter of the Lanczos kernel
LANCZOS_A = 2.0

_INV_SQRT_2PI = 1.0 / math.sqrt(2.0 * math.pi)


class KernelType(str, Enum):
    r"""
    Kernel functions :math:`K(u)` available for smoothing and KDE.

    Attributes
    ----------
    rectangular : str
        :math:`\tfrac12\,\mathbf{1}\{|u|\le 1\}`.
    triangular : str
        :math:`(1-|u|)\,\mathbf{1}\{|u|\le 1\}`.
    epanechnikov : str
        :math:`\tfrac34(1-u^2)\,\mathbf{1}\{|u|\le 1\}`.
    quartic : str
        :math:`\tfrac{15}{16}(1-u^2)^2\,\mathbf{1}\{|u|\le 1\}`.
    gaussian : str
        :math:`\tfrac{1}{\sqrt{2\pi}}e^{-u^2/2}` (infinite support).
    lanczos : str
        :math:`\operatorname{sinc}(u)\operatorname{sinc}(u/a)\,\mathbf{1}\{|u|\le 1\}`, :math:`a=2`.
    """

    rectangular = "rectangular"
    triangular = "triangular"
    epanechnikov = "epanechnikov"
    quartic = "quartic"
    gaussian = "gaussian"
    lanczos = "lanczos"


def frac(x: float) -> float:
    """Fractional part :math:`x - \\lfloor x \\rfloor`."""
    return x - math.floor(x)


def sqr(x):
    return x * x


def cube(x):
    return x * x * x


def quadr(x):
    return x * x * x * x


def fac(n: float) -> float:
    r"""
    Factorial :math:`n!` evaluated through the gamma function.

    Examples
    --------
    >>> fac(5)
    120.0
    """
    return float(factorial(n, exact=False))


def fac_approx(n: float) -> float:
    r"""Stirling's approximation :math:`\sqrt{2\pi n}\,(n/e)^n`."""
    return math.sqrt(2.0 * math.pi * n) * math.pow(n / math.e, n)


def atan(x: float, y: float) -> float:
    r"""
    Angle of the point :math:`(x, y)` in :math:`[0, 2\pi)`.

    Unlike :func:`math.atan2`, negative half-plane angles are wrapped to the
    full circle. The origin maps to ``0.0``.
    """
    if x == 0.0:
        if y > 0.0:
            return math.pi / 2.0
        if y < 0.0:
            return 3.0 * (math.pi / 2.0)
        return 0.0
    angle = math.atan2(y, x)
    if y < 0.0:
        angle += 2.0 * math.pi
    return angle


def sinc(x: float) -> float:
    """Unnormalised sinc, :math:`\\sin(x)/x` with ``sinc(0) == 1``."""
    if x == 0.0:
        return 1.0
    return math.sin(x) / x


def sincn(x: float) -> float:
    """Normalised sinc, :math:`\\sin(\\pi x)/(\\pi x)` with ``sincn(0) == 1``."""
    if x == 0.0:
        return 1.0
    return math.sin(math.pi * x) / (math.pi * x)


def deg2rad(degrees: float) -> float:
    return degrees * math.pi / 180.0


def rad2deg(radians: float) -> float:
    return radians / math.pi * 180.0


def clip(value, minimum, maximum):
    r"""
    Bound ``value`` to the closed interval ``[minimum, maximum]``.

    Works for both the continuous and the discrete domain: integer arguments
    produce an integer result.

    Examples
    --------
    >>> clip(1.5, 0.0, 1.0)
    1.0
    >>> clip(-3, 0, 10)
    0
    """
    if value < minimum:
        return minimum
    if value > maximum:
        return maximum
    return value


def find_minimum(x: Sequence[float] | np.ndarray) -> float:
    return float(np.min(np.asarray(x, dtype=float)))


def find_maximum(x: Sequence[float] | np.ndarray) -> float:
    return float(np.max(np.asarray(x, dtype=float)))


def is_even(n: int) -> bool:
    return (n & 1) == 0


def is_odd(n: int) -> bool:
    return not is_even(n)


def log_base(x: float, base: float) -> float:
    return math.log(x) / math.log(base)


def is_prime(x: int) -> bool:
    r"""
    Deterministic primality test by :math:`6k \pm 1` trial division.

    Examples
    --------
    >>> [p for p in range(20) if is_prime(p)]
    [2, 3, 5, 7, 11, 13, 17, 19]
    """
    x = int(x)
    if x < 2:
        return False
    if x < 4:
        return True
    if x % 2 == 0 or x % 3 == 0:
        return False
    k = 5
    while k * k <= x:
        if x % k == 0 or x % (k + 2) == 0:
            return False
        k += 6
    return True


def normalised_linear_interpolation(value: float, from_value: float, to_value: float) -> float:
    r"""
    Blend ``from_value`` and ``to_value`` by a fraction ``value``.

    Returns :math:`\text{from}\,(1-t) + \text{to}\,t`. The fraction is not clamped.
    """
    return (from_value * (1.0 - value)) + (to_value * value)


def search_array_bounds(x: Sequence[float] | np.ndarray, x_search: float) -> ArraySearchBounds:
    r"""
    Bracket ``x_search`` in an ascending array.

    Parameters
    ----------
    x : array_like
        Values sorted in ascending order (ties allowed).
    x_search : float
        Search target.

    Returns
    -------
    ArraySearchBounds
        ``(lower, upper)`` with ``x[lower] <= x_search < x[upper]``. Below the
        first element the result is ``(0, 0)``; at or above the last element
        it is ``(n-1, n-1)``.

    Raises
    ------
    ValueError
        If ``x`` is empty.

    Notes
    -----
    Callers interpolating between the bounds must special-case
    ``lower == upper`` to avoid a division by zero.

    Examples
    --------
    >>> search_array_bounds([0.0, 1.0, 2.0], 1.5)
    ArraySearchBounds(lower=1, upper=2)
    """
    arr = np.asarray(x, dtype=float)
    n = arr.size
    if n == 0:
        raise ValueError("search_array_bounds requires a non-empty array")
    if x_search >= arr[n - 1]:
        return ArraySearchBounds(n - 1, n - 1)
    if x_search < arr[0]:
        return ArraySearchBounds(0, 0)
    lower = int(np.searchsorted(arr, x_search, side="right")) - 1
    return ArraySearchBounds(lower, lower + 1)


def get_kernel(u: ArrayLike, kernel_type: KernelType | str):
    r"""
    Evaluate a kernel function at ``u``.

    Parameters
    ----------
    u : float or array_like
        Scaled distance(s) :math:`(x - x_i)/h`.
    kernel_type : KernelType or str
        Which kernel to evaluate.

    Returns
    -------
    float or ndarray
        A ``float`` for scalar ``u``, otherwise an array of the same shape.
        All kernels except the Gaussian vanish for :math:`|u| > 1`.

    Examples
    --------
    >>> get_kernel(0.0, "epanechnikov")
    0.75
    >>> get_kernel(1.5, KernelType.triangular)
    0.0
    """
    kernel_type = KernelType(kernel_type)
    arr = np.asarray(u, dtype=float)
    inside = np.abs(arr) <= 1.0

    if kernel_type is KernelType.rectangular:
        out = np.where(inside, 0.5, 0.0)
    elif kernel_type is KernelType.triangular:
        out = np.where(inside, 1.0 - np.abs(arr), 0.0)
    elif kernel_type is KernelType.epanechnikov:
        out = np.where(inside, 0.75 * (1.0 - arr * arr), 0.0)
    elif kernel_type is KernelType.quartic:
        out = np.where(inside, (15.0 / 16.0) * sqr(1.0 - arr * arr), 0.0)
    elif kernel_type is KernelType.gaussian:
        out = _INV_SQRT_2PI * np.exp(-0.5 * arr * arr)
    else:
        # np.sinc is normalised, sin(pi t) / (pi t)
        out = np.where(inside, np.sinc(arr / np.pi) * np.sinc(arr / (LANCZOS_A * np.pi)), 0.0)

    if out.ndim == 0:
        return float(out)
    return out


def find_extrema(x: Sequence[float] | np.ndarray) -> Extrema:
    r"""
    Locate the local minima and maxima of a sequence in a single scan.

    Each interior index is classified from its ``(left, middle, right)``
    neighbourhood. The last strict direction of travel is carried across
    plateaus, so a run of equal values produces an extremum only when the
    sequence genuinely reverses direction after it; the extremum is reported
    at the last index of the plateau.

    Parameters
    ----------
    x : array_like
        Input sequence. Fewer than three elements yield no extrema.

    Returns
    -------
    Extrema

    Examples
    --------
    >>> e = find_extrema([1, 3, 2, 4, 1])
    >>> [m.index for m in e.local_maxima], [m.index for m in e.local_minima]
    ([1, 3], [2])
    """
    extrema = Extrema()
    values = [float(v) for v in x]
    if len(values) < 3:
        return extrema

    direction = 0
    if values[1] > values[0]:
        direction = +1
    elif values[1] < values[0]:
        direction = -1

    for i in range(1, len(values) - 1):
        left, middle, right = values[i - 1], values[i], values[i + 1]

        if right > middle:
            if middle < left or (middle == left and direction == -1):
                extrema.add_local_minimum(i, middle)
            direction = +1
        elif right < middle:
            if middle > left or (middle == left and direction == +1):
                extrema.add_local_maximum(i, middle)
            direction = -1
        # right == middle: direction unchanged

    return extrema


def kernel_smoother(
    table: FunctionTable,
    kernel_type: KernelType | str,
    bandwidth: float,
    nr_of_support_points: int,
) -> FunctionTable:
    r"""
    Nadaraya-Watson kernel smoothing of a sampled function.

    The smoothed curve is evaluated on ``nr_of_support_points`` evenly spaced
    points covering :math:`[\min x, \max x]`:

    .. math::
       \hat y(x_k) = \frac{\sum_i K\!\left(\frac{x_k - x_i}{h}\right) y_i}
                          {\sum_i K\!\left(\frac{x_k - x_i}{h}\right)}.

    Support points whose kernel weights sum to zero are left at ``0.0``.

    Parameters
    ----------
    table : FunctionTable
        The function to smooth.
    kernel_type : KernelType or str
    bandwidth : float
        Kernel bandwidth :math:`h > 0`.
    nr_of_support_points : int
        Number of output points (at least 2).

    Returns
    -------
    FunctionTable

    Raises
    ------
    ValueError
        If the bandwidth is not positive, fewer than two support points are
        requested, or the table is empty.
    """
    if bandwidth <= 0.0:
        raise ValueError("bandwidth must be positive")
    if nr_of_support_points < 2:
        raise ValueError("nr_of_support_points must be >= 2")
    if len(table) == 0:
        raise ValueError("cannot smooth an empty function table")

    xk = np.linspace(find_minimum(table.x), find_maximum(table.x), int(nr_of_support_points))
    weights = get_kernel((xk[:, None] - table.x[None, :]) / bandwidth, kernel_type)
    numerator = weights @ table.y
    denominator = weights.sum(axis=1)

    yk = np.zeros_like(xk)
    nonzero = denominator != 0.0
    yk[nonzero] = numerator[nonzero] / denominator[nonzero]
    return FunctionTable(xk, yk)


__all__ = [
    "KernelType",
    "LANCZOS_A",
    "frac",
    "sqr",
    "cube",
    "quadr",
    "fac",
    "fac_approx",
    "atan",
    "sinc",
    "sincn",
    "deg2rad",
    "rad2deg",
    "clip",
    "find_minimum",
    "find_maximum",
    "is_even",
    "is_odd",
    "log_base",
    "is_prime",
    "normalised_linear_interpolation",
    "search_array_bounds",
    "get_kernel",
    "find_extrema",
    "kernel_smoother",
]
