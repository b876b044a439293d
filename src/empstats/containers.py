r"""
Small value objects shared by the numeric library and the statistics engine.

This module provides:

Classes
    :class:`ArraySearchBounds`: bracketing index pair returned by
    :func:`~empstats.mathtools.search_array_bounds`
    :class:`Extremum`: a single local extremum (index and value)
    :class:`Extrema`: collected local minima and maxima of a sequence
    :class:`FunctionTable`: immutable sampled 1D function :math:`y = f(x)`
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Sequence

import numpy as np

__all__ = [
    "ArraySearchBounds",
    "Extremum",
    "Extrema",
    "FunctionTable",
]


@dataclass(frozen=True)
class ArraySearchBounds:
    r"""
    Lower and upper index bracketing a search target in a sorted array.

    Attributes
    ----------
    lower : int
        Index of the last element :math:`\le` the target (or ``0`` below the array).
    upper : int
        Index of the first element :math:`>` the target (equal to ``lower`` at the edges).
    """

    lower: int = 0
    upper: int = 0

    @property
    def is_degenerate(self) -> bool:
        """True when both bounds point at the same element."""
        return self.lower == self.upper


@dataclass(frozen=True)
class Extremum:
    """A local extremum at position ``index`` with value ``value``."""

    index: int = 0
    value: float = 0.0


@dataclass
class Extrema:
    r"""
    Local minima and maxima found in a sequence, in scan order.

    Attributes
    ----------
    local_minima : list of Extremum
    local_maxima : list of Extremum

    See Also
    --------
    empstats.mathtools.find_extrema
    """

    local_minima: list[Extremum] = field(default_factory=list)
    local_maxima: list[Extremum] = field(default_factory=list)

    @property
    def nr_of_local_minima(self) -> int:
        return len(self.local_minima)

    @property
    def nr_of_local_maxima(self) -> int:
        return len(self.local_maxima)

    def add_local_minimum(self, index: int, value: float) -> None:
        self.local_minima.append(Extremum(int(index), float(value)))

    def add_local_maximum(self, index: int, value: float) -> None:
        self.local_maxima.append(Extremum(int(index), float(value)))

    def get_local_minimum(self, sequence_number: int) -> Extremum:
        return self.local_minima[sequence_number]

    def get_local_maximum(self, sequence_number: int) -> Extremum:
        return self.local_maxima[sequence_number]

    def reset(self) -> None:
        self.local_minima = []
        self.local_maxima = []


def _frozen_copy(values: Sequence[float] | np.ndarray) -> np.ndarray:
    arr = np.array(values, dtype=float, copy=True).reshape(-1)
    arr.flags.writeable = False
    return arr


@dataclass(frozen=True, init=False, eq=False)
class FunctionTable:
    r"""
    Immutable lookup table of a sampled one-dimensional function.

    Both coordinate sequences are copied on construction and exposed as
    read-only :class:`numpy.ndarray` views, so neither the caller nor a
    consumer can mutate a table after it was built.

    Parameters
    ----------
    x : sequence of float
        Abscissae, typically ascending.
    y : sequence of float
        Ordinates aligned with ``x``.

    Raises
    ------
    ValueError
        If ``x`` and ``y`` differ in length.

    Examples
    --------
    >>> t = FunctionTable([0.0, 1.0, 2.0], [0.0, 10.0, 0.0])
    >>> len(t)
    3
    >>> t.interpolate(0.5)
    5.0
    """

    x: np.ndarray
    y: np.ndarray

    def __init__(self, x: Sequence[float] | np.ndarray = (), y: Sequence[float] | np.ndarray = ()):
        x_arr = _frozen_copy(x)
        y_arr = _frozen_copy(y)
        if x_arr.size != y_arr.size:
            raise ValueError(f"x and y must have the same length, got {x_arr.size} and {y_arr.size}")
        object.__setattr__(self, "x", x_arr)
        object.__setattr__(self, "y", y_arr)

    def __len__(self) -> int:
        return int(self.x.size)

    def __iter__(self) -> Iterator[tuple[float, float]]:
        return ((float(a), float(b)) for a, b in zip(self.x, self.y))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FunctionTable):
            return NotImplemented
        return bool(np.array_equal(self.x, other.x) and np.array_equal(self.y, other.y))

    def interpolate(self, x: float) -> float:
        r"""
        Linearly interpolate the table at ``x``.

        Values outside :math:`[x_0, x_{n-1}]` take the nearest end value.
        An empty table evaluates to ``0.0``.
        """
        if self.x.size == 0:
            return 0.0
        return float(np.interp(x, self.x, self.y))
