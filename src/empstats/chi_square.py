r"""
Critical values of the chi-square distribution.

The table holds upper-tail critical values :math:`\chi^2_{\alpha,\,k}` for ten
alpha levels and :math:`k = 1, \dots, 30` degrees of freedom, followed by
:math:`k = 40, 50, \dots, 100`. Values between the tabulated decades above 30
are linearly interpolated.
"""

from __future__ import annotations

import logging

import numpy as np

from .mathtools import clip, normalised_linear_interpolation

logger = logging.getLogger(__name__)

__all__ = ["ALPHA_LEVELS", "CHI_SQUARE_TABLE", "get_chi_square"]

ALPHA_LEVELS: tuple[float, ...] = (0.995, 0.990, 0.975, 0.950, 0.900, 0.100, 0.050, 0.025, 0.010, 0.005)

_MIN_DOF = 1
_MAX_DOF = 100
_EXACT_DOF = 30

# rows follow ALPHA_LEVELS; columns are df 1..30, 40, 50, ..., 100
CHI_SQUARE_TABLE = np.array(
    [
        [0.0, 0.01, 0.072, 0.207, 0.412, 0.676, 0.989, 1.344, 1.735, 2.156, 2.603, 3.074, 3.565, 4.075, 4.601,
         5.142, 5.697, 6.265, 6.844, 7.434, 8.034, 8.643, 9.26, 9.886, 10.52, 11.16, 11.808, 12.461, 13.121,
         13.787, 20.707, 27.991, 35.534, 43.275, 51.172, 59.196, 67.328],
        [0.0, 0.02, 0.115, 0.297, 0.554, 0.872, 1.239, 1.646, 2.088, 2.558, 3.053, 3.571, 4.107, 4.66, 5.229,
         5.812, 6.408, 7.015, 7.633, 8.26, 8.897, 9.542, 10.196, 10.856, 11.524, 12.198, 12.879, 13.565, 14.256,
         14.953, 22.164, 29.707, 37.485, 45.442, 53.54, 61.754, 70.065],
        [0.001, 0.051, 0.216, 0.484, 0.831, 1.237, 1.69, 2.18, 2.7, 3.247, 3.816, 4.404, 5.009, 5.629, 6.262,
         6.908, 7.564, 8.231, 8.907, 9.591, 10.283, 10.982, 11.689, 12.401, 13.12, 13.844, 14.573, 15.308,
         16.047, 16.791, 24.433, 32.357, 40.482, 48.758, 57.153, 65.647, 74.222],
        [0.004, 0.103, 0.352, 0.711, 1.145, 1.635, 2.167, 2.733, 3.325, 3.94, 4.575, 5.226, 5.892, 6.571, 7.261,
         7.962, 8.672, 9.39, 10.117, 10.851, 11.591, 12.338, 13.091, 13.848, 14.611, 15.379, 16.151, 16.928,
         17.708, 18.493, 26.509, 34.764, 43.188, 51.739, 60.391, 69.126, 77.929],
        [0.016, 0.211, 0.584, 1.064, 1.61, 2.204, 2.833, 3.49, 4.168, 4.865, 5.578, 6.304, 7.042, 7.79, 8.547,
         9.312, 10.085, 10.865, 11.651, 12.443, 13.24, 14.041, 14.848, 15.659, 16.473, 17.292, 18.114, 18.939,
         19.768, 20.599, 29.051, 37.689, 46.459, 55.329, 64.278, 73.291, 82.358],
        [2.706, 4.605, 6.251, 7.779, 9.236, 10.645, 12.017, 13.362, 14.684, 15.987, 17.275, 18.549, 19.812,
         21.064, 22.307, 23.542, 24.769, 25.989, 27.204, 28.412, 29.615, 30.813, 32.007, 33.196, 34.382, 35.563,
         36.741, 37.916, 39.087, 40.256, 51.805, 63.167, 74.397, 85.527, 96.578, 107.565, 118.498],
        [3.841, 5.991, 7.815, 9.488, 11.07, 12.592, 14.067, 15.507, 16.919, 18.307, 19.675, 21.026, 22.362,
         23.685, 24.996, 26.296, 27.587, 28.869, 30.144, 31.41, 32.671, 33.924, 35.172, 36.415, 37.652, 38.885,
         40.113, 41.337, 42.557, 43.773, 55.758, 67.505, 79.082, 90.531, 101.879, 113.145, 124.342],
        [5.024, 7.378, 9.348, 11.143, 12.833, 14.449, 16.013, 17.535, 19.023, 20.483, 21.92, 23.337, 24.736,
         26.119, 27.488, 28.845, 30.191, 31.526, 32.852, 34.17, 35.479, 36.781, 38.076, 39.364, 40.646, 41.923,
         43.195, 44.461, 45.722, 46.979, 59.342, 71.42, 83.298, 95.023, 106.629, 118.136, 129.561],
        [6.635, 9.21, 11.345, 13.277, 15.086, 16.812, 18.475, 20.09, 21.666, 23.209, 24.725, 26.217, 27.688,
         29.141, 30.578, 32.0, 33.409, 34.805, 36.191, 37.566, 38.932, 40.289, 41.638, 42.98, 44.314, 45.642,
         46.963, 48.278, 49.588, 50.892, 63.691, 76.154, 88.379, 100.425, 112.329, 124.116, 135.807],
        [7.879, 10.597, 12.838, 14.86, 16.75, 18.548, 20.278, 21.955, 23.589, 25.188, 26.757, 28.3, 29.819,
         31.319, 32.801, 34.267, 35.718, 37.156, 38.582, 39.997, 41.401, 42.796, 44.181, 45.559, 46.928, 48.29,
         49.645, 50.993, 52.336, 53.672, 66.766, 79.49, 91.952, 104.215, 116.321, 128.299, 140.169],
    ]
)
CHI_SQUARE_TABLE.flags.writeable = False


def _alpha_index(alpha: float) -> int:
    """Row of the tabulated alpha level closest to ``alpha``."""
    distances = np.abs(np.asarray(ALPHA_LEVELS) - float(alpha))
    index = int(np.argmin(distances))
    if distances[index] > 1e-12:
        logger.debug(f"alpha={alpha} is not tabulated; using nearest level {ALPHA_LEVELS[index]}")
    return index


def get_chi_square(alpha: float, degrees_of_freedom: int) -> float:
    r"""
    Chi-square critical value for an alpha level and degrees of freedom.

    Parameters
    ----------
    alpha : float
        Upper-tail probability; one of :data:`ALPHA_LEVELS`. Other values are
        clamped to the nearest tabulated level.
    degrees_of_freedom : int
        Clipped to :math:`[1, 100]`. Exact up to 30, linearly interpolated
        between steps of 10 above.

    Returns
    -------
    float
        :math:`\chi^2_{\alpha,\,k}` such that :math:`\Pr(\chi^2_k > x) = \alpha`.

    Examples
    --------
    >>> get_chi_square(0.05, 2)
    5.991
    >>> round(get_chi_square(0.05, 45), 4)
    61.6315
    """
    row = CHI_SQUARE_TABLE[_alpha_index(alpha)]
    dof = int(clip(int(degrees_of_freedom), _MIN_DOF, _MAX_DOF))
    if dof <= _EXACT_DOF:
        return float(row[dof - 1])

    lower_dof = (dof // 10) * 10
    upper_dof = min(lower_dof + 10, _MAX_DOF)
    interp = (dof - lower_dof) / 10.0
    # df 30 sits in column 29, each further decade one column to the right
    lower_col = _EXACT_DOF - 1 + (lower_dof - _EXACT_DOF) // 10
    upper_col = _EXACT_DOF - 1 + (upper_dof - _EXACT_DOF) // 10
    return float(normalised_linear_interpolation(interp, row[lower_col], row[upper_col]))
