"""empstats package public API."""

from .backends import ProcessBackend, SequentialBackend, ThreadBackend, analyse_samples
from .chi_square import get_chi_square
from .comparator import (
    DistributionComparator,
    KSTestResult,
    kolmogorov_smirnov_test,
    perform_kolmogorov_smirnov_test,
)
from .containers import ArraySearchBounds, Extrema, Extremum, FunctionTable
from .context import DistributionContext, NanPolicy
from .empirical import EmpiricalDistribution, Histogram
from .labels import DEFAULT_LABELS, default_translator
from .mathtools import KernelType, find_extrema, get_kernel, kernel_smoother, search_array_bounds

__all__ = [
    "EmpiricalDistribution",
    "Histogram",
    "DistributionContext",
    "NanPolicy",
    "DistributionComparator",
    "KSTestResult",
    "kolmogorov_smirnov_test",
    "perform_kolmogorov_smirnov_test",
    "ArraySearchBounds",
    "Extremum",
    "Extrema",
    "FunctionTable",
    "KernelType",
    "get_kernel",
    "find_extrema",
    "kernel_smoother",
    "search_array_bounds",
    "get_chi_square",
    "DEFAULT_LABELS",
    "default_translator",
    "analyse_samples",
    "SequentialBackend",
    "ThreadBackend",
    "ProcessBackend",
]

__version__ = "0.1.0"
