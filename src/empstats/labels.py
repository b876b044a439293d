"""Human-readable labels for statistical quantities and their interpretation.

The engine never formats text itself; it resolves symbolic keys through a
translator callable ``translate(key) -> str`` supplied by the caller. The
:func:`default_translator` serves the English strings in :data:`DEFAULT_LABELS`.
"""

from __future__ import annotations

from typing import Callable

__all__ = ["Translator", "DEFAULT_LABELS", "default_translator"]

Translator = Callable[[str], str]

DEFAULT_LABELS: dict[str, str] = {
    "statistics.n": "Sample size",
    "statistics.mean": "Mean",
    "statistics.standard_deviation": "Standard deviation",
    "statistics.variance": "Variance",
    "statistics.median": "Median",
    "statistics.interquartile_range": "Interquartile range",
    "statistics.percentile": "Percentile",
    "statistics.skewness": "Skewness",
    "statistics.kurtosis": "Kurtosis",
    "statistics.minimum": "Minimum",
    "statistics.maximum": "Maximum",
    "statistics.jarque_bera": "Jarque-Bera statistic",
    "statistics.outliers": "Outliers",
    "statistics.skewness.inconclusive": "inconclusive (might be symmetric, might be skewed)",
    "statistics.skewness.symmetric": "approximately symmetric",
    "statistics.skewness.moderately_right_tailed": "moderately skewed, longer right tail",
    "statistics.skewness.highly_right_tailed": "highly skewed, longer right tail",
    "statistics.skewness.moderately_left_tailed": "moderately skewed, longer left tail",
    "statistics.skewness.highly_left_tailed": "highly skewed, longer left tail",
    "statistics.kurtosis.inconclusive": "inconclusive (might be negative, zero, or positive kurtosis)",
    "statistics.kurtosis.mesokurtic": "mesokurtic",
    "statistics.kurtosis.leptokurtic": "leptokurtic",
    "statistics.kurtosis.platykurtic": "platykurtic",
}


def default_translator(key: str) -> str:
    """Resolve ``key`` against :data:`DEFAULT_LABELS`, falling back to the key itself."""
    return DEFAULT_LABELS.get(key, key)
