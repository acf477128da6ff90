"""
Descriptive statistics over sequences of real or complex values.

Inputs are flat sequences (a matrix is passed in row-major order); the
expression layer is responsible for turning values into sequences.

Conventions:
- variances use the squared modulus of the deviations, so they are real for
  complex data;
- raw and central moments, skewness and kurtosis use plain complex powers;
  skewness and kurtosis are normalized by the complex second central moment
  mean((x - mean)^2), not by the variance;
- kurtosis is excess kurtosis (zero for a normal distribution);
- the sample estimators of skewness and kurtosis are the bias-adjusted ones
  (the same formulas as spreadsheet SKEW and KURT).
"""

import math
from typing import List, Optional, Sequence

import numpy as np

from .errors import DimensionMismatchError, DomainError


def _complex_array(values: Sequence[complex]) -> np.ndarray:
    data = np.asarray(values, dtype=np.complex128).ravel()
    if data.size == 0:
        raise DomainError("statistics of an empty set are undefined")
    return data


def _real_array(values: Sequence[float]) -> np.ndarray:
    data = np.asarray(values, dtype=float).ravel()
    if data.size == 0:
        raise DomainError("statistics of an empty set are undefined")
    return data


def _ipow(data: np.ndarray, k: int) -> np.ndarray:
    """Integer power by repeated multiplication (keeps real data exactly real)."""
    if k < 0:
        if np.any(data == 0):
            raise DomainError("zero cannot be raised to a negative power")
        return 1.0 / _ipow(data, -k)
    result = np.ones_like(data)
    for _ in range(k):
        result = result * data
    return result


def _squared_modulus(data: np.ndarray) -> np.ndarray:
    return data.real * data.real + data.imag * data.imag


# --- Averages ---

def median(values: Sequence[float]) -> float:
    return float(np.median(_real_array(values)))


def mean(values: Sequence[complex]) -> complex:
    return complex(np.mean(_complex_array(values)))


def geometric_mean(values: Sequence[float]) -> float:
    """n-th root of the product of non-negative values."""
    data = _real_array(values)
    if np.any(data < 0):
        raise DomainError("geometric mean requires non-negative values")
    if np.any(data == 0):
        return 0.0
    return float(np.exp(np.mean(np.log(data))))


def harmonic_mean(values: Sequence[float]) -> float:
    data = _real_array(values)
    if np.any(data <= 0):
        raise DomainError("harmonic mean requires positive values")
    return float(data.size / np.sum(1.0 / data))


def mode(values: Sequence[complex]) -> complex:
    """
    Most frequent value.

    Ties go to the value whose first occurrence comes first.
    """
    data = _complex_array(values)
    counts = {}
    for z in data:
        key = complex(z)
        counts[key] = counts.get(key, 0) + 1
    return max(counts.items(), key=lambda item: item[1])[0]


# --- Moments ---

def population_variance(values: Sequence[complex]) -> float:
    data = _complex_array(values)
    deviations = data - np.mean(data)
    return float(np.mean(_squared_modulus(deviations)))


def sample_variance(values: Sequence[complex]) -> float:
    """Unbiased variance; a single value has zero variance."""
    data = _complex_array(values)
    if data.size == 1:
        return 0.0
    deviations = data - np.mean(data)
    return float(np.sum(_squared_modulus(deviations)) / (data.size - 1))


def population_standard_deviation(values: Sequence[complex]) -> float:
    return math.sqrt(population_variance(values))


def sample_standard_deviation(values: Sequence[complex]) -> float:
    return math.sqrt(sample_variance(values))


def population_moment(values: Sequence[complex], order: int) -> complex:
    """Raw moment: mean of x ** order."""
    data = _complex_array(values)
    return complex(np.mean(_ipow(data, order)))


def population_central_moment(values: Sequence[complex], order: int) -> complex:
    """Central moment: mean of (x - mean) ** order."""
    data = _complex_array(values)
    return complex(np.mean(_ipow(data - np.mean(data), order)))


def _deviations(data: np.ndarray) -> np.ndarray:
    return data - np.mean(data)


def _spread(deviations: np.ndarray, divisor: int, what: str) -> complex:
    """Sum of squared deviations over ``divisor``; zero raises DomainError."""
    spread = complex(np.sum(_ipow(deviations, 2)) / divisor)
    if spread == 0:
        raise DomainError(f"{what} is undefined when the second central moment is zero")
    return spread


def population_skewness(values: Sequence[complex]) -> complex:
    """Third central moment over the second central moment to the power 1.5."""
    d = _deviations(_complex_array(values))
    m2 = _spread(d, d.size, "skewness")
    return complex(np.mean(_ipow(d, 3))) / m2 ** 1.5


def sample_skewness(values: Sequence[complex]) -> complex:
    d = _deviations(_complex_array(values))
    n = d.size
    if n < 3:
        raise DomainError("sample skewness requires at least three values")
    v = _spread(d, n - 1, "skewness")
    return n / ((n - 1) * (n - 2)) * complex(np.sum(_ipow(d, 3))) / v ** 1.5


def population_kurtosis(values: Sequence[complex]) -> complex:
    """Fourth central moment over the squared second central moment, minus 3."""
    d = _deviations(_complex_array(values))
    m2 = _spread(d, d.size, "kurtosis")
    return complex(np.mean(_ipow(d, 4))) / (m2 * m2) - 3


def sample_kurtosis(values: Sequence[complex]) -> complex:
    d = _deviations(_complex_array(values))
    n = d.size
    if n < 4:
        raise DomainError("sample kurtosis requires at least four values")
    v = _spread(d, n - 1, "kurtosis")
    scale = n * (n + 1) / ((n - 1) * (n - 2) * (n - 3))
    correction = 3 * (n - 1) ** 2 / ((n - 2) * (n - 3))
    return scale * complex(np.sum(_ipow(d, 4))) / (v * v) - correction


# --- Covariance and correlation ---

def _paired(x: Sequence[complex], y: Sequence[complex]):
    a = _complex_array(x)
    b = _complex_array(y)
    if a.size != b.size:
        raise DimensionMismatchError("covariance", (a.size, 1), (b.size, 1))
    return a, b


def population_covariance(x: Sequence[complex], y: Sequence[complex]) -> complex:
    a, b = _paired(x, y)
    return complex(np.mean((a - np.mean(a)) * np.conj(b - np.mean(b))))


def sample_covariance(x: Sequence[complex], y: Sequence[complex]) -> complex:
    a, b = _paired(x, y)
    if a.size < 2:
        raise DomainError("sample covariance requires at least two values")
    return complex(np.sum((a - np.mean(a)) * np.conj(b - np.mean(b))) / (a.size - 1))


def correlation(x: Sequence[complex], y: Sequence[complex]) -> complex:
    """Pearson correlation coefficient."""
    a, b = _paired(x, y)
    scale = population_standard_deviation(a) * population_standard_deviation(b)
    if scale == 0:
        raise DomainError("correlation with constant data is undefined")
    return population_covariance(a, b) / scale


# --- Sums and products ---

def total(values: Sequence[complex]) -> complex:
    return complex(np.sum(np.asarray(values, dtype=np.complex128)))


def sum_of_squares(values: Sequence[complex]) -> complex:
    data = np.asarray(values, dtype=np.complex128).ravel()
    return complex(np.sum(data * data))


def product(values: Sequence[complex]) -> complex:
    return complex(np.prod(np.asarray(values, dtype=np.complex128)))


# --- Histogram ---

def default_interval_count(n: int) -> int:
    """Sturges' rule, rounded down."""
    return int(1 + math.log2(n))


def histogram(values: Sequence[float], intervals: Optional[int] = None) -> List[float]:
    """
    Relative frequencies over equal-width intervals spanning [min, max].

    The last interval is closed on the right.
    """
    data = _real_array(values)
    if intervals is None:
        intervals = default_interval_count(data.size)
    if intervals < 1:
        raise DomainError("histogram needs at least one interval")
    counts, _ = np.histogram(data, bins=intervals)
    return [float(c) / data.size for c in counts]


def histogram_edges(values: Sequence[float], edges: Sequence[float]) -> List[float]:
    """
    Relative frequencies over the intervals between consecutive edges.

    Values outside [edges[0], edges[-1]] are counted in the total but fall in
    no interval.
    """
    data = _real_array(values)
    bounds = np.asarray(edges, dtype=float).ravel()
    if bounds.size < 2:
        raise DomainError("histogram needs at least two interval edges")
    if np.any(np.diff(bounds) <= 0):
        raise DomainError("histogram edges must be strictly increasing")
    counts, _ = np.histogram(data, bins=bounds)
    return [float(c) / data.size for c in counts]
