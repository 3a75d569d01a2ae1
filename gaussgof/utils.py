"""Central numerical helpers shared across the goodness-of-fit pipeline.

Provides the building blocks every other module leans on:

* **Gaussian primitives** -- standard normal CDF and quantile function,
  delegated to ``scipy.stats.norm``.
* **Summary statistics** -- sample mean and *unbiased* (ddof=1) sample
  variance, matching the estimates used in D'Agostino & Stephens (1986).
* **Validation** -- coercion of user input to a 1-D float64 sample, and the
  early checks (non-empty, positive finite variance) that keep NaN/Inf from
  propagating silently into a statistic.

Key notation throughout:
  - xs    : raw sample
  - zs    : z-scores of xs
  - ps    : sorted PIT values of zs, i.e. a u01-transformed sample
  - mn_vr : (mean, variance) location-scale pair
"""

from __future__ import annotations

import math
from typing import Tuple

import numpy as np
from scipy.stats import norm

from gaussgof.errors import DomainError


def normal_cdf(z):
    """Standard normal CDF, elementwise over scalars or arrays."""
    return norm.cdf(z)


def normal_ppf(p):
    """Standard normal quantile (inverse CDF), elementwise.

    Total over the open interval (0, 1); ``norm.ppf`` maps the endpoints to
    -inf / +inf.
    """
    return norm.ppf(p)


def as_sample(xs, *, copy: bool = False) -> np.ndarray:
    """Return *xs* as a 1-D float64 array, rejecting empty or non-finite input.

    When *xs* already is a float64 ndarray and *copy* is False the same
    object is returned, so in-place transforms reach the caller's buffer.
    """
    arr = np.array(xs, dtype=np.float64, copy=True) if copy else np.asarray(xs, dtype=np.float64)
    if arr.ndim != 1:
        arr = arr.reshape(-1)
    if arr.size == 0:
        raise DomainError("sample is empty")
    if not np.all(np.isfinite(arr)):
        raise DomainError("sample contains non-finite values")
    return arr


def mean_and_variance(xs) -> Tuple[float, float]:
    """Sample mean and unbiased sample variance of *xs*.

    A single-point sample has no spread estimate; its variance is reported
    as 0.0 so that the downstream positivity check rejects it.
    """
    arr = as_sample(xs)
    # float64 accumulation; the variance is the ddof=1 estimator.
    mean = float(arr.mean())
    if arr.size < 2:
        return mean, 0.0
    return mean, float(arr.var(ddof=1))


def check_mean_variance(mn_vr) -> Tuple[float, float]:
    """Validate a (mean, variance) pair and return it as floats."""
    try:
        mean, var = mn_vr
    except (TypeError, ValueError) as exc:
        raise DomainError(f"expected a (mean, variance) pair, got {mn_vr!r}") from exc
    mean, var = float(mean), float(var)
    if not math.isfinite(mean):
        raise DomainError(f"mean must be finite, got {mean}")
    if not (math.isfinite(var) and var > 0.0):
        raise DomainError(f"variance must be positive and finite, got {var} (constant sample?)")
    return mean, var
