"""Sample-to-uniform normalization pipeline.

Under the null hypothesis that a sample is Gaussian with parameters
(mean, variance), the three steps

    z-score  ->  sort  ->  probability integral transform (PIT)

turn it into a sorted sample that is uniform on (0, 1).  Every EDF
statistic in :mod:`gaussgof.statistics` is defined on that u01 form.

The transforms mutate their argument in place when it already is a float64
ndarray (and return it, for chaining).  :func:`u01ized` is the
copy-preserving variant.  The steps are public individually so callers can
print intermediate z-scores or PIT values.
"""

from __future__ import annotations

import numpy as np

from gaussgof.utils import as_sample, check_mean_variance, normal_cdf


def zscore(xs, mn_vr) -> np.ndarray:
    """Unitize *xs* to its z-scores ``(x - mean) / sqrt(variance)``.

    Raises
    ------
    DomainError
        If *xs* is empty or the variance is not positive and finite.
    """
    xs = as_sample(xs)
    mean, var = check_mean_variance(mn_vr)
    scl = 1.0 / np.sqrt(var)
    xs -= mean
    xs *= scl
    return xs


def pitz(zs) -> np.ndarray:
    """Map z-scores N(0,1) -> U(0,1) through the standard normal CDF."""
    zs = as_sample(zs)
    zs[:] = normal_cdf(zs)
    return zs


def u01ize(xs, mn_vr) -> np.ndarray:
    """Convert *xs* into z-scores, sort, and PIT-transform to be U(0,1).

    Ties survive sorting as adjacent equal values; nothing here breaks them.
    """
    xs = zscore(xs, mn_vr)
    xs.sort(kind="stable")
    return pitz(xs)


def u01ized(xs, mn_vr) -> np.ndarray:
    """Like :func:`u01ize`, but leaves *xs* untouched and returns a new array."""
    return u01ize(as_sample(xs, copy=True), mn_vr)
