"""Monte Carlo null distributions and empirical p-values.

The sampling distribution of an EDF statistic under the Gaussian null
depends on the statistic, the sample size n, and on whether mean and
variance were estimated from the data.  Rather than relying on asymptotic
tables, :func:`gof_dist` simulates it directly:

  for each of m repetitions
    draw n i.i.d. Gaussian variates  x = ppf(u) * sigma + mu,
    re-estimate (mean, variance) from those n points,
    u01ize and compute the statistic exactly as for real data;
  sort the m values.

The sorted array is an empirical null CDF.  :func:`prob` evaluates it at an
observed statistic; ``1 - prob`` is the upper-tail p-value.

Randomness
----------
Repetitions are split into chunks of ``CHUNK_SIZE``.  Each chunk draws from
its own child generator spawned off the caller's generator, so a seeded run
yields the same CDF whether the chunks run in-process (``n_jobs=1``) or in a
process pool.  Runtime is O(m * n log n); large ``m * n`` is slow.
"""

from __future__ import annotations

import logging
import math
from concurrent.futures import ProcessPoolExecutor
from typing import Union

import numpy as np

from gaussgof.config import CHUNK_SIZE, DEFAULT_REPETITIONS
from gaussgof.errors import ConfigurationError, DomainError
from gaussgof.statistics import NO_MOD, GofMod, GofTest, gof_stat_inplace
from gaussgof.utils import check_mean_variance, mean_and_variance, normal_ppf

logger = logging.getLogger(__name__)

# Smallest uniform drawn, keeping ppf(u) finite.
_U_FLOOR = np.finfo(np.float64).tiny


def make_rng(rng: Union[np.random.Generator, int, None] = None) -> np.random.Generator:
    """Return a Generator: *rng* itself, one seeded by an int, or a fresh one.

    ``None`` draws fresh OS entropy, i.e. a non-reproducible run.
    """
    if isinstance(rng, np.random.Generator):
        return rng
    return np.random.default_rng(rng)


def gaussian_sample(n: int, mn_vr=(0.0, 1.0), *, rng: Union[np.random.Generator, int, None] = None) -> np.ndarray:
    """Draw *n* i.i.d. Gaussian variates by inverse-CDF sampling."""
    mu, var = check_mean_variance(mn_vr)
    u = make_rng(rng).uniform(_U_FLOOR, 1.0, size=n)
    return normal_ppf(u) * math.sqrt(var) + mu


def _simulate_chunk(
    n: int,
    mn_vr,
    gof: GofTest,
    mods: GofMod,
    reps: int,
    rng: np.random.Generator,
) -> np.ndarray:
    """Statistic values for *reps* synthetic samples (unsorted)."""
    out = np.empty(reps, dtype=np.float64)
    for k in range(reps):
        sample = gaussian_sample(n, mn_vr, rng=rng)
        out[k] = gof_stat_inplace(sample, mean_and_variance(sample), gof, mods)
    return out


def gof_dist(
    n: int,
    mn_vr=(0.0, 1.0),
    gof: GofTest = GofTest.A2,
    mods: GofMod = NO_MOD,
    m: int = DEFAULT_REPETITIONS,
    *,
    rng: Union[np.random.Generator, int, None] = None,
    n_jobs: int = 1,
    chunk_size: int = CHUNK_SIZE,
) -> np.ndarray:
    """Empirical CDF of statistic *gof* for Gaussian samples of size *n*.

    Parameters
    ----------
    n : int
        Sample size; at least 2 so a variance can be estimated.
    mn_vr : (float, float)
        Mean and variance of the generating Gaussian.
    gof : GofTest
        Statistic to simulate.
    mods : GofMod
        Corrections, applied exactly as for the observed statistic.
    m : int
        Number of repetitions (length of the returned CDF).
    rng : Generator, int or None
        Source of randomness; an int seeds a fresh generator and None uses
        OS entropy.
    n_jobs : int
        Worker processes.  1 runs in-process.
    chunk_size : int
        Repetitions per independently-seeded chunk.

    Returns
    -------
    (m,) float64 array, sorted ascending.
    """
    if n < 2:
        raise ConfigurationError(f"sample size must be >= 2 to estimate a variance, got {n}")
    if m < 1:
        raise ConfigurationError(f"repetition count must be positive, got {m}")
    if n_jobs < 1:
        raise ConfigurationError(f"n_jobs must be positive, got {n_jobs}")
    if chunk_size < 1:
        raise ConfigurationError(f"chunk_size must be positive, got {chunk_size}")
    mn_vr = check_mean_variance(mn_vr)
    gof = GofTest(gof)

    sizes = [min(chunk_size, m - start) for start in range(0, m, chunk_size)]
    children = make_rng(rng).spawn(len(sizes))
    logger.debug(
        "Simulating %s null CDF: n=%d, m=%d, mods=%s, %d chunks, n_jobs=%d",
        gof.short_name, n, m, mods, len(sizes), n_jobs,
    )

    if n_jobs == 1 or len(sizes) == 1:
        parts = [_simulate_chunk(n, mn_vr, gof, mods, reps, child) for reps, child in zip(sizes, children)]
    else:
        k = len(sizes)
        with ProcessPoolExecutor(max_workers=min(n_jobs, k)) as executor:
            parts = list(executor.map(
                _simulate_chunk, [n] * k, [mn_vr] * k, [gof] * k, [mods] * k, sizes, children,
            ))

    cdf = np.concatenate(parts)
    cdf.sort()
    return cdf


def prob(cdf, st: float) -> float:
    """Return ``P(x <= st)`` under the empirical CDF *cdf*.

    Counts entries at or below *st* via binary search; no interpolation
    between neighbouring entries is done, so the result moves in steps of
    1/len(cdf).
    """
    cdf = np.asarray(cdf, dtype=np.float64)
    if cdf.size == 0:
        raise DomainError("empirical CDF is empty")
    if math.isnan(st):
        raise DomainError("statistic is NaN")
    # TODO: interpolate via a local cubic fit of the CDF around st.
    return int(np.searchsorted(cdf, st, side="right")) / cdf.size


p_value = prob


def tail_prob(cdf, st: float) -> float:
    """Upper-tail probability ``P(x > st)``, the p-value of an EDF test."""
    return 1.0 - prob(cdf, st)
