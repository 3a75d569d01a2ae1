"""
gaussgof -- EDF goodness-of-fit tests for a Gaussian shape.

The package asks whether a numeric sample plausibly came from a Gaussian
and quantifies how far it departs, using the empirical-distribution-function
statistics of D'Agostino & Stephens, *Goodness-of-Fit Techniques* (1986),
with their finite-sample and estimated-parameter corrections.  Null
distributions are simulated by Monte Carlo for the actual sample size, so
p-values do not depend on asymptotic tables.

Key exports
-----------
gauss_gof_test : function
    One-call test of a sample: statistics, simulated null CDFs, p-values.
GofTestResult : dataclass
    Structured result container with a ``summary()`` table.
gof_stat, gof_stat_inplace : function
    A single statistic for a sample (copy-preserving / clobbering).
u01ize, u01ized : function
    z-score -> sort -> probability integral transform.
gof_dist : function
    Monte Carlo empirical null CDF of a statistic for sample size n.
prob, p_value, tail_prob : function
    Empirical CDF lookup; ``tail_prob`` is the upper-tail p-value.
parzen_quantile : function
    Tie-aware Parzen "Qmid" quantile of a sorted sample.
GofTest, GofMod : enums
    Which statistic, and which corrections.
"""

from gaussgof.errors import ConfigurationError, DomainError, GofError
from gaussgof.gof_test import GofTestResult, gauss_gof_test
from gaussgof.normalize import pitz, u01ize, u01ized, zscore
from gaussgof.null_models import gof_dist, p_value, prob, tail_prob
from gaussgof.quantile import parzen_quantile, parzen_quantiles
from gaussgof.statistics import (
    NO_MOD,
    GofMod,
    GofTest,
    anderson_darling,
    cramer_von_mises,
    gof_stat,
    gof_stat_inplace,
    kolmogorov_smirnov,
    kuiper_v,
    watson_u2,
)
from gaussgof.utils import mean_and_variance, normal_cdf, normal_ppf

__version__ = "0.1.0"

__all__ = [
    "gauss_gof_test",
    "GofTestResult",
    "gof_stat",
    "gof_stat_inplace",
    "kolmogorov_smirnov",
    "kuiper_v",
    "cramer_von_mises",
    "watson_u2",
    "anderson_darling",
    "zscore",
    "pitz",
    "u01ize",
    "u01ized",
    "gof_dist",
    "prob",
    "p_value",
    "tail_prob",
    "parzen_quantile",
    "parzen_quantiles",
    "mean_and_variance",
    "normal_cdf",
    "normal_ppf",
    "GofTest",
    "GofMod",
    "NO_MOD",
    "GofError",
    "DomainError",
    "ConfigurationError",
]
