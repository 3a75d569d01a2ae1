"""Package-wide constants.

This module centralizes the tuneable defaults for the goodness-of-fit
pipeline -- Monte Carlo repetition count, significance level, chunking of
the null-distribution simulation -- so that the library functions, the
command-line tools and the tests import a single source of truth.
"""

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

# Number of synthetic n-samples drawn to build one empirical null CDF.
# The p-value resolution is 1/DEFAULT_REPETITIONS, so 5000 resolves
# tail probabilities down to 2e-4.
DEFAULT_REPETITIONS = 5000

# Significance level at which a test counts as a "significant departure"
# from a Gaussian shape (CLI exit status counts these).
DEFAULT_ALPHA = 0.05

# Repetitions per Monte Carlo chunk.  Each chunk draws from its own child
# generator spawned off the caller's generator, so a seeded run gives the
# same null CDF whether the chunks run sequentially or in worker processes.
CHUNK_SIZE = 500

# Seed used by the example scripts.  Library calls never fall back to it:
# passing rng=None means fresh OS entropy.
SEED = 42

# Canonical short display names, keyed by the long test names.
GOF_NAMES = {
    "kolmogorovSmirnovD": "D",
    "vKuiper": "V",
    "cramerVonMisesW2": "W^2",
    "watsonU2": "U^2",
    "andersonDarlingA2": "A^2",
}
