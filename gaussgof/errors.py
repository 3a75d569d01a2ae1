"""Exceptions raised by the goodness-of-fit core.

Every failure in this package is a caller contract violation, never a
transient condition, so nothing here is retried.  Both concrete errors also
derive from ``ValueError`` so generic numeric code can catch them without
importing this module.
"""


class GofError(Exception):
    """Base class for all gaussgof errors."""


class DomainError(GofError, ValueError):
    """Raised for degenerate numeric input.

    Examples: zero, negative or non-finite variance (a constant sample),
    an empty sample handed to a statistic, a PIT value of exactly 0 or 1
    reaching the Anderson-Darling logarithm, or an empty null CDF.
    """


class ConfigurationError(GofError, ValueError):
    """Raised for a nonsensical parameter combination.

    Examples: a non-positive Monte Carlo repetition count or sample size,
    an unknown test or modification name, or a significance level outside
    the open unit interval.
    """
