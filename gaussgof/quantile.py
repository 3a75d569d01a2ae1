"""Parzen "Qmid" quantiles of a sorted finite sample.

For motivation of this definition see Ma, Genton & Parzen (2011),
"Asymptotic properties of sample quantiles of discrete distributions".
It is the right generalization of the old "mid-ranking ties" idea from rank
correlation: every block of tied values is anchored at its mid-rank, and
the quantile interpolates linearly between the two anchors bracketing
position ``q * n``.  With no ties it reduces to ordinary order-statistic
interpolation; with ties it does not pile the answer onto a block edge.

Example::

    >>> parzen_quantiles([1, 1, 2, 4], [0, 0.5, 1])
    [1.0, 1.6666666666666667, 4.0]
"""

from __future__ import annotations

import math
from typing import Iterable, List, Sequence

from gaussgof.errors import DomainError


def parzen_quantile(x: Sequence[float], q: float) -> float:
    """Parzen Qmid quantile of the *sorted* sample *x* at level *q*.

    An empty sample yields the neutral value 0.0 instead of an error.
    Levels at or below 0.5/n give the minimum; at or above 1 - 0.5/n, the
    maximum.

    Raises
    ------
    DomainError
        If *q* is not finite.
    """
    n = len(x)
    if n < 1:
        return 0.0
    q = float(q)
    if not math.isfinite(q):
        raise DomainError(f"quantile level must be finite, got {q}")
    qn = q * n
    if qn <= 0.5:
        return float(x[0])
    if qn >= n - 0.5:
        return float(x[n - 1])

    # Tie block [i_lo, j_lo) containing position qn.
    j_lo = int(qn)
    i_lo = j_lo
    x_lo = x[i_lo]
    while i_lo > 0 and x[i_lo - 1] == x_lo:
        i_lo -= 1
    while j_lo < n and x[j_lo] == x_lo:
        j_lo += 1
    c_lo = 0.5 * (i_lo + j_lo)

    if c_lo <= qn:
        # Block is the low anchor; the next distinct block is the high one.
        i_hi = j_hi = j_lo
        x_hi = x[j_hi] if j_hi < n else x_lo
        while j_hi < n and x[j_hi] == x_hi:
            j_hi += 1
        c_hi = 0.5 * (i_hi + j_hi)
    else:
        # Block is the high anchor; scan down for the low one.
        c_hi, i_hi, x_hi = c_lo, i_lo, x_lo
        j_lo = i_lo = i_hi
        x_lo = x[i_lo - 1] if i_lo > 0 else x_hi
        while i_lo > 0 and x[i_lo - 1] == x_lo:
            i_lo -= 1
        c_lo = 0.5 * (i_lo + j_lo)

    r = (qn - c_lo) / (c_hi - c_lo)
    return float((1.0 - r) * x_lo + r * x_hi)


def parzen_quantiles(x: Sequence[float], qs: Iterable[float]) -> List[float]:
    """:func:`parzen_quantile` at each level in *qs*."""
    return [parzen_quantile(x, q) for q in qs]
