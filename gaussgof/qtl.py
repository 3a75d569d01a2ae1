"""Command-line Parzen quantiles of a column of numbers.

Reads one number per line on stdin and writes the Parzen-interpolated
quantiles for the probabilities given as arguments, space-separated on one
line.  E.g.::

    $ printf '1\\n1\\n2\\n4\\n' | gaussgof-qtl 0 .5 1
    1.0 1.6666666666666667 4.0
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional, Sequence, TextIO

from gaussgof.quantile import parzen_quantiles


def read_column(stream: TextIO) -> List[float]:
    """Parse one float per non-blank line of *stream*."""
    return [float(line.strip()) for line in stream if line.strip()]


def main(argv: Optional[Sequence[str]] = None, stdin: Optional[TextIO] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="gaussgof-qtl",
        description="Read one column of numbers on stdin; emit Parzen-interpolated "
                    "quantiles for the probabilities given.",
    )
    parser.add_argument("probs", nargs="+", type=float, help="probabilities in [0, 1]")
    args = parser.parse_args(argv)

    try:
        x = read_column(stdin if stdin is not None else sys.stdin)
    except ValueError as exc:
        parser.error(f"bad input on stdin: {exc}")
    x.sort()
    print(" ".join(repr(q) for q in parzen_quantiles(x, args.probs)))
    return 0


if __name__ == "__main__":
    sys.exit(main())
