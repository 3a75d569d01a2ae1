"""Parzen quantiles of stdin -- thin wrapper around gaussgof.qtl.

CLI usage::

    printf '1\n1\n2\n4\n' | python scripts/qtl.py 0 .5 1
"""

import sys

from gaussgof.qtl import main  # noqa: F401

if __name__ == "__main__":
    sys.exit(main())
