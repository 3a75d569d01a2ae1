"""Gaussian goodness-of-fit test -- thin wrapper around gaussgof.gof_test.

Lets ``python scripts/gof.py`` work from the repository root without an
installed console script.

CLI usage::

    python scripts/gof.py -g k,v,c,w,a -e prob 15 16 17 18 19 19 20 20 21 22 22 23 23 23 24 27

For library usage::

    from gaussgof import gauss_gof_test
"""

import sys

from gaussgof.gof_test import main  # noqa: F401

if __name__ == "__main__":
    sys.exit(main())
