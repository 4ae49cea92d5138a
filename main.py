"""
Launcher for running Video Tools from a source checkout.

Equivalent to `python -m videotools` or the installed `videotools` script.
"""
import sys

from videotools.__main__ import main

if __name__ == "__main__":
    sys.exit(main())
