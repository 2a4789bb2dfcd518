"""
fpbelt CLI entry point.

Usage:
    python -m fpbelt.cli join a b c
    python -m fpbelt.cli same a,b b,a
    python -m fpbelt.cli insert x,y a,b --at 1
    python -m fpbelt.cli parse-date 2020-01-01
    python -m fpbelt.cli parse-url https://example.com/?q=1 --param q
"""

import sys
from .main import main

if __name__ == "__main__":
    sys.exit(main())
