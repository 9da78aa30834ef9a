#!/usr/bin/env python3
"""Check if ga_beacon package is installed."""

import sys

try:
    import ga_beacon  # noqa: F401
    sys.exit(0)
except ImportError:
    sys.exit(1)
