#!/usr/bin/env python3
"""statuslog - Entry point"""

import sys

from statuslog.cli import main

if __name__ == "__main__":
    sys.exit(main())
