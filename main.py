#!/usr/bin/env python3
"""Wörterbuch version manager entry point"""

import sys

try:
    import aiohttp  # noqa
    import aiofiles  # noqa
    import pydantic  # noqa
except ImportError as e:
    print(f"Critical import failed: {e}")
    print("Please run: pip install -e .")
    sys.exit(1)

from wbvm.cli import main

if __name__ == "__main__":
    sys.dont_write_bytecode = True
    sys.exit(main())
