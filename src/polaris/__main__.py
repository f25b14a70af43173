"""
Run with: python -m polaris
"""
import sys

from polaris.main import main

if __name__ == "__main__":
    sys.exit(main())
