"""
Run with: python -m whatday
"""
import sys

from whatday.main import main

if __name__ == "__main__":
    sys.exit(main())
