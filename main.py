"""
Show jumping class scorer
"""
import sys

from showjumping.cli import main

if __name__ == "__main__":
    sys.exit(main())
