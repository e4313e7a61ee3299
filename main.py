"""
Main entry point for SEE Links
"""
import sys

from seelink.cli import main

if __name__ == "__main__":
    sys.exit(main())
