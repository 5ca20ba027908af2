"""Main entry point for the lock checker."""

import sys

from tf_lock_checker.cli import main

if __name__ == "__main__":
    sys.exit(main())
