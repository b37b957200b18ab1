"""
Entry point for running ip_notifier as a module.

This allows the package to be executed with: python -m ip_notifier
"""

import sys

from .main import main

if __name__ == "__main__":
    sys.exit(main())
