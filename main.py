#!/usr/bin/env python3
"""
Main Application Entry Point

Command-line checker for slot validators.
"""

import sys

from slot_validators.cli import main

if __name__ == '__main__':
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        sys.exit(1)
