#!/usr/bin/env python3
"""Run the tessera CLI from a source checkout without installing it."""

import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(os.path.abspath(__file__)), 'src'))

from tessera.cli.main import main

if __name__ == "__main__":
    main()
