"""
Pytest configuration for Tessera tests.
"""
import sys
import os

# Make `import tessera` work straight from a checkout (src/ layout)
_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
_SRC_DIR = os.path.join(_ROOT, 'src')

if _SRC_DIR not in sys.path:
	sys.path.insert(0, _SRC_DIR)
