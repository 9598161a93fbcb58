"""
Tessera Runtime Module
Render options, environment defaults and inline directives
"""

from .file_flags import (
    parse_file_flags,
    strip_file_flags,
)
from .options import (
    RenderOptions,
    apply_options,
)

__all__ = [
    'parse_file_flags',
    'strip_file_flags',
    'RenderOptions',
    'apply_options',
]
