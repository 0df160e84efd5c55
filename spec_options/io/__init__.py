"""I/O utilities for spec-options.

Provides reading, writing and hierarchical resolution of options files.
"""

from .files import OPTIONS_FILENAME, load_options, resolve_options, save_options

__all__ = [
    "OPTIONS_FILENAME",
    "load_options",
    "resolve_options",
    "save_options",
]
