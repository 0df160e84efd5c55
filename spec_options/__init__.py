"""spec-options: Per-test options for specification test suites.

This package provides tools for:
- Reading and writing ``options.yml`` files of a spec test suite
- Merging options inherited along a test directory hierarchy
- Deciding whether an implementation runs, skips or expects to fail a test
- Editing options files in bulk from the command line

Example usage:
    >>> from spec_options import SpecOptions, resolve_options
    >>>
    >>> options = resolve_options(["spec/", "spec/core_functions/", "spec/core_functions/math/"])
    >>> options.get_mode("dart-sass")
    >>> options.precision()
    10
"""

__version__ = "0.1.0"

from .options import (
    DEFAULT_PRECISION,
    IGNORE_FOR,
    LIST_KEYS,
    PRECISION,
    TODO,
    WARNING_TODO,
    SpecOptions,
    normalize_option_key,
)
from .io import OPTIONS_FILENAME, load_options, resolve_options, save_options

__all__ = [
    "__version__",
    # Options record
    "SpecOptions",
    "normalize_option_key",
    "DEFAULT_PRECISION",
    "IGNORE_FOR",
    "LIST_KEYS",
    "PRECISION",
    "TODO",
    "WARNING_TODO",
    # File I/O
    "OPTIONS_FILENAME",
    "load_options",
    "resolve_options",
    "save_options",
]
