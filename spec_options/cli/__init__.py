"""Command-line interface for spec-options.

Provides CLI commands for inspecting and editing options files.

Example Usage
-------------
    # From command line:
    spec-options --help
    spec-options show spec/ spec/core_functions/
    spec-options mode spec/ spec/core_functions/ --impl dart-sass
    spec-options remove spec/core_functions/ --impl libsass --key todo
"""

from .main import cli, main

__all__ = [
    "cli",
    "main",
]
