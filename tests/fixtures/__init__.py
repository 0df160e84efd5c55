"""Test fixtures for spec-options.

Provides options file generators and test utilities.
"""

from .mock_options import (
    create_options_tree,
    write_options_file,
)

__all__ = [
    "create_options_tree",
    "write_options_file",
]
