"""Pytest configuration and shared fixtures for spec-options tests."""

import sys
from pathlib import Path

import pytest

# Add package to path
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from spec_options import SpecOptions

# Import options file generators
from tests.fixtures import create_options_tree, write_options_file


# ============================================================================
# Options Record Fixtures
# ============================================================================


@pytest.fixture
def empty_options() -> SpecOptions:
    """Options with no fields set."""
    return SpecOptions.from_yaml("")


@pytest.fixture
def todo_options() -> SpecOptions:
    """Parent options marking libsass as todo."""
    return SpecOptions({":todo": ["libsass"]})


@pytest.fixture
def ignore_options() -> SpecOptions:
    """Child options ignoring dart-sass."""
    return SpecOptions({":ignore_for": ["dart-sass"]})


@pytest.fixture
def full_options() -> SpecOptions:
    """Options with every field set."""
    return SpecOptions({
        ":ignore_for": ["libsass"],
        ":todo": ["dart-sass: sass/dart-sass#1234", "sass/libsass#2834"],
        ":warning_todo": ["dart-sass"],
        ":precision": 5,
    })


# ============================================================================
# Path Fixtures
# ============================================================================


@pytest.fixture
def options_tree(tmp_path: Path) -> list:
    """Create a spec hierarchy with options at three levels."""
    return create_options_tree(tmp_path)


@pytest.fixture
def todo_options_file(tmp_path: Path) -> Path:
    """Create a single options file with a todo entry."""
    return write_options_file(tmp_path / "spec" / "case", {":todo": ["libsass"]})
