"""Test suite for spec-options.

Test organization:
- fixtures/: Options file generators and test utilities
- unit/: Unit tests for the options record, file I/O and CLI

Run tests with:
    pytest tests/
    pytest tests/unit/
    pytest tests/ -v --tb=short
"""
