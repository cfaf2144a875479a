"""Pytest configuration for common-py tests."""

import os
import sys

# Ensure 'apps/common-py/src' is on sys.path for absolute 'users_common.*' imports
_TESTS_DIR = os.path.dirname(__file__)
_SRC_PATH = os.path.abspath(os.path.join(_TESTS_DIR, "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: marks tests as fast unit tests")
