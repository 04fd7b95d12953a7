"""Pytest configuration to make the 'src' layout importable without installing.

This mirrors run.py so that ``import engimath`` works when tests are run
from the repository root or other locations.
"""

import logging
import os
import sys

import pytest

SRC_PATH = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "src")

if SRC_PATH not in sys.path:
    sys.path.insert(0, SRC_PATH)


@pytest.fixture(autouse=True)
def reset_engimath_logger():
    """Close handlers installed by setup_logging so tests do not leak streams or files."""
    yield
    logger = logging.getLogger("engimath")
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
