from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np

from engimath.config import DELIMITER
from engimath.errors import InvalidInput

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


def validate_dimension(dim: int) -> int:
    """
    Check that a square matrix dimension is usable.

    Args:
        dim: The dimension requested on the command line.

    Raises:
        InvalidInput: If `dim` is zero or negative.

    Returns:
        The dimension, unchanged.
    """
    if dim <= 0:
        raise InvalidInput("dimension must be greater than zero")
    return dim


def _parse_token(token: str) -> float:
    # float() also accepts "1_000" and non-ASCII digits; neither is part of the input format
    if "_" in token or not token.isascii():
        raise ValueError(f"could not convert string to float: {token!r}")
    return float(token)


def parse_input_vector(text: str, expected_len: int) -> npt.NDArray[np.float64]:
    """
    Parse a comma-separated list of numbers into a read-only float64 array.

    Every token is stripped of surrounding whitespace and parsed as a 64-bit
    float. NaN and infinity spellings are accepted and passed through.

    Args:
        text: The comma-separated numbers, e.g. "2, 0, 0, 3".
        expected_len: Number of elements the string must contain.

    Raises:
        InvalidInput: If a token is not a number, or if the number of parsed
            elements differs from `expected_len`.

    Returns:
        A 1-D array with `expected_len` elements.
    """
    tokens = [token.strip() for token in text.split(DELIMITER)]
    try:
        values = [_parse_token(token) for token in tokens]
    except ValueError as e:
        logger.debug(f"Failed to parse {text!r}: {e}")
        raise InvalidInput(
            "All elements must be valid floating-point numbers and separated by commas."
        ) from e

    if len(values) != expected_len:
        raise InvalidInput(
            f"Expected {expected_len} elements in the input string, but found {len(values)}.",
            expected=expected_len,
            actual=len(values),
        )

    array = np.array(values, dtype=np.float64)
    array.flags.writeable = False
    logger.debug(f"Parsed {len(array)} elements.")
    return array
