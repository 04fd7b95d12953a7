"""
Dense Linear Algebra Kernel
Matrix-vector product of a row-major flattened square matrix.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np

from engimath.errors import CalculationFailed

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


def _as_flat_array(values: npt.ArrayLike, name: str) -> npt.NDArray[np.float64]:
    try:
        array = np.asarray(values)
    except (TypeError, ValueError) as e:
        raise CalculationFailed(f"{name} must contain only real numbers.") from e
    # no implicit casts from strings, complex or object arrays
    if array.dtype.kind not in "biuf":
        raise CalculationFailed(f"{name} must contain only real numbers, got dtype {array.dtype}.")
    if array.ndim != 1:
        raise CalculationFailed(f"{name} must be one-dimensional, got {array.ndim} dimensions.")
    return array.astype(np.float64, copy=False)


def matrix_vector_product(
    matrix: npt.ArrayLike,
    vector: npt.ArrayLike,
    dim: int,
) -> npt.NDArray[np.float64]:
    """
    Compute the product of a square matrix and a vector.

    output[i] = sum_j matrix[i * dim + j] * vector[j], for i in [0, dim)

    Neither input is modified; the result is a newly allocated array.
    Floating point overflow or NaN propagation is not treated as an error.

    Args:
        matrix: The dim x dim matrix, flattened in row-major order.
        vector: The vector with dim elements.
        dim: The dimension of the square matrix.

    Raises:
        CalculationFailed: If `dim` is not a positive integer, or if the lengths of
            `matrix` and `vector` do not match `dim`.

    Returns:
        The output vector with dim elements.
    """
    if isinstance(dim, bool) or not isinstance(dim, (int, np.integer)):
        raise CalculationFailed(f"Dimension must be an integer, got {dim!r}.")
    if dim <= 0:
        raise CalculationFailed(f"Dimension must be positive, got {dim}.")

    m = _as_flat_array(matrix, "Matrix")
    v = _as_flat_array(vector, "Vector")

    if m.size != dim * dim:
        raise CalculationFailed(f"Matrix has {m.size} elements, expected {dim * dim} for dimension {dim}.")
    if v.size != dim:
        raise CalculationFailed(f"Vector has {v.size} elements, expected {dim}.")

    # C-order reshape keeps consecutive elements in the same row
    rows = m.reshape((dim, dim), order="C")
    output = np.empty(dim, dtype=np.float64)
    with np.errstate(over="ignore", invalid="ignore"):
        for i in range(dim):
            output[i] = np.dot(rows[i], v)

    logger.debug(f"Computed {dim}x{dim} matrix-vector product.")
    return output
