"""
Result Report
Holds the outcome of one matrix-product command and renders it for stdout.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable

from engimath.config import OUTPUT_DECIMALS

if TYPE_CHECKING:
    import numpy as np
    import numpy.typing as npt

HEADER = "--- Matrix-Vector Product Result ---"
FOOTER = "-" * len(HEADER)


def _format_number(value: float, decimals: int) -> str:
    value = float(value)
    if math.isnan(value):
        return "NaN"
    return f"{value:.{decimals}f}"


def format_vector(values: Iterable[float], decimals: int = OUTPUT_DECIMALS) -> str:
    """Format numbers as '[a, b, ...]' with a fixed number of decimals; NaN is spelled 'NaN'."""
    return "[" + ", ".join(_format_number(value, decimals) for value in values) + "]"


@dataclass(frozen=True)
class MatrixProductResult:
    dim: int
    input_vector: npt.NDArray[np.float64]
    output_vector: npt.NDArray[np.float64]

    def render(self) -> str:
        lines = [
            "",
            HEADER,
            f"Dimension: {self.dim}x{self.dim}",
            f"Input Vector: {format_vector(self.input_vector)}",
            f"Output Vector: {format_vector(self.output_vector)}",
            FOOTER,
            "",
        ]
        return "\n".join(lines)
