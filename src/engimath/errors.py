"""
Error Taxonomy
Exceptions raised by the parser and the linear algebra kernel.
"""
from __future__ import annotations


class EngiMathError(Exception):
    """Base class for all errors reported by engimath."""

    prefix: str = "Error"

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"{self.prefix}: {reason}")


class InvalidInput(EngiMathError):
    """
    The command-line input is malformed.

    Raised for unparsable numbers, element-count mismatches and non-positive
    dimensions. Always detected before any computation runs.

    Attributes:
        expected: Expected element count, set only for count mismatches.
        actual: Actual element count, set only for count mismatches.
    """

    prefix = "Invalid input format"

    def __init__(self, reason: str, expected: int | None = None, actual: int | None = None) -> None:
        super().__init__(reason)
        self.expected = expected
        self.actual = actual


class CalculationFailed(EngiMathError):
    """The kernel rejected its arguments at the boundary."""

    prefix = "Calculation error"
