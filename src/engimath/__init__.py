"""Dense matrix-vector products from comma-separated command-line input."""
from engimath.errors import EngiMathError, InvalidInput, CalculationFailed
from engimath.parsing import parse_input_vector, validate_dimension
from engimath.linalg import matrix_vector_product

__all__ = [
    "EngiMathError",
    "InvalidInput",
    "CalculationFailed",
    "parse_input_vector",
    "validate_dimension",
    "matrix_vector_product",
]
