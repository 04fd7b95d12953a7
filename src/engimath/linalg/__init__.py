"""
The LINALG layer holds the numeric kernels.
It has NO knowledge of the command line or of text parsing.
"""
from engimath.linalg.kernel import matrix_vector_product

__all__ = ["matrix_vector_product"]
