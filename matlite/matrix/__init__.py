"""
matlite Matrix Package

Dense float64 matrices with MATLAB-style arithmetic: elementwise add and
subtract, row-by-column multiply, 1x1 scalar broadcasting and elementwise
transcendental functions. Shape errors are raised as ShapeMismatchError.
"""

from .errors import MatrixError, ShapeMismatchError, ReleasedMatrixError
from .matrix import (
    Matrix, StorageKind, INLINE_CAPACITY,
    create_matrix, zeros, ones, eye, scalar,
    is_scalar, can_add, can_subtract, can_multiply,
    add_scalar, subtract_scalar, scalar_subtract, multiply_scalar,
    add, subtract, multiply,
    absolute, sin, cos, tan, asin, acos, atan,
    ELEMENTWISE_FUNCTIONS,
)

__all__ = [
    "Matrix",
    "StorageKind",
    "INLINE_CAPACITY",
    "MatrixError",
    "ShapeMismatchError",
    "ReleasedMatrixError",
    "create_matrix",
    "zeros",
    "ones",
    "eye",
    "scalar",
    "is_scalar",
    "can_add",
    "can_subtract",
    "can_multiply",
    "add_scalar",
    "subtract_scalar",
    "scalar_subtract",
    "multiply_scalar",
    "add",
    "subtract",
    "multiply",
    "absolute",
    "sin",
    "cos",
    "tan",
    "asin",
    "acos",
    "atan",
    "ELEMENTWISE_FUNCTIONS",
]
