"""
Errors raised by the matrix engine.

Shape problems are recoverable: once shapes come from user input they are
bad data, not a bug, so they surface as ``ShapeMismatchError`` instead of an
assertion.
"""

from typing import Optional, Tuple

Shape = Tuple[int, int]


class MatrixError(Exception):
    """Base class for matrix engine errors."""

    def __init__(self, message: str, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.code = code

    def __str__(self) -> str:
        if self.code:
            return f"[{self.code}] {self.message}"
        return self.message


class ShapeMismatchError(MatrixError):
    """Operands of a binary operation have incompatible shapes."""

    def __init__(self, operation: str, lhs_shape: Shape, rhs_shape: Shape):
        self.operation = operation
        self.lhs_shape = lhs_shape
        self.rhs_shape = rhs_shape
        super().__init__(
            f"Cannot {operation} matrices of shape "
            f"({lhs_shape[0]} X {lhs_shape[1]}) and ({rhs_shape[0]} X {rhs_shape[1]})",
            code="M001"
        )


class ReleasedMatrixError(MatrixError):
    """The matrix storage was already released by its owner."""

    def __init__(self, shape: Shape):
        super().__init__(
            f"Matrix of shape ({shape[0]} X {shape[1]}) has been released",
            code="M002"
        )


ERROR_CODES = {
    "M001": "Incompatible matrix shapes",
    "M002": "Use of released matrix",
}
