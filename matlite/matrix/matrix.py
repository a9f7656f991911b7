"""
Dense Matrix Value Type

Row-major matrix of float64 values used both as the variable payload and
as the runtime value of expressions. Arithmetic follows MATLAB rules: equal
shapes combine elementwise, a 1x1 operand broadcasts as a scalar, and
multiplication is the row-by-column product.

Every operation allocates its result; inputs are never modified.
"""

import numbers
from enum import Enum
from typing import Callable, Iterable, List, Optional, Sequence, Tuple, Union

import numpy as np

from .errors import MatrixError, ReleasedMatrixError, ShapeMismatchError

INLINE_CAPACITY = 9

Scalar = Union[int, float]


class StorageKind(Enum):
    """Where a matrix keeps its elements"""
    INLINE = "inline"   # small fixed-capacity buffer, at most INLINE_CAPACITY elements
    HEAP = "heap"       # separately allocated block of rows*cols elements


def storage_for(rows: int, cols: int) -> StorageKind:
    return StorageKind.INLINE if rows * cols <= INLINE_CAPACITY else StorageKind.HEAP


class Matrix:
    """
    A rows x cols matrix stored as a flat row-major float64 buffer.

    Element (i, j) lives at ``data[cols * i + j]``. The storage kind is
    derived from the element count when the matrix is built; ``release``
    drops the buffer exactly once regardless of kind.
    """

    def __init__(self, rows: int, cols: int, data: Optional[Iterable[float]] = None):
        if not isinstance(rows, numbers.Integral) or not isinstance(cols, numbers.Integral):
            raise TypeError("Matrix dimensions must be integers")
        if rows < 0 or cols < 0:
            raise ValueError(f"Matrix dimensions must be non-negative, got ({rows}, {cols})")

        self.rows = int(rows)
        self.cols = int(cols)
        self._storage = storage_for(self.rows, self.cols)

        if data is None:
            self._data: Optional[np.ndarray] = np.empty(self.rows * self.cols, dtype=np.float64)
        else:
            buffer = np.array(data, dtype=np.float64).reshape(-1)
            if buffer.size != self.rows * self.cols:
                raise ValueError(
                    f"Expected {self.rows * self.cols} elements for a "
                    f"({self.rows} X {self.cols}) matrix, got {buffer.size}"
                )
            self._data = buffer

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[float]]) -> "Matrix":
        """Build a matrix from a list of equally long rows."""
        rows = [list(row) for row in rows]
        if not rows:
            return cls(0, 0, [])
        width = len(rows[0])
        if any(len(row) != width for row in rows):
            raise ValueError("All rows must have the same length")
        return cls(len(rows), width, [value for row in rows for value in row])

    # ------------------------------------------------------------------
    # Storage
    # ------------------------------------------------------------------

    @property
    def storage(self) -> StorageKind:
        return self._storage

    @property
    def released(self) -> bool:
        return self._data is None

    def release(self) -> None:
        """Drop the element buffer. Releasing twice is a no-op."""
        self._data = None

    @property
    def data(self) -> np.ndarray:
        """The flat row-major buffer."""
        if self._data is None:
            raise ReleasedMatrixError(self.shape)
        return self._data

    # ------------------------------------------------------------------
    # Shape and element access
    # ------------------------------------------------------------------

    @property
    def shape(self) -> Tuple[int, int]:
        return (self.rows, self.cols)

    @property
    def size(self) -> int:
        return self.rows * self.cols

    @property
    def is_scalar(self) -> bool:
        return is_scalar(self)

    def _index(self, i: int, j: int) -> int:
        if not (0 <= i < self.rows and 0 <= j < self.cols):
            raise IndexError(f"Index ({i}, {j}) out of range for ({self.rows} X {self.cols}) matrix")
        return self.cols * i + j

    def at(self, i: int, j: int) -> float:
        return float(self.data[self._index(i, j)])

    def set(self, i: int, j: int, value: float) -> None:
        self.data[self._index(i, j)] = value

    def get_row(self, row: int) -> List[float]:
        return [self.at(row, j) for j in range(self.cols)]

    def get_col(self, col: int) -> List[float]:
        return [self.at(i, col) for i in range(self.rows)]

    def as_array(self) -> np.ndarray:
        """A 2D copy of the elements."""
        return self.data.reshape(self.rows, self.cols).copy()

    def to_list(self) -> List[List[float]]:
        return self.as_array().tolist()

    def copy(self) -> "Matrix":
        return Matrix(self.rows, self.cols, self.data.copy())

    # ------------------------------------------------------------------
    # Operators
    # ------------------------------------------------------------------

    def __eq__(self, other) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self.data, other.data))

    __hash__ = None

    # Make numpy scalars defer to the reflected operators below.
    __array_ufunc__ = None

    def __add__(self, other):
        if isinstance(other, Matrix):
            return add(self, other)
        if isinstance(other, numbers.Real):
            return add_scalar(self, other)
        return NotImplemented

    def __radd__(self, other):
        if isinstance(other, numbers.Real):
            return add_scalar(self, other)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Matrix):
            return subtract(self, other)
        if isinstance(other, numbers.Real):
            return subtract_scalar(self, other)
        return NotImplemented

    def __rsub__(self, other):
        if isinstance(other, numbers.Real):
            return scalar_subtract(other, self)
        return NotImplemented

    def __mul__(self, other):
        if isinstance(other, Matrix):
            return multiply(self, other)
        if isinstance(other, numbers.Real):
            return multiply_scalar(self, other)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, numbers.Real):
            return multiply_scalar(self, other)
        return NotImplemented

    def __abs__(self) -> "Matrix":
        return absolute(self)

    def __repr__(self) -> str:
        if self.released:
            return f"Matrix({self.rows}, {self.cols}, <released>)"
        return f"Matrix({self.rows}, {self.cols}, {self.data.tolist()!r})"


# ----------------------------------------------------------------------
# Constructors
# ----------------------------------------------------------------------

def create_matrix(rows: int, cols: int) -> Matrix:
    """Allocate a matrix without initializing its elements."""
    return Matrix(rows, cols)


def zeros(rows: int, cols: int) -> Matrix:
    return Matrix(rows, cols, np.zeros(rows * cols))


def ones(rows: int, cols: int) -> Matrix:
    return Matrix(rows, cols, np.ones(rows * cols))


def eye(rows: int, cols: int) -> Matrix:
    """Ones on the main diagonal, zeros elsewhere. Need not be square."""
    return Matrix(rows, cols, np.eye(rows, cols).ravel())


def scalar(value: Scalar) -> Matrix:
    return Matrix(1, 1, [value])


# ----------------------------------------------------------------------
# Shape predicates
# ----------------------------------------------------------------------

def is_scalar(m: Matrix) -> bool:
    return m.rows == 1 and m.cols == 1


def can_add(m0: Matrix, m1: Matrix) -> bool:
    return is_scalar(m0) or is_scalar(m1) or m0.shape == m1.shape


def can_subtract(m0: Matrix, m1: Matrix) -> bool:
    return can_add(m0, m1)


def can_multiply(m0: Matrix, m1: Matrix) -> bool:
    return is_scalar(m0) or is_scalar(m1) or m0.cols == m1.rows


# ----------------------------------------------------------------------
# Scalar overloads
# ----------------------------------------------------------------------

def add_scalar(m: Matrix, value: Scalar) -> Matrix:
    return Matrix(m.rows, m.cols, m.data + value)


def subtract_scalar(m: Matrix, value: Scalar) -> Matrix:
    """m - value"""
    return Matrix(m.rows, m.cols, m.data - value)


def scalar_subtract(value: Scalar, m: Matrix) -> Matrix:
    """value - m"""
    return Matrix(m.rows, m.cols, value - m.data)


def multiply_scalar(m: Matrix, value: Scalar) -> Matrix:
    return Matrix(m.rows, m.cols, m.data * value)


# ----------------------------------------------------------------------
# Binary operations
# ----------------------------------------------------------------------

def add(m0: Matrix, m1: Matrix) -> Matrix:
    if not can_add(m0, m1):
        raise ShapeMismatchError("add", m0.shape, m1.shape)
    if is_scalar(m0):
        return add_scalar(m1, m0.data[0])
    if is_scalar(m1):
        return add_scalar(m0, m1.data[0])
    return Matrix(m0.rows, m0.cols, m0.data + m1.data)


def subtract(m0: Matrix, m1: Matrix) -> Matrix:
    if not can_subtract(m0, m1):
        raise ShapeMismatchError("subtract", m0.shape, m1.shape)
    if is_scalar(m0):
        return scalar_subtract(m0.data[0], m1)
    if is_scalar(m1):
        return subtract_scalar(m0, m1.data[0])
    return Matrix(m0.rows, m0.cols, m0.data - m1.data)


def multiply(m0: Matrix, m1: Matrix) -> Matrix:
    """Matrix product, or scalar scaling when either side is 1x1."""
    if not can_multiply(m0, m1):
        raise ShapeMismatchError("multiply", m0.shape, m1.shape)
    if is_scalar(m0):
        return multiply_scalar(m1, m0.data[0])
    if is_scalar(m1):
        return multiply_scalar(m0, m1.data[0])

    lhs = m0.data.reshape(m0.rows, m0.cols)
    rhs = m1.data.reshape(m1.rows, m1.cols)
    return Matrix(m0.rows, m1.cols, np.dot(lhs, rhs).ravel())


# ----------------------------------------------------------------------
# Elementwise functions
# ----------------------------------------------------------------------

def _elementwise(func: Callable[[np.ndarray], np.ndarray], m: Matrix) -> Matrix:
    # Out-of-domain inputs (asin(2), ...) produce NaN like the C library does.
    with np.errstate(invalid="ignore", divide="ignore"):
        return Matrix(m.rows, m.cols, func(m.data))


def absolute(m: Matrix) -> Matrix:
    return _elementwise(np.abs, m)


def sin(m: Matrix) -> Matrix:
    return _elementwise(np.sin, m)


def cos(m: Matrix) -> Matrix:
    return _elementwise(np.cos, m)


def tan(m: Matrix) -> Matrix:
    return _elementwise(np.tan, m)


def asin(m: Matrix) -> Matrix:
    return _elementwise(np.arcsin, m)


def acos(m: Matrix) -> Matrix:
    return _elementwise(np.arccos, m)


def atan(m: Matrix) -> Matrix:
    return _elementwise(np.arctan, m)


ELEMENTWISE_FUNCTIONS = {
    "abs": absolute,
    "sin": sin,
    "cos": cos,
    "tan": tan,
    "asin": asin,
    "acos": acos,
    "atan": atan,
}


__all__ = [
    "Matrix", "MatrixError", "ShapeMismatchError", "StorageKind", "INLINE_CAPACITY",
    "create_matrix", "zeros", "ones", "eye", "scalar",
    "is_scalar", "can_add", "can_subtract", "can_multiply",
    "add_scalar", "subtract_scalar", "scalar_subtract", "multiply_scalar",
    "add", "subtract", "multiply",
    "absolute", "sin", "cos", "tan", "asin", "acos", "atan",
    "ELEMENTWISE_FUNCTIONS",
]
