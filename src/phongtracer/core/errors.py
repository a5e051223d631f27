# core/errors.py


class MatrixError(Exception):
    """Base class for failures of matrix algebra."""


class OutOfMatrixBorderError(MatrixError, IndexError):
    def __init__(self, row: int, col: int, order: int):
        super().__init__(f"({row}, {col}) is outside a {order}x{order} matrix")
        self.row = row
        self.col = col
        self.order = order


class MatrixNotInvertibleError(MatrixError, ValueError):
    def __init__(self, determinant: float):
        super().__init__(f"matrix is not invertible (determinant {determinant})")
        self.determinant = determinant


class No2x2SubmatrixError(MatrixError, ValueError):
    def __init__(self):
        super().__init__("a 2x2 matrix has no submatrix")


class InvalidTupleError(ValueError):
    """Raised when a tuple's w is neither 0 (vector) nor 1 (point)."""

    def __init__(self, w: float):
        super().__init__(f"invalid w value: {w}")
        self.w = w


class OutOfCanvasBorderError(IndexError):
    def __init__(self, x: int, y: int, width: int, height: int):
        super().__init__(f"pixel ({x}, {y}) is outside a {width}x{height} canvas")
        self.x = x
        self.y = y
