"""Integer matrices with a single-character name and their basic operations."""

from __future__ import annotations

import re
from dataclasses import dataclass, replace

_INT32_SPAN = 1 << 32
_INT32_MIN = -(1 << 31)
_MAX_PRINTABLE_DIM = 1000

_HEADER = re.compile(r"\s*(\d+)\s+(\d+)", re.ASCII)
_NUMBER = re.compile(r"[+-]?\d+", re.ASCII)


class MatrixError(ValueError):
    """Raised for malformed matrix definitions and incompatible shapes."""


def _to_int32(value: int) -> int:
    return (value - _INT32_MIN) % _INT32_SPAN + _INT32_MIN


@dataclass(frozen=True)
class Matrix:
    """A named matrix of 32-bit integers stored in row-major order."""

    name: str
    num_rows: int
    num_cols: int
    values: tuple[int, ...] = ()

    def __post_init__(self) -> None:
        values = tuple(self.values)
        if self.num_rows < 0 or self.num_cols < 0:
            raise MatrixError("matrix dimensions must not be negative")
        if len(values) != self.num_rows * self.num_cols:
            raise MatrixError(
                f"a {self.num_rows}x{self.num_cols} matrix needs "
                f"{self.num_rows * self.num_cols} values, got {len(values)}"
            )
        object.__setattr__(self, "values", values)

    def renamed(self, name: str) -> Matrix:
        """Return a copy of this matrix carrying another name."""
        return replace(self, name=name)

    def rows(self) -> list[tuple[int, ...]]:
        """Return the matrix as a list of row tuples."""
        cols = self.num_cols
        return [self.values[start:start + cols] for start in range(0, len(self.values), cols or 1)][
            : self.num_rows
        ] if cols else [() for _ in range(self.num_rows)]

    def __add__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return add_matrices(self, other)

    def __matmul__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return multiply_matrices(self, other)

    def __str__(self) -> str:
        return format_matrix(self)


def add_matrices(first: Matrix, second: Matrix) -> Matrix:
    """Return the element-wise sum of two matrices of the same shape."""
    if (first.num_rows, first.num_cols) != (second.num_rows, second.num_cols):
        raise MatrixError(
            f"cannot add a {first.num_rows}x{first.num_cols} matrix "
            f"to a {second.num_rows}x{second.num_cols} matrix"
        )
    values = (_to_int32(a + b) for a, b in zip(first.values, second.values))
    return Matrix("?", first.num_rows, first.num_cols, tuple(values))


def multiply_matrices(first: Matrix, second: Matrix) -> Matrix:
    """Return the matrix product first * second."""
    if first.num_cols != second.num_rows:
        raise MatrixError(
            f"cannot multiply a {first.num_rows}x{first.num_cols} matrix "
            f"by a {second.num_rows}x{second.num_cols} matrix"
        )
    columns = list(zip(*second.rows())) if second.num_rows else [()] * second.num_cols
    values = tuple(
        _to_int32(sum(a * b for a, b in zip(row, column)))
        for row in first.rows()
        for column in columns
    )
    return Matrix("?", first.num_rows, second.num_cols, values)


def transpose(matrix: Matrix) -> Matrix:
    """Return the transpose of a matrix."""
    if matrix.num_rows and matrix.num_cols:
        values = tuple(v for column in zip(*matrix.rows()) for v in column)
    else:
        values = ()
    return Matrix("?", matrix.num_cols, matrix.num_rows, values)


def create_matrix(name: str, expr: str) -> Matrix:
    """Parse a definition such as ``"2 2 [1 2 ; 3 4]"`` into a named matrix."""
    header = _HEADER.match(expr)
    if header is None:
        raise MatrixError(f"matrix definition must start with two dimensions: {expr!r}")
    num_rows, num_cols = int(header.group(1)), int(header.group(2))
    total = num_rows * num_cols

    bracket = expr.find("[", header.end())
    body = expr[bracket + 1:] if bracket >= 0 else ""
    numbers = []
    for match in _NUMBER.finditer(body):
        if len(numbers) == total:
            break
        numbers.append(_to_int32(int(match.group())))
    if len(numbers) < total:
        raise MatrixError(
            f"matrix {name!r} declares {total} values but only {len(numbers)} were given"
        )
    return Matrix(name, num_rows, num_cols, tuple(numbers))


def format_matrix(matrix: Matrix) -> str:
    """Render a matrix as its dimensions followed by its values, space separated."""
    if matrix.num_rows > _MAX_PRINTABLE_DIM or matrix.num_cols > _MAX_PRINTABLE_DIM:
        raise MatrixError("matrix is too large to print")
    return f"{matrix.num_rows} {matrix.num_cols} " + " ".join(map(str, matrix.values))