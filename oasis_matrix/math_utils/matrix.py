################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Dense row-major matrix of double-precision scalars."""

from __future__ import annotations

import logging
import math
import numbers
import operator
from typing import Any
from typing import Callable
from typing import List
from typing import Sequence
from typing import Tuple

from oasis_matrix.math_utils.matrix_errors import DimensionMismatchError
from oasis_matrix.math_utils.matrix_errors import InvalidShapeError
from oasis_matrix.math_utils.matrix_errors import OutOfRangeError
from oasis_matrix.math_utils.matrix_errors import RaggedShapeError


_LOG: logging.Logger = logging.getLogger(__name__)


ScalarOp = Callable[[float, float], float]


def ieee_divide(numerator: float, denominator: float) -> float:
    """Divide with IEEE-754 semantics, returning inf or nan on zero divisors."""
    if denominator != 0.0:
        return numerator / denominator
    if numerator == 0.0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def _is_scalar(value: Any) -> bool:
    return isinstance(value, numbers.Real)


class Matrix:
    """Rows x columns grid of floats with algebraic operators.

    Responsibility:
        Own the element storage of a dense matrix and implement its
        arithmetic contract: checked access, scalar operators, elementwise
        sum and difference, matrix product, and equality.

    Data contract:
        - row_count > 0 and column_count > 0 for every instance.
        - Storage is rectangular, one list of column_count floats per row.
        - Every stored element is a Python float.

    Shape changes:
        - The shape is fixed at construction. The only exception is the
          in-place product (``*=`` or ``@=``), which replaces the receiver
          with the product and therefore may change its shape.

    Access paths:
        - ``at``/``assign`` and ``matrix[row, column]`` are bounds-checked.
        - ``trusted_row`` returns the live storage row without any checks,
          for inner loops that have already validated their indices.

    Numeric semantics:
        - Scalar division by zero follows IEEE-754 and yields inf or nan
          per element instead of raising.
        - Product accumulation is carried out in float.

    Failure policy:
        - Operators validate operand shapes before writing anything, so a
          failed in-place operator leaves the receiver unchanged.
    """

    __slots__ = ("_row_count", "_column_count", "_rows")

    # Mutable value type
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, rows: int, columns: int, value: float = 0.0) -> None:
        """Create a rows x columns matrix with every cell set to value."""
        Matrix._validate_shape(rows, columns)
        fill: float = float(value)
        self._row_count: int = rows
        self._column_count: int = columns
        self._rows: List[List[float]] = [[fill] * columns for _ in range(rows)]

    @classmethod
    def from_rows(cls, table: Sequence[Sequence[float]]) -> Matrix:
        """Create a matrix from a table of rows."""
        if len(table) == 0:
            raise InvalidShapeError("Matrix table must contain at least one row")
        columns: int = len(table[0])
        for index, row in enumerate(table):
            if len(row) != columns:
                raise RaggedShapeError(
                    f"Matrix row {index} has {len(row)} elements, "
                    f"expected {columns} like row 0"
                )
        Matrix._validate_shape(len(table), columns)
        storage: List[List[float]] = [[float(value) for value in row] for row in table]
        return cls._from_storage(storage, len(table), columns)

    @classmethod
    def from_matrix(cls, other: Matrix) -> Matrix:
        """Create a deep copy of another matrix."""
        storage: List[List[float]] = [list(row) for row in other._rows]
        return cls._from_storage(storage, other._row_count, other._column_count)

    @classmethod
    def _from_storage(
        cls, storage: List[List[float]], rows: int, columns: int
    ) -> Matrix:
        # Takes ownership of storage, caller guarantees the shape
        matrix: Matrix = cls.__new__(cls)
        matrix._row_count = rows
        matrix._column_count = columns
        matrix._rows = storage
        return matrix

    def copy(self) -> Matrix:
        """Return a deep copy of this matrix."""
        return Matrix.from_matrix(self)

    def __copy__(self) -> Matrix:
        return self.copy()

    def __deepcopy__(self, memo: dict[int, Any]) -> Matrix:
        return self.copy()

    @property
    def row_count(self) -> int:
        return self._row_count

    @property
    def column_count(self) -> int:
        return self._column_count

    @property
    def shape(self) -> Tuple[int, int]:
        return (self._row_count, self._column_count)

    def tolist(self) -> List[List[float]]:
        """Return the elements as a nested list copy."""
        return [list(row) for row in self._rows]

    def at(self, row: int, column: int) -> float:
        """Return an element, raising OutOfRangeError outside the matrix."""
        self._check_range(row, column)
        return self._rows[row][column]

    def assign(self, row: int, column: int, value: float) -> None:
        """Set an element, raising OutOfRangeError outside the matrix."""
        self._check_range(row, column)
        self._rows[row][column] = float(value)

    def trusted_row(self, row: int) -> List[float]:
        """Return the live storage of a row without bounds checking.

        Writes through the returned list modify the matrix. Indexing it is
        plain list indexing, so the caller must keep row and column indices
        within the matrix shape.
        """
        return self._rows[row]

    def __getitem__(self, key: Tuple[int, int]) -> float:
        row, column = Matrix._unpack_key(key)
        return self.at(row, column)

    def __setitem__(self, key: Tuple[int, int], value: float) -> None:
        row, column = Matrix._unpack_key(key)
        self.assign(row, column, value)

    #
    # In-place operators
    #

    def __iadd__(self, other: Any) -> Matrix:
        return self._apply_in_place(other, operator.add, "add")

    def __isub__(self, other: Any) -> Matrix:
        return self._apply_in_place(other, operator.sub, "subtract")

    def __imul__(self, other: Any) -> Matrix:
        if isinstance(other, Matrix):
            product: Matrix = _product(self, other)
            if product.shape != self.shape:
                _LOG.debug(
                    "In-place product resized matrix from %s to %s",
                    self.shape,
                    product.shape,
                )
            self._row_count = product._row_count
            self._column_count = product._column_count
            self._rows = product._rows
            return self
        if _is_scalar(other):
            self._map_in_place(float(other), operator.mul)
            return self
        return NotImplemented

    def __imatmul__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.__imul__(other)

    def __itruediv__(self, other: Any) -> Matrix:
        if _is_scalar(other):
            self._map_in_place(float(other), ieee_divide)
            return self
        return NotImplemented

    #
    # Binary operators
    #

    def __add__(self, other: Any) -> Matrix:
        return self._apply_binary(other, operator.add, "add")

    def __radd__(self, other: Any) -> Matrix:
        if _is_scalar(other):
            return self._map(float(other), operator.add)
        return NotImplemented

    def __sub__(self, other: Any) -> Matrix:
        return self._apply_binary(other, operator.sub, "subtract")

    def __mul__(self, other: Any) -> Matrix:
        if isinstance(other, Matrix):
            return _product(self, other)
        if _is_scalar(other):
            return self._map(float(other), operator.mul)
        return NotImplemented

    def __rmul__(self, other: Any) -> Matrix:
        if _is_scalar(other):
            return self._map(float(other), operator.mul)
        return NotImplemented

    def __matmul__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return _product(self, other)

    def __truediv__(self, other: Any) -> Matrix:
        if _is_scalar(other):
            return self._map(float(other), ieee_divide)
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.shape != other.shape:
            return False
        for left_row, right_row in zip(self._rows, other._rows):
            for left, right in zip(left_row, right_row):
                if left != right:
                    return False
        return True

    def __ne__(self, other: object) -> bool:
        equal: bool = self.__eq__(other)
        if equal is NotImplemented:
            return NotImplemented
        return not equal

    def __repr__(self) -> str:
        return f"Matrix.from_rows({self.tolist()!r})"

    #
    # Helpers
    #

    def _apply_in_place(self, other: Any, op: ScalarOp, verb: str) -> Matrix:
        if isinstance(other, Matrix):
            self._require_same_shape(other, verb)
            for left_row, right_row in zip(self._rows, other._rows):
                for j in range(self._column_count):
                    left_row[j] = op(left_row[j], right_row[j])
            return self
        if _is_scalar(other):
            self._map_in_place(float(other), op)
            return self
        return NotImplemented

    def _apply_binary(self, other: Any, op: ScalarOp, verb: str) -> Matrix:
        if isinstance(other, Matrix):
            self._require_same_shape(other, verb)
            storage: List[List[float]] = [
                [op(left, right) for left, right in zip(left_row, right_row)]
                for left_row, right_row in zip(self._rows, other._rows)
            ]
            return Matrix._from_storage(storage, self._row_count, self._column_count)
        if _is_scalar(other):
            return self._map(float(other), op)
        return NotImplemented

    def _map(self, scalar: float, op: ScalarOp) -> Matrix:
        storage: List[List[float]] = [
            [op(value, scalar) for value in row] for row in self._rows
        ]
        return Matrix._from_storage(storage, self._row_count, self._column_count)

    def _map_in_place(self, scalar: float, op: ScalarOp) -> None:
        for row in self._rows:
            for j in range(self._column_count):
                row[j] = op(row[j], scalar)

    def _require_same_shape(self, other: Matrix, verb: str) -> None:
        if self.shape != other.shape:
            raise DimensionMismatchError(
                f"Cannot {verb} matrices with different shapes: "
                f"{self.shape} != {other.shape}"
            )

    def _check_range(self, row: int, column: int) -> None:
        if row < 0 or row >= self._row_count:
            raise OutOfRangeError(
                f"row (which is {row}) is outside [0, {self._row_count})"
            )
        if column < 0 or column >= self._column_count:
            raise OutOfRangeError(
                f"column (which is {column}) is outside [0, {self._column_count})"
            )

    @staticmethod
    def _unpack_key(key: Any) -> Tuple[int, int]:
        if not isinstance(key, tuple) or len(key) != 2:
            raise TypeError("Matrix indices must be a (row, column) pair")
        return key[0], key[1]

    @staticmethod
    def _validate_shape(rows: int, columns: int) -> None:
        if rows <= 0 or columns <= 0:
            raise InvalidShapeError(
                f"Matrix shape must be positive, got ({rows}, {columns})"
            )


def _product(left: Matrix, right: Matrix) -> Matrix:
    """Return the matrix product of left and right in a fresh buffer."""
    if left.column_count != right.row_count:
        raise DimensionMismatchError(
            f"Matrix product requires left column count ({left.column_count}) "
            f"== right row count ({right.row_count})"
        )
    inner: int = left.column_count
    columns: int = right.column_count
    right_rows: List[List[float]] = [right.trusted_row(k) for k in range(inner)]
    storage: List[List[float]] = []
    for i in range(left.row_count):
        left_row: List[float] = left.trusted_row(i)
        result_row: List[float] = [0.0] * columns
        for j in range(columns):
            acc: float = 0.0
            for k in range(inner):
                acc += left_row[k] * right_rows[k][j]
            result_row[j] = acc
        storage.append(result_row)
    return Matrix._from_storage(storage, left.row_count, columns)
