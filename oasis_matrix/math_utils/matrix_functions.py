################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Free functions built on the public Matrix contract."""

from __future__ import annotations

from typing import List

from oasis_matrix.math_utils.matrix import Matrix
from oasis_matrix.math_utils.matrix_errors import DimensionMismatchError
from oasis_matrix.math_utils.matrix_errors import IncompatibleVectorShapeError
from oasis_matrix.math_utils.matrix_errors import InvalidShapeError


def element_sum(matrix: Matrix) -> float:
    """Return the sum of every element of a matrix."""
    acc: float = 0.0
    for i in range(matrix.row_count):
        for value in matrix.trusted_row(i):
            acc += value
    return acc


def element_mul(first: Matrix, second: Matrix) -> float:
    """Return the sum of elementwise products (Frobenius inner product).

    Raises:
        DimensionMismatchError: If the matrices have different shapes
    """
    if first.shape != second.shape:
        raise DimensionMismatchError(
            "element_mul requires matrices of the same shape: "
            f"{first.shape} != {second.shape}"
        )
    acc: float = 0.0
    for i in range(first.row_count):
        first_row: List[float] = first.trusted_row(i)
        second_row: List[float] = second.trusted_row(i)
        for j in range(first.column_count):
            acc += first_row[j] * second_row[j]
    return acc


def dot_product(left: Matrix, right: Matrix, *, strict: bool = False) -> float:
    """Return the inner product of two vectors stored as matrices.

    Orientation is decided from the shapes, in this order:

        1. Equal column counts exceeding the left row count: row vectors,
           row 0 of each operand is used.
        2. Equal row counts exceeding the left column count: column vectors,
           column 0 of each operand is used.

    Args:
        left: First vector
        right: Second vector
        strict: If True, both operands must also have exactly one row (row
            vectors) or exactly one column (column vectors)

    Raises:
        IncompatibleVectorShapeError: If no orientation applies
    """
    if left.column_count == right.column_count and left.column_count > left.row_count:
        if strict and (left.row_count != 1 or right.row_count != 1):
            raise IncompatibleVectorShapeError(
                f"Row vectors must have one row, got {left.shape} and {right.shape}"
            )
        left_row: List[float] = left.trusted_row(0)
        right_row: List[float] = right.trusted_row(0)
        acc: float = 0.0
        for column in range(left.column_count):
            acc += left_row[column] * right_row[column]
        return acc

    if left.row_count == right.row_count and left.row_count > left.column_count:
        if strict and (left.column_count != 1 or right.column_count != 1):
            raise IncompatibleVectorShapeError(
                "Column vectors must have one column, "
                f"got {left.shape} and {right.shape}"
            )
        acc = 0.0
        for row in range(left.row_count):
            acc += left.trusted_row(row)[0] * right.trusted_row(row)[0]
        return acc

    raise IncompatibleVectorShapeError(
        f"Cannot interpret shapes {left.shape} and {right.shape} "
        "as vectors of the same orientation"
    )


def transpose(matrix: Matrix) -> Matrix:
    """Return a new matrix with rows and columns swapped."""
    result: Matrix = Matrix(matrix.column_count, matrix.row_count, 0.0)
    for row in range(matrix.row_count):
        source: List[float] = matrix.trusted_row(row)
        for column in range(matrix.column_count):
            result.trusted_row(column)[row] = source[column]
    return result


def eye(dimension: int) -> Matrix:
    """Return the dimension x dimension identity matrix."""
    if dimension <= 0:
        raise InvalidShapeError(f"Identity dimension must be positive, got {dimension}")
    identity: Matrix = Matrix(dimension, dimension, 0.0)
    for i in range(dimension):
        identity.trusted_row(i)[i] = 1.0
    return identity
