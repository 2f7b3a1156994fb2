################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Tests for Matrix arithmetic operators."""

from __future__ import annotations

import math

import numpy as np
import pytest
from numpy.typing import NDArray

from oasis_matrix.math_utils.conversions import to_numpy
from oasis_matrix.math_utils.matrix import Matrix
from oasis_matrix.math_utils.matrix_errors import DimensionMismatchError
from oasis_matrix.math_utils.matrix_functions import eye


def _a() -> Matrix:
    return Matrix.from_rows([[1.0, 2.0], [3.0, 4.0]])


def _b() -> Matrix:
    return Matrix.from_rows([[5.0, 6.0], [7.0, 8.0]])


def test_sum_and_product_scenario() -> None:
    """Checks the 2x2 reference sum and product."""
    assert _a() + _b() == Matrix.from_rows([[6.0, 8.0], [10.0, 12.0]])
    assert _a() * _b() == Matrix.from_rows([[19.0, 22.0], [43.0, 50.0]])
    assert _a() @ _b() == Matrix.from_rows([[19.0, 22.0], [43.0, 50.0]])


def test_difference() -> None:
    """Checks elementwise difference."""
    assert _b() - _a() == Matrix(2, 2, 4.0)


def test_binary_operators_leave_operands_unchanged() -> None:
    """Checks operands are not mutated by binary operators."""
    a: Matrix = _a()
    b: Matrix = _b()
    _ = a + b
    _ = a - b
    _ = a * b
    _ = a * 3.0
    assert a == _a()
    assert b == _b()


def test_sum_commutes() -> None:
    """Checks A + B == B + A."""
    a: Matrix = Matrix.from_rows([[0.5, -1.0, 2.0], [3.0, 4.5, -6.0]])
    b: Matrix = Matrix.from_rows([[1.5, 2.0, -2.0], [0.25, 0.0, 8.0]])
    assert a + b == b + a


def test_elementwise_shape_mismatch() -> None:
    """Checks elementwise operators require equal shapes."""
    a: Matrix = _a()
    c: Matrix = Matrix(2, 3, 1.0)
    with pytest.raises(DimensionMismatchError):
        _ = a + c
    with pytest.raises(DimensionMismatchError):
        _ = a - c


def test_product_dimension_mismatch() -> None:
    """Checks 2x2 times 3x1 fails on inner dimensions."""
    column: Matrix = Matrix.from_rows([[1.0], [2.0], [3.0]])
    with pytest.raises(DimensionMismatchError):
        _ = _a() * column


def test_product_shape_and_associativity() -> None:
    """Checks product shapes agree under both groupings."""
    a: Matrix = Matrix(2, 3, 1.0)
    b: Matrix = Matrix(3, 4, 2.0)
    c: Matrix = Matrix(4, 5, 0.5)
    left: Matrix = (a * b) * c
    right: Matrix = a * (b * c)
    assert left.shape == (2, 5)
    assert right.shape == (2, 5)
    assert left == right
    with pytest.raises(DimensionMismatchError):
        _ = (a * b) * a


def test_product_matches_numpy() -> None:
    """Checks a rectangular product against numpy."""
    rng: np.random.Generator = np.random.default_rng(7)
    left_values: NDArray[np.float64] = rng.normal(size=(3, 4))
    right_values: NDArray[np.float64] = rng.normal(size=(4, 2))
    product: Matrix = Matrix.from_rows(left_values.tolist()) * Matrix.from_rows(
        right_values.tolist()
    )
    assert product.shape == (3, 2)
    np.testing.assert_allclose(to_numpy(product), left_values @ right_values)


def test_product_keeps_fractions() -> None:
    """Checks fractional products are not truncated during accumulation."""
    a: Matrix = Matrix.from_rows([[0.5, 0.25]])
    b: Matrix = Matrix.from_rows([[0.5], [0.5]])
    assert (a * b).at(0, 0) == 0.375


def test_identity_property() -> None:
    """Checks A * I == A == I * A."""
    a: Matrix = Matrix.from_rows([[1.5, -2.0, 0.0], [4.0, 5.0, 6.0], [7.0, 8.0, 9.5]])
    identity: Matrix = eye(3)
    assert a * identity == a
    assert identity * a == a


def test_equality_with_different_shapes() -> None:
    """Checks shape mismatch compares unequal instead of raising."""
    assert Matrix(2, 3, 1.0) != Matrix(3, 2, 1.0)
    assert not (Matrix(2, 3, 1.0) == Matrix(3, 2, 1.0))
    assert Matrix(2, 2, 1.0) != Matrix.from_rows([[1.0, 1.0], [1.0, 2.0]])
    assert Matrix(1, 1, 1.0) != "matrix"


def test_scalar_operators() -> None:
    """Checks matrix op scalar returns new matrices."""
    a: Matrix = _a()
    assert a + 1.0 == Matrix.from_rows([[2.0, 3.0], [4.0, 5.0]])
    assert a - 1.0 == Matrix.from_rows([[0.0, 1.0], [2.0, 3.0]])
    assert a * 2.0 == Matrix.from_rows([[2.0, 4.0], [6.0, 8.0]])
    assert a / 2.0 == Matrix.from_rows([[0.5, 1.0], [1.5, 2.0]])
    assert 2.0 * a == a * 2.0
    assert 1.0 + a == a + 1.0


def test_scalar_division_by_zero() -> None:
    """Checks division by zero yields IEEE special values."""
    a: Matrix = Matrix.from_rows([[1.0, -1.0, 0.0]])
    result: Matrix = a / 0.0
    assert result.at(0, 0) == math.inf
    assert result.at(0, 1) == -math.inf
    assert math.isnan(result.at(0, 2))

    a /= 0
    assert a.at(0, 0) == math.inf


def test_in_place_scalar_operators() -> None:
    """Checks compound scalar operators mutate in place."""
    a: Matrix = _a()
    original: Matrix = a
    a += 1.0
    a -= 2.0
    a *= 4.0
    a /= 2.0
    assert a is original
    assert a == Matrix.from_rows([[0.0, 2.0], [4.0, 6.0]])


def test_in_place_matrix_sum_and_difference() -> None:
    """Checks compound matrix sum and difference."""
    a: Matrix = _a()
    a += _b()
    assert a == Matrix.from_rows([[6.0, 8.0], [10.0, 12.0]])
    a -= _b()
    assert a == _a()


def test_in_place_failure_leaves_receiver() -> None:
    """Checks failed compound operators do not modify the receiver."""
    a: Matrix = _a()
    with pytest.raises(DimensionMismatchError):
        a += Matrix(3, 3, 1.0)
    with pytest.raises(DimensionMismatchError):
        a -= Matrix(1, 2, 1.0)
    with pytest.raises(DimensionMismatchError):
        a *= Matrix(3, 1, 1.0)
    assert a == _a()


def test_in_place_product_resizes() -> None:
    """Checks the in-place product adopts the product shape."""
    a: Matrix = _a()
    original: Matrix = a
    a *= Matrix.from_rows([[1.0, 0.0, 2.0], [0.0, 1.0, 3.0]])
    assert a is original
    assert a.shape == (2, 3)
    assert a == Matrix.from_rows([[1.0, 2.0, 8.0], [3.0, 4.0, 18.0]])


def test_in_place_product_with_itself() -> None:
    """Checks squaring in place reads the original values."""
    a: Matrix = _a()
    a *= a
    assert a == Matrix.from_rows([[7.0, 10.0], [15.0, 22.0]])

    b: Matrix = _a()
    b @= _b()
    assert b == Matrix.from_rows([[19.0, 22.0], [43.0, 50.0]])


def test_unsupported_operand() -> None:
    """Checks non-numeric operands raise TypeError."""
    a: Matrix = _a()
    with pytest.raises(TypeError):
        _ = a + "1"
    with pytest.raises(TypeError):
        _ = a @ 2.0
    with pytest.raises(TypeError):
        _ = a / _b()
