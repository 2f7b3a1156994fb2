################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Tests for numpy conversions."""

from __future__ import annotations

import numpy as np
import pytest
from numpy.typing import NDArray

from oasis_matrix.math_utils.conversions import from_numpy
from oasis_matrix.math_utils.conversions import to_numpy
from oasis_matrix.math_utils.matrix import Matrix
from oasis_matrix.math_utils.matrix_errors import InvalidShapeError


def test_to_numpy_copies() -> None:
    """Checks to_numpy returns an independent float64 array."""
    matrix: Matrix = Matrix.from_rows([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]])
    array: NDArray[np.float64] = to_numpy(matrix)
    assert array.dtype == np.float64
    assert array.shape == (2, 3)
    array[0, 0] = 100.0
    assert matrix.at(0, 0) == 1.0


def test_from_numpy() -> None:
    """Checks from_numpy keeps shape and values."""
    array: NDArray[np.int64] = np.arange(6).reshape((3, 2))
    matrix: Matrix = from_numpy(array)
    assert matrix.shape == (3, 2)
    assert matrix == Matrix.from_rows([[0.0, 1.0], [2.0, 3.0], [4.0, 5.0]])
    assert isinstance(matrix.at(2, 1), float)


def test_from_numpy_rejects_bad_shapes() -> None:
    """Checks non-2D and empty arrays raise InvalidShapeError."""
    with pytest.raises(InvalidShapeError):
        from_numpy(np.zeros(3))
    with pytest.raises(InvalidShapeError):
        from_numpy(np.zeros((0, 3)))
    with pytest.raises(InvalidShapeError):
        from_numpy(np.zeros((2, 2, 2)))
