################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Conversions between Matrix and numpy arrays."""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import NDArray

from oasis_matrix.math_utils.matrix import Matrix
from oasis_matrix.math_utils.matrix_errors import InvalidShapeError


def to_numpy(matrix: Matrix) -> NDArray[np.float64]:
    """Return a float64 array copy of a matrix."""
    return np.array(matrix.tolist(), dtype=np.float64)


def from_numpy(array: Any) -> Matrix:
    """Create a matrix from a 2D array-like.

    Raises:
        InvalidShapeError: If the array is not 2D or has an empty dimension
    """
    values: NDArray[np.float64] = np.asarray(array, dtype=np.float64)
    if values.ndim != 2:
        raise InvalidShapeError(f"array must be 2D, got {values.ndim} dimensions")
    if values.shape[0] == 0 or values.shape[1] == 0:
        raise InvalidShapeError(f"array shape must be positive, got {values.shape}")
    return Matrix.from_rows(values.tolist())
