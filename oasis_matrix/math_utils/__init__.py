################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Dense matrix value type and free functions."""

from __future__ import annotations

from oasis_matrix.math_utils.matrix import Matrix
from oasis_matrix.math_utils.matrix_errors import DimensionMismatchError
from oasis_matrix.math_utils.matrix_errors import IncompatibleVectorShapeError
from oasis_matrix.math_utils.matrix_errors import InvalidShapeError
from oasis_matrix.math_utils.matrix_errors import MatrixError
from oasis_matrix.math_utils.matrix_errors import MatrixFormatError
from oasis_matrix.math_utils.matrix_errors import OutOfRangeError
from oasis_matrix.math_utils.matrix_errors import RaggedShapeError
from oasis_matrix.math_utils.matrix_functions import dot_product
from oasis_matrix.math_utils.matrix_functions import element_mul
from oasis_matrix.math_utils.matrix_functions import element_sum
from oasis_matrix.math_utils.matrix_functions import eye
from oasis_matrix.math_utils.matrix_functions import transpose


__all__ = [
    "DimensionMismatchError",
    "IncompatibleVectorShapeError",
    "InvalidShapeError",
    "Matrix",
    "MatrixError",
    "MatrixFormatError",
    "OutOfRangeError",
    "RaggedShapeError",
    "dot_product",
    "element_mul",
    "element_sum",
    "eye",
    "transpose",
]
