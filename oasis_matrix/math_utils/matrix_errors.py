################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Error types raised by dense matrix operations."""

from __future__ import annotations


class MatrixError(Exception):
    """Base class for matrix errors."""


class InvalidShapeError(MatrixError, ValueError):
    """Raised when a matrix would have zero rows or zero columns."""


class RaggedShapeError(MatrixError, ValueError):
    """Raised when table rows do not share a common length."""


class OutOfRangeError(MatrixError, IndexError):
    """Raised when a checked access addresses a cell outside the matrix."""


class DimensionMismatchError(MatrixError, ValueError):
    """Raised when operand shapes are incompatible for an operator."""


class IncompatibleVectorShapeError(MatrixError, ValueError):
    """Raised when operands cannot be read as same-orientation vectors."""


class MatrixFormatError(MatrixError, ValueError):
    """Raised when serialized matrix text is malformed or truncated."""
