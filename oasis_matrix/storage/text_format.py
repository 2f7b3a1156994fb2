################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Whitespace-delimited text codec and diagnostic rendering for matrices.

Text layout:
    <rows> <columns> <v00> <v01> ... <v0n> <v10> ... <vmn>

Every token is followed by a single space and elements are written in
row-major order. Readers only rely on whitespace, so line breaks are
accepted anywhere.
"""

from __future__ import annotations

import logging
import re
from typing import Callable
from typing import Dict
from typing import List

from oasis_matrix.math_utils.matrix import Matrix
from oasis_matrix.math_utils.matrix_errors import MatrixFormatError


_LOG: logging.Logger = logging.getLogger(__name__)


# Shortest representation that round-trips exactly
FLOAT_FORMAT_REPR: str = "repr"
# printf %g with 6 significant digits
FLOAT_FORMAT_GENERAL: str = "general"

# ASCII signed integer, as accepted by a C++ stream
_INT_TOKEN: re.Pattern[str] = re.compile(r"[+-]?[0-9]+")

FLOAT_FORMATTERS: Dict[str, Callable[[float], str]] = {
    FLOAT_FORMAT_REPR: repr,
    FLOAT_FORMAT_GENERAL: lambda value: format(value, "g"),
}


def dumps_text(matrix: Matrix, *, float_format: str = FLOAT_FORMAT_REPR) -> str:
    """Serialize a matrix to the whitespace-delimited text layout."""
    formatter: Callable[[float], str] | None = FLOAT_FORMATTERS.get(float_format)
    if formatter is None:
        raise ValueError(f"Unknown float format: {float_format}")

    tokens: List[str] = [str(matrix.row_count), str(matrix.column_count)]
    for i in range(matrix.row_count):
        tokens.extend(formatter(value) for value in matrix.trusted_row(i))
    return "".join(f"{token} " for token in tokens)


def loads_text(text: str) -> Matrix:
    """Parse a matrix from the whitespace-delimited text layout.

    Raises:
        MatrixFormatError: If the header or any element is malformed, the
            shape is not positive, or the text ends early
    """
    tokens: List[str] = text.split()
    if len(tokens) < 2:
        raise MatrixFormatError("Error reading rows/columns: missing header")

    if not (_INT_TOKEN.fullmatch(tokens[0]) and _INT_TOKEN.fullmatch(tokens[1])):
        raise MatrixFormatError(
            f"Error reading rows/columns from {tokens[0]!r} {tokens[1]!r}"
        )
    rows: int = int(tokens[0])
    columns: int = int(tokens[1])
    if rows <= 0 or columns <= 0:
        raise MatrixFormatError(
            f"Error reading matrix, shape must be positive, got ({rows}, {columns})"
        )

    expected: int = rows * columns
    body: List[str] = tokens[2:]
    if len(body) < expected:
        raise MatrixFormatError(
            f"Unexpected end of matrix text: expected {expected} elements, "
            f"got {len(body)}"
        )
    if len(body) > expected:
        _LOG.warning("Ignoring %d trailing tokens after matrix data", len(body) - expected)

    matrix: Matrix = Matrix(rows, columns, 0.0)
    for i in range(rows):
        row: List[float] = matrix.trusted_row(i)
        for j in range(columns):
            token: str = body[i * columns + j]
            try:
                # float() also accepts digit separators and non-ASCII digits
                if "_" in token or not token.isascii():
                    raise ValueError(token)
                row[j] = float(token)
            except ValueError as exc:
                raise MatrixFormatError(
                    f"Error reading matrix element ({i}, {j}) from {token!r}"
                ) from exc
    return matrix


def format_matrix(matrix: Matrix, *, precision: int = 6) -> str:
    """Render a matrix as one ``[ v0 v1 ... ]`` line per row."""
    lines: List[str] = []
    for i in range(matrix.row_count):
        values: str = "".join(f"{value:.{precision}f} " for value in matrix.trusted_row(i))
        lines.append(f"[ {values}]\n")
    return "".join(lines)
