################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""High-level configuration wrapper for matrix helpers."""

from __future__ import annotations

import codecs
import os
from dataclasses import dataclass

from oasis_matrix.math_utils.matrix import Matrix
from oasis_matrix.math_utils.matrix_functions import dot_product
from oasis_matrix.storage.persistence import load_matrix
from oasis_matrix.storage.persistence import save_matrix
from oasis_matrix.storage.text_format import FLOAT_FORMATTERS
from oasis_matrix.storage.text_format import dumps_text
from oasis_matrix.storage.text_format import format_matrix
from oasis_matrix.storage.text_format import loads_text

from .matrix_params import MatrixParams
from .matrix_params import MatrixParamsError


class MatrixConfigError(Exception):
    """Raised when matrix configuration validation fails."""


@dataclass(frozen=True)
class MatrixConfig:
    """Validated parameters bound to the matrix text and vector helpers."""

    params: MatrixParams

    def __init__(self, params: MatrixParams | None = None) -> None:
        """Initialize the configuration wrapper and validate."""
        object.__setattr__(
            self, "params", params if params is not None else MatrixParams.defaults()
        )
        self.validate()

    def validate(self) -> None:
        """Validate parameter invariants and cross-namespace policies."""
        try:
            self.params.validate()
        except MatrixParamsError as exc:
            raise MatrixConfigError(str(exc)) from exc

        if self.params.text.float_format not in FLOAT_FORMATTERS:
            raise MatrixConfigError(
                f"text.float_format must be one of {sorted(FLOAT_FORMATTERS)}"
            )

        try:
            codecs.lookup(self.params.text.encoding)
        except LookupError as exc:
            raise MatrixConfigError(
                f"text.encoding {self.params.text.encoding!r} is not a known codec"
            ) from exc

    def render(self, matrix: Matrix) -> str:
        """Render a matrix with the configured precision."""
        return format_matrix(matrix, precision=self.params.render.precision)

    def dumps(self, matrix: Matrix) -> str:
        """Serialize a matrix with the configured float format."""
        return dumps_text(matrix, float_format=self.params.text.float_format)

    def loads(self, text: str) -> Matrix:
        """Parse a matrix from text."""
        return loads_text(text)

    def save(self, path: str | os.PathLike[str], matrix: Matrix) -> None:
        """Save a matrix using the configured persistence settings."""
        save_matrix(
            path,
            matrix,
            atomic_write=self.params.save.atomic_write,
            float_format=self.params.text.float_format,
            encoding=self.params.text.encoding,
        )

    def load(self, path: str | os.PathLike[str]) -> Matrix:
        """Load a matrix using the configured encoding."""
        return load_matrix(path, encoding=self.params.text.encoding)

    def dot_product(self, left: Matrix, right: Matrix) -> float:
        """Return the dot product under the configured vector policy."""
        return dot_product(left, right, strict=self.params.dot_product.strict)
