################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Persistence helpers for matrix text files."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from oasis_matrix.math_utils.matrix import Matrix
from oasis_matrix.math_utils.matrix_errors import MatrixFormatError
from oasis_matrix.storage.text_format import FLOAT_FORMAT_REPR
from oasis_matrix.storage.text_format import dumps_text
from oasis_matrix.storage.text_format import loads_text


_LOG: logging.Logger = logging.getLogger(__name__)


class MatrixPersistenceError(Exception):
    """Raised when reading or writing a matrix file fails."""


def save_matrix(
    path: str | os.PathLike[str],
    matrix: Matrix,
    *,
    atomic_write: bool = True,
    float_format: str = FLOAT_FORMAT_REPR,
    encoding: str = "utf-8",
) -> None:
    """Save a matrix to disk in the text layout."""
    path_obj: Path = Path(os.fspath(path))
    text: str = dumps_text(matrix, float_format=float_format)
    tmp_path: Path = path_obj.with_name(f".{path_obj.name}.tmp.{os.getpid()}")
    try:
        path_obj.parent.mkdir(parents=True, exist_ok=True)
        if atomic_write:
            with tmp_path.open("w", encoding=encoding) as handle:
                handle.write(text)
                handle.flush()
                os.fsync(handle.fileno())
            os.replace(tmp_path, path_obj)
        else:
            path_obj.write_text(text, encoding=encoding)
    except OSError as exc:
        if atomic_write and tmp_path.exists():
            tmp_path.unlink()
        raise MatrixPersistenceError(f"Failed to save matrix to {path_obj}") from exc

    _LOG.debug("Saved %s matrix to %s", matrix.shape, path_obj)


def load_matrix(path: str | os.PathLike[str], *, encoding: str = "utf-8") -> Matrix:
    """Load a matrix from a text file.

    Raises:
        MatrixPersistenceError: If the file cannot be read
        MatrixFormatError: If the file contents are malformed
    """
    path_obj: Path = Path(os.fspath(path))
    try:
        text: str = path_obj.read_text(encoding=encoding)
    except UnicodeDecodeError as exc:
        raise MatrixFormatError(
            f"Matrix file {path_obj} is not valid {encoding} text"
        ) from exc
    except OSError as exc:
        raise MatrixPersistenceError(f"Failed to load matrix from {path_obj}") from exc

    matrix: Matrix = loads_text(text)
    _LOG.debug("Loaded %s matrix from %s", matrix.shape, path_obj)
    return matrix
