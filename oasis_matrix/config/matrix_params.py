################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Structured configuration schema for matrix rendering and persistence."""

from __future__ import annotations

from dataclasses import dataclass
from dataclasses import fields
from dataclasses import replace
from typing import Any
from typing import Mapping


# Decimal places used when rendering matrices for diagnostics
RENDER_PRECISION: int = 6

# Float token format for serialized text, "repr" or "general"
TEXT_FLOAT_FORMAT: str = "repr"
# Text encoding for matrix files
TEXT_ENCODING: str = "utf-8"

# Use atomic write for persistence
SAVE_ATOMIC_WRITE: bool = True

# Require true row/column vectors in dot products
DOT_PRODUCT_STRICT: bool = False


class MatrixParamsError(Exception):
    """Raised when matrix parameter validation fails."""


def _require_non_negative_int(value: int, name: str) -> None:
    """Require a non-negative integer."""
    if not isinstance(value, int) or isinstance(value, bool):
        raise MatrixParamsError(f"{name} must be an int")
    if value < 0:
        raise MatrixParamsError(f"{name} must be non-negative")


def _require_bool(value: bool, name: str) -> None:
    """Require a boolean."""
    if not isinstance(value, bool):
        raise MatrixParamsError(f"{name} must be a bool")


@dataclass(frozen=True)
class RenderParams:
    """Diagnostic rendering parameters."""

    # Decimal places per element
    precision: int = RENDER_PRECISION


@dataclass(frozen=True)
class TextParams:
    """Text codec parameters."""

    # Float token format name
    float_format: str = TEXT_FLOAT_FORMAT
    # File encoding
    encoding: str = TEXT_ENCODING


@dataclass(frozen=True)
class SaveParams:
    """Persistence parameters."""

    # Use atomic write for persistence
    atomic_write: bool = SAVE_ATOMIC_WRITE


@dataclass(frozen=True)
class DotProductParams:
    """Vector interpretation policy for dot products."""

    # Require one dimension of each operand to be exactly 1
    strict: bool = DOT_PRODUCT_STRICT


@dataclass(frozen=True)
class MatrixParams:
    """Complete configuration tree for matrix helpers."""

    render: RenderParams
    text: TextParams
    save: SaveParams
    dot_product: DotProductParams

    @classmethod
    def defaults(cls) -> MatrixParams:
        """Return the default parameter tree."""
        return cls(
            render=RenderParams(),
            text=TextParams(),
            save=SaveParams(),
            dot_product=DotProductParams(),
        )

    @classmethod
    def from_nested_dict(cls, values: Mapping[str, Any]) -> MatrixParams:
        """Build a parameter tree from a nested dict, filling in defaults."""
        namespaces: dict[str, type] = {
            "render": RenderParams,
            "text": TextParams,
            "save": SaveParams,
            "dot_product": DotProductParams,
        }
        unknown: set[str] = set(values) - set(namespaces)
        if unknown:
            raise MatrixParamsError(f"Unknown namespaces: {sorted(unknown)}")

        kwargs: dict[str, Any] = {}
        for name, params_type in namespaces.items():
            section: Any = values.get(name, {})
            if not isinstance(section, Mapping):
                raise MatrixParamsError(f"{name} must be a mapping")
            allowed: set[str] = {field.name for field in fields(params_type)}
            extra: set[str] = set(section) - allowed
            if extra:
                raise MatrixParamsError(f"Unknown keys in {name}: {sorted(extra)}")
            kwargs[name] = params_type(**section)
        return cls(**kwargs)

    def validate(self) -> None:
        """Validate parameter invariants and constraints."""
        _require_non_negative_int(self.render.precision, "render.precision")
        if not self.text.float_format:
            raise MatrixParamsError("text.float_format must be set")
        if not self.text.encoding:
            raise MatrixParamsError("text.encoding must be set")
        _require_bool(self.save.atomic_write, "save.atomic_write")
        _require_bool(self.dot_product.strict, "dot_product.strict")

    def replace(self, **namespace_overrides: Any) -> MatrixParams:
        """Return a modified copy of the parameters."""
        return replace(self, **namespace_overrides)

    def as_nested_dict(self) -> dict[str, Any]:
        """Return a nested dict representation for debugging."""
        return _dataclass_to_dict(self)


def _dataclass_to_dict(value: Any) -> Any:
    """Convert dataclasses into plain Python values."""
    if hasattr(value, "__dataclass_fields__"):
        return {
            field.name: _dataclass_to_dict(getattr(value, field.name))
            for field in fields(value)
        }
    return value
