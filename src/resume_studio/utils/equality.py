"""Structural value equality used to suppress no-op history entries."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import fields, is_dataclass
from typing import Any

from pydantic import BaseModel

__all__ = ["structurally_equal"]


def structurally_equal(left: Any, right: Any) -> bool:
    """Return True when *left* and *right* hold the same value.

    Comparison is recursive and never relies on object identity:

    - Pydantic models and dataclasses must share a type and have equal fields.
    - Mappings must list the same keys in the same order with equal values,
      so reordering skill categories counts as a change.
    - Lists and tuples are compared element by element.
    - Anything else falls back to ``==``.
    """
    if isinstance(left, BaseModel) or isinstance(right, BaseModel):
        if type(left) is not type(right):
            return False
        return all(
            structurally_equal(getattr(left, name), getattr(right, name))
            for name in type(left).model_fields
        )

    if is_dataclass(left) and not isinstance(left, type):
        if type(left) is not type(right):
            return False
        return all(
            structurally_equal(getattr(left, f.name), getattr(right, f.name)) for f in fields(left)
        )

    if isinstance(left, Mapping) or isinstance(right, Mapping):
        if not (isinstance(left, Mapping) and isinstance(right, Mapping)):
            return False
        if list(left.keys()) != list(right.keys()):
            return False
        return all(structurally_equal(left[key], right[key]) for key in left)

    if isinstance(left, (str, bytes)) or isinstance(right, (str, bytes)):
        return left == right

    if isinstance(left, Sequence) or isinstance(right, Sequence):
        if not (isinstance(left, Sequence) and isinstance(right, Sequence)):
            return False
        if len(left) != len(right):
            return False
        return all(structurally_equal(a, b) for a, b in zip(left, right, strict=True))

    return left == right
