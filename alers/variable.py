"""Named, typed values exposed for inspection."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass
from typing import Any

import numpy as np


class VariableKind(enum.Enum):
    F32_1 = "f32_1"
    F32_3 = "f32_3"
    F32_4 = "f32_4"
    F32_4_4 = "f32_4_4"
    BOOL = "bool"
    VOID = "void"


def _display_float(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    return np.format_float_positional(np.float32(value), trim="-")


def _debug_float(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    return np.format_float_positional(np.float32(value), trim="0")


@dataclass(frozen=True)
class Variable:
    """A value of one kind with the name it is shown under."""

    kind: VariableKind
    name: str
    value: Any = None

    def name_str(self) -> str:
        return self.name

    def value_str(self) -> str:
        if self.kind is VariableKind.F32_1:
            return _display_float(self.value)
        if self.kind in (VariableKind.F32_3, VariableKind.F32_4):
            return "(" + ", ".join(_display_float(c) for c in self.value) + ")"
        if self.kind is VariableKind.BOOL:
            return "true" if self.value else "false"
        if self.kind is VariableKind.VOID:
            return self.name
        columns = ", ".join(
            "[" + ", ".join(_debug_float(c) for c in column) + "]" for column in self.value
        )
        return f"Matrix4 [{columns}]"

    def as_float(self) -> float:
        if self.kind is not VariableKind.F32_1:
            raise TypeError(f"variable mismatch, f32 expected {self.name}")
        return self.value

    def as_bool(self) -> bool:
        if self.kind is not VariableKind.BOOL:
            raise TypeError(f"variable mismatch, bool expected {self.name}")
        return self.value


def to_variable(value, name: str) -> Variable:
    """Wrap a float, bool, or 3- or 4-component vector as a named variable."""
    if isinstance(value, (bool, np.bool_)):
        return Variable(VariableKind.BOOL, name, bool(value))
    if isinstance(value, (int, float, np.integer, np.floating)):
        return Variable(VariableKind.F32_1, name, float(value))
    try:
        components = tuple(float(c) for c in value)
    except TypeError as err:
        raise TypeError(f"cannot make a variable from {type(value).__name__}") from err
    if len(components) == 3:
        return Variable(VariableKind.F32_3, name, components)
    if len(components) == 4:
        return Variable(VariableKind.F32_4, name, components)
    raise TypeError(f"vectors of {len(components)} components are not supported")