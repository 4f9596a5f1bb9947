"""Placement of user-interface elements and the layouts that arrange them."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

log = logging.getLogger(__name__)

_U32_MAX = 2**32 - 1
_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1


def _saturate(value: float, low: int, high: int) -> int:
    """Truncate toward zero, clamp to [low, high]; NaN becomes 0."""
    if math.isnan(value):
        return 0
    if value <= low:
        return low
    if value >= high:
        return high
    return int(value)


def _to_u32(value: float) -> int:
    return _saturate(value, 0, _U32_MAX)


def _to_i32(value: float) -> int:
    return _saturate(value, _I32_MIN, _I32_MAX)


@dataclass
class Layout:
    """Position and size of an element, both local and in window coordinates."""

    position: Tuple[int, int] = (0, 0)
    size: Tuple[int, int] = (0, 0)
    global_position: Tuple[int, int] = (0, 0)
    global_size: Tuple[int, int] = (0, 0)

    @classmethod
    def new_local(cls, position, size) -> "Layout":
        """Layout whose global placement equals its local placement."""
        position = (int(position[0]), int(position[1]))
        size = (int(size[0]), int(size[1]))
        return cls(position=position, size=size, global_position=position, global_size=size)

    def is_inside(self, x: int, y: int) -> bool:
        """Whether (x, y) lies in the local rectangle, edges included."""
        left = self.position[0]
        right = self.position[0] + self.size[0]
        if x < left or x > right:
            return False
        top = self.position[1]
        bottom = self.position[1] + self.size[1]
        return top <= y <= bottom


class RowNotFoundError(IndexError):
    """A table row index lies past the rows that exist."""

    def __init__(self, index: int, length: int):
        super().__init__(f"row not found. Index:{index}, Len:{length}")
        self.index = index
        self.length = length


class NoLayout:
    """Leaves children where they are."""

    def arrange(self, parent: Layout, children: Sequence[Layout]) -> List[Layout]:
        """Return the children in order, their placement untouched."""
        return list(children)


class TableLayout:
    """Rows of cells, each sized by its share of the row's or table's dividers."""

    def __init__(
        self,
        column_dividers: Optional[List[List[float]]] = None,
        row_dividers: Optional[List[float]] = None,
    ):
        self.column_dividers: List[List[float]] = [
            list(row) for row in (column_dividers or [])
        ]
        self.row_dividers: List[float] = list(row_dividers or [])

    def add_row(self, divider: float) -> None:
        self.row_dividers.append(divider)
        self.column_dividers.append([])

    def add_column(self, row_index: int, divider: float) -> None:
        if row_index >= len(self.row_dividers):
            raise RowNotFoundError(row_index, len(self.row_dividers))
        self.column_dividers[row_index].append(divider)

    def arrange(self, parent: Layout, children: Sequence[Layout]) -> List[Layout]:
        """Place children cell by cell, row after row, inside the parent.

        Returns the children that were given a cell, in placement order.
        """
        row_total = float(sum(self.row_dividers))
        child_iter = iter(children)
        placed: List[Layout] = []
        upper_x, upper_y = 0, 0

        for row_index, columns in enumerate(self.column_dividers):
            column_total = float(sum(columns))
            if row_index >= len(self.row_dividers):
                raise RowNotFoundError(row_index, len(self.row_dividers))
            row = self.row_dividers[row_index]
            row_share = _safe_ratio(row, row_total)

            upper_x = 0
            for column in columns:
                child = next(child_iter, None)
                if child is None:
                    break
                child.position = (upper_x, upper_y)
                child.global_position = (
                    upper_x + parent.global_position[0],
                    upper_y + parent.global_position[1],
                )
                width = _to_u32(_safe_ratio(column, column_total) * parent.size[0])
                height = _to_u32(row_share * parent.size[1])
                child.size = (width, height)
                child.global_size = child.size
                log.debug("arranged child at %s", child.global_position)
                placed.append(child)
                upper_x += width
            upper_y += _to_i32(row_share * parent.size[1])
        return placed


def _safe_ratio(numerator: float, denominator: float) -> float:
    if denominator == 0.0:
        if numerator == 0.0:
            return math.nan
        return math.copysign(math.inf, numerator)
    return numerator / denominator