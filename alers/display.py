"""Window placement and display settings."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Rect:
    """Rectangle given by its top-left position and its size."""

    position: Tuple[int, int]
    size: Tuple[int, int]


class TargetMonitor(enum.Enum):
    PRIMARY = 0
    SECOND = 1
    THIRD = 2
    FOURTH = 3
    FIFTH = 4


@dataclass
class DisplaySetting:
    """Where and how a window appears."""

    dimension: Rect
    initial_target: TargetMonitor = TargetMonitor.PRIMARY
    is_hidden: bool = False

    @property
    def screen_size(self) -> Tuple[int, int]:
        return (self.dimension.size[0], self.dimension.size[1])