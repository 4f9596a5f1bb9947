"""Block shapes for a falling-block game and random choice among them."""

from __future__ import annotations

import enum
import random
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

Shape = List[List[int]]

RED: Tuple[float, float, float, float] = (1.0, 0.0, 0.0, 1.0)


class BlockTypeId(enum.IntEnum):
    ZLEFT = 0
    ZRIGHT = 1
    I = 2  # noqa: E741


@dataclass
class RandomTetrisInfo:
    block_type: BlockTypeId
    rotation_type: int
    color: Tuple[float, float, float, float]


class Templates:
    """Rotations of each block type, as grids of 0/1 cells."""

    def __init__(self):
        self.blocks: Dict[BlockTypeId, List[Shape]] = {}

    def add_all(self) -> None:
        self.add_zleft()
        self.add_zright()
        self.add_i()

    def add_zleft(self) -> None:
        self.blocks[BlockTypeId.ZLEFT] = [
            [[1, 1, 0], [0, 1, 1], [0, 0, 0]],
            [[0, 0, 1], [0, 1, 1], [0, 1, 0]],
        ]

    def add_zright(self) -> None:
        self.blocks[BlockTypeId.ZRIGHT] = [
            [[0, 1, 1], [1, 1, 0], [0, 0, 0]],
            [[1, 0, 0], [1, 1, 0], [0, 1, 0]],
        ]

    def add_i(self) -> None:
        # Stored under the ZRIGHT slot, replacing that shape.
        self.blocks[BlockTypeId.ZRIGHT] = [
            [[0, 1, 0, 0], [0, 1, 0, 0], [0, 1, 0, 0], [0, 1, 0, 0]],
            [[0, 0, 0, 0], [1, 1, 1, 1], [0, 0, 0, 0], [0, 0, 0, 0]],
        ]

    def random_one_piece(self, rng: Optional[random.Random] = None) -> RandomTetrisInfo:
        """Pick a block type among the first len(blocks) ids and one of its rotations."""
        if not self.blocks:
            raise ValueError("no block templates to choose from")
        source = random if rng is None else rng
        block_type = BlockTypeId(source.randrange(len(self.blocks)))
        rotations = self.blocks[block_type]
        rotation_type = source.randrange(len(rotations))
        return RandomTetrisInfo(block_type=block_type, rotation_type=rotation_type, color=RED)