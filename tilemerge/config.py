# -*- coding: utf-8 -*-
"""
Game configuration.
"""
from dataclasses import dataclass

from tilemerge.core.gamemove import MergePolicy
from tilemerge.core.spawner import SEED_SPAWNS


@dataclass
class GameConfig:
    """
    Settings of a game session.

    Attributes
    ----------
    width : int
        Number of columns of the board.
    height : int
        Number of rows of the board.
    seed_spawns : int
        Number of tiles placed on a fresh board.
    merge_policy : MergePolicy
        Merge rule applied by every move.
    seed : int | None
        Seed of the random source, None for a fresh entropy seed.
    """

    width: int = 4
    height: int = 4
    seed_spawns: int = SEED_SPAWNS
    merge_policy: MergePolicy = MergePolicy.CASCADE
    seed: int | None = None

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f'board dimensions must be positive, got {self.width}x{self.height}')
        if not 0 <= self.seed_spawns <= self.width * self.height:
            raise ValueError(f'seed_spawns must be in [0, {self.width * self.height}], got {self.seed_spawns}')
        self.merge_policy = MergePolicy(self.merge_policy)
