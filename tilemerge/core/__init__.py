# -*- coding: utf-8 -*-
"""
Rule engine of the sliding tile puzzle.

It includes the grid storage, the directional slide-and-merge move engine, the tile spawner,
and the random sources the spawner draws from.
"""

from .gamemove import Direction, MergePolicy, apply_move, is_settled, legal_directions
from .grid import Grid, new_grid
from .randomness import GeneratorSource, RandomSource, ScriptedSource
from .spawner import SEED_SPAWNS, reset, spawn_random_tile

__all__ = [
    "Grid",
    "new_grid",
    "Direction",
    "MergePolicy",
    "apply_move",
    "is_settled",
    "legal_directions",
    "RandomSource",
    "GeneratorSource",
    "ScriptedSource",
    "SEED_SPAWNS",
    "spawn_random_tile",
    "reset",
]
