"""
Tile spawning: place new 2 or 4 tiles on empty cells of the grid.
"""

from __future__ import annotations

import logging

from tilemerge.core.grid import Grid
from tilemerge.core.randomness import RandomSource

logger = logging.getLogger(__name__)

# ##>: Number of tiles placed on a fresh board.
SEED_SPAWNS = 3


def spawn_random_tile(grid: Grid, rng: RandomSource) -> bool:
    """
    Place one new tile on a uniformly chosen empty cell.

    Parameters
    ----------
    grid : Grid
        The grid to update. **Modified in-place.**
    rng : RandomSource
        Source of the value and position draws.

    Returns
    -------
    bool
        True if a tile was placed, False if the grid had no empty cell.

    Notes
    -----
    - A full grid is reported without consuming any draw and without touching the grid.
    - The value is 2 or 4 with equal probability, drawn before the position.
    - The position is found by rejection sampling over every cell, so the expected number of index
      draws is ``size / empty_count``.
    """
    if grid.is_full:
        return False

    value = 2 if rng.coin() else 4

    # ##: Redraw until an empty cell is hit; one is known to exist.
    draws = 0
    while True:
        position = rng.index(grid.size)
        draws += 1
        if grid._read(position) == 0:
            grid._write(position, value)
            logger.debug('Spawned %d at position %d after %d draws', value, position, draws)
            return True


def reset(grid: Grid, rng: RandomSource, seed_spawns: int = SEED_SPAWNS) -> None:
    """
    Empty the grid and place the starting tiles.

    Parameters
    ----------
    grid : Grid
        The grid to reset. **Modified in-place.**
    rng : RandomSource
        Source of the spawn draws.
    seed_spawns : int, optional
        Number of starting tiles (default is 3). Spawns beyond the grid capacity are skipped.

    Raises
    ------
    ValueError
        If ``seed_spawns`` is negative.
    """
    if seed_spawns < 0:
        raise ValueError(f'seed_spawns must be >= 0, got {seed_spawns}')

    grid.fill(0)
    for _ in range(seed_spawns):
        spawn_random_tile(grid, rng)
