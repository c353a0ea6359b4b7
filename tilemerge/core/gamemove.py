"""
Move engine for the sliding tile puzzle: directional slide-and-merge applied until the grid settles.
"""

from __future__ import annotations

import logging
from enum import Enum

from tilemerge.core.grid import Grid

logger = logging.getLogger(__name__)


class Direction(str, Enum):
    """Direction of a move, valued by its key name."""

    LEFT = 'left'
    RIGHT = 'right'
    UP = 'up'
    DOWN = 'down'


class MergePolicy(str, Enum):
    """
    How many merges a tile may take part in during a single move.

    CASCADE: a merged tile may merge again in a later pass of the same move (default). A settled grid
    stays unchanged under a second move in the same direction.
    SINGLE: a tile produced by a merge is locked until the end of the move, as in the conventional rule.
    """

    SINGLE = 'single'
    CASCADE = 'cascade'


def _lines(direction: Direction, grid: Grid) -> list[list[int]]:
    """
    Split the grid into lines along the axis of motion.

    Parameters
    ----------
    direction : Direction
        Direction of the move.
    grid : Grid
        The grid to split.

    Returns
    -------
    list[list[int]]
        Flat positions of every line, each line starting at the destination edge.
    """
    width, height = grid.width, grid.height
    if direction is Direction.LEFT:
        return [[grid._position(i, j) for i in range(width)] for j in range(height)]
    if direction is Direction.RIGHT:
        return [[grid._position(i, j) for i in reversed(range(width))] for j in range(height)]
    if direction is Direction.UP:
        return [[grid._position(i, j) for j in range(height)] for i in range(width)]
    return [[grid._position(i, j) for j in reversed(range(height))] for i in range(width)]


def _single_pass(grid: Grid, lines: list[list[int]], locked: set[int] | None) -> bool:
    """
    Apply the slide-and-merge rule once to every adjacent pair.

    Pairs are visited by increasing distance to the destination edge, so a tile moved into a freed
    cell can be picked up again by the next pair of the same line.

    Parameters
    ----------
    grid : Grid
        The grid to update. **Modified in-place.**
    lines : list[list[int]]
        Flat positions of every line, each line starting at the destination edge.
    locked : set[int] or None
        Positions holding a tile merged during the current move, or None when merged tiles are free to
        merge again. **Modified in-place.**

    Returns
    -------
    bool
        True if at least one cell changed.
    """
    changed = False
    for step in range(1, len(lines[0])):
        for line in lines:
            target, source = line[step - 1], line[step]

            value = grid._read(source)
            if value == 0:
                continue

            current = grid._read(target)
            if current == 0:
                # ##>: Slide; a lock follows its tile.
                if locked is not None and source in locked:
                    locked.discard(source)
                    locked.add(target)
            elif current == value:
                if locked is not None:
                    if source in locked or target in locked:
                        continue
                    locked.add(target)
            else:
                continue

            grid._write(target, current + value)
            grid._write(source, 0)
            changed = True
    return changed


def apply_move(direction: Direction | str, grid: Grid, policy: MergePolicy = MergePolicy.CASCADE) -> None:
    """
    Slide and merge every tile toward one edge of the grid.

    Parameters
    ----------
    direction : Direction or str
        Direction of the move.
    grid : Grid
        The grid to update. **Modified in-place.**
    policy : MergePolicy, optional
        Merge rule to apply (default is ``MergePolicy.CASCADE``).

    Raises
    ------
    ValueError
        If the direction or the policy is unknown.
    RuntimeError
        If the grid fails to settle within the number of passes its size allows.

    Notes
    -----
    - Passes are repeated until one of them changes nothing, which lets a tile slide over several cells
      and lets a line of tiles collapse in a single move.
    - Every changing pass either merges two tiles or brings a tile one cell closer to the edge, so the
      number of passes is bounded by ``size * axis_length + 1``.
    - Applying a move to a grid that is already settled in that direction is a no-op.
    """
    direction = Direction(direction)
    policy = MergePolicy(policy)

    lines = _lines(direction, grid)
    locked: set[int] | None = set() if policy is MergePolicy.SINGLE else None
    limit = grid.size * len(lines[0]) + 1

    passes = 0
    changed = True
    while changed:
        if passes >= limit:
            raise RuntimeError(f'move {direction.value} did not settle after {passes} passes')
        changed = _single_pass(grid, lines, locked)
        passes += 1

    logger.debug('Move %s settled after %d passes', direction.value, passes)


def is_settled(direction: Direction | str, grid: Grid) -> bool:
    """
    Check whether a move would leave the grid unchanged.

    Parameters
    ----------
    direction : Direction or str
        Direction of the move.
    grid : Grid
        The grid to check. Not modified.

    Returns
    -------
    bool
        True if applying the move is a no-op.

    Notes
    -----
    Only the first pass of a move can tell whether anything changes, and no tile is locked yet at that
    point, so the answer does not depend on the merge policy.
    """
    direction = Direction(direction)
    return not _single_pass(grid.copy(), _lines(direction, grid), None)


def legal_directions(grid: Grid) -> list[Direction]:
    """
    Determine the directions that change the grid.

    Parameters
    ----------
    grid : Grid
        The grid to check. Not modified.

    Returns
    -------
    list[Direction]
        Directions whose move changes at least one cell, in declaration order.
    """
    return [direction for direction in Direction if not is_settled(direction, grid)]
