"""Game session driving the rule engine once per directional command."""

import logging

from numpy import ndarray

from tilemerge.config import GameConfig
from tilemerge.core.gamemove import Direction, apply_move, legal_directions
from tilemerge.core.grid import Grid, new_grid
from tilemerge.core.randomness import GeneratorSource
from tilemerge.core.spawner import reset, spawn_random_tile

logger = logging.getLogger(__name__)


class Session:
    """
    A single game of the sliding tile puzzle.

    The session owns the grid and the random source. Each command slides the tiles, then spawns a new
    tile; a spawn that finds no empty cell ends the game.
    """

    # ##: All Actions.
    ACTIONS = {direction.value: direction for direction in Direction}

    def __init__(self, config: GameConfig | None = None):
        """
        Initialize the session and deal the starting board.

        Parameters
        ----------
        config : GameConfig, optional
            Settings of the game (default is a 4x4 board with three starting tiles).
        """
        self.config = config or GameConfig()
        self._grid = new_grid(self.config.width, self.config.height)
        self._rng = GeneratorSource(self.config.seed)
        self._finished = False
        self._moves = 0

        self.reset()

    @property
    def grid(self) -> Grid:
        return self._grid

    @property
    def board(self) -> ndarray:
        """
        Get the current state of the game board.

        Returns
        -------
        ndarray
            A ``(height, width)`` copy of the board.
        """
        return self._grid.to_array()

    @property
    def is_finished(self) -> bool:
        """True once a spawn found no empty cell."""
        return self._finished

    @property
    def moves(self) -> int:
        """Number of commands played since the last reset."""
        return self._moves

    @property
    def legal_directions(self) -> list[Direction]:
        return legal_directions(self._grid)

    def reset(self, seed: int | None = None) -> ndarray:
        """
        Empty the board and place the starting tiles.

        Parameters
        ----------
        seed : int, optional
            New seed for the random source. The current stream of draws continues when None.

        Returns
        -------
        ndarray
            The new game board.
        """
        if seed is not None:
            self._rng.reseed(seed)

        reset(self._grid, self._rng, seed_spawns=self.config.seed_spawns)
        self._finished = False
        self._moves = 0

        logger.info('New %dx%d game with %d tiles', self._grid.width, self._grid.height, self._grid.tile_count)
        return self.board

    def step(self, direction: Direction | str) -> tuple[ndarray, bool]:
        """
        Play one command: slide and merge, then spawn a tile.

        Parameters
        ----------
        direction : Direction or str
            Direction of the move, either a ``Direction`` or its name (``'left'``, ``'up'``, ...).

        Returns
        -------
        tuple[ndarray, bool]
            A tuple containing:
            - The updated game board (ndarray)
            - Whether a new tile was spawned (bool); False means no moves are left

        Raises
        ------
        ValueError
            If the direction is unknown.
        RuntimeError
            If the game is already finished.

        Notes
        -----
        A tile is spawned after every command, even one that moved nothing.
        """
        direction = Direction(direction)
        if self._finished:
            raise RuntimeError('the game is finished, reset it to play again')

        apply_move(direction, self._grid, policy=self.config.merge_policy)
        spawned = spawn_random_tile(self._grid, self._rng)
        self._moves += 1

        if not spawned:
            self._finished = True
            logger.warning('No moves left after %d moves, max tile %d', self._moves, self._grid.max_tile)
        return self.board, spawned

    def render(self) -> None:
        """
        Render the game board. This method prints the current state of the game board to the console.
        """
        print(self._grid)
