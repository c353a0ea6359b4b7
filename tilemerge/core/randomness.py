"""
Random sources consumed by the spawner.

The core only needs two kinds of draws: a fair coin choosing the value of a new tile, and a uniform
index into the cells of the grid. Any object providing both satisfies ``RandomSource``.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol, runtime_checkable

from numpy.random import PCG64DXSM, default_rng


@runtime_checkable
class RandomSource(Protocol):
    """Capability interface for the draws used by the core."""

    def coin(self) -> bool:
        """Draw a fair boolean."""
        ...

    def index(self, length: int) -> int:
        """Draw a uniform integer in ``[0, length)``."""
        ...


class GeneratorSource:
    """
    Random source backed by a numpy generator.

    Draws are sequential, so two sources built with the same seed produce the same game.
    """

    def __init__(self, seed: int | None = None):
        """
        Initialize the generator.

        Parameters
        ----------
        seed : int, optional
            Seed of the PCG64DXSM bit generator. A fresh entropy seed is used when None.
        """
        self._generator = default_rng(PCG64DXSM(seed))

    def reseed(self, seed: int | None = None) -> None:
        """Restart the stream of draws from a new seed."""
        self._generator = default_rng(PCG64DXSM(seed))

    def coin(self) -> bool:
        return bool(self._generator.integers(0, 2))

    def index(self, length: int) -> int:
        """
        Draw a uniform index.

        Parameters
        ----------
        length : int
            Exclusive upper bound, must be positive.

        Returns
        -------
        int
            An integer in ``[0, length)``.

        Raises
        ------
        ValueError
            If the length is not positive.
        """
        if length <= 0:
            raise ValueError(f'length must be > 0, got {length}')
        return int(self._generator.integers(0, length))


class ScriptedSource:
    """
    Random source replaying fixed sequences of draws.

    Useful to reproduce a given board exactly, e.g. in tests.
    """

    def __init__(self, coins: Iterable[bool] = (), indices: Iterable[int] = ()):
        """
        Store the draws to replay.

        Parameters
        ----------
        coins : Iterable[bool], optional
            Results returned by successive ``coin()`` calls.
        indices : Iterable[int], optional
            Results returned by successive ``index()`` calls.
        """
        self._coins = iter(coins)
        self._indices = iter(indices)

    def coin(self) -> bool:
        try:
            return bool(next(self._coins))
        except StopIteration:
            raise LookupError('scripted coin draws are exhausted') from None

    def index(self, length: int) -> int:
        """
        Return the next scripted index.

        Raises
        ------
        ValueError
            If the length is not positive, or the scripted index is outside ``[0, length)``.
        LookupError
            If no scripted index is left.
        """
        if length <= 0:
            raise ValueError(f'length must be > 0, got {length}')
        try:
            value = int(next(self._indices))
        except StopIteration:
            raise LookupError('scripted index draws are exhausted') from None
        if not 0 <= value < length:
            raise ValueError(f'scripted index {value} is outside [0, {length})')
        return value
