# -*- coding: utf-8 -*-
"""
Play random games and report the highest tiles reached.
"""
import logging
from collections import Counter
from typing import Dict

from numpy.random import PCG64DXSM, default_rng
from tqdm import trange

from tilemerge.config import GameConfig
from tilemerge.core import Direction, MergePolicy
from tilemerge.envs import Session

# ##>: Cap on commands per game.
MAX_MOVES = 100_000


def evaluate(config: GameConfig, length: int = 10) -> Dict[int, int]:
    """
    Play games with uniformly random commands.

    Parameters
    ----------
    config : GameConfig
        Settings shared by every game.
    length : int, optional
        The number of games to play (default is 10).

    Returns
    -------
    Dict[int, int]
        Number of games per maximum tile reached.
    """
    session = Session(config)
    chooser = default_rng(PCG64DXSM(config.seed))
    directions = list(Direction)
    score = []

    with trange(length) as period:
        for num in period:
            session.reset()

            # ##: Play a game.
            while not session.is_finished and session.moves < MAX_MOVES:
                session.step(directions[chooser.integers(0, len(directions))])

                # ##: Log.
                period.set_description(f"Evaluation: {num + 1}")
                period.set_postfix(moves=session.moves, max=session.grid.max_tile)

            # ##: Save max cells.
            score.append(session.grid.max_tile)

    # ##: Final log.
    frequency = Counter(score)
    return dict(sorted(frequency.items()))


if __name__ == "__main__":
    from argparse import ArgumentParser

    parser = ArgumentParser()
    parser.add_argument("--games", type=int, default=10)
    parser.add_argument("--width", type=int, default=4)
    parser.add_argument("--height", type=int, default=4)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--policy", type=str, default=MergePolicy.CASCADE.value, choices=[p.value for p in MergePolicy])
    args = parser.parse_args()

    logging.basicConfig(level=logging.ERROR)

    settings = GameConfig(width=args.width, height=args.height, seed=args.seed, merge_policy=args.policy)
    result = evaluate(settings, length=args.games)
    print(f"Random play with the {args.policy} merge policy, max tiles: {result}")
