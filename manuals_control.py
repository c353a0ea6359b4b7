# -*- coding: utf-8 -*-
"""
Play the sliding tile puzzle in the terminal.
"""
import logging

from tilemerge.config import GameConfig
from tilemerge.core import MergePolicy
from tilemerge.envs import Session

KEYS = {"a": "left", "d": "right", "w": "up", "s": "down"}


def redraw(session: Session):
    """
    Redraw the game board.

    Parameters
    ----------
    session: Session
        The game to draw
    """
    print()
    session.render()


def reset(session: Session):
    """
    Reset and redraw the game board.

    Parameters
    ----------
    session: Session
        The game to reset
    """
    session.reset()
    redraw(session)


def step(session: Session, direction: str):
    """
    Applied a command to the game.

    Parameters
    ----------
    session: Session
        The game to play

    direction: str
        Name of the direction to play
    """
    _, spawned = session.step(direction)
    redraw(session)
    if not spawned:
        print("No moves left!")


def key_handler(session: Session, key: str) -> bool:
    """
    Handle one line typed by the player.

    Parameters
    ----------
    session: Session
        The game to play

    key: str
        Key typed by the player

    Returns
    -------
    bool
        False when the player asked to quit.
    """
    if key == "q":
        return False

    if key == "r" or (session.is_finished and key in KEYS):
        reset(session)
        return True

    if key in KEYS:
        step(session, KEYS[key])
        return True

    print("Use w (up), a (left), s (down), d (right), r (reset) or q (quit).")
    return True


if __name__ == "__main__":
    from argparse import ArgumentParser

    parser = ArgumentParser()
    parser.add_argument("--width", type=int, default=4)
    parser.add_argument("--height", type=int, default=4)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--policy", type=str, default=MergePolicy.CASCADE.value, choices=[p.value for p in MergePolicy])
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    game = Session(GameConfig(width=args.width, height=args.height, seed=args.seed, merge_policy=args.policy))
    redraw(game)

    # Blocking input loop
    while True:
        try:
            line = input("> ").strip().lower()
        except EOFError:
            break
        if not key_handler(game, line):
            break
