# -*- coding: utf-8 -*-
"""
Game session for the sliding tile puzzle.

This module provides the `Session` class, which owns the board and the random source and plays one
command at a time.
"""

from .session import Session

__all__ = ["Session"]
