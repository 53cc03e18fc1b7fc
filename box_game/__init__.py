"""
Box Game
========

Two players take turns feeding token weights into four boxes:

- Two green boxes (initial weights 0.0 and 0.1) score the square of the mean
  of their 3 most recently absorbed weights.
- Two blue boxes (initial weights 0.2 and 0.3) score the Cantor pairing of
  the smallest and largest weight they have absorbed.

Each turn the current player picks the lightest box. The box setup lives in
game_config.yaml.
"""

from box_game.core import BoxGame, GameResult, play

__all__ = ["BoxGame", "GameResult", "play"]
