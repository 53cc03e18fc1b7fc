"""
Box Game Core - the rules and the orchestrator.

Main exports:
- play: Play a full game and return both final scores
- BoxGame: Step-by-step game simulation
- GreenBox, BlueBox: The two box variants
- Player: Turn-taking player with a running score
- GameConfig: Configuration loaded from game_config.yaml
"""

from box_game.core.config_loader import GameConfig, load_config, get_config
from box_game.core.boxes import Box, GreenBox, BlueBox, make_box, build_boxes, pairing
from box_game.core.scoring import ScoreEvent, ScoreTracker
from box_game.core.player import Player, select_box
from box_game.core.game import BoxGame, GameResult, TurnResult, format_scores, play

__all__ = [
    "GameConfig",
    "load_config",
    "get_config",
    "Box",
    "GreenBox",
    "BlueBox",
    "make_box",
    "build_boxes",
    "pairing",
    "ScoreEvent",
    "ScoreTracker",
    "Player",
    "select_box",
    "BoxGame",
    "GameResult",
    "TurnResult",
    "format_scores",
    "play",
]
