"""
Core Game
=========

Main game orchestrator: builds the boxes, alternates the two players over
the input token weights, and reports the final scores.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence, Tuple

from box_game.core.boxes import Box, build_boxes
from box_game.core.config_loader import GameConfig, get_config
from box_game.core.player import Player


@dataclass
class TurnResult:
    """Result of a single turn (one token absorbed by one box)."""
    turn: int
    player: str
    box_index: int
    box_variant: str
    token_weight: float
    delta_score: float
    box_weight: float
    player_score: float


@dataclass
class GameResult:
    """Final outcome of a game."""
    score_a: float
    score_b: float
    names: Tuple[str, str] = ("A", "B")
    turns: List[TurnResult] = field(default_factory=list)
    
    @property
    def scores(self) -> Tuple[float, float]:
        return (self.score_a, self.score_b)
    
    @property
    def winner(self) -> Optional[str]:
        """Name of the player with the higher score, or None on a tie."""
        if self.score_a > self.score_b:
            return self.names[0]
        if self.score_b > self.score_a:
            return self.names[1]
        return None


def format_scores(
    score_a: float,
    score_b: float,
    config: Optional[GameConfig] = None
) -> str:
    """Human-readable final score line."""
    if config is None:
        config = get_config()
    
    fmt = config.report.score_format
    name_a, name_b = config.players.names
    return (
        f"Scores: player {name_a} {format(score_a, fmt)}, "
        f"player {name_b} {format(score_b, fmt)}"
    )


def _check_token_weight(token_weight: float) -> float:
    token_weight = float(token_weight)
    if not math.isfinite(token_weight) or token_weight < 0:
        raise ValueError(f"Token weights must be finite and non-negative, got {token_weight:g}")
    return token_weight


class BoxGame:
    """
    Two-player box game.
    
    Player A takes even-numbered turns (0, 2, ...), player B odd ones.
    Every turn the acting player lets the lightest box absorb the next token.
    """
    
    def __init__(self, config: Optional[GameConfig] = None):
        """
        Initialize game.
        
        Args:
            config: Game configuration. Uses default if None.
        """
        if config is None:
            config = get_config()
        
        self._config = config
        self._boxes: List[Box] = []
        self._players: Tuple[Player, Player] = (
            Player(config.players.names[0]),
            Player(config.players.names[1])
        )
        self._turns: List[TurnResult] = []
        self.reset()
    
    @property
    def config(self) -> GameConfig:
        """Game configuration."""
        return self._config
    
    @property
    def boxes(self) -> List[Box]:
        """Boxes in play, in canonical order."""
        return self._boxes
    
    @property
    def player_a(self) -> Player:
        return self._players[0]
    
    @property
    def player_b(self) -> Player:
        return self._players[1]
    
    @property
    def turn(self) -> int:
        """Number of turns played so far."""
        return len(self._turns)
    
    @property
    def current_player(self) -> Player:
        """Player who acts on the next turn."""
        return self._players[self.turn % 2]
    
    @property
    def scores(self) -> Tuple[float, float]:
        return (self.player_a.score, self.player_b.score)
    
    def reset(self) -> None:
        """Rebuild boxes and zero both players."""
        self._boxes = build_boxes(self._config)
        for player in self._players:
            player.reset()
        self._turns = []
    
    def step(self, token_weight: float) -> TurnResult:
        """
        Play one turn with the given token weight.
        
        Raises:
            ValueError: If the token weight is negative.
        """
        token_weight = _check_token_weight(token_weight)
        player = self.current_player
        event = player.take_turn(token_weight, self._boxes)
        
        result = TurnResult(
            turn=self.turn,
            player=player.name,
            box_index=event.box_index,
            box_variant=event.box_variant,
            token_weight=event.token_weight,
            delta_score=event.points,
            box_weight=event.box_weight,
            player_score=player.score
        )
        self._turns.append(result)
        return result
    
    def run(self, input_weights: Iterable[float]) -> GameResult:
        """Play every input weight in order and return the final result."""
        for token_weight in input_weights:
            self.step(token_weight)
        return self.result()
    
    def result(self) -> GameResult:
        """Current scores and turn history as a GameResult."""
        return GameResult(
            score_a=self.player_a.score,
            score_b=self.player_b.score,
            names=(self.player_a.name, self.player_b.name),
            turns=list(self._turns)
        )


def play(
    input_weights: Sequence[float],
    config: Optional[GameConfig] = None,
    report: bool = True
) -> Tuple[float, float]:
    """
    Play a full game on a fresh set of boxes.
    
    Args:
        input_weights: Token weights, used one per turn in order.
        config: Game configuration. Uses default if None.
        report: If True, print the final score line.
        
    Returns:
        (score of player A, score of player B).
    """
    if config is None:
        config = get_config()
    
    # Reject bad input before any box is touched
    weights = [_check_token_weight(w) for w in input_weights]
    
    game = BoxGame(config)
    result = game.run(weights)
    
    if report:
        print(format_scores(result.score_a, result.score_b, config))
    
    return result.scores
