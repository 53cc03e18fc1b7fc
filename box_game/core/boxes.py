"""
Boxes
=====

Green and blue boxes absorb token weights and score each absorption.

- Green: square of the mean of the most recent absorbed weights
  (window size from config, 3 by default).
- Blue: Cantor pairing of the smallest and largest weight absorbed so far.
"""

from __future__ import annotations

from collections import deque
from typing import Deque, List, Optional, Tuple

import numpy as np

from box_game.core.config_loader import GameConfig, get_config


GREEN = "green"
BLUE = "blue"


def pairing(a: float, b: float) -> float:
    """
    Cantor's pairing function.
    
    pairing(a, b) = (a + b) * (a + b + 1) / 2 + b, so pairing(0, 1) == 2.
    """
    total = a + b
    return total * (total + 1) / 2 + b


class Box:
    """
    Base class for all boxes.
    
    Holds the running weight; subclasses keep their own absorption history
    and implement `_score_absorption()`. Boxes compare by weight only.
    
    Not meant to be instantiated: build a GreenBox or BlueBox, or use make_box().
    """
    
    variant: str = ""
    
    def __init__(self, initial_weight: float = 0.0):
        self._weight: float = float(initial_weight)
        self._absorbed: int = 0
    
    @property
    def weight(self) -> float:
        """Current total weight (initial weight plus everything absorbed)."""
        return self._weight
    
    @property
    def absorbed_count(self) -> int:
        """Number of tokens absorbed so far."""
        return self._absorbed
    
    @property
    def history(self) -> Tuple[float, ...]:
        """Score-relevant absorbed weights, oldest/smallest first."""
        raise NotImplementedError
    
    def absorb(self, token_weight: float) -> float:
        """
        Absorb a token and return the score it produces.
        
        Args:
            token_weight: Non-negative weight of the token.
            
        Returns:
            Score for this absorption.
        """
        token_weight = float(token_weight)
        score = self._score_absorption(token_weight)
        self._weight += token_weight
        self._absorbed += 1
        return score
    
    def _score_absorption(self, token_weight: float) -> float:
        raise NotImplementedError
    
    def __lt__(self, other: "Box") -> bool:
        return self._weight < other._weight
    
    def __repr__(self) -> str:
        return f"{type(self).__name__}(weight={self._weight:g}, history={list(self.history)})"


class GreenBox(Box):
    """Scores the square of the mean of the most recently absorbed weights."""
    
    variant = GREEN
    
    def __init__(self, initial_weight: float = 0.0, window_size: int = 3):
        super().__init__(initial_weight)
        self._window: Deque[float] = deque(maxlen=window_size)
    
    @property
    def window_size(self) -> int:
        return self._window.maxlen
    
    @property
    def history(self) -> Tuple[float, ...]:
        return tuple(self._window)
    
    def _score_absorption(self, token_weight: float) -> float:
        # deque(maxlen) evicts the oldest entry on overflow
        self._window.append(token_weight)
        mean = float(np.mean(self._window))
        return mean ** 2


class BlueBox(Box):
    """Scores pairing(smallest, largest) over every weight absorbed so far."""
    
    variant = BLUE
    
    def __init__(self, initial_weight: float = 0.0):
        super().__init__(initial_weight)
        self._smallest: Optional[float] = None
        self._largest: Optional[float] = None
    
    @property
    def smallest(self) -> Optional[float]:
        """Smallest absorbed weight, None before the first absorption."""
        return self._smallest
    
    @property
    def largest(self) -> Optional[float]:
        """Largest absorbed weight, None before the first absorption."""
        return self._largest
    
    @property
    def history(self) -> Tuple[float, ...]:
        if self._smallest is None:
            return ()
        if self._smallest == self._largest:
            return (self._smallest,)
        return (self._smallest, self._largest)
    
    def _score_absorption(self, token_weight: float) -> float:
        if self._smallest is None:
            self._smallest = token_weight
            self._largest = token_weight
        elif token_weight < self._smallest:
            self._smallest = token_weight
        elif token_weight > self._largest:
            self._largest = token_weight
        return pairing(self._smallest, self._largest)


def make_box(
    variant: str,
    initial_weight: float = 0.0,
    config: Optional[GameConfig] = None
) -> Box:
    """
    Create a box of the given variant.
    
    Args:
        variant: "green" or "blue".
        initial_weight: Starting weight.
        config: Game configuration (green window size). Uses default if None.
        
    Returns:
        New box instance.
    """
    if config is None:
        config = get_config()
    
    variant = variant.lower()
    if variant == GREEN:
        return GreenBox(initial_weight, window_size=config.green.window_size)
    if variant == BLUE:
        return BlueBox(initial_weight)
    raise ValueError(f"Unknown box variant: '{variant}'")


def build_boxes(config: Optional[GameConfig] = None) -> List[Box]:
    """Create a fresh box for every configured entry, in configured order."""
    if config is None:
        config = get_config()
    
    return [make_box(box.variant, box.initial_weight, config) for box in config.boxes]
