"""
Scoring System
==============

Tracks a player's running score from box absorption events.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List


@dataclass
class ScoreEvent:
    """Record of a single absorption and the points it produced."""
    points: float
    token_weight: float
    box_index: int
    box_variant: str
    box_weight: float  # Box weight after absorbing the token
    
    def __repr__(self) -> str:
        return (
            f"ScoreEvent({self.box_variant}[{self.box_index}] "
            f"absorbed {self.token_weight:g} -> {self.points:g})"
        )


class ScoreTracker:
    """
    Accumulates points for one player.
    
    Points are never negative, so the running score never decreases.
    """
    
    def __init__(self):
        self._score: float = 0.0
        self._events: List[ScoreEvent] = []
    
    @property
    def score(self) -> float:
        """Current total score."""
        return self._score
    
    @property
    def turns(self) -> int:
        """Number of scoring events applied."""
        return len(self._events)
    
    @property
    def events(self) -> List[ScoreEvent]:
        """Copy of all applied events, oldest first."""
        return list(self._events)
    
    def apply(self, event: ScoreEvent) -> float:
        """
        Add an event's points to the score.
        
        Returns:
            The new total score.
        """
        self._score += event.points
        self._events.append(event)
        return self._score
    
    def reset(self) -> None:
        """Reset score to zero."""
        self._score = 0.0
        self._events = []
