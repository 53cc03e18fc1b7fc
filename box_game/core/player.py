"""
Player
======

A player picks the lightest box each turn and banks the score it returns.
"""

from __future__ import annotations

from typing import List, Sequence

from box_game.core.boxes import Box
from box_game.core.scoring import ScoreEvent, ScoreTracker


def select_box(boxes: Sequence[Box]) -> int:
    """
    Index of the box with the smallest weight.
    
    Ties go to the box that comes first in `boxes`.
    
    Raises:
        ValueError: If `boxes` is empty.
    """
    if not boxes:
        raise ValueError("Cannot select a box from an empty collection")
    
    best = 0
    for i in range(1, len(boxes)):
        if boxes[i] < boxes[best]:
            best = i
    return best


class Player:
    """One of the two players. Starts at 0 and only ever gains points."""
    
    def __init__(self, name: str):
        self._name = name
        self._tracker = ScoreTracker()
    
    @property
    def name(self) -> str:
        return self._name
    
    @property
    def score(self) -> float:
        """Running total score."""
        return self._tracker.score
    
    @property
    def turns(self) -> int:
        """Number of turns taken."""
        return self._tracker.turns
    
    @property
    def events(self) -> List[ScoreEvent]:
        """Score events of every turn taken, oldest first."""
        return self._tracker.events
    
    def take_turn(self, token_weight: float, boxes: Sequence[Box]) -> ScoreEvent:
        """
        Let the lightest box absorb the token and add its score.
        
        Args:
            token_weight: Weight of the token used this turn.
            boxes: All boxes in play, in canonical order.
            
        Returns:
            ScoreEvent for this turn.
        """
        index = select_box(boxes)
        box = boxes[index]
        points = box.absorb(token_weight)
        
        event = ScoreEvent(
            points=points,
            token_weight=float(token_weight),
            box_index=index,
            box_variant=box.variant,
            box_weight=box.weight
        )
        self._tracker.apply(event)
        return event
    
    def reset(self) -> None:
        self._tracker.reset()
    
    def __repr__(self) -> str:
        return f"Player({self._name}, score={self.score:g})"
