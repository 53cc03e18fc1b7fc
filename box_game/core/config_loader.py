"""
Configuration Loader
====================

Loads and validates game_config.yaml, providing typed access to all parameters.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Tuple, Optional

import yaml


VALID_VARIANTS = ("green", "blue")


@dataclass(frozen=True)
class BoxConfig:
    """Configuration for a single box."""
    variant: str            # "green" or "blue"
    initial_weight: float


@dataclass(frozen=True)
class GreenConfig:
    """Green box scoring parameters."""
    window_size: int


@dataclass(frozen=True)
class PlayersConfig:
    """Player names, in turn order."""
    names: Tuple[str, str]


@dataclass(frozen=True)
class ReportConfig:
    """Console report settings."""
    score_format: str


@dataclass(frozen=True)
class GameConfig:
    """
    Complete game configuration loaded from YAML.
    
    All values are immutable so one instance can back any number of games.
    """
    boxes: Tuple[BoxConfig, ...]
    green: GreenConfig
    players: PlayersConfig
    report: ReportConfig
    
    @property
    def num_boxes(self) -> int:
        """Total number of boxes in play."""
        return len(self.boxes)
    
    def get_box(self, index: int) -> BoxConfig:
        """Get box config by position."""
        if 0 <= index < len(self.boxes):
            return self.boxes[index]
        raise ValueError(f"Invalid box index: {index}")


def _parse_box(box_data: dict) -> BoxConfig:
    """Parse a single box entry from YAML."""
    if not isinstance(box_data, dict) or "variant" not in box_data:
        raise ValueError(f"Box entry must have a variant, got {box_data}")
    return BoxConfig(
        variant=str(box_data["variant"]).lower(),
        initial_weight=float(box_data.get("initial_weight", 0.0))
    )


def _validate_config(config: GameConfig) -> None:
    """Validate configuration consistency."""
    if not config.boxes:
        raise ValueError("At least one box must be configured")
    
    for i, box in enumerate(config.boxes):
        if box.variant not in VALID_VARIANTS:
            raise ValueError(
                f"Box {i}: variant must be one of {VALID_VARIANTS}, got '{box.variant}'"
            )
        if box.initial_weight < 0:
            raise ValueError(
                f"Box {i}: initial_weight must be non-negative, got {box.initial_weight}"
            )
    
    if config.green.window_size < 1:
        raise ValueError(
            f"green.window_size must be at least 1, got {config.green.window_size}"
        )
    
    if len(config.players.names) != 2:
        raise ValueError(
            f"Exactly two player names are required, got {list(config.players.names)}"
        )
    
    if config.players.names[0] == config.players.names[1]:
        raise ValueError(f"Player names must differ, got {list(config.players.names)}")


def load_config(config_path: Optional[str] = None) -> GameConfig:
    """
    Load and validate game configuration from YAML.
    
    Args:
        config_path: Path to game_config.yaml. If None, uses default location.
        
    Returns:
        Validated GameConfig instance.
        
    Raises:
        FileNotFoundError: If config file doesn't exist.
        ValueError: If config validation fails.
    """
    if config_path is None:
        config_path = os.path.join(
            os.path.dirname(os.path.dirname(__file__)),
            "game_config.yaml"
        )
    
    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")
    
    with open(config_path, "r") as f:
        raw = yaml.safe_load(f)
    
    if not isinstance(raw, dict):
        raise ValueError(f"Config file {config_path} must contain a mapping")
    
    boxes = tuple(_parse_box(b) for b in raw.get("boxes") or [])
    
    green_data = raw.get("green") or {}
    green = GreenConfig(
        window_size=int(green_data.get("window_size", 3))
    )
    
    players_data = raw.get("players") or {}
    names: List[str] = [str(n) for n in players_data.get("names", ["A", "B"])]
    players = PlayersConfig(names=tuple(names))
    
    report_data = raw.get("report") or {}
    report = ReportConfig(
        score_format=str(report_data.get("score_format", "g"))
    )
    
    config = GameConfig(
        boxes=boxes,
        green=green,
        players=players,
        report=report
    )
    
    _validate_config(config)
    return config


# Module-level singleton for convenience
_cached_config: Optional[GameConfig] = None


def get_config() -> GameConfig:
    """Get the cached game configuration, loading if necessary."""
    global _cached_config
    if _cached_config is None:
        _cached_config = load_config()
    return _cached_config


def reload_config(config_path: Optional[str] = None) -> GameConfig:
    """Reload the configuration (useful for testing)."""
    global _cached_config
    _cached_config = load_config(config_path)
    return _cached_config
