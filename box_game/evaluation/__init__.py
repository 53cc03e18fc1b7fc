"""
Evaluation Package
==================

Contains the scenario bank and the harness that checks final scores against it.
"""

from box_game.evaluation.run_scenarios import load_scenarios, run_scenarios

__all__ = ["load_scenarios", "run_scenarios"]
