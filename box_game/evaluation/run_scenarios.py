"""
Scenario Harness
================

Plays every named scenario in the scenario bank and checks the final scores
exactly.

Usage:
    python -m box_game.evaluation.run_scenarios [--scenarios PATH] [--output PATH]
"""

from __future__ import annotations

import argparse
import json
import os
import sys
import time
from dataclasses import dataclass
from typing import List, Optional, Tuple

import numpy as np

from box_game.core.config_loader import GameConfig, get_config
from box_game.core.game import BoxGame


@dataclass
class Scenario:
    """A literal input sequence and the exact scores it must produce."""
    name: str
    inputs: List[int]
    expected: Tuple[float, float]
    description: str = ""


@dataclass
class ScenarioResult:
    """Outcome of playing one scenario."""
    name: str
    scores: Tuple[float, float]
    expected: Tuple[float, float]
    turns: int
    winner: Optional[str]
    elapsed_time: float
    
    @property
    def passed(self) -> bool:
        return self.scores == self.expected


@dataclass
class ScenarioSummary:
    """Summary across all scenarios."""
    passed: int
    failed: int
    mean_score_a: float
    mean_score_b: float
    total_time: float
    results: List[ScenarioResult]
    
    @property
    def all_passed(self) -> bool:
        return self.failed == 0


def _parse_scenario(data: dict) -> Scenario:
    expected = data["expected"]
    if len(expected) != 2:
        raise ValueError(
            f"Scenario '{data.get('name')}': expected must hold 2 scores, got {expected}"
        )
    return Scenario(
        name=str(data["name"]),
        inputs=[int(w) for w in data["inputs"]],
        expected=(float(expected[0]), float(expected[1])),
        description=str(data.get("description", ""))
    )


def load_scenarios(path: Optional[str] = None) -> List[Scenario]:
    """
    Load the scenario bank.
    
    Args:
        path: Path to scenarios.json. Uses default if None.
        
    Returns:
        List of scenarios, in file order.
    """
    if path is None:
        path = os.path.join(os.path.dirname(__file__), "scenarios.json")
    
    with open(path, "r") as f:
        data = json.load(f)
    
    return [_parse_scenario(s) for s in data["scenarios"]]


def run_scenario(
    scenario: Scenario,
    config: Optional[GameConfig] = None,
    verbose: bool = False
) -> ScenarioResult:
    """
    Play a single scenario on a fresh game.
    
    Args:
        scenario: Scenario to play.
        config: Game configuration. Uses default if None.
        verbose: If True, print the outcome.
        
    Returns:
        ScenarioResult for this scenario.
    """
    start_time = time.time()
    game = BoxGame(config)
    outcome = game.run(scenario.inputs)
    elapsed = time.time() - start_time
    
    result = ScenarioResult(
        name=scenario.name,
        scores=outcome.scores,
        expected=scenario.expected,
        turns=len(outcome.turns),
        winner=outcome.winner,
        elapsed_time=elapsed
    )
    
    if verbose:
        status = "PASS" if result.passed else "FAIL"
        print(f"  {status} {scenario.name}: scores=({result.scores[0]:g}, "
              f"{result.scores[1]:g}), expected=({result.expected[0]:g}, "
              f"{result.expected[1]:g})")
    
    return result


def run_scenarios(
    scenarios: Optional[List[Scenario]] = None,
    config: Optional[GameConfig] = None,
    verbose: bool = True
) -> ScenarioSummary:
    """
    Play every scenario and summarize.
    
    Args:
        scenarios: Scenarios to play. Uses scenarios.json if None.
        config: Game configuration. Uses default if None.
        verbose: If True, print progress.
        
    Returns:
        ScenarioSummary with pass/fail counts.
    """
    if scenarios is None:
        scenarios = load_scenarios()
    if config is None:
        config = get_config()
    
    if verbose:
        print(f"Running {len(scenarios)} scenarios...")
    
    total_start = time.time()
    results = [run_scenario(s, config, verbose=verbose) for s in scenarios]
    total_time = time.time() - total_start
    
    passed = sum(1 for r in results if r.passed)
    scores_a = [r.scores[0] for r in results]
    scores_b = [r.scores[1] for r in results]
    
    summary = ScenarioSummary(
        passed=passed,
        failed=len(results) - passed,
        mean_score_a=float(np.mean(scores_a)) if results else 0.0,
        mean_score_b=float(np.mean(scores_b)) if results else 0.0,
        total_time=total_time,
        results=results
    )
    
    if verbose:
        print()
        print("=" * 50)
        print("SCENARIO SUMMARY")
        print("=" * 50)
        print(f"Passed:          {summary.passed}/{len(results)}")
        print(f"Mean score A:    {summary.mean_score_a:.2f}")
        print(f"Mean score B:    {summary.mean_score_b:.2f}")
        print(f"Total time:      {total_time:.4f}s")
        print("=" * 50)
    
    return summary


def save_results(summary: ScenarioSummary, output_path: str) -> None:
    """Save scenario results to JSON."""
    data = {
        "timestamp": time.strftime("%Y-%m-%d %H:%M:%S"),
        "passed": summary.passed,
        "failed": summary.failed,
        "total_time": summary.total_time,
        "results": [
            {
                "name": r.name,
                "scores": list(r.scores),
                "expected": list(r.expected),
                "passed": r.passed,
                "turns": r.turns,
                "winner": r.winner
            }
            for r in summary.results
        ]
    }
    
    with open(output_path, "w") as f:
        json.dump(data, f, indent=2)
    
    print(f"Results saved to {output_path}")


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Run the box game scenario bank")
    parser.add_argument(
        "--scenarios",
        type=str,
        default=None,
        help="Path to scenario bank JSON (uses default if not specified)"
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Path to save results JSON"
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Reduce output verbosity"
    )
    
    args = parser.parse_args(argv)
    
    try:
        scenarios = load_scenarios(args.scenarios)
        config = get_config()
    except (OSError, ValueError, KeyError) as e:
        print(f"Error loading scenarios: {e}")
        return 1
    
    summary = run_scenarios(scenarios, config=config, verbose=not args.quiet)
    
    if args.output:
        save_results(summary, args.output)
    
    return 0 if summary.all_passed else 1


if __name__ == "__main__":
    sys.exit(main())
