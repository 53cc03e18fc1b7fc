"""
Tests for the game orchestrator and the play() entry point.
"""

import pytest

from box_game.core.config_loader import (
    BoxConfig,
    GameConfig,
    GreenConfig,
    PlayersConfig,
    ReportConfig,
    load_config,
)
from box_game.core.game import BoxGame, GameResult, format_scores, play


FIBONACCI_4 = [1, 1, 2, 3]
FIBONACCI_8 = [1, 1, 2, 3, 5, 8, 13, 21]


@pytest.fixture
def config():
    return load_config()


@pytest.fixture
def game(config):
    return BoxGame(config)


class TestPlay:
    """Test full games through play()."""
    
    def test_first_4_fibonacci_numbers(self, config):
        assert play(FIBONACCI_4, config, report=False) == (13.0, 25.0)
    
    def test_first_8_fibonacci_numbers(self, config):
        assert play(FIBONACCI_8, config, report=False) == (155.0, 366.25)
    
    def test_empty_input(self, config):
        assert play([], config, report=False) == (0.0, 0.0)
    
    def test_default_config(self):
        assert play(FIBONACCI_4, report=False) == (13.0, 25.0)
    
    def test_repeat_calls_match(self, config):
        first = play(FIBONACCI_8, config, report=False)
        second = play(FIBONACCI_8, config, report=False)
        assert first == second
    
    def test_prints_score_line(self, config, capsys):
        play(FIBONACCI_8, config)
        
        out = capsys.readouterr().out
        assert out == "Scores: player A 155, player B 366.25\n"
    
    def test_report_disabled(self, config, capsys):
        play(FIBONACCI_4, config, report=False)
        assert capsys.readouterr().out == ""
    
    def test_negative_weight_rejected(self, config):
        with pytest.raises(ValueError, match="non-negative"):
            play([1, -2, 3], config, report=False)
    
    @pytest.mark.parametrize("bad", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_weight_rejected(self, config, bad):
        with pytest.raises(ValueError, match="finite"):
            play([1, bad], config, report=False)
    
    def test_accepts_any_sequence(self, config):
        assert play((1, 1, 2, 3), config, report=False) == (13.0, 25.0)


class TestBoxGame:
    """Test turn-by-turn game flow."""
    
    def test_players_alternate_a_first(self, game):
        players = [game.step(w).player for w in FIBONACCI_4]
        assert players == ["A", "B", "A", "B"]
    
    def test_turn_records(self, game):
        result = game.run(FIBONACCI_4)
        
        assert [t.box_index for t in result.turns] == [0, 1, 2, 3]
        assert [t.delta_score for t in result.turns] == [1.0, 1.0, 12.0, 24.0]
        assert [t.box_variant for t in result.turns] == ["green", "green", "blue", "blue"]
        assert [t.turn for t in result.turns] == [0, 1, 2, 3]
    
    def test_every_token_consumed_once(self, game, config):
        result = game.run(FIBONACCI_8)
        
        assert len(result.turns) == len(FIBONACCI_8)
        assert [t.token_weight for t in result.turns] == FIBONACCI_8
        
        initial = sum(b.initial_weight for b in config.boxes)
        total = sum(b.weight for b in game.boxes)
        assert total == pytest.approx(initial + sum(FIBONACCI_8))
    
    def test_scores_never_decrease(self, game):
        result = game.run(FIBONACCI_8 + [0, 4, 4, 1])
        
        for name in ("A", "B"):
            totals = [t.player_score for t in result.turns if t.player == name]
            assert all(s >= 0 for s in totals)
            assert totals == sorted(totals)
    
    def test_current_player(self, game):
        assert game.current_player is game.player_a
        game.step(1)
        assert game.current_player is game.player_b
    
    def test_reset(self, game):
        game.run(FIBONACCI_8)
        game.reset()
        
        assert game.turn == 0
        assert game.scores == (0.0, 0.0)
        assert [b.weight for b in game.boxes] == [0.0, 0.1, 0.2, 0.3]
        assert game.run(FIBONACCI_4).scores == (13.0, 25.0)
    
    def test_step_rejects_negative(self, game):
        with pytest.raises(ValueError):
            game.step(-1)
        assert game.turn == 0
    
    def test_custom_box_layout(self):
        """Variant comes from each box, not from its position."""
        config = GameConfig(
            boxes=(BoxConfig("blue", 0.0), BoxConfig("green", 0.1)),
            green=GreenConfig(window_size=3),
            players=PlayersConfig(names=("A", "B")),
            report=ReportConfig(score_format="g")
        )
        result = BoxGame(config).run([1, 1])
        
        # blue: pairing(1, 1); green: 1 ** 2
        assert result.scores == (4.0, 1.0)


class TestGameResult:
    """Test winner determination."""
    
    def test_winner(self, game):
        assert game.run(FIBONACCI_4).winner == "B"
    
    def test_tie(self):
        assert GameResult(score_a=0.0, score_b=0.0).winner is None
    
    def test_player_a_wins(self):
        assert GameResult(score_a=2.0, score_b=1.0).winner == "A"


class TestFormatScores:
    
    def test_format(self, config):
        assert format_scores(13.0, 25.0, config) == "Scores: player A 13, player B 25"
        assert format_scores(0.5, 366.25, config) == "Scores: player A 0.5, player B 366.25"
