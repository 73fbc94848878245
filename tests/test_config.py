"""Tests for game configuration loading."""

import pytest

from brickbreaker.config import (
    BRICK_ROWS,
    FIELD_WIDTH,
    STARTING_LIVES,
    ConfigError,
    GameConfig,
    load_config,
)
from brickbreaker.game_mode import BrickBreakerGame


class TestDefaults:
    """Tests for the built-in configuration."""

    def test_defaults_match_constants(self, config):
        assert config.field.width == FIELD_WIDTH
        assert config.lives == STARTING_LIVES
        assert config.bricks.rows == BRICK_ROWS

    def test_grid_dimensions(self, config):
        assert config.bricks.total_width == 795.0
        assert config.bricks.total_height == 145.0


class TestLoadConfig:
    """Tests for YAML loading."""

    def test_partial_file_uses_defaults(self, tmp_path):
        path = tmp_path / "game.yaml"
        path.write_text("lives: 5\npaddle:\n  width: 100\n  speed: 10\n")

        config = load_config(path)

        assert config.lives == 5
        assert config.paddle.width == 100
        assert config.paddle.speed == 10
        assert config.paddle.height == GameConfig().paddle.height
        assert config.bricks.cols == 10

    def test_empty_file_is_default(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")

        assert load_config(path) == GameConfig()

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="not found"):
            load_config(tmp_path / "nope.yaml")

    def test_unparsable_yaml(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("lives: [1, 2\n")

        with pytest.raises(ConfigError, match="Could not parse"):
            load_config(path)

    def test_root_must_be_mapping(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- 1\n- 2\n")

        with pytest.raises(ConfigError, match="mapping"):
            load_config(path)

    def test_out_of_range_value(self, tmp_path):
        path = tmp_path / "zero.yaml"
        path.write_text("lives: 0\n")

        with pytest.raises(ConfigError, match="Invalid configuration"):
            load_config(path)

    def test_paddle_wider_than_field(self, tmp_path):
        path = tmp_path / "wide.yaml"
        path.write_text("paddle:\n  width: 900\n")

        with pytest.raises(ConfigError, match="paddle width"):
            load_config(path)

    def test_grid_wider_than_field(self, tmp_path):
        path = tmp_path / "grid.yaml"
        path.write_text("bricks:\n  cols: 20\n")

        with pytest.raises(ConfigError, match="brick grid width"):
            load_config(path)


class TestOverrides:
    """Tests for GameConfig.with_overrides()."""

    def test_none_values_skipped(self, config):
        assert config.with_overrides(lives=None, **{'field.width': None}) == config

    def test_top_level_and_nested(self, config):
        updated = config.with_overrides(lives=7, **{'field.width': 1024})

        assert updated.lives == 7
        assert updated.field.width == 1024
        assert config.lives == 3

    def test_invalid_override(self, config):
        with pytest.raises(ConfigError):
            config.with_overrides(**{'field.width': 300})

    @pytest.mark.parametrize("key", ["foo.bar", "lives.extra"])
    def test_unknown_section(self, config, key):
        with pytest.raises(ConfigError, match="Unknown config section"):
            config.with_overrides(**{key: 1})


class TestGameUsesConfig:
    """Configuration flows into the built game."""

    def test_custom_game(self, tmp_path):
        path = tmp_path / "small.yaml"
        path.write_text(
            "lives: 1\n"
            "bricks:\n  rows: 3\n  cols: 4\n"
            "ball:\n  speed: 4\n"
        )
        game = BrickBreakerGame(config=load_config(path))

        assert game.lives == 1
        assert len(game.bricks) == 12
        assert game.bricks[0].points == 30

        game.start()
        game.launch(0.0)
        assert game.ball.dy == -4.0
