"""Tests for the game logger."""

import pytest

from brickbreaker import logging as game_logging
from brickbreaker.logging import LogLevel, configure_logging, disable_logging, get_logger


class TestGameLogger:
    """Tests for level filtering and formatting."""

    def test_loggers_are_cached(self):
        assert get_logger('physics') is get_logger('physics')

    def test_disabled_prints_nothing(self, capsys):
        disable_logging()
        get_logger('test').error("boom")
        assert capsys.readouterr().out == ""

    def test_format_and_args(self, capsys):
        configure_logging(level='DEBUG')
        get_logger('test').info("%d lives left", 2)
        assert capsys.readouterr().out == "[test] INFO: 2 lives left\n"

    def test_level_filtering(self, capsys):
        configure_logging(level='WARNING')
        log = get_logger('test')
        log.info("hidden")
        log.warning("shown")
        assert capsys.readouterr().out == "[test] WARN: shown\n"

    def test_module_override(self, capsys):
        configure_logging(level='ERROR', modules={'physics': 'TRACE'})
        get_logger('physics').trace("tick")
        get_logger('other').info("hidden")
        assert capsys.readouterr().out == "[physics] TRACE: tick\n"

    def test_bad_format_args_still_logged(self, capsys):
        configure_logging(level='INFO')
        get_logger('test').info("no placeholders", 1)
        assert "no placeholders" in capsys.readouterr().out

    def test_unknown_level_defaults_to_info(self):
        configure_logging(level='LOUD')
        assert get_logger('test').level == LogLevel.INFO

    def test_env_config(self, monkeypatch):
        monkeypatch.setenv('BRICKBREAKER_LOG_LEVEL', 'ERROR')
        monkeypatch.setenv('BRICKBREAKER_LOG_STATE_MACHINE', 'DEBUG')

        game_logging._load_env_config()

        assert get_logger('game_mode').level == LogLevel.ERROR
        assert get_logger('state_machine').level == LogLevel.DEBUG

    def test_exception_includes_traceback(self, capsys):
        configure_logging(level='ERROR')
        log = get_logger('test')
        try:
            raise ValueError("bad brick")
        except ValueError:
            log.exception("failed after %d ticks", 3)

        lines = capsys.readouterr().out.splitlines()
        assert lines[0] == "[test] ERROR: failed after 3 ticks"
        assert lines[-1] == "[test] TRACE: ValueError: bad brick"
