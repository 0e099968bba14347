"""
Tests for configuration, logging and the engine factory.
"""

import importlib
import json

import pytest

import gurdle
from gurdle.config import app_config, config, TestingConfig
from gurdle.models import GamePhase
from gurdle.services.game_service import GameEngine, get_game_engine, initialize_game_engine
from gurdle.services.word_validator import WordValidator
from gurdle.utils.game_logger import GameLogger


@pytest.fixture
def file_logger(tmp_path):
    logger = GameLogger(log_dir=str(tmp_path / "logs"), level="DEBUG", log_to_file=True)
    yield logger
    logger.close()


def read_entries(logger):
    lines = logger.log_file_path().read_text(encoding='utf-8').splitlines()
    return [json.loads(line.split(' | ', 2)[2]) for line in lines if line.strip()]


class TestConfig:
    """Tests for environment-based configuration."""

    def test_defaults(self):
        assert TestingConfig.WORD_SIZE == 5
        assert TestingConfig.NUM_TRIES == 6
        assert TestingConfig.LOG_TO_FILE is False

    def test_config_mapping(self):
        assert config['testing'] is TestingConfig
        assert config['default'] is config['development']

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv('NUM_TRIES', '4')
        monkeypatch.setenv('LOG_TO_FILE', 'false')
        try:
            reloaded = importlib.reload(app_config)
            assert reloaded.Config.NUM_TRIES == 4
            assert reloaded.Config.LOG_TO_FILE is False
        finally:
            monkeypatch.delenv('NUM_TRIES')
            monkeypatch.delenv('LOG_TO_FILE')
            importlib.reload(app_config)


class TestCreateEngine:
    """Tests for the engine factory."""

    def test_create_engine(self):
        engine = gurdle.create_engine(TestingConfig)
        assert isinstance(engine, GameEngine)
        assert engine.phase() is None
        engine.new_game()
        assert engine.validator.is_legal(engine.secret())
        assert engine.phase() == GamePhase.ONGOING

    def test_custom_num_tries(self):
        class ShortGameConfig(TestingConfig):
            NUM_TRIES = 2

        engine = gurdle.create_engine(ShortGameConfig)
        engine.new_game("CRANE")
        engine.enter_guess("TRACE")
        engine.enter_guess("ERASE")
        assert engine.phase() == GamePhase.LOST
        assert engine.completed_attempts() == 2

    def test_initialize_global_engine(self):
        engine = initialize_game_engine(TestingConfig)
        assert get_game_engine() is engine


class TestGameLogger:
    """Tests for structured game logging."""

    def test_game_events_are_json(self, file_logger):
        engine = GameEngine(WordValidator(["CRANE", "TRACE"]), logger=file_logger)
        engine.new_game("CRANE")
        engine.enter_guess("TRACE")
        engine.enter_guess("CRANE")

        actions = [entry['action'] for entry in read_entries(file_logger)]
        assert 'new_game' in actions
        assert 'guess_evaluated' in actions
        assert actions[-1] == 'game_won'

    def test_secret_masked_until_game_over(self, file_logger):
        engine = GameEngine(WordValidator(["CRANE", "TRACE"]), logger=file_logger)
        engine.new_game("CRANE")
        engine.enter_guess("CRANE")

        entries = read_entries(file_logger)
        new_game = next(e for e in entries if e['action'] == 'new_game')
        won = next(e for e in entries if e['action'] == 'game_won')
        assert new_game['details']['secret'] == '*****'
        assert won['details']['secret'] == 'CRANE'

    def test_illegal_word_logged(self, file_logger):
        engine = GameEngine(WordValidator(["CRANE"]), logger=file_logger)
        engine.new_game("CRANE")
        engine.enter_guess("ZZZZZ")

        illegal = [e for e in read_entries(file_logger) if e['action'] == 'illegal_word']
        assert illegal[0]['details']['word'] == 'ZZZZZ'
        assert illegal[0]['event_type'] == 'GAME_EVENT'

    def test_invalid_secret_logged_as_error(self, file_logger):
        engine = GameEngine(WordValidator(["CRANE"]), logger=file_logger)
        with pytest.raises(ValueError):
            engine.new_game("CAT")

        errors = [e for e in read_entries(file_logger) if e['event_type'] == 'ERROR']
        assert errors[0]['details']['error_type'] == 'InvalidSecretLength'

    def test_log_stats(self, file_logger):
        engine = GameEngine(WordValidator(["CRANE"]), logger=file_logger)
        engine.new_game("CRANE")
        engine.enter_guess_character("C")

        stats = file_logger.get_log_stats()
        assert stats['game_events'] == 1
        assert stats['player_actions'] == 1
        assert stats['errors'] == 0

    def test_no_file_without_file_logging(self, tmp_path):
        logger = GameLogger(log_dir=str(tmp_path / "logs"), log_to_file=False)
        assert not (tmp_path / "logs").exists()
        assert 'error' in logger.get_log_stats()


class TestSeparateLoggers:
    """Each engine built by the factory logs through its own handlers."""

    def test_second_logger_keeps_first_file_handler(self, tmp_path):
        first = GameLogger(log_dir=str(tmp_path / "first"), name="gurdle_game-first")
        second = GameLogger(log_dir=str(tmp_path / "second"), name="gurdle_game-second")
        try:
            first.log_game_event("g1", "new_game")
            second.log_game_event("g2", "new_game")

            first_entries = read_entries(first)
            second_entries = read_entries(second)
            assert [e['details']['game_id'] for e in first_entries] == ["g1"]
            assert [e['details']['game_id'] for e in second_entries] == ["g2"]
        finally:
            first.close()
            second.close()

    def test_create_engine_uses_distinct_logger_names(self):
        first = gurdle.create_engine(TestingConfig)
        second = gurdle.create_engine(TestingConfig)
        assert first.logger.name != second.logger.name
        assert first.logger.name.startswith(GameLogger.LOGGER_NAME)
        assert first.logger.logger.handlers

    def test_close_detaches_handlers(self, tmp_path):
        logger = GameLogger(log_dir=str(tmp_path / "logs"), name="gurdle_game-closing")
        logger.close()
        assert logger.logger.handlers == []
