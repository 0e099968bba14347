"""
Gurdle Game Package

A Wordle-style word guessing game: a game engine driven by character and
whole-word guess commands, with observers notified after every change.
"""

import uuid

from .config import Config


def create_engine(config_class=Config, rng=None):
    """
    Factory for creating configured game engine instances.

    Args:
        config_class: Configuration class to use
        rng: Optional random.Random used to pick secrets

    Returns:
        GameEngine wired with the word validator and logger. No game is
        started; call new_game() first.
    """
    from .services.game_service import GameEngine
    from .services.word_validator import WordValidator
    from .utils.game_logger import GameLogger

    validator = WordValidator.from_file(config_class.WORD_FILE, config_class.WORD_SIZE, rng)
    logger = GameLogger(
        log_dir=config_class.LOG_DIR,
        level=config_class.LOG_LEVEL,
        log_to_file=config_class.LOG_TO_FILE,
        name=f"{GameLogger.LOGGER_NAME}-{uuid.uuid4().hex[:8]}"
    )

    return GameEngine(
        validator,
        word_size=config_class.WORD_SIZE,
        num_tries=config_class.NUM_TRIES,
        logger=logger
    )
