"""
Pytest configuration for Gurdle tests.

Adds the project root to sys.path so the tests run without installing the
package, and provides engine fixtures backed by a small word list.
"""

import random
import sys
from pathlib import Path

_root_path = str(Path(__file__).resolve().parent.parent)
if _root_path not in sys.path:
    sys.path.insert(0, _root_path)

import pytest

from gurdle.services.game_service import GameEngine
from gurdle.services.word_validator import WordValidator
from gurdle.utils.game_logger import GameLogger

TEST_WORDS = [
    "ABOUT", "AFTER", "AGAIN", "BRAIN", "CHAIR", "CRANE", "DANCE", "EARLY",
    "EERIE", "ERASE", "FIELD", "HEART", "LIGHT", "SPEED", "TRACE",
]


class Recorder:
    """Observer that remembers every notification it receives."""

    def __init__(self):
        self.messages = []
        self.phases = []

    def __call__(self, engine, message):
        self.messages.append(message)
        self.phases.append(engine.phase())

    def clear(self):
        self.messages.clear()
        self.phases.clear()


@pytest.fixture
def validator():
    return WordValidator(TEST_WORDS, rng=random.Random(1234))


@pytest.fixture
def engine(validator):
    return GameEngine(validator, logger=GameLogger(log_to_file=False))


@pytest.fixture
def recorder(engine):
    observer = Recorder()
    engine.add_observer(observer)
    return observer
