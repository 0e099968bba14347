"""
Services Package

Contains the game logic: letter evaluation, word validation and the engine.
"""

from .evaluation import evaluate_row, evaluate_word, is_winning_row
from .word_validator import WordValidator
from .game_service import GameEngine, get_game_engine, initialize_game_engine

__all__ = [
    'evaluate_row', 'evaluate_word', 'is_winning_row',
    'WordValidator',
    'GameEngine', 'get_game_engine', 'initialize_game_engine'
]
