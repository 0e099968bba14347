"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .game import Cell, GamePhase, InvalidSecretLength, LetterStatus, PHASE_MESSAGES

__all__ = ['Cell', 'GamePhase', 'InvalidSecretLength', 'LetterStatus', 'PHASE_MESSAGES']
