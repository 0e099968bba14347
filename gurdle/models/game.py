"""
Game Data Models

Contains all game-related data structures and enums.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict


class LetterStatus(Enum):
    """Status of a guessed letter relative to the secret word."""
    EMPTY = "EMPTY"
    WRONG = "WRONG"
    WRONG_POSITION = "WRONG_POSITION"
    RIGHT_POSITION = "RIGHT_POSITION"


class GamePhase(Enum):
    """
    Phase of the current game.

    ILLEGAL_WORD is transient: the engine enters it, notifies its observers
    and returns to ONGOING within the same command.
    """
    ONGOING = "ONGOING"
    WON = "WON"
    LOST = "LOST"
    ILLEGAL_WORD = "ILLEGAL_WORD"


PHASE_MESSAGES: Dict[GamePhase, str] = {
    GamePhase.ONGOING: "Make a guess!",
    GamePhase.WON: "You won!",
    GamePhase.LOST: "You lost.",
    GamePhase.ILLEGAL_WORD: "Illegal word.",
}


@dataclass
class Cell:
    """One letter slot of the guess grid."""
    character: str = ' '
    status: LetterStatus = LetterStatus.EMPTY

    def __str__(self) -> str:
        return self.character


class InvalidSecretLength(ValueError):
    """Raised when a mandated secret does not have the configured word length."""

    def __init__(self, secret: str, expected_length: int):
        self.secret = secret
        self.expected_length = expected_length
        super().__init__(
            f"Secret '{secret}' has length {len(secret)}, expected {expected_length}"
        )
