"""
Game Service

Contains the game engine: the state machine that drives a single Wordle-style
game from the first keystroke to a win or a loss.
"""

import threading
import uuid
from collections import Counter
from dataclasses import replace
from typing import Callable, List, Optional

from ..config.app_config import Config
from ..config.game_settings import NUM_TRIES, WORD_SIZE
from ..models.game import Cell, GamePhase, InvalidSecretLength, LetterStatus, PHASE_MESSAGES
from ..utils.game_logger import GameLogger, game_logger
from .evaluation import evaluate_row, is_winning_row
from .word_validator import WordValidator

Observer = Callable[["GameEngine", str], None]

# Keyboard precedence: a letter shows the best status it has ever had
_STATUS_RANK = {
    LetterStatus.EMPTY: 0,
    LetterStatus.WRONG: 1,
    LetterStatus.WRONG_POSITION: 2,
    LetterStatus.RIGHT_POSITION: 3,
}


class GameEngine:
    """
    Core game engine for one player.

    This class handles:
    - Secret selection (random, or mandated for testing)
    - Character-by-character and whole-word guess entry
    - Guess validation against the legal word list and evaluation
    - Phase transitions and observer notification

    Bad player input never raises: it shows up as the transient ILLEGAL_WORD
    phase or is silently ignored.
    """

    def __init__(self, validator: WordValidator, word_size: int = WORD_SIZE,
                 num_tries: int = NUM_TRIES, logger: Optional[GameLogger] = None):
        if validator.word_size != word_size:
            raise ValueError(
                f"Validator holds {validator.word_size}-letter words, engine expects {word_size}"
            )
        self.validator = validator
        self.word_size = word_size
        self.num_tries = num_tries
        self.logger = logger or game_logger

        self._observers: List[Observer] = []
        self._lock = threading.RLock()

        self.game_id: Optional[str] = None
        self._secret: Optional[str] = None
        self._secret_counts: Counter = Counter()
        self._attempt_num = 0
        self._char_pos = 0
        self._letters_used: List[str] = []
        self._grid: List[List[Cell]] = []
        self._phase: Optional[GamePhase] = None

    # ******** Observers ********

    def add_observer(self, observer: Observer) -> None:
        """Register a callback invoked as observer(engine, message) after each change."""
        self._observers.append(observer)

    def remove_observer(self, observer: Observer) -> None:
        self._observers.remove(observer)

    def _notify_observers(self, message: str) -> None:
        for observer in list(self._observers):
            try:
                observer(self, message)
            except Exception as e:
                self.logger.log_error(e, 'notify_observers', self.game_id)
                raise

    def _notify_phase(self) -> None:
        self._notify_observers(PHASE_MESSAGES[self._phase])

    # ******** Game lifecycle ********

    def new_game(self, secret: Optional[str] = None) -> None:
        """
        Start a new game, discarding all previous attempts.

        Args:
            secret: Word to guess. When omitted, a legal word is chosen at
                random. A mandated secret is not checked against the word
                list, which makes deterministic tests possible.

        Raises:
            InvalidSecretLength: If the mandated secret has the wrong length
        """
        with self._lock:
            if secret is None:
                secret = self.validator.random_word()
                mandated = False
            else:
                mandated = True
                secret = secret.upper()
                if len(secret) != self.word_size:
                    error = InvalidSecretLength(secret, self.word_size)
                    self.logger.log_error(error, 'new_game', self.game_id)
                    raise error

            self.game_id = str(uuid.uuid4())
            self._secret = secret
            self._secret_counts = Counter(self._secret)
            self._attempt_num = 0
            self._char_pos = 0
            self._letters_used = []
            self._grid = [
                [Cell() for _ in range(self.word_size)]
                for _ in range(self.num_tries)
            ]
            self._phase = GamePhase.ONGOING

            self.logger.log_game_event(
                self.game_id, 'new_game',
                secret=self._secret, mandated=mandated,
                word_size=self.word_size, num_tries=self.num_tries
            )
            self._notify_phase()

    # ******** Character-by-character guesses ********

    def enter_guess_character(self, guess_char: str) -> None:
        """
        One more letter of the current guess has been typed.

        Extra letters beyond the word size, and letters typed when no game
        is ongoing, are ignored.
        """
        with self._lock:
            if self._phase != GamePhase.ONGOING or self._char_pos >= self.word_size:
                return
            if not isinstance(guess_char, str):
                return
            guess_char = guess_char.upper()
            if len(guess_char) != 1:
                return

            self._grid[self._attempt_num][self._char_pos].character = guess_char
            self._letters_used.append(guess_char)
            self._char_pos += 1

            self.logger.log_player_action(
                'enter_char', self.game_id, char=guess_char, position=self._char_pos - 1
            )
            self._notify_phase()

    def _illegal_word_cleanup(self) -> None:
        """
        An improper guess was entered. Clear out the current row, reset the
        cursor and let the observers re-display.
        """
        row = self._grid[self._attempt_num]
        word = self._row_string(row)

        self._phase = GamePhase.ILLEGAL_WORD
        for pos, cell in enumerate(row):
            if cell.character in self._letters_used:
                self._letters_used.remove(cell.character)
            row[pos] = Cell()
        self._char_pos = 0

        self.logger.log_game_event(
            self.game_id, 'illegal_word', word=word.strip(), attempt=self._attempt_num
        )
        self._notify_phase()
        self._phase = GamePhase.ONGOING

    def confirm_guess(self) -> None:
        """
        The player has finished typing a guess: check it and evaluate it.

        An incomplete or unknown word is rolled back without using up an
        attempt.
        """
        with self._lock:
            if self._phase != GamePhase.ONGOING:
                return

            self.logger.log_player_action(
                'confirm_guess', self.game_id, attempt=self._attempt_num, position=self._char_pos
            )

            if self._char_pos != self.word_size:
                self._illegal_word_cleanup()
                return

            row = self._grid[self._attempt_num]
            word = self._row_string(row)
            if not self.validator.is_legal(word):
                self._illegal_word_cleanup()
                return

            evaluate_row(self._secret, row)

            if is_winning_row(row):
                self._phase = GamePhase.WON
            elif self._attempt_num == self.num_tries - 1:
                # This was the last guess
                self._phase = GamePhase.LOST
            else:
                self._phase = GamePhase.ONGOING

            self._char_pos = 0
            self._attempt_num += 1

            self.logger.log_game_event(
                self.game_id, 'guess_evaluated',
                word=word, attempt=self._attempt_num,
                statuses=[cell.status.value for cell in row]
            )
            if self._phase == GamePhase.WON:
                self.logger.log_game_event(
                    self.game_id, 'game_won', secret=self._secret, attempts=self._attempt_num
                )
            elif self._phase == GamePhase.LOST:
                self.logger.log_game_event(
                    self.game_id, 'game_lost', secret=self._secret, attempts=self._attempt_num
                )

            self._notify_phase()

    # ******** Full-string-at-once guesses ********

    def enter_guess(self, guess: str) -> None:
        """
        The player entered a complete guess all at once.

        A guess of the wrong length is reported as an illegal word without
        touching the grid.
        """
        with self._lock:
            if self._phase != GamePhase.ONGOING:
                return

            self.logger.log_player_action('enter_guess', self.game_id, guess=guess)

            # Uppercasing can change the length ('ß' becomes 'SS')
            guess = guess.upper()
            if len(guess) != self.word_size:
                self._phase = GamePhase.ILLEGAL_WORD
                self.logger.log_game_event(
                    self.game_id, 'illegal_word', word=guess, attempt=self._attempt_num
                )
                self._notify_phase()
                self._phase = GamePhase.ONGOING
                return

            row = self._grid[self._attempt_num]
            for pos, ch in enumerate(guess):
                row[pos].character = ch
                self._letters_used.append(ch)
            self._char_pos = self.word_size
            self.confirm_guess()

    # ******** Queries ********

    def phase(self) -> Optional[GamePhase]:
        """Current phase, or None before the first game."""
        return self._phase

    def message(self) -> Optional[str]:
        """Human-readable message for the current phase."""
        return PHASE_MESSAGES.get(self._phase)

    def cell(self, attempt: int, position: int) -> Cell:
        """
        What was typed at a specific point of this game.

        Returns a copy; the grid itself is only changed by commands.

        Raises:
            IndexError: If the attempt or position is outside the grid
        """
        if not (0 <= attempt < len(self._grid)) or not (0 <= position < self.word_size):
            raise IndexError(f"No cell at attempt {attempt}, position {position}")
        return replace(self._grid[attempt][position])

    def row_word(self, attempt: int) -> str:
        """The letters of one row, blanks included."""
        if not 0 <= attempt < len(self._grid):
            raise IndexError(f"No attempt {attempt}")
        return self._row_string(self._grid[attempt])

    def secret(self) -> Optional[str]:
        return self._secret

    def completed_attempts(self) -> int:
        """How many legal guesses have been evaluated in this game."""
        return self._attempt_num

    def current_position(self) -> int:
        return self._char_pos

    def has_been_used(self, ch: str) -> bool:
        """
        Has this letter been typed in this game?

        Letters removed by an illegal-word rollback are no longer counted,
        one occurrence per rolled back cell.
        """
        return ch.upper() in self._letters_used

    def keyboard_status(self, ch: str) -> LetterStatus:
        """
        Best status this letter has had in any evaluated row of this game,
        RIGHT_POSITION over WRONG_POSITION over WRONG. EMPTY if never seen.
        """
        ch = ch.upper()
        best = LetterStatus.EMPTY
        for row in self._grid[:self._attempt_num]:
            for cell in row:
                if cell.character == ch and _STATUS_RANK[cell.status] > _STATUS_RANK[best]:
                    best = cell.status
        return best

    @staticmethod
    def _row_string(row: List[Cell]) -> str:
        return ''.join(cell.character for cell in row)


# Global engine instance
_game_engine: Optional[GameEngine] = None


def get_game_engine() -> Optional[GameEngine]:
    """Get the global game engine instance."""
    return _game_engine


def initialize_game_engine(config_class=Config) -> GameEngine:
    """Initialize the global game engine instance."""
    global _game_engine
    from .. import create_engine

    _game_engine = create_engine(config_class)
    return _game_engine
