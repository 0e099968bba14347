"""
Game Logger Module for Gurdle

This module provides structured logging for player actions and game events.
Every entry is a single JSON document so the log files are easy to parse.
"""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional


class GameLogger:
    """
    Centralized logging system for the game engine.

    Features:
    - Player action tracking (keystrokes, confirmations, whole-word guesses)
    - Game event logging (new game, won, lost, illegal word)
    - Error logging with exception type and message
    - JSON structured logs for easy parsing
    """

    LOGGER_NAME = 'gurdle_game'

    def __init__(self, log_dir: str = "logs", level: str = "INFO", log_to_file: bool = True,
                 name: Optional[str] = None):
        # Loggers sharing a name share handlers: setting one up replaces the
        # handlers of any other GameLogger with the same name
        self.name = name or self.LOGGER_NAME
        self.log_dir = Path(log_dir)
        self.log_to_file = log_to_file
        if log_to_file:
            self.log_dir.mkdir(parents=True, exist_ok=True)

        self.logger = self._setup_logger(level)

    def _setup_logger(self, level: str) -> logging.Logger:
        """Setup the game logger with file and console handlers."""
        logger = logging.getLogger(self.name)
        logger.setLevel(getattr(logging, str(level).upper(), logging.INFO))

        # Prevent duplicate handlers
        if logger.handlers:
            for handler in list(logger.handlers):
                logger.removeHandler(handler)
                handler.close()

        if self.log_to_file:
            log_file = self.log_file_path()
            file_handler = logging.FileHandler(log_file, encoding='utf-8')
            file_handler.setFormatter(logging.Formatter(
                '%(asctime)s | %(levelname)s | %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            ))
            logger.addHandler(file_handler)

        # Console handler for only important messages (WARNING and above)
        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.WARNING)
        console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
        logger.addHandler(console_handler)

        return logger

    def close(self):
        """Detach and close this logger's handlers."""
        for handler in list(self.logger.handlers):
            self.logger.removeHandler(handler)
            handler.close()

    def log_file_path(self) -> Path:
        """Path of today's log file."""
        return self.log_dir / f"game_log_{datetime.now().strftime('%Y-%m-%d')}.log"

    def _create_log_entry(self,
                          event_type: str,
                          action: str,
                          details: Dict[str, Any]) -> str:
        """Create a structured log entry."""
        log_entry = {
            'timestamp': datetime.now().isoformat(),
            'event_type': event_type,
            'action': action,
            'details': details
        }
        return json.dumps(log_entry, ensure_ascii=False)

    def log_player_action(self,
                          action: str,
                          game_id: Optional[str] = None,
                          **kwargs):
        """
        Log player commands.

        Args:
            action: Type of action (e.g., 'enter_char', 'confirm_guess', 'enter_guess')
            game_id: Game identifier if applicable
            **kwargs: Additional details to log
        """
        details = {'game_id': game_id, **kwargs}
        self.logger.debug(self._create_log_entry('PLAYER_ACTION', action, details))

    def log_game_event(self,
                       game_id: Optional[str],
                       event: str,
                       **kwargs):
        """
        Log game-specific events (new games, wins, losses, illegal words).

        Args:
            game_id: Game identifier
            event: Type of game event (e.g., 'game_won', 'game_lost', 'illegal_word')
            **kwargs: Additional game details
        """
        details = {'game_id': game_id, **self._sanitize_details(event, kwargs)}
        self.logger.info(self._create_log_entry('GAME_EVENT', event, details))

    def log_error(self,
                  error: Exception,
                  action: str,
                  game_id: Optional[str] = None):
        """
        Log errors with full context.

        Args:
            error: Exception that occurred
            action: Action that was being performed
            game_id: Game identifier if applicable
        """
        details = {
            'game_id': game_id,
            'error_type': type(error).__name__,
            'error_message': str(error),
        }
        self.logger.error(self._create_log_entry('ERROR', action, details))

    def _sanitize_details(self, event: str, details: Dict[str, Any]) -> Dict[str, Any]:
        """Mask the secret word unless the game is over."""
        sanitized = details.copy()
        if 'secret' in sanitized and event not in ('game_won', 'game_lost'):
            sanitized['secret'] = '*' * len(sanitized['secret'] or '')
        return sanitized

    def get_log_stats(self) -> Dict[str, Any]:
        """Get statistics about today's logged events."""
        log_file = self.log_file_path()
        if not log_file.exists():
            return {'error': 'No log file found for today'}

        stats = {
            'log_file': str(log_file),
            'file_size_mb': round(log_file.stat().st_size / (1024 * 1024), 2),
            'total_entries': 0,
            'player_actions': 0,
            'game_events': 0,
            'errors': 0
        }

        with open(log_file, 'r', encoding='utf-8') as f:
            for line in f:
                if line.strip():
                    stats['total_entries'] += 1
                    if 'PLAYER_ACTION' in line:
                        stats['player_actions'] += 1
                    elif 'GAME_EVENT' in line:
                        stats['game_events'] += 1
                    elif '"ERROR"' in line:
                        stats['errors'] += 1

        return stats


# Global logger instance (console only; create_engine builds a configured one)
game_logger = GameLogger(log_to_file=False)
