"""
Gurdle - Main Entry Point

Plain-text driver for the game engine. It initializes the engine, subscribes
a printing observer and feeds whole-word guesses read from stdin.

Usage: python main.py [--config NAME] [first-secret-word]
"""

import argparse
import os
import sys
from gurdle.config import config
from gurdle.models import GamePhase, InvalidSecretLength, LetterStatus
from gurdle.services.game_service import initialize_game_engine

STATUS_MARKS = {
    LetterStatus.EMPTY: '_',
    LetterStatus.WRONG: '.',
    LetterStatus.WRONG_POSITION: '?',
    LetterStatus.RIGHT_POSITION: '*',
}

COMMANDS_HELP = "Commands: <word> to guess, 'cheat' to show the secret, 'new' for a new game, 'quit'."


def parse_args(argv):
    parser = argparse.ArgumentParser(description="Guess the secret word.")
    parser.add_argument(
        'secret', nargs='?', default=None,
        help="secret word for the first game (random when omitted)"
    )
    parser.add_argument(
        '--config', choices=sorted(config), default=os.getenv('GURDLE_CONFIG', 'default'),
        help="configuration to use (default: $GURDLE_CONFIG or 'default')"
    )
    args = parser.parse_args(argv)
    # argparse does not check defaults against choices
    if args.config not in config:
        parser.error(f"unknown configuration '{args.config}'")
    return args


def display(engine, message):
    """Observer: print the evaluated rows and the phase message."""
    for attempt in range(engine.completed_attempts()):
        letters = ' '.join(engine.cell(attempt, pos).character for pos in range(engine.word_size))
        marks = ' '.join(STATUS_MARKS[engine.cell(attempt, pos).status] for pos in range(engine.word_size))
        print(f"  {letters}\n  {marks}")
    used = ''.join(ch for ch in 'ABCDEFGHIJKLMNOPQRSTUVWXYZ' if engine.has_been_used(ch))
    print(f"Letters used: {used or '-'}")
    print(message)


def play(engine, first_secret=None):
    """
    Run games until the player quits.

    Raises:
        InvalidSecretLength: If first_secret has the wrong length
    """
    engine.new_game(first_secret)
    print(COMMANDS_HELP)
    while True:
        line = input('> ').strip()
        command = line.lower()
        if command in ('quit', 'q'):
            return
        if command in ('new', 'n'):
            engine.new_game()
            continue
        if command == 'cheat':
            print(engine.secret())
            continue
        engine.enter_guess(line)
        if engine.phase() in (GamePhase.WON, GamePhase.LOST):
            print(f"The word was {engine.secret()}. Type 'new' to play again or 'quit'.")


def main(argv=None):
    """Main function to initialize the engine and start playing."""
    args = parse_args(sys.argv[1:] if argv is None else argv)
    config_class = config[args.config]

    try:
        print("Initializing game engine...")
        engine = initialize_game_engine(config_class)
        print(f"✓ Game engine initialized with {len(engine.validator)} legal words")
        engine.add_observer(display)

        engine.logger.logger.info("Gurdle starting")
        print(f"Guess the {engine.word_size}-letter word in {engine.num_tries} tries.")
        print("=" * 50)
        play(engine, args.secret)

    except InvalidSecretLength as e:
        print(f"Invalid secret word: {e}")
        return 1
    except (KeyboardInterrupt, EOFError):
        print("\nGoodbye.")
    except Exception as e:
        print(f"Error starting game: {e}")
        raise
    return 0


if __name__ == '__main__':
    sys.exit(main())
