"""
Letter Evaluation

Scores one guessed row against the secret word. The counters used for the
duplicate-letter correction live only for the duration of a single call.
"""

from collections import Counter
from typing import List, Sequence

from ..models.game import Cell, LetterStatus


def evaluate_row(secret: str, row: Sequence[Cell]) -> None:
    """
    Updates the status of every cell in a fully filled row, in place.

    Args:
        secret: The word being guessed
        row: Cells holding the guessed letters, one per position of the secret
    """
    secret_counts = Counter(secret)
    matches_counter: Counter = Counter()

    for pos, cell in enumerate(row):
        # Level 1: See if the secret word contains the letter
        if cell.character in secret_counts:
            cell.status = LetterStatus.WRONG_POSITION
            matches_counter[cell.character] += 1
            # Level 2: See if this letter is in the right spot
            if cell.character == secret[pos]:
                cell.status = LetterStatus.RIGHT_POSITION
        else:
            cell.status = LetterStatus.WRONG

    # Level 3: Only as many copies of a letter as the secret holds stay
    # highlighted; exact matches keep their claim
    for cell in row:
        ch = cell.character
        if cell.status == LetterStatus.WRONG_POSITION and matches_counter[ch] > secret_counts[ch]:
            cell.status = LetterStatus.EMPTY
            matches_counter[ch] -= 1


def is_winning_row(row: Sequence[Cell]) -> bool:
    """True when every cell of an evaluated row is an exact match."""
    return all(cell.status == LetterStatus.RIGHT_POSITION for cell in row)


def evaluate_word(secret: str, guess: str) -> List[LetterStatus]:
    """
    Evaluates a plain guess string against the secret.

    Returns:
        List of LetterStatus, one per letter of the guess
    """
    if len(guess) != len(secret):
        raise ValueError(f"Guess '{guess}' must have the same length as the secret")

    row = [Cell(character=ch) for ch in guess]
    evaluate_row(secret, row)
    return [cell.status for cell in row]
