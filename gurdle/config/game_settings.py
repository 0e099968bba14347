"""
Game Configuration Constants Module

This module defines the game rule constants and the loading of the legal
word list. All game parameters are centralized here to enable easy modification.
"""

import json
import os
from functools import lru_cache
from typing import Dict, Final, List, Optional, Tuple

# Core Game Configuration Constants
WORD_SIZE: Final[int] = 5
"""
Required length of the secret word and of every guess.
Type: Final[int] - Immutable to prevent accidental modification
"""

NUM_TRIES: Final[int] = 6
"""
Number of attempts a player gets before they lose.
Type: Final[int] - Immutable to prevent accidental modification
"""

DEFAULT_WORD_FILE: Final[str] = os.path.join(
    os.path.dirname(os.path.abspath(__file__)), 'wordles.json'
)


def load_word_list(json_file_path: Optional[str] = None, word_size: int = WORD_SIZE) -> List[str]:
    """
    Load the legal word list from a JSON file.

    Args:
        json_file_path: Path to a JSON array of words; the bundled
            wordles.json is used when omitted
        word_size: Length every word must have

    Returns:
        List[str]: List of uppercase words, in file order

    Raises:
        FileNotFoundError: If the word list file is not found
        ValueError: If the file is malformed, the list is empty, or it
            contains invalid words
    """
    if json_file_path is None:
        json_file_path = DEFAULT_WORD_FILE

    try:
        with open(json_file_path, 'r', encoding='utf-8') as f:
            word_list = json.load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Word list file not found: {json_file_path}")
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {json_file_path}: {e}") from e

    if not isinstance(word_list, list):
        raise ValueError("JSON file must contain an array of words")

    if not word_list:
        raise ValueError("Word list cannot be empty")

    # Convert all words to uppercase and validate
    uppercase_words = [str(word).strip().upper() for word in word_list]

    for word in uppercase_words:
        if len(word) != word_size:
            raise ValueError(f"Word '{word}' is not {word_size} characters long")
        if not word.isalpha():
            raise ValueError(f"Word '{word}' contains non-alphabetic characters")

    return uppercase_words


def validate_word_list_integrity(words: List[str], word_size: int = WORD_SIZE) -> bool:
    """
    Validates the integrity and consistency of a word list.

    This function performs validation to ensure:
    1. Length validation: All words must be exactly word_size characters
    2. Character validation: Only alphabetic characters allowed
    3. Uniqueness validation: No duplicate entries
    4. Format validation: Consistent uppercase formatting

    Returns:
        bool: True if word list passes all validation checks

    Raises:
        ValueError: If any validation check fails with detailed error message
    """
    if not words:
        raise ValueError("Word list cannot be empty")

    for index, word in enumerate(words):
        if len(word) != word_size:
            raise ValueError(f"Word at index {index} '{word}' is not {word_size} characters long")

        if not word.isalpha():
            raise ValueError(f"Word at index {index} '{word}' contains non-alphabetic characters")

        if not word.isupper():
            raise ValueError(f"Word at index {index} '{word}' is not in uppercase format")

    if len(words) != len(set(words)):
        seen = set()
        duplicates = sorted({word for word in words if word in seen or seen.add(word)})
        raise ValueError(f"Duplicate words found in word list: {duplicates}")

    return True


def get_word_statistics(words: List[str]) -> dict:
    """
    Analyzes a word list and returns statistical information.

    Returns:
        dict: Statistical analysis including:
            - total_words: Number of words in the list
            - avg_vowel_count: Average vowels per word
            - letter_frequency: Distribution of letters across all words
            - most_common_letters: Five most frequent letters with counts
    """
    if not words:
        return {"error": "Word list is empty"}

    vowels = set('AEIOU')
    total_vowels = sum(len([char for char in word if char in vowels]) for word in words)

    letter_frequency: Dict[str, int] = {}
    for word in words:
        for char in word:
            letter_frequency[char] = letter_frequency.get(char, 0) + 1

    return {
        "total_words": len(words),
        "avg_vowel_count": round(total_vowels / len(words), 2),
        "letter_frequency": letter_frequency,
        "most_common_letters": sorted(letter_frequency.items(), key=lambda x: x[1], reverse=True)[:5]
    }


@lru_cache(maxsize=None)
def get_word_list() -> Tuple[str, ...]:
    """The bundled word list, read on first use and cached."""
    return tuple(load_word_list())


if __name__ == "__main__":

    try:
        validate_word_list_integrity(list(get_word_list()))
        print(" Word list validation passed")

        stats = get_word_statistics(list(get_word_list()))
        print(f" Word statistics: {stats}")
    except ValueError as config_error:
        print(f" Configuration validation failed: {config_error}")
        exit(1)
