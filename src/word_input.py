# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""
Word input handling.

Turns free-form user text into the word list handed to the generator and
produces the user-facing messages around a generation run:
- Words may be separated by commas, semicolons or newlines
- At most MAX_WORDS words are used; extras are dropped with a warning
- Words too long for the grid are reported (the generator skips them)
"""

import logging
import os
import random
import re
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from models import PuzzleData
from wordsearch_generator import normalize_word

logger = logging.getLogger(__name__)

MAX_WORDS = 20
WORD_SEPARATORS = re.compile(r"[\n,;]+")

SAMPLE_WORD_SETS = [
    "NATUREZA, FLORESTA, ANIMAIS, PLANTAS, ARVORE",
    "MATEMATICA, NUMERO, SOMA, SUBTRACAO, DIVISAO",
    "HISTORIA, BRASIL, DESCOBRIMENTO, INDEPENDENCIA",
    "CIENCIAS, EXPERIMENTO, HIPOTESE, RESULTADO",
]


class WordInputError(Exception):
    """Raised when no usable word list can be collected."""
    pass


@dataclass
class WordInput:
    """Parsed word list plus any warnings for the user."""
    words: List[str]
    warnings: List[str] = field(default_factory=list)
    too_long: List[str] = field(default_factory=list)
    truncated: bool = False


@dataclass
class PlacementReport:
    """How many of the requested words made it into the grid."""
    placed: int
    requested: int

    @property
    def complete(self) -> bool:
        return self.placed >= self.requested

    @property
    def message(self) -> str:
        if self.complete:
            return f"All {self.requested} words were placed."
        return f"{self.placed} of {self.requested} words were placed in the grid."


def split_words(text: str) -> List[str]:
    """Split text on commas, semicolons and newlines, dropping blanks."""
    return [w.strip() for w in WORD_SEPARATORS.split(text) if w.strip()]


def parse_word_input(
    text: str,
    grid_size: int,
    max_words: int = MAX_WORDS
) -> WordInput:
    """
    Parse user text into a word list for the generator.

    Args:
        text: Free-form text with one or more words
        grid_size: Grid size the words are meant for
        max_words: Maximum number of words to keep

    Returns:
        WordInput with the words to use and any warnings

    Raises:
        WordInputError: If the text contains no words
    """
    words = split_words(text or "")

    if not words:
        raise WordInputError("Add at least one word to generate a word search.")

    result = WordInput(words=words)

    if len(words) > max_words:
        result.words = words[:max_words]
        result.truncated = True
        result.warnings.append(
            f"Too many words! Using only the first {max_words}."
        )

    result.too_long = [
        w for w in result.words if len(normalize_word(w)) > grid_size
    ]
    if result.too_long:
        result.warnings.append(
            f"Some words are longer than the grid ({grid_size}) and will be "
            f"ignored: {', '.join(result.too_long)}"
        )

    for warning in result.warnings:
        logger.warning(warning)

    return result


def load_word_file(path: str) -> str:
    """
    Read a word list file.

    Raises:
        WordInputError: If the file is missing, unreadable or not UTF-8
    """
    file_path = Path(path)
    if not file_path.exists():
        raise WordInputError(f"Word file not found: {file_path}")
    if not file_path.is_file():
        raise WordInputError(f"Word file is not a regular file: {file_path}")

    logger.debug(f"Loading words from {file_path}")
    try:
        return file_path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise WordInputError(f"Word file is not valid UTF-8: {file_path} ({e})") from e
    except OSError as e:
        raise WordInputError(f"Cannot read word file {file_path}: {e}") from e


def pick_sample_words(rng: Optional[random.Random] = None) -> str:
    """Pick one of the sample word sets at random."""
    rng = rng or random.Random()
    return rng.choice(SAMPLE_WORD_SETS)


def placement_report(puzzle: PuzzleData, requested_count: int) -> PlacementReport:
    """Compare the placed words against the number requested."""
    return PlacementReport(placed=len(puzzle.placements), requested=requested_count)
