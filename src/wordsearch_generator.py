# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""
Word Search Generator

Places words into a square grid along four directions and fills the
remaining cells with random letters:
- Words are normalized to A-Z (accents stripped)
- Longest words are placed first
- Each word goes to the first feasible (direction, position) candidate,
  both tried in random order
- Crossing words may share a cell when they agree on its letter
- Words that cannot be placed are left out; earlier words are never moved
"""

import logging
import os
import random
import sys
from typing import List, Optional, Sequence, Tuple, TypeVar

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from models import Direction, PuzzleData, WordPlacement, normalize_word

logger = logging.getLogger(__name__)

LETTERS = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
EMPTY = ""

T = TypeVar("T")


def can_place_word(
    grid: List[List[str]],
    word: str,
    start_row: int,
    start_col: int,
    direction: Direction
) -> bool:
    """Check that every cell the word needs is in bounds and empty or matching."""
    d_row, d_col = direction.vector
    size = len(grid)

    for i, letter in enumerate(word):
        row = start_row + i * d_row
        col = start_col + i * d_col

        if row < 0 or row >= size or col < 0 or col >= size:
            return False

        current = grid[row][col]
        if current != EMPTY and current != letter:
            return False

    return True


def place_word(
    grid: List[List[str]],
    word: str,
    start_row: int,
    start_col: int,
    direction: Direction
) -> None:
    """Write the word's letters into the grid."""
    d_row, d_col = direction.vector

    for i, letter in enumerate(word):
        grid[start_row + i * d_row][start_col + i * d_col] = letter


def get_word_cells(placement: WordPlacement) -> List[Tuple[int, int]]:
    """Grid coordinates occupied by a placement, in reading order."""
    return placement.cells()


def _shuffled(items: Sequence[T], rng: random.Random) -> List[T]:
    result = list(items)
    rng.shuffle(result)
    return result


def _candidate_starts(
    word: str,
    direction: Direction,
    grid_size: int
) -> List[Tuple[int, int]]:
    """Row-major start cells that keep the whole word inside the grid."""
    d_row, d_col = direction.vector
    span = len(word) - 1
    positions = []

    for row in range(grid_size):
        for col in range(grid_size):
            end_row = row + span * d_row
            end_col = col + span * d_col
            if 0 <= end_row < grid_size and 0 <= end_col < grid_size:
                positions.append((row, col))

    return positions


def _prepare_words(words: Sequence[str], grid_size: int) -> List[str]:
    """Normalize, drop unusable words and sort longest first (stable)."""
    prepared = []
    for raw in words:
        word = normalize_word(raw)
        if not word:
            logger.debug(f"Skipping {raw!r}: no letters after normalization")
            continue
        if len(word) > grid_size:
            logger.debug(
                f"Skipping {word}: {len(word)} letters exceeds grid size {grid_size}"
            )
            continue
        prepared.append(word)

    prepared.sort(key=len, reverse=True)
    return prepared


def generate_word_search(
    words: Sequence[str],
    grid_size: int,
    rng: Optional[random.Random] = None
) -> PuzzleData:
    """
    Generate a word search puzzle.

    Args:
        words: Words to hide (any case, accents allowed)
        grid_size: Side length of the square grid
        rng: Random source; pass a seeded instance for reproducible output

    Returns:
        PuzzleData with the filled grid and the placements that succeeded
    """
    if rng is None:
        rng = random.Random()

    candidates = _prepare_words(words, grid_size)
    grid = [[EMPTY for _ in range(grid_size)] for _ in range(grid_size)]
    placements: List[WordPlacement] = []

    for word in candidates:
        placement = _place_first_fit(grid, word, grid_size, rng)
        if placement is None:
            logger.debug(f"Could not place {word} in {grid_size}x{grid_size} grid")
            continue
        placements.append(placement)
        logger.debug(
            f"Placed {word} at ({placement.start_row}, {placement.start_col}) "
            f"{placement.direction.value}"
        )

    # Fill empty cells with random letters
    for row in range(grid_size):
        for col in range(grid_size):
            if grid[row][col] == EMPTY:
                grid[row][col] = rng.choice(LETTERS)

    logger.debug(f"Placed {len(placements)} of {len(candidates)} eligible words")

    return PuzzleData(
        grid=tuple(tuple(row) for row in grid),
        placements=placements,
        size=grid_size,
    )


def _place_first_fit(
    grid: List[List[str]],
    word: str,
    grid_size: int,
    rng: random.Random
) -> Optional[WordPlacement]:
    for direction in _shuffled(list(Direction), rng):
        positions = _shuffled(_candidate_starts(word, direction, grid_size), rng)

        for row, col in positions:
            if can_place_word(grid, word, row, col, direction):
                place_word(grid, word, row, col, direction)
                return WordPlacement(
                    word=word,
                    start_row=row,
                    start_col=col,
                    direction=direction,
                    found=False,
                )

    return None
