# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""
Data models for the word search generator.
"""

import re
import unicodedata
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Set, Tuple

_COMBINING_MARKS = re.compile("[\u0300-\u036f]")
_NON_LETTERS = re.compile("[^A-Z]")


def normalize_word(word: str) -> str:
    """
    Normalize a word to plain uppercase A-Z.

    Example: 'ÁrVORE' -> 'ARVORE', 'co-co2!' -> 'COCO'
    """
    decomposed = unicodedata.normalize("NFD", word.upper())
    return _NON_LETTERS.sub("", _COMBINING_MARKS.sub("", decomposed))


class Direction(Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
    DIAGONAL_DOWN = "diagonal-down"
    DIAGONAL_UP = "diagonal-up"

    @property
    def vector(self) -> Tuple[int, int]:
        """(row step, col step) for this direction."""
        return DIRECTION_VECTORS[self]


DIRECTION_VECTORS: Dict[Direction, Tuple[int, int]] = {
    Direction.HORIZONTAL: (0, 1),
    Direction.VERTICAL: (1, 0),
    Direction.DIAGONAL_DOWN: (1, 1),
    Direction.DIAGONAL_UP: (-1, 1),
}


@dataclass
class WordPlacement:
    """A word that was placed in the grid."""
    word: str
    start_row: int
    start_col: int
    direction: Direction
    found: bool = False  # Set by consumers only, never by the generator

    def cells(self) -> List[Tuple[int, int]]:
        """Grid coordinates occupied by the word, first letter first."""
        d_row, d_col = self.direction.vector
        return [
            (self.start_row + i * d_row, self.start_col + i * d_col)
            for i in range(len(self.word))
        ]

    @property
    def end(self) -> Tuple[int, int]:
        d_row, d_col = self.direction.vector
        steps = len(self.word) - 1
        return (self.start_row + steps * d_row, self.start_col + steps * d_col)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "word": self.word,
            "start_row": self.start_row,
            "start_col": self.start_col,
            "direction": self.direction.value,
            "found": self.found,
        }


@dataclass(frozen=True)
class PuzzleData:
    """
    A generated word search puzzle.

    The grid never changes after creation. Consumers may flip the ``found``
    flag on individual placements while a player is solving.
    """
    grid: Tuple[Tuple[str, ...], ...]
    placements: List[WordPlacement] = field(default_factory=list)
    size: int = 0

    def letter_at(self, row: int, col: int) -> str:
        """Get the letter at a position."""
        return self.grid[row][col]

    def read_word(self, placement: WordPlacement) -> str:
        """Read the letters under a placement back out of the grid."""
        return "".join(self.grid[row][col] for row, col in placement.cells())

    def solution_cells(self) -> Set[Tuple[int, int]]:
        """All cells covered by at least one placed word."""
        cells = set()
        for placement in self.placements:
            cells.update(placement.cells())
        return cells

    def placed_words(self) -> List[str]:
        """Placed words in alphabetical order, as shown in the word list."""
        return sorted(p.word for p in self.placements)

    def find_placement(self, word: str) -> Optional[WordPlacement]:
        """Find the placement for a word, ignoring case and accents."""
        target = normalize_word(word)
        if not target:
            return None
        for placement in self.placements:
            if placement.word == target:
                return placement
        return None

    def mark_found(self, word: str) -> bool:
        """
        Mark a placed word as found.

        Returns:
            True if the word is in the puzzle, False otherwise
        """
        placement = self.find_placement(word)
        if placement is None:
            return False
        placement.found = True
        return True

    def to_string(self, show_answers: bool = False) -> str:
        """
        Convert grid to string representation.

        With show_answers, letters outside the solution are shown as '.'.
        """
        highlighted = self.solution_cells() if show_answers else set()
        result = []
        for row_idx, row in enumerate(self.grid):
            line = []
            for col_idx, letter in enumerate(row):
                if show_answers and (row_idx, col_idx) not in highlighted:
                    line.append(".")
                else:
                    line.append(letter)
            result.append(" ".join(line))
        return "\n".join(result)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "size": self.size,
            "grid": [list(row) for row in self.grid],
            "placements": [p.to_dict() for p in self.placements],
        }
