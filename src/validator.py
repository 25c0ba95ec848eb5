# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""
Word Search Puzzle Validator

Validates that a generated puzzle is:
1. Structurally valid (square grid, one A-Z letter per cell)
2. Solvable (every recorded word reads correctly from the grid, and
   crossing words agree on their shared letters)
"""

import os
import sys
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from models import Direction, PuzzleData
from wordsearch_generator import LETTERS, get_word_cells, normalize_word


@dataclass
class ValidationResult:
    """Result of puzzle validation."""
    valid: bool
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    stats: Dict = field(default_factory=dict)

    def __str__(self):
        status = "✅ VALID" if self.valid else "❌ INVALID"

        lines = [f"Puzzle: {status}"]

        if self.errors:
            lines.append("\nErrors:")
            for e in self.errors:
                lines.append(f"  ❌ {e}")

        if self.warnings:
            lines.append("\nWarnings:")
            for w in self.warnings:
                lines.append(f"  ⚠️ {w}")

        if self.stats:
            lines.append("\nStats:")
            for k, v in self.stats.items():
                lines.append(f"  {k}: {v}")

        return "\n".join(lines)


class PuzzleValidator:
    """
    Validates word search puzzles for structural correctness and solvability.
    """

    def __init__(
        self,
        puzzle: PuzzleData,
        requested_words: Optional[Sequence[str]] = None
    ):
        """
        Initialize validator.

        Args:
            puzzle: The generated puzzle
            requested_words: Words originally passed to the generator, if known
        """
        self.puzzle = puzzle
        self.requested_words = list(requested_words or [])

    def validate(self) -> ValidationResult:
        """Validate the puzzle."""
        result = ValidationResult(valid=True)

        self._validate_structure(result)
        if not result.errors:
            self._validate_placements(result)
        self._compare_with_request(result)

        result.valid = len(result.errors) == 0
        return result

    def _validate_structure(self, result: ValidationResult):
        """Check grid shape and cell contents."""
        size = self.puzzle.size
        grid = self.puzzle.grid
        result.stats["size"] = f"{size}x{size}"

        if len(grid) != size:
            result.errors.append(f"Grid has {len(grid)} rows, expected {size}")
            return

        bad_cells = []
        for row_idx, row in enumerate(grid):
            if len(row) != size:
                result.errors.append(
                    f"Row {row_idx} has {len(row)} cells, expected {size}"
                )
                continue
            for col_idx, cell in enumerate(row):
                if len(cell) != 1 or cell not in LETTERS:
                    bad_cells.append((row_idx, col_idx))

        if bad_cells:
            result.errors.append(
                f"Found {len(bad_cells)} cells without a single A-Z letter"
            )

    def _validate_placements(self, result: ValidationResult):
        """Check every placement reads back and crossings agree."""
        size = self.puzzle.size
        claimed: Dict[Tuple[int, int], str] = {}
        overlaps = 0
        direction_counts = {d.value: 0 for d in Direction}

        for placement in self.puzzle.placements:
            direction_counts[placement.direction.value] += 1
            cells = get_word_cells(placement)

            if any(not (0 <= r < size and 0 <= c < size) for r, c in cells):
                result.errors.append(f"{placement.word} runs outside the grid")
                continue

            read_back = "".join(self.puzzle.grid[r][c] for r, c in cells)
            if read_back != placement.word:
                result.errors.append(
                    f"{placement.word} reads as {read_back} in the grid"
                )

            for (r, c), letter in zip(cells, placement.word):
                previous = claimed.get((r, c))
                if previous is None:
                    claimed[(r, c)] = letter
                elif previous != letter:
                    result.errors.append(
                        f"{placement.word} conflicts at ({r}, {c}): "
                        f"{previous} vs {letter}"
                    )
                else:
                    overlaps += 1

        total = size * size
        result.stats["placed_words"] = len(self.puzzle.placements)
        result.stats["overlaps"] = overlaps
        result.stats["directions"] = direction_counts
        result.stats["fill_ratio"] = f"{len(claimed) / total:.1%}" if total else "0.0%"

    def _compare_with_request(self, result: ValidationResult):
        """Check the placements against the words that were asked for."""
        if not self.requested_words:
            return

        size = self.puzzle.size
        eligible = [
            w for w in (normalize_word(raw) for raw in self.requested_words)
            if w and len(w) <= size
        ]
        result.stats["eligible_words"] = len(eligible)

        if len(self.puzzle.placements) > len(eligible):
            result.errors.append(
                f"{len(self.puzzle.placements)} words placed but only "
                f"{len(eligible)} were eligible"
            )

        placed = [p.word for p in self.puzzle.placements]
        missing = list(eligible)
        for word in placed:
            if word in missing:
                missing.remove(word)
        if missing:
            result.warnings.append(f"Words not placed: {', '.join(missing)}")


def validate_puzzle(
    puzzle: PuzzleData,
    requested_words: Optional[Sequence[str]] = None
) -> ValidationResult:
    """
    Convenience function to validate a puzzle.

    Args:
        puzzle: The generated puzzle
        requested_words: Words passed to the generator

    Returns:
        ValidationResult
    """
    validator = PuzzleValidator(puzzle, requested_words)
    return validator.validate()
