# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""Unit tests for the word search generator core."""

import os
import random
import string
import sys
import unittest

# Add src to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from models import Direction, DIRECTION_VECTORS, WordPlacement
from wordsearch_generator import (
    EMPTY, can_place_word, generate_word_search, get_word_cells,
    normalize_word, place_word
)


def read_cells(puzzle, placement):
    return "".join(puzzle.grid[r][c] for r, c in get_word_cells(placement))


class TestNormalizeWord(unittest.TestCase):
    """Tests for word normalization."""

    def test_strips_accents(self):
        self.assertEqual(normalize_word("ÁrVORE"), "ARVORE")

    def test_strips_non_letters(self):
        self.assertEqual(normalize_word("co-co2!"), "COCO")

    def test_empty(self):
        self.assertEqual(normalize_word(""), "")

    def test_no_letters(self):
        self.assertEqual(normalize_word("123 - !?"), "")

    def test_cedilla_and_tilde(self):
        self.assertEqual(normalize_word("subtração"), "SUBTRACAO")

    def test_spaces_removed(self):
        self.assertEqual(normalize_word("ice cream"), "ICECREAM")


class TestDirection(unittest.TestCase):
    """Tests for direction vectors."""

    def test_vectors(self):
        self.assertEqual(Direction.HORIZONTAL.vector, (0, 1))
        self.assertEqual(Direction.VERTICAL.vector, (1, 0))
        self.assertEqual(Direction.DIAGONAL_DOWN.vector, (1, 1))
        self.assertEqual(Direction.DIAGONAL_UP.vector, (-1, 1))

    def test_values(self):
        self.assertEqual(
            [d.value for d in Direction],
            ["horizontal", "vertical", "diagonal-down", "diagonal-up"]
        )
        self.assertEqual(len(DIRECTION_VECTORS), 4)


class TestPlacementHelpers(unittest.TestCase):
    """Tests for can_place_word, place_word and get_word_cells."""

    def setUp(self):
        self.grid = [[EMPTY] * 5 for _ in range(5)]

    def test_can_place_on_empty_grid(self):
        self.assertTrue(can_place_word(self.grid, "CAT", 0, 0, Direction.HORIZONTAL))

    def test_cannot_place_out_of_bounds(self):
        self.assertFalse(can_place_word(self.grid, "CAT", 0, 3, Direction.HORIZONTAL))
        self.assertFalse(can_place_word(self.grid, "CAT", 1, 0, Direction.DIAGONAL_UP))

    def test_can_cross_on_matching_letter(self):
        place_word(self.grid, "CAT", 0, 0, Direction.HORIZONTAL)
        self.assertTrue(can_place_word(self.grid, "CAR", 0, 0, Direction.VERTICAL))

    def test_cannot_cross_on_conflicting_letter(self):
        place_word(self.grid, "CAT", 0, 0, Direction.HORIZONTAL)
        self.assertFalse(can_place_word(self.grid, "DOG", 0, 1, Direction.VERTICAL))

    def test_place_word_writes_letters(self):
        place_word(self.grid, "DOG", 4, 0, Direction.DIAGONAL_UP)
        self.assertEqual(self.grid[4][0], "D")
        self.assertEqual(self.grid[3][1], "O")
        self.assertEqual(self.grid[2][2], "G")

    def test_get_word_cells(self):
        placement = WordPlacement("BIRD", 3, 1, Direction.DIAGONAL_UP)
        self.assertEqual(get_word_cells(placement), [(3, 1), (2, 2), (1, 3), (0, 4)])

    def test_get_word_cells_is_idempotent(self):
        placement = WordPlacement("FISH", 1, 0, Direction.DIAGONAL_DOWN)
        self.assertEqual(get_word_cells(placement), get_word_cells(placement))
        self.assertEqual(placement.cells(), get_word_cells(placement))


class TestGenerateWordSearch(unittest.TestCase):
    """Tests for generate_word_search."""

    def assert_well_formed(self, puzzle, size):
        self.assertEqual(puzzle.size, size)
        self.assertEqual(len(puzzle.grid), size)
        for row in puzzle.grid:
            self.assertEqual(len(row), size)
            for cell in row:
                self.assertEqual(len(cell), 1)
                self.assertIn(cell, string.ascii_uppercase)

    def test_cat_and_dog(self):
        puzzle = generate_word_search(["CAT", "DOG"], 10)

        self.assert_well_formed(puzzle, 10)
        self.assertEqual(len(puzzle.placements), 2)
        for placement in puzzle.placements:
            self.assertEqual(read_cells(puzzle, placement), placement.word)
            self.assertFalse(placement.found)

    def test_word_longer_than_grid(self):
        puzzle = generate_word_search(["SUPERCALIFRAGILISTIC"], 5)

        self.assert_well_formed(puzzle, 5)
        self.assertEqual(len(puzzle.placements), 0)

    def test_empty_words_dropped(self):
        puzzle = generate_word_search(["", "123", "!!"], 10)

        self.assert_well_formed(puzzle, 10)
        self.assertEqual(puzzle.placements, [])

    def test_empty_word_list(self):
        puzzle = generate_word_search([], 10)
        self.assert_well_formed(puzzle, 10)

    def test_words_are_normalized(self):
        puzzle = generate_word_search(["árvore"], 10, rng=random.Random(1))
        self.assertEqual([p.word for p in puzzle.placements], ["ARVORE"])

    def test_longest_first_order(self):
        words = ["AB", "ABCDE", "XYZ", "QRST", "MN"]
        puzzle = generate_word_search(words, 20, rng=random.Random(3))

        self.assertEqual(
            [p.word for p in puzzle.placements],
            ["ABCDE", "QRST", "XYZ", "AB", "MN"]
        )

    def test_exact_fit_word(self):
        puzzle = generate_word_search(["ABCDE"], 5, rng=random.Random(9))
        self.assertEqual(len(puzzle.placements), 1)
        self.assertEqual(read_cells(puzzle, puzzle.placements[0]), "ABCDE")

    def test_seeded_generation_is_reproducible(self):
        words = ["PYTHON", "SNAKE", "COBRA", "VIPER"]
        first = generate_word_search(words, 12, rng=random.Random(42))
        second = generate_word_search(words, 12, rng=random.Random(42))

        self.assertEqual(first.grid, second.grid)
        self.assertEqual(
            [p.to_dict() for p in first.placements],
            [p.to_dict() for p in second.placements]
        )

    def test_unseeded_generation_varies(self):
        grids = {generate_word_search(["CAT"], 10).grid for _ in range(5)}
        self.assertGreater(len(grids), 1)

    def test_never_places_more_than_requested(self):
        words = ["ALPHA", "BRAVO", "CHARLIE", "DELTA", "ECHO", "FOXTROT",
                 "GOLF", "HOTEL", "INDIA", "JULIETT", "KILO", "LIMA"]
        for seed in range(20):
            puzzle = generate_word_search(words, 6, rng=random.Random(seed))
            eligible = [w for w in words if len(w) <= 6]
            self.assertLessEqual(len(puzzle.placements), len(eligible))
            for placement in puzzle.placements:
                self.assertEqual(read_cells(puzzle, placement), placement.word)

    def test_crowded_grid_omits_words(self):
        # A 3x3 grid has only eight lines a three-letter word can occupy
        words = ["ABC", "DEF", "GHI", "JKL", "MNO", "PQR", "STU", "VWX", "YZA", "BCD"]
        puzzle = generate_word_search(words, 3, rng=random.Random(0))
        self.assert_well_formed(puzzle, 3)
        self.assertLess(len(puzzle.placements), len(words))

    def test_overlapping_words_never_conflict(self):
        for seed in range(200):
            puzzle = generate_word_search(["CAT", "CAR"], 6, rng=random.Random(seed))
            claimed = {}
            for placement in puzzle.placements:
                for cell, letter in zip(get_word_cells(placement), placement.word):
                    self.assertEqual(claimed.setdefault(cell, letter), letter)
                    self.assertEqual(puzzle.grid[cell[0]][cell[1]], letter)

    def test_all_directions_used(self):
        seen = set()
        for seed in range(50):
            puzzle = generate_word_search(["WORD"], 10, rng=random.Random(seed))
            seen.add(puzzle.placements[0].direction)
        self.assertEqual(seen, set(Direction))


if __name__ == "__main__":
    unittest.main()
