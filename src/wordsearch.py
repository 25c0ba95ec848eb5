#!/usr/bin/env python3
# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""
Word Search Generator

Generates printable word search puzzles:
1. Collects words from the command line, a word file or a sample set
2. Places them in a square grid (horizontal, vertical, diagonal)
3. Validates the generated grid
4. Renders puzzle and solution pages (SVG/HTML/Markdown/text)

Usage:
    # With command-line arguments:
    python wordsearch.py --words "CAT, DOG, BIRD" --size 10

    # With YAML configuration:
    python wordsearch.py --config puzzle.yaml

    # Reproducible puzzle:
    python wordsearch.py --sample --seed 42
"""

import logging
import os
import random
import re
import sys
import time
from typing import Dict, Optional

# Add src to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from config import (
    WordSearchConfig, create_argument_parser, load_config, ConfigValidationError
)
from logging_config import setup_logging
from models import PuzzleData
from page_renderer import WordSearchPageData, WordSearchPageRenderer
from validator import validate_puzzle
from word_input import (
    WordInputError, load_word_file, parse_word_input, pick_sample_words,
    placement_report
)
from wordsearch_generator import generate_word_search


class WordSearchGenerator:
    """
    Complete word search generator.

    Workflow:
    1. Collect and parse the word list
    2. Generate the puzzle grid
    3. Validate the puzzle
    4. Report how many words were placed
    5. Render output files
    """

    def __init__(self, config: WordSearchConfig, rng: Optional[random.Random] = None):
        """
        Initialize the word search generator.

        Args:
            config: WordSearchConfig instance with all settings
            rng: Random source (defaults to one seeded from config)
        """
        self.config = config
        self.start_time = time.time()

        self.log_file_path = setup_logging(
            output_dir=config.output.directory,
            log_level=config.output.log_level,
            log_file_prefix=config.output.log_file_prefix,
            enable_console=config.output.enable_console_logging,
        )
        self.logger = logging.getLogger(__name__)
        self.logger.info(f"Initialized WordSearchGenerator: {config.title}")
        self.logger.info(f"Grid size: {config.size}x{config.size}")
        self.logger.debug(f"Log file: {self.log_file_path}")

        if rng is None:
            rng = random.Random(config.generation.seed)
        self.rng = rng

        self.puzzle: Optional[PuzzleData] = None

    def generate(self) -> Optional[Dict[str, str]]:
        """
        Generate a word search and render it.

        Returns:
            Dict of output file paths, or None if the puzzle failed validation

        Raises:
            WordInputError: If no words could be collected
        """
        self.logger.info("=" * 60)
        self.logger.info("WORD SEARCH GENERATOR")
        self.logger.info("=" * 60)

        # Step 1: Words
        self.logger.info("Step 1: Collecting words...")
        word_input = parse_word_input(
            self._collect_words(),
            grid_size=self.config.size,
            max_words=self.config.generation.max_words,
        )
        self.logger.info(f"   - {len(word_input.words)} words requested")

        # Step 2: Grid
        self.logger.info("Step 2: Placing words...")
        puzzle = generate_word_search(word_input.words, self.config.size, rng=self.rng)
        self.puzzle = puzzle

        # Step 3: Validation
        self.logger.info("Step 3: Validating puzzle...")
        validation = validate_puzzle(puzzle, word_input.words)
        if not validation.valid:
            self.logger.error("   X Invalid puzzle:")
            for error in validation.errors:
                self.logger.error(f"      - {error}")
            return None
        for warning in validation.warnings:
            self.logger.debug(f"   - {warning}")
        self.logger.info(f"   - Overlapping letters: {validation.stats['overlaps']}")
        self.logger.info(f"   - Cells covered by words: {validation.stats['fill_ratio']}")

        # Step 4: Report
        report = placement_report(puzzle, len(word_input.words))
        if report.complete:
            self.logger.info(f"   - {report.message}")
        else:
            self.logger.warning(report.message)

        # Step 5: Output
        self.logger.info("Step 4: Rendering output...")
        data = WordSearchPageData(title=self.config.title, puzzle=puzzle)
        renderer = WordSearchPageRenderer()
        self.logger.info(
            "\n" + renderer.render_text(data, show_answers=self.config.output.show_answers)
        )
        files = renderer.render_all_pages(
            data,
            output_dir=self.config.output.directory,
            base_name=self._base_name(),
            formats=self.config.output.formats,
        )

        self.logger.info("=" * 60)
        self.logger.info("GENERATION COMPLETE!")
        self.logger.info("=" * 60)
        self.logger.info("Output files:")
        for name, path in files.items():
            self.logger.info(f"   {name}: {path}")

        elapsed = time.time() - self.start_time
        self.logger.info(f"Generation time: {elapsed:.2f} seconds")

        return files

    def _collect_words(self) -> str:
        """Inline words first, then the words file, then a sample set."""
        text = self.config.words_text()
        if text.strip():
            return text

        if self.config.words_file:
            return load_word_file(self.config.words_file)

        if self.config.sample:
            sample = pick_sample_words(self.rng)
            self.logger.info(f"   - Using sample words: {sample}")
            return sample

        raise WordInputError(
            "No words provided. Use --words, --words-file or --sample."
        )

    def _base_name(self) -> str:
        base = re.sub(r"[^a-z0-9]+", "_", self.config.title.lower()).strip("_")
        return base[:20] or "wordsearch"


def main():
    """Main entry point."""
    parser = create_argument_parser()
    args = parser.parse_args()

    try:
        config = load_config(args)

        if hasattr(args, 'dry_run') and args.dry_run:
            print("Configuration valid:")
            print(f"  Title: {config.title}")
            print(f"  Size: {config.size}")
            print(f"  Max Words: {config.generation.max_words}")
            print(f"  Seed: {config.generation.seed}")
            print(f"  Formats: {', '.join(config.output.formats)}")
            print(f"  Output Directory: {config.output.directory}")
            return

        generator = WordSearchGenerator(config)
        if generator.generate() is None:
            sys.exit(1)

    except (ConfigValidationError, WordInputError) as e:
        print(f"Error: {e}")
        sys.exit(1)
    except KeyboardInterrupt:
        print("\nGeneration cancelled.")
        sys.exit(0)


if __name__ == "__main__":
    main()
