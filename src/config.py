# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""
Configuration module for word search generator.

Handles loading configuration from YAML files and command-line arguments,
with proper merging and validation.
"""

import argparse
import copy
from pathlib import Path
from dataclasses import dataclass, field, asdict, replace
from typing import Optional, List, Dict, Any, Set, Union

import yaml


# Valid configuration values
VALID_SIZES = [10, 12, 15, 18, 20]
DEFAULT_SIZE = 15
DEFAULT_MAX_WORDS = 20
VALID_OUTPUT_FORMATS = [
    "svg_puzzle", "svg_solution", "html_complete", "markdown", "text"
]
VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class ConfigValidationError(Exception):
    """Raised when configuration validation fails."""
    pass


@dataclass
class GenerationConfig:
    """Configuration for puzzle generation."""
    max_words: int = DEFAULT_MAX_WORDS
    seed: Optional[int] = None


@dataclass
class OutputConfig:
    """Configuration for output."""
    directory: str = "./output"
    formats: List[str] = field(default_factory=lambda: [
        "svg_puzzle", "svg_solution", "html_complete"
    ])
    show_answers: bool = False
    log_level: str = "INFO"
    log_file_prefix: str = "wordsearch_generator"
    enable_console_logging: bool = True


@dataclass
class WordSearchConfig:
    """Complete configuration for word search generation."""
    # Puzzle settings
    title: str = "Word Search"
    size: int = DEFAULT_SIZE
    words: Union[str, List[str]] = ""
    words_file: Optional[str] = None
    sample: bool = False

    # Sub-configurations
    generation: GenerationConfig = field(default_factory=GenerationConfig)
    output: OutputConfig = field(default_factory=OutputConfig)

    # Options given explicitly on the command line, e.g. "size", "output.formats"
    cli_fields: Set[str] = field(default_factory=set, repr=False, compare=False)

    def __post_init__(self):
        """Convert dicts to dataclass instances if needed."""
        if isinstance(self.generation, dict):
            self.generation = GenerationConfig(**self.generation)
        if isinstance(self.output, dict):
            self.output = OutputConfig(**self.output)

    def words_text(self) -> str:
        """Inline words as free-form text, whatever form they were given in."""
        if isinstance(self.words, (list, tuple)):
            return "\n".join(str(w) for w in self.words)
        return self.words or ""

    @classmethod
    def from_yaml(cls, path: str) -> 'WordSearchConfig':
        """
        Load configuration from a YAML file.

        Args:
            path: Path to YAML configuration file

        Returns:
            WordSearchConfig instance

        Raises:
            ConfigValidationError: If file doesn't exist or is invalid
        """
        path = Path(path)
        if not path.exists():
            raise ConfigValidationError(f"Configuration file not found: {path}")

        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigValidationError(f"Invalid YAML in {path}: {e}")

        if not isinstance(data, dict):
            raise ConfigValidationError(
                f"Configuration file must contain a YAML mapping, got {type(data)}"
            )

        return cls._from_dict(data)

    @classmethod
    def _from_dict(cls, data: Dict[str, Any]) -> 'WordSearchConfig':
        """Create WordSearchConfig from dictionary."""
        puzzle_data = data.get('puzzle', {}) or {}

        config = cls(
            title=puzzle_data.get('title', cls.title),
            size=puzzle_data.get('size', cls.size),
            words=puzzle_data.get('words', ""),
            words_file=puzzle_data.get('words_file'),
            sample=puzzle_data.get('sample', False),
        )

        if 'generation' in data:
            gen_data = data['generation'] or {}
            config.generation = GenerationConfig(
                max_words=gen_data.get('max_words', config.generation.max_words),
                seed=gen_data.get('seed', config.generation.seed),
            )

        if 'output' in data:
            out_data = data['output'] or {}
            config.output = OutputConfig(
                directory=out_data.get('directory', config.output.directory),
                formats=out_data.get('formats', config.output.formats),
                show_answers=out_data.get(
                    'show_answers', config.output.show_answers
                ),
                log_level=out_data.get('log_level', config.output.log_level),
                log_file_prefix=out_data.get(
                    'log_file_prefix', config.output.log_file_prefix
                ),
                enable_console_logging=out_data.get(
                    'enable_console_logging',
                    config.output.enable_console_logging
                ),
            )

        return config

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> 'WordSearchConfig':
        """
        Create configuration from command-line arguments.

        Options that were actually given are recorded in ``cli_fields`` so
        that merge() can tell them apart from untouched defaults.

        Args:
            args: Parsed command-line arguments

        Returns:
            WordSearchConfig instance
        """
        config = cls()
        given = config.cli_fields

        def option(name: str):
            return getattr(args, name, None)

        # Map CLI arguments to config
        if option('title') is not None:
            config.title = args.title
            given.add('title')
        if option('size') is not None:
            config.size = args.size
            given.add('size')
        if option('words') is not None:
            config.words = args.words
            given.add('words')
        if option('words_file') is not None:
            config.words_file = args.words_file
            given.add('words_file')
        if option('sample'):
            config.sample = True
            given.add('sample')
        if option('max_words') is not None:
            config.generation.max_words = args.max_words
            given.add('generation.max_words')
        if option('seed') is not None:
            config.generation.seed = args.seed
            given.add('generation.seed')
        if option('output') is not None:
            config.output.directory = args.output
            given.add('output.directory')
        if option('format') is not None:
            config.output.formats = [
                f.strip() for f in args.format.split(',') if f.strip()
            ]
            given.add('output.formats')
        if option('show_answers'):
            config.output.show_answers = True
            given.add('output.show_answers')
        if option('verbose'):
            config.output.log_level = "DEBUG"
            given.add('output.log_level')

        return config

    @classmethod
    def merge(
        cls,
        yaml_config: 'WordSearchConfig',
        cli_config: 'WordSearchConfig'
    ) -> 'WordSearchConfig':
        """
        Merge configurations with CLI taking precedence over YAML.

        Every option listed in ``cli_config.cli_fields`` wins, even when its
        value equals the built-in default. Neither input is modified.

        Args:
            yaml_config: Configuration loaded from YAML file
            cli_config: Configuration from command-line arguments

        Returns:
            Merged WordSearchConfig instance
        """
        merged = replace(
            yaml_config,
            words=copy.copy(yaml_config.words),
            generation=replace(yaml_config.generation),
            output=replace(
                yaml_config.output, formats=list(yaml_config.output.formats)
            ),
            cli_fields=set(),
        )

        # A word source named on the command line replaces the YAML ones
        word_sources = {'words', 'words_file', 'sample'}
        if word_sources & cli_config.cli_fields:
            default = cls()
            for name in word_sources - cli_config.cli_fields:
                setattr(merged, name, getattr(default, name))

        for name in sorted(cli_config.cli_fields):
            section, _, attr = name.rpartition('.')
            source = getattr(cli_config, section) if section else cli_config
            target = getattr(merged, section) if section else merged
            setattr(target, attr, copy.copy(getattr(source, attr)))

        return merged

    def validate(self) -> List[str]:
        """
        Validate configuration values.

        Returns:
            List of validation error messages (empty if valid)
        """
        errors = []

        if self.size not in VALID_SIZES:
            errors.append(
                f"Invalid size {self.size}. Must be one of: {VALID_SIZES}"
            )

        if not isinstance(self.generation.max_words, int) or self.generation.max_words < 1:
            errors.append("max_words must be a positive integer")

        seed = self.generation.seed
        if seed is not None and (not isinstance(seed, int) or seed < 0):
            errors.append("seed must be a non-negative integer")

        for fmt in self.output.formats:
            if fmt not in VALID_OUTPUT_FORMATS:
                errors.append(
                    f"Invalid output format '{fmt}'. "
                    f"Must be one of: {VALID_OUTPUT_FORMATS}"
                )

        if self.output.log_level.upper() not in VALID_LOG_LEVELS:
            errors.append(
                f"Invalid log level '{self.output.log_level}'. "
                f"Must be one of: {VALID_LOG_LEVELS}"
            )

        return errors

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            'puzzle': {
                'title': self.title,
                'size': self.size,
                'words': self.words,
                'words_file': self.words_file,
                'sample': self.sample,
            },
            'generation': asdict(self.generation),
            'output': asdict(self.output),
        }


def create_argument_parser() -> argparse.ArgumentParser:
    """
    Create command-line argument parser.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        description="Generate printable word search puzzles",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Using command-line arguments
  wordsearch-generator --words "CAT, DOG, BIRD" --size 10

  # Words from a file, one per line
  wordsearch-generator --words-file animals.txt --title "Animals"

  # Using YAML configuration
  wordsearch-generator --config puzzle.yaml

  # CLI arguments override YAML
  wordsearch-generator --config puzzle.yaml --size 20
"""
    )

    # Configuration file
    parser.add_argument(
        "--config", "-c",
        metavar="PATH",
        help="YAML configuration file"
    )

    # Puzzle settings
    parser.add_argument(
        "--words", "-w",
        metavar="TEXT",
        help="Words separated by commas, semicolons or newlines"
    )
    parser.add_argument(
        "--words-file",
        metavar="PATH",
        help="Text file with the words to hide"
    )
    parser.add_argument(
        "--sample",
        action="store_true",
        help="Use a built-in sample word set"
    )
    parser.add_argument(
        "--title", "-t",
        metavar="TEXT",
        help="Puzzle title"
    )
    parser.add_argument(
        "--size", "-s",
        type=int,
        choices=VALID_SIZES,
        help=f"Grid size (default: {DEFAULT_SIZE})"
    )
    parser.add_argument(
        "--max-words",
        type=int,
        metavar="INT",
        help=f"Maximum number of words to use (default: {DEFAULT_MAX_WORDS})"
    )
    parser.add_argument(
        "--seed",
        type=int,
        metavar="INT",
        help="Random seed for a reproducible puzzle"
    )

    # Output settings
    parser.add_argument(
        "--output", "-o",
        metavar="PATH",
        help="Output directory"
    )
    parser.add_argument(
        "--format",
        metavar="FORMATS",
        help="Comma-separated output formats"
    )
    parser.add_argument(
        "--show-answers",
        action="store_true",
        help="Reveal the answers in the console output"
    )

    # Other options
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging"
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Validate config without generating"
    )

    return parser


def load_config(args: Optional[argparse.Namespace] = None) -> WordSearchConfig:
    """
    Load configuration from command-line and/or YAML file.

    Args:
        args: Parsed command-line arguments (if None, parses sys.argv)

    Returns:
        Fully resolved WordSearchConfig

    Raises:
        ConfigValidationError: If configuration is invalid
    """
    if args is None:
        parser = create_argument_parser()
        args = parser.parse_args()

    # Load from YAML if specified
    yaml_config = None
    if hasattr(args, 'config') and args.config:
        yaml_config = WordSearchConfig.from_yaml(args.config)

    # Load from CLI
    cli_config = WordSearchConfig.from_args(args)

    # Merge configurations
    if yaml_config:
        config = WordSearchConfig.merge(yaml_config, cli_config)
    else:
        config = cli_config

    # Validate
    errors = config.validate()
    if errors:
        raise ConfigValidationError(
            "Configuration validation failed:\n" +
            "\n".join(f"  - {e}" for e in errors)
        )

    return config
