# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""Unit tests for config module."""

import os
import sys
import tempfile
import unittest

# Add src to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from config import (
    WordSearchConfig, GenerationConfig, OutputConfig, ConfigValidationError,
    VALID_SIZES, VALID_OUTPUT_FORMATS, create_argument_parser, load_config
)


class TestWordSearchConfig(unittest.TestCase):
    """Tests for WordSearchConfig class."""

    def test_default_config(self):
        """Test default configuration values."""
        config = WordSearchConfig()

        self.assertEqual(config.title, "Word Search")
        self.assertEqual(config.size, 15)
        self.assertEqual(config.words, "")
        self.assertIsNone(config.words_file)
        self.assertFalse(config.sample)

    def test_nested_config_from_dict(self):
        """Test creating config with nested dict values."""
        config = WordSearchConfig(
            title="Test",
            generation={'max_words': 10, 'seed': 7},
            output={'directory': './test_output'}
        )

        self.assertEqual(config.generation.max_words, 10)
        self.assertEqual(config.generation.seed, 7)
        self.assertEqual(config.output.directory, './test_output')

    def test_words_text_from_list(self):
        """Test list of words is joined into parseable text."""
        config = WordSearchConfig(words=["CAT", "DOG"])
        self.assertEqual(config.words_text(), "CAT\nDOG")

    def test_words_text_from_string(self):
        config = WordSearchConfig(words="CAT, DOG")
        self.assertEqual(config.words_text(), "CAT, DOG")

    def test_validation_valid_config(self):
        """Test validation of valid configuration."""
        for size in VALID_SIZES:
            config = WordSearchConfig(size=size)
            self.assertEqual(config.validate(), [])

    def test_validation_invalid_size(self):
        """Test validation catches invalid size."""
        config = WordSearchConfig(size=8)

        errors = config.validate()
        self.assertTrue(any("size" in e.lower() for e in errors))

    def test_validation_invalid_max_words(self):
        config = WordSearchConfig(generation={'max_words': 0})

        errors = config.validate()
        self.assertTrue(any("max_words" in e for e in errors))

    def test_validation_negative_seed(self):
        config = WordSearchConfig(generation={'seed': -1})

        errors = config.validate()
        self.assertTrue(any("seed" in e for e in errors))

    def test_validation_invalid_format(self):
        config = WordSearchConfig(output={'formats': ['svg_puzzle', 'pdf']})

        errors = config.validate()
        self.assertEqual(len(errors), 1)
        self.assertIn("pdf", errors[0])

    def test_validation_invalid_log_level(self):
        config = WordSearchConfig(output={'log_level': 'LOUD'})

        errors = config.validate()
        self.assertTrue(any("log level" in e for e in errors))

    def test_to_dict(self):
        """Test conversion to dictionary."""
        config = WordSearchConfig(title="Test", size=10)

        result = config.to_dict()

        self.assertIn('puzzle', result)
        self.assertEqual(result['puzzle']['title'], "Test")
        self.assertEqual(result['puzzle']['size'], 10)
        self.assertEqual(result['generation']['max_words'], 20)


class TestGenerationConfig(unittest.TestCase):
    """Tests for GenerationConfig class."""

    def test_default_values(self):
        """Test default generation config values."""
        config = GenerationConfig()

        self.assertEqual(config.max_words, 20)
        self.assertIsNone(config.seed)


class TestOutputConfig(unittest.TestCase):
    """Tests for OutputConfig class."""

    def test_default_values(self):
        """Test default output config values."""
        config = OutputConfig()

        self.assertEqual(config.directory, "./output")
        self.assertIn("svg_puzzle", config.formats)
        self.assertIn("html_complete", config.formats)
        self.assertFalse(config.show_answers)
        self.assertEqual(config.log_level, "INFO")

    def test_default_formats_are_valid(self):
        for fmt in OutputConfig().formats:
            self.assertIn(fmt, VALID_OUTPUT_FORMATS)


class TestYAMLLoading(unittest.TestCase):
    """Tests for YAML configuration loading."""

    def setUp(self):
        """Create a temporary YAML file for testing."""
        self.temp_file = tempfile.NamedTemporaryFile(
            mode='w', suffix='.yaml', delete=False, encoding='utf-8'
        )
        self.temp_file.write('''
puzzle:
  title: "Animais da Floresta"
  size: 12
  words:
    - onça
    - macaco
    - tucano

generation:
  max_words: 15
  seed: 99

output:
  directory: "./test_output"
  formats: [markdown, text]
  show_answers: true
''')
        self.temp_file.close()

    def tearDown(self):
        """Clean up temporary file."""
        os.unlink(self.temp_file.name)

    def test_load_from_yaml(self):
        """Test loading configuration from YAML file."""
        config = WordSearchConfig.from_yaml(self.temp_file.name)

        self.assertEqual(config.title, "Animais da Floresta")
        self.assertEqual(config.size, 12)
        self.assertEqual(config.words, ["onça", "macaco", "tucano"])
        self.assertEqual(config.generation.max_words, 15)
        self.assertEqual(config.generation.seed, 99)
        self.assertEqual(config.output.directory, "./test_output")
        self.assertEqual(config.output.formats, ["markdown", "text"])
        self.assertTrue(config.output.show_answers)
        self.assertEqual(config.validate(), [])

    def test_load_nonexistent_file(self):
        """Test error when loading non-existent file."""
        with self.assertRaises(ConfigValidationError):
            WordSearchConfig.from_yaml("/nonexistent/path.yaml")

    def test_load_non_mapping(self):
        with tempfile.NamedTemporaryFile(
            mode='w', suffix='.yaml', delete=False
        ) as f:
            f.write("- just\n- a list\n")
        try:
            with self.assertRaises(ConfigValidationError):
                WordSearchConfig.from_yaml(f.name)
        finally:
            os.unlink(f.name)

    def test_load_invalid_yaml(self):
        with tempfile.NamedTemporaryFile(
            mode='w', suffix='.yaml', delete=False
        ) as f:
            f.write("puzzle: [unclosed\n")
        try:
            with self.assertRaises(ConfigValidationError):
                WordSearchConfig.from_yaml(f.name)
        finally:
            os.unlink(f.name)


class TestConfigMerge(unittest.TestCase):
    """Tests for configuration merging."""

    def cli(self, *argv):
        return WordSearchConfig.from_args(create_argument_parser().parse_args(argv))

    def test_merge_prefers_cli(self):
        """Test that CLI config takes precedence over YAML."""
        yaml_config = WordSearchConfig(title="YAML Title", size=10, words="A, B")
        cli_config = self.cli("--title", "CLI Title", "--size", "20", "--words", "C, D")

        merged = WordSearchConfig.merge(yaml_config, cli_config)

        self.assertEqual(merged.title, "CLI Title")
        self.assertEqual(merged.size, 20)
        self.assertEqual(merged.words, "C, D")

    def test_cli_value_equal_to_default_still_wins(self):
        yaml_config = WordSearchConfig(
            title="YAML Title", size=20, generation={'max_words': 5}
        )
        cli_config = self.cli(
            "--size", "15", "--max-words", "20", "--title", "Word Search"
        )

        merged = WordSearchConfig.merge(yaml_config, cli_config)

        self.assertEqual(merged.size, 15)
        self.assertEqual(merged.generation.max_words, 20)
        self.assertEqual(merged.title, "Word Search")

    def test_merge_keeps_yaml_when_cli_default(self):
        """Test that YAML values are kept when CLI uses defaults."""
        yaml_config = WordSearchConfig(
            title="YAML Title",
            size=18,
            words_file="words.txt",
            generation={'seed': 3},
        )
        cli_config = WordSearchConfig()  # All defaults

        merged = WordSearchConfig.merge(yaml_config, cli_config)

        self.assertEqual(merged.title, "YAML Title")
        self.assertEqual(merged.size, 18)
        self.assertEqual(merged.words_file, "words.txt")
        self.assertEqual(merged.generation.seed, 3)

    def test_merge_leaves_yaml_config_untouched(self):
        yaml_config = WordSearchConfig(generation={'seed': 3, 'max_words': 8})
        cli_config = self.cli("--seed", "7", "--max-words", "4", "--format", "text")

        merged = WordSearchConfig.merge(yaml_config, cli_config)

        self.assertEqual(merged.generation.seed, 7)
        self.assertEqual(merged.output.formats, ["text"])
        self.assertEqual(yaml_config.generation.seed, 3)
        self.assertEqual(yaml_config.generation.max_words, 8)
        self.assertEqual(
            yaml_config.output.formats, OutputConfig().formats
        )
        self.assertIsNot(merged.output, yaml_config.output)

    def test_cli_word_source_replaces_yaml_words(self):
        yaml_config = WordSearchConfig(words=["LION", "TIGER"])
        cli_config = self.cli("--words-file", "animals.txt")

        merged = WordSearchConfig.merge(yaml_config, cli_config)

        self.assertEqual(merged.words_file, "animals.txt")
        self.assertEqual(merged.words_text(), "")


class TestLoadConfig(unittest.TestCase):
    """Tests for argument parsing and load_config."""

    def test_cli_size_overrides_yaml(self):
        with tempfile.NamedTemporaryFile(
            mode='w', suffix='.yaml', delete=False
        ) as f:
            f.write("puzzle:\n  size: 20\n")
        try:
            parser = create_argument_parser()
            args = parser.parse_args(["--config", f.name, "--size", "15"])

            self.assertEqual(load_config(args).size, 15)
        finally:
            os.unlink(f.name)

    def test_cli_arguments(self):
        parser = create_argument_parser()
        args = parser.parse_args([
            "--words", "CAT, DOG", "--size", "10", "--seed", "5",
            "--format", "text, markdown", "--verbose"
        ])

        config = load_config(args)

        self.assertEqual(config.words, "CAT, DOG")
        self.assertEqual(config.size, 10)
        self.assertEqual(config.generation.seed, 5)
        self.assertEqual(config.output.formats, ["text", "markdown"])
        self.assertEqual(config.output.log_level, "DEBUG")

    def test_seed_zero_kept(self):
        parser = create_argument_parser()
        config = load_config(parser.parse_args(["--seed", "0"]))
        self.assertEqual(config.generation.seed, 0)

    def test_invalid_format_rejected(self):
        parser = create_argument_parser()
        args = parser.parse_args(["--format", "svg_puzzle,gif"])

        with self.assertRaises(ConfigValidationError):
            load_config(args)

    def test_invalid_size_rejected_by_parser(self):
        parser = create_argument_parser()
        with self.assertRaises(SystemExit):
            parser.parse_args(["--size", "11"])


if __name__ == '__main__':
    unittest.main()
