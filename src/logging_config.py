"""
Logging configuration for word search generator.

Every run writes a full DEBUG trace to its own rotating log file next to the
generated puzzles, while the console only shows messages at the requested
level.
"""
#
# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

import logging
import os
import sys
from datetime import datetime
from logging.handlers import RotatingFileHandler

FILE_FORMAT = "%(asctime)s - %(levelname)-8s - %(name)s:%(lineno)d - %(message)s"
CONSOLE_FORMAT = "%(levelname)-8s - %(message)s"
MAX_LOG_BYTES = 10 * 1024 * 1024
LOG_BACKUPS = 5


def _log_path(output_dir: str, log_file_prefix: str) -> str:
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    return os.path.join(output_dir, f"{log_file_prefix}_{timestamp}.log")


def _reset_root(root_logger: logging.Logger) -> None:
    # Each generator run owns the root handlers
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()


def setup_logging(
    output_dir: str,
    log_level: str = "INFO",
    log_file_prefix: str = "wordsearch_generator",
    enable_console: bool = True,
) -> str:
    """
    Route word search logging to a per-run file and, optionally, the console.

    Args:
        output_dir: Puzzle output directory; the log file is written there too
        log_level: Console level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file_prefix: Prefix for the log filename
        enable_console: Whether to echo messages to stdout

    Returns:
        Path to the log file
    """
    os.makedirs(output_dir, exist_ok=True)
    log_path = _log_path(output_dir, log_file_prefix)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    _reset_root(root_logger)

    file_handler = RotatingFileHandler(
        log_path, maxBytes=MAX_LOG_BYTES, backupCount=LOG_BACKUPS, encoding="utf-8"
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(
        logging.Formatter(fmt=FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    )
    root_logger.addHandler(file_handler)

    if enable_console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(getattr(logging, log_level.upper(), logging.INFO))
        console_handler.setFormatter(logging.Formatter(fmt=CONSOLE_FORMAT))
        root_logger.addHandler(console_handler)

    logger = logging.getLogger(__name__)
    logger.debug(f"Puzzle log: {log_path} (console level {log_level}, console {enable_console})")

    return log_path
