# Copyright 2025 Ilya Makarov
#
# Licensed under the Business Source License 1.1
# Change Date: 2028-11-05
# Change License: Apache License 2.0

"""
Logging setup for PageSim.

Library modules log through children of the "pagesim" logger
(e.g. "pagesim.page_manager"); the CLI configures handlers once through
get_logger("pagesim").
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Dict, Optional


class PageSimLogger:
    """
    Centralized logging for PageSim components.

    Features:
    - Console logging to stderr (stdout is reserved for reports)
    - Optional rotating file log
    - Structured log format with timestamps
    """

    def __init__(
        self,
        name: str = "pagesim",
        level: str = "INFO",
        log_dir: Optional[Path] = None,
        console_output: bool = True,
        file_output: bool = True
    ):
        self.name = name
        self.logger = logging.getLogger(name)

        # Clear any existing handlers
        self.logger.handlers.clear()

        self.logger.setLevel(self._parse_level(level))

        console_formatter = logging.Formatter(
            fmt='[%(asctime)s] [%(name)s:%(levelname)s] %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

        file_formatter = logging.Formatter(
            fmt='%(asctime)s | %(name)s | %(levelname)s | %(filename)s:%(lineno)d | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

        if console_output:
            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.setFormatter(console_formatter)
            console_handler.setLevel(self._parse_level(level))
            self.logger.addHandler(console_handler)

        self.log_file: Optional[Path] = None
        if file_output:
            if log_dir is None:
                log_dir = Path.home() / ".pagesim" / "logs"

            log_dir.mkdir(parents=True, exist_ok=True)

            self.log_file = log_dir / f"{name}.log"

            # Rotate after 10MB, keep 5 backup files
            file_handler = RotatingFileHandler(
                self.log_file,
                maxBytes=10 * 1024 * 1024,
                backupCount=5,
                encoding='utf-8'
            )
            file_handler.setFormatter(file_formatter)
            file_handler.setLevel(logging.DEBUG)
            self.logger.addHandler(file_handler)

    def _parse_level(self, level: str) -> int:
        """Convert string level to logging constant"""
        levels = {
            "DEBUG": logging.DEBUG,
            "INFO": logging.INFO,
            "WARNING": logging.WARNING,
            "ERROR": logging.ERROR,
            "CRITICAL": logging.CRITICAL
        }
        return levels.get(level.upper(), logging.INFO)

    def set_level(self, level: str):
        """Change log level dynamically"""
        self.logger.setLevel(self._parse_level(level))
        for handler in self.logger.handlers:
            if not isinstance(handler, RotatingFileHandler):
                handler.setLevel(self._parse_level(level))


_loggers: Dict[str, PageSimLogger] = {}


def get_logger(
    name: str,
    level: Optional[str] = None,
    log_dir: Optional[Path] = None,
    file_output: Optional[bool] = None,
) -> PageSimLogger:
    """
    Get or create a logger instance.

    Args:
        name: Logger name (usually "pagesim" or a component name)
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_dir: Directory for the rotating log file
        file_output: Write a log file; defaults to PAGESIM_FILE_LOGS
            (on unless set to "false")

    Returns:
        PageSimLogger instance
    """
    if name not in _loggers:
        log_level = level or os.getenv("PAGESIM_LOG_LEVEL", "INFO")

        if file_output is None:
            file_output = os.getenv("PAGESIM_FILE_LOGS", "true").lower() == "true"

        _loggers[name] = PageSimLogger(
            name=name,
            level=log_level,
            log_dir=log_dir,
            file_output=file_output
        )
    elif level:
        _loggers[name].set_level(level)

    return _loggers[name]
