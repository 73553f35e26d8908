"""
=====================================================
Logging setup for the query builders and demo CLI.
=====================================================

The builders log through plain ``logging.getLogger(__name__)`` loggers:
rendered statements and union snapshots at DEBUG, rejected input at ERROR.
This module decides where those records go.

On import the root logger is configured from ``config.logging``
(``QUERY_BUILDER_LOG_*`` variables), unless a handler is already attached.
``main.py --verbose`` calls setup_logging() again at DEBUG, which replaces
the handlers so builder debug lines reach the console.

Example:
    >>> from core.logger import get_logger, setup_logging
    >>>
    >>> setup_logging(log_level='DEBUG', log_file='query_builder.log')
    >>> logger = get_logger(__name__)
    >>> logger.debug("Built SELECT for EMPLOYEE e")
"""

import logging
import sys
from pathlib import Path
from typing import Optional

DATE_FORMAT = '%Y-%m-%d %H:%M:%S'
PLAIN_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
COLORED_FORMAT = '%(emoji)s ' + PLAIN_FORMAT


def _level(name: str) -> int:
    return getattr(logging, name.upper())


class ColoredFormatter(logging.Formatter):
    """Console formatter that prefixes an emoji and colors the level name.

    The record's ``levelname`` is put back after formatting, so a file
    handler formatting the same record later writes no ANSI codes.
    """

    COLORS = {
        'DEBUG': '\033[36m',      # Cyan
        'INFO': '\033[32m',       # Green
        'WARNING': '\033[33m',    # Yellow
        'ERROR': '\033[31m',      # Red
        'CRITICAL': '\033[35m',   # Magenta
        'RESET': '\033[0m'
    }

    EMOJI = {
        'DEBUG': '🔍',
        'INFO': 'ℹ️ ',
        'WARNING': '⚠️ ',
        'ERROR': '❌',
        'CRITICAL': '🔥'
    }

    def format(self, record):
        levelname = record.levelname
        record.emoji = self.EMOJI.get(levelname, '')
        if levelname in self.COLORS:
            record.levelname = f"{self.COLORS[levelname]}{levelname}{self.COLORS['RESET']}"

        try:
            return super().format(record)
        finally:
            record.levelname = levelname


def get_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    """Return the named logger, optionally pinned to a level.

    Args:
        name: Logger name, normally the caller's ``__name__``
        level: DEBUG/INFO/WARNING/ERROR/CRITICAL; None keeps the inherited level
    """
    logger = logging.getLogger(name)
    if level:
        logger.setLevel(_level(level))
    return logger


def setup_logging(
    log_level: str = 'INFO',
    log_file: Optional[str] = None,
    log_dir: Optional[str] = None,
    console_output: bool = True,
    use_colors: bool = True
) -> None:
    """Replace the root logger's handlers.

    Every handler is created at ``log_level``, so calling this again with
    DEBUG is enough to surface builder debug output.

    Args:
        log_level: DEBUG/INFO/WARNING/ERROR/CRITICAL
        log_file: File name for a plain-text copy of the log; None for console only
        log_dir: Directory for ``log_file`` (created if missing, default ``logs``)
        console_output: Attach a stdout handler
        use_colors: Use ColoredFormatter on the stdout handler
    """
    level = _level(log_level)
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    if console_output:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level)
        if use_colors:
            console_handler.setFormatter(ColoredFormatter(COLORED_FORMAT, datefmt=DATE_FORMAT))
        else:
            console_handler.setFormatter(logging.Formatter(PLAIN_FORMAT, datefmt=DATE_FORMAT))
        root_logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_dir or 'logs')
        log_path.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_path / log_file, encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter(PLAIN_FORMAT, datefmt=DATE_FORMAT))
        root_logger.addHandler(file_handler)


def _init_default_logging():
    """Configure the root logger from config.logging unless already done."""
    if logging.getLogger().handlers:
        return

    from core.config import config

    setup_logging(
        log_level=config.logging.level,
        log_file=config.logging.log_file,
        log_dir=config.logging.log_dir,
        use_colors=config.logging.use_colors
    )


_init_default_logging()
