"""
=====================================================
Pytest suite for core/logger.py
=====================================================

Sections:
---------
1. Unit tests - Logger retrieval and formatter output
2. Integration tests - Root logger setup with console and file handlers

How to Execute:
---------------
All tests:          pytest tests/tests_core/test_logger.py -v
"""

import logging
from unittest.mock import patch

import pytest

from core.config import LoggingConfig, config
from core.logger import ColoredFormatter, _init_default_logging, get_logger, setup_logging

# ===============
# 1. UNIT TESTS
# ===============

@pytest.mark.unit
def test_get_logger_with_level():
    """Test that get_logger applies a level override."""
    logger = get_logger('tests.core.level_override', level='debug')

    assert logger.name == 'tests.core.level_override'
    assert logger.level == logging.DEBUG


@pytest.mark.unit
def test_get_logger_without_level_inherits():
    """Test that no override leaves the logger at NOTSET."""
    assert get_logger('tests.core.inherits').level == logging.NOTSET


@pytest.mark.unit
def test_colored_formatter_adds_emoji_and_restores_levelname():
    """
    Test colored formatting.

    Verifies ANSI color and emoji in the output and that the record's
    levelname is left intact for other handlers.
    """
    formatter = ColoredFormatter('%(emoji)s %(levelname)s %(message)s')
    record = logging.LogRecord('x', logging.ERROR, __file__, 1, 'boom', None, None)

    output = formatter.format(record)

    assert output.startswith('❌ ')
    assert '\033[31mERROR\033[0m' in output
    assert output.endswith('boom')
    assert record.levelname == 'ERROR'


# =====================
# 2. INTEGRATION TESTS
# =====================

@pytest.mark.integration
def test_setup_logging_console_only(restore_root_logger):
    """Test console-only setup replaces root handlers."""
    setup_logging(log_level='WARNING', use_colors=False)

    root = logging.getLogger()
    assert root.level == logging.WARNING
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0], logging.StreamHandler)
    assert not isinstance(root.handlers[0].formatter, ColoredFormatter)


@pytest.mark.integration
def test_setup_logging_writes_file(restore_root_logger, tmp_path):
    """Test file handler creation inside the requested directory."""
    log_dir = tmp_path / 'nested'

    setup_logging(log_level='DEBUG', log_file='builder.log', log_dir=str(log_dir), console_output=False)
    logging.getLogger('tests.core.file').debug('rendered statement')
    for handler in logging.getLogger().handlers:
        handler.flush()

    content = (log_dir / 'builder.log').read_text(encoding='utf-8')
    assert 'tests.core.file - DEBUG - rendered statement' in content


@pytest.mark.integration
@pytest.mark.regression
def test_setup_logging_again_lowers_every_handler(restore_root_logger, capsys):
    """
    Test that a second setup at DEBUG surfaces debug records.

    Verifies the INFO handlers from the first call are replaced rather than
    left filtering DEBUG output.
    """
    setup_logging(log_level='INFO', use_colors=False)
    setup_logging(log_level='DEBUG', use_colors=False)
    logging.getLogger('builders.query_builder').debug('Built SELECT')

    root = logging.getLogger()
    assert [handler.level for handler in root.handlers] == [logging.DEBUG]
    assert 'builders.query_builder - DEBUG - Built SELECT' in capsys.readouterr().out


@pytest.mark.integration
def test_default_logging_uses_config(restore_root_logger):
    """Test import-time setup reads config.logging when no handler exists."""
    quiet = LoggingConfig(level='WARNING', log_file=None, log_dir='logs', use_colors=False)
    logging.getLogger().handlers.clear()

    with patch.object(config, 'logging', quiet):
        _init_default_logging()

    root = logging.getLogger()
    assert root.level == logging.WARNING
    assert len(root.handlers) == 1


@pytest.mark.integration
def test_default_logging_keeps_existing_handlers(restore_root_logger):
    """Test import-time setup does nothing once a handler is attached."""
    existing = logging.NullHandler()
    logging.getLogger().handlers[:] = [existing]

    _init_default_logging()

    assert logging.getLogger().handlers == [existing]
