"""
=============================================
Configuration management for query building.
=============================================

Loads all configuration from environment variables (.env file) and provides
a centralized Config singleton for application-wide access.

The configuration system covers:
- Builder behaviour switches (WHERE merging, strict bound checking)
- Logging level and output destinations
- Type conversion of boolean flags

Example:
    >>> from core.config import config
    >>>
    >>> # Builder behaviour
    >>> if config.merge_where_groups:
    ...     print("Flat and grouped conditions share one WHERE")
    >>>
    >>> # Logging settings
    >>> print(f"Level: {config.log_level}")
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Load environment variables from .env file
env_path = Path(__file__).parent.parent / '.env'
load_dotenv(dotenv_path=env_path)

TRUE_VALUES = ('1', 'true', 'yes', 'on')


def _get_bool(name: str, default: bool = False) -> bool:
    """Read a boolean flag from the environment.

    Args:
        name: Environment variable name
        default: Value used when the variable is unset or empty

    Returns:
        True when the value is one of 1/true/yes/on (case-insensitive)
    """
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip().lower() in TRUE_VALUES


@dataclass
class BuilderConfig:
    """Query builder behaviour settings.

    Attributes:
        merge_where_groups: Render flat and grouped conditions under a single
            WHERE keyword instead of one WHERE per kind
        strict: Reject negative pagination bounds and empty CASE expressions
    """

    merge_where_groups: bool
    strict: bool


@dataclass
class LoggingConfig:
    """Logging configuration settings.

    Attributes:
        level: Root logging level name
        log_file: Optional log file name
        log_dir: Directory for the log file
        use_colors: Colored console output
    """

    level: str
    log_file: Optional[str]
    log_dir: str
    use_colors: bool


class Config:
    """Centralized configuration manager.

    Attributes:
        builder: BuilderConfig instance with builder switches
        logging: LoggingConfig instance with logging settings

    Example:
        >>> config = Config()
        >>> config.strict_mode
        False
    """

    def __init__(self):
        """Initialize configuration from environment variables."""
        self.builder = BuilderConfig(
            merge_where_groups=_get_bool('QUERY_BUILDER_MERGE_WHERE', False),
            strict=_get_bool('QUERY_BUILDER_STRICT', False)
        )

        self.logging = LoggingConfig(
            level=os.getenv('QUERY_BUILDER_LOG_LEVEL', 'INFO').upper(),
            log_file=os.getenv('QUERY_BUILDER_LOG_FILE') or None,
            log_dir=os.getenv('QUERY_BUILDER_LOG_DIR', 'logs'),
            use_colors=_get_bool('QUERY_BUILDER_LOG_COLORS', True)
        )

    @property
    def merge_where_groups(self) -> bool:
        """Whether builders emit a single merged WHERE clause."""
        return self.builder.merge_where_groups

    @property
    def strict_mode(self) -> bool:
        """Whether builders validate pagination bounds."""
        return self.builder.strict

    @property
    def log_level(self) -> str:
        """Get configured logging level name."""
        return self.logging.level


# Global configuration instance
config = Config()
