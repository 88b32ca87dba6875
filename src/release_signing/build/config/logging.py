"""
Centralized logging configuration.

Provides bootstrap_logging for task and test entry points, configured from a
logging.ini in Python's native INI format.
"""

import logging
import logging.config
import os
import sys
from pathlib import Path
from typing import Optional

LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']

_PACKAGED_CONFIG = Path(__file__).parent / 'logging.ini'


def _find_logging_config() -> Optional[Path]:
    """
    Find the logging configuration file.

    Looks for logging.ini in the current working directory, then in the
    android/ subdirectory, then falls back to the copy shipped with the package.
    """
    for candidate in (Path('logging.ini'), Path('android/logging.ini'), _PACKAGED_CONFIG):
        if candidate.exists():
            return candidate
    return None


def _setup_environment_variables():
    """Set LOG_LEVEL to INFO if it is unset or invalid, so the INI file has a valid value."""
    if 'LOG_LEVEL' not in os.environ:
        os.environ['LOG_LEVEL'] = 'INFO'

    log_level = os.environ['LOG_LEVEL'].strip().upper()
    if log_level not in LOG_LEVELS:
        print(f"Warning: Invalid LOG_LEVEL '{log_level}', using INFO", file=sys.stderr)
        os.environ['LOG_LEVEL'] = 'INFO'


def _basic_config():
    logging.basicConfig(
        level=logging.INFO,
        format='%(levelname)s: %(name)s: %(message)s',
        stream=sys.stderr
    )


def bootstrap_logging(name: Optional[str] = None) -> None:
    """
    Bootstrap logging from logging.ini.

    1. Sets up LOG_LEVEL for INI file substitution
    2. Loads the configuration with logging.config.fileConfig()
    3. Applies the LOG_LEVEL override to the root logger and its console handlers

    Falls back to logging.basicConfig() if no INI file is found or it is invalid.

    Args:
        name: Optional logger name for the confirmation message
    """
    _setup_environment_variables()

    config_path = _find_logging_config()
    if config_path is None:
        print("Warning: No logging.ini file found, using basic logging configuration", file=sys.stderr)
        _basic_config()
        return

    try:
        logging.config.fileConfig(
            str(config_path),
            defaults={'log_level': os.environ['LOG_LEVEL'].strip().upper()},
            disable_existing_loggers=False
        )
    except Exception as e:
        print(f"Warning: Failed to load logging config from {config_path}: {e}", file=sys.stderr)
        print("Using basic logging configuration", file=sys.stderr)
        _basic_config()
        return

    env_level = os.environ['LOG_LEVEL'].strip().upper()
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, env_level))
    for handler in root_logger.handlers:
        if isinstance(handler, logging.StreamHandler):
            handler.setLevel(getattr(logging, env_level))
    logging.getLogger('release_signing').setLevel(getattr(logging, env_level))

    logger = logging.getLogger(name) if name else logging.getLogger()
    logger.debug(f"Logging configured from {config_path}")
