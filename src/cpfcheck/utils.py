"""Utility functions for cpfcheck"""

import logging
import os
import sys


LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def get_str_env(key: str, default: str) -> str:
    """
    Get string from environment variable, return default if not set.

    Args:
        key: Environment variable name
        default: Default value if not set

    Returns:
        String value or default
    """
    return os.getenv(key, default)


def setup_logging(level_name: str | None = None):
    """
    Configure root logging on stderr.

    Level comes from the argument, then CPFCHECK_LOG_LEVEL, then WARNING.
    Unknown level names fall back to WARNING.
    """
    if level_name is None:
        level_name = get_str_env('CPFCHECK_LOG_LEVEL', 'WARNING')
    level = getattr(logging, level_name.upper(), None)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)
    return level
