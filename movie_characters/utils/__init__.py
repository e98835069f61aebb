"""
Shared utilities package.

This package contains logging configuration used across the application.
"""

from movie_characters.utils.logging_config import (
    setup_logging, get_logger, configure_api_logging, configure_script_logging,
)

__all__ = ['setup_logging', 'get_logger', 'configure_api_logging', 'configure_script_logging']
