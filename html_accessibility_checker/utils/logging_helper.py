# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
Error handling utilities for the html_accessibility_checker package.

This module provides the package exception hierarchy and the logger setup
and exception logging helpers shared by all modules.
"""

import logging
import sys
from typing import Optional


class HTMLAccessibilityError(Exception):
    """Base exception class for all html_accessibility_checker errors."""



class AccessibilityAuditError(HTMLAccessibilityError):
    """Raised when there's an error during accessibility auditing."""



class ConfigurationError(HTMLAccessibilityError):
    """Raised when there's an error in configuration."""



class FixGenerationError(HTMLAccessibilityError):
    """Raised when a text generation backend fails to produce a fix."""



# Configure module-level logger
logger = logging.getLogger(__name__)


def setup_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """
    Set up a logger with standardized formatting.

    Args:
        name: The logger name, typically __name__ of the calling module
        level: The logging level (default: INFO if not in debug mode)

    Returns:
        A configured logger instance
    """
    logger_obj = logging.getLogger(name)

    if level is None:
        # Follow the root logger when it was put in debug mode by --debug
        if logging.getLogger().level <= logging.DEBUG:
            level = logging.DEBUG
        else:
            level = logging.INFO

        logger.debug(f"Setting logger {name} level to {logging.getLevelName(level)}")

    logger_obj.setLevel(level)
    logger_obj.propagate = True

    if not logger_obj.handlers:
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )

        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(formatter)
        logger_obj.addHandler(handler)

    return logger_obj


def log_exception(
    logger: logging.Logger,
    exception: Exception,
    message: str = "An error occurred",
    level: int = logging.ERROR,
    include_traceback: bool = True,
) -> None:
    """
    Log an exception with consistent formatting.

    Args:
        logger: The logger instance to use
        exception: The exception to log
        message: Optional custom message
        level: The logging level to use
        include_traceback: Whether to include the full traceback
    """
    error_type = type(exception).__name__
    error_message = str(exception)

    log_msg = f"{message}: {error_type} - {error_message}"

    if include_traceback:
        logger.log(level, log_msg, exc_info=exception)
    else:
        logger.log(level, log_msg)
