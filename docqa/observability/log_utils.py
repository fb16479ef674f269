"""
Logging utilities for safe structured logging.

Context values are rendered into the message as key=value pairs so they
survive the plain-text formatter installed by configure_logging().

Dependencies: logging (stdlib)
System role: Logging helper functions
"""

import logging
from typing import Any


def safe_log_value(value: Any, max_length: int = 200) -> str:
    """
    Safely convert any value to a string for logging.

    Collections are summarized by size rather than dumped.

    Args:
        value: Value to convert
        max_length: Maximum length before truncating

    Returns:
        str: Safe string representation
    """
    try:
        if value is None:
            return "None"
        if isinstance(value, str):
            val_str = value
        elif isinstance(value, (list, tuple, set, frozenset)):
            val_str = f"{type(value).__name__}({len(value)} items)"
        elif isinstance(value, dict):
            val_str = f"dict({len(value)} keys)"
        else:
            val_str = str(value)

        if len(val_str) > max_length:
            return val_str[:max_length] + f"... (truncated, {len(val_str)} total)"
        return val_str
    except Exception as e:
        return f"<unable to log: {type(e).__name__}>"


def format_context(**context: Any) -> str:
    """Render context as space-separated key=value pairs."""
    return " ".join(f"{key}={safe_log_value(val)}" for key, val in context.items())


def log_with_context(
    logger: logging.Logger,
    level: int,
    message: str,
    **context: Any,
) -> None:
    """
    Log a message with structured context, safely converting all values.

    Args:
        logger: Logger instance
        level: Log level (logging.INFO, etc.)
        message: Log message
        **context: Arbitrary key-value pairs appended to the message
    """
    if context:
        logger.log(level, "%s | %s", message, format_context(**context))
    else:
        logger.log(level, message)


def log_exception_with_context(
    logger: logging.Logger,
    message: str,
    exc: BaseException,
    **context: Any,
) -> None:
    """
    Log an exception with full context and traceback.

    Args:
        logger: Logger instance
        message: Log message
        exc: Exception instance
        **context: Additional key-value pairs
    """
    rendered = format_context(
        error_type=type(exc).__name__,
        error_msg=str(exc),
        **context,
    )
    logger.error("%s | %s", message, rendered, exc_info=exc)
