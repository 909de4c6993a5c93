"""
Logging utilities for safe structured logging.

Dependencies: logging (stdlib)
System role: Logging helper functions
"""

import logging
from typing import Any

from manual_assistant.core.exceptions import ManualAssistantException


def safe_log_value(value: Any, max_length: int = 500) -> str:
    """
    Safely convert any value to a string for logging.

    Args:
        value: Value to convert
        max_length: Maximum length before truncating

    Returns:
        str: Safe string representation
    """
    if value is None:
        return "None"
    if isinstance(value, str):
        val_str = value
    elif isinstance(value, (list, tuple)):
        val_str = f"{type(value).__name__}({len(value)} items)"
    elif isinstance(value, dict):
        val_str = f"dict({len(value)} keys)"
    else:
        val_str = str(value)

    if len(val_str) > max_length:
        return val_str[:max_length] + f"... (truncated, {len(val_str)} total)"
    return val_str


def log_exception_with_context(
    logger: logging.Logger,
    message: str,
    exc: Exception,
    **context,
) -> None:
    """
    Log an exception with its details and extra context.

    Application exceptions contribute their details dict; the traceback is
    attached only at DEBUG level to keep the console readable.

    Args:
        logger: Logger instance
        message: Log message
        exc: Exception instance
        **context: Additional context values
    """
    safe_context = {key: safe_log_value(val) for key, val in context.items()}
    safe_context["error_type"] = type(exc).__name__
    if isinstance(exc, ManualAssistantException):
        safe_context.update(
            {f"detail_{key}": safe_log_value(val) for key, val in exc.details.items()}
        )
        error_msg = exc.message
    else:
        error_msg = str(exc)

    fields = ", ".join(f"{key}={val}" for key, val in safe_context.items())
    logger.error(
        f"{message}: {error_msg} ({fields})",
        exc_info=logger.isEnabledFor(logging.DEBUG),
    )
