"""Secure logging utilities to prevent information disclosure."""

import logging
import re
from typing import Any

from lap_onboarding.config import get_settings

EMAIL_PATTERN = re.compile(r"[a-zA-Z0-9_.+-]+@[a-zA-Z0-9-]+\.[a-zA-Z0-9-.]+")


def is_debug_mode() -> bool:
    """Check if application is running in debug mode."""
    return get_settings().debug


def mask_email(email: str) -> str:
    """Mask the local part of an email, keeping the host for diagnostics.

    "jane.doe@it.paypal.com" becomes "j***@it.paypal.com".
    """
    if "@" not in email:
        return "***"
    local, _, host = email.rpartition("@")
    return f"{local[:1]}***@{host}"


def sanitize_exception_message(error: Exception) -> str:
    """Sanitize exception message for logging in production.

    Removes potentially sensitive information like:
    - File system paths
    - Email addresses
    - API keys/tokens

    Args:
        error: The exception to sanitize

    Returns:
        Sanitized error message suitable for production logs
    """
    error_msg = str(error)

    # Remove file paths (Unix and Windows)
    error_msg = re.sub(r"['\"]?(/[a-zA-Z0-9_./\-]+|[A-Z]:\\[^\s'\"]+)['\"]?", "[PATH]", error_msg)

    # Remove email addresses
    error_msg = EMAIL_PATTERN.sub("[EMAIL]", error_msg)

    # Remove potential API keys/tokens (long alphanumeric strings)
    error_msg = re.sub(r"[a-zA-Z0-9_\-]{32,}", "[TOKEN]", error_msg)

    # Truncate very long messages
    if len(error_msg) > 200:
        error_msg = error_msg[:197] + "..."

    return error_msg


def log_error(
    logger: logging.Logger,
    message: str,
    error: Exception | None = None,
    **kwargs: Any,
) -> None:
    """Log an error with appropriate detail level based on environment.

    In debug mode, logs full exception details.
    In production, logs sanitized message without sensitive details.

    Args:
        logger: The logger instance to use
        message: The log message (should be generic, no sensitive data)
        error: Optional exception to include
        **kwargs: Additional context to log (dropped in production)
    """
    if is_debug_mode():
        if error:
            logger.error(f"{message}: {error}", exc_info=True, extra=kwargs)
        else:
            logger.error(message, extra=kwargs)
    else:
        if error:
            logger.error(f"{message}: {sanitize_exception_message(error)}")
        else:
            logger.error(message)


def log_warning(
    logger: logging.Logger,
    message: str,
    error: Exception | None = None,
    **kwargs: Any,
) -> None:
    """Log a warning with appropriate detail level based on environment.

    In debug mode, logs full exception details.
    In production, logs sanitized message without sensitive details.

    Args:
        logger: The logger instance to use
        message: The log message (should be generic, no sensitive data)
        error: Optional exception to include
        **kwargs: Additional context to log (dropped in production)
    """
    if is_debug_mode():
        if error:
            logger.warning(f"{message}: {error}", extra=kwargs)
        else:
            logger.warning(message, extra=kwargs)
    else:
        if error:
            logger.warning(f"{message}: {sanitize_exception_message(error)}")
        else:
            logger.warning(message)
