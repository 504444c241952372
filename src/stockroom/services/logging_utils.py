"""Service layer logging utilities.

Provides structured logging functions for service operations, enabling
consistent log format and context across repository calls, quantity
adjustments and form submissions.

Usage:
    from stockroom.services.logging_utils import get_service_logger, log_operation

    logger = get_service_logger(__name__)

    log_operation(
        logger,
        operation="adjust_quantity",
        outcome="success",
        collection="materials",
        item_id="9f1c...",
        new_quantity=12,
    )
"""

import logging
from typing import Any


def get_service_logger(name: str) -> logging.Logger:
    """
    Get a logger configured for service operations.

    Args:
        name: Logger name (typically __name__ of the calling module)

    Returns:
        Configured logger instance with the 'stockroom.services' prefix.

    Example:
        >>> logger = get_service_logger("stockroom.services.quantity_service")
        >>> logger.name
        'stockroom.services.quantity_service'
    """
    if "." in name:
        name = name.split(".")[-1]
    return logging.getLogger(f"stockroom.services.{name}")


def log_operation(
    logger: logging.Logger,
    operation: str,
    outcome: str,
    level: int = logging.INFO,
    **context: Any,
) -> None:
    """
    Log a service operation with structured context.

    The context is passed via the 'extra' parameter for structured logging.

    Args:
        logger: Logger instance to use
        operation: Operation name (e.g., "insert", "adjust_quantity")
        outcome: Outcome description (e.g., "success", "validation_failed", "error")
        level: Log level (default: INFO). Use DEBUG for verbose/frequent logs.
        **context: Additional context fields (collection, item_id, error, ...)
    """
    extra = {
        "operation": operation,
        "outcome": outcome,
        **context,
    }
    logger.log(level, f"{operation}: {outcome}", extra=extra)
