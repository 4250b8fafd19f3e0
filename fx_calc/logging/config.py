"""
Centralized logging configuration for the FX Calc library.

This module provides standardized logging configuration using structlog
for all components. All logging throughout the library should use this
configuration to ensure consistent formatting and structured logging.
"""
import logging
import sys
from typing import Any, Optional

import structlog
from structlog.types import FilteringBoundLogger


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list] = None
) -> None:
    """
    Configure structlog for the entire application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include timestamp in log output
        include_caller: Include caller information (filename, line number)
        extra_processors: Additional structlog processors to include
    """
    log_level = getattr(logging, level.upper())

    logging.basicConfig(
        level=log_level,
        stream=sys.stdout,
        format="%(message)s"  # structlog will handle formatting
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.FILENAME,
                       structlog.processors.CallsiteParameter.LINENO]
        ))

    if extra_processors:
        processors.extend(extra_processors)

    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def get_calculation_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger bound to the calculator subsystem.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger for calculator events
    """
    return get_logger(name).bind(subsystem="calculator")


def get_rates_logger(name: str) -> FilteringBoundLogger:
    """Get a logger bound to the exchange rate subsystem."""
    return get_logger(name).bind(subsystem="rates")


def log_calculation(
    logger: FilteringBoundLogger,
    calculator: str,
    inputs: dict[str, Any],
    outputs: Optional[dict[str, Any]] = None
) -> None:
    """
    Log a completed calculation with standardized format.

    Args:
        logger: Structlog logger instance
        calculator: Name of the calculator that ran
        inputs: Input parameters passed to the calculator
        outputs: Headline output values
    """
    bound_logger = logger.bind(
        calculator=calculator,
        inputs=inputs,
    )

    if outputs:
        bound_logger = bound_logger.bind(outputs=outputs)

    bound_logger.debug("Calculation completed")


def log_calculation_failure(
    logger: FilteringBoundLogger,
    calculator: str,
    inputs: dict[str, Any],
    error: Exception
) -> None:
    """
    Log a rejected or failed calculation.

    Input errors are logged at warning level; anything else at error level.
    """
    bound_logger = logger.bind(
        calculator=calculator,
        inputs=inputs,
        error_type=type(error).__name__,
        error=str(error),
    )

    if getattr(error, "recoverable", False):
        bound_logger.warning("Calculation rejected")
    else:
        bound_logger.error("Calculation failed")
