# utils/logger.py
# This file is part of Proposat - A Propositional Logic Reasoning Engine
#
# Logging utility for expression analysis with configurable levels

import logging
import sys
from enum import Enum
from typing import Optional


class LogLevel(Enum):
    """Log levels for expression analysis."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR


class SolverLogger:
    """Centralized logger for the solver with structured output."""

    def __init__(self, name: str = "proposat", level: LogLevel = LogLevel.INFO):
        """Initialize the solver logger.

        Args:
            name: Logger name (typically module name)
            level: Default logging level
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level.value)

        # Remove existing handlers to avoid duplicates
        self.logger.handlers.clear()

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level.value)
        console_handler.setFormatter(SolverFormatter())

        self.logger.addHandler(console_handler)

        # Prevent propagation to root logger
        self.logger.propagate = False

    def set_level(self, level: LogLevel):
        """Change the logging level."""
        self.logger.setLevel(level.value)
        for handler in self.logger.handlers:
            handler.setLevel(level.value)

    # Core logging methods
    def debug(self, message: str, **kwargs):
        """Log debug message (detailed internal state)."""
        self.logger.debug(message, **kwargs)

    def info(self, message: str, **kwargs):
        """Log info message (general progress)."""
        self.logger.info(message, **kwargs)

    def warning(self, message: str, **kwargs):
        """Log warning message (unexpected but recoverable)."""
        self.logger.warning(message, **kwargs)

    def error(self, message: str, **kwargs):
        """Log error message (serious problems)."""
        self.logger.error(message, **kwargs)

    # Specialized methods for enumeration events
    def enumeration_start(self, variables: str, count: int):
        """Log the variable order and size of an enumeration."""
        self.debug(f"Enumerating {count} interpretation(s) over [{variables}]")

    def classification_result(self, expression: str, classification: str):
        """Log the classification of an expression."""
        self.debug(f"{expression} classified as {classification}")

    def analysis_start(self, expression: str):
        """Log the start of a driver analysis."""
        self.info(f"=== Analysing: {expression} ===")


class SolverFormatter(logging.Formatter):
    """Custom formatter for solver logging with clean output."""

    def format(self, record):
        # For INFO level and above, show message only (clean output)
        if record.levelno >= logging.INFO:
            return record.getMessage()

        if record.levelno == logging.DEBUG:
            return f"[DEBUG] {record.getMessage()}"

        return f"[{record.levelname}] {record.getMessage()}"


# Global logger instance
_global_logger: Optional[SolverLogger] = None


def get_logger(name: str = "proposat") -> SolverLogger:
    """Get or create the global solver logger instance.

    Args:
        name: Logger name (default: "proposat")

    Returns:
        SolverLogger instance
    """
    global _global_logger
    if _global_logger is None:
        _global_logger = SolverLogger(name)
    return _global_logger


def set_log_level(level: LogLevel):
    """Set the global log level.

    Args:
        level: New log level
    """
    logger = get_logger()
    logger.set_level(level)


def configure_logging(verbose: bool = False, debug: bool = False):
    """Configure logging based on command line flags.

    Args:
        verbose: Enable verbose (INFO) output
        debug: Enable debug output (overrides verbose)
    """
    if debug:
        set_log_level(LogLevel.DEBUG)
    elif verbose:
        set_log_level(LogLevel.INFO)
    else:
        set_log_level(LogLevel.WARNING)
