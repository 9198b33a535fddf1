"""
Logging System for the Symbolic Expression Engine

This module provides a centralized logging system with different verbosity levels
so that library use stays quiet while parse failures, unsupported operators and
ownership mistakes can still be traced when needed.
"""

import logging
import sys
from typing import Optional, Dict, Any
from enum import Enum
from datetime import datetime


class LogLevel(Enum):
    """Enumeration of logging levels for the expression engine"""
    SILENT = 0      # No output except critical errors
    MINIMAL = 1     # Warnings and critical info
    MODERATE = 2    # Key milestones
    DETAILED = 3    # Per-operation information
    VERBOSE = 4     # All information including debug details


class SymbolicExpressionLogger:
    """
    Centralized logger for the expression engine with level-aware filtering
    """

    def __init__(self, log_level: LogLevel = LogLevel.MINIMAL,
                 log_to_file: bool = False, log_file_path: Optional[str] = None):
        self.log_level = log_level
        self.log_to_file = log_to_file

        self.logger = logging.getLogger('symbolic_expression')
        self.logger.setLevel(logging.DEBUG)
        self.logger.handlers.clear()

        formatter = logging.Formatter(
            '%(asctime)s - %(levelname)s - %(message)s',
            datefmt='%H:%M:%S'
        )

        if self.log_level != LogLevel.SILENT:
            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.setFormatter(formatter)
            self.logger.addHandler(console_handler)

        if log_to_file:
            if log_file_path is None:
                log_file_path = f"symbolic_expression_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log"
            file_handler = logging.FileHandler(log_file_path)
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)

    def _should_log(self, required_level: LogLevel) -> bool:
        """Check if message should be logged based on current log level"""
        return self.log_level.value >= required_level.value

    def info(self, message: str, required_level: LogLevel = LogLevel.MODERATE):
        """General information with configurable level"""
        if self._should_log(required_level):
            self.logger.info(message)

    def warning(self, message: str):
        """Warnings - shown from minimal level onwards"""
        if self._should_log(LogLevel.MINIMAL):
            self.logger.warning(message)

    def debug(self, message: str):
        """Debug information - only in verbose mode"""
        if self._should_log(LogLevel.VERBOSE):
            self.logger.debug(f"DEBUG: {message}")

    def pool_summary(self, stats: Dict[str, Any]):
        """Log node pool statistics"""
        if not self._should_log(LogLevel.DETAILED):
            return

        self.logger.info("=" * 40)
        self.logger.info("NODE POOL STATISTICS:")
        self.logger.info("=" * 40)

        for key, value in stats.items():
            self.logger.info(f"{key:.<30} {value}")


# Global logger instance
_global_logger: Optional[SymbolicExpressionLogger] = None


def get_logger() -> SymbolicExpressionLogger:
    """Get or create the global logger instance"""
    global _global_logger
    if _global_logger is None:
        from .config import DEFAULT_LOG_LEVEL
        _global_logger = SymbolicExpressionLogger(log_level=DEFAULT_LOG_LEVEL)
    return _global_logger


def set_log_level(level: LogLevel):
    """Set the global logging level"""
    global _global_logger
    if _global_logger is None:
        _global_logger = SymbolicExpressionLogger(log_level=level)
    else:
        _global_logger.log_level = level


def configure_logging(log_level: LogLevel = LogLevel.MINIMAL,
                      log_to_file: bool = False,
                      log_file_path: Optional[str] = None) -> SymbolicExpressionLogger:
    """Configure the global logging system"""
    global _global_logger
    _global_logger = SymbolicExpressionLogger(
        log_level=log_level,
        log_to_file=log_to_file,
        log_file_path=log_file_path
    )
    return _global_logger


def log_info(message: str, level: LogLevel = LogLevel.MODERATE):
    """Log info message at specified level"""
    get_logger().info(message, level)


def log_warning(message: str):
    """Log warning message"""
    get_logger().warning(message)


def log_debug(message: str):
    """Log debug message"""
    get_logger().debug(message)
