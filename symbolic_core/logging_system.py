"""
Logging System for the Symbolic Core

Centralized logger with verbosity levels. The core itself is quiet: it only
reports canonical-form violations, fallbacks to unevaluated derivatives and
other diagnostics that matter while debugging expression handling.
"""

import logging
import sys
from typing import Optional
from enum import Enum
from datetime import datetime


class LogLevel(Enum):
    """Enumeration of logging levels for the symbolic core"""
    SILENT = 0      # No output at all
    MINIMAL = 1     # Critical errors and warnings
    MODERATE = 2    # General information
    DETAILED = 3    # Per-operation information
    VERBOSE = 4     # All information including debug details


class SymbolicCoreLogger:
    """
    Centralized logger for the symbolic core with level-aware filtering
    """

    def __init__(self, log_level: LogLevel = LogLevel.MINIMAL,
                 log_to_file: bool = False, log_file_path: Optional[str] = None):
        self.log_level = log_level
        self.log_to_file = log_to_file
        self.log_file_path = log_file_path

        self.logger = logging.getLogger('symbolic_core')
        self.logger.setLevel(logging.DEBUG)
        for handler in list(self.logger.handlers):
            handler.close()
        self.logger.handlers.clear()
        self.logger.propagate = False

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
                log_file_path = f"symbolic_core_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log"
            self.log_file_path = log_file_path
            file_handler = logging.FileHandler(log_file_path)
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)

    def _should_log(self, required_level: LogLevel) -> bool:
        """Check if message should be logged based on current log level"""
        return self.log_level.value >= required_level.value

    def critical(self, message: str):
        """Always logged unless silent - broken invariants"""
        if self.log_level != LogLevel.SILENT:
            self.logger.error(f"CRITICAL: {message}")

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


# Global logger instance
_global_logger: Optional[SymbolicCoreLogger] = None


def get_logger() -> SymbolicCoreLogger:
    """Get or create the global logger instance"""
    global _global_logger
    if _global_logger is None:
        _global_logger = SymbolicCoreLogger()
    return _global_logger


def set_log_level(level: LogLevel):
    """Set the global logging level, keeping any file output"""
    global _global_logger
    if _global_logger is None:
        _global_logger = SymbolicCoreLogger(log_level=level)
    else:
        # Handlers depend on the level, so the logger is rebuilt
        _global_logger = SymbolicCoreLogger(
            log_level=level,
            log_to_file=_global_logger.log_to_file,
            log_file_path=_global_logger.log_file_path
        )


def configure_logging(log_level: LogLevel = LogLevel.MINIMAL,
                      log_to_file: bool = False,
                      log_file_path: Optional[str] = None) -> SymbolicCoreLogger:
    """Configure the global logging system"""
    global _global_logger
    _global_logger = SymbolicCoreLogger(
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


def log_critical(message: str):
    """Log critical message"""
    get_logger().critical(message)


def log_debug(message: str):
    """Log debug message"""
    get_logger().debug(message)
