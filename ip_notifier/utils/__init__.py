"""
Utility functions and helper classes.
"""

from .logger import Logger, LogLevel, logger, set_log_level, get_logger
from .error_handler import (
    ErrorHandler, ErrorContext, ErrorType, ErrorSeverity,
    IPNotifierError, ScanError, InterfaceQueryError, NoMatchingAddressError,
    NotifyError, ConfigurationError, ValidationError
)

__all__ = [
    'Logger',
    'LogLevel',
    'logger',
    'set_log_level',
    'get_logger',
    'ErrorHandler',
    'ErrorContext',
    'ErrorType',
    'ErrorSeverity',
    'IPNotifierError',
    'ScanError',
    'InterfaceQueryError',
    'NoMatchingAddressError',
    'NotifyError',
    'ConfigurationError',
    'ValidationError'
]
