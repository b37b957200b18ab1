"""
Coloured console logging for IP notifier runs.

This module provides a Logger class that writes timestamped, colour-coded
messages using colorama, plus a couple of formatting helpers used to present
discovery results to the operator.
"""

import sys
from datetime import datetime
from enum import Enum
from typing import Optional, Sequence
from colorama import Fore, Style, init

# Initialize colorama for cross-platform colored output
init(autoreset=True)


class LogLevel(Enum):
    """Enumeration for different log levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


LEVEL_ORDER = {
    LogLevel.DEBUG: 0,
    LogLevel.INFO: 1,
    LogLevel.WARNING: 2,
    LogLevel.ERROR: 3,
}


class Logger:
    """
    Logger with coloured console output.

    Warnings and errors go to stderr so that a cron or systemd unit captures
    them separately from the normal progress lines.
    """

    LEVEL_COLORS = {
        LogLevel.DEBUG: Fore.CYAN,
        LogLevel.INFO: Fore.GREEN,
        LogLevel.WARNING: Fore.YELLOW,
        LogLevel.ERROR: Fore.RED,
    }

    LEVEL_SYMBOLS = {
        LogLevel.DEBUG: "🔍",
        LogLevel.INFO: "ℹ️",
        LogLevel.WARNING: "⚠️",
        LogLevel.ERROR: "❌",
    }

    def __init__(self, name: str = "IPNotifier", min_level: LogLevel = LogLevel.INFO):
        """
        Initialize the Logger.

        Args:
            name: Name of the logger (default: "IPNotifier")
            min_level: Minimum log level to display (default: INFO)
        """
        self.name = name
        self.min_level = min_level

    def _should_log(self, level: LogLevel) -> bool:
        return LEVEL_ORDER[level] >= LEVEL_ORDER[self.min_level]

    def _format_timestamp(self) -> str:
        return datetime.now().strftime("%H:%M:%S")

    def _log(self, level: LogLevel, message: str, **kwargs) -> None:
        """
        Format and print a message if its level is enabled.

        Args:
            level: Log level
            message: Message to log
            **kwargs: Extra context rendered as ``key=value`` pairs
        """
        if not self._should_log(level):
            return

        timestamp = self._format_timestamp()
        color = self.LEVEL_COLORS[level]
        symbol = self.LEVEL_SYMBOLS[level]

        formatted_message = (
            f"{Style.DIM}[{timestamp}]{Style.RESET_ALL} "
            f"{color}{symbol} {level.value:<7}{Style.RESET_ALL} "
            f"{message}"
        )

        if kwargs:
            details = " | ".join([f"{k}={v}" for k, v in kwargs.items()])
            formatted_message += f" {Style.DIM}({details}){Style.RESET_ALL}"

        stream = sys.stderr if LEVEL_ORDER[level] >= LEVEL_ORDER[LogLevel.WARNING] else sys.stdout
        print(formatted_message, file=stream)

    def debug(self, message: str, **kwargs) -> None:
        """Log a debug message."""
        self._log(LogLevel.DEBUG, message, **kwargs)

    def info(self, message: str, **kwargs) -> None:
        """Log an info message."""
        self._log(LogLevel.INFO, message, **kwargs)

    def warning(self, message: str, **kwargs) -> None:
        """Log a warning message."""
        self._log(LogLevel.WARNING, message, **kwargs)

    def error(self, message: str, exception: Optional[Exception] = None, **kwargs) -> None:
        """
        Log an error message.

        Args:
            message: Error message
            exception: Optional exception object for additional context
            **kwargs: Additional context information
        """
        if exception:
            kwargs["exception"] = f"{type(exception).__name__}: {str(exception)}"
        self._log(LogLevel.ERROR, message, **kwargs)

    def success(self, message: str, **kwargs) -> None:
        """Log a success message (INFO level, highlighted)."""
        if not self._should_log(LogLevel.INFO):
            return

        timestamp = self._format_timestamp()
        formatted_message = (
            f"{Style.DIM}[{timestamp}]{Style.RESET_ALL} "
            f"{Fore.GREEN}✅ SUCCESS {Style.RESET_ALL} "
            f"{Style.BRIGHT}{message}{Style.RESET_ALL}"
        )

        if kwargs:
            details = " | ".join([f"{k}={v}" for k, v in kwargs.items()])
            formatted_message += f" {Style.DIM}({details}){Style.RESET_ALL}"

        print(formatted_message)

    def section(self, title: str) -> None:
        """Print a section header."""
        if not self._should_log(LogLevel.INFO):
            return

        separator = "=" * 60
        print(f"\n{Fore.BLUE}{Style.BRIGHT}{separator}")
        print(f"  {title.upper()}")
        print(f"{separator}{Style.RESET_ALL}\n")

    def address_summary(self, hostname: str, subnet_prefix: str, addresses: Sequence[str]) -> None:
        """
        Display the discovered addresses for this host.

        Args:
            hostname: Host identifier included in the report
            subnet_prefix: Prefix the addresses were filtered on
            addresses: Qualifying addresses in enumeration order
        """
        if not self._should_log(LogLevel.INFO):
            return

        print(f"\n{Fore.CYAN}{Style.BRIGHT}🌐 LOCAL ADDRESSES{Style.RESET_ALL}")
        print(f"  Host:          {Style.BRIGHT}{hostname}{Style.RESET_ALL}")
        print(f"  Subnet prefix: {Style.BRIGHT}{subnet_prefix}{Style.RESET_ALL}")
        print(f"  Addresses:     {Style.BRIGHT}{', '.join(addresses)}{Style.RESET_ALL}\n")


# Global logger instance
logger = Logger()


def set_log_level(level: LogLevel) -> None:
    """
    Set the global log level.

    Args:
        level: Minimum log level to display
    """
    logger.min_level = level


def get_logger(name: str = "IPNotifier") -> Logger:
    """
    Get a logger instance that follows the global log level.

    Args:
        name: Logger name

    Returns:
        Logger instance
    """
    return Logger(name, min_level=logger.min_level)
