"""
Error types and terminal error reporting for the IP notifier.

Scan errors are raised by the address scanner and absorbed by the retry loop.
Configuration and delivery errors propagate to the application, where the
ErrorHandler logs them together with troubleshooting suggestions.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional

from .logger import Logger, get_logger


class ErrorType(Enum):
    """Enumeration for different types of errors."""
    INTERFACE_QUERY_FAILED = "interface_query_failed"
    NO_MATCHING_ADDRESS = "no_matching_address"
    NOTIFY_ERROR = "notify_error"
    CONFIGURATION_ERROR = "configuration_error"
    VALIDATION_ERROR = "validation_error"


class ErrorSeverity(Enum):
    """Enumeration for error severity levels."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


@dataclass
class ErrorContext:
    """
    Context information for error handling.

    Attributes:
        error_type: Type of error that occurred
        severity: Severity level of the error
        operation: Operation that was being performed when error occurred
        component: Component/module where error occurred
        additional_info: Additional context information
    """
    error_type: ErrorType
    severity: ErrorSeverity
    operation: str
    component: str
    additional_info: Dict[str, Any] = field(default_factory=dict)


class IPNotifierError(Exception):
    """Base exception class for the IP notifier."""

    error_type: Optional[ErrorType] = None

    def __init__(self, message: str, error_context: Optional[ErrorContext] = None):
        super().__init__(message)
        self.error_context = error_context


class ScanError(IPNotifierError):
    """A single address scan attempt did not produce a qualifying address."""
    pass


class InterfaceQueryError(ScanError):
    """The operating system refused or failed to enumerate interface addresses."""

    error_type = ErrorType.INTERFACE_QUERY_FAILED


class NoMatchingAddressError(ScanError):
    """No interface currently holds an address inside the target subnet."""

    error_type = ErrorType.NO_MATCHING_ADDRESS


class NotifyError(IPNotifierError):
    """Exception for notification delivery failures."""

    error_type = ErrorType.NOTIFY_ERROR

    def __init__(self, message: str, status_code: Optional[int] = None,
                 error_context: Optional[ErrorContext] = None):
        super().__init__(message, error_context)
        self.status_code = status_code


class ConfigurationError(IPNotifierError):
    """Exception for configuration-related errors."""

    error_type = ErrorType.CONFIGURATION_ERROR


class ValidationError(IPNotifierError):
    """Exception for invalid arguments such as a non-positive budget."""

    error_type = ErrorType.VALIDATION_ERROR


class ErrorHandler:
    """
    Logs terminal errors and prints operator-facing suggestions.

    None of the errors reaching this handler are retried: delivery is attempted
    exactly once per run and configuration problems need manual intervention.
    """

    def __init__(self, logger: Optional[Logger] = None):
        """
        Initialize the ErrorHandler.

        Args:
            logger: Logger instance for error reporting
        """
        self.logger = logger or get_logger(__name__)

    def handle_error(self, error: Exception, context: ErrorContext) -> bool:
        """
        Handle an error based on its type and context.

        Args:
            error: The exception that occurred
            context: Error context information

        Returns:
            bool: Always False, the failed operation is not retried
        """
        self._log_error(error, context)

        suggestions = {
            ErrorType.NOTIFY_ERROR: self._suggest_notify_solutions,
            ErrorType.CONFIGURATION_ERROR: self._suggest_configuration_fixes,
            ErrorType.INTERFACE_QUERY_FAILED: self._suggest_interface_solutions,
            ErrorType.NO_MATCHING_ADDRESS: self._suggest_interface_solutions,
        }
        suggest = suggestions.get(context.error_type)
        if suggest:
            suggest(error, context)
        return False

    def context_for(self, error: IPNotifierError, operation: str, component: str,
                    **additional_info) -> ErrorContext:
        """Build an ErrorContext for one of our own exceptions."""
        if error.error_context is not None:
            return error.error_context
        error_type = error.error_type or ErrorType.VALIDATION_ERROR
        severity = ErrorSeverity.CRITICAL if error_type == ErrorType.NOTIFY_ERROR else ErrorSeverity.HIGH
        return ErrorContext(
            error_type=error_type,
            severity=severity,
            operation=operation,
            component=component,
            additional_info=additional_info,
        )

    def _log_error(self, error: Exception, context: ErrorContext) -> None:
        error_msg = f"Error in {context.component}.{context.operation}: {str(error)}"

        if context.severity == ErrorSeverity.CRITICAL:
            self.logger.error(error_msg, exception=error)
        elif context.severity == ErrorSeverity.HIGH:
            self.logger.error(error_msg)
        elif context.severity == ErrorSeverity.MEDIUM:
            self.logger.warning(error_msg)
        else:
            self.logger.debug(error_msg)

    def _suggest_notify_solutions(self, error: Exception, context: ErrorContext) -> None:
        """Provide notification delivery suggestions."""
        status_code = getattr(error, "status_code", None)
        self.logger.info("Notification delivery suggestions:")
        if status_code in (401, 403):
            self.logger.info("  • Check that the application token is valid")
            self.logger.info("  • Make sure the token belongs to an application, not a client")
        else:
            self.logger.info("  • Check that the server URL is reachable from this host")
            self.logger.info("  • Verify the server URL includes the scheme (http/https)")
        self.logger.info("  • The notification is not retried; rerun once the issue is fixed")

    def _suggest_configuration_fixes(self, error: Exception, context: ErrorContext) -> None:
        """Provide configuration error solutions."""
        config_file = context.additional_info.get("config_file", "unknown")
        self.logger.info(f"Configuration error solutions ({config_file}):")
        self.logger.info("  • Check YAML syntax and indentation")
        self.logger.info("  • Make sure gotify.server_url and gotify.token are set")
        self.logger.info("  • Generate a template with: python -m ip_notifier --init-config")

    def _suggest_interface_solutions(self, error: Exception, context: ErrorContext) -> None:
        """Provide interface enumeration suggestions."""
        self.logger.info("Address discovery suggestions:")
        self.logger.info("  • Check that the network interface is up and has a DHCP lease")
        self.logger.info("  • Verify the discovery.subnet_prefix setting")
