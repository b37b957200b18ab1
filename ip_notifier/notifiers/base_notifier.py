"""
Base notifier interface.

Concrete notifiers deliver one title/message pair to a remote service and
raise NotifyError when the service does not accept it.
"""

from abc import ABC, abstractmethod


class BaseNotifier(ABC):
    """Abstract base class for notification backends."""

    def __init__(self, logger=None):
        self.logger = logger

    @abstractmethod
    def send(self, title: str, message: str) -> None:
        """
        Deliver a notification.

        Args:
            title: Notification title
            message: Notification body

        Raises:
            NotifyError: If the notification could not be delivered
        """
        pass

    def _log_debug(self, message: str) -> None:
        """Log a debug message if logger is available."""
        if self.logger:
            self.logger.debug(message)
