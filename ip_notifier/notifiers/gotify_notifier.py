"""
Gotify push notification client.

Sends messages through the Gotify REST API: a form-encoded POST to
``{server_url}/message`` with the application token in the query string.
"""

from typing import Optional

import requests

from .base_notifier import BaseNotifier
from ..utils.error_handler import NotifyError

DEFAULT_PRIORITY = 5
DEFAULT_TIMEOUT = 10  # seconds


class GotifyNotifier(BaseNotifier):
    """
    Gotify client used to deliver the address report.

    Delivery is attempted exactly once; any failure is raised as NotifyError.
    """

    def __init__(
        self,
        server_url: str,
        token: str,
        priority: int = DEFAULT_PRIORITY,
        timeout: int = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
        logger=None,
    ):
        """
        Initialize the Gotify client.

        Args:
            server_url: Base URL of the Gotify server
            token: Application token
            priority: Message priority
            timeout: Request timeout in seconds
            session: Optional requests session. If omitted, a session is opened
                and closed for each send
            logger: Logger instance for debug output
        """
        super().__init__(logger)
        self.server_url = server_url.rstrip("/")
        self.token = token
        self.priority = priority
        self.timeout = timeout
        self.session = session

    @property
    def message_url(self) -> str:
        return f"{self.server_url}/message"

    def send(self, title: str, message: str) -> None:
        """
        Post a message to the Gotify server.

        Args:
            title: Message title
            message: Message body

        Raises:
            NotifyError: On connection failures or any non-200 response
        """
        data = {
            "title": title,
            "message": message,
            "priority": str(self.priority),
        }

        self._log_debug(f"Posting notification to {self.message_url}")

        try:
            if self.session is not None:
                response = self._post(self.session, data)
            else:
                with requests.Session() as session:
                    response = self._post(session, data)
        except requests.exceptions.Timeout as e:
            raise NotifyError(f"Request timeout to {self.server_url}") from e
        except requests.exceptions.ConnectionError as e:
            raise NotifyError(f"Connection failed to {self.server_url}: {str(e)}") from e
        except requests.exceptions.RequestException as e:
            raise NotifyError(f"Request failed: {str(e)}") from e

        if response.status_code != 200:
            raise NotifyError(
                f"Failed to send notification, status code: {response.status_code}",
                status_code=response.status_code,
            )

        self._log_debug("Notification accepted by Gotify")

    def _post(self, session: requests.Session, data: dict) -> requests.Response:
        return session.post(
            self.message_url,
            params={"token": self.token},
            data=data,
            timeout=self.timeout,
        )
