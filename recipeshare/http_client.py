"""
HTTP client adapter for the RecipeShare backend.

This module is the **single place** where HTTP requests are made. All facades in
recipeshare.services go through ApiClient.send(), which:

- Attaches the session's bearer token to every request
- Maps transport failures to NetworkError
- Tears the session down and redirects to login on 401 (AuthError)
- Maps other non-2xx responses to ServerError using the server's message
- Decodes JSON bodies (204 / empty body -> None)

# NOTE: Requests are single-attempt. Retrying is the caller's decision.
"""

import logging
from typing import Any, Dict, Optional

import requests

from recipeshare import navigation
from recipeshare.config import ApiConfig
from recipeshare.errors import AuthError, NetworkError, ServerError, ShapeError
from recipeshare.navigation import Navigator
from recipeshare.session import SessionStore

logger = logging.getLogger(__name__)


def _server_message(response: requests.Response) -> Optional[str]:
    """Extract the `message` field from an error body, if any."""
    try:
        data = response.json()
    except ValueError:
        return None
    if isinstance(data, dict):
        message = data.get("message")
        if isinstance(message, str) and message.strip():
            return message
    return None


class ApiClient:
    """
    Thin wrapper over `requests` bound to a base URL and a session.

    Args:
        session: Session store supplying the token and receiving 401 teardown
        navigator: Receives the login redirect after a 401
        base_url: Backend base URL (defaults to ApiConfig.get_base_url())
        timeout: Per-request timeout in seconds (defaults to ApiConfig.get_timeout())
    """

    def __init__(
        self,
        session: SessionStore,
        navigator: Navigator,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> None:
        self.session = session
        self.navigator = navigator
        self.base_url = (base_url or ApiConfig.get_base_url()).rstrip("/")
        self.timeout = timeout if timeout is not None else ApiConfig.get_timeout()

    def _headers(self) -> Dict[str, str]:
        headers = {"Content-Type": "application/json", "Accept": "application/json"}
        token = self.session.token
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    def send(
        self,
        method: str,
        path: str,
        body: Optional[Any] = None,
        query: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """
        Perform one request against the backend.

        Args:
            method: HTTP method ("GET", "POST", "PUT", "DELETE")
            path: Path relative to the base URL, starting with "/"
            body: JSON-serializable request body
            query: Query-string parameters

        Returns:
            Decoded JSON payload, or None for an empty response

        Raises:
            NetworkError: No response was received
            AuthError: The backend answered 401 (session already torn down)
            ServerError: Any other non-2xx response
            ShapeError: A 2xx response whose body is not JSON
        """
        url = f"{self.base_url}{path}"
        logger.debug("%s %s params=%r", method, url, query)

        try:
            response = requests.request(
                method,
                url,
                json=body,
                params=query,
                headers=self._headers(),
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as e:
            logger.warning("Network error on %s %s: %s", method, path, e)
            raise NetworkError() from e

        if response.status_code == 401:
            logger.warning("%s %s rejected with 401", method, path)
            self.session.expire()
            self.navigator.go(navigation.LOGIN)
            message = _server_message(response)
            raise AuthError(message) if message else AuthError()

        if not 200 <= response.status_code < 300:
            message = _server_message(response)
            logger.warning("%s %s failed: %d %s", method, path, response.status_code, message or "")
            raise ServerError(response.status_code, message)

        if response.status_code == 204 or not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            logger.warning("%s %s returned a non-JSON body", method, path)
            raise ShapeError("The server returned an unreadable response") from e

    def get(self, path: str, query: Optional[Dict[str, Any]] = None) -> Any:
        return self.send("GET", path, query=query)

    def post(self, path: str, body: Optional[Any] = None) -> Any:
        return self.send("POST", path, body=body)

    def put(self, path: str, body: Optional[Any] = None) -> Any:
        return self.send("PUT", path, body=body)

    def delete(self, path: str) -> Any:
        return self.send("DELETE", path)
