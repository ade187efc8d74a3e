"""Social Media API client.

A thin wrapper around the REST routes exposed by
``social_media_api``.  It uses the ``requests`` library internally and
exposes one method per route:

* :meth:`register` and :meth:`login` for accounts.
* :meth:`create_message`, :meth:`list_messages`, :meth:`get_message`,
  :meth:`update_message` and :meth:`delete_message` for messages.
* :meth:`list_account_messages` for the messages of one account.

Every method returns a tuple ``(data, error)``.  ``data`` is the parsed
JSON body, or ``None`` when the server answered with an empty body
(which is how the API reports a message that does not exist).
``error`` is ``None`` on success, otherwise a dictionary with keys
``status_code`` and ``message``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Result = Tuple[Optional[Any], Optional[Dict[str, Any]]]


class SocialMediaAPI:
    """Client for interacting with the social media API."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``http://localhost:8080``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Timeout in seconds applied to every request.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(self, method: str, path: str, *, json_body: Any | None = None) -> Result:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PATCH``, ``DELETE``).
            path: Path relative to :attr:`base_url` (e.g. ``/messages``).
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)`` as described in the module docstring.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    # ------------------------------------------------------------------
    # Account operations
    # ------------------------------------------------------------------
    def register(self, username: str, password: str) -> Result:
        """Create an account.  Fails with status 400 if the username is taken."""
        return self._request("POST", "/register", json_body={"username": username, "password": password})

    def login(self, username: str, password: str) -> Result:
        """Verify credentials.  Fails with status 401 on a mismatch."""
        return self._request("POST", "/login", json_body={"username": username, "password": password})

    def list_account_messages(self, account_id: int) -> Tuple[List[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Retrieve the messages posted by one account."""
        data, error = self._request("GET", f"/accounts/{account_id}/messages")
        if error:
            return [], error
        return data or [], None

    # ------------------------------------------------------------------
    # Message operations
    # ------------------------------------------------------------------
    def create_message(self, posted_by: int, message_text: str, time_posted_epoch: int) -> Result:
        payload = {
            "posted_by": posted_by,
            "message_text": message_text,
            "time_posted_epoch": time_posted_epoch,
        }
        return self._request("POST", "/messages", json_body=payload)

    def list_messages(self) -> Tuple[List[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Retrieve all messages.

        Returns:
            A tuple ``(messages, error)``. ``messages`` is empty on failure.
        """
        data, error = self._request("GET", "/messages")
        if error:
            return [], error
        return data or [], None

    def get_message(self, message_id: int) -> Result:
        """Retrieve a single message; ``(None, None)`` if it does not exist."""
        return self._request("GET", f"/messages/{message_id}")

    def update_message(self, message_id: int, message_text: str) -> Result:
        return self._request("PATCH", f"/messages/{message_id}", json_body={"message_text": message_text})

    def delete_message(self, message_id: int) -> Result:
        """Delete a message.

        Returns the deleted message, or ``(None, None)`` if there was
        nothing to delete.
        """
        return self._request("DELETE", f"/messages/{message_id}")
