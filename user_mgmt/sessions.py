"""
Session service client.

Sessions live in an external key-value service reached over HTTP:

    POST   {base}/create       JSON payload -> session id (text body)
    GET    {base}/get/{id}     -> JSON payload, 404 if unknown
    DELETE {base}/delete/{id}

The service owns session expiry; this module only creates, fetches and
deletes by id and never inspects the payload.
"""

import logging
from typing import Any, Protocol
from urllib.parse import quote

import requests

from .exceptions import UpstreamError

logger = logging.getLogger(__name__)


class SessionService(Protocol):
    """Operations the handlers need from a session store."""

    def create_session(self, payload: dict[str, Any]) -> str: ...

    def fetch_session(self, session_id: str) -> Any | None: ...

    def delete_session(self, session_id: str) -> None: ...


class HttpSessionService:
    """SessionService backed by the remote session-state service."""

    def __init__(self, base_url: str, timeout: float = 5.0, http: requests.Session | None = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._http = http or requests.Session()
        # Known internal service; do not follow long redirect chains
        self._http.max_redirects = 3

    def _url(self, action: str, session_id: str) -> str:
        # Ids come from the Cookie header; keep them to one path segment
        return f"{self.base_url}/{action}/{quote(session_id, safe='')}"

    def create_session(self, payload: dict[str, Any]) -> str:
        """
        Create a session and return the id issued by the service.

        Raises:
            UpstreamError: If the service is unreachable, errors, or returns no id
        """
        try:
            resp = self._http.post(f"{self.base_url}/create", json=payload, timeout=self.timeout)
            resp.raise_for_status()
        except requests.RequestException as e:
            logger.error(f"Session create failed: {e}")
            raise UpstreamError("Session service unavailable") from e

        session_id = resp.text.strip()
        if not session_id:
            raise UpstreamError("Session service returned an empty session id")
        return session_id

    def fetch_session(self, session_id: str) -> Any | None:
        """
        Fetch the payload stored under a session id.

        Returns:
            Decoded JSON payload, or None if the service reports 404

        Raises:
            UpstreamError: On transport errors, other error statuses, or a non-JSON body
        """
        try:
            resp = self._http.get(self._url("get", session_id), timeout=self.timeout)
            if resp.status_code == 404:
                return None
            resp.raise_for_status()
            return resp.json()
        except requests.RequestException as e:
            logger.error(f"Session fetch failed for {session_id[:8]}: {e}")
            raise UpstreamError("Session service unavailable") from e
        except ValueError as e:
            logger.error(f"Session service returned invalid JSON for {session_id[:8]}")
            raise UpstreamError("Session service returned invalid data") from e

    def delete_session(self, session_id: str) -> None:
        """Delete a session. Failures are logged, never raised."""
        try:
            resp = self._http.delete(self._url("delete", session_id), timeout=self.timeout)
            resp.raise_for_status()
        except requests.RequestException as e:
            logger.warning(f"Session delete failed for {session_id[:8]}: {e}")
