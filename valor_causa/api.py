"""
HTTP client for the dashboard backend.

Every endpoint answers with a JSON envelope {success, data?, error?}.
The client only deals with transport: it returns the decoded envelope
and raises ApiError when there is no usable envelope to return. Whether
the envelope reports success is for the loaders to decide.
"""

import logging
import threading
from typing import Callable

import requests

from .config import REQUEST_TIMEOUT

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Transport failure or malformed response from the backend."""


class ApiClient:
    """Requests sessions bound to one backend origin.

    requests does not guarantee that a Session can be used from several
    threads at once, and the dashboard fetches from a small worker pool.
    Each calling thread therefore gets its own session from
    `session_factory`, created on first use and kept for that thread.
    Passing `session` instead pins that single object for every thread;
    it must then be safe to share.
    """

    def __init__(
        self,
        base_url: str,
        session: requests.Session | None = None,
        timeout: float | None = REQUEST_TIMEOUT,
        session_factory: Callable[[], requests.Session] = requests.Session,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._session_factory = (lambda: session) if session is not None else session_factory
        self._local = threading.local()
        self._lock = threading.Lock()
        self._sessions: list[requests.Session] = [] if session is None else [session]

    @property
    def session(self) -> requests.Session:
        """The calling thread's session."""
        session = getattr(self._local, "session", None)
        if session is None:
            session = self._session_factory()
            self._local.session = session
            with self._lock:
                if not any(s is session for s in self._sessions):
                    self._sessions.append(session)
                    logger.debug("Opened HTTP session for %s", threading.current_thread().name)
        return session

    def url_for(self, path: str) -> str:
        return f"{self.base_url}{path}"

    def get_envelope(self, path: str) -> dict:
        """GET `path` and return the decoded JSON envelope.

        HTTP status codes are not inspected; an error status with a JSON
        envelope body is returned like any other.
        """
        url = self.url_for(path)
        logger.debug("GET %s", url)
        try:
            response = self.session.get(url, timeout=self.timeout)
            payload = response.json()
        except requests.RequestException as exc:
            raise ApiError(f"GET {url} failed: {exc}") from exc
        except ValueError as exc:
            raise ApiError(f"GET {url} returned a non-JSON body") from exc

        if not isinstance(payload, dict):
            raise ApiError(f"GET {url} returned {type(payload).__name__}, expected an envelope object")
        return payload

    def close(self) -> None:
        """Close every session this client has handed out."""
        with self._lock:
            sessions, self._sessions = self._sessions, []
        for session in sessions:
            session.close()
