"""Internal HTTP session management."""

from typing import Optional

import requests


class _HttpTransport:
    """
    Wraps a requests.Session used for plain GETs.

    A caller-supplied session is used as-is and never closed here;
    otherwise one is created lazily and owned by the transport.
    """

    def __init__(self, session: Optional[requests.Session] = None):
        self._session = session
        self._owned = session is None

    def get_session(self) -> requests.Session:
        """Return the active session, creating one if needed."""
        if self._session is None:
            self._session = requests.Session()
        return self._session

    def get_text(self, url: str) -> str:
        """
        GET *url* and return the decoded body.

        No timeout and no retry: requests exceptions (connection errors,
        HTTP error statuses) propagate to the caller.
        """
        response = self.get_session().get(url)
        response.raise_for_status()
        return response.text

    def close(self) -> None:
        """Close the session if this transport created it."""
        if self._owned and self._session is not None:
            self._session.close()
            self._session = None
