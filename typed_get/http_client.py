"""HTTP transport abstraction for dependency injection and testability."""

from typing import Any

import requests


class HttpClient:
    """
    Transport wrapper around requests.

    This abstraction enables:
    - Dependency injection for testing
    - Easy mocking in unit tests
    - A single place where the network is touched
    """

    def __init__(self, session: requests.Session | None = None):
        """
        Initialize the transport.

        Args:
            session: Optional shared session. When omitted, every call uses
                its own short-lived session so concurrent sends share no state.
        """
        self.session = session

    def send(
        self,
        request: requests.PreparedRequest,
        timeout: float | None = None,
        **kwargs: Any,
    ) -> requests.Response:
        """
        Perform one HTTP exchange.

        Session state is applied the way Session.request() would apply it:
        session headers, auth and cookies fill in whatever the prepared
        request does not set itself, and proxy, CA bundle and client
        certificate settings come from the environment unless passed in.
        The prepared request is updated in place, so it stays the request
        that was actually sent.

        Args:
            request: Prepared request (URL and body final)
            timeout: Optional request timeout in seconds
            **kwargs: Additional arguments to pass to Session.send()

        Returns:
            requests.Response object

        Raises:
            requests.RequestException: On network or protocol failure
        """
        if self.session is not None:
            return self._send(self.session, request, timeout, kwargs)

        with requests.Session() as session:
            return self._send(session, request, timeout, kwargs)

    @staticmethod
    def _send(
        session: requests.Session,
        request: requests.PreparedRequest,
        timeout: float | None,
        kwargs: dict[str, Any],
    ) -> requests.Response:
        for name, value in session.headers.items():
            if value is not None and name not in request.headers:
                request.headers[name] = value

        if session.auth is not None and "Authorization" not in request.headers:
            request.prepare_auth(session.auth)

        if session.cookies and "Cookie" not in request.headers:
            request.prepare_cookies(session.cookies)

        settings = session.merge_environment_settings(
            request.url,
            kwargs.pop("proxies", None) or {},
            kwargs.pop("stream", None),
            kwargs.pop("verify", None),
            kwargs.pop("cert", None),
        )
        return session.send(request, timeout=timeout, **settings, **kwargs)


# Create a default instance for clients that don't inject one
default_http_client = HttpClient()
