"""
API client

Sends Request descriptors over HTTP and returns typed Response envelopes.
The network exchange goes through an injectable HttpClient; everything
around it (URL and query building, header merging, body serialization,
status validation and decoding) happens here.
"""

import asyncio
from collections.abc import Mapping
from typing import Any, TypeVar
from urllib.parse import urlparse

import requests
from requests.structures import CaseInsensitiveDict

from .config import Config, config
from .decoding import decode
from .exceptions import ConfigurationError, DecodingError, StatusCodeError, TransportError
from .http_client import HttpClient, default_http_client
from .logging_config import get_module_logger
from .request import Request, query_string
from .response import Response, TaskMetrics

logger = get_module_logger("client")

T = TypeVar("T")


class APIClient:
    """
    Client for a single HTTP API.

    Usage:
        client = APIClient(base_url="https://api.github.com")

        user = client.send(Request.get("/user", response_type=User)).value
        response = await client.send_async(Request.get("/user", response_type=bytes))
    """

    def __init__(
        self,
        base_url: str | None = None,
        headers: Mapping[str, str] | None = None,
        timeout: float | None = None,
        validate_status: bool | None = None,
        http_client: HttpClient | None = None,
        config_obj: Config | None = None,
    ):
        """
        Initialize the client.

        Args:
            base_url: URL that relative request paths are appended to. Defaults to config value.
            headers: Session-level headers, merged under per-request headers.
                Extends the configured defaults.
            timeout: Request timeout in seconds. Defaults to config value.
            validate_status: Raise StatusCodeError for unacceptable status codes.
                Defaults to config value.
            http_client: HTTP transport (optional)
            config_obj: Config object (optional, uses global config if None)
        """
        if config_obj is None:
            config_obj = config

        self.http_client = http_client or default_http_client
        self.base_url = base_url if base_url is not None else config_obj.get("client.base_url")
        self.timeout = timeout if timeout is not None else config_obj.get("client.timeouts.request")

        self.headers: CaseInsensitiveDict = CaseInsensitiveDict(
            config_obj.get("client.headers", {}) or {}
        )
        if headers:
            self.headers.update(headers)

        if validate_status is None:
            validate_status = config_obj.get("client.validation.enabled", True)
        self.validate_status = validate_status

        acceptable = config_obj.get("client.validation.acceptable_status", [200, 299])
        if not isinstance(acceptable, (list, tuple)) or len(acceptable) != 2:
            raise ConfigurationError(
                f"expected [low, high], got {acceptable!r}",
                config_key="client.validation.acceptable_status",
            )
        self.acceptable_status = range(int(acceptable[0]), int(acceptable[1]) + 1)

        self.default_content_type = config_obj.get(
            "client.encoding.content_type", "application/json"
        )

    # --- Outgoing request ---

    def make_url(self, request: Request[Any]) -> str:
        """
        Build the full URL for a request, query string included.

        Absolute paths are used as is; relative paths are appended to base_url.

        Raises:
            ConfigurationError: If the path is relative and no base_url is set
        """
        if urlparse(request.path).scheme:
            url = request.path
        elif self.base_url:
            url = f"{self.base_url.rstrip('/')}/{request.path.lstrip('/')}"
        else:
            raise ConfigurationError(
                f"cannot resolve relative path '{request.path}' without a base URL",
                config_key="client.base_url",
            )

        if request.query:
            separator = "&" if "?" in url else "?"
            url = f"{url}{separator}{query_string(request.query)}"

        return url

    def make_headers(self, request: Request[Any]) -> CaseInsensitiveDict:
        """Merge request headers over the session-level headers."""
        headers = CaseInsensitiveDict(self.headers)
        if request.body is not None:
            headers["Content-Type"] = getattr(
                request.body, "content_type", self.default_content_type
            )
        if request.headers:
            headers.update(request.headers)
        return headers

    def prepare(self, request: Request[Any]) -> requests.PreparedRequest:
        """
        Build the outgoing request exactly as it will be sent.

        The body is serialized here, so encoding failures surface before any
        network call.

        Raises:
            EncodingError: If the body cannot be serialized
            ConfigurationError: If the URL cannot be resolved
            TransportError: If requests rejects the URL or a header value
        """
        url = self.make_url(request)
        data = request.body.serialize() if request.body is not None else None

        try:
            return requests.Request(
                method=request.method.value,
                url=url,
                headers=dict(self.make_headers(request)),
                data=data,
            ).prepare()
        except requests.exceptions.RequestException as e:
            logger.warning(f"Invalid request {request.method.value} {url}: {e}")
            raise TransportError(str(e), url=url) from e

    # --- Exchange ---

    def _perform(
        self, prepared: requests.PreparedRequest, request: Request[Any]
    ) -> requests.Response:
        """Run the exchange on the transport, mapping failures to TransportError."""
        tag = f" [{request.id}]" if request.id else ""
        logger.debug(f"→ {prepared.method} {prepared.url}{tag}")
        try:
            return self.http_client.send(prepared, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            logger.warning(f"Transport error for {prepared.method} {prepared.url}: {e}")
            raise TransportError(str(e), url=prepared.url) from e

    def _finish(
        self,
        request: Request[T],
        prepared: requests.PreparedRequest,
        raw: requests.Response,
    ) -> Response[T]:
        """Validate the status code and decode the body into the envelope."""
        data = raw.content or b""
        metrics = TaskMetrics.from_response(raw)

        elapsed = f" in {metrics.elapsed.total_seconds() * 1000:.0f}ms" if metrics else ""
        logger.debug(f"← {raw.status_code} {prepared.url} ({len(data)} bytes){elapsed}")

        if self.validate_status and raw.status_code not in self.acceptable_status:
            logger.error(
                f"Unacceptable status code {raw.status_code} for {prepared.method} {prepared.url}"
            )
            raise StatusCodeError(raw.status_code, data=data, url=prepared.url)

        envelope: Response[bytes] = Response(
            value=data,
            data=data,
            request=prepared,
            response=raw,
            status_code=raw.status_code,
            metrics=metrics,
        )
        try:
            return envelope.map(lambda body: decode(body, request.response_type))
        except DecodingError as e:
            logger.error(f"Failed to decode response from {prepared.method} {prepared.url}: {e}")
            raise

    def send(self, request: Request[T]) -> Response[T]:
        """
        Send a request and wait for the decoded response.

        Args:
            request: Request descriptor

        Returns:
            Response envelope with the decoded value

        Raises:
            EncodingError: If the body cannot be serialized
            TransportError: If the exchange fails
            StatusCodeError: If status validation is enabled and fails
            DecodingError: If the body does not match request.response_type
        """
        prepared = self.prepare(request)
        raw = self._perform(prepared, request)
        return self._finish(request, prepared, raw)

    async def send_async(self, request: Request[T]) -> Response[T]:
        """
        Send a request without blocking the event loop.

        The exchange runs in a worker thread. Cancelling the awaiting task
        raises TransportError with ``cancelled=True``; the body is never
        decoded in that case.

        Raises:
            Same as send()
        """
        prepared = self.prepare(request)
        try:
            raw = await asyncio.to_thread(self._perform, prepared, request)
        except asyncio.CancelledError as e:
            logger.warning(f"Request cancelled: {prepared.method} {prepared.url}")
            raise TransportError("Request cancelled", cancelled=True, url=prepared.url) from e
        return self._finish(request, prepared, raw)
