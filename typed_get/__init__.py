"""typed-get: typed HTTP requests and responses on top of requests."""

from .body import JSONBody, Serializable
from .client import APIClient
from .decoding import decode
from .exceptions import (
    ConfigurationError,
    DecodingError,
    EncodingError,
    StatusCodeError,
    TransportError,
    TypedGetError,
)
from .http_client import HttpClient
from .request import Method, Request, query_string
from .response import Response, TaskMetrics, TransactionMetrics

__all__ = [
    "APIClient",
    "ConfigurationError",
    "DecodingError",
    "EncodingError",
    "HttpClient",
    "JSONBody",
    "Method",
    "Request",
    "Response",
    "Serializable",
    "StatusCodeError",
    "TaskMetrics",
    "TransactionMetrics",
    "TransportError",
    "TypedGetError",
    "decode",
    "query_string",
]
