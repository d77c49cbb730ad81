"""
Request descriptors

A Request describes one HTTP call (method, path, query, headers, body)
together with the type its response should be decoded into.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Generic, TypeVar, overload
from urllib.parse import quote

from .body import Serializable, make_body

ResultT = TypeVar("ResultT")
T = TypeVar("T")

QueryItems = Sequence[tuple[str, str | None]]


class Method(str, Enum):
    """HTTP request methods"""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    OPTIONS = "OPTIONS"
    HEAD = "HEAD"
    TRACE = "TRACE"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Request(Generic[ResultT]):
    """
    Immutable description of an HTTP request.

    Python generics are erased at runtime, so the expected result type is
    kept in ``response_type``. The client uses it to pick the decoding
    strategy when the response arrives. GET, OPTIONS and TRACE decode any
    JSON value by default; the other methods ignore the response body
    unless a response_type is given.

    Headers take no part in hashing, so requests stay usable as dict keys.

    Example:
        >>> Request.get("/user", response_type=User)
        >>> Request.post("/user", body={"login": "kean"}, response_type=User)
    """

    method: Method
    path: str
    query: tuple[tuple[str, str | None], ...] | None = None
    body: Serializable | None = None
    headers: Mapping[str, str] | None = field(default=None, hash=False)
    id: str | None = None
    response_type: Any = field(default=Any)

    def __post_init__(self):
        # Freeze caller-owned containers
        object.__setattr__(self, "method", Method(self.method))
        if self.query is not None:
            object.__setattr__(self, "query", tuple((key, value) for key, value in self.query))
        if self.headers is not None:
            object.__setattr__(self, "headers", MappingProxyType(dict(self.headers)))

    @classmethod
    def _make(
        cls,
        method: Method,
        path: str,
        query: QueryItems | None,
        headers: Mapping[str, str] | None,
        id: str | None,
        response_type: type[T],
        body: Any = None,
    ) -> "Request[T]":
        return cls(  # type: ignore[return-value]
            method=method,
            path=path,
            query=query,  # type: ignore[arg-type]
            body=make_body(body),
            headers=headers,
            id=id,
            response_type=response_type,
        )

    # Each constructor has two signatures: a concrete response_type class
    # binds the result type, anything else (Any, None, Optional[X],
    # list[X]) falls back to Request[Any].

    @overload
    @classmethod
    def get(
        cls,
        path: str,
        *,
        response_type: type[T],
        query: QueryItems | None = ...,
        headers: Mapping[str, str] | None = ...,
        id: str | None = ...,
    ) -> "Request[T]": ...

    @overload
    @classmethod
    def get(
        cls,
        path: str,
        *,
        query: QueryItems | None = ...,
        headers: Mapping[str, str] | None = ...,
        id: str | None = ...,
        response_type: Any = ...,
    ) -> "Request[Any]": ...

    @classmethod
    def get(
        cls,
        path: str,
        *,
        query: QueryItems | None = None,
        headers: Mapping[str, str] | None = None,
        id: str | None = None,
        response_type: Any = Any,
    ) -> "Request[Any]":
        """Describe a GET request."""
        return cls._make(Method.GET, path, query, headers, id, response_type)

    @overload
    @classmethod
    def post(
        cls,
        path: str,
        *,
        response_type: type[T],
        body: Any = ...,
        query: QueryItems | None = ...,
        headers: Mapping[str, str] | None = ...,
        id: str | None = ...,
    ) -> "Request[T]": ...

    @overload
    @classmethod
    def post(
        cls,
        path: str,
        *,
        body: Any = ...,
        query: QueryItems | None = ...,
        headers: Mapping[str, str] | None = ...,
        id: str | None = ...,
        response_type: Any = ...,
    ) -> "Request[Any]": ...

    @classmethod
    def post(
        cls,
        path: str,
        *,
        body: Any = None,
        query: QueryItems | None = None,
        headers: Mapping[str, str] | None = None,
        id: str | None = None,
        response_type: Any = None,
    ) -> "Request[Any]":
        """
        Describe a POST request, optionally with a body.

        The response is ignored unless a response_type is given.
        """
        return cls._make(Method.POST, path, query, headers, id, response_type, body)

    @overload
    @classmethod
    def put(
        cls,
        path: str,
        *,
        response_type: type[T],
        body: Any = ...,
        query: QueryItems | None = ...,
        headers: Mapping[str, str] | None = ...,
        id: str | None = ...,
    ) -> "Request[T]": ...

    @overload
    @classmethod
    def put(
        cls,
        path: str,
        *,
        body: Any = ...,
        query: QueryItems | None = ...,
        headers: Mapping[str, str] | None = ...,
        id: str | None = ...,
        response_type: Any = ...,
    ) -> "Request[Any]": ...

    @classmethod
    def put(
        cls,
        path: str,
        *,
        body: Any = None,
        query: QueryItems | None = None,
        headers: Mapping[str, str] | None = None,
        id: str | None = None,
        response_type: Any = None,
    ) -> "Request[Any]":
        """Describe a PUT request, optionally with a body."""
        return cls._make(Method.PUT, path, query, headers, id, response_type, body)

    @overload
    @classmethod
    def patch(
        cls,
        path: str,
        *,
        response_type: type[T],
        body: Any = ...,
        query: QueryItems | None = ...,
        headers: Mapping[str, str] | None = ...,
        id: str | None = ...,
    ) -> "Request[T]": ...

    @overload
    @classmethod
    def patch(
        cls,
        path: str,
        *,
        body: Any = ...,
        query: QueryItems | None = ...,
        headers: Mapping[str, str] | None = ...,
        id: str | None = ...,
        response_type: Any = ...,
    ) -> "Request[Any]": ...

    @classmethod
    def patch(
        cls,
        path: str,
        *,
        body: Any = None,
        query: QueryItems | None = None,
        headers: Mapping[str, str] | None = None,
        id: str | None = None,
        response_type: Any = None,
    ) -> "Request[Any]":
        """Describe a PATCH request, optionally with a body."""
        return cls._make(Method.PATCH, path, query, headers, id, response_type, body)

    @overload
    @classmethod
    def delete(
        cls,
        path: str,
        *,
        response_type: type[T],
        body: Any = ...,
        query: QueryItems | None = ...,
        headers: Mapping[str, str] | None = ...,
        id: str | None = ...,
    ) -> "Request[T]": ...

    @overload
    @classmethod
    def delete(
        cls,
        path: str,
        *,
        body: Any = ...,
        query: QueryItems | None = ...,
        headers: Mapping[str, str] | None = ...,
        id: str | None = ...,
        response_type: Any = ...,
    ) -> "Request[Any]": ...

    @classmethod
    def delete(
        cls,
        path: str,
        *,
        body: Any = None,
        query: QueryItems | None = None,
        headers: Mapping[str, str] | None = None,
        id: str | None = None,
        response_type: Any = None,
    ) -> "Request[Any]":
        """Describe a DELETE request. Most servers answer 204, so nothing is decoded by default."""
        return cls._make(Method.DELETE, path, query, headers, id, response_type, body)

    @overload
    @classmethod
    def options(
        cls,
        path: str,
        *,
        response_type: type[T],
        query: QueryItems | None = ...,
        headers: Mapping[str, str] | None = ...,
        id: str | None = ...,
    ) -> "Request[T]": ...

    @overload
    @classmethod
    def options(
        cls,
        path: str,
        *,
        query: QueryItems | None = ...,
        headers: Mapping[str, str] | None = ...,
        id: str | None = ...,
        response_type: Any = ...,
    ) -> "Request[Any]": ...

    @classmethod
    def options(
        cls,
        path: str,
        *,
        query: QueryItems | None = None,
        headers: Mapping[str, str] | None = None,
        id: str | None = None,
        response_type: Any = Any,
    ) -> "Request[Any]":
        """Describe an OPTIONS request."""
        return cls._make(Method.OPTIONS, path, query, headers, id, response_type)

    @overload
    @classmethod
    def head(
        cls,
        path: str,
        *,
        response_type: type[T],
        query: QueryItems | None = ...,
        headers: Mapping[str, str] | None = ...,
        id: str | None = ...,
    ) -> "Request[T]": ...

    @overload
    @classmethod
    def head(
        cls,
        path: str,
        *,
        query: QueryItems | None = ...,
        headers: Mapping[str, str] | None = ...,
        id: str | None = ...,
        response_type: Any = ...,
    ) -> "Request[Any]": ...

    @classmethod
    def head(
        cls,
        path: str,
        *,
        query: QueryItems | None = None,
        headers: Mapping[str, str] | None = None,
        id: str | None = None,
        response_type: Any = None,
    ) -> "Request[Any]":
        """Describe a HEAD request. HEAD responses carry no body, so nothing is decoded."""
        return cls._make(Method.HEAD, path, query, headers, id, response_type)

    @overload
    @classmethod
    def trace(
        cls,
        path: str,
        *,
        response_type: type[T],
        query: QueryItems | None = ...,
        headers: Mapping[str, str] | None = ...,
        id: str | None = ...,
    ) -> "Request[T]": ...

    @overload
    @classmethod
    def trace(
        cls,
        path: str,
        *,
        query: QueryItems | None = ...,
        headers: Mapping[str, str] | None = ...,
        id: str | None = ...,
        response_type: Any = ...,
    ) -> "Request[Any]": ...

    @classmethod
    def trace(
        cls,
        path: str,
        *,
        query: QueryItems | None = None,
        headers: Mapping[str, str] | None = None,
        id: str | None = None,
        response_type: Any = Any,
    ) -> "Request[Any]":
        """Describe a TRACE request."""
        return cls._make(Method.TRACE, path, query, headers, id, response_type)


def query_string(items: QueryItems) -> str:
    """
    Serialize ordered query items.

    Order and repeated keys are kept. A None value renders as the bare key,
    an empty string as ``key=``.

    Args:
        items: Sequence of (key, value) pairs

    Returns:
        Query string without the leading "?"

    Example:
        >>> query_string([("a", "1"), ("b", None), ("a", "2")])
        'a=1&b&a=2'
    """
    parts = []
    for key, value in items:
        encoded_key = quote(key, safe="")
        if value is None:
            parts.append(encoded_key)
        else:
            parts.append(f"{encoded_key}={quote(value, safe='')}")
    return "&".join(parts)
