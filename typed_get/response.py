"""
Response envelopes

A Response bundles the decoded value with everything known about the
exchange that produced it.
"""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import timedelta
from typing import Generic, TypeVar

import requests

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class TransactionMetrics:
    """Timing for a single request/response hop (one per redirect)."""

    url: str
    method: str
    status_code: int
    elapsed: timedelta


@dataclass(frozen=True)
class TaskMetrics:
    """Timing for a complete exchange, redirects included."""

    transactions: tuple[TransactionMetrics, ...]
    elapsed: timedelta

    @classmethod
    def from_response(cls, response: requests.Response) -> "TaskMetrics | None":
        """
        Collect metrics from a requests response and its redirect history.

        Returns None if the transport recorded no timing data.
        """
        hops = [*response.history, response]
        if any(getattr(hop, "elapsed", None) is None for hop in hops):
            return None

        transactions = tuple(
            TransactionMetrics(
                url=hop.request.url if hop.request is not None else hop.url,
                method=hop.request.method if hop.request is not None else "",
                status_code=hop.status_code,
                elapsed=hop.elapsed,
            )
            for hop in hops
        )
        total = sum((t.elapsed for t in transactions), timedelta())
        return cls(transactions=transactions, elapsed=total)


@dataclass(frozen=True)
class Response(Generic[T]):
    """
    A decoded value with its response metadata.

    Attributes:
        value: Decoded payload
        data: Raw response bytes, always kept verbatim
        request: The request exactly as sent (merged headers, query, body)
        response: The response as received
        status_code: HTTP status code
        metrics: Timing data, or None if the transport supplied none
    """

    value: T
    data: bytes
    request: requests.PreparedRequest
    response: requests.Response
    status_code: int
    metrics: TaskMetrics | None = None

    def map(self, transform: Callable[[T], U]) -> "Response[U]":
        """Return a new envelope with a transformed value and the same metadata."""
        return Response(
            value=transform(self.value),
            data=self.data,
            request=self.request,
            response=self.response,
            status_code=self.status_code,
            metrics=self.metrics,
        )
