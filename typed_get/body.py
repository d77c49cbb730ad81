"""Request body boxes.

A body is stored on the request descriptor as a ``Serializable``: anything
with a ``serialize() -> bytes`` method. Plain values are wrapped in a
``JSONBody`` so the descriptor never depends on the concrete body type and
serialization happens only when the client builds the outgoing request.
"""

from typing import Any, Protocol, runtime_checkable

from pydantic_core import PydanticSerializationError, to_json

from .exceptions import EncodingError


@runtime_checkable
class Serializable(Protocol):
    """A request body that knows how to turn itself into bytes."""

    def serialize(self) -> bytes: ...


class JSONBody:
    """Type-erased holder for any JSON-encodable value."""

    content_type = "application/json"

    __slots__ = ("value",)

    def __init__(self, value: Any):
        self.value = value

    def serialize(self) -> bytes:
        """
        Encode the wrapped value as JSON.

        Dataclasses, pydantic models, dicts, lists and scalars are supported.

        Raises:
            EncodingError: If the value is cyclic or not JSON-encodable
        """
        try:
            return to_json(self.value)
        except (PydanticSerializationError, ValueError, TypeError) as e:
            raise EncodingError(
                f"Failed to encode request body of type {type(self.value).__name__}: {e}",
                value_type=type(self.value),
            ) from e

    def __repr__(self) -> str:
        return f"JSONBody({self.value!r})"


def make_body(value: Any) -> Serializable | None:
    """
    Box a body value for a request descriptor.

    Args:
        value: Body value, a Serializable, or None

    Returns:
        None for a missing body, the value itself if it is already
        Serializable, otherwise a JSONBody
    """
    if value is None:
        return None
    if isinstance(value, Serializable):
        return value
    return JSONBody(value)
