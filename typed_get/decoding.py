"""
Response decoding

Turns raw response bytes into the value a request asked for. The strategy
is picked from the expected type alone, never from the content:

    bytes            -> bytes as received
    str              -> strict UTF-8 text
    None             -> None, body ignored
    Optional[X]      -> None for an empty body, JSON-decoded X otherwise
    anything else    -> JSON-decoded value, empty body is an error
"""

import types
from functools import lru_cache
from typing import Any, Union, get_args, get_origin

from pydantic import TypeAdapter, ValidationError

from .exceptions import DecodingError
from .logging_config import get_module_logger

logger = get_module_logger("decoding")

NoneType = type(None)


def is_optional(response_type: Any) -> bool:
    """Check whether a type is a union that admits None alongside another type."""
    if get_origin(response_type) not in (Union, types.UnionType):
        return False
    args = get_args(response_type)
    return NoneType in args and any(arg is not NoneType for arg in args)


@lru_cache(maxsize=256)
def _adapter(response_type: Any) -> TypeAdapter:
    return TypeAdapter(response_type)


def decode_structured(data: bytes, response_type: Any) -> Any:
    """
    Decode JSON bytes into response_type using pydantic.

    Raises:
        DecodingError: If the bytes are not valid JSON for the type
    """
    try:
        adapter = _adapter(response_type)
    except TypeError:
        # Unhashable type arguments cannot be cached
        adapter = TypeAdapter(response_type)

    try:
        return adapter.validate_json(data)
    except ValidationError as e:
        raise DecodingError(
            f"Response does not match expected type: {e.error_count()} error(s)",
            data=data,
            target_type=response_type,
        ) from e


def decode(data: bytes, response_type: Any) -> Any:
    """
    Decode response bytes according to the expected result type.

    Args:
        data: Raw response body
        response_type: Expected result type of the request

    Returns:
        The decoded value

    Raises:
        DecodingError: If the bytes cannot be decoded into response_type
    """
    if response_type is bytes:
        return data

    if response_type is str:
        try:
            return data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise DecodingError(
                "Response is not valid UTF-8 text", data=data, target_type=str
            ) from e

    if response_type is None or response_type is NoneType:
        return None

    if is_optional(response_type):
        if not data:
            return None
        return decode_structured(data, response_type)

    if not data:
        raise DecodingError(
            "Empty response body for a non-optional result", data=data, target_type=response_type
        )

    logger.debug(f"Decoding {len(data)} bytes as {response_type!r}")
    return decode_structured(data, response_type)
