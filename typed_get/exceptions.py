"""
Custom exceptions for typed-get
"""

from typing import Any, get_origin


class TypedGetError(Exception):
    """Base exception for all typed-get errors"""

    pass


class TransportError(TypedGetError):
    """
    Raised when the HTTP exchange itself fails.

    This includes:
    - Connection failures and DNS errors
    - Timeouts
    - Protocol errors reported by the transport
    - Cancellation of an in-flight send (``cancelled`` is True)
    """

    def __init__(self, message: str, cancelled: bool = False, url: str | None = None):
        self.cancelled = cancelled
        self.url = url
        super().__init__(message)


class EncodingError(TypedGetError):
    """
    Raised when a request body cannot be serialized.

    Always raised before any network call is attempted.
    """

    def __init__(self, message: str, value_type: type | None = None):
        self.value_type = value_type
        super().__init__(message)


class DecodingError(TypedGetError):
    """
    Raised when response bytes do not match the expected result type.

    This includes:
    - Malformed UTF-8 for a text expectation
    - Malformed JSON or JSON of the wrong shape
    - An empty body for a non-optional structured expectation
    """

    def __init__(self, message: str, data: bytes, target_type: Any):
        self.data = data
        self.target_type = target_type
        super().__init__(f"{message} (target type: {_type_name(target_type)}, {len(data)} bytes)")


class StatusCodeError(TypedGetError):
    """Raised when the response status code is outside the acceptable range"""

    def __init__(self, status_code: int, data: bytes = b"", url: str | None = None):
        self.status_code = status_code
        self.data = data
        self.url = url
        super().__init__(f"Unacceptable status code: {status_code}")


class ConfigurationError(TypedGetError):
    """
    Raised when required configuration values are missing or invalid.
    """

    def __init__(self, message: str, config_key: str | None = None):
        self.config_key = config_key
        if config_key:
            super().__init__(f"Configuration error for '{config_key}': {message}")
        else:
            super().__init__(f"Configuration error: {message}")


def _type_name(target_type: Any) -> str:
    if get_origin(target_type) is None and hasattr(target_type, "__name__"):
        return target_type.__name__
    return repr(target_type)
