"""
Shared test utilities and mock factories

This module provides reusable mock factories and helpers to reduce code duplication
across test files.
"""

from dataclasses import dataclass
from datetime import timedelta
from unittest.mock import Mock

import requests
from requests.structures import CaseInsensitiveDict


@dataclass
class User:
    """Subset of a GitHub user"""

    login: str
    id: int | None = None


def make_raw_response(
    prepared, status_code=200, content=b"", headers=None, elapsed_ms=12, history=None
):
    """
    Build a real requests.Response for a prepared request

    Args:
        prepared: The PreparedRequest the response answers
        status_code: HTTP status code (default: 200)
        content: Raw body bytes (default: empty)
        headers: Response headers (optional)
        elapsed_ms: Elapsed time in milliseconds (default: 12)
        history: Redirect responses preceding this one (optional)

    Returns:
        requests.Response with content, headers, request and timing set
    """
    response = requests.Response()
    response.status_code = status_code
    response._content = content
    response.headers = CaseInsensitiveDict(headers or {})
    response.url = prepared.url
    response.request = prepared
    response.elapsed = timedelta(milliseconds=elapsed_ms)
    response.history = history or []
    return response


def create_mock_http_client(status_code=200, content=b"", headers=None):
    """
    Factory for creating mock HTTP transports

    Every send() answers the prepared request it was given, so the envelope's
    request and response always belong together.

    Args:
        status_code: HTTP status code to return (default: 200)
        content: Response body bytes (default: empty)
        headers: Response headers (optional)

    Returns:
        Mock HttpClient with a configured send()
    """
    mock_client = Mock()
    mock_client.send.side_effect = lambda prepared, **kwargs: make_raw_response(
        prepared, status_code=status_code, content=content, headers=headers
    )
    return mock_client


def create_test_config(**overrides):
    """
    Factory for creating test configuration dictionaries

    Args:
        **overrides: Config values to override defaults

    Returns:
        Configuration dictionary with sensible test defaults
    """
    config = {
        "client": {
            "base_url": "https://api.github.com",
            "timeouts": {"request": 5},
            "headers": {
                "Accept": "application/json",
                "User-Agent": "typed-get-tests/1.0",
            },
            "validation": {"enabled": True, "acceptable_status": [200, 299]},
            "encoding": {"content_type": "application/json"},
        },
        "logging": {
            "level": "WARNING",
            "format": "%(name)s - %(levelname)s - %(message)s",
            "datefmt": "%H:%M:%S",
        },
    }

    # Apply overrides using nested dict merge
    _deep_merge(config, overrides)

    return config


def _deep_merge(base_dict, override_dict):
    """Recursively merge override_dict into base_dict"""
    for key, value in override_dict.items():
        if key in base_dict and isinstance(base_dict[key], dict) and isinstance(value, dict):
            _deep_merge(base_dict[key], value)
        else:
            base_dict[key] = value
