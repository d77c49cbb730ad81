"""
Pytest configuration and shared fixtures
"""

import json

import pytest

from tests.test_helpers import create_test_config
from typed_get.config import Config


@pytest.fixture
def user_payload():
    """GitHub /user payload, trimmed"""
    return {
        "login": "kean",
        "id": 1567433,
        "node_id": "MDQ6VXNlcjE1Njc0MzM=",
        "avatar_url": "https://avatars.githubusercontent.com/u/1567433?v=4",
        "type": "User",
        "site_admin": False,
        "name": "Alexander Grebenyuk",
        "public_repos": 57,
        "followers": 1200,
    }


@pytest.fixture
def user_json(user_payload):
    """GitHub /user payload as raw bytes"""
    return json.dumps(user_payload).encode("utf-8")


@pytest.fixture
def test_config():
    """Client configuration pointing at the GitHub API"""
    return Config(create_test_config())
