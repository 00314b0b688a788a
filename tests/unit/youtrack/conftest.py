"""
Test fixtures for YouTrack client unit tests.
"""

import os
from unittest.mock import MagicMock, patch

import pytest
from requests.exceptions import HTTPError

from tests.utils.factories import AuthConfigFactory
from youtrack_client.youtrack import YouTrackFetcher
from youtrack_client.youtrack.config import YouTrackConfig


@pytest.fixture
def youtrack_config_factory():
    """
    Factory for creating YouTrackConfig instances with customizable options.

    Returns:
        Callable: Function that creates YouTrackConfig instances
    """

    def _create_config(**overrides):
        defaults = {
            "url": "https://youtrack.example.com",
            "auth_type": "token",
            "token": "perm:test-token",
        }
        config_data = {**defaults, **overrides}
        return YouTrackConfig(**config_data)

    return _create_config


@pytest.fixture
def mock_config(youtrack_config_factory):
    """Standard YouTrackConfig for tests that don't need custom configuration."""
    return youtrack_config_factory()


@pytest.fixture
def youtrack_auth_environment():
    """Environment variables for token authentication."""
    auth_config = AuthConfigFactory.create_token_config()
    youtrack_env = {
        "YOUTRACK_URL": auth_config["url"],
        "YOUTRACK_TOKEN": auth_config["token"],
    }

    with patch.dict(os.environ, youtrack_env, clear=False):
        yield youtrack_env


@pytest.fixture
def mock_response():
    """
    Factory for mocked requests responses.

    Returns:
        Callable: Function taking the JSON payload and an optional status code
    """

    def _create_response(payload=None, status_code=200):
        response = MagicMock()
        response.status_code = status_code
        response.json.return_value = payload
        return response

    return _create_response


@pytest.fixture
def youtrack_fetcher(mock_config):
    """YouTrackFetcher whose HTTP session is a mock."""
    fetcher = YouTrackFetcher(config=mock_config)
    fetcher.session = MagicMock()
    return fetcher


@pytest.fixture
def http_error_response():
    """
    Factory for mocked responses whose raise_for_status fails.

    Returns:
        Callable: Function taking the HTTP status code
    """

    def _create_response(status_code):
        response = MagicMock()
        response.status_code = status_code
        response.raise_for_status.side_effect = HTTPError(
            f"{status_code} Error", response=response
        )
        return response

    return _create_response
