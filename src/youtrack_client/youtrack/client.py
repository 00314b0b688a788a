"""Base client module for YouTrack API interactions."""

from typing import Any

import requests
from requests.exceptions import HTTPError, RequestException

from ..exceptions import (
    YouTrackApiError,
    YouTrackAuthenticationError,
    YouTrackNotFoundError,
)
from ..logging_config import get_logger
from .config import YouTrackConfig

logger = get_logger("youtrack-client")

DEFAULT_TIMEOUT = 30


class YouTrackClient:
    """Base client for YouTrack API interactions."""

    def __init__(self, config: YouTrackConfig | None = None) -> None:
        """Initialize the YouTrack client with a given configuration.

        Args:
            config: YouTrack configuration object. If None, will be loaded from
                environment variables.

        Raises:
            ValueError: If configuration is missing from the environment.
        """
        if config is None:
            self.config = YouTrackConfig.from_env()
        else:
            self.config = config

        self.session = requests.Session()
        self.session.headers.update({"Accept": "application/json"})
        self.session.verify = self.config.ssl_verify

        if self.config.auth_type == "token":
            self.session.headers["Authorization"] = f"Bearer {self.config.token}"
        else:  # basic auth
            self.session.auth = (self.config.username or "", self.config.password or "")

        if not self.config.ssl_verify:
            logger.warning(
                f"SSL verification disabled for YouTrack at {self.config.base_url}"
            )

    def _url(self, path: str) -> str:
        return f"{self.config.base_url}/{path.lstrip('/')}"

    def _get_json(self, path: str, params: dict[str, Any] | None = None) -> Any:
        """Issue a GET request and return the decoded JSON body.

        Args:
            path: Path relative to the YouTrack base URL
            params: Optional query parameters

        Returns:
            The decoded JSON response

        Raises:
            YouTrackAuthenticationError: On 401/403 responses
            YouTrackNotFoundError: On 404 responses
            YouTrackApiError: On any other request failure
        """
        url = self._url(path)
        logger.debug(f"GET {url} params={params}")
        try:
            response = self.session.get(url, params=params, timeout=DEFAULT_TIMEOUT)
            response.raise_for_status()
            return response.json()
        except HTTPError as e:
            status_code = e.response.status_code if e.response is not None else None
            if status_code in (401, 403):
                logger.error(f"Authentication failed for {url} ({status_code})")
                raise YouTrackAuthenticationError(
                    f"Authentication failed for YouTrack API ({status_code}). "
                    "Token may be expired or invalid. Please verify credentials."
                ) from e
            if status_code == 404:
                raise YouTrackNotFoundError(f"Resource not found: {path}") from e
            logger.error(f"YouTrack API request to {url} failed: {e}")
            raise YouTrackApiError(
                f"YouTrack API request failed: {e}", status_code=status_code
            ) from e
        except (RequestException, ValueError) as e:
            logger.error(f"Error requesting {url}: {e}")
            raise YouTrackApiError(f"Error requesting {path}: {e}") from e
