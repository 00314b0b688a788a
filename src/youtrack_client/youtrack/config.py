"""Configuration module for YouTrack API interactions."""

import os
from dataclasses import dataclass
from typing import Literal

from ..utils import is_env_ssl_verify


@dataclass
class YouTrackConfig:
    """YouTrack API configuration.

    Handles authentication with either a permanent token (sent as a Bearer
    token) or a username/password pair (HTTP basic auth).
    """

    url: str  # Base URL for YouTrack
    auth_type: Literal["token", "basic"]  # Authentication type
    token: str | None = None  # Permanent token
    username: str | None = None  # Login (basic auth)
    password: str | None = None  # Password (basic auth)
    ssl_verify: bool = True  # Whether to verify SSL certificates

    @classmethod
    def from_env(cls) -> "YouTrackConfig":
        """Create configuration from environment variables.

        Returns:
            YouTrackConfig with values from environment variables

        Raises:
            ValueError: If required environment variables are missing or invalid
        """
        url = os.getenv("YOUTRACK_URL")
        if not url:
            msg = "Missing required YOUTRACK_URL environment variable"
            raise ValueError(msg)

        token = os.getenv("YOUTRACK_TOKEN")
        username = os.getenv("YOUTRACK_USERNAME")
        password = os.getenv("YOUTRACK_PASSWORD")

        if token:
            auth_type = "token"
        elif username and password:
            auth_type = "basic"
        else:
            msg = (
                "YouTrack authentication requires YOUTRACK_TOKEN or "
                "YOUTRACK_USERNAME and YOUTRACK_PASSWORD"
            )
            raise ValueError(msg)

        return cls(
            url=url,
            auth_type=auth_type,
            token=token,
            username=username,
            password=password,
            ssl_verify=is_env_ssl_verify("YOUTRACK_SSL_VERIFY"),
        )

    @property
    def base_url(self) -> str:
        """The URL with any trailing slash removed."""
        return self.url.rstrip("/")
