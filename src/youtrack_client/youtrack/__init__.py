"""YouTrack API module.

This module provides the YouTrackFetcher facade combining the YouTrack
client with its issue operations.
"""

from .client import YouTrackClient
from .config import YouTrackConfig
from .issues import IssuesMixin


class YouTrackFetcher(IssuesMixin):
    """Facade for YouTrack API operations."""

    pass


__all__ = ["YouTrackClient", "YouTrackConfig", "YouTrackFetcher"]
