class YouTrackClientError(Exception):
    """Base exception for YouTrack client errors."""

    pass


class YouTrackAuthenticationError(YouTrackClientError):
    """Raised when YouTrack API authentication fails (401/403)."""

    pass


class YouTrackNotFoundError(YouTrackClientError):
    """Raised when the requested YouTrack resource does not exist (404)."""

    pass


class YouTrackApiError(YouTrackClientError):
    """Raised when a YouTrack API request fails for any other reason."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
