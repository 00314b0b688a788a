"""Module for YouTrack issue operations."""

from typing import Any
from urllib.parse import quote

from ..logging_config import get_logger
from ..models.youtrack import Issue
from .client import YouTrackClient

logger = get_logger("youtrack-client")


class IssuesMixin(YouTrackClient):
    """Mixin for YouTrack issue operations."""

    def get_issue(self, issue_id: str) -> Issue:
        """
        Get a single issue with its fields, comments and tags.

        Args:
            issue_id: The issue id (e.g. 'DCVR-12')

        Returns:
            The Issue model

        Raises:
            TypeError: If the API returns something other than an issue object
            YouTrackClientError: If the request fails
        """
        data = self._get_json(f"rest/issue/{quote(issue_id, safe='')}")

        if not isinstance(data, dict):
            msg = f"Unexpected return value type for issue {issue_id}: {type(data)}"
            logger.error(msg)
            raise TypeError(msg)

        return Issue.from_api_response(data)

    def get_issues_in_project(
        self,
        project: str,
        filter_query: str | None = None,
        max_results: int = 10,
        after: int = 0,
    ) -> list[Issue]:
        """
        Get issues of a project.

        Args:
            project: The project short name (e.g. 'DCVR')
            filter_query: Optional YouTrack search query to narrow the results
            max_results: Maximum number of issues to return
            after: Number of issues to skip, for paging

        Returns:
            List of Issue models

        Raises:
            TypeError: If the API returns something other than a list
            YouTrackClientError: If the request fails
        """
        params: dict[str, Any] = {"max": max_results, "after": after}
        if filter_query:
            params["filter"] = filter_query

        data = self._get_json(
            f"rest/issue/byproject/{quote(project, safe='')}", params=params
        )

        if not isinstance(data, list):
            msg = f"Unexpected return value type for project {project}: {type(data)}"
            logger.error(msg)
            raise TypeError(msg)

        issues = [Issue.from_api_response(item) for item in data]
        logger.debug(f"Fetched {len(issues)} issues from project {project}")
        return issues
