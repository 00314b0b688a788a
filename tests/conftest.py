"""
Shared test fixtures.
"""

import pytest

from tests.utils.factories import YouTrackIssueFactory


@pytest.fixture
def youtrack_issue_data():
    """Raw issue data as returned by GET rest/issue/{id}."""
    return YouTrackIssueFactory.create()


@pytest.fixture
def youtrack_issue_list_data():
    """Raw issue list as returned by GET rest/issue/byproject/{project}."""
    return [
        YouTrackIssueFactory.create("DCVR-1"),
        YouTrackIssueFactory.create_minimal("DCVR-2"),
    ]
