"""
Tests for the YouTrack assignee, tag and comment models.
"""

import pytest
from pydantic import ValidationError

from youtrack_client.models.constants import EMPTY_STRING, YOUTRACK_DEFAULT_ID
from youtrack_client.models.youtrack import Assignee, Comment, SubValue


class TestAssignee:
    """Tests for the Assignee model."""

    def test_from_api_response_with_valid_data(self):
        """Test creating an Assignee from wire data."""
        assignee = Assignee.from_api_response({"value": "jdoe", "fullName": "Jane Doe"})

        assert assignee.user_name == "jdoe"
        assert assignee.full_name == "Jane Doe"
        assert assignee.display_name == "Jane Doe"

    def test_display_name_falls_back_to_login(self):
        """Without a full name the login is displayed."""
        assert Assignee(user_name="jdoe").display_name == "jdoe"

    def test_missing_login_raises(self):
        """The login is required."""
        with pytest.raises(ValidationError):
            Assignee.from_api_response({"fullName": "Jane Doe"})

    def test_to_api_dict(self):
        """Assignees render back to their wire keys."""
        assignee = Assignee(user_name="jdoe", full_name="Jane Doe")
        assert assignee.to_api_dict() == {"value": "jdoe", "fullName": "Jane Doe"}
        assert Assignee(user_name="jdoe").to_api_dict() == {"value": "jdoe"}


class TestSubValue:
    """Tests for the SubValue model."""

    def test_from_api_response_with_valid_data(self):
        """Test creating a SubValue from a tag entry."""
        tag = SubValue.from_api_response({"value": "regression", "cssClass": "c1"})

        assert tag.value == "regression"
        assert tag.css_class == "c1"

    def test_from_api_response_with_empty_data(self):
        """Empty or non-dict data yields an empty SubValue."""
        assert SubValue.from_api_response({}) == SubValue()
        assert SubValue.from_api_response("regression") == SubValue()

    def test_to_simplified_dict(self):
        """css_class is only included when set."""
        assert SubValue(value="star").to_simplified_dict() == {"value": "star"}
        assert SubValue(value="star", css_class="c2").to_simplified_dict() == {
            "value": "star",
            "css_class": "c2",
        }


class TestComment:
    """Tests for the Comment model."""

    def test_from_api_response_with_valid_data(self):
        """Test creating a Comment from valid API data."""
        data = {
            "id": "72-3",
            "author": "jdoe",
            "authorFullName": "Jane Doe",
            "issueId": "DCVR-1",
            "parentId": None,
            "deleted": False,
            "jiraId": None,
            "text": "Reproduced on 2.1",
            "shownForIssueAuthor": False,
            "created": 1262171062000,
            "updated": "1262171099000",
            "permittedGroup": "developers",
        }
        comment = Comment.from_api_response(data)

        assert comment.id == "72-3"
        assert comment.author == "jdoe"
        assert comment.author_full_name == "Jane Doe"
        assert comment.issue_id == "DCVR-1"
        assert comment.text == "Reproduced on 2.1"
        assert comment.created == 1262171062000
        assert comment.updated == 1262171099000
        assert comment.deleted is False
        assert comment.permitted_group == "developers"

    def test_from_api_response_with_empty_data(self):
        """Test creating a Comment from empty data."""
        comment = Comment.from_api_response({})

        assert comment.id == YOUTRACK_DEFAULT_ID
        assert comment.text == EMPTY_STRING
        assert comment.author == EMPTY_STRING
        assert comment.created is None

    def test_unparseable_timestamp_is_dropped(self):
        """Timestamps that are not epoch milliseconds are ignored."""
        comment = Comment.from_api_response({"id": "1", "created": "yesterday"})

        assert comment.created is None

    def test_to_simplified_dict(self):
        """The author is shown by full name when known."""
        comment = Comment(id="72-3", author="jdoe", text="Hi", created=1)

        assert comment.to_simplified_dict() == {
            "id": "72-3",
            "text": "Hi",
            "author": "jdoe",
            "created": 1,
        }
