"""Unit tests for LinearClient."""

from unittest.mock import MagicMock

import httpx
import pytest

from dailyops.standup import IssueNotFoundError, IssueTrackerError, LinearClient
from dailyops.standup.linear import ISSUE_TITLE_QUERY


@pytest.fixture
def mock_client() -> MagicMock:
    """Create a mock HTTP client."""
    return MagicMock()


@pytest.fixture
def linear(mock_client: MagicMock) -> LinearClient:
    """Create a LinearClient with mocked HTTP client."""
    client = LinearClient(api_key="lin_api_test", api_url="https://linear.test/graphql")
    client._client = mock_client
    return client


def _mock_response(body: object, status_code: int = 200) -> MagicMock:
    """Create a mock GraphQL response."""
    response = MagicMock()
    response.status_code = status_code
    response.json.return_value = body
    return response


@pytest.mark.unit
class TestResolveTitle:
    """Tests for resolve_title."""

    def test_returns_title(self, linear: LinearClient, mock_client: MagicMock) -> None:
        """Title returned on success."""
        mock_client.post.return_value = _mock_response(
            {"data": {"issue": {"title": "Fix login bug"}}}
        )

        assert linear.resolve_title("ABC-12") == "Fix login bug"

    def test_sends_query_with_ticket_variable(
        self, linear: LinearClient, mock_client: MagicMock
    ) -> None:
        """One POST with the issue query and the ticket ID as variable."""
        mock_client.post.return_value = _mock_response({"data": {"issue": {"title": "T"}}})

        linear.resolve_title("ABC-12")

        mock_client.post.assert_called_once_with(
            "https://linear.test/graphql",
            json={"query": ISSUE_TITLE_QUERY, "variables": {"id": "ABC-12"}},
        )

    def test_errors_raise_first_message(
        self, linear: LinearClient, mock_client: MagicMock
    ) -> None:
        """First error message becomes the exception message."""
        mock_client.post.return_value = _mock_response(
            {"errors": [{"message": "Entity not found"}, {"message": "second"}]}
        )

        with pytest.raises(IssueTrackerError) as exc_info:
            linear.resolve_title("ABC-12")

        assert str(exc_info.value) == "Entity not found"
        assert not isinstance(exc_info.value, IssueNotFoundError)

    def test_errors_checked_regardless_of_status(
        self, linear: LinearClient, mock_client: MagicMock
    ) -> None:
        """Errors in a 400 body are still reported by message."""
        mock_client.post.return_value = _mock_response(
            {"errors": [{"message": "Authentication required"}]}, status_code=400
        )

        with pytest.raises(IssueTrackerError, match="Authentication required"):
            linear.resolve_title("ABC-12")

    @pytest.mark.parametrize(
        "body",
        [
            {"data": {"issue": None}},
            {"data": {"issue": {"title": None}}},
            {"data": {"issue": {"title": ""}}},
            {"data": None},
            {},
        ],
    )
    def test_missing_title_is_not_found(
        self, linear: LinearClient, mock_client: MagicMock, body: dict
    ) -> None:
        """Null or empty title without errors means not found."""
        mock_client.post.return_value = _mock_response(body)

        with pytest.raises(IssueNotFoundError):
            linear.resolve_title("ABC-12")

    def test_empty_errors_array_is_ignored(
        self, linear: LinearClient, mock_client: MagicMock
    ) -> None:
        """An empty errors array is not an error."""
        mock_client.post.return_value = _mock_response(
            {"errors": [], "data": {"issue": {"title": "Works"}}}
        )

        assert linear.resolve_title("ABC-12") == "Works"

    def test_transport_error(self, linear: LinearClient, mock_client: MagicMock) -> None:
        """Network failures become IssueTrackerError."""
        mock_client.post.side_effect = httpx.ConnectError("connection refused")

        with pytest.raises(IssueTrackerError, match="request failed"):
            linear.resolve_title("ABC-12")

    def test_non_json_body(self, linear: LinearClient, mock_client: MagicMock) -> None:
        """Unparseable responses become IssueTrackerError."""
        response = MagicMock()
        response.status_code = 502
        response.text = "<html>Bad gateway</html>"
        response.json.side_effect = ValueError("not json")
        mock_client.post.return_value = response

        with pytest.raises(IssueTrackerError, match="502"):
            linear.resolve_title("ABC-12")


@pytest.mark.unit
class TestClientSetup:
    """Tests for the HTTP client configuration."""

    def test_authorization_header_is_raw_key(self) -> None:
        """The key is sent without a Bearer prefix."""
        linear = LinearClient(api_key="lin_api_test")
        try:
            assert linear.client.headers["Authorization"] == "lin_api_test"
            assert linear.client.headers["Content-Type"] == "application/json"
        finally:
            linear.close()

    def test_close_resets_client(self) -> None:
        """close() drops the client so it can be recreated."""
        linear = LinearClient(api_key="k")
        _ = linear.client
        linear.close()

        assert linear._client is None
