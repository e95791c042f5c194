"""LinearClient - Resolves ticket titles through the Linear GraphQL API."""

from __future__ import annotations

import logging
from typing import Any, Protocol

import httpx

from dailyops.config import LINEAR_API_URL
from dailyops.logging import sanitize_for_log
from dailyops.standup.exceptions import IssueNotFoundError, IssueTrackerError

logger = logging.getLogger("dailyops.standup.linear")

ISSUE_TITLE_QUERY = "query issue($id: String!) { issue(id: $id) { title } }"


class IssueTrackerClient(Protocol):
    """Anything that can turn a ticket ID into its title."""

    def resolve_title(self, ticket_id: str) -> str: ...


class LinearClient:
    """Client for the Linear GraphQL API.

    Sends one request per ticket, with no retries.
    """

    def __init__(self, api_key: str, api_url: str = LINEAR_API_URL) -> None:
        """Initialize Linear client.

        Args:
            api_key: Linear personal API key, sent as-is in the
                Authorization header.
            api_url: GraphQL endpoint (for testing).
        """
        self.api_key = api_key
        self.api_url = api_url
        self._client: httpx.Client | None = None

    @property
    def client(self) -> httpx.Client:
        """Get or create HTTP client for the GraphQL API."""
        if self._client is None:
            self._client = httpx.Client(
                headers={
                    "Authorization": self.api_key,
                    "Content-Type": "application/json",
                },
            )
        return self._client

    def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            self._client.close()
            self._client = None

    def __enter__(self) -> LinearClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _graphql(self, query: str, variables: dict[str, Any]) -> dict[str, Any]:
        """Execute a GraphQL query and return the decoded body.

        The status code is not checked: Linear reports failures in the
        `errors` array, which callers inspect.

        Raises:
            IssueTrackerError: If the request fails or the body is not JSON.
        """
        try:
            response = self.client.post(
                self.api_url,
                json={"query": query, "variables": variables},
            )
        except httpx.HTTPError as e:
            logger.error("Linear request failed: %s", sanitize_for_log(str(e)))
            raise IssueTrackerError(f"request failed: {e}") from e

        try:
            body = response.json()
        except ValueError as e:
            logger.error(
                "Linear returned non-JSON response (%d): %s",
                response.status_code,
                sanitize_for_log(response.text[:500]),
            )
            raise IssueTrackerError(
                f"unexpected response ({response.status_code})"
            ) from e

        if not isinstance(body, dict):
            raise IssueTrackerError(f"unexpected response ({response.status_code})")
        return body

    def resolve_title(self, ticket_id: str) -> str:
        """Look up the title of a ticket.

        Args:
            ticket_id: Ticket reference such as "ABC-123".

        Returns:
            The ticket title.

        Raises:
            IssueTrackerError: If the API reports an error; the message is
                the first error's message.
            IssueNotFoundError: If the response has no usable title.
        """
        logger.debug("Resolving title for %s", ticket_id)
        body = self._graphql(ISSUE_TITLE_QUERY, {"id": ticket_id})

        errors = body.get("errors")
        if errors:
            first = errors[0]
            message = first.get("message") if isinstance(first, dict) else str(first)
            logger.info("Linear error for %s: %s", ticket_id, message)
            raise IssueTrackerError(message or "unknown error")

        issue = (body.get("data") or {}).get("issue") or {}
        title = issue.get("title")
        if not title:
            logger.info("No title returned for %s", ticket_id)
            raise IssueNotFoundError(f"Ticket {ticket_id} not found")

        logger.info("Resolved %s", ticket_id)
        return str(title)
