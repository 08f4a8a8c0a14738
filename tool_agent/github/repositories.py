"""GitHub REST API client for repository listing."""

import logging
from typing import Any

import httpx

from tool_agent.constants import GITHUB_ACCEPT_HEADER
from tool_agent.errors import (
    InvalidCredential,
    RateLimitedOrForbidden,
    TransportFailure,
    UpstreamError,
)

logger = logging.getLogger(__name__)

REPOSITORY_FIELDS = (
    "id",
    "name",
    "full_name",
    "description",
    "private",
    "html_url",
    "language",
    "stargazers_count",
    "forks_count",
    "created_at",
    "updated_at",
    "pushed_at",
)


def transform_repository(repo: dict[str, Any]) -> dict[str, Any]:
    """
    Reduce a GitHub repository record to the fields exposed to agents.

    A missing description stays null; a missing language becomes "Unknown".
    """
    data = {key: repo.get(key) for key in REPOSITORY_FIELDS}
    data["description"] = repo.get("description") or None
    data["language"] = repo.get("language") or "Unknown"
    return data


class GitHubService:
    """Client for the GitHub repositories API."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        base_url: str = "https://api.github.com",
        user_agent: str = "Tool-Agent/1.0",
    ):
        """
        Initialize GitHub service.

        Args:
            client: Shared HTTP client owned by the application
            base_url: GitHub REST API root
            user_agent: User-Agent header sent with every request
        """
        self.client = client
        self.base_url = base_url.rstrip("/")
        self.user_agent = user_agent

    async def list_user_repositories(
        self,
        token: str,
        per_page: int = 10,
        sort: str = "updated",
        direction: str = "desc",
        type: str = "owner",
    ) -> dict[str, Any]:
        """
        List repositories of the authenticated user.

        One request is made; failures are not retried.

        Args:
            token: GitHub bearer token
            per_page: Page size
            sort: created, updated, pushed or full_name
            direction: asc or desc
            type: all, owner, public, private or member

        Returns:
            Dictionary with repositories, total_count and message

        Raises:
            InvalidCredential: GitHub answered 401
            RateLimitedOrForbidden: GitHub answered 403
            UpstreamError: Any other non-2xx answer
            TransportFailure: No usable response
        """
        url = f"{self.base_url}/user/repos"
        params = {
            "per_page": per_page,
            "sort": sort,
            "direction": direction,
            "type": type,
        }
        headers = {
            "Authorization": f"Bearer {token}",
            "Accept": GITHUB_ACCEPT_HEADER,
            "User-Agent": self.user_agent,
        }

        try:
            response = await self.client.get(url, params=params, headers=headers)
        except httpx.HTTPError as e:
            logger.error(f"GitHub request failed: {e}")
            raise TransportFailure(
                f"Failed to fetch repositories: {e}",
                details=type_name(e),
            ) from e

        if response.status_code == 401:
            raise InvalidCredential()
        if response.status_code == 403:
            raise RateLimitedOrForbidden()
        if not response.is_success:
            logger.warning(f"GitHub API returned {response.status_code}")
            raise UpstreamError(response.status_code, response.reason_phrase)

        try:
            repositories = response.json()
        except ValueError as e:
            raise TransportFailure(
                f"Failed to fetch repositories: {e}",
                details="GitHub returned a body that is not valid JSON",
            ) from e

        if not isinstance(repositories, list):
            raise TransportFailure(
                "Failed to fetch repositories: unexpected response shape",
                details=f"Expected a JSON array, got {type_name(repositories)}",
            )

        logger.debug(f"Retrieved {len(repositories)} repositories")

        return {
            "repositories": [transform_repository(repo) for repo in repositories],
            "total_count": len(repositories),
            "message": f"Found {len(repositories)} repositories for authenticated user",
        }


def type_name(value: Any) -> str:
    return value.__class__.__name__
