"""Tool: List repositories of the authenticated GitHub user."""

import logging
from typing import Any

from tool_agent.constants import GITHUB_MAX_PER_PAGE, TOOL_TYPE_GITHUB
from tool_agent.errors import InvalidParameter, MissingCredential
from tool_agent.github.repositories import GitHubService
from tool_agent.tools.base import BaseTool

logger = logging.getLogger(__name__)


class ListUserRepositoriesTool(BaseTool):
    """Tool to list the caller's GitHub repositories."""

    name = "listUserRepositories"
    reads = ("per_page", "sort", "direction", "type")

    def __init__(self, github_service: GitHubService):
        self.github_service = github_service

    def refine(self, per_page: int | float | None = None, **kwargs: Any) -> None:
        if per_page is None:
            return
        if not 1 <= per_page <= GITHUB_MAX_PER_PAGE or not float(per_page).is_integer():
            raise InvalidParameter(
                "per_page",
                f"Parameter 'per_page' must be a whole number between 1 and {GITHUB_MAX_PER_PAGE}",
            )

    async def execute(
        self,
        credential: str | None,
        per_page: int | float = 10,
        sort: str = "updated",
        direction: str = "desc",
        type: str = "owner",
        **kwargs: Any,
    ) -> dict[str, Any]:
        if not credential:
            raise MissingCredential(self.name)

        logger.info(f"listUserRepositories called with per_page={per_page}, sort={sort}")

        result = await self.github_service.list_user_repositories(
            token=credential,
            per_page=int(per_page),
            sort=sort,
            direction=direction,
            type=type,
        )

        return {
            **result,
            "tool_type": TOOL_TYPE_GITHUB,
            "authenticated": True,
        }
