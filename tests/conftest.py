"""Shared fixtures for tool agent tests."""

from typing import Any, Callable

import httpx
import pytest

from tool_agent.config import Settings
from tool_agent.constants import DEFAULT_TOOLS_CONFIG_PATH
from tool_agent.github.repositories import GitHubService
from tool_agent.tools.dispatcher import ToolDispatcher
from tool_agent.tools.registry import ToolRegistry, init_tool_registry

SAMPLE_REPOSITORIES = [
    {
        "id": 1,
        "name": "test-repo",
        "full_name": "user/test-repo",
        "description": "Test repository",
        "private": False,
        "html_url": "https://github.com/user/test-repo",
        "language": "Python",
        "stargazers_count": 5,
        "forks_count": 2,
        "created_at": "2023-01-01T00:00:00Z",
        "updated_at": "2023-01-02T00:00:00Z",
        "pushed_at": "2023-01-02T12:00:00Z",
        "owner": {"login": "user"},
    },
    {
        "id": 2,
        "name": "another-repo",
        "full_name": "user/another-repo",
        "description": None,
        "private": True,
        "html_url": "https://github.com/user/another-repo",
        "language": None,
        "stargazers_count": 0,
        "forks_count": 0,
        "created_at": "2023-01-03T00:00:00Z",
        "updated_at": "2023-01-04T00:00:00Z",
        "pushed_at": "2023-01-04T12:00:00Z",
    },
]


class GitHubStub:
    """Records outbound requests and answers with a canned response."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.handler: Callable[[httpx.Request], httpx.Response] = (
            lambda request: httpx.Response(200, json=SAMPLE_REPOSITORIES)
        )

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)

    def respond(self, status_code: int, **kwargs: Any) -> None:
        self.handler = lambda request: httpx.Response(status_code, **kwargs)

    def fail(self, exc: Exception) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise exc

        self.handler = handler

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)


@pytest.fixture
def sample_repositories() -> list[dict[str, Any]]:
    return [dict(repo) for repo in SAMPLE_REPOSITORIES]


@pytest.fixture
def github_stub() -> GitHubStub:
    return GitHubStub()


@pytest.fixture
def github_service(github_stub: GitHubStub) -> GitHubService:
    client = httpx.AsyncClient(transport=github_stub.transport)
    return GitHubService(client=client, base_url="https://api.github.com", user_agent="Test-Agent/1.0")


@pytest.fixture
def registry(github_service: GitHubService) -> ToolRegistry:
    return init_tool_registry(DEFAULT_TOOLS_CONFIG_PATH, github_service)


@pytest.fixture
def dispatcher(registry: ToolRegistry) -> ToolDispatcher:
    return ToolDispatcher(registry)


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None, github_user_agent="Test-Agent/1.0")
