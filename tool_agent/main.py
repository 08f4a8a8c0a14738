"""FastAPI application exposing the tool-invocation endpoints."""

import logging
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from tool_agent.config import Settings, get_settings
from tool_agent.github.repositories import GitHubService
from tool_agent.handlers.tools_handler import setup_routes
from tool_agent.tools.dispatcher import ToolDispatcher
from tool_agent.tools.registry import init_tool_registry

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def create_app(
    settings: Settings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> FastAPI:
    """
    Build the application.

    Args:
        settings: Settings to use instead of the environment
        transport: HTTP transport for outbound calls (tests pass a mock)

    Returns:
        Configured FastAPI app
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Application lifespan manager.

        Builds the tool registry (a malformed catalog aborts startup) and
        owns the outbound HTTP client.
        """
        logger.info("Starting application...")

        async with httpx.AsyncClient(transport=transport) as http_client:
            github_service = GitHubService(
                client=http_client,
                base_url=settings.github_api_url,
                user_agent=settings.github_user_agent,
            )

            registry = init_tool_registry(settings.resolved_tools_config_path, github_service)
            logger.info(f"Loaded tools: {registry.tool_names}")

            app.state.tool_registry = registry
            app.state.dispatcher = ToolDispatcher(registry)

            logger.info("Application started successfully")

            yield

            logger.info("Shutting down application...")

        logger.info("Shutdown complete")

    app = FastAPI(
        title=settings.app_title,
        description="Calculator and GitHub tools behind a uniform tool-invocation contract",
        lifespan=lifespan,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )
    setup_routes(app)
    return app


def run() -> None:
    """Console entry point."""
    import uvicorn

    settings = get_settings()
    configure_logging(settings.log_level)
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
