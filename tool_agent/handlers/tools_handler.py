"""HTTP handlers - FastAPI routes for tool listing and invocation."""

import json
import logging

from fastapi import FastAPI, Header, Request
from fastapi.responses import JSONResponse

from tool_agent.envelopes import ErrorEnvelope, MixedEnvelope
from tool_agent.errors import InvalidRequestBody
from tool_agent.tools.dispatcher import ToolDispatcher

logger = logging.getLogger(__name__)


REGISTRY_UNAVAILABLE = ErrorEnvelope(
    message="Failed to load tools configuration",
    code=500,
    details="Tool registry is not initialized",
)


def _error_response(error: ErrorEnvelope, status_code: int) -> JSONResponse:
    return JSONResponse(content=error.to_dict(), status_code=status_code)


def setup_routes(app: FastAPI) -> None:
    """Register HTTP routes on the FastAPI app."""

    @app.get("/health")
    async def health_check():
        return {"status": "ok"}

    @app.get("/tools")
    async def list_tools(request: Request):
        registry = getattr(request.app.state, "tool_registry", None)
        if registry is None:
            logger.error("Tool registry is not initialized")
            return _error_response(REGISTRY_UNAVAILABLE, 500)

        envelope = MixedEnvelope(
            payload={"tools": [definition.to_dict() for definition in registry.list_all()]}
        )
        return JSONResponse(content=envelope.to_dict())

    @app.post("/tools/{tool_name}")
    async def call_tool(
        request: Request,
        tool_name: str,
        authorization: str | None = Header(default=None),
    ):
        dispatcher: ToolDispatcher | None = getattr(request.app.state, "dispatcher", None)
        if dispatcher is None:
            return _error_response(REGISTRY_UNAVAILABLE, 500)

        raw = await request.body()
        try:
            params = json.loads(raw) if raw.strip() else {}
        except ValueError as e:
            error = InvalidRequestBody("Request body must be valid JSON", details=str(e))
            return _error_response(ErrorEnvelope.from_error(error), error.status_code)

        result = await dispatcher.dispatch(tool_name, params, authorization)
        return JSONResponse(content=result.to_dict(), status_code=result.status_code)
