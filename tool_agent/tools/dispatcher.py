"""Dispatcher: one tool invocation from request to envelope."""

import logging
from dataclasses import dataclass
from typing import Any

from tool_agent.constants import BEARER_SCHEME
from tool_agent.envelopes import Envelope, ErrorEnvelope, success_envelope
from tool_agent.errors import InvalidRequestBody, MissingCredential, ToolError, UnknownTool
from tool_agent.tools.registry import RegisteredTool, ToolRegistry
from tool_agent.tools.validation import validate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DispatchResult:
    status_code: int
    envelope: Envelope

    def to_dict(self) -> dict[str, Any]:
        return self.envelope.to_dict()


def extract_bearer_token(authorization: str | None) -> str | None:
    """Return the token of an ``Authorization: Bearer <token>`` header."""
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != BEARER_SCHEME:
        return None
    return token.strip() or None


class ToolDispatcher:
    """Classifies, authenticates, validates and executes tool calls."""

    def __init__(self, registry: ToolRegistry):
        self.registry = registry

    def resolve(self, tool_name: str) -> RegisteredTool:
        tool = self.registry.lookup(tool_name)
        if tool is None:
            raise UnknownTool(tool_name, self.registry.tool_names)
        return tool

    async def invoke(
        self,
        tool_name: str,
        params: Any,
        authorization: str | None = None,
    ) -> Any:
        """
        Run a tool and return its raw payload.

        Args:
            tool_name: Name from the request path
            params: Decoded request body
            authorization: Raw Authorization header, if any

        Returns:
            Tool payload

        Raises:
            ToolError: On any rejection or execution failure
        """
        return await self._run(self.resolve(tool_name), params, authorization)

    async def _run(self, tool: RegisteredTool, params: Any, authorization: str | None) -> Any:
        credential = None
        if tool.definition.requires_auth:
            credential = extract_bearer_token(authorization)
            if credential is None:
                raise MissingCredential(tool.name)

        if params is None:
            params = {}
        if not isinstance(params, dict):
            raise InvalidRequestBody(
                "Request body must be a JSON object",
                details=tool.definition.parameters.describe(),
            )

        validated = validate(tool.definition.parameters, params)
        tool.executor.refine(**validated)

        logger.info(f"Executing tool {tool.name}")
        return await tool.executor.execute(credential, **validated)

    async def dispatch(
        self,
        tool_name: str,
        params: Any,
        authorization: str | None = None,
    ) -> DispatchResult:
        """Invoke a tool and wrap the outcome in a success or error envelope."""
        try:
            tool = self.resolve(tool_name)
            payload = await self._run(tool, params, authorization)
            envelope = success_envelope(payload, tool.executor.response_type)
        except ToolError as e:
            logger.warning(f"Tool {tool_name} failed: {e.message} ({e.code})")
            return DispatchResult(status_code=e.status_code, envelope=ErrorEnvelope.from_error(e))
        except Exception as e:
            logger.exception(f"Unexpected error in tool {tool_name}")
            return DispatchResult(
                status_code=500,
                envelope=ErrorEnvelope(
                    message=str(e) or "Unknown error occurred",
                    code=500,
                    details="Tool execution failed",
                ),
            )

        return DispatchResult(status_code=200, envelope=envelope)
