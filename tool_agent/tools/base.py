"""Base class for tool executors."""

from abc import ABC, abstractmethod
from typing import Any

from tool_agent.envelopes import ResponseType


class BaseTool(ABC):
    """
    Abstract base class for tool executors.

    Each tool should be defined with:
    - name: Catalog name the executor is bound to
    - reads: Parameter names the executor uses (must be declared in the catalog)
    - response_type: Envelope variant for successful results
    - execute: Async method to run the tool
    """

    name: str
    reads: tuple[str, ...] = ()
    response_type: ResponseType = ResponseType.MIXED

    def refine(self, **params: Any) -> None:
        """
        Tool-specific checks run after the generic schema validation.

        Args:
            **params: Validated parameters

        Raises:
            ToolError: If a value is well-typed but unusable for this tool
        """

    @abstractmethod
    async def execute(self, credential: str | None, **params: Any) -> Any:
        """
        Execute the tool with validated parameters.

        Args:
            credential: Bearer token for tools that require one, else None
            **params: Parameters validated against the tool schema

        Returns:
            Tool payload, wrapped in an envelope of ``response_type``
        """
        pass

    def __repr__(self) -> str:
        return f"<Tool: {self.name}>"
