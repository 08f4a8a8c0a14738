"""Tool registry: catalog definitions bound to their executors."""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Any, Iterable

from pydantic import ValidationError

from tool_agent.errors import RegistryConfigError
from tool_agent.github.repositories import GitHubService
from tool_agent.tools.base import BaseTool
from tool_agent.tools.catalog import ToolEntryConfig
from tool_agent.tools.dto import ToolDefinition

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RegisteredTool:
    definition: ToolDefinition
    executor: BaseTool

    @property
    def name(self) -> str:
        return self.definition.name


def parse_definition(entry: Any, index: int) -> ToolDefinition:
    """
    Build a ToolDefinition from one catalog entry.

    Raises:
        RegistryConfigError: If the entry is malformed
    """
    try:
        config = ToolEntryConfig.model_validate(entry)
    except ValidationError as e:
        raise RegistryConfigError(f"Tool entry #{index} is invalid: {e}") from e

    return config.to_definition()


class ToolRegistry:
    """Immutable catalog of tools, built once at startup."""

    def __init__(self, tools: Iterable[RegisteredTool]):
        entries: dict[str, RegisteredTool] = {}
        for tool in tools:
            if tool.name in entries:
                raise RegistryConfigError(f"Duplicate tool name: {tool.name}")
            entries[tool.name] = tool
        self._tools = MappingProxyType(entries)

    @classmethod
    def from_config(cls, entries: Any, executors: Iterable[BaseTool]) -> "ToolRegistry":
        """
        Pair catalog entries with executors.

        Args:
            entries: Parsed catalog (list of tool entries)
            executors: Executor instances, matched by name

        Returns:
            Fully populated registry

        Raises:
            RegistryConfigError: On any malformed entry, a tool without an
                executor, or an executor reading an undeclared parameter
        """
        if not isinstance(entries, list):
            raise RegistryConfigError("Tool catalog must be a list of tool entries")

        by_name = {executor.name: executor for executor in executors}
        tools = []
        for index, entry in enumerate(entries):
            definition = parse_definition(entry, index)

            executor = by_name.get(definition.name)
            if executor is None:
                raise RegistryConfigError(f"No executor for tool '{definition.name}'")

            undeclared = set(executor.reads) - set(definition.parameters.names)
            if undeclared:
                raise RegistryConfigError(
                    f"Tool '{definition.name}' reads undeclared parameters: {sorted(undeclared)}"
                )

            tools.append(RegisteredTool(definition=definition, executor=executor))

        registry = cls(tools)
        logger.info(f"Loaded {len(registry.tool_names)} tools")
        return registry

    @classmethod
    def from_file(cls, path: Path, executors: Iterable[BaseTool]) -> "ToolRegistry":
        """Load the catalog from a JSON file."""
        try:
            entries = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            raise RegistryConfigError(f"Cannot read tool catalog {path}: {e}") from e

        return cls.from_config(entries, executors)

    def lookup(self, name: str) -> RegisteredTool | None:
        return self._tools.get(name)

    def list_all(self) -> list[ToolDefinition]:
        """Tool definitions in catalog order."""
        return [tool.definition for tool in self._tools.values()]

    @property
    def tool_names(self) -> list[str]:
        return list(self._tools.keys())

    def __len__(self) -> int:
        return len(self._tools)


def init_tool_registry(config_path: Path, github_service: GitHubService) -> ToolRegistry:
    """
    Build the registry from the catalog file and the built-in executors.

    Args:
        config_path: Path to the JSON tool catalog
        github_service: GitHub client for the repository tools

    Returns:
        Initialized ToolRegistry

    Raises:
        RegistryConfigError: If the catalog is malformed
    """
    from tool_agent.tools.calculator import create_calculator_tools
    from tool_agent.tools.list_repositories import ListUserRepositoriesTool

    executors: list[BaseTool] = [
        *create_calculator_tools(),
        ListUserRepositoriesTool(github_service),
    ]
    return ToolRegistry.from_file(config_path, executors)
