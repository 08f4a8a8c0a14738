"""DTOs for tool definitions and parameter schemas."""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from tool_agent.constants import AUTH_BEARER_REQUIRED, AUTH_PUBLIC


class ParamType(str, Enum):
    """Primitive type tag a parameter value is checked against."""

    NUMBER = "number"
    INTEGER = "integer"
    STRING = "string"
    BOOLEAN = "boolean"
    ARRAY = "array"
    OBJECT = "object"

    def matches(self, value: Any) -> bool:
        # bool is a subclass of int, so it is excluded explicitly
        if self is ParamType.NUMBER:
            if isinstance(value, float):
                return math.isfinite(value)
            return isinstance(value, int) and not isinstance(value, bool)
        if self is ParamType.INTEGER:
            return isinstance(value, int) and not isinstance(value, bool)
        if self is ParamType.STRING:
            return isinstance(value, str)
        if self is ParamType.BOOLEAN:
            return isinstance(value, bool)
        if self is ParamType.ARRAY:
            return isinstance(value, list)
        return isinstance(value, dict)


class AuthRequirement(str, Enum):
    PUBLIC = AUTH_PUBLIC
    BEARER_REQUIRED = AUTH_BEARER_REQUIRED


@dataclass(frozen=True)
class ParameterSpec:
    name: str
    type: ParamType
    required: bool = False
    description: str = ""
    enum: tuple[Any, ...] | None = None
    default: Any = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"type": self.type.value, "description": self.description}
        if self.enum is not None:
            data["enum"] = list(self.enum)
        if self.default is not None:
            data["default"] = self.default
        return data


@dataclass(frozen=True)
class ParameterSchema:
    """Ordered parameter declarations of one tool."""

    parameters: tuple[ParameterSpec, ...] = ()

    @property
    def names(self) -> list[str]:
        return [spec.name for spec in self.parameters]

    def get(self, name: str) -> ParameterSpec | None:
        for spec in self.parameters:
            if spec.name == name:
                return spec
        return None

    def describe(self) -> str:
        """Short human summary, used as error details."""
        if not self.parameters:
            return "This tool takes no parameters"
        parts = [
            f"{spec.name} ({spec.type.value}{'' if spec.required else ', optional'})"
            for spec in self.parameters
        ]
        return f"Expected parameters: {', '.join(parts)}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": "object",
            "properties": {spec.name: spec.to_dict() for spec in self.parameters},
            "required": [spec.name for spec in self.parameters if spec.required],
        }


@dataclass(frozen=True)
class ToolDefinition:
    name: str
    description: str
    parameters: ParameterSchema = field(default_factory=ParameterSchema)
    auth: AuthRequirement = AuthRequirement.PUBLIC
    credits: int | float | None = None
    confirmation_required: bool | None = None

    @property
    def requires_auth(self) -> bool:
        return self.auth is AuthRequirement.BEARER_REQUIRED

    def to_dict(self) -> dict[str, Any]:
        """Public listing shape used by ``GET /tools``."""
        data: dict[str, Any] = {
            "name": self.name,
            "description": self.description,
            "parameters": self.parameters.to_dict(),
        }
        if self.confirmation_required is not None:
            data["confirmationRequired"] = self.confirmation_required
        if self.credits is not None:
            data["credits"] = self.credits
        return data
