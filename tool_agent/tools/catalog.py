"""Pydantic models for entries of the JSON tool catalog."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from tool_agent.tools.dto import (
    AuthRequirement,
    ParameterSchema,
    ParameterSpec,
    ParamType,
    ToolDefinition,
)


class PropertyConfig(BaseModel):
    """One entry of ``parameters.properties``."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    type: ParamType
    description: str = ""
    enum: list[Any] | None = None
    default: Any = None

    @model_validator(mode="after")
    def check_values_match_type(self) -> "PropertyConfig":
        if self.enum is not None:
            for value in self.enum:
                if not self.type.matches(value):
                    raise ValueError(f"enum value {value!r} is not a {self.type.value}")

        if self.default is not None:
            if not self.type.matches(self.default):
                raise ValueError(f"default {self.default!r} is not a {self.type.value}")
            if self.enum is not None and self.default not in self.enum:
                raise ValueError(f"default {self.default!r} is not one of {self.enum}")

        return self


class ParametersConfig(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    type: str = "object"
    properties: dict[str, PropertyConfig] = Field(default_factory=dict)
    required: list[str] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_required_declared(self) -> "ParametersConfig":
        undeclared = set(self.required) - set(self.properties)
        if undeclared:
            raise ValueError(f"required parameters not declared: {sorted(undeclared)}")
        return self

    def to_schema(self) -> ParameterSchema:
        return ParameterSchema(
            parameters=tuple(
                ParameterSpec(
                    name=name,
                    type=prop.type,
                    required=name in self.required,
                    description=prop.description,
                    enum=tuple(prop.enum) if prop.enum is not None else None,
                    default=prop.default,
                )
                for name, prop in self.properties.items()
            )
        )


class ToolEntryConfig(BaseModel):
    """A single tool as declared in the catalog file."""

    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)

    name: str = Field(min_length=1)
    description: str
    parameters: ParametersConfig
    auth: AuthRequirement = AuthRequirement.PUBLIC
    credits: int | float | None = None
    confirmation_required: bool | None = Field(default=None, alias="confirmationRequired")

    def to_definition(self) -> ToolDefinition:
        return ToolDefinition(
            name=self.name,
            description=self.description,
            parameters=self.parameters.to_schema(),
            auth=self.auth,
            credits=self.credits,
            confirmation_required=self.confirmation_required,
        )
