"""Generic parameter validation against a tool's declared schema."""

from typing import Any, Mapping

from tool_agent.errors import InvalidChoice, MissingParameter, TypeMismatch
from tool_agent.tools.dto import ParameterSchema


def validate(schema: ParameterSchema, params: Mapping[str, Any]) -> dict[str, Any]:
    """
    Check raw parameters against a schema.

    Parameters are checked in schema order and the first failure is raised.
    Values are never coerced. Absent optional parameters with a declared
    default receive it; keys not declared in the schema are dropped.

    Args:
        schema: Tool parameter schema
        params: Raw parameter map from the request body

    Returns:
        Validated parameters keyed by name

    Raises:
        MissingParameter: Required parameter is absent or null
        TypeMismatch: Value has the wrong primitive type
        InvalidChoice: Value is not one of the declared enum values
    """
    validated: dict[str, Any] = {}
    hint = schema.describe()

    for spec in schema.parameters:
        value = params.get(spec.name)

        if value is None:
            if spec.required:
                raise MissingParameter(spec.name, details=hint)
            if spec.default is not None:
                validated[spec.name] = spec.default
            continue

        if not spec.type.matches(value):
            raise TypeMismatch(spec.name, spec.type.value, details=hint)

        if spec.enum is not None and value not in spec.enum:
            raise InvalidChoice(spec.name, list(spec.enum), details=hint)

        validated[spec.name] = value

    return validated
