"""Typed failures raised while dispatching and executing tools.

Every request-time failure is a ``ToolError``. The dispatcher turns it into an
error envelope using ``message``, ``code`` and ``details``; ``status_code`` is
the HTTP status of the response. Only ``RegistryConfigError`` is fatal, and it
is raised at startup, never while serving a request.
"""


class ToolError(Exception):
    """Base class for failures that are reported to the caller."""

    code: int | str = 500
    status_code: int = 500

    def __init__(
        self,
        message: str,
        details: str = "",
        code: int | str | None = None,
        status_code: int | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.details = details
        if code is not None:
            self.code = code
        if status_code is not None:
            self.status_code = status_code


# Client input errors


class ClientInputError(ToolError):
    """The request itself is unusable: never retried, shown as-is."""

    code = 400
    status_code = 400


class UnknownTool(ClientInputError):
    code = 404
    status_code = 404

    def __init__(self, tool_name: str, known_tools: list[str]):
        super().__init__(
            f"Unknown tool: {tool_name}",
            details=f"Available tools: {', '.join(known_tools)}",
        )
        self.tool_name = tool_name


class MissingCredential(ClientInputError):
    code = 401
    status_code = 401

    def __init__(self, tool_name: str):
        super().__init__(
            f"Tool '{tool_name}' requires authentication. Please provide a Bearer token.",
            details="Missing Authorization header with Bearer token",
        )


class InvalidRequestBody(ClientInputError):
    pass


class ValidationFailure(ClientInputError):
    """Raised when parameters do not satisfy a tool's schema."""

    def __init__(self, name: str, message: str, details: str = ""):
        super().__init__(message, details=details)
        self.parameter = name


class MissingParameter(ValidationFailure):
    def __init__(self, name: str, details: str = ""):
        super().__init__(name, f"Missing required parameter: {name}", details)


class TypeMismatch(ValidationFailure):
    def __init__(self, name: str, expected: str, details: str = ""):
        article = "an" if expected[0] in "aeiou" else "a"
        super().__init__(name, f"Parameter '{name}' must be {article} {expected}", details)
        self.expected = expected


class InvalidChoice(ValidationFailure):
    def __init__(self, name: str, allowed: list, details: str = ""):
        choices = ", ".join(str(value) for value in allowed)
        super().__init__(name, f"Parameter '{name}' must be one of: {choices}", details)
        self.allowed = allowed


class InvalidParameter(ValidationFailure):
    """Tool-specific refinement rejected an otherwise well-typed value."""


# Domain computation errors


class DomainComputationError(ToolError):
    """The inputs are well-formed but the computation is undefined for them."""

    status_code = 400


class DivisionByZero(DomainComputationError):
    code = "DIVISION_BY_ZERO"

    def __init__(self):
        super().__init__("Division by zero is not allowed")


class NegativeInput(DomainComputationError):
    code = "NEGATIVE_INPUT"


class NonIntegerInput(DomainComputationError):
    code = "NON_INTEGER_INPUT"


class Overflow(DomainComputationError):
    code = "OVERFLOW"


class UndefinedResult(DomainComputationError):
    code = "UNDEFINED_RESULT"


class InvalidCharacterLength(DomainComputationError):
    code = "INVALID_CHARACTER_LENGTH"

    def __init__(self, character: str):
        super().__init__(
            "Character parameter must be exactly one character",
            details=f"Received {len(character)} characters",
        )


# Upstream and transport errors


class UpstreamError(ToolError):
    """The remote API answered with a non-2xx status."""

    def __init__(self, status: int, reason: str = "", message: str | None = None):
        super().__init__(
            message or f"GitHub API error: {status} {reason}".rstrip(),
            code=status,
            status_code=status if status >= 400 else 502,
        )
        self.status = status


class InvalidCredential(UpstreamError):
    def __init__(self):
        super().__init__(401, message="Invalid or expired GitHub token")


class RateLimitedOrForbidden(UpstreamError):
    def __init__(self):
        super().__init__(
            403,
            message="GitHub API rate limit exceeded or insufficient permissions",
        )


class TransportFailure(ToolError):
    """No usable response came back from the remote API."""

    code = 500
    status_code = 500


class RegistryConfigError(Exception):
    """The tool catalog is malformed; the application must not start."""
