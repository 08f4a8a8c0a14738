"""Application constants."""

from pathlib import Path

DEFAULT_TOOLS_CONFIG_PATH = Path(__file__).resolve().parent / "tool_definitions.json"

# Auth classes accepted in the tool catalog
AUTH_PUBLIC = "public"
AUTH_BEARER_REQUIRED = "bearer-required"

BEARER_SCHEME = "bearer"

# Payload markers so agents can tell which family of tool answered
TOOL_TYPE_CALCULATOR = "calculator"
TOOL_TYPE_GITHUB = "github"

GITHUB_ACCEPT_HEADER = "application/vnd.github.v3+json"

# GitHub caps page size at 100
GITHUB_MAX_PER_PAGE = 100

# Longer texts are shortened in the countCharacter operation label
OPERATION_TEXT_PREVIEW = 30
