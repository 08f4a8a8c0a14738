"""Response envelopes returned for every tool invocation."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping

from tool_agent.errors import ToolError


class ResponseType(str, Enum):
    TEXT = "text"
    HTML = "html"
    MEDIA = "media"
    MIXED = "mixed"


@dataclass(frozen=True)
class MediaItem:
    type: str
    url: str
    mime_type: str
    description: str
    metadata: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type,
            "url": self.url,
            "mimeType": self.mime_type,
            "description": self.description,
            "metadata": self.metadata,
        }


@dataclass(frozen=True)
class TextEnvelope:
    text: str
    response_type = ResponseType.TEXT

    def to_dict(self) -> dict[str, Any]:
        return {"success": True, "responseType": self.response_type.value, "data": {"text": self.text}}


@dataclass(frozen=True)
class HtmlEnvelope:
    html: str
    response_type = ResponseType.HTML

    def to_dict(self) -> dict[str, Any]:
        return {"success": True, "responseType": self.response_type.value, "data": {"html": self.html}}


@dataclass(frozen=True)
class MediaEnvelope:
    media: list[MediaItem]
    response_type = ResponseType.MEDIA

    def to_dict(self) -> dict[str, Any]:
        return {
            "success": True,
            "responseType": self.response_type.value,
            "data": {"media": [item.to_dict() for item in self.media]},
        }


@dataclass(frozen=True)
class MixedEnvelope:
    """Structured payload whose own fields become the ``data`` object."""

    payload: Mapping[str, Any]
    response_type = ResponseType.MIXED

    def to_dict(self) -> dict[str, Any]:
        return {"success": True, "responseType": self.response_type.value, "data": dict(self.payload)}


@dataclass(frozen=True)
class ErrorEnvelope:
    message: str
    code: int | str = 500
    details: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "success": False,
            "error": {
                "message": self.message,
                "code": self.code,
                "details": self.details,
            },
        }

    @classmethod
    def from_error(cls, error: ToolError) -> "ErrorEnvelope":
        return cls(message=error.message, code=error.code, details=error.details)


SuccessEnvelope = TextEnvelope | HtmlEnvelope | MediaEnvelope | MixedEnvelope
Envelope = SuccessEnvelope | ErrorEnvelope


def success_envelope(payload: Any, response_type: ResponseType) -> SuccessEnvelope:
    """
    Wrap a tool payload in the envelope variant for its response type.

    Args:
        payload: Tool result (a string for text/html, media items for media,
            a mapping for mixed)
        response_type: Envelope variant to build

    Returns:
        Success envelope

    Raises:
        TypeError: If the payload shape does not fit the response type
    """
    if response_type is ResponseType.TEXT:
        return TextEnvelope(text=str(payload))
    if response_type is ResponseType.HTML:
        return HtmlEnvelope(html=str(payload))
    if response_type is ResponseType.MEDIA:
        items = [payload] if isinstance(payload, MediaItem) else list(payload)
        return MediaEnvelope(media=items)
    if not isinstance(payload, Mapping):
        raise TypeError(f"Mixed envelope needs a mapping payload, got {type(payload).__name__}")
    return MixedEnvelope(payload=payload)
