"""Tagged content parts and payload builders for multimodal chat requests."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal

__all__ = [
    "ContentPart",
    "FileUrlPart",
    "ImageUrlPart",
    "Message",
    "MessageContent",
    "TextPart",
    "VideoUrlPart",
    "build_chat_payload",
    "build_message_content",
    "serialize_content",
    "serialize_content_part",
]

Role = Literal["user", "assistant", "system"]
ROLES = ("user", "assistant", "system")


@dataclass(frozen=True)
class TextPart:
    text: str


@dataclass(frozen=True)
class ImageUrlPart:
    url: str


@dataclass(frozen=True)
class VideoUrlPart:
    url: str


@dataclass(frozen=True)
class FileUrlPart:
    url: str


ContentPart = TextPart | ImageUrlPart | VideoUrlPart | FileUrlPart
MessageContent = str | list[ContentPart]


@dataclass(frozen=True)
class Message:
    """One chat message; ``content`` is either plain text or ordered parts."""

    role: Role
    content: MessageContent

    def __post_init__(self) -> None:
        if self.role not in ROLES:
            raise ValueError(f"Invalid message role '{self.role}'. Expected one of: {', '.join(ROLES)}")

    def to_dict(self) -> dict[str, Any]:
        return {"role": self.role, "content": serialize_content(self.content)}


def serialize_content_part(part: ContentPart) -> dict[str, Any]:
    """Render a content part in the OpenAI-compatible wire format."""

    if isinstance(part, TextPart):
        return {"type": "text", "text": part.text}
    if isinstance(part, ImageUrlPart):
        return {"type": "image_url", "image_url": {"url": part.url}}
    if isinstance(part, VideoUrlPart):
        return {"type": "video_url", "video_url": {"url": part.url}}
    if isinstance(part, FileUrlPart):
        return {"type": "file_url", "file_url": {"url": part.url}}
    raise TypeError(f"Unsupported content part: {type(part).__name__}")


def serialize_content(content: MessageContent) -> str | list[dict[str, Any]]:
    if isinstance(content, str):
        return content
    return [serialize_content_part(part) for part in content]


def build_message_content(
    text: str,
    video_url: str | None = None,
    image_url: str | None = None,
    file_url: str | None = None,
) -> MessageContent:
    """Assemble user content with media placed ahead of the text query.

    Order is video, image, file, then text. Without any media the bare text
    is returned rather than a one-element list. Callers are responsible for
    rejecting requests that carry both a video and an image.
    """

    parts: list[ContentPart] = []

    if video_url:
        parts.append(VideoUrlPart(video_url))
    if image_url:
        parts.append(ImageUrlPart(image_url))
    if file_url:
        parts.append(FileUrlPart(file_url))

    if not parts:
        return text

    parts.append(TextPart(text))
    return parts


def build_chat_payload(
    model: str,
    messages: list[Message],
    *,
    web_search: bool = False,
    enable_thinking: bool = False,
    thinking_budget: float | None = None,
) -> dict[str, Any]:
    """Build the non-streaming chat-completions request body."""

    payload: dict[str, Any] = {
        "model": model,
        "messages": [message.to_dict() for message in messages],
        "stream": False,
    }

    if web_search:
        payload["tools"] = [{"type": "web_search"}]

    if enable_thinking:
        payload["enable_thinking"] = True
        payload["thinking_budget"] = thinking_budget

    return payload
