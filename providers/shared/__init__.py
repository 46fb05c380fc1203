"""Shared data structures and helpers for the Qwen provider."""

from .messages import (
    ContentPart,
    FileUrlPart,
    ImageUrlPart,
    Message,
    MessageContent,
    TextPart,
    VideoUrlPart,
    build_chat_payload,
    build_message_content,
    serialize_content,
    serialize_content_part,
)
from .model_validation import ModelValidationResult

__all__ = [
    "ContentPart",
    "FileUrlPart",
    "ImageUrlPart",
    "Message",
    "MessageContent",
    "ModelValidationResult",
    "TextPart",
    "VideoUrlPart",
    "build_chat_payload",
    "build_message_content",
    "serialize_content",
    "serialize_content_part",
]
