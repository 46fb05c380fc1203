"""
Chat tool - Send text, video, image or document prompts to Qwen models

This tool forwards a single user message (optionally preceded by a system
prompt) to the Qwen chat-completions endpoint. Media is referenced by URL;
video and image are mutually exclusive within one request.
"""

import logging
from typing import Any, Optional

from pydantic import Field

from providers import QwenAPIError
from providers.shared import Message, build_message_content
from tools.shared.base_models import COMMON_FIELD_DESCRIPTIONS, ToolRequest
from tools.shared.base_tool import BaseTool

logger = logging.getLogger(__name__)

CHAT_FIELD_DESCRIPTIONS = {
    "message": "The text message to send to Qwen",
    "video_url": "URL of a video to analyze (MP4, MOV, AVI, MKV). Max 500MB, 10 min duration.",
    "image_url": "URL of an image to analyze (JPG, PNG, GIF, WebP) or base64 data URL",
    "file_url": "URL of a document to analyze (PDF, TXT, MD, DOC, etc.)",
    "system_prompt": "Optional system prompt to set context",
}

MIXED_MEDIA_ERROR = (
    "Error: Cannot combine video and image in the same request. "
    "They are in the same media category. Use one or the other."
)


class ChatRequest(ToolRequest):
    """Request model for the qwen_chat tool"""

    message: str = Field(..., description=CHAT_FIELD_DESCRIPTIONS["message"])
    video_url: Optional[str] = Field(None, description=CHAT_FIELD_DESCRIPTIONS["video_url"])
    image_url: Optional[str] = Field(None, description=CHAT_FIELD_DESCRIPTIONS["image_url"])
    file_url: Optional[str] = Field(None, description=CHAT_FIELD_DESCRIPTIONS["file_url"])
    system_prompt: Optional[str] = Field(None, description=CHAT_FIELD_DESCRIPTIONS["system_prompt"])


class ChatTool(BaseTool):
    """Chat with Qwen models, optionally attaching media by URL."""

    def get_name(self) -> str:
        return "qwen_chat"

    def get_description(self) -> str:
        return (
            "Chat with Qwen AI models. Supports text, video URLs, image URLs, and document URLs. "
            "Use this to analyze videos, images, or have conversations."
        )

    def get_annotations(self) -> Optional[dict[str, Any]]:
        return {"readOnlyHint": True, "openWorldHint": True}

    def get_request_model(self):
        return ChatRequest

    def get_input_schema(self) -> dict[str, Any]:
        from config import DEFAULT_MODEL, DEFAULT_THINKING_BUDGET

        return {
            "type": "object",
            "properties": {
                "message": {"type": "string", "description": CHAT_FIELD_DESCRIPTIONS["message"]},
                "model": {
                    "type": "string",
                    "default": DEFAULT_MODEL,
                    "description": COMMON_FIELD_DESCRIPTIONS["model"],
                },
                "video_url": {"type": "string", "description": CHAT_FIELD_DESCRIPTIONS["video_url"]},
                "image_url": {"type": "string", "description": CHAT_FIELD_DESCRIPTIONS["image_url"]},
                "file_url": {"type": "string", "description": CHAT_FIELD_DESCRIPTIONS["file_url"]},
                "web_search": {
                    "type": "boolean",
                    "default": False,
                    "description": COMMON_FIELD_DESCRIPTIONS["web_search"],
                },
                "enable_thinking": {
                    "type": "boolean",
                    "default": False,
                    "description": COMMON_FIELD_DESCRIPTIONS["enable_thinking"],
                },
                "thinking_budget": {
                    "type": "number",
                    "default": DEFAULT_THINKING_BUDGET,
                    "description": COMMON_FIELD_DESCRIPTIONS["thinking_budget"],
                },
                "system_prompt": {"type": "string", "description": CHAT_FIELD_DESCRIPTIONS["system_prompt"]},
            },
            "required": ["message"],
        }

    async def run(self, request: ChatRequest) -> str:
        # Video and image share a media category upstream
        if request.video_url and request.image_url:
            return MIXED_MEDIA_ERROR

        is_vision_request = bool(request.video_url or request.image_url)
        model_error = await self.check_model(request.model, is_vision_request=is_vision_request)
        if model_error:
            return model_error

        messages: list[Message] = []
        if request.system_prompt:
            messages.append(Message(role="system", content=request.system_prompt))

        messages.append(
            Message(
                role="user",
                content=build_message_content(
                    request.message,
                    video_url=request.video_url,
                    image_url=request.image_url,
                    file_url=request.file_url,
                ),
            )
        )

        try:
            return await self.complete(request, messages)
        except QwenAPIError as exc:
            logger.warning("qwen_chat upstream error %s", exc.status_code)
            return str(exc)
