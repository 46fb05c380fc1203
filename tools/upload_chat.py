"""
Upload-and-chat tool - Analyze a local video or image with Qwen

The Qwen API only accepts media by URL, so the local file is first pushed to
a public temporary-hosting service (see ``uploads``) and the resulting URL is
attached to the chat request.
"""

import logging
from typing import Any, Optional

from pydantic import Field

from config import DEFAULT_MODEL, DEFAULT_THINKING_BUDGET, MAX_VIDEO_SIZE_MB
from providers import QwenAPIError
from providers.shared import Message, build_message_content
from tools.shared.base_models import COMMON_FIELD_DESCRIPTIONS, ToolRequest
from tools.shared.base_tool import BaseTool
from uploads import UploadCoordinator
from utils.file_types import VIDEO
from utils.media_utils import FileTooLargeError, UnsupportedFileTypeError, validate_media_file

logger = logging.getLogger(__name__)

UPLOAD_FIELD_DESCRIPTIONS = {
    "file_path": "Absolute path to the local video or image file to upload and analyze",
    "message": "The question or prompt about the file",
    "model": (
        "Model to use (default: qwen-max-latest). Vision models: qwen3-vl-plus, qvq-72b-preview-0310, qwen-video"
    ),
}


class UploadAndChatRequest(ToolRequest):
    """Request model for the qwen_upload_and_chat tool"""

    file_path: str = Field(..., description=UPLOAD_FIELD_DESCRIPTIONS["file_path"])
    message: str = Field(..., description=UPLOAD_FIELD_DESCRIPTIONS["message"])


class UploadAndChatTool(BaseTool):
    """Upload local media to temporary hosting, then chat about it."""

    def __init__(self, provider=None, model_registry=None, uploader: Optional[UploadCoordinator] = None):
        super().__init__(provider=provider, model_registry=model_registry)
        self._uploader = uploader

    def get_name(self) -> str:
        return "qwen_upload_and_chat"

    def get_description(self) -> str:
        return (
            "Upload a local video or image file to temporary hosting, then analyze it with Qwen. "
            "Use this when you have a local file path instead of a URL."
        )

    def get_annotations(self) -> Optional[dict[str, Any]]:
        # Publishes the file to a public host
        return {"readOnlyHint": False, "destructiveHint": False, "openWorldHint": True}

    def get_request_model(self):
        return UploadAndChatRequest

    def get_uploader(self) -> UploadCoordinator:
        if self._uploader is None:
            self._uploader = UploadCoordinator()
        return self._uploader

    def get_input_schema(self) -> dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "file_path": {"type": "string", "description": UPLOAD_FIELD_DESCRIPTIONS["file_path"]},
                "message": {"type": "string", "description": UPLOAD_FIELD_DESCRIPTIONS["message"]},
                "model": {
                    "type": "string",
                    "default": DEFAULT_MODEL,
                    "description": UPLOAD_FIELD_DESCRIPTIONS["model"],
                },
                "web_search": {
                    "type": "boolean",
                    "default": False,
                    "description": "Enable web search for additional context",
                },
                "enable_thinking": {
                    "type": "boolean",
                    "default": False,
                    "description": "Enable thinking/reasoning mode",
                },
                "thinking_budget": {
                    "type": "number",
                    "default": DEFAULT_THINKING_BUDGET,
                    "description": COMMON_FIELD_DESCRIPTIONS["thinking_budget"],
                },
            },
            "required": ["file_path", "message"],
        }

    def format_failure(self, error: Exception) -> str:
        return f"Failed: {error}"

    async def run(self, request: UploadAndChatRequest) -> str:
        try:
            kind = validate_media_file(request.file_path, MAX_VIDEO_SIZE_MB)
        except (UnsupportedFileTypeError, FileTooLargeError) as exc:
            return str(exc)

        # A file is always attached, so this is a vision request
        model_error = await self.check_model(request.model, is_vision_request=True)
        if model_error:
            return model_error

        upload = await self.get_uploader().upload(request.file_path)

        if kind == VIDEO:
            content = build_message_content(request.message, video_url=upload.url)
        else:
            content = build_message_content(request.message, image_url=upload.url)

        try:
            answer = await self.complete(request, [Message(role="user", content=content)])
        except QwenAPIError as exc:
            logger.warning("qwen_upload_and_chat upstream error %s for %s", exc.status_code, upload.url)
            return f"{exc}\n\nUploaded URL: {upload.url} ({upload.service})"

        return f"{answer}\n\n---\n*File uploaded via {upload.service}*"
