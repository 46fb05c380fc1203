"""
List Models Tool - Display the models exposed by the Qwen API

Lists every model id returned by ``GET /v1/models`` (always a fresh call,
not the validation cache) followed by the recommended vision models.
"""

import logging
from typing import Any, Optional

from pydantic import BaseModel

from config import RECOMMENDED_VISION_MODELS
from providers import QwenAPIError
from tools.shared.base_tool import BaseTool

logger = logging.getLogger(__name__)


class ListModelsRequest(BaseModel):
    """The list-models tool takes no arguments."""


def render_model_list(model_ids: list[str]) -> str:
    model_list = "\n".join(f"- {model_id}" for model_id in model_ids)
    vision_hint = "\n".join(f"- {name}" for name in RECOMMENDED_VISION_MODELS)
    return f"Available Qwen Models:\n{model_list}\n\nFor video/image analysis, use vision models:\n{vision_hint}"


class ListModelsTool(BaseTool):
    """Tool for listing the models available upstream."""

    def get_name(self) -> str:
        return "qwen_list_models"

    def get_description(self) -> str:
        return "List all available Qwen models and their capabilities"

    def get_annotations(self) -> Optional[dict[str, Any]]:
        return {"readOnlyHint": True}

    def get_request_model(self):
        return ListModelsRequest

    def get_input_schema(self) -> dict[str, Any]:
        return {"type": "object", "properties": {}, "required": []}

    async def run(self, request: ListModelsRequest) -> str:
        try:
            model_ids = await self.get_provider().list_model_ids()
        except QwenAPIError as exc:
            return str(exc)

        logger.debug("Upstream listed %d models", len(model_ids))
        return render_model_list(model_ids)
