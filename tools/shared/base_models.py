"""
Base models for Qwen MCP tools.

This module contains the shared Pydantic models used across the chat tools,
extracted to avoid circular imports and promote code reuse.

Key Models:
- ToolRequest: Base request model carrying model selection and chat options
"""

import logging
from typing import Any, Union

from pydantic import BaseModel, Field, field_validator

from config import DEFAULT_MODEL, DEFAULT_THINKING_BUDGET

logger = logging.getLogger(__name__)


# Shared field descriptions to avoid duplication
COMMON_FIELD_DESCRIPTIONS = {
    "model": (
        "Model to use. For video/image: qwen-max-latest (recommended), qwen3-vl-plus, qvq-72b-preview-0310, "
        "qwen-video. For text: qwen-max-latest, qwen2.5-plus, qwen2.5-turbo"
    ),
    "web_search": "Enable web search for up-to-date information",
    "enable_thinking": "Enable thinking/reasoning mode for complex problems",
    "thinking_budget": f"Token budget for thinking mode (default: {DEFAULT_THINKING_BUDGET})",
}


class ToolRequest(BaseModel):
    """
    Base request model for all Qwen MCP chat tools.

    Defines the model selection and completion options shared by
    ``qwen_chat`` and ``qwen_upload_and_chat``. Tool-specific request
    models inherit from this class.
    """

    model: str = Field(DEFAULT_MODEL, description=COMMON_FIELD_DESCRIPTIONS["model"])
    web_search: bool = Field(False, description=COMMON_FIELD_DESCRIPTIONS["web_search"])
    enable_thinking: bool = Field(False, description=COMMON_FIELD_DESCRIPTIONS["enable_thinking"])
    thinking_budget: Union[int, float] = Field(
        DEFAULT_THINKING_BUDGET, description=COMMON_FIELD_DESCRIPTIONS["thinking_budget"]
    )

    @field_validator("model", "web_search", "enable_thinking", "thinking_budget", mode="before")
    @classmethod
    def use_default_for_null(cls, v: Any, info):
        """Treat explicit nulls from MCP clients as "use the default"."""
        if v is None:
            logger.debug(f"Field '{info.field_name}' received null, using default")
            return cls.model_fields[info.field_name].default
        return v
