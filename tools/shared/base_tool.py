"""
Core Tool Infrastructure for Qwen MCP Tools

This module provides the fundamental base class for all tools:
- BaseTool: Abstract base class defining the tool interface

The BaseTool class defines the contract that tools must implement and
provides the shared behaviour: request parsing, model validation against the
live model listing, chat completion dispatch, and the error boundary that
turns every failure into text content.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Optional

from mcp.types import TextContent
from pydantic import ValidationError

from providers import (
    QwenModelProvider,
    QwenModelRegistry,
    format_model_error,
    get_model_registry,
    get_provider,
)
from providers.shared import Message, build_chat_payload

logger = logging.getLogger(__name__)


class BaseTool(ABC):
    """
    Abstract base class for all Qwen MCP tools.

    Every tool returns a single ``TextContent`` block, for success and
    failure alike. No exception raised while handling a call escapes
    ``execute``; unexpected failures are logged with a traceback and
    rendered through ``format_failure``.

    To create a new tool:
    1. Create a new class that inherits from BaseTool
    2. Implement all abstract methods
    3. Define a request model that inherits from ToolRequest (or BaseModel)
    4. Register the tool in server.py's TOOLS dictionary
    """

    def __init__(
        self,
        provider: Optional[QwenModelProvider] = None,
        model_registry: Optional[QwenModelRegistry] = None,
    ):
        self._provider = provider
        self._model_registry = model_registry
        self.name = self.get_name()
        self.description = self.get_description()

    @abstractmethod
    def get_name(self) -> str:
        """
        Return the unique name identifier for this tool.

        This name is used by MCP clients to invoke the tool and must be
        unique across all registered tools.
        """
        pass

    @abstractmethod
    def get_description(self) -> str:
        """Return the description shown to MCP clients."""
        pass

    @abstractmethod
    def get_input_schema(self) -> dict[str, Any]:
        """
        Return the JSON Schema that defines this tool's parameters.

        This schema is used by MCP clients to validate inputs before
        sending requests. It should match the tool's request model.
        """
        pass

    @abstractmethod
    def get_request_model(self):
        """Return the Pydantic model used to parse tool arguments."""
        pass

    @abstractmethod
    async def run(self, request) -> str:
        """Handle a parsed request and return the response text."""
        pass

    def get_annotations(self) -> Optional[dict[str, Any]]:
        """
        Return optional annotations for this tool.

        Annotations provide hints about tool behavior without being security-critical.
        They help MCP clients make better decisions about tool usage.
        """
        return None

    def get_provider(self) -> QwenModelProvider:
        return self._provider or get_provider()

    def get_model_registry(self) -> QwenModelRegistry:
        return self._model_registry or get_model_registry()

    def format_failure(self, error: Exception) -> str:
        """Render an unexpected failure as response text."""
        return f"Request failed: {error}"

    async def execute(self, arguments: dict[str, Any]) -> list[TextContent]:
        try:
            request = self.get_request_model()(**(arguments or {}))
        except ValidationError as exc:
            logger.warning("Invalid arguments for %s: %s", self.name, exc)
            return [self._text_response(f"Invalid arguments for {self.name}: {exc}")]

        try:
            text = await self.run(request)
        except Exception as exc:
            logger.error("Tool %s failed: %s", self.name, exc, exc_info=True)
            text = self.format_failure(exc)

        return [self._text_response(text)]

    async def check_model(self, model: str, *, is_vision_request: bool) -> Optional[str]:
        """Return guidance text when ``model`` is unknown upstream, else None."""
        validation = await self.get_model_registry().validate(model)
        if validation.valid:
            return None
        return format_model_error(model, validation, is_vision_request)

    async def complete(self, request, messages: list[Message]) -> str:
        """Send ``messages`` with the request's model and options."""
        payload = build_chat_payload(
            request.model,
            messages,
            web_search=request.web_search,
            enable_thinking=request.enable_thinking,
            thinking_budget=request.thinking_budget,
        )
        return await self.get_provider().create_chat_completion(payload)

    @staticmethod
    def _text_response(text: str) -> TextContent:
        return TextContent(type="text", text=text)
