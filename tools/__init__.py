"""
Tool implementations for the Qwen MCP Server
"""

from .chat import ChatTool
from .listmodels import ListModelsTool
from .upload_chat import UploadAndChatTool

__all__ = [
    "ChatTool",
    "ListModelsTool",
    "UploadAndChatTool",
]
