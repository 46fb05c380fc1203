"""
Utility functions for the Qwen MCP Server
"""

from .file_types import IMAGE_EXTENSIONS, VIDEO_EXTENSIONS, get_media_kind

__all__ = [
    "IMAGE_EXTENSIONS",
    "VIDEO_EXTENSIONS",
    "get_media_kind",
]
