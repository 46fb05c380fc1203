"""
File type definitions for the media the Qwen API can analyze.

Extensions are lowercase and include the leading dot. Order is preserved
because the lists are shown verbatim in user-facing error messages.
"""

from __future__ import annotations

import os

VIDEO_EXTENSIONS = (".mp4", ".mov", ".avi", ".mkv", ".wmv", ".flv")

IMAGE_EXTENSIONS = (".jpg", ".jpeg", ".png", ".gif", ".webp", ".bmp", ".tiff")

VIDEO = "video"
IMAGE = "image"


def get_extension(file_path: str) -> str:
    """Return the lowercase extension of ``file_path`` (``""`` when absent)."""

    return os.path.splitext(file_path)[1].lower()


def get_media_kind(file_path: str) -> str | None:
    """Return ``"video"``, ``"image"`` or None for unsupported extensions."""

    ext = get_extension(file_path)
    if ext in VIDEO_EXTENSIONS:
        return VIDEO
    if ext in IMAGE_EXTENSIONS:
        return IMAGE
    return None
