"""Utility helpers for validating local media before upload."""

import os

from utils.file_types import IMAGE_EXTENSIONS, VIDEO, VIDEO_EXTENSIONS, get_extension, get_media_kind

__all__ = [
    "FileTooLargeError",
    "MediaNotFoundError",
    "UnsupportedFileTypeError",
    "check_video_size",
    "classify_media",
    "ensure_file_exists",
    "get_file_size_mb",
    "validate_media_file",
]


class MediaNotFoundError(FileNotFoundError):
    """Raised when a local media path does not exist."""

    def __init__(self, file_path: str) -> None:
        super().__init__(f"File not found: {file_path}")
        self.file_path = file_path


class UnsupportedFileTypeError(ValueError):
    """Raised when a file extension is neither a supported video nor image."""


class FileTooLargeError(ValueError):
    """Raised when a video exceeds the upstream size ceiling."""

    def __init__(self, size_mb: float, max_size_mb: float) -> None:
        super().__init__(
            f"Video too large: {size_mb:.2f}MB. Maximum allowed for videos is {max_size_mb:g}MB."
        )
        self.size_mb = size_mb
        self.max_size_mb = max_size_mb


def classify_media(file_path: str) -> str:
    """Return ``"video"`` or ``"image"`` based on the file extension.

    Raises:
        UnsupportedFileTypeError: When the extension is not in either whitelist.
    """
    kind = get_media_kind(file_path)
    if kind is None:
        raise UnsupportedFileTypeError(
            "Unsupported file type: {ext}. Supported video formats: {videos}. Supported image formats: {images}.".format(
                ext=get_extension(file_path),
                videos=", ".join(VIDEO_EXTENSIONS),
                images=", ".join(IMAGE_EXTENSIONS),
            )
        )
    return kind


def ensure_file_exists(file_path: str) -> None:
    """Raise MediaNotFoundError unless ``file_path`` is an existing file."""
    if not os.path.isfile(file_path):
        raise MediaNotFoundError(file_path)


def get_file_size_mb(file_path: str) -> float:
    """Return the file size in megabytes (1MB = 1024 * 1024 bytes)."""
    try:
        size = os.path.getsize(file_path)
    except FileNotFoundError:
        raise MediaNotFoundError(file_path)
    return size / (1024 * 1024)


def check_video_size(file_path: str, max_size_mb: float) -> float:
    """Return the size of a video in MB, raising FileTooLargeError above the ceiling."""
    size_mb = get_file_size_mb(file_path)
    if size_mb > max_size_mb:
        raise FileTooLargeError(size_mb, max_size_mb)
    return size_mb


def validate_media_file(file_path: str, max_video_size_mb: float) -> str:
    """Classify a local media file and enforce the video size ceiling.

    Images are not size-checked; the hosting services apply their own limits.

    Returns:
        The media kind, ``"video"`` or ``"image"``.

    Raises:
        UnsupportedFileTypeError: Unknown extension.
        MediaNotFoundError: The path does not exist.
        FileTooLargeError: A video above ``max_video_size_mb``.
    """
    kind = classify_media(file_path)
    if kind == VIDEO:
        check_video_size(file_path, max_video_size_mb)
    else:
        ensure_file_exists(file_path)
    return kind
