"""Uploader factory for temporary media hosting."""

from __future__ import annotations

from .base import (
    BaseUploader,
    MalformedResponseError,
    UploadAttempt,
    UploadError,
    UploadRejectedError,
    UploadResult,
    build_multipart_body,
)
from .coordinator import AllUploadsFailedError, UploadCoordinator
from .litterbox import LitterboxUploader, resolve_retention
from .tmpfiles import TmpfilesUploader, to_direct_download_url

_UPLOADERS: dict[str, type[BaseUploader]] = {
    "tmpfiles": TmpfilesUploader,
    "litterbox": LitterboxUploader,
}

# Fallback priority: quick drop first, extended retention second
DEFAULT_UPLOAD_ORDER = ("tmpfiles", "litterbox")


def create_uploader(name: str) -> BaseUploader:
    key = (name or "").lower()
    if key not in _UPLOADERS:
        available = ", ".join(sorted(_UPLOADERS))
        raise KeyError(f"No uploader registered for '{name}'. Available: {available}")
    return _UPLOADERS[key]()


def default_uploaders() -> list[BaseUploader]:
    return [create_uploader(name) for name in DEFAULT_UPLOAD_ORDER]


__all__ = [
    "AllUploadsFailedError",
    "BaseUploader",
    "DEFAULT_UPLOAD_ORDER",
    "LitterboxUploader",
    "MalformedResponseError",
    "TmpfilesUploader",
    "UploadAttempt",
    "UploadCoordinator",
    "UploadError",
    "UploadRejectedError",
    "UploadResult",
    "build_multipart_body",
    "create_uploader",
    "default_uploaders",
    "resolve_retention",
    "to_direct_download_url",
]
