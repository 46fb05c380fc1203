"""Uploader for litterbox.catbox.moe (1h to 72h retention)."""

from __future__ import annotations

import logging

import httpx

from config import DEFAULT_LITTERBOX_RETENTION, LITTERBOX_RETENTION, LITTERBOX_RETENTION_CHOICES

from .base import BaseUploader, MalformedResponseError

logger = logging.getLogger(__name__)

LITTERBOX_ENDPOINT = "https://litterbox.catbox.moe/resources/internals/api.php"


def resolve_retention(value: str | None) -> str:
    """Return ``value`` when Litterbox accepts it, else the default window."""

    retention = (value or "").strip().lower()
    if retention in LITTERBOX_RETENTION_CHOICES:
        return retention

    logger.warning(
        "Ignoring unsupported Litterbox retention %r (expected one of %s); using %s",
        value,
        ", ".join(LITTERBOX_RETENTION_CHOICES),
        DEFAULT_LITTERBOX_RETENTION,
    )
    return DEFAULT_LITTERBOX_RETENTION


class LitterboxUploader(BaseUploader):
    name = "litterbox.catbox.moe"
    label = "litterbox"
    display_name = "Litterbox"
    endpoint = LITTERBOX_ENDPOINT
    file_field = "fileToUpload"

    def __init__(self, retention: str | None = None) -> None:
        self.retention = resolve_retention(retention or LITTERBOX_RETENTION)

    def form_fields(self) -> dict[str, str]:
        return {"reqtype": "fileupload", "time": self.retention}

    def _parse_response(self, response: httpx.Response) -> str:
        url = response.text.strip()
        if not url.startswith("https://"):
            raise MalformedResponseError(f"Litterbox returned invalid URL: {url}", service=self.name)
        return url
