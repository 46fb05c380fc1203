"""Uploader for tmpfiles.org (60 minute retention)."""

from __future__ import annotations

import json

import httpx

from .base import BaseUploader, MalformedResponseError

TMPFILES_ENDPOINT = "https://tmpfiles.org/api/v1/upload"


def to_direct_download_url(url: str) -> str:
    """Rewrite a tmpfiles.org landing-page URL into its raw download link.

    ``https://tmpfiles.org/123/a.mp4`` becomes ``https://tmpfiles.org/dl/123/a.mp4``.
    """

    return url.replace("tmpfiles.org/", "tmpfiles.org/dl/", 1)


class TmpfilesUploader(BaseUploader):
    name = "tmpfiles.org"
    label = "tmpfiles.org"
    display_name = "tmpfiles.org"
    endpoint = TMPFILES_ENDPOINT
    file_field = "file"

    def _parse_response(self, response: httpx.Response) -> str:
        try:
            payload = response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise MalformedResponseError("tmpfiles.org returned invalid response", service=self.name) from exc

        if not isinstance(payload, dict):
            payload = {}
        data = payload.get("data")
        url = data.get("url") if isinstance(data, dict) else None
        if payload.get("status") != "success" or not isinstance(url, str) or not url:
            raise MalformedResponseError("tmpfiles.org returned invalid response", service=self.name)

        return to_direct_download_url(url)
