"""Shared primitives for temporary-hosting uploaders."""

from __future__ import annotations

import logging
import os
import uuid
from collections.abc import Mapping
from dataclasses import dataclass

import httpx

logger = logging.getLogger(__name__)

OCTET_STREAM = "application/octet-stream"


@dataclass(frozen=True)
class UploadResult:
    """Publicly fetchable URL plus the hosting service that produced it."""

    url: str
    service: str


@dataclass
class UploadAttempt:
    """Outcome of a single uploader invocation within a fallback chain."""

    service: str
    label: str
    url: str | None = None
    error: str | None = None

    @property
    def succeeded(self) -> bool:
        return self.url is not None

    def describe(self) -> str:
        return f"{self.label}: {self.error}"


class UploadError(RuntimeError):
    """Base class for failures reported by a single hosting service."""

    def __init__(self, message: str, *, service: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.service = service
        self.status_code = status_code


class UploadRejectedError(UploadError):
    """Raised when the hosting service answers with a non-2xx status."""


class MalformedResponseError(UploadError):
    """Raised when a 2xx response does not carry a usable URL."""


def _quote_disposition(value: str) -> str:
    return value.replace("\\", "\\\\").replace('"', "%22").replace("\r", "").replace("\n", "")


def build_multipart_body(
    fields: Mapping[str, str],
    file_field: str,
    filename: str,
    data: bytes,
    *,
    boundary: str | None = None,
) -> tuple[bytes, str]:
    """Encode string fields and one binary file as multipart/form-data.

    String fields are written first, in mapping order, followed by the file
    part under a generic binary content type.

    Returns:
        ``(body, content_type)`` where ``content_type`` carries the boundary.
    """

    boundary = boundary or f"----FormBoundary{uuid.uuid4().hex}"
    chunks: list[bytes] = []

    for name, value in fields.items():
        chunks.append(
            (
                f"--{boundary}\r\n"
                f'Content-Disposition: form-data; name="{_quote_disposition(name)}"\r\n'
                "\r\n"
                f"{value}\r\n"
            ).encode("utf-8")
        )

    chunks.append(
        (
            f"--{boundary}\r\n"
            f'Content-Disposition: form-data; name="{_quote_disposition(file_field)}"; '
            f'filename="{_quote_disposition(filename)}"\r\n'
            f"Content-Type: {OCTET_STREAM}\r\n"
            "\r\n"
        ).encode("utf-8")
    )
    chunks.append(data)
    chunks.append(f"\r\n--{boundary}--\r\n".encode("utf-8"))

    return b"".join(chunks), f"multipart/form-data; boundary={boundary}"


class BaseUploader:
    """POST a local file to a hosting service and return its public URL.

    Subclasses declare the endpoint and form layout and turn the service's
    response into a URL via ``_parse_response``.
    """

    name: str = "base"
    label: str = "base"
    display_name: str = "base"
    endpoint: str = ""
    file_field: str = "file"

    def form_fields(self) -> dict[str, str]:
        """Extra string fields sent ahead of the file part."""
        return {}

    async def upload(self, client: httpx.AsyncClient, file_path: str) -> str:
        with open(file_path, "rb") as handle:
            data = handle.read()

        body, content_type = build_multipart_body(
            self.form_fields(),
            self.file_field,
            os.path.basename(file_path),
            data,
        )

        logger.debug("Posting %d bytes to %s", len(body), self.endpoint)
        response = await client.post(self.endpoint, content=body, headers={"Content-Type": content_type})

        if not response.is_success:
            raise UploadRejectedError(
                f"{self.display_name} upload failed: {response.status_code}",
                service=self.name,
                status_code=response.status_code,
            )

        return self._parse_response(response)

    def _parse_response(self, response: httpx.Response) -> str:
        raise NotImplementedError("Uploaders must implement _parse_response()")
