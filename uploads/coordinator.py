"""Sequential fallback across temporary-hosting services."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator, Sequence
from contextlib import asynccontextmanager

import httpx

from config import HTTP_CONNECT_TIMEOUT, HTTP_READ_TIMEOUT, HTTP_WRITE_TIMEOUT
from utils.media_utils import ensure_file_exists

from .base import BaseUploader, UploadAttempt, UploadResult

logger = logging.getLogger(__name__)


class AllUploadsFailedError(RuntimeError):
    """Raised when every hosting service in the chain failed."""

    def __init__(self, attempts: Sequence[UploadAttempt]) -> None:
        self.attempts = list(attempts)
        errors = "\n".join(attempt.describe() for attempt in self.attempts)
        super().__init__(
            "All upload services failed. Please provide a publicly accessible URL directly using qwen_chat."
            f"\n\nErrors:\n{errors}"
        )


class UploadCoordinator:
    """Try each uploader in order and return the first public URL.

    The file is checked once up front; after that every uploader gets exactly
    one attempt. Failures are recorded per service and only surfaced when the
    whole chain is exhausted.
    """

    def __init__(
        self,
        uploaders: Sequence[BaseUploader] | None = None,
        *,
        client: httpx.AsyncClient | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        if uploaders is None:
            from uploads import default_uploaders

            uploaders = default_uploaders()
        self.uploaders = list(uploaders)
        self._client = client
        self._transport = transport
        self.last_attempts: list[UploadAttempt] = []

    @asynccontextmanager
    async def _http_client(self) -> AsyncIterator[httpx.AsyncClient]:
        if self._client is not None:
            yield self._client
            return

        timeout = httpx.Timeout(
            connect=HTTP_CONNECT_TIMEOUT,
            read=HTTP_READ_TIMEOUT,
            write=HTTP_WRITE_TIMEOUT,
            pool=HTTP_CONNECT_TIMEOUT,
        )
        async with httpx.AsyncClient(timeout=timeout, follow_redirects=True, transport=self._transport) as client:
            yield client

    async def upload(self, file_path: str) -> UploadResult:
        ensure_file_exists(file_path)

        attempts: list[UploadAttempt] = []
        self.last_attempts = attempts

        async with self._http_client() as client:
            for uploader in self.uploaders:
                logger.info("Trying %s...", uploader.name)
                try:
                    url = await uploader.upload(client, file_path)
                except Exception as exc:  # any failure moves on to the next service
                    message = str(exc) or exc.__class__.__name__
                    logger.warning("%s failed: %s", uploader.name, message)
                    attempts.append(UploadAttempt(service=uploader.name, label=uploader.label, error=message))
                    continue

                logger.info("Uploaded to %s: %s", uploader.name, url)
                attempts.append(UploadAttempt(service=uploader.name, label=uploader.label, url=url))
                return UploadResult(url=url, service=uploader.name)

        raise AllUploadsFailedError(attempts)
