"""Qwen chat API provider (OpenAI-compatible endpoint)."""

from __future__ import annotations

import logging
from typing import Any, Optional

import httpx
from openai import APIStatusError, AsyncOpenAI

from config import (
    HTTP_CONNECT_TIMEOUT,
    HTTP_READ_TIMEOUT,
    HTTP_WRITE_TIMEOUT,
    QWEN_API_BASE,
    QWEN_API_TOKEN_ENV,
)
from utils.env import get_env

logger = logging.getLogger(__name__)

NO_RESPONSE_TEXT = "No response received"

# Request fields the OpenAI SDK does not model natively; sent via extra_body.
_PASSTHROUGH_FIELDS = ("tools", "enable_thinking", "thinking_budget")


class ConfigMissingError(RuntimeError):
    """Raised when the bearer token for the Qwen API is not configured."""


class QwenAPIError(RuntimeError):
    """Raised when the Qwen API answers with a non-2xx status."""

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(f"API Error ({status_code}): {body}")
        self.status_code = status_code
        self.body = body


class QwenModelProvider:
    """Thin async client for the Qwen ``/v1/models`` and ``/v1/chat/completions`` endpoints.

    The OpenAI SDK handles authentication and request encoding. SDK retries
    are disabled so each tool call makes at most one request per endpoint.
    The token is resolved on first use so a missing ``QWEN_API_TOKEN`` fails
    the tool call that needed it instead of server startup.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._api_key = api_key
        self.base_url = (base_url or QWEN_API_BASE).rstrip("/")
        self._transport = transport
        self._client: Optional[AsyncOpenAI] = None

    @property
    def api_key(self) -> str:
        key = self._api_key or get_env(QWEN_API_TOKEN_ENV)
        if not key:
            raise ConfigMissingError(f"{QWEN_API_TOKEN_ENV} environment variable is required")
        return key

    def _configure_timeouts(self) -> httpx.Timeout:
        return httpx.Timeout(
            connect=HTTP_CONNECT_TIMEOUT,
            read=HTTP_READ_TIMEOUT,
            write=HTTP_WRITE_TIMEOUT,
            pool=HTTP_CONNECT_TIMEOUT,
        )

    @property
    def client(self) -> AsyncOpenAI:
        """Lazily build the SDK client on first use."""
        if self._client is None:
            api_key = self.api_key
            http_client = httpx.AsyncClient(
                timeout=self._configure_timeouts(),
                follow_redirects=True,
                transport=self._transport,
            )
            self._client = AsyncOpenAI(
                api_key=api_key,
                base_url=f"{self.base_url}/v1",
                http_client=http_client,
                max_retries=0,
            )
            logger.debug("Qwen client initialized for %s", self.base_url)
        return self._client

    async def list_model_ids(self) -> list[str]:
        """Return model ids from ``GET /v1/models`` in listing order."""
        try:
            page = await self.client.models.list()
        except APIStatusError as exc:
            raise QwenAPIError(exc.status_code, exc.response.text) from exc

        ids: list[str] = []
        for model in getattr(page, "data", None) or []:
            model_id = getattr(model, "id", None)
            if isinstance(model_id, str) and model_id:
                ids.append(model_id)
        return ids

    async def create_chat_completion(self, payload: dict[str, Any]) -> str:
        """POST a chat payload and return the assistant's text.

        Args:
            payload: Body built by ``build_chat_payload``.

        Returns:
            ``choices[0].message.content`` or ``NO_RESPONSE_TEXT`` when absent.

        Raises:
            QwenAPIError: On a non-2xx response; carries the raw body.
        """
        extra_body = {key: payload[key] for key in _PASSTHROUGH_FIELDS if key in payload}

        logger.debug(
            "Sending chat completion: model=%s messages=%d extras=%s",
            payload["model"],
            len(payload["messages"]),
            sorted(extra_body),
        )

        try:
            completion = await self.client.chat.completions.create(
                model=payload["model"],
                messages=payload["messages"],
                stream=False,
                extra_body=extra_body or None,
            )
        except APIStatusError as exc:
            raise QwenAPIError(exc.status_code, exc.response.text) from exc

        return self._extract_content(completion)

    @staticmethod
    def _extract_content(completion: Any) -> str:
        choices = getattr(completion, "choices", None) or []
        if not choices:
            return NO_RESPONSE_TEXT
        message = getattr(choices[0], "message", None)
        content = getattr(message, "content", None)
        return content or NO_RESPONSE_TEXT

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.close()
            self._client = None
